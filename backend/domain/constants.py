"""
Game constants for the Snake engine.
"""

from enum import IntEnum
from typing import NamedTuple


class Coordinate(NamedTuple):
    """A grid cell. (0, 0) is the top-left corner, y grows downward."""
    x: int
    y: int


class Heading(IntEnum):
    """Movement directions, ordered clockwise."""
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def opposite(self) -> "Heading":
        return Heading((self + 2) % 4)

    @property
    def delta(self) -> Coordinate:
        return HEADING_DELTAS[self]


# Movement directions
NORTH = Heading.NORTH
EAST = Heading.EAST
SOUTH = Heading.SOUTH
WEST = Heading.WEST
VALID_HEADINGS = set(Heading)

HEADING_DELTAS = {
    Heading.NORTH: Coordinate(0, -1),
    Heading.EAST:  Coordinate(1, 0),
    Heading.SOUTH: Coordinate(0, 1),
    Heading.WEST:  Coordinate(-1, 0),
}

# Board settings
DEFAULT_GRID_SIZE = 20


def default_start_position(grid_size: int) -> Coordinate:
    """
    Center of the grid. The grid starts at (0, 0), hence the -1, which puts
    the snake just inside the top-left quadrant on even sizes.
    """
    center = max(grid_size // 2 - 1, 0)
    return Coordinate(center, center)
