"""
Snake entity for the game engine.
"""

from collections import deque
from typing import Optional, Tuple

from .constants import Coordinate, Heading
from .errors import HeadingNotSetError


class Snake:
    """
    Represents the snake on the board.

    Attributes:
        body: deque of cells from the tail (oldest, index 0) to the head (last)
        heading: current direction of travel, None until the host sets one

    The snake knows nothing about the board bounds or the food; Board checks
    every move before calling move().
    """

    def __init__(self, start: Tuple[int, int]):
        self._body = deque([Coordinate(*start)])
        self.heading: Optional[Heading] = None

    @property
    def head(self) -> Coordinate:
        """Return the head position (last element)."""
        return self._body[-1]

    @property
    def body(self) -> Tuple[Coordinate, ...]:
        """Read-only view of the segments, tail first, head last."""
        return tuple(self._body)

    @property
    def length(self) -> int:
        return len(self._body)

    @property
    def score(self) -> int:
        """Food eaten so far. The starting segment doesn't count."""
        return len(self._body) - 1

    def __len__(self) -> int:
        return len(self._body)

    def get_next_head_location(self) -> Coordinate:
        """
        Return the cell the head would move into on the next tick.

        The result may lie outside the grid (including negative coordinates);
        bounds are checked by the board.
        """
        if self.heading is None:
            raise HeadingNotSetError("Snake has no heading yet.")
        dx, dy = self.heading.delta
        return Coordinate(self.head.x + dx, self.head.y + dy)

    def set_heading(self, heading: Heading) -> None:
        self.heading = heading

    def move(self, grew: bool = False) -> None:
        """
        Advance one cell in the current heading.

        When grew is False the tail segment is dropped so the length stays
        the same; otherwise the snake gets one segment longer. No collision
        or bounds checking happens here.
        """
        self._body.append(self.get_next_head_location())
        if not grew:
            self._body.popleft()

    def occupies(self, cell: Tuple[int, int]) -> bool:
        """Check whether any body segment sits on the given cell."""
        return cell in self._body

    def __repr__(self):
        return f"<Snake head={tuple(self.head)}, length={self.length}, heading={self.heading!r}>"
