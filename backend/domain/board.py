"""
Board entity - enforces the game rules and drives the snake each tick.
"""

import logging
import random
from typing import Optional, Tuple

from .constants import Coordinate, Heading, DEFAULT_GRID_SIZE, default_start_position
from .errors import BoardFullError
from .game_state import GameState
from .snake import Snake

logger = logging.getLogger(__name__)


class Board:
    """
    Manages:
      - Grid (grid_size x grid_size)
      - The snake
      - The food cell
      - Direction legality
      - The per-tick update / reset protocol

    A losing move is reported by update() returning False; the board keeps no
    game-over flag of its own. The host decides when to call reset().
    """

    def __init__(
        self,
        grid_size: int = DEFAULT_GRID_SIZE,
        start_position: Optional[Tuple[int, int]] = None,
        rng: Optional[random.Random] = None
    ):
        # A 1x1 grid has no room for food next to the snake.
        if not isinstance(grid_size, int) or grid_size < 2:
            raise ValueError(f"Grid size must be an integer of at least 2, got {grid_size!r}.")
        self._grid_size = grid_size

        if start_position is None:
            start_position = default_start_position(grid_size)
        start_position = Coordinate(*start_position)
        if not self.is_within_bounds(start_position):
            raise ValueError(f"Start position {tuple(start_position)} is outside a {grid_size}x{grid_size} grid.")
        self._initial_snake_position = start_position

        # Food placement only needs randrange(); tests pass a seeded Random.
        self._rng = rng if rng is not None else random.Random()

        self.snake = Snake(start_position)
        self.food: Optional[Coordinate] = None
        self.spawn_food()

    @property
    def grid_size(self) -> int:
        return self._grid_size

    @property
    def initial_snake_position(self) -> Coordinate:
        return self._initial_snake_position

    @property
    def score(self) -> int:
        return self.snake.score

    def is_within_bounds(self, cell: Tuple[int, int]) -> bool:
        x, y = cell
        return 0 <= x < self._grid_size and 0 <= y < self._grid_size

    def will_collide(self, cell: Tuple[int, int]) -> bool:
        """Check whether moving the head into cell hits a wall or the body."""
        return not self.is_within_bounds(cell) or self.snake.occupies(cell)

    def spawn_food(self) -> Coordinate:
        """
        Move the food to a random cell not occupied by the snake.

        Cells are drawn uniformly until a free one turns up. When the snake
        covers every cell there is nowhere to put it: food is set to None and
        BoardFullError is raised.
        """
        if self.snake.length >= self._grid_size * self._grid_size:
            self.food = None
            raise BoardFullError(
                f"Snake of length {self.snake.length} fills the {self._grid_size}x{self._grid_size} grid."
            )

        attempts = 0
        while True:
            attempts += 1
            cell = Coordinate(
                self._rng.randrange(self._grid_size),
                self._rng.randrange(self._grid_size)
            )
            if not self.will_collide(cell):
                self.food = cell
                logger.debug("Spawned food at %s after %d draw(s)", tuple(cell), attempts)
                return cell

    def place_food(self, cell: Tuple[int, int]) -> None:
        """Put the food on a specific cell."""
        cell = Coordinate(*cell)
        if not self.is_within_bounds(cell):
            raise ValueError(f"Food out of bounds at {tuple(cell)}.")
        if self.snake.occupies(cell):
            raise ValueError(f"Food cannot be placed on the snake at {tuple(cell)}.")
        self.food = cell

    def set_direction(self, heading: Heading) -> bool:
        """
        Change the snake's heading unless it would reverse into itself.

        A single-segment snake may turn anywhere. A longer snake ignores an
        exact 180 degree reversal. Returns True when the heading was applied.
        """
        if not isinstance(heading, Heading):
            raise TypeError(f"Expected a Heading, got {heading!r}.")

        current = self.snake.heading
        if self.snake.length > 1 and current is not None and heading == current.opposite():
            logger.debug("Ignoring reversal from %s to %s", current.name, heading.name)
            return False

        self.snake.set_heading(heading)
        return True

    def update(self) -> bool:
        """
        Execute one tick:
          1) If the snake has no heading yet, wait
          2) Compute the next head cell
          3) Stop on a wall or body collision (returns False, nothing moves)
          4) Move, growing when the food is eaten
          5) Respawn eaten food on a free cell

        Raises BoardFullError when the snake has just filled the grid. The
        winning move has already been applied by then and food is None.
        """
        if self.snake.heading is None:
            return True

        next_head = self.snake.get_next_head_location()
        if self.will_collide(next_head):
            logger.debug("Collision at %s with score %d", tuple(next_head), self.score)
            return False

        grew = next_head == self.food
        self.snake.move(grew)

        # Respawn after moving so the new food can't land on the new head.
        if grew:
            self.spawn_food()

        return True

    def reset(self) -> None:
        """Start a fresh session: new snake at the initial position, new food."""
        self.snake = Snake(self._initial_snake_position)
        self.spawn_food()
        logger.debug("Board reset, snake at %s", tuple(self._initial_snake_position))

    def get_state(self, tick: int = 0) -> GameState:
        """
        Return a snapshot of the current board as a GameState.
        """
        return GameState(
            tick=tick,
            grid_size=self._grid_size,
            snake_body=list(self.snake.body),
            heading=self.snake.heading,
            score=self.snake.score,
            food=self.food
        )

    def __repr__(self):
        return (
            f"<Board grid_size={self._grid_size}, food={self.food}, "
            f"snake_length={self.snake.length}, heading={self.snake.heading!r}>"
        )
