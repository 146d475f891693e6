"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import Any, Dict, List, Optional, Tuple

from .constants import Coordinate, Heading


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: how many updates the host has run in this session
        grid_size: edge length of the square board
        snake_body: list of (x, y) from the tail to the head (last element)
        heading: current Heading, or None before the first input
        score: food eaten so far
        food: (x, y) position of the food, None once the snake fills the board
    """

    def __init__(
        self,
        tick: int,
        grid_size: int,
        snake_body: List[Tuple[int, int]],
        heading: Optional[Heading],
        score: int,
        food: Optional[Tuple[int, int]]
    ):
        self.tick = tick
        self.grid_size = grid_size
        self.snake_body = [Coordinate(*cell) for cell in snake_body]
        self.heading = heading
        self.score = score
        self.food = Coordinate(*food) if food is not None else None

    @property
    def head(self) -> Coordinate:
        return self.snake_body[-1]

    def print_board(self) -> str:
        """
        Returns a string representation of the board with:
        . = empty space
        F = food
        T = snake body
        H = snake head
        (0,0) is at the top left, x-axis labels at the bottom.
        """
        # Create empty board
        board = [['.' for _ in range(self.grid_size)] for _ in range(self.grid_size)]

        if self.food is not None:
            fx, fy = self.food
            board[fy][fx] = 'F'

        for x, y in self.snake_body[:-1]:
            board[y][x] = 'T'
        hx, hy = self.head
        board[hy][hx] = 'H'

        result = [f"{y:2d} {' '.join(row)}" for y, row in enumerate(board)]
        result.append("   " + " ".join(str(x % 10) for x in range(self.grid_size)))

        return "\n".join(result)

    def to_dict(self) -> Dict[str, Any]:
        """JSON-friendly representation (tuples become lists)."""
        return {
            "tick": self.tick,
            "grid_size": self.grid_size,
            "snake_body": [list(cell) for cell in self.snake_body],
            "heading": self.heading.name if self.heading is not None else None,
            "score": self.score,
            "food": list(self.food) if self.food is not None else None,
        }

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, food={self.food}, "
            f"length={len(self.snake_body)}, score={self.score}>"
        )
