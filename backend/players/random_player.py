"""
Random player implementation - picks random safe headings.
"""

import random
from typing import List, Optional

from domain.constants import Coordinate, Heading, VALID_HEADINGS
from domain.game_state import GameState
from .base import Player


class RandomPlayer(Player):
    """
    A random AI that picks a heading that avoids walls and self-collisions.
    """

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def get_heading(self, game_state: GameState) -> Heading:
        body = game_state.snake_body
        head_x, head_y = game_state.head
        size = game_state.grid_size

        valid_headings: List[Heading] = []
        for heading in sorted(VALID_HEADINGS):
            dx, dy = heading.delta
            cell = Coordinate(head_x + dx, head_y + dy)

            # Check wall collisions
            if not (0 <= cell.x < size and 0 <= cell.y < size):
                continue

            # Check self collisions. The board checks before the tail moves,
            # so the tail cell counts too.
            if cell in body:
                continue

            valid_headings.append(heading)

        # If no valid headings, just return a random one (we'll die anyway)
        if not valid_headings:
            return self.rng.choice(sorted(VALID_HEADINGS))

        return self.rng.choice(valid_headings)
