"""
Base player interface for the game engine.
"""

from typing import Optional

from domain.constants import Heading
from domain.game_state import GameState


class Player:
    """
    Base class/interface for player logic.

    A player looks at a snapshot before each tick and decides which way the
    snake should go next. The host passes the answer to Board.set_direction().
    """

    def get_heading(self, game_state: GameState) -> Optional[Heading]:
        """
        Return a heading for the next tick given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A Heading, or None to keep the current one
        """
        raise NotImplementedError
