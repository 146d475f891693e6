"""
Scripted player - replays a fixed list of headings, one per tick.
"""

from typing import Iterable, Optional

from domain.constants import Heading
from domain.game_state import GameState
from .base import Player

HEADING_LETTERS = {
    'N': Heading.NORTH,
    'E': Heading.EAST,
    'S': Heading.SOUTH,
    'W': Heading.WEST,
}


class ScriptedPlayer(Player):
    """
    Returns the queued headings in order, then None (keep going straight).
    """

    def __init__(self, headings: Iterable[Heading]):
        self.headings = list(headings)
        self.position = 0

    @classmethod
    def from_string(cls, moves: str) -> "ScriptedPlayer":
        """Build a player from a string like "NEES" (whitespace ignored)."""
        headings = []
        for letter in moves.upper():
            if letter.isspace():
                continue
            if letter not in HEADING_LETTERS:
                raise ValueError(f"Unknown heading {letter!r}; expected one of N, E, S, W.")
            headings.append(HEADING_LETTERS[letter])
        return cls(headings)

    def get_heading(self, game_state: GameState) -> Optional[Heading]:
        if self.position >= len(self.headings):
            return None
        heading = self.headings[self.position]
        self.position += 1
        return heading
