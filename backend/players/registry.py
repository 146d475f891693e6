"""
Registry for player strategies.

Maps the names accepted on the command line to player classes.
"""

from typing import Dict, List, Type

from .base import Player
from .random_player import RandomPlayer
from .scripted_player import ScriptedPlayer


PLAYER_CLASSES: Dict[str, Type[Player]] = {
    "random": RandomPlayer,
    "scripted": ScriptedPlayer,
}

AVAILABLE_PLAYERS = list(PLAYER_CLASSES.keys())


def get_player_class(name: str) -> Type[Player]:
    """
    Look up a player class by name.

    Raises:
        ValueError: if the name is not registered
    """
    try:
        return PLAYER_CLASSES[name.lower()]
    except KeyError:
        raise ValueError(
            f"Unknown player '{name}'. Available: {', '.join(AVAILABLE_PLAYERS)}"
        ) from None


def list_players() -> List[str]:
    return list(AVAILABLE_PLAYERS)
