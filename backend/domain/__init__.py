"""
Domain entities for the Snake game engine.

This module contains the core game entities. They know nothing about
windows, terminals, timing or rendering; a host drives them with
set_direction() and update() calls.
"""

from .constants import (
    Coordinate, Heading, NORTH, EAST, SOUTH, WEST, VALID_HEADINGS,
    DEFAULT_GRID_SIZE, default_start_position,
)
from .errors import SnakeGameError, HeadingNotSetError, BoardFullError
from .snake import Snake
from .game_state import GameState
from .board import Board

__all__ = [
    'Coordinate', 'Heading', 'NORTH', 'EAST', 'SOUTH', 'WEST', 'VALID_HEADINGS',
    'DEFAULT_GRID_SIZE', 'default_start_position',
    'SnakeGameError', 'HeadingNotSetError', 'BoardFullError',
    'Snake',
    'GameState',
    'Board',
]
