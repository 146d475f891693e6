"""
Exceptions raised by the game engine.

Losing a game is not an error: Board.update() reports it by returning False.
These cover states a host has to handle explicitly.
"""


class SnakeGameError(Exception):
    """Base class for game engine errors."""


class HeadingNotSetError(SnakeGameError):
    """The snake was asked for its next cell before it was given a heading."""


class BoardFullError(SnakeGameError):
    """No free cell is left for food: the snake covers the whole grid."""
