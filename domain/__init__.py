"""
Domain entities for the terminal snake game.

This module contains the core game entities that are independent of
the terminal they are drawn on.
"""

from .constants import (
    Direction,
    GameDifficulty,
    Key,
    SnakeState,
    DIFFICULTY_SETTINGS,
)
from .exceptions import SnakeGameError, TerminalTooSmallError, NoFreeCellError
from .geometry import Coordinates, BoxDimensions, BoxSymbols
from .snake import Snake
from .fruit import Fruit
from .game_state import GameState

__all__ = [
    'Direction', 'GameDifficulty', 'Key', 'SnakeState',
    'DIFFICULTY_SETTINGS',
    'SnakeGameError', 'TerminalTooSmallError', 'NoFreeCellError',
    'Coordinates', 'BoxDimensions', 'BoxSymbols',
    'Snake',
    'Fruit',
    'GameState',
]
