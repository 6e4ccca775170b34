"""
Player implementations for the terminal snake game.

This module contains the player abstraction and the implementations
that decide which key the game acts on each tick.
"""

from .base import Player
from .keyboard_player import KeyboardPlayer
from .random_player import RandomPlayer

__all__ = [
    'Player',
    'KeyboardPlayer',
    'RandomPlayer',
]
