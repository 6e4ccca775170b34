"""
Errors raised by the game engine.
"""

from typing import Optional


class SnakeGameError(Exception):
    """Base class for game errors."""


class TerminalTooSmallError(SnakeGameError):
    """The terminal window is smaller than the game window."""

    def __init__(self, width: int, height: int, min_width: int, min_height: int):
        self.width = width
        self.height = height
        self.min_width = min_width
        self.min_height = min_height
        super().__init__(
            f"Terminal window is {width}x{height}, the game needs at least {min_width}x{min_height}."
        )


class NoFreeCellError(SnakeGameError):
    """No unoccupied cell could be found in the playable area."""

    def __init__(self, attempts: Optional[int] = None):
        self.attempts = attempts
        message = "Could not find a free cell to spawn a fruit"
        if attempts is not None:
            message += f" after {attempts} attempts"
        super().__init__(message + ".")
