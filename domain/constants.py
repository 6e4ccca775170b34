"""
Game constants for the terminal snake game.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet

from .geometry import BoxDimensions, Coordinates


class Direction(str, Enum):
    """Movement directions. NONE means the snake has not started moving."""

    NONE = "NONE"
    UP = "UP"
    DOWN = "DOWN"
    LEFT = "LEFT"
    RIGHT = "RIGHT"

    def is_opposite(self, other: "Direction") -> bool:
        return OPPOSITES.get(self) == other


OPPOSITES: Dict[Direction, Direction] = {
    Direction.UP: Direction.DOWN,
    Direction.DOWN: Direction.UP,
    Direction.LEFT: Direction.RIGHT,
    Direction.RIGHT: Direction.LEFT,
}


class SnakeState(Enum):
    """What happened to the snake during the current tick."""

    NORMAL = "normal"
    CHOMPING = "chomping"
    DEAD = "dead"


class GameDifficulty(str, Enum):
    EASY = "easy"
    MEDIUM = "medium"
    HARD = "hard"

    @property
    def label(self) -> str:
        return self.value.capitalize()

    @classmethod
    def parse(cls, value: str) -> "GameDifficulty":
        """
        Look up a difficulty by name, case-insensitively.

        Raises:
            ValueError: if `value` names no difficulty
        """
        try:
            return cls(value.strip().lower())
        except ValueError:
            choices = ", ".join(d.value for d in cls)
            raise ValueError(f"Unknown difficulty '{value}'. Choose one of: {choices}") from None


@dataclass(frozen=True)
class DifficultySettings:
    auto_move_delay_max: int
    auto_move_delay_min: int
    prevent_boundary_collisions: bool
    prevent_turnbacks: bool


# Delays are in milliseconds
DIFFICULTY_SETTINGS: Dict[GameDifficulty, DifficultySettings] = {
    GameDifficulty.EASY: DifficultySettings(1500, 250, True, True),
    GameDifficulty.MEDIUM: DifficultySettings(1000, 80, False, True),
    GameDifficulty.HARD: DifficultySettings(500, 50, False, False),
}


class Key(Enum):
    """Keys the game reacts to. OTHER stands for any key without a binding."""

    NONE = "none"
    UP_ARROW = "up_arrow"
    DOWN_ARROW = "down_arrow"
    LEFT_ARROW = "left_arrow"
    RIGHT_ARROW = "right_arrow"
    W = "w"
    A = "a"
    S = "s"
    D = "d"
    P = "p"
    ENTER = "enter"
    ESCAPE = "escape"
    OTHER = "other"


KEY_DIRECTIONS: Dict[Key, Direction] = {
    Key.W: Direction.UP,
    Key.UP_ARROW: Direction.UP,
    Key.A: Direction.LEFT,
    Key.LEFT_ARROW: Direction.LEFT,
    Key.S: Direction.DOWN,
    Key.DOWN_ARROW: Direction.DOWN,
    Key.D: Direction.RIGHT,
    Key.RIGHT_ARROW: Direction.RIGHT,
}

PAUSE_KEY = Key.P
QUIT_KEY = Key.ESCAPE
CONFIRM_KEY = Key.ENTER
GAME_KEYS: FrozenSet[Key] = frozenset(KEY_DIRECTIONS) | {PAUSE_KEY, QUIT_KEY}

# Screen layout
GAME_AREA = BoxDimensions(38, 12, Coordinates(0, 1))
WINDOW = BoxDimensions(GAME_AREA.width, GAME_AREA.height + 2, Coordinates(0, 0))
PLAY_AREA = GAME_AREA.inner()
MESSAGE_BOX_WIDTH = 26
MESSAGE_BOX_HEIGHT = 10
SCORE_DIGITS = 6

# Glyphs and colors (256-color palette indices)
HEAD_SYMBOL = "ö"
HEAD_CHOMPING_SYMBOL = "Ö"
HEAD_DEAD_SYMBOL = "X"
HEAD_COLOR = 15
BODY_FALLBACK_SYMBOL = "o"
BODY_DEAD_SYMBOL = "x"
BODY_COLOR_START = 255
BODY_COLOR_FLOOR = 240
FRUIT_SYMBOLS = ("•", "◦", "▴", "■", "□", "᛭", "⨯", "ꚛ", "★", "☆")
FRUIT_COLORS = (8, 9, 10, 11, 12, 13, 14, 15)
FRUIT_SPAWN_ATTEMPTS = 10_000
