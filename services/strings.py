"""
User-visible strings.
"""

from typing import Dict

APP_NAME = "Snake"
APP_VERSION = "1.0.0"

STRINGS: Dict[str, str] = {
    "app.title": "{name} v{version}",
    "app.description": "Play snake in your terminal.",
    "help.difficulty": "Difficulty level (default: {default}).",
    "help.autopilot": "Let the computer steer whenever you do not press a key.",
    "help.seed": "Seed for the random number generator.",
    "ui.winner_heading": "You won!",
    "ui.game_over_heading": "Game over",
    "ui.game_paused_heading": "Game paused",
    "ui.score": "Score: {score}",
    "ui.snake_length": "Length: {length}",
    "ui.difficulty": "Difficulty: {difficulty}",
    "ui.escape_to_quit": "Esc to quit",
    "ui.enter_to_play_again": "Enter to play again",
    "ui.enter_to_resume": "Enter to resume",
    "ui.infobar": "WASD/←↑↓→ move · P pause · Esc quit",
    "error.terminal_too_small": (
        "The terminal window is too small: it is {width}x{height} "
        "but the game needs at least {min_width}x{min_height}."
    ),
    "error.not_a_terminal": "The game needs an interactive terminal.",
}


def get_string(key: str, **values) -> str:
    """
    Look up the string for `key` and substitute `values` into it.

    Raises:
        KeyError: if there is no string for `key`
    """
    return STRINGS[key].format(**values)


def title() -> str:
    return get_string("app.title", name=APP_NAME, version=APP_VERSION)
