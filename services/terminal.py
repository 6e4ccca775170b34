"""
Terminal host for the game.

`Terminal` is the contract the user interface draws through; `BlessedTerminal`
implements it on top of the blessed library.
"""

import contextlib
import logging
from typing import Dict, Iterator, Optional

import blessed
from blessed.keyboard import Keystroke

from domain.constants import Key


logger = logging.getLogger(__name__)


# blessed key names -> game keys
SEQUENCE_KEYS: Dict[str, Key] = {
    "KEY_UP": Key.UP_ARROW,
    "KEY_DOWN": Key.DOWN_ARROW,
    "KEY_LEFT": Key.LEFT_ARROW,
    "KEY_RIGHT": Key.RIGHT_ARROW,
    "KEY_ENTER": Key.ENTER,
    "KEY_ESCAPE": Key.ESCAPE,
}

# Plain characters -> game keys (matched case-insensitively)
CHARACTER_KEYS: Dict[str, Key] = {
    "w": Key.W,
    "a": Key.A,
    "s": Key.S,
    "d": Key.D,
    "p": Key.P,
    "\n": Key.ENTER,
    "\r": Key.ENTER,
    "\x1b": Key.ESCAPE,
}


def translate_keystroke(keystroke: Keystroke) -> Key:
    """Map a blessed keystroke onto the key it is bound to, or Key.OTHER."""
    if not keystroke:
        return Key.NONE
    if keystroke.is_sequence and keystroke.name in SEQUENCE_KEYS:
        return SEQUENCE_KEYS[keystroke.name]
    return CHARACTER_KEYS.get(str(keystroke).lower(), Key.OTHER)


class Terminal:
    """
    Base class/interface for the screen and keyboard the game runs on.

    Coordinates are zero-based columns (x) and rows (y) from the top-left corner.
    """

    @property
    def window_width(self) -> int:
        raise NotImplementedError

    @property
    def window_height(self) -> int:
        raise NotImplementedError

    def set_cursor_position(self, x: int, y: int) -> None:
        raise NotImplementedError

    def write(self, text: str) -> None:
        raise NotImplementedError

    def clear(self) -> None:
        raise NotImplementedError

    def set_cursor_visible(self, visible: bool) -> None:
        raise NotImplementedError

    def key_available(self) -> bool:
        raise NotImplementedError

    def read_key(self) -> Key:
        """Block until a key is pressed and return it."""
        raise NotImplementedError


class BlessedTerminal(Terminal):
    """
    Terminal backed by blessed.

    Use `session()` around a game so the keyboard is read unbuffered and the
    screen is restored afterwards.
    """

    def __init__(self, term: Optional[blessed.Terminal] = None):
        self.term = term or blessed.Terminal()

    @property
    def window_width(self) -> int:
        return self.term.width

    @property
    def window_height(self) -> int:
        return self.term.height

    @property
    def is_interactive(self) -> bool:
        return self.term.is_a_tty

    @contextlib.contextmanager
    def session(self) -> Iterator["BlessedTerminal"]:
        with self.term.fullscreen(), self.term.cbreak(), self.term.hidden_cursor():
            logger.debug(f"Entered terminal session ({self.window_width}x{self.window_height})")
            try:
                yield self
            finally:
                self.write(self.term.normal)

    def set_cursor_position(self, x: int, y: int) -> None:
        self.write(self.term.move_xy(x, y))

    def write(self, text: str) -> None:
        self.term.stream.write(text)
        self.term.stream.flush()

    def clear(self) -> None:
        self.write(self.term.home + self.term.clear)

    def set_cursor_visible(self, visible: bool) -> None:
        self.write(self.term.normal_cursor if visible else self.term.hide_cursor)

    def key_available(self) -> bool:
        return self.term.kbhit(timeout=0)

    def read_key(self) -> Key:
        return translate_keystroke(self.term.inkey())
