"""
Shared fixtures: an in-memory terminal with scripted keys and a fake clock.
"""

import os
import re
import sys
from typing import Dict, Iterable, List, Tuple

import pytest

# Add project root to path for imports
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from domain.constants import Key  # noqa: E402
from services.terminal import Terminal  # noqa: E402
from services.user_interface import UserInterface  # noqa: E402


ANSI_SEQUENCE = re.compile(r"\x1b\[[0-9;:]*m")


class FakeTerminal(Terminal):
    """
    Records what is written into a grid of cells and hands out scripted keys.
    """

    def __init__(self, width: int = 38, height: int = 14, keys: Iterable[Key] = ()):
        self.width = width
        self.height = height
        self.keys: List[Key] = list(keys)
        self.cells: Dict[Tuple[int, int], str] = {}
        self.writes: List[Tuple[int, int, str]] = []
        self.cursor = (0, 0)
        self.cursor_visible = True
        self.clear_count = 0

    @property
    def window_width(self) -> int:
        return self.width

    @property
    def window_height(self) -> int:
        return self.height

    def set_cursor_position(self, x: int, y: int) -> None:
        self.cursor = (x, y)

    def write(self, text: str) -> None:
        x, y = self.cursor
        self.writes.append((x, y, text))
        for char in ANSI_SEQUENCE.sub("", text):
            self.cells[(x, y)] = char
            x += 1
        self.cursor = (x, y)

    def clear(self) -> None:
        self.cells.clear()
        self.clear_count += 1

    def set_cursor_visible(self, visible: bool) -> None:
        self.cursor_visible = visible

    def key_available(self) -> bool:
        return bool(self.keys)

    def read_key(self) -> Key:
        if not self.keys:
            raise AssertionError("read_key() called but no scripted keys are left")
        return self.keys.pop(0)

    def char_at(self, x: int, y: int) -> str:
        return self.cells.get((x, y), " ")

    def row(self, y: int) -> str:
        return "".join(self.char_at(x, y) for x in range(self.width))

    def screen(self) -> str:
        return "\n".join(self.row(y) for y in range(self.height))

    def raw_at(self, x: int, y: int) -> str:
        """Return the last raw text (with escape sequences) written starting at (x, y)."""
        for wx, wy, text in reversed(self.writes):
            if (wx, wy) == (x, y):
                return text
        return ""


class FakeClock:
    """A clock that only advances when slept on."""

    def __init__(self):
        self.now = 0.0
        self.sleeps = 0

    def __call__(self) -> float:
        return self.now

    def sleep(self, seconds: float) -> None:
        self.sleeps += 1
        self.now += max(seconds, 0.001)


@pytest.fixture
def terminal():
    return FakeTerminal()


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def ui(terminal, clock):
    return UserInterface(terminal, clock=clock, sleep=clock.sleep)
