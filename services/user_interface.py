"""
Drawing and input layer for the terminal snake game.

Everything the game puts on screen goes through `UserInterface`, which draws
on a `Terminal` with positioned writes. Nothing is double-buffered: callers
redraw only the cells that changed.
"""

import logging
import re
import time
from typing import Callable, Collection, List, Optional, Sequence

from domain.constants import (
    CONFIRM_KEY,
    GAME_AREA,
    MESSAGE_BOX_HEIGHT,
    MESSAGE_BOX_WIDTH,
    QUIT_KEY,
    SCORE_DIGITS,
    WINDOW,
    GameDifficulty,
    Key,
)
from domain.exceptions import TerminalTooSmallError
from domain.geometry import BoxDimensions, BoxSymbols, Coordinates, ROUND_SINGLE, SQUARE_DOUBLE, SQUARE_SINGLE
from services.strings import get_string, title
from services.terminal import Terminal


logger = logging.getLogger(__name__)

POLL_INTERVAL_SECONDS = 0.001
RESET = "\x1b[m"
SGR_SEQUENCE = re.compile(r"(\x1b\[[0-9;]*m)")


def ansify(
    text: str,
    color: Optional[int] = None,
    bold: bool = False,
    dim: bool = False,
    italic: bool = False,
    underlined: bool = False,
    skip_whitespace: bool = False,
) -> str:
    """
    Wrap `text` in ANSI SGR sequences.

    Args:
        text: the text to style
        color: 256-color palette index for the foreground
        bold, dim, italic, underlined: text attributes
        skip_whitespace: keep leading and trailing whitespace outside the styled span
    """
    codes = []
    if color is not None:
        codes.append(f"38;5;{color}")
    if bold:
        codes.append("1")
    if dim:
        codes.append("2")
    if italic:
        codes.append("3")
    if underlined:
        codes.append("4")
    if not codes:
        return text

    leading, body, trailing = "", text, ""
    if skip_whitespace and text.strip():
        body = text.strip()
        leading = text[:len(text) - len(text.lstrip())]
        trailing = text[len(text.rstrip()):]
    return f"{leading}\x1b[{';'.join(codes)}m{body}{RESET}{trailing}"


def clip_styled(text: str, width: int) -> str:
    """
    Cut `text` to `width` visible cells. Escape sequences do not count toward
    the width, and a style left open by the cut is reset.
    """
    pieces = []
    visible = 0
    styled = False
    for part in SGR_SEQUENCE.split(text):
        if SGR_SEQUENCE.fullmatch(part):
            pieces.append(part)
            styled = part != RESET
            continue
        kept = part[:width - visible]
        pieces.append(kept)
        visible += len(kept)
        if visible >= width:
            break
    if styled:
        pieces.append(RESET)
    return "".join(pieces)


def pad_to_center(text: str, width: int) -> str:
    """Left-pad `text` so it sits centered in a field of `width` cells."""
    if len(text) >= width:
        return text
    return " " * (width // 2 - (len(text) + 1) // 2) + text


class UserInterface:
    """
    Draws the game window on a terminal and reads keys from it.

    Layout (window 38x14):
        row 0       title and score
        rows 1-12   game area border with the playable interior inside
        row 13      instruction bar
    """

    def __init__(
        self,
        terminal: Terminal,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.terminal = terminal
        self.clock = clock
        self.sleep = sleep

    # ------------------------------------------------------------------
    # Primitives
    # ------------------------------------------------------------------

    def write_at(self, x: int, y: int, text: str, color: Optional[int] = None, **style) -> None:
        """Write `text` starting at cell (x, y), styled when a color or attribute is given."""
        self.terminal.set_cursor_position(x, y)
        self.terminal.write(ansify(text, color=color, **style))

    def console_size_ok(self) -> bool:
        return (
            self.terminal.window_width >= WINDOW.width
            and self.terminal.window_height >= WINDOW.height
        )

    def ensure_console_size(self) -> None:
        """
        Raises:
            TerminalTooSmallError: if the terminal cannot fit the game window
        """
        if not self.console_size_ok():
            logger.warning(
                f"Terminal is {self.terminal.window_width}x{self.terminal.window_height}, "
                f"need {WINDOW.width}x{WINDOW.height}"
            )
            raise TerminalTooSmallError(
                self.terminal.window_width,
                self.terminal.window_height,
                WINDOW.width,
                WINDOW.height,
            )

    def reset_cursor(self) -> None:
        self.terminal.set_cursor_position(WINDOW.x_end, WINDOW.y_end)

    # ------------------------------------------------------------------
    # Static chrome
    # ------------------------------------------------------------------

    def initialize(self) -> None:
        """Clear the screen and draw the empty game window."""
        self.terminal.set_cursor_visible(False)
        self.terminal.clear()
        self.draw_game_area()
        self.draw_title()
        self.draw_score()
        self.draw_infobar()
        self.reset_cursor()

    def draw_title(self) -> None:
        self.write_at(WINDOW.x_start, WINDOW.y_start, title())

    def draw_score(self) -> None:
        label = "Score: " + "0" * SCORE_DIGITS
        self.write_at(WINDOW.x_end - len(label) + 1, WINDOW.y_start, label)

    def update_score(self, score: int) -> None:
        """Rewrite only the score digits."""
        self.write_at(WINDOW.x_end - SCORE_DIGITS + 1, WINDOW.y_start, f"{score:0{SCORE_DIGITS}d}")

    def draw_infobar(self) -> None:
        self.write_at(WINDOW.x_start, WINDOW.y_end, get_string("ui.infobar"), dim=True)

    def draw_game_area(self) -> None:
        self.draw_box(GAME_AREA, ROUND_SINGLE)

    def clear_game_area(self) -> None:
        inner = GAME_AREA.inner()
        filler = " " * inner.width
        for y in range(inner.y_start, inner.y_end + 1):
            self.write_at(inner.x_start, y, filler)

    # ------------------------------------------------------------------
    # Boxes and overlays
    # ------------------------------------------------------------------

    def draw_box(self, dimensions: BoxDimensions, symbols: BoxSymbols = SQUARE_SINGLE) -> BoxDimensions:
        """
        Stroke the outline of `dimensions` and fill its interior.

        Returns:
            The interior of the box.

        Raises:
            ValueError: if the box is smaller than 2x2
        """
        if dimensions.width < 2 or dimensions.height < 2:
            raise ValueError(f"A box needs at least 2x2 cells, got {dimensions}.")
        middle = dimensions.width - 2
        top = symbols.top_left + symbols.horizontal * middle + symbols.top_right
        row = symbols.vertical + symbols.fill * middle + symbols.vertical
        bottom = symbols.bottom_left + symbols.horizontal * middle + symbols.bottom_right

        self.write_at(dimensions.x_start, dimensions.y_start, top)
        for y in range(dimensions.y_start + 1, dimensions.y_end):
            self.write_at(dimensions.x_start, y, row)
        self.write_at(dimensions.x_start, dimensions.y_end, bottom)
        return dimensions.inner()

    def draw_centered_box(self, width: int, height: int, symbols: BoxSymbols = SQUARE_SINGLE) -> BoxDimensions:
        origin = Coordinates((WINDOW.width - width) // 2, (WINDOW.height - height) // 2)
        return self.draw_box(BoxDimensions(width, height, origin), symbols)

    def draw_message_box(self, content: Sequence[str], clip: bool = False) -> BoxDimensions:
        """
        Draw a double-lined box in the middle of the window and write `content` into it.

        With `clip`, lines are cut to the box's width and surplus lines are dropped.
        """
        inner = self.draw_centered_box(MESSAGE_BOX_WIDTH, MESSAGE_BOX_HEIGHT, SQUARE_DOUBLE)
        lines = list(content)
        if clip:
            lines = [clip_styled(line, inner.width) for line in lines[:inner.height]]
        for offset, line in enumerate(lines):
            self.write_at(inner.x_start, inner.y_start + offset, line)
        return inner

    def _summary_lines(self, heading: str, score: int, snake_length: int, difficulty: GameDifficulty) -> List[str]:
        width = MESSAGE_BOX_WIDTH - 2
        return [
            ansify(pad_to_center(heading, width), color=15, bold=True, underlined=True, skip_whitespace=True),
            "",
            " " + get_string("ui.score", score=score),
            " " + get_string("ui.snake_length", length=snake_length),
            " " + get_string("ui.difficulty", difficulty=difficulty.label),
            "",
        ]

    def _prompt(self, key: str) -> str:
        return ansify(pad_to_center(get_string(key), MESSAGE_BOX_WIDTH - 2), dim=True, skip_whitespace=True)

    def _ask_play_again(self, heading: str, score: int, snake_length: int, difficulty: GameDifficulty) -> bool:
        lines = self._summary_lines(heading, score, snake_length, difficulty)
        lines += [self._prompt("ui.escape_to_quit"), self._prompt("ui.enter_to_play_again")]
        self.draw_message_box(lines)
        return self.poll_input_key({QUIT_KEY, CONFIRM_KEY}) == CONFIRM_KEY

    def show_win_message(self, score: int, snake_length: int, difficulty: GameDifficulty) -> bool:
        """Show the winner overlay. Returns True if the player wants to play again."""
        return self._ask_play_again(get_string("ui.winner_heading"), score, snake_length, difficulty)

    def show_game_over_message(self, score: int, snake_length: int, difficulty: GameDifficulty) -> bool:
        """Show the game over overlay. Returns True if the player wants to play again."""
        return self._ask_play_again(get_string("ui.game_over_heading"), score, snake_length, difficulty)

    def show_paused_message(self, score: int, snake_length: int, difficulty: GameDifficulty) -> None:
        """Show the pause overlay and block until the player resumes."""
        lines = self._summary_lines(get_string("ui.game_paused_heading"), score, snake_length, difficulty)
        lines += ["", self._prompt("ui.enter_to_resume")]
        self.draw_message_box(lines)
        self.poll_input_key({CONFIRM_KEY})

    # ------------------------------------------------------------------
    # Input
    # ------------------------------------------------------------------

    def poll_input_key(self, accept_keys: Optional[Collection[Key]] = None, timeout_ms: Optional[int] = None) -> Key:
        """
        Wait for a key from `accept_keys` (any key if empty or None).

        Without a timeout this blocks until an accepted key arrives. With a
        timeout it returns Key.NONE once `timeout_ms` milliseconds pass
        without one.
        """
        if timeout_ms is None:
            while True:
                key = self.terminal.read_key()
                if not accept_keys or key in accept_keys:
                    return key

        deadline = self.clock() + timeout_ms / 1000
        while True:
            if self.terminal.key_available():
                key = self.terminal.read_key()
                if not accept_keys or key in accept_keys:
                    return key
            if self.clock() >= deadline:
                return Key.NONE
            self.sleep(POLL_INTERVAL_SECONDS)
