"""
Snake entity for the game engine.
"""

from typing import List, Optional, TYPE_CHECKING

from .constants import (
    BODY_COLOR_FLOOR,
    BODY_COLOR_START,
    BODY_DEAD_SYMBOL,
    BODY_FALLBACK_SYMBOL,
    HEAD_CHOMPING_SYMBOL,
    HEAD_COLOR,
    HEAD_DEAD_SYMBOL,
    HEAD_SYMBOL,
    Direction,
    SnakeState,
)
from .geometry import Coordinates, BoxSymbols, SQUARE_DOUBLE, SQUARE_SINGLE

if TYPE_CHECKING:
    from services.user_interface import UserInterface


# Body glyph keyed by (previous direction, current direction)
TURN_SYMBOLS = {
    (Direction.UP, Direction.RIGHT): SQUARE_DOUBLE.top_left,
    (Direction.UP, Direction.LEFT): SQUARE_DOUBLE.top_right,
    (Direction.DOWN, Direction.RIGHT): SQUARE_DOUBLE.bottom_left,
    (Direction.DOWN, Direction.LEFT): SQUARE_DOUBLE.bottom_right,
    (Direction.RIGHT, Direction.UP): SQUARE_DOUBLE.bottom_right,
    (Direction.RIGHT, Direction.DOWN): SQUARE_DOUBLE.top_right,
    (Direction.LEFT, Direction.UP): SQUARE_DOUBLE.bottom_left,
    (Direction.LEFT, Direction.DOWN): SQUARE_DOUBLE.top_left,
}

STRAIGHT_SYMBOLS = {
    Direction.LEFT: SQUARE_DOUBLE.horizontal,
    Direction.RIGHT: SQUARE_DOUBLE.horizontal,
    Direction.UP: SQUARE_DOUBLE.vertical,
    Direction.DOWN: SQUARE_DOUBLE.vertical,
}


class Snake:
    """
    Represents the snake on the board.

    The path is a fixed-capacity ring buffer of the positions the head has
    left behind, most recent first. Only the first `length - 1` entries are
    body segments; the entry at `length - 1` is the cell the tail just left.

    Attributes:
        length: number of cells including the head (1 <= length <= capacity)
        head: current head position
        current_direction: direction of the last move
        previous_direction: direction of the move before that
    """

    def __init__(self, capacity: int, spawn_position: Coordinates):
        if capacity < 1:
            raise ValueError(f"Snake capacity must be at least 1, got {capacity}.")
        self.capacity = capacity
        self.length = 1
        self.head = spawn_position
        self.current_direction = Direction.NONE
        self.previous_direction = Direction.NONE
        self._path: List[Optional[Coordinates]] = [None] * capacity
        self._start = 0
        self._recorded = 0

    def path_at(self, index: int) -> Optional[Coordinates]:
        """
        Return the path entry `index` moves ago, or None if the snake has not made that many moves.

        Raises:
            IndexError: if `index` is outside the tracked part of the path
        """
        if not 0 <= index < self.length:
            raise IndexError(f"Path index {index} is outside the snake (length {self.length}).")
        if index >= self._recorded:
            return None
        return self._path[(self._start + index) % self.capacity]

    def body(self) -> List[Coordinates]:
        """Return the body segments from the neck to the tail tip."""
        segments = []
        for i in range(self.length - 1):
            segment = self.path_at(i)
            if segment is not None:
                segments.append(segment)
        return segments

    def store_position(self) -> None:
        """Push the current head, annotated with its body glyph, onto the front of the path."""
        self._start = (self._start - 1) % self.capacity
        self._path[self._start] = Coordinates(self.head.x, self.head.y, self._body_symbol())
        self._recorded = min(self._recorded + 1, self.capacity)

    def _body_symbol(self) -> str:
        if self.current_direction == self.previous_direction:
            return STRAIGHT_SYMBOLS.get(self.current_direction, BODY_FALLBACK_SYMBOL)
        return TURN_SYMBOLS.get((self.previous_direction, self.current_direction), BODY_FALLBACK_SYMBOL)

    def move(self, direction: Direction) -> None:
        """
        Move the snake one cell in `direction`.

        Moving in Direction.NONE does nothing: no path entry is recorded and
        the direction history is left alone.
        """
        new_head = self.simulate_move(direction)
        if new_head is None:
            return
        self.previous_direction = self.current_direction
        self.current_direction = direction
        self.store_position()
        self.head = new_head

    def simulate_move(self, direction: Direction) -> Optional[Coordinates]:
        """Return where the head would be after moving in `direction` (None for Direction.NONE)."""
        if direction == Direction.UP:
            return self.head.offset_y(-1)
        if direction == Direction.DOWN:
            return self.head.offset_y(+1)
        if direction == Direction.LEFT:
            return self.head.offset_x(-1)
        if direction == Direction.RIGHT:
            return self.head.offset_x(+1)
        return None

    def collides_with_point(self, point: Coordinates, include_head: bool = True) -> bool:
        if include_head and self.head == point:
            return True
        return point in self.body()

    def draw(self, ui: "UserInterface", state: SnakeState = SnakeState.NORMAL, delete_old_tail: bool = True) -> None:
        """
        Draw the snake, redrawing only its own cells.

        Args:
            ui: the user interface to draw on
            state: what happened to the snake this tick; selects the head glyph
            delete_old_tail: blank the cell the tail left during the last move
        """
        if delete_old_tail:
            old_tail = self.path_at(self.length - 1)
            if old_tail is not None:
                ui.write_at(old_tail.x, old_tail.y, " ")

        color = BODY_COLOR_START
        for i in range(self.length - 1):
            segment = self.path_at(i)
            if segment is None:
                break
            symbol = self._state_symbol(state, segment.annotation or BODY_FALLBACK_SYMBOL, BODY_DEAD_SYMBOL)
            if i == self.length - 2:
                symbol = self.thin_out_tail(symbol)
            ui.write_at(segment.x, segment.y, symbol, color=color)
            if color > BODY_COLOR_FLOOR:
                color -= 1

        head_symbol = self._state_symbol(state, HEAD_SYMBOL, HEAD_DEAD_SYMBOL, HEAD_CHOMPING_SYMBOL)
        ui.write_at(self.head.x, self.head.y, head_symbol, color=HEAD_COLOR)

    @staticmethod
    def thin_out_tail(symbol: str) -> str:
        return BoxSymbols.transliterate(symbol, SQUARE_DOUBLE, SQUARE_SINGLE)

    @staticmethod
    def _state_symbol(state: SnakeState, normal: str, dead: str, chomping: Optional[str] = None) -> str:
        if state == SnakeState.DEAD:
            return dead
        if state == SnakeState.CHOMPING and chomping is not None:
            return chomping
        return normal

    def __repr__(self):
        return (
            f"<Snake head={self.head}, length={self.length}, "
            f"direction={self.current_direction.value}>"
        )
