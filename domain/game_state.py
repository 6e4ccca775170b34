"""
GameState entity - a snapshot of the game at a point in time.
"""

from typing import List, Optional

from .constants import Direction
from .geometry import BoxDimensions, Coordinates


class GameState:
    """
    A snapshot of the game at a specific point in time.

    Attributes:
        tick: how many ticks have been played (0-based)
        head: position of the snake's head
        body: body segments from the neck to the tail tip
        direction: direction the snake is currently moving in
        score: current score
        play_area: the cells the snake may occupy
        fruit: position of the fruit, if one is on the board
        auto_move_delay: milliseconds before the snake moves on its own
    """

    def __init__(
        self,
        tick: int,
        head: Coordinates,
        body: List[Coordinates],
        direction: Direction,
        score: int,
        play_area: BoxDimensions,
        fruit: Optional[Coordinates],
        auto_move_delay: int,
    ):
        self.tick = tick
        self.head = head
        self.body = body
        self.direction = direction
        self.score = score
        self.play_area = play_area
        self.fruit = fruit
        self.auto_move_delay = auto_move_delay

    @property
    def length(self) -> int:
        return len(self.body) + 1

    def print_board(self) -> str:
        """
        Returns a string representation of the play area with:
        . = empty space
        F = fruit
        o = snake body
        H = snake head
        Rows run top to bottom, matching the screen.
        """
        area = self.play_area
        board = [['.' for _ in range(area.width)] for _ in range(area.height)]

        def place(cell: Coordinates, symbol: str) -> None:
            if area.contains_point(cell, exclude_border=False):
                board[cell.y - area.y_start][cell.x - area.x_start] = symbol

        if self.fruit is not None:
            place(self.fruit, 'F')
        for segment in self.body:
            place(segment, 'o')
        place(self.head, 'H')

        return "\n".join(''.join(row) for row in board)

    def __repr__(self):
        return (
            f"<GameState tick={self.tick}, head={self.head}, length={self.length}, "
            f"fruit={self.fruit}, score={self.score}>"
        )
