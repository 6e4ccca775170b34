"""
Random player implementation - steers the snake by picking random safe moves.
"""

import random
from typing import List, Optional

from domain.constants import Direction, Key
from domain.game_state import GameState
from .keyboard_player import KeyboardPlayer
from services.user_interface import UserInterface


# One key per direction
DIRECTION_KEYS = {
    Direction.UP: Key.W,
    Direction.DOWN: Key.S,
    Direction.LEFT: Key.A,
    Direction.RIGHT: Key.D,
}


class RandomPlayer(KeyboardPlayer):
    """
    Autopilot that waits for the keyboard like a human player but, when no
    key arrives in time, picks a random direction that avoids the walls and
    the snake's own body instead of letting the snake run straight on.
    Among the safe moves it prefers the ones that bring the head closer to
    the fruit.
    """

    def __init__(self, ui: UserInterface, rng: Optional[random.Random] = None):
        super().__init__(ui)
        self.rng = rng or random.Random()

    def get_move(self, game_state: GameState) -> Key:
        key = super().get_move(game_state)
        if key != Key.NONE:
            return key
        return DIRECTION_KEYS[self.choose_direction(game_state)]

    def choose_direction(self, game_state: GameState) -> Direction:
        head = game_state.head
        possible_moves = {
            Direction.UP: head.offset_y(-1),
            Direction.DOWN: head.offset_y(+1),
            Direction.LEFT: head.offset_x(-1),
            Direction.RIGHT: head.offset_x(+1),
        }

        # The tail cell is free by the time the head gets there
        occupied = game_state.body[:-1]
        valid_moves: List[Direction] = []
        for direction, cell in possible_moves.items():
            if not game_state.play_area.contains_point(cell, exclude_border=False):
                continue
            if cell in occupied:
                continue
            valid_moves.append(direction)

        # If no valid moves, just keep going (we'll die anyway)
        if not valid_moves:
            if game_state.direction in possible_moves:
                return game_state.direction
            return self.rng.choice(list(possible_moves))

        # Head for the fruit when one of the safe moves gets closer to it
        if game_state.fruit is not None:
            def distance(direction: Direction) -> int:
                cell = possible_moves[direction]
                return abs(cell.x - game_state.fruit.x) + abs(cell.y - game_state.fruit.y)

            best = min(distance(d) for d in valid_moves)
            valid_moves = [d for d in valid_moves if distance(d) == best]

        return self.rng.choice(valid_moves)

