"""
Keyboard player - the person at the terminal.
"""

from domain.constants import GAME_KEYS, Key
from domain.game_state import GameState
from services.user_interface import UserInterface
from .base import Player


class KeyboardPlayer(Player):
    """
    Reads keys from the terminal, waiting at most the game's auto-move delay.
    """

    def __init__(self, ui: UserInterface):
        self.ui = ui

    def get_move(self, game_state: GameState) -> Key:
        return self.ui.poll_input_key(GAME_KEYS, timeout_ms=game_state.auto_move_delay)
