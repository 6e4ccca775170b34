"""
Base player interface for the game engine.
"""

from domain.game_state import GameState
from domain.constants import Key


class Player:
    """
    Base class/interface for player logic.

    Each tick the game asks its player for the next key. Key.NONE means no key
    arrived before the auto-move delay ran out, so the snake keeps going.
    """

    def get_move(self, game_state: GameState) -> Key:
        """
        Return the key to act on given the current game state.

        Args:
            game_state: Current state of the game

        Returns:
            A movement key, the pause or quit key, or Key.NONE
        """
        raise NotImplementedError
