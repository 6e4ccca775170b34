"""
Fruit entity for the game engine.
"""

import random
from dataclasses import dataclass
from typing import Optional, TYPE_CHECKING

from .constants import FRUIT_COLORS, FRUIT_SPAWN_ATTEMPTS, FRUIT_SYMBOLS
from .geometry import BoxDimensions, Coordinates
from .snake import Snake

if TYPE_CHECKING:
    from services.user_interface import UserInterface


@dataclass(frozen=True)
class Fruit:
    """
    A single fruit on the board. Fruits never change once spawned; eating one
    removes it and a new one is spawned in its place.

    Attributes:
        position: absolute screen cell of the fruit
        symbol: glyph used to draw the fruit
        color: 256-color palette index used to draw the fruit
    """

    position: Coordinates
    symbol: str
    color: int

    @classmethod
    def spawn(
        cls,
        position: Coordinates,
        rng: random.Random,
        symbol: Optional[str] = None,
        color: Optional[int] = None,
    ) -> "Fruit":
        """Create a fruit at `position`, picking a random symbol and color unless given."""
        if symbol is None:
            symbol = rng.choice(FRUIT_SYMBOLS)
        if color is None:
            color = rng.choice(FRUIT_COLORS)
        return cls(position, symbol, color)

    @staticmethod
    def find_spawn_position(
        snake: Snake,
        area: BoxDimensions,
        rng: random.Random,
        max_attempts: int = FRUIT_SPAWN_ATTEMPTS,
    ) -> Optional[Coordinates]:
        """
        Pick a random cell inside `area` that the snake does not occupy.

        Returns:
            The cell, or None if no free cell turned up within `max_attempts` tries.
        """
        for _ in range(max_attempts):
            trial = Coordinates(
                rng.randint(area.x_start, area.x_end),
                rng.randint(area.y_start, area.y_end),
            )
            if not snake.collides_with_point(trial):
                return trial
        return None

    def draw(self, ui: "UserInterface") -> None:
        ui.write_at(self.position.x, self.position.y, self.symbol, color=self.color)
