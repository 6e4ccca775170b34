"""
Geometry value types for the game board: cells, boxes and box-drawing symbol sets.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class Coordinates:
    """
    A cell on the screen.

    Attributes:
        x, y: absolute screen column and row
        annotation: the glyph last drawn at this cell (ignored for equality)
    """

    x: int
    y: int
    annotation: str = field(default="", compare=False)

    def offset_x(self, offset: int) -> "Coordinates":
        return Coordinates(self.x + offset, self.y)

    def offset_y(self, offset: int) -> "Coordinates":
        return Coordinates(self.x, self.y + offset)

    def __str__(self) -> str:
        if self.annotation:
            return f"({self.x}, {self.y}; {self.annotation})"
        return f"({self.x}, {self.y})"


@dataclass(frozen=True)
class BoxDimensions:
    """
    A rectangle of cells anchored at its top-left origin.
    """

    width: int
    height: int
    origin: Coordinates = Coordinates(0, 0)

    @property
    def x_start(self) -> int:
        return self.origin.x

    @property
    def x_end(self) -> int:
        return self.origin.x + self.width - 1

    @property
    def y_start(self) -> int:
        return self.origin.y

    @property
    def y_end(self) -> int:
        return self.origin.y + self.height - 1

    @property
    def area(self) -> int:
        return self.width * self.height

    def inner(self, offset: int = 1) -> "BoxDimensions":
        """
        Return the box inset by `offset` cells on every side.

        Raises:
            ValueError: if the inset would leave a negative width or height
        """
        width = self.width - 2 * offset
        height = self.height - 2 * offset
        if width < 0 or height < 0:
            raise ValueError(f"Cannot inset {self} by {offset}.")
        return BoxDimensions(width, height, Coordinates(self.x_start + offset, self.y_start + offset))

    def contains_point(self, point: Coordinates, exclude_border: bool = True) -> bool:
        """
        Check whether `point` lies inside the box.

        With `exclude_border` the cells on the box's outline do not count.
        """
        if exclude_border:
            return self.x_start < point.x < self.x_end and self.y_start < point.y < self.y_end
        return self.x_start <= point.x <= self.x_end and self.y_start <= point.y <= self.y_end

    def __str__(self) -> str:
        return f"({self.width} × {self.height}; origin: {self.x_start}, {self.y_start})"


@dataclass(frozen=True)
class BoxSymbols:
    """
    The characters used to stroke and fill a box.
    """

    top_left: str
    top_right: str
    bottom_left: str
    bottom_right: str
    vertical: str
    horizontal: str
    fill: str = " "

    def to_tuple(self) -> Tuple[str, ...]:
        return (
            self.top_left,
            self.top_right,
            self.bottom_left,
            self.bottom_right,
            self.vertical,
            self.horizontal,
            self.fill,
        )

    @staticmethod
    def transliterate(symbol: str, from_set: "BoxSymbols", to_set: "BoxSymbols") -> str:
        """
        Map `symbol` from one symbol set onto the character in the same slot of another.

        Symbols not found in `from_set` are returned unchanged.
        """
        source = from_set.to_tuple()
        if symbol in source:
            return to_set.to_tuple()[source.index(symbol)]
        return symbol


SQUARE_SINGLE = BoxSymbols("┌", "┐", "└", "┘", "│", "─")
SQUARE_DOUBLE = BoxSymbols("╔", "╗", "╚", "╝", "║", "═")
ROUND_SINGLE = BoxSymbols("╭", "╮", "╰", "╯", "│", "─")
