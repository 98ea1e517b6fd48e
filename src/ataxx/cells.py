"""Defines the content of a single cell on the board"""

from enum import Enum
from typing import Self

from src.core.exceptions import InvalidBoardError
from src.core.shared_types import Color


class Cell(Enum):
    """Values are the single character codes used in the board string."""

    EMPTY = "E"
    BLACK = "B"
    WHITE = "W"

    @property
    def code(self) -> str:
        return self.value

    @classmethod
    def from_code(cls, code: str) -> Self:
        try:
            return cls(code)
        except ValueError:
            raise InvalidBoardError(f"Invalid cell code: {code!r}") from None

    @classmethod
    def from_color(cls, color: Color) -> Self:
        return cls[color.name]

    def opponent(self) -> "Cell":
        match self:
            case Cell.BLACK:
                return Cell.WHITE
            case Cell.WHITE:
                return Cell.BLACK
            case Cell.EMPTY:
                raise ValueError("An empty cell has no opponent")

    def to_color(self) -> Color:
        if self == Cell.EMPTY:
            raise ValueError("An empty cell has no color")
        return Color[self.name]


PLAYER_CELLS: tuple[Cell, ...] = (Cell.BLACK, Cell.WHITE)
