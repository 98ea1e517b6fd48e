"""
A position on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass
from string import ascii_lowercase

from src.core.exceptions import InvalidPositionError

# Ataxx board is always 7x7
BOARD_SIZE = 7

ROW_CHARACTERS = "".join(str(row) for row in range(1, BOARD_SIZE + 1))
COLUMN_CHARACTERS = ascii_lowercase[:BOARD_SIZE]


@dataclass(frozen=True, order=True)
class Position:
    """0-indexed (row, column). Ordering is row-major, which is the order moves get listed in."""

    row: int
    column: int

    def __post_init__(self) -> None:
        if not 0 <= self.row < BOARD_SIZE:
            raise InvalidPositionError(
                f"Invalid row {self.row} (0 <= row < {BOARD_SIZE})"
            )
        if not 0 <= self.column < BOARD_SIZE:
            raise InvalidPositionError(
                f"Invalid column {self.column} (0 <= column < {BOARD_SIZE})"
            )

    @classmethod
    def from_text(cls, text: str) -> Position:
        """'1a' - '7g' get converted to (0,0) - (6,6): first the row digit, then the column letter"""
        if len(text) != 2:
            raise InvalidPositionError(f"Invalid format: {text!r}")

        row_char, column_char = text[0], text[1]
        if row_char not in ROW_CHARACTERS:
            raise InvalidPositionError(f"Invalid row: {row_char!r}")
        if column_char not in COLUMN_CHARACTERS:
            raise InvalidPositionError(f"Invalid column: {column_char!r}")

        return cls(int(row_char) - 1, ord(column_char) - ord("a"))

    def to_text(self) -> str:
        return f"{self.row + 1}{chr(self.column + ord('a'))}"

    def offset(self, d_row: int, d_column: int) -> Position | None:
        """The position shifted by the given vector, or None if that falls off the board."""
        row, column = self.row + d_row, self.column + d_column
        if is_within_bounds(row, column):
            return Position(row, column)
        return None

    def distance(self, other: Position) -> int:
        """Chebyshev distance: the number of king steps between two positions."""
        return max(abs(self.row - other.row), abs(self.column - other.column))

    def __str__(self) -> str:
        return self.to_text()


def is_within_bounds(row: int, column: int) -> bool:
    return (0 <= row < BOARD_SIZE) and (0 <= column < BOARD_SIZE)


def all_positions() -> list[Position]:
    """Every position on the board, row-major"""
    return [Position(row, column) for row in range(BOARD_SIZE) for column in range(BOARD_SIZE)]
