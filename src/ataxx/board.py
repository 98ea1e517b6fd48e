"""The Board only stores cells. Legality of what gets written is the Game's responsibility."""

from dataclasses import dataclass
from typing import Self

from src.ataxx import board_string
from src.ataxx.cells import PLAYER_CELLS, Cell
from src.ataxx.position import BOARD_SIZE, Position, all_positions

STARTING_CORNERS: dict[Position, Cell] = {
    Position(0, 0): Cell.BLACK,
    Position(BOARD_SIZE - 1, BOARD_SIZE - 1): Cell.BLACK,
    Position(0, BOARD_SIZE - 1): Cell.WHITE,
    Position(BOARD_SIZE - 1, 0): Cell.WHITE,
}


@dataclass
class Board:
    position: dict[Position, Cell]

    @classmethod
    def starting_position(cls) -> Self:
        """Empty board, except for the four corners: black on 1a and 7g, white on 1g and 7a."""
        position = {square: Cell.EMPTY for square in all_positions()}
        position.update(STARTING_CORNERS)
        return cls(position)

    @classmethod
    def from_string(cls, board_str: str) -> Self:
        """Construct a board using the run-length encoded board string (see board_string.py).

        ex. starting position:
        B5EW35EW5EB
        """
        cells = board_string.decode(board_str)
        return cls(dict(zip(all_positions(), cells)))

    def to_string(self) -> str:
        return board_string.encode(self.cells())

    def cells(self) -> list[Cell]:
        """All cells, row-major"""
        return [self.position[square] for square in all_positions()]

    def get_cell(self, square: Position) -> Cell:
        return self.position[square]

    def set_cell(self, square: Position, cell: Cell) -> None:
        self.position[square] = cell

    def locate(self, cell: Cell) -> list[Position]:
        """Row-major list of the positions holding the given cell"""
        return [square for square in all_positions() if self.position[square] == cell]

    def empty_squares(self) -> list[Position]:
        return self.locate(Cell.EMPTY)

    def count(self, cell: Cell) -> int:
        return sum(1 for value in self.position.values() if value == cell)

    def piece_counts(self) -> dict[Cell, int]:
        """Tally the pieces each player has on the board"""
        return {cell: self.count(cell) for cell in PLAYER_CELLS}

    def is_full(self) -> bool:
        return self.count(Cell.EMPTY) == 0

    def copy(self) -> Self:
        return type(self)(dict(self.position))

    def __str__(self) -> str:
        return self.to_string()
