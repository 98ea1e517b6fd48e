"""
Geometry of the game: which cells a piece can reach and which cells get captured.

Both move generation and capture use the vectors defined here, so the two can never disagree about what "adjacent" means.

* Clone: move to one of the 8 surrounding cells. The piece stays where it was and a copy appears on the target.
* Jump: move to a cell at distance 2 (the outer ring of the 5x5 square around the piece). The original cell is left empty.
* Capture: every opponent piece surrounding the target cell changes color.

Legality (whose turn it is, whether the game is over) is checked later by Game
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Protocol

from src.ataxx.cells import Cell
from src.ataxx.position import Position
from src.core.exceptions import IllegalMoveError
from src.core.shared_types import MoveKind

PASS_TEXT = "pass"
MOVE_SEPARATOR = "-"


class Board(Protocol):
    """Just the parts the movement rules need"""

    def get_cell(self, square: Position) -> Cell: ...
    def locate(self, cell: Cell) -> list[Position]: ...


Vector = tuple[int, int]

# NOTE: listed row-major, so generated moves come out in row-major order of their destination
WINDOW: list[Vector] = [
    (d_row, d_column)
    for d_row in range(-2, 3)
    for d_column in range(-2, 3)
    if (d_row, d_column) != (0, 0)
]
CLONE_DELTAS: list[Vector] = [v for v in WINDOW if max(abs(v[0]), abs(v[1])) == 1]
JUMP_DELTAS: list[Vector] = [v for v in WINDOW if max(abs(v[0]), abs(v[1])) == 2]

DISTANCE_TO_KIND: dict[int, MoveKind] = {1: MoveKind.CLONE, 2: MoveKind.JUMP}


@dataclass(frozen=True)
class Move:
    """basic definition of a move to be made. Both positions left out means: pass."""

    from_position: Optional[Position] = None
    to_position: Optional[Position] = None

    @classmethod
    def from_text(cls, text: str) -> Move:
        """
        Move notation:
        ---
        <from><separator><to>, or the word "pass"

        examples:
        * "1a-2b": the piece on 1a clones itself onto 2b
        * "1a-3a": the piece on 1a jumps to 3a
        """
        text = text.strip()
        if text.lower() == PASS_TEXT:
            return PASS

        parts = text.split(MOVE_SEPARATOR)
        if len(parts) != 2:
            raise IllegalMoveError(f"Cannot interpret {text!r} as a move")
        from_text, to_text = (part.strip() for part in parts)
        return cls(Position.from_text(from_text), Position.from_text(to_text))

    def to_text(self) -> str:
        if self.is_pass:
            return PASS_TEXT
        return f"{self.from_position}{MOVE_SEPARATOR}{self.to_position}"

    @property
    def is_pass(self) -> bool:
        return self.from_position is None and self.to_position is None

    @property
    def kind(self) -> Optional[MoveKind]:
        """CLONE, JUMP, or None for a pass or a move no piece could ever make"""
        if self.from_position is None or self.to_position is None:
            return None
        return move_kind(self.from_position, self.to_position)

    def __str__(self) -> str:
        return self.to_text()


PASS = Move()


# --- MOVEMENT RULES ---
def move_kind(from_position: Position, to_position: Position) -> Optional[MoveKind]:
    return DISTANCE_TO_KIND.get(from_position.distance(to_position))


def reachable(square: Position, deltas: list[Vector]) -> list[Position]:
    """Positions at the given offsets that are still on the board"""
    targets: list[Position] = []
    for d_row, d_column in deltas:
        target = square.offset(d_row, d_column)
        if target is not None:
            targets.append(target)
    return targets


def neighbours(square: Position) -> list[Position]:
    """The (up to) 8 surrounding positions"""
    return reachable(square, CLONE_DELTAS)


def candidate_moves(square: Position, board: Board) -> list[Move]:
    """Clones and jumps for the piece standing on `square`: any empty cell within distance 2"""
    return [
        Move(from_position=square, to_position=target)
        for target in reachable(square, WINDOW)
        if board.get_cell(target) == Cell.EMPTY
    ]


def generate_moves(color: Cell, board: Board) -> list[Move]:
    """All moves for one side. Row-major by source, then row-major by destination."""
    moves: list[Move] = []
    for square in board.locate(color):
        moves.extend(candidate_moves(square, board))
    return moves


def has_any_move(color: Cell, board: Board) -> bool:
    """Cheaper than generating the full list: stop at the first empty cell in reach"""
    return any(
        board.get_cell(target) == Cell.EMPTY
        for square in board.locate(color)
        for target in reachable(square, WINDOW)
    )


# --- CAPTURING RULES ---
def captured_positions(target: Position, color: Cell, board: Board) -> list[Position]:
    """Opponent pieces that flip when `color` lands on `target`"""
    opponent = color.opponent()
    return [square for square in neighbours(target) if board.get_cell(square) == opponent]
