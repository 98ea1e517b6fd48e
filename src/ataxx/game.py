"""
The Game class will be the entrypoint into the domain layer for the service layer.
It is responsible for orchestrating all the business logic required to play a turn of the board game -->
passes this information to the service layer, which can then pass it onwards to the shell.
"""

import logging
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Self

from src.ataxx.board import Board
from src.ataxx.cells import Cell
from src.ataxx.moves import (
    PASS,
    Move,
    captured_positions,
    generate_moves,
    has_any_move,
)
from src.ataxx.position import Position
from src.core.exceptions import GameOverError, GameStateError, IllegalMoveError
from src.core.models import GameModel, utc_now
from src.core.shared_types import Color, FinishReason, MoveKind, Outcome

logger = logging.getLogger(__name__)


class Status(Enum):
    IN_PROGRESS = auto()
    FINISHED = auto()


@dataclass(frozen=True)
class TurnTransition:
    """What happened during one accepted move."""

    move: Move
    mover: Cell
    captured: list[Position]
    forced_pass: Optional[Cell]  # side left without a move after this one (passed, or ended the game)
    status: Status
    side_to_move: Optional[Cell]
    outcome: Optional[Outcome]


@dataclass(frozen=True)
class GameState:
    """Read-only view of the game. The board is a copy, changing it does not touch the game."""

    board: Board
    status: Status
    side_to_move: Optional[Cell]
    outcome: Optional[Outcome]
    finish_reason: Optional[FinishReason]
    piece_counts: Mapping[Cell, int]


@dataclass(frozen=True)
class BoardSnapshot:
    """What the printer gets to see: the cells, plus optionally the destinations to highlight."""

    cells: Mapping[Position, Cell]
    highlights: Mapping[Position, frozenset[MoveKind]] = field(
        default_factory=lambda: MappingProxyType({})
    )


def group_destinations(
    reached: Iterable[tuple[Position, MoveKind]],
) -> dict[Position, frozenset[MoveKind]]:
    """(destination, kind) pairs -> kind(s) per destination, row-major. Snapshot highlights are built from this."""
    destinations: dict[Position, set[MoveKind]] = {}
    for square, kind in reached:
        destinations.setdefault(square, set()).add(kind)
    return {square: frozenset(kinds) for square, kinds in sorted(destinations.items())}


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE---

    board: Board
    side_to_move: Cell
    moves: list[Move]
    history: list[str]  # list of board strings, each one taken before a move was made
    status: Status
    outcome: Optional[Outcome] = None
    finish_reason: Optional[FinishReason] = None
    started_at: datetime = field(default_factory=utc_now)

    @classmethod
    def new_game(
        cls, starting_board: Optional[str] = None, side_to_move: Cell = Cell.BLACK
    ) -> Self:
        """Start a new game, by default from the four corner setup with black to move."""
        if side_to_move == Cell.EMPTY:
            raise GameStateError("The side to move must be black or white.")

        board = (
            Board.from_string(starting_board)
            if starting_board
            else Board.starting_position()
        )
        game = cls(
            board=board,
            side_to_move=side_to_move,
            moves=[],
            history=[],
            status=Status.IN_PROGRESS,
        )
        # a loaded board might already be blocked for the side to move
        game._settle_turn()
        logger.info("New game started: %s, %s to move", board, game.side_to_move.name)
        return game

    @classmethod
    def from_model(cls, model: GameModel) -> Self:
        """Define how to construct a Game from the information the Service layer actually has"""

        # Validation
        status_name = model.status.replace(" ", "_").upper()
        if status_name not in Status.__members__:
            raise GameStateError(
                f"Invalid status code: {model.status!r}. \nPick one from in progress, finished"
            )
        side_name = model.side_to_move.upper()
        if side_name not in Color.__members__:
            raise GameStateError(
                f"Invalid side to move: {model.side_to_move!r}. \nPick one from {','.join(c.value for c in Color)}"
            )

        # create the Game
        return cls(
            board=Board.from_string(model.current_board),
            side_to_move=Cell[side_name],
            moves=[Move.from_text(text) for text in model.moves],
            history=list(model.history_boards),
            status=Status[status_name],
            outcome=Outcome(model.outcome) if model.outcome else None,
            finish_reason=(
                FinishReason(model.finish_reason) if model.finish_reason else None
            ),
            started_at=model.started_at,
        )

    def to_model(self) -> GameModel:
        """Encode back into a format the Service layer uses"""

        return GameModel(
            current_board=self.board.to_string(),
            side_to_move=self.side_to_move.to_color().value,
            history_boards=list(self.history),
            moves=[move.to_text() for move in self.moves],
            status=self.status.name.lower(),
            outcome=self.outcome.value if self.outcome else None,
            finish_reason=self.finish_reason.value if self.finish_reason else None,
            started_at=self.started_at,
        )

    @property
    def is_finished(self) -> bool:
        return self.status == Status.FINISHED

    @property
    def winner(self) -> Optional[Cell]:
        """None while the game is running, and also for a draw"""
        match self.outcome:
            case Outcome.BLACK_WINS:
                return Cell.BLACK
            case Outcome.WHITE_WINS:
                return Cell.WHITE
            case _:
                return None

    def legal_moves(self) -> list[Move]:
        """
        The complete, ordered set of legal moves for the side to move.
        ----

        These can be used to display to the user, and the very same list is used to check a submitted move.
        A finished game has no legal moves.
        """
        if self.is_finished:
            return []
        return generate_moves(self.side_to_move, self.board)

    def legal_destinations(self) -> dict[Position, frozenset[MoveKind]]:
        """Every cell the side to move can reach, with the kind(s) of move that get there. Row-major."""
        reached: list[tuple[Position, MoveKind]] = []
        for move in self.legal_moves():
            assert move.to_position is not None and move.kind is not None
            reached.append((move.to_position, move.kind))
        return group_destinations(reached)

    def apply_move(self, move: Move) -> TurnTransition:
        """
        Attempt to make a move
        -----

        1. refuse if the game has finished, or if the move is not one of the legal moves
        2. store the board before the move in the history
        3. update the board (clone/jump + captures)
        4. update the list of moves
        5. hand the turn over and check for end conditions (forced passes, game over)

        Nothing is changed when the move is refused.
        """
        if self.is_finished:
            raise GameOverError(f"Game is over ({self.outcome}). No more moves accepted.")

        if move not in self.legal_moves():
            raise IllegalMoveError(
                f"Move not allowed for {self.side_to_move.name.lower()}: {move}"
            )

        mover = self.side_to_move
        self._update_history()
        captured = self._update_board(move, mover)
        self._update_moves(move)
        logger.debug(
            "%s played %s, captured %d piece(s)", mover.name, move, len(captured)
        )

        self.side_to_move = mover.opponent()
        forced_pass = self._settle_turn()

        return TurnTransition(
            move=move,
            mover=mover,
            captured=captured,
            forced_pass=forced_pass,
            status=self.status,
            side_to_move=None if self.is_finished else self.side_to_move,
            outcome=self.outcome,
        )

    def resign(self) -> None:
        """The side to move gives up. Their opponent wins, whatever the count on the board."""
        if self.is_finished:
            raise GameOverError(f"Game is over ({self.outcome}). Cannot resign anymore.")

        outcome = (
            Outcome.WHITE_WINS if self.side_to_move == Cell.BLACK else Outcome.BLACK_WINS
        )
        logger.info("%s resigned", self.side_to_move.name)
        self._finish(FinishReason.RESIGNATION, outcome)

    def current_state(self) -> GameState:
        return GameState(
            board=self.board.copy(),
            status=self.status,
            side_to_move=None if self.is_finished else self.side_to_move,
            outcome=self.outcome,
            finish_reason=self.finish_reason,
            piece_counts=MappingProxyType(self.board.piece_counts()),
        )

    def snapshot(self, with_moves: bool = False) -> BoardSnapshot:
        """Read-only snapshot for the printer. `with_moves` adds the legal destinations of the side to move."""
        cells = MappingProxyType(dict(self.board.position))
        if not with_moves:
            return BoardSnapshot(cells)
        return BoardSnapshot(cells, MappingProxyType(self.legal_destinations()))

    # -- PRIVATE HELPERS ---
    def _update_history(self) -> None:
        """Before making a new move, commit the board prior to the move to the history."""
        self.history.append(self.board.to_string())

    def _update_board(self, move: Move, mover: Cell) -> list[Position]:
        """Clone or jump onto the target, then flip the surrounding opponent pieces."""
        # for the type checker: passes are never among the legal moves
        assert move.from_position is not None and move.to_position is not None

        if move.kind == MoveKind.JUMP:
            self.board.set_cell(move.from_position, Cell.EMPTY)
        self.board.set_cell(move.to_position, mover)

        captured = captured_positions(move.to_position, mover, self.board)
        for square in captured:
            self.board.set_cell(square, mover)
        return captured

    def _update_moves(self, move: Move) -> None:
        self.moves.append(move)

    def _settle_turn(self) -> Optional[Cell]:
        """
        Performs checks to see if the side to move can play, or if the game has ended, and changes the state accordingly.
        ----

        * Board full --> game over.
        * Side to move has a move --> nothing to do.
        * Side to move is blocked --> forced pass. If the opponent is blocked as well --> game over.
          Otherwise the turn goes to the opponent, recorded as a pass in the list of moves.

        Returns the side that was forced to pass (if any).
        """
        if self.board.is_full():
            self._finish(FinishReason.BOARD_FULL)
            return None

        blocked = self.side_to_move
        if has_any_move(blocked, self.board):
            return None

        logger.debug("%s has no legal move and must pass", blocked.name)
        opponent = blocked.opponent()
        if not has_any_move(opponent, self.board):
            self._finish(FinishReason.NO_MOVES)
            return blocked

        self._update_moves(PASS)
        self.side_to_move = opponent
        return blocked

    def _finish(
        self, reason: FinishReason, outcome: Optional[Outcome] = None
    ) -> None:
        self.status = Status.FINISHED
        self.finish_reason = reason
        self.outcome = outcome or self._outcome_by_count()
        logger.info("Game finished (%s): %s", reason.value, self.outcome.value)

    def _outcome_by_count(self) -> Outcome:
        """More pieces wins, an equal count is a draw"""
        counts = self.board.piece_counts()
        if counts[Cell.BLACK] > counts[Cell.WHITE]:
            return Outcome.BLACK_WINS
        if counts[Cell.WHITE] > counts[Cell.BLACK]:
            return Outcome.WHITE_WINS
        return Outcome.DRAW
