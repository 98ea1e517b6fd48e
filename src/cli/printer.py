"""Renders game information as text. Only reads: nothing here changes a game."""

from datetime import datetime, timedelta
from types import MappingProxyType
from typing import Optional

from src.api.models import GameResponse, LegalMovesResponse
from src.ataxx.board import Board
from src.ataxx.game import BoardSnapshot, group_destinations
from src.ataxx.position import BOARD_SIZE, COLUMN_CHARACTERS, Position
from src.cli import strings
from src.core.models import utc_now
from src.core.shared_types import Color, MoveKind


def snapshot_from_response(
    game: GameResponse, moves: Optional[LegalMovesResponse] = None
) -> BoardSnapshot:
    """
    Game.snapshot, rebuilt on this side of the service.

    The shell only holds responses (board string, position names), never a Game, so the cells are decoded again.
    Highlights are grouped by the same function Game.legal_destinations uses.
    """
    cells = MappingProxyType(Board.from_string(game.board).position)
    if moves is None:
        return BoardSnapshot(cells)

    reached = [(Position.from_text(name), MoveKind.CLONE) for name in moves.clone_destinations]
    reached += [(Position.from_text(name), MoveKind.JUMP) for name in moves.jump_destinations]
    return BoardSnapshot(cells, MappingProxyType(group_destinations(reached)))


def _symbol(snapshot: BoardSnapshot, square: Position) -> str:
    kinds = snapshot.highlights.get(square)
    if not kinds:
        return strings.CELL_SYMBOLS[snapshot.cells[square]]
    if kinds == {MoveKind.CLONE}:
        return strings.CLONE_MARK
    if kinds == {MoveKind.JUMP}:
        return strings.JUMP_MARK
    return strings.BOTH_MARK


def render_board(snapshot: BoardSnapshot) -> str:
    """
    Row 1 on top, column a on the left:

        a b c d e f g
      +---------------+
    1 | B . . . . . W |
    ...
    """
    header = "    " + " ".join(COLUMN_CHARACTERS)
    border = "  +" + "-" * (2 * BOARD_SIZE + 1) + "+"
    lines = [header, border]
    for row in range(BOARD_SIZE):
        symbols = " ".join(
            _symbol(snapshot, Position(row, column)) for column in range(BOARD_SIZE)
        )
        lines.append(f"{row + 1} | {symbols} |")
    lines.append(border)
    return "\n".join(lines)


def render_score(game: GameResponse) -> str:
    return strings.SCORE.format(
        black=game.piece_counts.get(Color.BLACK, 0),
        white=game.piece_counts.get(Color.WHITE, 0),
    )


def render_status(game: GameResponse) -> str:
    """Who is to move, or how the game ended"""
    if game.outcome is not None and game.finish_reason is not None:
        return strings.GAME_OVER.format(
            reason=strings.FINISH_REASON_LABELS[game.finish_reason],
            outcome=strings.OUTCOME_LABELS[game.outcome],
        )
    assert game.side_to_move is not None
    return strings.TO_MOVE.format(color=strings.COLOR_LABELS[game.side_to_move])


def render_game(game: GameResponse, moves: Optional[LegalMovesResponse] = None) -> str:
    board = render_board(snapshot_from_response(game, moves))
    return "\n".join([board, render_score(game), render_status(game)])


def render_history(move_history: list[str]) -> str:
    """Numbered like a score sheet: two moves per line"""
    if not move_history:
        return strings.NO_MOVES_YET
    lines = []
    for turn, start in enumerate(range(0, len(move_history), 2), start=1):
        pair = move_history[start : start + 2]
        lines.append(f"{turn}. " + " ".join(pair))
    return "\n".join(lines)


def format_elapsed(elapsed: timedelta) -> str:
    total_seconds = max(int(elapsed.total_seconds()), 0)
    hours, remainder = divmod(total_seconds, 3600)
    minutes, seconds = divmod(remainder, 60)
    return f"{hours}:{minutes:02d}:{seconds:02d}"


def render_elapsed(started_at: datetime, now: Optional[datetime] = None) -> str:
    now = now or utc_now()
    return strings.ELAPSED.format(elapsed=format_elapsed(now - started_at))
