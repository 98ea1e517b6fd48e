"""Unit tests for src/services/ataxx_service.py"""

from typing import Callable
from uuid import UUID, uuid4

import pytest

from src.api.models import (
    DeleteGameRequest,
    GameResponse,
    GetGameRequest,
    LegalMovesRequest,
    LegalMovesResponse,
    MoveRequest,
    MoveResponse,
    NewGameRequest,
    ResignRequest,
)
from src.core.exceptions import (
    GameError,
    GameOverError,
    IllegalMoveError,
    RepositoryError,
)
from src.core.shared_types import Color, FinishReason, Outcome, Status
from src.db.memory_repository import InMemoryGameRepository
from src.services.ataxx_service import AtaxxService

STARTING_BOARD = "B5EW35EW5EB"
BoardBuilder = Callable[[dict[str, str]], str]


def start(service: AtaxxService, **kwargs) -> UUID:
    return service.create_new_game(NewGameRequest(**kwargs)).game_id


def move(service: AtaxxService, game_id: UUID, text: str) -> MoveResponse:
    from_position, to_position = text.split("-")
    return service.make_move(
        MoveRequest(game_id=game_id, from_position=from_position, to_position=to_position)
    )


# --- SERVICE - CREATE NEW GAME ----
def test_create_a_new_game(
    service: AtaxxService, repository: InMemoryGameRepository
) -> None:
    """Check that new game is created, persisted in repo, and return has the appropriate information."""

    response = service.create_new_game(NewGameRequest())

    # Check response structure
    assert isinstance(response, GameResponse)
    assert isinstance(response.game_id, UUID)

    # Check response data
    assert response.board == STARTING_BOARD
    assert response.status == Status.IN_PROGRESS
    assert response.side_to_move == Color.BLACK
    assert response.outcome is None
    assert response.finish_reason is None
    assert response.piece_counts == {Color.BLACK: 2, Color.WHITE: 2}
    assert response.move_history == []

    # Check persisted data
    stored_game = repository.get_game(response.game_id)
    assert stored_game is not None
    assert stored_game.current_board == STARTING_BOARD
    assert stored_game.history_boards == []
    assert stored_game.moves == []
    assert stored_game.side_to_move == "black"
    assert stored_game.status == "in_progress"


def test_create_from_given_board(
    service: AtaxxService, make_board_string: BoardBuilder
) -> None:
    board = make_board_string({"4d": "W", "1a": "B", "1b": "B"})
    response = service.create_new_game(
        NewGameRequest(starting_board=board, side_to_move=Color.WHITE)
    )

    assert response.board == board
    assert response.side_to_move == Color.WHITE
    assert response.piece_counts == {Color.BLACK: 2, Color.WHITE: 1}


def test_create_on_empty_board_is_over_at_once(service: AtaxxService) -> None:
    """Nobody has a piece, so nobody can move: finished before the first move, as a draw."""
    response = service.create_new_game(NewGameRequest(starting_board="49E"))

    assert response.status == Status.FINISHED
    assert response.side_to_move is None
    assert response.outcome == Outcome.DRAW
    assert response.finish_reason == FinishReason.NO_MOVES


def test_create_when_side_to_move_is_blocked(
    service: AtaxxService, make_board_string: BoardBuilder
) -> None:
    """A loaded board where white is stuck: the turn passes to black right away."""
    pieces = {name: "B" for name in ["1b", "1c", "2a", "2b", "2c", "3a", "3b", "3c"]}
    board = make_board_string(pieces | {"1a": "W"})

    response = service.create_new_game(
        NewGameRequest(starting_board=board, side_to_move=Color.WHITE)
    )
    assert response.status == Status.IN_PROGRESS
    assert response.side_to_move == Color.BLACK
    assert response.move_history == ["pass"]


# --- SERVICE - GET GAME ----
def test_get_existing_game_state(service: AtaxxService) -> None:
    """Retrieve a game from the repository from an ID generated during creation."""
    game_id = start(service)

    response = service.get_game_state(GetGameRequest(game_id=game_id))
    assert isinstance(response, GameResponse)
    assert response.game_id == game_id
    assert response.board == STARTING_BOARD
    assert response.move_history == []


def test_attempt_to_find_unknown_game(service: AtaxxService) -> None:
    """Ensure exception is raised when trying to look up a game with an unknown ID."""
    with pytest.raises(RepositoryError):
        _ = service.get_game_state(GetGameRequest(game_id=uuid4()))


# --- SERVICE - LEGAL MOVES ----
def test_legal_moves_at_the_start(service: AtaxxService) -> None:
    game_id = start(service)

    response = service.legal_moves(LegalMovesRequest(game_id=game_id))
    assert isinstance(response, LegalMovesResponse)
    assert response.color == Color.BLACK
    assert len(response.legal_moves) == 16
    assert response.legal_moves[:3] == ["1a-1b", "1a-1c", "1a-2a"]
    assert response.clone_destinations == ["1b", "2a", "2b", "6f", "6g", "7f"]
    assert response.jump_destinations == [
        "1c",
        "2c",
        "3a",
        "3b",
        "3c",
        "5e",
        "5f",
        "5g",
        "6e",
        "7e",
    ]


def test_legal_moves_of_finished_game(service: AtaxxService) -> None:
    game_id = start(service, starting_board="49E")

    response = service.legal_moves(LegalMovesRequest(game_id=game_id))
    assert response.color is None
    assert response.legal_moves == []
    assert response.clone_destinations == []
    assert response.jump_destinations == []


def test_legal_moves_of_unknown_game(service: AtaxxService) -> None:
    with pytest.raises(GameError):
        _ = service.legal_moves(LegalMovesRequest(game_id=uuid4()))


# --- SERVICE - MAKE MOVE ----
def test_make_move_is_persisted(
    service: AtaxxService, repository: InMemoryGameRepository
) -> None:
    game_id = start(service)

    response = move(service, game_id, "1a-2b")
    assert response.move == "1a-2b"
    assert response.captured == []
    assert response.forced_pass is None
    assert response.game.side_to_move == Color.WHITE
    assert response.game.piece_counts == {Color.BLACK: 3, Color.WHITE: 2}
    assert response.game.move_history == ["1a-2b"]

    stored_game = repository.get_game(game_id)
    assert stored_game is not None
    assert stored_game.current_board == response.game.board
    assert stored_game.history_boards == [STARTING_BOARD]
    assert stored_game.moves == ["1a-2b"]
    assert stored_game.side_to_move == "white"


def test_jump_leaves_source_empty(service: AtaxxService) -> None:
    game_id = start(service)

    response = move(service, game_id, "1a-3c")
    assert response.game.piece_counts == {Color.BLACK: 2, Color.WHITE: 2}
    assert response.game.board.startswith("6EW")


@pytest.mark.parametrize(
    "text",
    [
        "1a-4a",  # too far away
        "1g-1f",  # white's piece, black to move
        "4d-4e",  # no piece on the source
        "1a-1a",  # not moving at all
    ],
)
def test_illegal_move_changes_nothing(
    service: AtaxxService, repository: InMemoryGameRepository, text: str
) -> None:
    game_id = start(service)
    before = repository.get_game(game_id)

    with pytest.raises(IllegalMoveError):
        _ = move(service, game_id, text)
    assert repository.get_game(game_id) == before


def test_move_with_capture(service: AtaxxService, make_board_string: BoardBuilder) -> None:
    board = make_board_string({"1a": "B", "2c": "W", "3c": "W", "7g": "W"})
    game_id = start(service, starting_board=board)

    response = move(service, game_id, "1a-2b")
    assert response.captured == ["2c", "3c"]
    assert response.game.piece_counts == {Color.BLACK: 4, Color.WHITE: 1}


def test_forced_pass_is_reported(
    service: AtaxxService, make_board_string: BoardBuilder
) -> None:
    """Black fills the last cell white could reach: white has to pass and black moves again."""
    pieces = {name: "B" for name in ["1b", "1c", "2a", "2b", "2c", "3a", "3b", "7g"]}
    game_id = start(service, starting_board=make_board_string(pieces | {"1a": "W"}))

    response = move(service, game_id, "3b-3c")
    assert response.forced_pass == Color.WHITE
    assert response.game.status == Status.IN_PROGRESS
    assert response.game.side_to_move == Color.BLACK
    assert response.game.move_history == ["3b-3c", "pass"]


def test_last_empty_cell_ends_the_game(service: AtaxxService) -> None:
    game_id = start(service, starting_board="BE47W")

    response = move(service, game_id, "1a-1b")
    assert response.captured == ["1c", "2a", "2b", "2c"]
    assert response.game.status == Status.FINISHED
    assert response.game.finish_reason == FinishReason.BOARD_FULL
    assert response.game.outcome == Outcome.WHITE_WINS
    assert response.game.side_to_move is None

    with pytest.raises(GameOverError):
        _ = move(service, game_id, "2a-3a")


def test_move_in_unknown_game(service: AtaxxService) -> None:
    with pytest.raises(RepositoryError):
        _ = move(service, uuid4(), "1a-2b")


# --- SERVICE - RESIGN ----
def test_resign(service: AtaxxService) -> None:
    """Black gives up even though the count is level: white wins."""
    game_id = start(service)

    response = service.resign(ResignRequest(game_id=game_id))
    assert response.status == Status.FINISHED
    assert response.outcome == Outcome.WHITE_WINS
    assert response.finish_reason == FinishReason.RESIGNATION
    assert response.side_to_move is None

    stored = service.get_game_state(GetGameRequest(game_id=game_id))
    assert stored == response

    with pytest.raises(GameOverError):
        _ = service.resign(ResignRequest(game_id=game_id))
    with pytest.raises(GameOverError):
        _ = move(service, game_id, "1a-2b")


def test_white_resigns(service: AtaxxService) -> None:
    game_id = start(service)
    _ = move(service, game_id, "1a-2b")

    response = service.resign(ResignRequest(game_id=game_id))
    assert response.outcome == Outcome.BLACK_WINS


# --- SERVICE - DELETE GAME ----
def test_delete_game(service: AtaxxService, repository: InMemoryGameRepository) -> None:
    game_id = start(service)
    other_id = start(service)

    service.delete_game(DeleteGameRequest(game_id=game_id))
    assert len(repository) == 1
    with pytest.raises(RepositoryError):
        _ = service.get_game_state(GetGameRequest(game_id=game_id))
    assert service.get_game_state(GetGameRequest(game_id=other_id)).game_id == other_id


def test_delete_unknown_game_is_harmless(
    service: AtaxxService, repository: InMemoryGameRepository
) -> None:
    start(service)
    service.delete_game(DeleteGameRequest(game_id=uuid4()))
    assert len(repository) == 1
