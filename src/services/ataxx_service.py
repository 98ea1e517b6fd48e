"""Orchestration of communication from the shell to business logic and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

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
from src.ataxx.cells import Cell
from src.ataxx.game import Game
from src.ataxx.moves import Move
from src.core.exceptions import RepositoryError
from src.core.models import GameModel
from src.core.shared_types import MoveKind
from src.db.repository import GameRepository

logger = logging.getLogger(__name__)


class AtaxxService:
    """Orchestration of layers for an Ataxx game."""

    def __init__(self, repository: GameRepository) -> None:
        self.repo = repository

    # -- Shell command logic ---
    def create_new_game(self, request: NewGameRequest) -> GameResponse:
        """Start a game, from the standard setup or from the board supplied in the request."""

        new_game = Game.new_game(
            starting_board=request.starting_board,
            side_to_move=Cell.from_color(request.side_to_move),
        )
        stored_game, game_id = self.repo.create_game(new_game.to_model())
        logger.debug("Created game %s", game_id)
        return self._create_game_response(game_id, stored_game)

    def get_game_state(self, request: GetGameRequest) -> GameResponse:
        """Retrieve current game state."""
        game_model = self._fetch_game(request.game_id)
        return self._create_game_response(request.game_id, game_model)

    def legal_moves(self, request: LegalMovesRequest) -> LegalMovesResponse:
        """retrieve set of legal moves, plus the destinations split by kind (for highlighting)."""

        game = Game.from_model(self._fetch_game(request.game_id))
        destinations = game.legal_destinations()
        return LegalMovesResponse(
            game_id=request.game_id,
            color=None if game.is_finished else game.side_to_move.to_color(),
            legal_moves=[move.to_text() for move in game.legal_moves()],
            clone_destinations=[
                square.to_text()
                for square, kinds in destinations.items()
                if MoveKind.CLONE in kinds
            ],
            jump_destinations=[
                square.to_text()
                for square, kinds in destinations.items()
                if MoveKind.JUMP in kinds
            ],
        )

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Play a move for the side to move. Forced passes and the end of the game are settled before the game is stored."""

        game = Game.from_model(self._fetch_game(request.game_id))

        # Attempt the move
        transition = game.apply_move(Move.from_text(request.move_text))

        # Capture updated state and store it
        after_move = game.to_model()
        self.repo.update_game(request.game_id, after_move)

        return MoveResponse(
            game=self._create_game_response(request.game_id, after_move),
            move=transition.move.to_text(),
            captured=[square.to_text() for square in transition.captured],
            forced_pass=(
                transition.forced_pass.to_color() if transition.forced_pass else None
            ),
        )

    def resign(self, request: ResignRequest) -> GameResponse:
        """The side to move gives up."""

        game = Game.from_model(self._fetch_game(request.game_id))
        game.resign()
        after_resign = game.to_model()
        self.repo.update_game(request.game_id, after_resign)
        return self._create_game_response(request.game_id, after_resign)

    def delete_game(self, request: DeleteGameRequest) -> None:
        """Forget a game (when a new one replaces it, or the session ends)."""
        self.repo.delete_game(request.game_id)

    # -- Internal helpers --
    def _create_game_response(self, game_id: UUID, model: GameModel) -> GameResponse:
        """Stored record -> what the shell gets to see: board string, side or outcome, piece counts."""

        game = Game.from_model(model)
        state = game.current_state()
        return GameResponse(
            game_id=game_id,
            board=model.current_board,
            status=model.status.replace("_", " "),
            side_to_move=state.side_to_move.to_color() if state.side_to_move else None,
            outcome=state.outcome,
            finish_reason=state.finish_reason,
            piece_counts={
                cell.to_color(): count for cell, count in state.piece_counts.items()
            },
            move_history=model.moves,
            started_at=model.started_at,
        )

    def _fetch_game(self, game_id: UUID) -> GameModel:
        """Stored record of the game. Unknown IDs are an error here, not in the repository."""
        game_model = self.repo.get_game(game_id)
        if game_model is None:
            raise RepositoryError(f"Game with {game_id=} not found.")
        return game_model
