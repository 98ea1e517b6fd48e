"""
Storage seam of the Service.

A game lives for one shell session, so InMemoryGameRepository is the only implementation.
Contract for every implementation:
* records go in and come out as GameModel copies: changing a returned model never changes the stored one
* an unknown game ID is answered with None, raising is left to the Service
"""

from typing import Protocol, runtime_checkable
from uuid import UUID

from src.core.models import GameModel


@runtime_checkable
class GameRepository(Protocol):
    def get_game(self, game_id: UUID) -> GameModel | None:
        """Stored record of the game, or None."""
        ...

    def create_game(self, game: GameModel) -> tuple[GameModel, UUID]:
        """Store a freshly started game under a new ID."""
        ...

    def update_game(self, game_id: UUID, game: GameModel) -> GameModel | None:
        """Overwrite the record after a move or resignation. None if there was nothing to overwrite."""
        ...

    def delete_game(self, game_id: UUID) -> GameModel | None:
        """Forget the game, handing back the last record (if any)."""
        ...
