"""
Boundary layer data model(s).

These objects can be used to communicate with the Service.
Both the shell (higher) and domain/repository layers (lower) use the model(s) defined here to send to/receive from the Service
(Decouples the data model specific to the repository, shell, or domain layer from the information needed to send across boundaries)
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class GameModel:
    """Transport-safe representation of an Ataxx game used between Shell, Service, Repository, and Game layers."""

    current_board: str
    side_to_move: str
    history_boards: list[str]
    moves: list[str]
    status: str
    outcome: Optional[str] = None
    finish_reason: Optional[str] = None
    started_at: datetime = field(default_factory=utc_now)
