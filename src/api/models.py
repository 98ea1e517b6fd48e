"""Requests and Response models"""

from datetime import datetime
from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.ataxx.board_string import is_valid_board_string
from src.ataxx.position import COLUMN_CHARACTERS, ROW_CHARACTERS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, FinishReason, Outcome, Status

PositionText = str
MoveText = str


def _is_position_notation(value: str) -> bool:
    """'1a' - '7g': row digit followed by column letter"""
    return (
        len(value) == 2 and value[0] in ROW_CHARACTERS and value[1] in COLUMN_CHARACTERS
    )


# --- REQUEST MODELS ---
class NewGameRequest(BaseModel):
    starting_board: Optional[str] = None
    side_to_move: Color = Color.BLACK

    @field_validator("starting_board")
    @classmethod
    def validate_starting_board(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        value = value.strip()
        if not is_valid_board_string(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a board: expected runs of E/B/W describing 49 cells."
            )
        return value


class GetGameRequest(BaseModel):
    game_id: UUID


class LegalMovesRequest(BaseModel):
    game_id: UUID


class MoveRequest(BaseModel):
    game_id: UUID
    from_position: PositionText
    to_position: PositionText

    @field_validator(*["from_position", "to_position"])
    @classmethod
    def validate_position(cls, value: str) -> str:
        value = value.strip()
        if not _is_position_notation(value):
            raise InvalidRequestError(
                f"Cannot interpret {value!r} as a valid position name."
            )
        return value

    @property
    def move_text(self) -> MoveText:
        return f"{self.from_position}-{self.to_position}"


class ResignRequest(BaseModel):
    game_id: UUID


class DeleteGameRequest(BaseModel):
    game_id: UUID


# --- RESPONSE MODELS ---
class GameResponse(BaseModel):
    game_id: UUID
    board: str
    status: Status
    side_to_move: Optional[Color]
    outcome: Optional[Outcome]
    finish_reason: Optional[FinishReason]
    piece_counts: dict[Color, int]
    move_history: list[MoveText]
    started_at: datetime


class LegalMovesResponse(BaseModel):
    game_id: UUID
    color: Optional[Color]
    legal_moves: list[MoveText]
    clone_destinations: list[PositionText]
    jump_destinations: list[PositionText]


class MoveResponse(BaseModel):
    game: GameResponse
    move: MoveText
    captured: list[PositionText]
    forced_pass: Optional[Color]
