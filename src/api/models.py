"""Requests and Response models"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel, field_validator

from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType

BOARD_RANKS = 8


# --- REQUEST MODELS ---
class CreateBoardRequest(BaseModel):
    starting_placement: Optional[str] = None

    @field_validator("starting_placement")
    @classmethod
    def validate_starting_placement(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value

        ranks = value.strip().split("/")
        if len(ranks) != BOARD_RANKS:
            raise InvalidRequestError(
                f"Piece placement must contain {BOARD_RANKS} '/'-separated ranks."
            )
        return value.strip()


class GetBoardRequest(BaseModel):
    board_id: UUID


class ApplyMoveRequest(BaseModel):
    board_id: UUID
    notation: str

    @field_validator("notation")
    @classmethod
    def validate_notation(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Move notation cannot be blank.")
        return value


class RecordMoveRequest(BaseModel):
    """A move that was validated elsewhere: only gets added to the move log."""

    board_id: UUID
    notation: str

    @field_validator("notation")
    @classmethod
    def validate_notation(cls, value: str) -> str:
        if not value.strip():
            raise InvalidRequestError("Move notation cannot be blank.")
        return value


class DeleteBoardRequest(BaseModel):
    board_id: UUID


# --- RESPONSE MODELS ---
class BoardResponse(BaseModel):
    board_id: UUID
    placement: str
    history: list[str]
    side_to_move: Color


class MoveResponse(BaseModel):
    board_id: UUID
    notation: str
    accepted: bool
    error: Optional[str] = None
    moved_from: Optional[str] = None
    moved_to: Optional[str] = None
    captured: Optional[PieceType] = None
    replaced: list[PieceType] = []
    placement: str
    history: list[str]
