"""The result handed back for every attempt to apply a move"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Self

from src.core.exceptions import (
    CastlingUnavailableError,
    InvalidNotationError,
    NoMatchingPieceError,
    NotationError,
)
from src.tracker.pieces import Piece
from src.tracker.square import Square


class MoveErrorKind(Enum):
    INVALID_NOTATION = "invalid notation"
    NO_MATCHING_PIECE = "no matching piece"
    CASTLING_UNAVAILABLE = "castling unavailable"


ERROR_KINDS: dict[type[NotationError], MoveErrorKind] = {
    InvalidNotationError: MoveErrorKind.INVALID_NOTATION,
    NoMatchingPieceError: MoveErrorKind.NO_MATCHING_PIECE,
    CastlingUnavailableError: MoveErrorKind.CASTLING_UNAVAILABLE,
}


@dataclass(frozen=True)
class MoveOutcome:
    """
    Either the move got applied (error is None), or it did not and nothing on the board changed.

    For castling, from/to squares are those of the king. Castling never sets `captured`:
    pieces it overwrites on the king and rook target squares are listed in `replaced`.
    """

    notation: str
    error: Optional[MoveErrorKind] = None
    message: str = ""
    from_square: Optional[Square] = None
    to_square: Optional[Square] = None
    captured: Optional[Piece] = None
    replaced: tuple[Piece, ...] = ()

    @property
    def success(self) -> bool:
        return self.error is None

    def __bool__(self) -> bool:
        return self.success

    @classmethod
    def failed(cls, notation: str, error: NotationError) -> Self:
        return cls(notation, error=ERROR_KINDS[type(error)], message=str(error))
