"""Helpers for implementing Castling rules. Need to be imported by multiple sources"""

from dataclasses import dataclass
from typing import Self

from src.core.exceptions import CastlingUnavailableError
from src.tracker.board import Board
from src.tracker.notation import CastlingSide
from src.tracker.pieces import Color, Piece, PieceType
from src.tracker.square import Square


@dataclass(frozen=True)
class CastlingSquares:
    """
    Store the squares where king/rook start from/end up in by castling.
    """

    king_from: Square
    king_to: Square
    rook_from: Square
    rook_to: Square

    @classmethod
    def from_algebraic(cls, k_from: str, k_to: str, r_from: str, r_to: str) -> Self:
        """Convenience method: to make mapping shown below more readable"""
        king_from = Square.from_algebraic(k_from)
        king_to = Square.from_algebraic(k_to)
        rook_from = Square.from_algebraic(r_from)
        rook_to = Square.from_algebraic(r_to)
        return cls(king_from, king_to, rook_from, rook_to)


# The moves (in classical chess) made when castling
CASTLING_RULES: dict[tuple[Color, CastlingSide], CastlingSquares] = {
    (Color.WHITE, CastlingSide.KING_SIDE): CastlingSquares.from_algebraic(
        "e1", "g1", "h1", "f1"
    ),
    (Color.WHITE, CastlingSide.QUEEN_SIDE): CastlingSquares.from_algebraic(
        "e1", "c1", "a1", "d1"
    ),
    (Color.BLACK, CastlingSide.KING_SIDE): CastlingSquares.from_algebraic(
        "e8", "g8", "h8", "f8"
    ),
    (Color.BLACK, CastlingSide.QUEEN_SIDE): CastlingSquares.from_algebraic(
        "e8", "c8", "a8", "d8"
    ),
}


@dataclass(frozen=True)
class CastlingResult:
    squares: CastlingSquares
    # pieces that stood on the king's or rook's target square, in that order
    replaced: tuple[Piece, ...] = ()


def castle(board: Board, side: CastlingSide, color: Color) -> CastlingResult:
    """
    Move both the King and the Rook
    ---

    The king hops two files towards the rook, the rook lands on the square the king passed over.

    NOTE: Only checks that both pieces stand on their home squares. Check, attacked or occupied squares in between,
    and whether either piece moved earlier in the game are not considered. Whatever stands on a target square
    gets replaced, and is handed back in the result.
    """
    squares = CASTLING_RULES[(color, side)]
    if not board.has_piece(squares.king_from, PieceType.KING, color):
        raise CastlingUnavailableError(
            f"Cannot castle {side.value}: no {color.name.lower()} king on {squares.king_from.to_algebraic()}."
        )
    if not board.has_piece(squares.rook_from, PieceType.ROOK, color):
        raise CastlingUnavailableError(
            f"Cannot castle {side.value}: no {color.name.lower()} rook on {squares.rook_from.to_algebraic()}."
        )

    replaced = [
        board.move_piece(squares.king_from, squares.king_to),
        board.move_piece(squares.rook_from, squares.rook_to),
    ]
    return CastlingResult(
        squares, tuple(piece for piece in replaced if piece is not None)
    )
