"""
Geometry of the base movement rules

Key idea: Use strategy pattern to define the movement shape for each piece type.

These predicates only answer "does the step from origin to destination have the right shape for this piece?".
They never look at the board: occupied squares in between (or at the destination) are not inspected.
"""

from typing import Callable

from src.tracker.pieces import Color, PieceType
from src.tracker.square import Square

# White moves UP the board (increasing rank), Black moves DOWN
PAWN_DIRECTION: dict[Color, int] = {Color.WHITE: 1, Color.BLACK: -1}
PAWN_STARTING_RANK: dict[Color, int] = {Color.WHITE: 2, Color.BLACK: 7}


def _deltas(origin: Square, destination: Square) -> tuple[int, int]:
    """(delta_file, delta_rank)"""
    return destination.file - origin.file, destination.rank - origin.rank


# --- MOVEMENT RULES ---
def knight_shape(origin: Square, destination: Square, color: Color) -> bool:
    """Knights always move such that |delta_rank| + |delta_file| = 3 (and neither is zero)"""
    df, dr = _deltas(origin, destination)
    return (abs(df), abs(dr)) in [(2, 1), (1, 2)]


def bishop_shape(origin: Square, destination: Square, color: Color) -> bool:
    """Bishops move diagonally: |delta_rank| = |delta_file|"""
    df, dr = _deltas(origin, destination)
    return abs(df) == abs(dr) != 0


def rook_shape(origin: Square, destination: Square, color: Color) -> bool:
    """Rooks move either horizontally or vertically"""
    df, dr = _deltas(origin, destination)
    return (df == 0) != (dr == 0)


def queen_shape(origin: Square, destination: Square, color: Color) -> bool:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    return rook_shape(origin, destination, color) or bishop_shape(
        origin, destination, color
    )


def king_shape(origin: Square, destination: Square, color: Color) -> bool:
    """
    The king can move by a single square at the time.

    NOTE: staying put also fits this shape. Rejecting no-op moves is up to the caller.
    Castling is handled separately.
    """
    df, dr = _deltas(origin, destination)
    return abs(df) <= 1 and abs(dr) <= 1


def pawn_shape(origin: Square, destination: Square, color: Color) -> bool:
    """
    A pawn:
    - moves by a single square forward.
    - It can move by two in their first move (so when on their starting rank)
    - takes diagonally

    Whether a diagonal step actually captures something is not checked.
    """
    df, dr = _deltas(origin, destination)
    direction = PAWN_DIRECTION[color]
    if df == 0:
        single_push = dr == direction
        double_push = (
            origin.rank == PAWN_STARTING_RANK[color] and dr == 2 * direction
        )
        return single_push or double_push
    return abs(df) == 1 and dr == direction


# -- STRATEGY PATTERN: MOVEMENT RULES ---
ShapeFn = Callable[[Square, Square, Color], bool]
MOVEMENT_RULES: dict[PieceType, ShapeFn] = {
    PieceType.PAWN: pawn_shape,
    PieceType.KNIGHT: knight_shape,
    PieceType.BISHOP: bishop_shape,
    PieceType.ROOK: rook_shape,
    PieceType.QUEEN: queen_shape,
    PieceType.KING: king_shape,
}


def can_reach(
    piece_type: PieceType, color: Color, origin: Square, destination: Square
) -> bool:
    """Look up the rule for the piece type and apply it."""
    return MOVEMENT_RULES[piece_type](origin, destination, color)
