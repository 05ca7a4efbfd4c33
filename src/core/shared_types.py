"""
Type definitions used across layers
"""

from enum import StrEnum

# --- NOTE: The tracker uses its own Color and PieceType (src/tracker/pieces.py). These are the plain string versions
# --- that get sent across boundaries. Same names, as that reads clearly. Let the imports show which version is used where.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
