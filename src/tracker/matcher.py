"""
Find the piece a notation token refers to.

Tie-break policy
-----
The board is scanned row-major: row 0 (1st rank) first, a-file to h-file within a row.
The first piece that fits the request wins. When two pieces of the same type could both reach
the destination and the token does not disambiguate, the one closest to White's back rank
(then closest to the a-file) is picked. No ambiguity error is raised.
"""

from typing import Optional

from src.core.exceptions import NoMatchingPieceError
from src.tracker.board import Board
from src.tracker.movement import can_reach
from src.tracker.pieces import Color, PieceType
from src.tracker.square import Square


def matches_disambiguator(origin: Square, disambiguator: str) -> bool:
    """Every letter must be the origin's file, every digit the origin's rank"""
    origin_label = origin.to_algebraic()
    for character in disambiguator:
        if character.isalpha() and character != origin_label[0]:
            return False
        if character.isdigit() and character != origin_label[1]:
            return False
    return True


def find_piece(
    board: Board,
    piece_type: PieceType,
    destination: Square,
    disambiguator: str = "",
    color: Optional[Color] = None,
) -> Square:
    """
    Return the square of the first piece (in scan order) that:
    * has the requested type (and color, if one is given)
    * is not already standing on the destination
    * fits the movement shape from its square to the destination
    * agrees with every character of the disambiguator
    """
    for origin in board.locate_pieces(piece_type, color):
        if origin == destination:
            continue

        piece = board.piece(origin)
        assert piece is not None
        if not can_reach(piece.type, piece.color, origin, destination):
            continue

        if matches_disambiguator(origin, disambiguator):
            return origin

    raise NoMatchingPieceError(
        f"No {piece_type.name.lower()} can reach {destination.to_algebraic()}"
        + (f" from {disambiguator!r}." if disambiguator else ".")
    )
