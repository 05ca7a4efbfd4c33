"""
Short algebraic notation
-----

Turns a token like "e4", "Nf3", "exd5", "Nbd7" or "R1a3" into a MoveRequest the board can act on.

examples:
* "e4": a pawn moves to e4
* "Nf3": a knight moves to f3
* "exd5": a pawn from the e-file takes on d5
* "Nbd7": the knight on the b-file moves to d7
* "O-O" / "O-O-O": castling (not a MoveRequest, see `parse_castling()`)
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from src.core.exceptions import InvalidNotationError
from src.tracker.pieces import NOTATION_TO_PIECE, PieceType
from src.tracker.square import FILE_LETTERS, RANK_DIGITS, Square

CHECK_DECORATIONS = "+#"
CAPTURE_MARKER = "x"
CASTLE_MARKER = "O"


class CastlingSide(Enum):
    """Values are the tokens that trigger the castling move."""

    KING_SIDE = "O-O"
    QUEEN_SIDE = "O-O-O"


@dataclass(frozen=True)
class MoveRequest:
    """Everything the notation tells us about a (non-castling) move."""

    piece_type: PieceType
    destination: Square
    disambiguator: str = ""
    is_capture: bool = False


def strip_decorations(notation: str) -> str:
    """Remove check / mate markers (anywhere in the token) and surrounding whitespace"""
    for decoration in CHECK_DECORATIONS:
        notation = notation.replace(decoration, "")
    return notation.strip()


def parse_castling(notation: str) -> Optional[CastlingSide]:
    """The castling side for a castling token, None for anything else."""
    try:
        return CastlingSide(notation)
    except ValueError:
        return None


def parse_notation(notation: str) -> MoveRequest:
    """
    Parse a decoration-free token.

    1. An uppercase first character (other than the castle marker) names the piece. No letter means a pawn.
    2. An "x" anywhere flags a capture and is removed.
    3. The final two characters are the destination.
    4. Whatever sits in between is the disambiguator (file letter, rank digit, or both).
    """
    if len(notation) < 2:
        raise InvalidNotationError(f"Move {notation!r} is too short.")

    piece_type = PieceType.PAWN
    start_index = 0
    first_character = notation[0]
    if first_character.isupper() and first_character != CASTLE_MARKER:
        if first_character not in NOTATION_TO_PIECE:
            raise InvalidNotationError(
                f"Unknown piece letter {first_character!r} in move {notation!r}."
            )
        piece_type = NOTATION_TO_PIECE[first_character]
        start_index = 1

    is_capture = CAPTURE_MARKER in notation
    body = notation.replace(CAPTURE_MARKER, "")
    if len(body) - start_index < 2:
        raise InvalidNotationError(f"Move {notation!r} has no destination square.")

    destination = Square.from_algebraic(body[-2:])
    disambiguator = body[start_index:-2]
    for character in disambiguator:
        if character not in FILE_LETTERS and character not in RANK_DIGITS:
            raise InvalidNotationError(
                f"Cannot use {character!r} to disambiguate move {notation!r}."
            )

    return MoveRequest(piece_type, destination, disambiguator, is_capture)
