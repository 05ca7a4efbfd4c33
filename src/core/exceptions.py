"""
Custom exceptions shared across layers.

All of them derive from plain Exception (not ValueError), so pydantic validators let them through unwrapped.
"""


class TrackerError(Exception):
    """Top-level error of the board tracker. Catch this one if the specific reason does not matter."""


# --- NOTATION / MOVE APPLICATION ---
class NotationError(TrackerError):
    """A move token could not be applied to the board. Recoverable: the board is left untouched."""


class InvalidNotationError(NotationError):
    """Malformed or too short token, or a destination that does not decode to a square."""


class NoMatchingPieceError(NotationError):
    """No piece on the board matches the requested type, movement shape and disambiguator."""


class CastlingUnavailableError(NotationError):
    """King or rook of the side to move is not on its home square."""


# --- BOARD ---
class InvalidBoardError(TrackerError):
    """A board (or board placement string) that breaks the 8x8 / one-cell-per-piece invariants."""


# --- OUTER LAYERS ---
class InvalidRequestError(TrackerError):
    """Request model failed validation."""


class RepositoryError(TrackerError):
    """Record could not be found / stored."""
