"""
BoardState is the entrypoint into the tracker for the service layer.

It owns the grid and the move log, and orchestrates one move at a time:
token -> strip decorations -> (castling | parse -> find piece -> move) -> append to history.

NOTE: not safe for concurrent use. Callers must make sure only one move is in flight per instance.
"""

import logging
from typing import Iterable, Optional, Self

from src.core.exceptions import (
    CastlingUnavailableError,
    InvalidNotationError,
    NotationError,
)
from src.tracker.board import Board
from src.tracker.castling import castle
from src.tracker.matcher import find_piece
from src.tracker.notation import (
    CastlingSide,
    parse_castling,
    parse_notation,
    strip_decorations,
)
from src.tracker.outcome import MoveOutcome
from src.tracker.pieces import Color

logger = logging.getLogger(__name__)


class BoardState:
    """
    The grid + the log of accepted moves.

    Side to move
    ----
    White moves first, and the side to move flips with every entry in the log.
    It only matters for castling: the side to move castles, unless its king and rook are not at home
    while the opponent's are. Piece moves ignore it and take the first fitting piece in scan order.
    """

    def __init__(
        self, board: Optional[Board] = None, history: Iterable[str] = ()
    ) -> None:
        self._board = Board.starting_position()
        self._history: list[str] = list(history)
        if board is not None:
            self.restore(board)

    @classmethod
    def from_placement(cls, placement: str, history: Iterable[str] = ()) -> Self:
        """Rebuild from a stored FEN piece placement and move log"""
        return cls(Board.from_fen(placement), history)

    # --- READ ---
    @property
    def history(self) -> tuple[str, ...]:
        return tuple(self._history)

    @property
    def side_to_move(self) -> Color:
        """White moves first, then sides alternate with every entry in the move log."""
        return Color.WHITE if len(self._history) % 2 == 0 else Color.BLACK

    def snapshot(self) -> Board:
        """A copy of the board. Changing it does not change this state."""
        return self._board.copy()

    def placement(self) -> str:
        return self._board.to_fen()

    # --- WRITE ---
    def restore(self, board: Board) -> None:
        """Replace the whole board (by a copy of the one given). The move log is left as is."""
        board.validate()
        new_board = board.copy()
        new_board.sync_positions()
        self._board = new_board

    def append_history(self, notation: str) -> None:
        """Log a move that was validated elsewhere, without touching the board"""
        self._history.append(notation)

    def apply_move(self, notation: Optional[str]) -> MoveOutcome:
        """
        Attempt to make a move
        -----

        1. Clean up the token (whitespace, check and mate markers)
        2. Castling tokens: move king + rook of the side to move
        3. Anything else: parse, find the piece it refers to, and move it
        4. Append the cleaned up token to the history

        Failures come back as an unsuccessful MoveOutcome. In that case neither board nor history changed.
        """
        if not notation:
            return self._reject("", InvalidNotationError("Empty move."))

        cleaned = strip_decorations(notation)
        # work on a copy, so a failure halfway cannot leave a half-updated board behind
        board = self._board.copy()
        try:
            castling_side = parse_castling(cleaned)
            if castling_side is not None:
                outcome = self._castle(board, cleaned, castling_side)
            else:
                outcome = self._move(board, cleaned)
        except NotationError as error:
            return self._reject(cleaned, error)

        self._board = board
        self._history.append(cleaned)
        logger.debug(
            "applied %s: %s -> %s", cleaned, outcome.from_square, outcome.to_square
        )
        return outcome

    # -- PRIVATE HELPERS ---
    def _move(self, board: Board, notation: str) -> MoveOutcome:
        request = parse_notation(notation)
        # turn order is not enforced: the first fitting piece of either color moves
        origin = find_piece(
            board, request.piece_type, request.destination, request.disambiguator
        )
        captured = board.move_piece(origin, request.destination)
        return MoveOutcome(
            notation,
            from_square=origin,
            to_square=request.destination,
            captured=captured,
        )

    def _castle(self, board: Board, notation: str, side: CastlingSide) -> MoveOutcome:
        try:
            result = castle(board, side, self.side_to_move)
        except CastlingUnavailableError:
            result = castle(board, side, self.side_to_move.opponent)
        return MoveOutcome(
            notation,
            from_square=result.squares.king_from,
            to_square=result.squares.king_to,
            replaced=result.replaced,
        )

    def _reject(self, notation: str, error: NotationError) -> MoveOutcome:
        logger.warning("rejected move %r: %s", notation, error)
        return MoveOutcome.failed(notation, error)
