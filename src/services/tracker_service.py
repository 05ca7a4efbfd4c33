"""Orchestration of communication from API models to the board tracker and persistence layers (and the reverse direction)."""

import logging
from uuid import UUID

from src.api.models import (
    ApplyMoveRequest,
    BoardResponse,
    CreateBoardRequest,
    DeleteBoardRequest,
    GetBoardRequest,
    MoveResponse,
    RecordMoveRequest,
)
from src.core.exceptions import RepositoryError
from src.core.models import BoardModel
from src.core.shared_types import Color, PieceType
from src.db.repository import BoardRepository
from src.tracker.board import STARTING_PLACEMENT
from src.tracker.board_state import BoardState

logger = logging.getLogger(__name__)


class TrackerService:
    """Orchestration of layers for the board tracker."""

    def __init__(self, repository: BoardRepository) -> None:
        self.repo = repository

    # -- Request logic ---
    def create_board(self, request: CreateBoardRequest) -> BoardResponse:
        """Start tracking a new board (standard starting position, unless another placement is given)."""

        # Build the state first: an invalid placement should never reach the repository
        placement = request.starting_placement or STARTING_PLACEMENT
        state = BoardState.from_placement(placement)

        stored_board, board_id = self.repo.create_board(self._to_model(state))
        logger.info("created board %s", board_id)
        return self._create_board_response(board_id, stored_board)

    def get_board(self, request: GetBoardRequest) -> BoardResponse:
        """Retrieve current board state."""
        board_model = self._fetch_board(request.board_id)
        return self._create_board_response(request.board_id, board_model)

    def apply_move(self, request: ApplyMoveRequest) -> MoveResponse:
        """
        Make a move attempt.
        ----
        A rejected move is not an error for the service: it is reported in the response, and nothing gets stored.
        """
        stored_model = self._fetch_board(request.board_id)
        state = self._to_state(stored_model)

        outcome = state.apply_move(request.notation)
        if outcome.success:
            self.repo.update_board(request.board_id, self._to_model(state))
        else:
            logger.info(
                "board %s: move %r rejected (%s)",
                request.board_id,
                request.notation,
                outcome.error,
            )

        return MoveResponse(
            board_id=request.board_id,
            notation=outcome.notation,
            accepted=outcome.success,
            error=outcome.error.value if outcome.error else None,
            moved_from=outcome.from_square.to_algebraic()
            if outcome.from_square
            else None,
            moved_to=outcome.to_square.to_algebraic() if outcome.to_square else None,
            captured=PieceType[outcome.captured.type.name]
            if outcome.captured
            else None,
            replaced=[PieceType[piece.type.name] for piece in outcome.replaced],
            placement=state.placement(),
            history=list(state.history),
        )

    def record_move(self, request: RecordMoveRequest) -> BoardResponse:
        """Add an externally validated move to the log. The board itself stays as is."""
        stored_model = self._fetch_board(request.board_id)
        state = self._to_state(stored_model)
        state.append_history(request.notation)

        updated = self._to_model(state)
        self.repo.update_board(request.board_id, updated)
        return self._create_board_response(request.board_id, updated)

    def delete_board(self, request: DeleteBoardRequest) -> None:
        """Handle a request to delete a board record."""
        if self.repo.delete_board(request.board_id) is None:
            raise RepositoryError(f"Board with board_id={request.board_id} not found.")

    # -- Internal helpers --
    def _create_board_response(
        self, board_id: UUID, model: BoardModel
    ) -> BoardResponse:
        state = self._to_state(model)
        return BoardResponse(
            board_id=board_id,
            placement=model.placement,
            history=list(model.history),
            side_to_move=Color[state.side_to_move.name],
        )

    def _to_state(self, model: BoardModel) -> BoardState:
        return BoardState.from_placement(model.placement, model.history)

    def _to_model(self, state: BoardState) -> BoardModel:
        return BoardModel(placement=state.placement(), history=list(state.history))

    def _fetch_board(self, board_id: UUID) -> BoardModel:
        """Attempt to find the board in the repository and raise error if it fails."""
        board_model = self.repo.get_board(board_id)
        if board_model is None:
            raise RepositoryError(f"Board with {board_id=} not found.")
        return board_model
