"""Unit tests for src/services/tracker_service.py"""

from typing import Generator
from uuid import UUID, uuid4

import pytest

from src.core.exceptions import InvalidBoardError, RepositoryError, TrackerError
from src.core.models import BoardModel
from src.core.shared_types import Color, PieceType
from src.services.tracker_service import (
    ApplyMoveRequest,
    BoardResponse,
    CreateBoardRequest,
    DeleteBoardRequest,
    GetBoardRequest,
    MoveResponse,
    RecordMoveRequest,
    TrackerService,
)

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
E4_PLACEMENT = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"


# --- MOCK DEPENDENCIES ----
class MockRepository:
    """Mock the BoardRepository using a dictionary of board models."""

    def __init__(self) -> None:
        self._boards: dict[UUID, BoardModel] = {}
        self.update_calls = 0

    def create_board(self, board: BoardModel) -> tuple[BoardModel, UUID]:
        board_id = uuid4()
        self._boards[board_id] = board
        return board, board_id

    def get_board(self, board_id: UUID) -> BoardModel | None:
        return self._boards.get(board_id)

    def update_board(self, board_id: UUID, board: BoardModel) -> BoardModel | None:
        if board_id not in self._boards:
            return None
        self.update_calls += 1
        self._boards[board_id] = board
        return board

    def delete_board(self, board_id: UUID) -> BoardModel | None:
        return self._boards.pop(board_id, None)

    def clear(self) -> None:
        """Clear the repository (useful in between tests)"""
        self._boards.clear()


@pytest.fixture
def mock_repository() -> Generator[MockRepository, None, None]:
    """Ensures to clear the repository between tests"""
    repo = MockRepository()
    try:
        yield repo
    finally:
        repo.clear()


@pytest.fixture
def service(mock_repository: MockRepository) -> TrackerService:
    return TrackerService(mock_repository)


# --- SERVICE - CREATE BOARD ----
def test_create_a_new_board(service: TrackerService, mock_repository: MockRepository) -> None:
    response = service.create_board(CreateBoardRequest())

    assert isinstance(response, BoardResponse)
    assert isinstance(response.board_id, UUID)
    assert response.placement == STARTING_PLACEMENT
    assert response.history == []
    assert response.side_to_move == Color.WHITE

    stored = mock_repository.get_board(response.board_id)
    assert stored == BoardModel(placement=STARTING_PLACEMENT, history=[])


def test_create_from_placement(service: TrackerService) -> None:
    response = service.create_board(CreateBoardRequest(starting_placement="r3k2r/8/8/8/8/8/8/R3K2R"))
    assert response.placement == "r3k2r/8/8/8/8/8/8/R3K2R"


def test_create_with_invalid_placement(service: TrackerService, mock_repository: MockRepository) -> None:
    """Make sure service propagates the exceptions, and nothing gets stored."""
    with pytest.raises(InvalidBoardError):
        service.create_board(CreateBoardRequest(starting_placement="9/8/8/8/8/8/8/8"))

    # any top-level custom exception will do for callers that do not care about the reason
    with pytest.raises(TrackerError):
        service.create_board(CreateBoardRequest(starting_placement="z7/8/8/8/8/8/8/8"))

    # a non-ASCII digit is no run of empty squares either
    with pytest.raises(InvalidBoardError):
        service.create_board(
            CreateBoardRequest(starting_placement="\u00b2/8/8/8/8/8/8/8")
        )

    assert mock_repository._boards == {}


# --- SERVICE - GET BOARD ----
def test_get_board(service: TrackerService) -> None:
    created = service.create_board(CreateBoardRequest())
    response = service.get_board(GetBoardRequest(board_id=created.board_id))
    assert response == created


def test_get_unknown_board(service: TrackerService) -> None:
    with pytest.raises(RepositoryError):
        service.get_board(GetBoardRequest(board_id=uuid4()))


# --- SERVICE - APPLY MOVE ----
def test_apply_move(service: TrackerService, mock_repository: MockRepository) -> None:
    created = service.create_board(CreateBoardRequest())
    response = service.apply_move(ApplyMoveRequest(board_id=created.board_id, notation="e4"))

    assert isinstance(response, MoveResponse)
    assert response.accepted
    assert response.error is None
    assert response.moved_from == "e2"
    assert response.moved_to == "e4"
    assert response.captured is None
    assert response.placement == E4_PLACEMENT
    assert response.history == ["e4"]

    assert mock_repository.get_board(created.board_id) == BoardModel(E4_PLACEMENT, ["e4"])
    assert service.get_board(GetBoardRequest(board_id=created.board_id)).side_to_move == Color.BLACK


def test_apply_capture(service: TrackerService) -> None:
    created = service.create_board(
        CreateBoardRequest(starting_placement="4k3/8/8/3p4/4P3/8/8/4K3")
    )
    response = service.apply_move(
        ApplyMoveRequest(board_id=created.board_id, notation="exd5")
    )
    assert response.accepted
    assert response.moved_from == "e4"
    assert response.captured == PieceType.PAWN
    assert response.replaced == []
    assert response.history == ["exd5"]


def test_apply_castling_over_pieces(service: TrackerService) -> None:
    created = service.create_board(CreateBoardRequest())
    response = service.apply_move(
        ApplyMoveRequest(board_id=created.board_id, notation="O-O")
    )
    assert response.accepted
    assert response.captured is None
    assert response.replaced == [PieceType.KNIGHT, PieceType.BISHOP]
    assert response.placement == "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQ1RK1"


def test_rejected_move_is_not_stored(service: TrackerService, mock_repository: MockRepository) -> None:
    created = service.create_board(CreateBoardRequest())
    response = service.apply_move(ApplyMoveRequest(board_id=created.board_id, notation="Nd5"))

    assert not response.accepted
    assert response.error == "no matching piece"
    assert response.moved_from is None
    assert response.placement == STARTING_PLACEMENT
    assert response.history == []
    assert mock_repository.update_calls == 0


def test_invalid_notation_is_reported(service: TrackerService) -> None:
    created = service.create_board(CreateBoardRequest())
    response = service.apply_move(ApplyMoveRequest(board_id=created.board_id, notation="Zz9"))
    assert not response.accepted
    assert response.error == "invalid notation"


def test_apply_move_to_unknown_board(service: TrackerService) -> None:
    with pytest.raises(RepositoryError):
        service.apply_move(ApplyMoveRequest(board_id=uuid4(), notation="e4"))


# --- SERVICE - RECORD MOVE ----
def test_record_move(service: TrackerService) -> None:
    created = service.create_board(CreateBoardRequest())
    response = service.record_move(RecordMoveRequest(board_id=created.board_id, notation="e4"))

    assert response.history == ["e4"]
    assert response.placement == STARTING_PLACEMENT
    assert response.side_to_move == Color.BLACK


# --- SERVICE - DELETE BOARD ----
def test_delete_board(service: TrackerService) -> None:
    created = service.create_board(CreateBoardRequest())
    service.delete_board(DeleteBoardRequest(board_id=created.board_id))

    with pytest.raises(RepositoryError):
        service.get_board(GetBoardRequest(board_id=created.board_id))


def test_delete_unknown_board(service: TrackerService) -> None:
    with pytest.raises(RepositoryError):
        service.delete_board(DeleteBoardRequest(board_id=uuid4()))
