"""Unit tests for src/db/sql_repository.py"""

from uuid import uuid4

from sqlalchemy.orm import Session

from src.db.sql_repository import BoardModel, SQLBoardRepository

STARTING_PLACEMENT = "rnbqkbnr/pppppppp/8/8/8/8/PPPPPPPP/RNBQKBNR"
E4_PLACEMENT = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR"


def test_create_board(db_session_repo: Session) -> None:
    """Conversion from a BoardModel to DBBoard for a new entry to the database."""
    model = BoardModel(placement=STARTING_PLACEMENT, history=["mock", "O-O", "exd5"])

    repo = SQLBoardRepository(db_session_repo)
    record_in_db, _ = repo.create_board(model)
    assert isinstance(record_in_db, BoardModel)
    assert record_in_db == model


def test_get_board_by_id(db_session_repo: Session) -> None:
    model = BoardModel(placement=STARTING_PLACEMENT)

    repo = SQLBoardRepository(db_session_repo)
    expected_board, board_id = repo.create_board(model)
    board_found = repo.get_board(board_id)
    assert isinstance(board_found, BoardModel)
    assert board_found == expected_board
    assert board_found.history == []


def test_get_unknown_board(db_session_repo: Session) -> None:
    """
    Should return None if ID does not match anything in database.

    NOTE with an empty database, any id is a valid test case.
    """
    repo = SQLBoardRepository(db_session_repo)
    assert repo.get_board(uuid4()) is None

    # Now do it with creating a board, but retrieving from the wrong ID
    repo.create_board(BoardModel(placement=STARTING_PLACEMENT))
    assert repo.get_board(uuid4()) is None


def test_update_board(db_session_repo: Session) -> None:
    repo = SQLBoardRepository(db_session_repo)
    _, board_id = repo.create_board(BoardModel(placement=STARTING_PLACEMENT))

    updated = BoardModel(placement=E4_PLACEMENT, history=["e4"])
    record = repo.update_board(board_id, updated)
    assert record == updated

    # appending to the move log must be picked up as well
    appended = BoardModel(placement=E4_PLACEMENT, history=["e4", "e5"])
    repo.update_board(board_id, appended)
    assert repo.get_board(board_id) == appended


def test_update_unknown_board(db_session_repo: Session) -> None:
    repo = SQLBoardRepository(db_session_repo)
    assert repo.update_board(uuid4(), BoardModel(placement=STARTING_PLACEMENT)) is None


def test_delete_board(db_session_repo: Session) -> None:
    repo = SQLBoardRepository(db_session_repo)
    model = BoardModel(placement=E4_PLACEMENT, history=["e4"])
    _, board_id = repo.create_board(model)

    deleted = repo.delete_board(board_id)
    assert deleted == model
    assert repo.get_board(board_id) is None

    # deleting twice finds nothing the second time
    assert repo.delete_board(board_id) is None
