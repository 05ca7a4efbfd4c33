"""Implementation of (Board)Repository using SQLAlchemy"""

import logging
from uuid import UUID, uuid4

from sqlalchemy import select
from sqlalchemy.orm import Session

from src.core.models import BoardModel
from src.db.schema import DBBoard

logger = logging.getLogger(__name__)


class SQLBoardRepository:
    """Data stored using SQL / methods implemented using SQLAlchemy"""

    def __init__(self, db_session: Session) -> None:
        self.db = db_session

    def get_board(self, board_id: UUID) -> BoardModel | None:
        """Get board by ID, if record exists."""
        board_db = self._fetch_board(board_id)
        if board_db:
            return self._to_model(board_db)
        return None

    def create_board(self, board: BoardModel) -> tuple[BoardModel, UUID]:
        """Store new board and return the stored data + newly created board ID."""

        new_id = uuid4()
        board_db = DBBoard(
            id=new_id,
            placement=board.placement,
            history=list(board.history),
        )
        self.db.add(board_db)
        self.db.commit()
        self.db.refresh(board_db)
        logger.info("stored new board %s", new_id)
        return self._to_model(board_db), new_id

    def update_board(self, board_id: UUID, board: BoardModel) -> BoardModel | None:
        """Replace placement and move log of an existing record."""
        board_db = self._fetch_board(board_id)
        if not board_db:
            return None
        board_db.placement = board.placement
        # new list object, so SQLAlchemy registers the change of the JSON column
        board_db.history = list(board.history)
        self.db.commit()
        self.db.refresh(board_db)
        return self._to_model(board_db)

    def delete_board(self, board_id: UUID) -> BoardModel | None:
        """Remove a board's record."""
        board_db = self._fetch_board(board_id)
        if not board_db:
            return None
        board_model = self._to_model(board_db)
        self.db.delete(board_db)
        self.db.commit()
        logger.info("deleted board %s", board_id)
        return board_model

    def _fetch_board(self, board_id: UUID) -> DBBoard | None:
        query = select(DBBoard).where(DBBoard.id == board_id)
        return self.db.scalar(query)

    def _to_model(self, board_db: DBBoard) -> BoardModel:
        """Convert SQLAlchemy model to data transfer model."""
        return BoardModel(
            placement=board_db.placement,
            history=list(board_db.history),
        )
