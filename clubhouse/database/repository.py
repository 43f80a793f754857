"""
Base repository

Repositories are pure DB access: they wrap a request-scoped Session,
convert ORM rows into pydantic models and commit their own writes.
"""
from typing import Optional, Type, TypeVar

from loguru import logger
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from clubhouse.errors import NotFoundError
from .tables import INT32_MAX, Base, TeamTable

RowT = TypeVar("RowT", bound=Base)


class BaseRepository:
    """Shared session handling for the entity repositories"""

    def __init__(self, db: Session):
        self.db = db

    def _get(self, table: Type[RowT], row_id: int) -> Optional[RowT]:
        # ids outside the INTEGER range cannot exist
        if not 0 < row_id <= INT32_MAX:
            return None
        return self.db.get(table, row_id)

    def _get_or_raise(self, table: Type[RowT], row_id: int, message: str) -> RowT:
        row = self._get(table, row_id)
        if row is None:
            raise NotFoundError(message)
        return row

    def _ensure_team(self, team_id: Optional[int]) -> None:
        """Reject a team_id that points at no team"""
        if team_id is not None:
            self._get_or_raise(TeamTable, team_id, f"Team with id {team_id} not found")

    def _commit(self) -> None:
        """Commit, rolling back first if the store rejects the write"""
        try:
            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.error(f"Commit failed: {e}")
            raise
