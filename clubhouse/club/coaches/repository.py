"""Coach repository"""
from typing import List, Optional

from sqlalchemy import select

from clubhouse.database.repository import BaseRepository
from clubhouse.database.tables import CoachTable
from ..models import Coach, CoachInput, CoachUpdate


class CoachRepository(BaseRepository):

    def find_all(self) -> List[Coach]:
        rows = self.db.scalars(select(CoachTable).order_by(CoachTable.id)).all()
        return [Coach.model_validate(row) for row in rows]

    def find_by_id(self, coach_id: int) -> Optional[Coach]:
        row = self._get(CoachTable, coach_id)
        return Coach.model_validate(row) if row else None

    def add_coach(self, coach: CoachInput) -> Coach:
        self._ensure_team(coach.team_id)
        row = CoachTable(**coach.model_dump())
        self.db.add(row)
        self._commit()
        return Coach.model_validate(row)

    def update_coach(self, coach_id: int, coach: CoachUpdate) -> Coach:
        row = self._get_or_raise(CoachTable, coach_id, f"Coach with id {coach_id} not found")
        fields = coach.model_dump(exclude_unset=True)
        self._ensure_team(fields.get("team_id"))
        for field, value in fields.items():
            setattr(row, field, value)
        self._commit()
        return Coach.model_validate(row)

    def remove_coach(self, coach_id: int) -> None:
        row = self._get_or_raise(CoachTable, coach_id, f"Coach with id {coach_id} not found")
        self.db.delete(row)
        self._commit()
