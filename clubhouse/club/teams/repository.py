"""Team repository"""
from typing import List, Optional

from sqlalchemy import select

from clubhouse.database.repository import BaseRepository
from clubhouse.database.tables import TeamTable
from ..models import Team, TeamInput, TeamUpdate


class TeamRepository(BaseRepository):

    def find_all(self) -> List[Team]:
        # league table order
        rows = self.db.scalars(
            select(TeamTable).order_by(TeamTable.points.desc(), TeamTable.name)
        ).all()
        return [Team.model_validate(row) for row in rows]

    def find_by_id(self, team_id: int) -> Optional[Team]:
        row = self._get(TeamTable, team_id)
        return Team.model_validate(row) if row else None

    def add_team(self, team: TeamInput) -> Team:
        row = TeamTable(**team.model_dump())
        self.db.add(row)
        self._commit()
        return Team.model_validate(row)

    def update_team(self, team_id: int, team: TeamUpdate) -> Team:
        row = self._get_or_raise(TeamTable, team_id, f"Team with id {team_id} not found")
        for field, value in team.model_dump(exclude_unset=True).items():
            setattr(row, field, value)
        self._commit()
        return Team.model_validate(row)

    def delete_team(self, team_id: int) -> Team:
        row = self._get_or_raise(TeamTable, team_id, f"Team with id {team_id} not found")
        deleted = Team.model_validate(row)
        # players and coaches stay, detached from the team
        self.db.delete(row)
        self._commit()
        return deleted
