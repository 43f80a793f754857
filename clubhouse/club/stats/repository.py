"""Stats repository"""
from typing import List, Optional

from sqlalchemy import select

from clubhouse.database.repository import BaseRepository
from clubhouse.database.tables import PlayerTable, StatsTable
from clubhouse.errors import ClubError
from ..models import Stats, StatsInput


class StatsRepository(BaseRepository):

    def get_all_stats(self) -> List[Stats]:
        rows = self.db.scalars(select(StatsTable).order_by(StatsTable.id)).all()
        return [Stats.model_validate(row) for row in rows]

    def find_by_id(self, stats_id: int) -> Optional[Stats]:
        row = self._get(StatsTable, stats_id)
        return Stats.model_validate(row) if row else None

    def add_stats_to_player(self, player_id: int, stats: StatsInput) -> Stats:
        player = self._get_or_raise(PlayerTable, player_id, f"Player with id {player_id} not found")
        if player.stat is not None:
            raise ClubError(f"Player with id {player_id} already has stats")

        row = StatsTable(player_id=player_id, **stats.model_dump())
        self.db.add(row)
        self._commit()
        return Stats.model_validate(row)

    def update_stats(self, stats_id: int, stats: StatsInput) -> Stats:
        row = self._get_or_raise(StatsTable, stats_id, f"Stats with id {stats_id} not found")
        for field, value in stats.model_dump(exclude_unset=True, exclude={"id"}).items():
            setattr(row, field, value)
        self._commit()
        return Stats.model_validate(row)

    def delete_stats(self, stats_id: int) -> Stats:
        row = self._get_or_raise(StatsTable, stats_id, f"Stats with id {stats_id} not found")
        deleted = Stats.model_validate(row)
        self.db.delete(row)
        self._commit()
        return deleted
