"""Match repository"""
from typing import List, Optional

from sqlalchemy import select

from clubhouse.database.repository import BaseRepository
from clubhouse.database.tables import MatchTable, PlayerTable
from ..models import Match, MatchInput, MatchUpdate


class MatchRepository(BaseRepository):

    def find_all(self) -> List[Match]:
        rows = self.db.scalars(select(MatchTable).order_by(MatchTable.date)).all()
        return [Match.model_validate(row) for row in rows]

    def get_match_by_id(self, match_id: int) -> Optional[Match]:
        row = self._get(MatchTable, match_id)
        return Match.model_validate(row) if row else None

    def add_match(self, match: MatchInput) -> Match:
        row = MatchTable(**match.model_dump())
        self.db.add(row)
        self._commit()
        return Match.model_validate(row)

    def update_match(self, match_id: int, match: MatchUpdate) -> Match:
        row = self._get_or_raise(MatchTable, match_id, "Match not found")
        for field, value in match.model_dump(exclude_unset=True).items():
            setattr(row, field, value)
        self._commit()
        return Match.model_validate(row)

    def delete_match(self, match_id: int) -> Match:
        row = self._get_or_raise(MatchTable, match_id, "Match not found")
        deleted = Match.model_validate(row)
        self.db.delete(row)
        self._commit()
        return deleted

    def add_player_to_match(self, match_id: int, player_id: int) -> Match:
        """Link one player to a match; linking twice is a no-op"""
        row = self._get_or_raise(MatchTable, match_id, "Match not found")
        player = self._get_or_raise(PlayerTable, player_id, f"Player with id {player_id} not found")
        if player not in row.players:
            row.players.append(player)
            self._commit()
        return Match.model_validate(row)
