"""Player repository"""
from typing import List, Optional

from sqlalchemy import select

from clubhouse.database.repository import BaseRepository
from clubhouse.database.tables import PlayerTable
from ..models import Player, PlayerInput, PlayerUpdate


class PlayerRepository(BaseRepository):

    def find_all(self) -> List[Player]:
        rows = self.db.scalars(select(PlayerTable).order_by(PlayerTable.number)).all()
        return [Player.model_validate(row) for row in rows]

    def find_by_id(self, player_id: int) -> Optional[Player]:
        row = self._get(PlayerTable, player_id)
        return Player.model_validate(row) if row else None

    def find_by_number(self, number: int) -> Optional[Player]:
        row = self.db.scalars(
            select(PlayerTable).where(PlayerTable.number == number).limit(1)
        ).first()
        return Player.model_validate(row) if row else None

    def add_player(self, player: PlayerInput) -> Player:
        self._ensure_team(player.team_id)
        row = PlayerTable(**player.model_dump())
        self.db.add(row)
        self._commit()
        return Player.model_validate(row)

    def update_player(self, player_id: int, player: PlayerUpdate) -> Player:
        row = self._get_or_raise(PlayerTable, player_id, f"Player with id {player_id} not found")
        fields = player.player_fields()
        self._ensure_team(fields.get("team_id"))
        for field, value in fields.items():
            setattr(row, field, value)
        self._commit()
        return Player.model_validate(row)

    def delete_player(self, player_id: int) -> Player:
        row = self._get_or_raise(PlayerTable, player_id, f"Player with id {player_id} not found")
        deleted = Player.model_validate(row)
        self.db.delete(row)
        self._commit()
        return deleted
