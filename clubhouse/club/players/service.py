"""
Player Service

Squad management. Every read needs a token; admins and coaches add and edit
players, only admins delete them. Updating a player can carry a stats block,
which is forwarded to the stats service afterwards.
"""

from typing import List, Optional

from loguru import logger

from clubhouse.auth.dependencies import ADMIN_ONLY, STAFF, ensure_authenticated, ensure_role
from clubhouse.auth.models import Identity
from clubhouse.errors import ClubError, NotFoundError
from ..models import Player, PlayerInput, PlayerUpdate, StatsInput
from ..stats.service import StatsService
from .repository import PlayerRepository


class PlayerService:
    """Player service"""

    def __init__(self, repository: PlayerRepository, stats_service: Optional[StatsService] = None):
        self.repository = repository
        self.stats_service = stats_service

    # =============================================
    # Reads
    # =============================================

    def get_all_players(self, identity: Identity) -> List[Player]:
        ensure_authenticated(identity)
        return self.repository.find_all()

    def get_player_by_id(self, player_id: int, identity: Identity) -> Player:
        ensure_authenticated(identity)

        player = self.repository.find_by_id(player_id)
        if not player:
            raise NotFoundError(f"Player with id {player_id} not found")
        return player

    # =============================================
    # Writes
    # =============================================

    def add_player(self, player: PlayerInput, identity: Identity) -> Player:
        ensure_authenticated(identity)
        ensure_role(identity, STAFF, "You do not have the permission to add a player")

        if self.repository.find_by_number(player.number):
            raise ClubError(f"Player with number {player.number} already exists")

        result = self.repository.add_player(player)
        logger.info(f"Player {result.id} ({result.name}, #{result.number}) added by {identity.email}")
        return result

    def update_player(self, player_id: int, player: PlayerUpdate, identity: Identity) -> Player:
        """
        Update a player, then its stats when the body carries a stat id
        """
        ensure_authenticated(identity)
        ensure_role(identity, STAFF, "You do not have the permission to update a player")

        if player.number is not None:
            existing = self.repository.find_by_number(player.number)
            if existing and existing.id != player_id:
                raise ClubError(f"Player with number {player.number} already exists")

        stat = player.stat
        forward_stat = stat is not None and bool(stat.id) and self.stats_service is not None
        if forward_stat:
            # fail before the player row is written
            self.stats_service.get_stats_by_id(stat.id)

        result = self.repository.update_player(player_id, player)
        logger.info(f"Player {player_id} updated by {identity.email}")

        if forward_stat:
            self.stats_service.update_stats(
                stat.id,
                StatsInput(**stat.model_dump(exclude_unset=True, exclude={"id"})),
                identity,
            )
            result = self.repository.find_by_id(player_id) or result

        return result

    def remove_player(self, player_id: int, identity: Identity) -> Player:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "You do not have the permission to delete a player.")

        result = self.repository.delete_player(player_id)
        logger.info(f"Player {player_id} deleted by {identity.email}")
        return result
