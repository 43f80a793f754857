"""
Stats Service

Player statistics. Reading needs a token; coaches and admins record and
correct stats, only admins remove them.
"""

from typing import List

from loguru import logger

from clubhouse.auth.dependencies import ADMIN_ONLY, STAFF, ensure_authenticated, ensure_role
from clubhouse.auth.models import Identity
from clubhouse.errors import NotFoundError
from ..models import Stats, StatsInput
from .repository import StatsRepository


class StatsService:
    """Stats service"""

    def __init__(self, repository: StatsRepository):
        self.repository = repository

    def get_all_stats(self, identity: Identity) -> List[Stats]:
        ensure_authenticated(identity)
        return self.repository.get_all_stats()

    def get_stats_by_id(self, stats_id: int) -> Stats:
        stats = self.repository.find_by_id(stats_id)
        if not stats:
            raise NotFoundError(f"Stats with id {stats_id} not found")
        return stats

    def add_stats_to_player(self, player_id: int, stats: StatsInput, identity: Identity) -> Stats:
        ensure_authenticated(identity)
        ensure_role(identity, STAFF, "You are not authorized to add stats")

        result = self.repository.add_stats_to_player(player_id, stats)
        logger.info(f"Stats {result.id} added to player {player_id} by {identity.email}")
        return result

    def update_stats(self, stats_id: int, stats: StatsInput, identity: Identity) -> Stats:
        ensure_authenticated(identity)
        ensure_role(identity, STAFF, "You are not authorized to update stats")

        result = self.repository.update_stats(stats_id, stats)
        logger.info(f"Stats {stats_id} updated by {identity.email}")
        return result

    def remove_stats(self, stats_id: int, identity: Identity) -> Stats:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "You are not authorized to remove stats")

        result = self.repository.delete_stats(stats_id)
        logger.info(f"Stats {stats_id} removed by {identity.email}")
        return result
