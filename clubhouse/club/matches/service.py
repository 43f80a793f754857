"""
Match Service

Fixtures and results. Admins schedule, edit and delete matches; admins and
coaches pick the players who took part.
"""

from typing import List, Optional

from loguru import logger

from clubhouse.auth.dependencies import ADMIN_ONLY, STAFF, ensure_authenticated, ensure_role
from clubhouse.auth.models import Identity
from ..models import Match, MatchInput, MatchUpdate
from .repository import MatchRepository


class MatchService:
    """Match service"""

    def __init__(self, repository: MatchRepository):
        self.repository = repository

    def get_all_matches(self, identity: Identity) -> List[Match]:
        ensure_authenticated(identity)
        return self.repository.find_all()

    def get_match_by_id(self, match_id: int) -> Optional[Match]:
        return self.repository.get_match_by_id(match_id)

    def add_match(self, match: MatchInput, identity: Identity) -> Match:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "Only admin has the permission to add a match")

        result = self.repository.add_match(match)
        logger.info(
            f"Match {result.id} ({result.home_team_name} vs {result.away_team_name}) "
            f"added by {identity.email}"
        )
        return result

    def update_match(self, match_id: int, match: MatchUpdate, identity: Identity) -> Match:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "Only admin has the permission to update a match")

        result = self.repository.update_match(match_id, match)
        logger.info(f"Match {match_id} updated by {identity.email}")
        return result

    def delete_match(self, match_id: int, identity: Identity) -> Match:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "Only admin has the permission to delete a match")

        result = self.repository.delete_match(match_id)
        logger.info(f"Match {match_id} deleted by {identity.email}")
        return result

    def add_players_to_match(self, match_id: int, player_ids: List[int], identity: Identity) -> List[Match]:
        """
        Link players to a match, one repository call per id in request order
        """
        ensure_authenticated(identity)
        ensure_role(
            identity, STAFF, "Only admin or coach has the permission to add a player to a match"
        )

        results = [
            self.repository.add_player_to_match(match_id, player_id)
            for player_id in player_ids
        ]
        logger.info(f"Players {player_ids} linked to match {match_id} by {identity.email}")
        return results
