"""Team service: any signed-in user reads the table, admins maintain it."""

from typing import List

from loguru import logger

from clubhouse.auth.dependencies import ADMIN_ONLY, ensure_authenticated, ensure_role
from clubhouse.auth.models import Identity
from ..models import Team, TeamInput, TeamUpdate
from .repository import TeamRepository


class TeamService:

    def __init__(self, repository: TeamRepository):
        self.repository = repository

    def get_all_teams(self, identity: Identity) -> List[Team]:
        ensure_authenticated(identity)
        return self.repository.find_all()

    def add_team(self, team: TeamInput, identity: Identity) -> Team:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "Only admin has the permission to add a team")

        result = self.repository.add_team(team)
        logger.info(f"Team {result.id} ({result.name}) added by {identity.email}")
        return result

    def update_team(self, team_id: int, team: TeamUpdate, identity: Identity) -> Team:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "Only admin has the permission to update a team")

        result = self.repository.update_team(team_id, team)
        logger.info(f"Team {team_id} updated by {identity.email}")
        return result

    def delete_team(self, team_id: int, identity: Identity) -> Team:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "Only admin has the permission to delete a team")

        result = self.repository.delete_team(team_id)
        logger.info(f"Team {team_id} deleted by {identity.email}")
        return result
