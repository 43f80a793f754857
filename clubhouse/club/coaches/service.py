"""Coach service: the staff list is public, changes are admin-only."""

from typing import List, Optional

from loguru import logger

from clubhouse.auth.dependencies import ADMIN_ONLY, ensure_authenticated, ensure_role
from clubhouse.auth.models import Identity
from ..models import Coach, CoachInput, CoachUpdate
from .repository import CoachRepository


class CoachService:

    def __init__(self, repository: CoachRepository, home_team_id: Optional[int] = None):
        self.repository = repository
        self.home_team_id = home_team_id

    def get_all_coaches(self) -> List[Coach]:
        return self.repository.find_all()

    def add_coach(self, coach: CoachInput, identity: Identity) -> Coach:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "Only admin has the permission to add a coach")

        if coach.team_id is None and self.home_team_id is not None:
            coach = coach.model_copy(update={"team_id": self.home_team_id})

        result = self.repository.add_coach(coach)
        logger.info(f"Coach {result.id} ({result.name}) added by {identity.email}")
        return result

    def update_coach(self, coach_id: int, coach: CoachUpdate, identity: Identity) -> Coach:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "Only admin has the permission to update a coach")

        result = self.repository.update_coach(coach_id, coach)
        logger.info(f"Coach {coach_id} updated by {identity.email}")
        return result

    def remove_coach(self, coach_id: int, identity: Identity) -> None:
        ensure_authenticated(identity)
        ensure_role(identity, ADMIN_ONLY, "Only admin has the permission to remove a coach")

        self.repository.remove_coach(coach_id)
        logger.info(f"Coach {coach_id} removed by {identity.email}")
