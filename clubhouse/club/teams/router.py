"""Team API Router - league table"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from clubhouse.auth.dependencies import get_current_identity
from clubhouse.auth.models import Identity
from clubhouse.database import get_db
from ..models import Team, TeamInput, TeamUpdate
from .repository import TeamRepository
from .service import TeamService

router = APIRouter(prefix="/teams", tags=["Team"])


def get_team_service(db: Session = Depends(get_db)) -> TeamService:
    return TeamService(TeamRepository(db))


@router.get("", response_model=List[Team])
def get_all_teams(
    identity: Identity = Depends(get_current_identity),
    service: TeamService = Depends(get_team_service)
):
    """Teams ordered by points"""
    return service.get_all_teams(identity)


@router.post("/add", response_model=Team, status_code=201)
def add_team(
    team: TeamInput,
    identity: Identity = Depends(get_current_identity),
    service: TeamService = Depends(get_team_service)
):
    return service.add_team(team, identity)


@router.put("/update/{team_id}", response_model=Team)
def update_team(
    team_id: int,
    team: TeamUpdate,
    identity: Identity = Depends(get_current_identity),
    service: TeamService = Depends(get_team_service)
):
    return service.update_team(team_id, team, identity)


@router.delete("/delete/{team_id}", response_model=Team)
def delete_team(
    team_id: int,
    identity: Identity = Depends(get_current_identity),
    service: TeamService = Depends(get_team_service)
):
    return service.delete_team(team_id, identity)
