"""Coach API Router"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from clubhouse.auth.dependencies import get_current_identity
from clubhouse.auth.models import Identity
from clubhouse.config import get_settings
from clubhouse.database import get_db
from ..models import Coach, CoachInput, CoachUpdate, MessageResponse
from .repository import CoachRepository
from .service import CoachService

router = APIRouter(prefix="/coaches", tags=["Coach"])


def get_coach_service(db: Session = Depends(get_db)) -> CoachService:
    return CoachService(CoachRepository(db), home_team_id=get_settings().HOME_TEAM_ID)


@router.get("", response_model=List[Coach])
def get_all_coaches(service: CoachService = Depends(get_coach_service)):
    """Coaching staff (public)"""
    return service.get_all_coaches()


@router.post("/add", response_model=Coach, status_code=201)
def add_coach(
    coach: CoachInput,
    identity: Identity = Depends(get_current_identity),
    service: CoachService = Depends(get_coach_service)
):
    return service.add_coach(coach, identity)


@router.put("/update/{coach_id}", response_model=Coach)
def update_coach(
    coach_id: int,
    coach: CoachUpdate,
    identity: Identity = Depends(get_current_identity),
    service: CoachService = Depends(get_coach_service)
):
    return service.update_coach(coach_id, coach, identity)


@router.delete("/delete/{coach_id}", response_model=MessageResponse)
def delete_coach(
    coach_id: int,
    identity: Identity = Depends(get_current_identity),
    service: CoachService = Depends(get_coach_service)
):
    service.remove_coach(coach_id, identity)
    return MessageResponse(message="Coach deleted successfully")
