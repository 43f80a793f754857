"""Stats API Router"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from clubhouse.auth.dependencies import get_current_identity
from clubhouse.auth.models import Identity
from clubhouse.database import get_db
from ..models import Stats, StatsInput
from .repository import StatsRepository
from .service import StatsService

router = APIRouter(prefix="/stats", tags=["Stats"])


def get_stats_service(db: Session = Depends(get_db)) -> StatsService:
    return StatsService(StatsRepository(db))


@router.get("", response_model=List[Stats])
def get_all_stats(
    identity: Identity = Depends(get_current_identity),
    service: StatsService = Depends(get_stats_service)
):
    return service.get_all_stats(identity)


@router.post("/add/{player_id}", response_model=Stats, status_code=201)
def add_stats_to_player(
    player_id: int,
    stats: StatsInput,
    identity: Identity = Depends(get_current_identity),
    service: StatsService = Depends(get_stats_service)
):
    """Create the stats row of a player (one per player)"""
    return service.add_stats_to_player(player_id, stats, identity)


@router.put("/update/{stats_id}", response_model=Stats)
def update_stats(
    stats_id: int,
    stats: StatsInput,
    identity: Identity = Depends(get_current_identity),
    service: StatsService = Depends(get_stats_service)
):
    return service.update_stats(stats_id, stats, identity)


@router.delete("/delete/{stats_id}", response_model=Stats)
def delete_stats(
    stats_id: int,
    identity: Identity = Depends(get_current_identity),
    service: StatsService = Depends(get_stats_service)
):
    return service.remove_stats(stats_id, identity)
