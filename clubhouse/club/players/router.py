"""
Player API Router

Squad endpoints. All of them need a bearer token.
"""

from typing import List

from fastapi import APIRouter, Depends
from pydantic import BaseModel
from sqlalchemy.orm import Session

from clubhouse.auth.dependencies import get_current_identity
from clubhouse.auth.models import Identity
from clubhouse.database import get_db
from ..models import Player, PlayerInput, PlayerUpdate
from ..stats.repository import StatsRepository
from ..stats.service import StatsService
from .repository import PlayerRepository
from .service import PlayerService

router = APIRouter(prefix="/players", tags=["Player"])


class PlayerCreated(BaseModel):
    status: str = "success"
    message: Player


def get_player_service(db: Session = Depends(get_db)) -> PlayerService:
    return PlayerService(PlayerRepository(db), StatsService(StatsRepository(db)))


@router.get("", response_model=List[Player])
def get_all_players(
    identity: Identity = Depends(get_current_identity),
    service: PlayerService = Depends(get_player_service)
):
    """Whole squad, ordered by shirt number"""
    return service.get_all_players(identity)


@router.get("/{player_id}", response_model=Player)
def get_player_by_id(
    player_id: int,
    identity: Identity = Depends(get_current_identity),
    service: PlayerService = Depends(get_player_service)
):
    return service.get_player_by_id(player_id, identity)


@router.post("/add", response_model=PlayerCreated, status_code=201)
def add_player(
    player: PlayerInput,
    identity: Identity = Depends(get_current_identity),
    service: PlayerService = Depends(get_player_service)
):
    """
    Add a player

    Admins and coaches only. Shirt numbers are unique.
    """
    return PlayerCreated(message=service.add_player(player, identity))


@router.put("/update/{player_id}", response_model=Player)
def update_player(
    player_id: int,
    player: PlayerUpdate,
    identity: Identity = Depends(get_current_identity),
    service: PlayerService = Depends(get_player_service)
):
    """
    Update a player

    A `stat` object with an `id` in the body also updates that stats row.
    """
    return service.update_player(player_id, player, identity)


@router.delete("/delete/{player_id}", response_model=Player)
def delete_player(
    player_id: int,
    identity: Identity = Depends(get_current_identity),
    service: PlayerService = Depends(get_player_service)
):
    """Delete a player and its stats (admin only)"""
    return service.remove_player(player_id, identity)
