"""
Match API Router

Fixtures, results and match squads.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from clubhouse.auth.dependencies import get_current_identity
from clubhouse.auth.models import Identity
from clubhouse.database import get_db
from clubhouse.errors import NotFoundError
from ..models import Match, MatchInput, MatchPlayersInput, MatchUpdate, Player
from .repository import MatchRepository
from .service import MatchService

router = APIRouter(prefix="/matches", tags=["Match"])


def get_match_service(db: Session = Depends(get_db)) -> MatchService:
    return MatchService(MatchRepository(db))


@router.get("", response_model=List[Match])
def get_all_matches(
    identity: Identity = Depends(get_current_identity),
    service: MatchService = Depends(get_match_service)
):
    """All matches by kick-off date"""
    return service.get_all_matches(identity)


@router.post("/add", response_model=Match, status_code=201)
def add_match(
    match: MatchInput,
    identity: Identity = Depends(get_current_identity),
    service: MatchService = Depends(get_match_service)
):
    return service.add_match(match, identity)


@router.put("/update/{match_id}", response_model=Match)
def update_match(
    match_id: int,
    match: MatchUpdate,
    identity: Identity = Depends(get_current_identity),
    service: MatchService = Depends(get_match_service)
):
    """Edit a fixture or enter its result"""
    return service.update_match(match_id, match, identity)


@router.delete("/delete/{match_id}", response_model=Match)
def delete_match(
    match_id: int,
    identity: Identity = Depends(get_current_identity),
    service: MatchService = Depends(get_match_service)
):
    return service.delete_match(match_id, identity)


@router.post("/{match_id}/players", response_model=List[Match], status_code=201)
def add_players_to_match(
    match_id: int,
    body: MatchPlayersInput,
    identity: Identity = Depends(get_current_identity),
    service: MatchService = Depends(get_match_service)
):
    """
    Add players to a match

    Body: `{"player_ids": [1, 2, 3]}`. Returns the match after each link.
    """
    return service.add_players_to_match(match_id, body.player_ids, identity)


@router.get("/{match_id}/players", response_model=List[Player])
def get_match_players(
    match_id: int,
    service: MatchService = Depends(get_match_service)
):
    """Players who took part in a match (public)"""
    match = service.get_match_by_id(match_id)
    if not match:
        raise NotFoundError("Match not found")
    return match.players
