"""
Club Router

Mounts the per-entity routers (players, coaches, teams, matches, stats).
"""

from fastapi import APIRouter

from .coaches import coaches_router
from .matches import matches_router
from .players import players_router
from .stats import stats_router
from .teams import teams_router

router = APIRouter()

router.include_router(players_router)
router.include_router(coaches_router)
router.include_router(teams_router)
router.include_router(matches_router)
router.include_router(stats_router)
