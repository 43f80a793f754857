"""
Club Management Module

Squad, coaching staff, league table, matches and player statistics.
"""

from .router import router as club_router
from .models import (
    Coach,
    Match,
    Player,
    Stats,
    Team,
)

__all__ = [
    "club_router",
    "Coach",
    "Match",
    "Player",
    "Stats",
    "Team",
]
