"""
Matches - fixtures, results and match squads
"""

from .router import router as matches_router
from .service import MatchService

__all__ = ["matches_router", "MatchService"]
