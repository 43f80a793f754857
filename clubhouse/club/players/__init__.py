"""
Players - squad management
"""

from .router import router as players_router
from .service import PlayerService

__all__ = ["players_router", "PlayerService"]
