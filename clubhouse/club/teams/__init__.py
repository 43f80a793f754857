from .router import router as teams_router
from .service import TeamService

__all__ = ["teams_router", "TeamService"]
