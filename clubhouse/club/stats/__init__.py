from .router import router as stats_router
from .service import StatsService

__all__ = ["stats_router", "StatsService"]
