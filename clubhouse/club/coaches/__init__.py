from .router import router as coaches_router
from .service import CoachService

__all__ = ["coaches_router", "CoachService"]
