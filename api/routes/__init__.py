"""API route modules."""

from api.routes.health import router as health_router
from api.routes.intake import router as intake_router
from api.routes.tools import router as tools_router

__all__ = ["health_router", "intake_router", "tools_router"]
