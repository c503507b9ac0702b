"""API routers."""

from .health import router as health_router
from .members import router as members_router
from .teams import router as teams_router

__all__ = [
    "health_router",
    "members_router",
    "teams_router",
]
