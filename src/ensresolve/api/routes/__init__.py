"""API route modules."""

from ensresolve.api.routes.health import router as health_router
from ensresolve.api.routes.resolve import router as resolve_router

__all__ = [
    "health_router",
    "resolve_router",
]
