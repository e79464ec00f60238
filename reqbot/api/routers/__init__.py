"""API routers."""

from .chat import router as chat_router
from .diagrams import router as diagrams_router
from .health import router as health_router
from .reports import router as reports_router

__all__ = [
    "chat_router",
    "diagrams_router",
    "health_router",
    "reports_router",
]
