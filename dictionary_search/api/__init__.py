"""API endpoints for the dictionary search service."""

from .words import router as words_router
from .health import router as health_router
from .metrics import router as metrics_router

__all__ = [
    "words_router",
    "health_router",
    "metrics_router",
]
