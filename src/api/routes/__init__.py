"""API routes module."""

from src.api.routes.health import router as health_router
from src.api.routes.search import router as search_router
from src.api.routes.telegram import router as telegram_router

__all__ = [
    "health_router",
    "search_router",
    "telegram_router",
]
