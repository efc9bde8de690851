"""Middleware setup for the search API."""

from fastapi import FastAPI

from config.settings import Settings
from src.middleware.cors import setup_cors
from src.middleware.logging import setup_logging


def setup_middleware(app: FastAPI, settings: Settings) -> None:
    """
    Configure all middleware for the application.

    Args:
        app: FastAPI application instance
        settings: Application settings (CORS origins)
    """
    setup_cors(app, settings.cors_origin_list)
    setup_logging(app)


__all__ = ["setup_middleware", "setup_cors", "setup_logging"]
