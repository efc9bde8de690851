"""
CORS Middleware Configuration.

Lets the advisor web front-end call the search API from another origin.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware


def setup_cors(app: FastAPI, origins: list[str]) -> None:
    """
    Allow the given origins to call the API.

    Args:
        app: FastAPI application instance
        origins: Allowed origins ("*" for any)
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        # No cookie auth on this API
        allow_credentials=False,
        allow_methods=["GET", "POST", "DELETE"],
        allow_headers=["*"],
    )
