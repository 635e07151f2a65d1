"""
Middleware Module.

Request logging and CORS for the API application.
"""

from fastapi import FastAPI

from src.middleware.cors import setup_cors
from src.middleware.logging import setup_logging


def setup_middleware(app: FastAPI) -> None:
    """
    Configure all middleware for the application.

    Logging is added last so it wraps CORS handling.

    Args:
        app: FastAPI application instance
    """
    setup_cors(app)
    setup_logging(app)
