"""
CORS middleware configuration.
"""

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from ..constants import RequestHeaders
from ..settings import settings


def add_cors_middleware(app: FastAPI) -> None:
    """Add CORS middleware to the application."""

    if settings.environment == "development":
        origins = [
            settings.frontend_url,
            "http://localhost:3000",
            "http://127.0.0.1:3000",
        ]
    else:
        origins = settings.allowed_origins_list

    # Session cookies are sent cross-origin, so credentials must be allowed
    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=[
            "Content-Type",
            RequestHeaders.IDEMPOTENCY_KEY,
            RequestHeaders.REQUEST_ID,
        ],
        expose_headers=[RequestHeaders.REQUEST_ID],
    )
