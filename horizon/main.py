"""
FastAPI application for Horizon.

Personal finance backend:
- Appwrite email/password authentication with a session cookie
- Plaid bank linking
- Dwolla funding sources and transfers
- Checkbook payments
"""

from datetime import datetime, timezone
from fastapi import FastAPI

from .settings import settings
from .middleware import (
    add_cors_middleware,
    add_exception_handlers,
    add_logging_middleware,
)
from .routers import (
    auth_router,
    checkbook_router,
    dashboard_router,
    plaid_router,
    transfers_router,
)
from .utils.logger import setup_logging, get_logger

setup_logging()
logger = get_logger(__name__)


def create_app() -> FastAPI:
    """Create and configure FastAPI application."""
    app = FastAPI(
        title=settings.project_name,
        version=settings.version,
        description="Personal finance API: accounts, bank linking and transfers.",
        docs_url="/docs",
        redoc_url="/redoc",
        openapi_url="/openapi.json",
    )

    add_cors_middleware(app)
    add_logging_middleware(app)
    add_exception_handlers(app)

    app.include_router(auth_router, prefix=settings.api_v1_prefix)
    app.include_router(dashboard_router, prefix=settings.api_v1_prefix)
    app.include_router(transfers_router, prefix=settings.api_v1_prefix)
    app.include_router(plaid_router, prefix=settings.api_v1_prefix)
    app.include_router(checkbook_router, prefix=settings.api_v1_prefix)

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {
            "status": "healthy",
            "service": settings.project_name,
            "version": settings.version,
            "environment": settings.environment,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    @app.get("/")
    async def root():
        """Root endpoint."""
        return {
            "message": f"Welcome to {settings.project_name}!",
            "version": settings.version,
            "docs_url": "/docs",
        }

    logger.info(f"{settings.project_name} {settings.version} configured")
    return app


app = create_app()
