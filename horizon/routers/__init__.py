"""
API routers.
"""

from .auth import router as auth_router
from .checkbook import router as checkbook_router
from .dashboard import router as dashboard_router
from .plaid import router as plaid_router
from .transfers import router as transfers_router

__all__ = [
    "auth_router",
    "checkbook_router",
    "dashboard_router",
    "plaid_router",
    "transfers_router",
]
