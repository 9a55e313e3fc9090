"""
Service modules for the application.
"""

from .appwrite_service import AppwriteClient, create_admin_client, create_session_client
from .user_service import UserService
from .dwolla_service import DwollaClient, create_dwolla_client, get_dwolla_client
from .transfer_service import TransferService
from .plaid_service import PlaidService, create_plaid_client
from .checkbook_service import CheckbookService, create_checkbook_client
from .dashboard_service import DashboardService

__all__ = [
    "AppwriteClient",
    "create_admin_client",
    "create_session_client",
    "UserService",
    "DwollaClient",
    "create_dwolla_client",
    "get_dwolla_client",
    "TransferService",
    "PlaidService",
    "create_plaid_client",
    "CheckbookService",
    "create_checkbook_client",
    "DashboardService",
]
