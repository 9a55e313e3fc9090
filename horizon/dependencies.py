"""
Application dependencies.
"""

from typing import Optional

from fastapi import Depends, Request

from .constants import HttpMessages
from .exceptions import AuthenticationError
from .models.user import User
from .services.checkbook_service import CheckbookService, create_checkbook_client
from .services.dashboard_service import DashboardService
from .services.dwolla_service import get_dwolla_client
from .services.plaid_service import PlaidService, create_plaid_client
from .services.transfer_service import TransferService
from .services.user_service import UserService
from .utils.cookies import get_session_secret


def get_user_service() -> UserService:
    """Get user service dependency."""
    return UserService()


def get_transfer_service() -> TransferService:
    return TransferService(get_dwolla_client())


def get_plaid_service(
    transfer_service: TransferService = Depends(get_transfer_service),
) -> PlaidService:
    return PlaidService(create_plaid_client(), transfer_service)


def get_checkbook_service() -> CheckbookService:
    return CheckbookService(create_checkbook_client())


def get_dashboard_service() -> DashboardService:
    return DashboardService()


async def get_optional_user(
    request: Request,
    user_service: UserService = Depends(get_user_service),
) -> Optional[User]:
    """Signed-in user, or None when there is no valid session cookie."""
    session_secret = get_session_secret(request)
    if not session_secret:
        return None
    return await user_service.get_logged_in_user(session_secret)


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    """Signed-in user; 401 otherwise."""
    if user is None:
        raise AuthenticationError(HttpMessages.NO_ACTIVE_SESSION)
    return user
