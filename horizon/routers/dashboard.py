"""
Dashboard page route.
"""

from typing import Optional

from fastapi import APIRouter, Depends

from ..constants import ApiRoutes, ApiTags
from ..dependencies import get_dashboard_service, get_optional_user
from ..models.dashboard import DashboardPage
from ..models.user import User
from ..services.dashboard_service import DashboardService

router = APIRouter(prefix=ApiRoutes.DASHBOARD_PREFIX, tags=[ApiTags.DASHBOARD])


@router.get("", response_model=DashboardPage)
async def dashboard(
    user: Optional[User] = Depends(get_optional_user),
    dashboard_service: DashboardService = Depends(get_dashboard_service),
):
    """Home page: greeting, balances, recent transactions and sidebar."""
    return dashboard_service.build_page(user)
