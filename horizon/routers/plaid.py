"""
Plaid integration routes.
"""

from fastapi import APIRouter, Depends, HTTPException

from ..constants import ApiRoutes, ApiTags, HttpMessages
from ..dependencies import get_current_user, get_plaid_service
from ..models.plaid import ExchangePublicTokenRequest, LinkedBankResponse, LinkTokenResponse
from ..models.user import User
from ..services.plaid_service import PlaidService
from ..utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix=ApiRoutes.PLAID_PREFIX, tags=[ApiTags.PLAID])


@router.post("/create_link_token", response_model=LinkTokenResponse)
async def create_link_token(
    user: User = Depends(get_current_user),
    plaid_service: PlaidService = Depends(get_plaid_service),
):
    """Create a Plaid link token for the current user."""
    link_token = await plaid_service.create_link_token(user)
    return LinkTokenResponse(link_token=link_token)


@router.post("/exchange_public_token", response_model=LinkedBankResponse)
async def exchange_public_token(
    request: ExchangePublicTokenRequest,
    user: User = Depends(get_current_user),
    plaid_service: PlaidService = Depends(get_plaid_service),
):
    """Link the bank chosen in Plaid Link and register it as a funding source."""
    linked_bank = await plaid_service.exchange_public_token(
        user, request.public_token, request.dwolla_customer_id
    )
    if not linked_bank:
        raise HTTPException(status_code=502, detail=HttpMessages.FUNDING_SOURCE_FAILED)
    return linked_bank
