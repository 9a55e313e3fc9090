"""
Checkbook routes.
"""

from typing import Any

from fastapi import APIRouter, Depends, HTTPException

from ..constants import ApiRoutes, ApiTags, HttpMessages
from ..dependencies import get_checkbook_service, get_current_user
from ..models.checkbook import CheckbookBankRequest, CheckbookCustomerRequest
from ..models.user import User
from ..services.checkbook_service import CheckbookService

router = APIRouter(prefix=ApiRoutes.CHECKBOOK_PREFIX, tags=[ApiTags.CHECKBOOK])


@router.post("/customers", status_code=201)
async def create_customer(
    request: CheckbookCustomerRequest,
    user: User = Depends(get_current_user),
    checkbook_service: CheckbookService = Depends(get_checkbook_service),
) -> Any:
    """Create a Checkbook user for the signed-in account, right after sign-up."""
    data = await checkbook_service.create_checkbook_customer(
        request.first_name, request.last_name, request.email
    )
    if data is None:
        raise HTTPException(status_code=502, detail=HttpMessages.CHECKBOOK_CUSTOMER_FAILED)
    return data


@router.post("/banks/plaid", status_code=201)
async def connect_bank_plaid(
    request: CheckbookBankRequest,
    user: User = Depends(get_current_user),
    checkbook_service: CheckbookService = Depends(get_checkbook_service),
) -> Any:
    """Attach a bank account to Checkbook with a Plaid processor token."""
    data = await checkbook_service.connect_to_bank_plaid(request.processor_token)
    if data is None:
        raise HTTPException(status_code=502, detail=HttpMessages.CHECKBOOK_BANK_FAILED)
    return data
