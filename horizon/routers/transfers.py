"""
Funding source and transfer routes.
"""

from typing import Optional

from fastapi import APIRouter, Depends, Header, HTTPException

from ..constants import ApiRoutes, ApiTags, HttpMessages
from ..dependencies import get_current_user, get_transfer_service
from ..models.transfer import (
    AddFundingSourceRequest,
    FundingSourceResponse,
    TransferRequest,
    TransferResponse,
)
from ..models.user import User
from ..services.transfer_service import TransferService
from ..utils.logger import get_logger

logger = get_logger(__name__)

router = APIRouter(prefix=ApiRoutes.TRANSFERS_PREFIX, tags=[ApiTags.TRANSFERS])


@router.post("/funding-sources", response_model=FundingSourceResponse, status_code=201)
async def add_funding_source(
    request: AddFundingSourceRequest,
    user: User = Depends(get_current_user),
    transfer_service: TransferService = Depends(get_transfer_service),
):
    """Register a Plaid processor token as a Dwolla funding source."""
    funding_source = await transfer_service.add_funding_source(
        dwolla_customer_id=request.dwolla_customer_id,
        processor_token=request.processor_token,
        bank_name=request.bank_name,
    )
    if not funding_source or not funding_source.location:
        raise HTTPException(status_code=502, detail=HttpMessages.FUNDING_SOURCE_FAILED)

    logger.info(f"User {user.id} added funding source {funding_source.location}")
    return FundingSourceResponse(
        customer_id=funding_source.customer_id,
        name=funding_source.name,
        funding_source_url=funding_source.location,
    )


@router.post("", response_model=TransferResponse, status_code=201)
async def create_transfer(
    request: TransferRequest,
    user: User = Depends(get_current_user),
    transfer_service: TransferService = Depends(get_transfer_service),
    idempotency_key: Optional[str] = Header(None, alias="Idempotency-Key"),
):
    """Move funds between two funding sources (USD)."""
    transfer_url = await transfer_service.create_transfer(
        source_funding_source_url=request.source_funding_source_url,
        destination_funding_source_url=request.destination_funding_source_url,
        amount=request.amount,
        idempotency_key=idempotency_key,
    )
    if not transfer_url:
        raise HTTPException(status_code=502, detail=HttpMessages.TRANSFER_FAILED)

    logger.info(f"User {user.id} created transfer {transfer_url}")
    return TransferResponse(transfer_url=transfer_url)
