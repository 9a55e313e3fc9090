"""
Money movement actions: register a funding source and move funds between two.

There is no compensation if a transfer fails after a funding source was added,
and no retry. Transfers carry an idempotency key so a retried request does not
move money twice.
"""

import uuid
from decimal import Decimal
from typing import Optional, Union

from ..constants import Currency
from ..models.transfer import FundingSource, Link, Transfer
from ..utils.logger import get_logger
from .dwolla_service import DwollaClient

logger = get_logger(__name__)


class TransferService:
    """Funds movement over the Dwolla payment network."""

    def __init__(self, dwolla_client: DwollaClient):
        self.dwolla = dwolla_client

    async def add_funding_source(
        self, dwolla_customer_id: str, processor_token: str, bank_name: str
    ) -> Optional[FundingSource]:
        """
        Create a Dwolla funding source from a Plaid processor token.

        Requests an on-demand authorization first; without one no funding
        source is created. Returns None on any failure.
        """
        try:
            dwolla_auth_links = await self.dwolla.create_on_demand_authorization()

            funding_source = FundingSource(
                customer_id=dwolla_customer_id,
                name=bank_name,
                processor_token=processor_token,
                links={
                    rel: Link.model_validate(link)
                    for rel, link in dwolla_auth_links.items()
                },
            )
            funding_source.location = await self.dwolla.create_funding_source(
                funding_source
            )

            logger.info(
                f"Funding source '{bank_name}' added for customer {dwolla_customer_id}"
            )
            return funding_source
        except Exception as e:
            logger.error(f"Adding funding source failed: {e}")
            return None

    async def create_transfer(
        self,
        source_funding_source_url: str,
        destination_funding_source_url: str,
        amount: Union[str, Decimal, float],
        idempotency_key: Optional[str] = None,
    ) -> Optional[str]:
        """Move ``amount`` USD between two funding sources; returns the transfer URL."""
        try:
            transfer = Transfer(
                source=source_funding_source_url,
                destination=destination_funding_source_url,
                amount=str(amount),
                currency=Currency.USD,
            )
            transfer_url = await self.dwolla.create_transfer(
                transfer, idempotency_key=idempotency_key or str(uuid.uuid4())
            )

            logger.info(f"Transfer created: {transfer_url}")
            return transfer_url
        except Exception as e:
            logger.error(f"Transfer fund failed: {e}")
            return None
