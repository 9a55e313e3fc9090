"""
Checkbook actions: customer creation and bank linking through Plaid.
"""

from typing import Any, Optional

from ..settings import settings
from ..utils.logger import get_logger
from .checkbook import CheckbookClient

logger = get_logger(__name__)


def create_checkbook_client() -> CheckbookClient:
    client = CheckbookClient(timeout=settings.http_timeout_seconds)
    client.server(settings.checkbook_base_url)
    client.auth(settings.checkbook_key, settings.checkbook_secret)
    return client


class CheckbookService:
    def __init__(self, client: CheckbookClient):
        self.client = client

    async def create_checkbook_customer(
        self, first_name: str, last_name: str, email: str
    ) -> Optional[Any]:
        """Create a Checkbook user keyed by email."""
        try:
            response = await self.client.post_user(
                {"name": f"{first_name}_{last_name}", "user_id": email}
            )
            logger.info(f"Checkbook customer created for {email}")
            return response.data
        except Exception as e:
            logger.error(f"Creating a Checkbook Customer Failed: {e}")
            return None

    async def connect_to_bank_plaid(self, processor_token: str) -> Optional[Any]:
        """Attach a bank account using a Plaid processor token."""
        try:
            response = await self.client.post_bank_plaid(
                {"processor_token": processor_token}
            )
            logger.info("Bank account connected to Checkbook via Plaid")
            return response.data
        except Exception as e:
            logger.error(f"Connecting bank to Checkbook failed: {e}")
            return None
