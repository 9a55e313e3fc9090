"""
Plaid bank-linking service.

Creates Link tokens for the browser widget and turns the public token it
returns into a Dwolla funding source via a processor token.
"""

from typing import Optional

from plaid.api import plaid_api
from plaid.api_client import ApiClient
from plaid.configuration import Configuration, Environment
from plaid.exceptions import ApiException
from plaid.model.accounts_get_request import AccountsGetRequest
from plaid.model.country_code import CountryCode
from plaid.model.item_public_token_exchange_request import (
    ItemPublicTokenExchangeRequest,
)
from plaid.model.link_token_create_request import LinkTokenCreateRequest
from plaid.model.link_token_create_request_user import LinkTokenCreateRequestUser
from plaid.model.processor_token_create_request import ProcessorTokenCreateRequest
from plaid.model.products import Products

from ..constants import PlaidEnvironments, PlaidLinkConfig, PlaidProcessors, PlaidProducts
from ..exceptions import ConfigurationError, PlaidApiException
from ..models.plaid import LinkedBankResponse
from ..models.user import User
from ..settings import settings
from ..utils.logger import get_logger
from .transfer_service import TransferService

logger = get_logger(__name__)


def create_plaid_client() -> plaid_api.PlaidApi:
    """Plaid client configured from settings."""
    if not settings.plaid_client_id or not settings.plaid_secret:
        raise ConfigurationError("Plaid client id and secret are required")

    environment_map = {
        PlaidEnvironments.SANDBOX: Environment.Sandbox,
        PlaidEnvironments.PRODUCTION: Environment.Production,
    }
    plaid_environment = environment_map.get(settings.plaid_env.lower())
    if plaid_environment is None:
        raise ConfigurationError(
            f"Plaid environment must be 'sandbox' or 'production', got '{settings.plaid_env}'"
        )

    config = Configuration(
        host=plaid_environment,
        api_key={
            "clientId": settings.plaid_client_id,
            "secret": settings.plaid_secret,
        },
    )
    return plaid_api.PlaidApi(ApiClient(config))


class PlaidService:
    """Service for the Plaid Link flow."""

    def __init__(self, client: plaid_api.PlaidApi, transfer_service: TransferService):
        self.client = client
        self.transfer_service = transfer_service

    async def create_link_token(self, user: User) -> str:
        """Create a Link token scoped to the signed-in user."""
        try:
            request = LinkTokenCreateRequest(
                products=[Products(PlaidProducts.AUTH)],
                client_name=settings.project_name,
                country_codes=[CountryCode(PlaidLinkConfig.COUNTRY_CODE_US)],
                language=PlaidLinkConfig.LANGUAGE_EN,
                user=LinkTokenCreateRequestUser(client_user_id=user.id),
            )
            response = self.client.link_token_create(request)
            link_token = response["link_token"]

            logger.info(f"Link token created successfully for user {user.id}")
            return link_token
        except ApiException as e:
            logger.error(f"Failed to create link token for user {user.id}: {e}")
            raise PlaidApiException(e)

    async def exchange_public_token(
        self, user: User, public_token: str, dwolla_customer_id: str
    ) -> Optional[LinkedBankResponse]:
        """
        Exchange the public token, mint a Dwolla processor token for the first
        linked account and register it as a funding source.

        Returns None when the funding source could not be created.
        """
        try:
            exchange_response = self.client.item_public_token_exchange(
                ItemPublicTokenExchangeRequest(public_token=public_token)
            )
            access_token = exchange_response["access_token"]
            item_id = exchange_response["item_id"]

            accounts = self.client.accounts_get(
                AccountsGetRequest(access_token=access_token)
            ).to_dict()["accounts"]
            if not accounts:
                logger.warning(f"Item {item_id} has no accounts for user {user.id}")
                return None
            account = accounts[0]

            processor_response = self.client.processor_token_create(
                ProcessorTokenCreateRequest(
                    access_token=access_token,
                    account_id=account["account_id"],
                    processor=PlaidProcessors.DWOLLA,
                )
            )
            processor_token = processor_response["processor_token"]
        except ApiException as e:
            logger.error(f"Failed to exchange public token for user {user.id}: {e}")
            raise PlaidApiException(e)

        funding_source = await self.transfer_service.add_funding_source(
            dwolla_customer_id=dwolla_customer_id,
            processor_token=processor_token,
            bank_name=account["name"],
        )
        if not funding_source or not funding_source.location:
            return None

        logger.info(f"Bank linked for user {user.id}, item_id: {item_id}")
        return LinkedBankResponse(
            item_id=item_id,
            account_id=account["account_id"],
            bank_name=account["name"],
            funding_source_url=funding_source.location,
        )
