"""
Tests for the Plaid Link flow.
"""
import json

import pytest
from unittest.mock import AsyncMock, MagicMock
from plaid.exceptions import ApiException

from horizon.exceptions import ConfigurationError, PlaidApiException
from horizon.models.transfer import FundingSource
from horizon.services.plaid_service import PlaidService, create_plaid_client
from horizon.settings import settings

PLAID_ERROR = {
    "error_type": "INVALID_INPUT",
    "error_code": "INVALID_PUBLIC_TOKEN",
    "error_message": "provided public token is in an invalid format",
    "display_message": None,
    "request_id": "req-123",
}


def _api_exception(body: str) -> ApiException:
    exc = ApiException(status=400, reason="Bad Request")
    exc.body = body
    return exc


@pytest.fixture
def plaid_client():
    client = MagicMock()
    client.link_token_create.return_value = {"link_token": "link-sandbox-123"}
    client.item_public_token_exchange.return_value = {
        "access_token": "access-sandbox-1",
        "item_id": "item-1",
    }
    client.accounts_get.return_value.to_dict.return_value = {
        "accounts": [{"account_id": "acc-1", "name": "Plaid Checking"}]
    }
    client.processor_token_create.return_value = {"processor_token": "processor-sandbox-1"}
    return client


@pytest.fixture
def transfer_service():
    service = MagicMock()
    service.add_funding_source = AsyncMock(
        return_value=FundingSource(
            customer_id="cust-1",
            name="Plaid Checking",
            processor_token="processor-sandbox-1",
            location="https://api-sandbox.dwolla.com/funding-sources/fs-1",
        )
    )
    return service


class TestLinkToken:
    @pytest.mark.asyncio
    async def test_create_link_token(self, plaid_client, transfer_service, test_user):
        service = PlaidService(plaid_client, transfer_service)

        assert await service.create_link_token(test_user) == "link-sandbox-123"

        request = plaid_client.link_token_create.call_args.args[0]
        assert request.user.client_user_id == "user-42"
        assert request.language == "en"

    @pytest.mark.asyncio
    async def test_api_error(self, plaid_client, transfer_service, test_user):
        plaid_client.link_token_create.side_effect = _api_exception(json.dumps(PLAID_ERROR))

        with pytest.raises(PlaidApiException) as exc_info:
            await PlaidService(plaid_client, transfer_service).create_link_token(test_user)

        assert exc_info.value.status_code == 502
        assert exc_info.value.plaid_error.error_code == "INVALID_PUBLIC_TOKEN"


class TestExchangePublicToken:
    @pytest.mark.asyncio
    async def test_links_bank_as_funding_source(self, plaid_client, transfer_service, test_user):
        service = PlaidService(plaid_client, transfer_service)

        result = await service.exchange_public_token(test_user, "public-sandbox-1", "cust-1")

        assert result.item_id == "item-1"
        assert result.account_id == "acc-1"
        assert result.funding_source_url.endswith("/fs-1")

        processor_request = plaid_client.processor_token_create.call_args.args[0]
        assert processor_request.account_id == "acc-1"
        assert processor_request.processor == "dwolla"
        transfer_service.add_funding_source.assert_awaited_once_with(
            dwolla_customer_id="cust-1",
            processor_token="processor-sandbox-1",
            bank_name="Plaid Checking",
        )

    @pytest.mark.asyncio
    async def test_no_accounts(self, plaid_client, transfer_service, test_user):
        plaid_client.accounts_get.return_value.to_dict.return_value = {"accounts": []}

        result = await PlaidService(plaid_client, transfer_service).exchange_public_token(
            test_user, "public-sandbox-1", "cust-1"
        )

        assert result is None
        plaid_client.processor_token_create.assert_not_called()

    @pytest.mark.asyncio
    async def test_funding_source_failure(self, plaid_client, transfer_service, test_user):
        transfer_service.add_funding_source.return_value = None

        result = await PlaidService(plaid_client, transfer_service).exchange_public_token(
            test_user, "public-sandbox-1", "cust-1"
        )

        assert result is None


class TestPlaidApiException:
    def test_body_with_http_prefix(self):
        body = "(400)\nReason: Bad Request\nHTTP response body: " + json.dumps(PLAID_ERROR)

        exc = PlaidApiException(_api_exception(body))

        assert exc.plaid_error.request_id == "req-123"
        assert "INVALID_PUBLIC_TOKEN" in exc.detail

    def test_unparseable_body(self):
        exc = PlaidApiException(_api_exception("gateway timeout"))

        assert exc.plaid_error is None
        assert "gateway timeout" in exc.detail


class TestPlaidClient:
    def test_sandbox_client(self, monkeypatch):
        monkeypatch.setattr(settings, "plaid_env", "Sandbox")

        client = create_plaid_client()

        assert client.api_client.configuration.host == "https://sandbox.plaid.com"

    def test_unknown_environment(self, monkeypatch):
        monkeypatch.setattr(settings, "plaid_env", "staging")

        with pytest.raises(ConfigurationError):
            create_plaid_client()

    def test_credentials_required(self, monkeypatch):
        monkeypatch.setattr(settings, "plaid_secret", "")

        with pytest.raises(ConfigurationError):
            create_plaid_client()
