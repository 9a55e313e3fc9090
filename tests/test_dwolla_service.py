"""
Tests for the Dwolla client.

Uses pytest-httpx for HTTP mocking.
"""
import base64
import json

import pytest
from pytest_httpx import HTTPXMock

from horizon.exceptions import ConfigurationError, DwollaApiException
from horizon.models.transfer import FundingSource, Link, Transfer
from horizon.services.dwolla_service import (
    DwollaClient,
    create_dwolla_client,
    get_dwolla_base_url,
    get_dwolla_client,
)
from horizon.dependencies import get_transfer_service

BASE_URL = "https://api-sandbox.dwolla.com"
AUTH_LINK = f"{BASE_URL}/on-demand-authorizations/30e7c028-0bdf-e511-80de-0aa34a9b2388"


@pytest.fixture
def dwolla() -> DwollaClient:
    return DwollaClient("key", "secret", BASE_URL, timeout=5.0)


def _add_token(httpx_mock: HTTPXMock, expires_in: int = 3600):
    httpx_mock.add_response(
        method="POST",
        url=f"{BASE_URL}/token",
        json={"access_token": "bearer-token", "token_type": "bearer", "expires_in": expires_in},
    )


def _add_on_demand_authorization(httpx_mock: HTTPXMock):
    httpx_mock.add_response(
        method="POST",
        url=f"{BASE_URL}/on-demand-authorizations",
        json={
            "_links": {"self": {"href": AUTH_LINK}},
            "bodyText": "I agree that future payments to Company ABC inc. will be processed by the Dwolla payment system.",
            "buttonText": "Agree & Continue",
        },
        status_code=201,
    )


class TestBaseUrl:
    def test_environments(self):
        assert get_dwolla_base_url("sandbox") == BASE_URL
        assert get_dwolla_base_url("Production") == "https://api.dwolla.com"

    def test_unknown_environment(self):
        with pytest.raises(ConfigurationError):
            get_dwolla_base_url("staging")

    def test_client_from_settings(self):
        client = create_dwolla_client()
        assert client.base_url == BASE_URL
        assert client.key == "test-dwolla-key"

    def test_credentials_required(self):
        with pytest.raises(ConfigurationError):
            DwollaClient("", "secret", BASE_URL)


class TestAuthentication:
    @pytest.mark.asyncio
    async def test_client_credentials_token(self, dwolla, httpx_mock: HTTPXMock):
        _add_token(httpx_mock)
        _add_on_demand_authorization(httpx_mock)

        await dwolla.create_on_demand_authorization()

        token_request = httpx_mock.get_request(url=f"{BASE_URL}/token")
        expected = base64.b64encode(b"key:secret").decode()
        assert token_request.headers["Authorization"] == f"Basic {expected}"
        assert token_request.content == b"grant_type=client_credentials"

        api_request = httpx_mock.get_request(url=f"{BASE_URL}/on-demand-authorizations")
        assert api_request.headers["Authorization"] == "Bearer bearer-token"
        assert api_request.headers["Accept"] == "application/vnd.dwolla.v1.hal+json"
        assert api_request.headers["Content-Type"] == "application/vnd.dwolla.v1.hal+json"

    @pytest.mark.asyncio
    async def test_token_is_reused(self, dwolla, httpx_mock: HTTPXMock):
        _add_token(httpx_mock)
        _add_on_demand_authorization(httpx_mock)
        _add_on_demand_authorization(httpx_mock)

        await dwolla.create_on_demand_authorization()
        await dwolla.create_on_demand_authorization()

        token_requests = [r for r in httpx_mock.get_requests() if r.url.path == "/token"]
        assert len(token_requests) == 1

    @pytest.mark.asyncio
    async def test_token_failure(self, dwolla, httpx_mock: HTTPXMock):
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/token",
            status_code=401,
            json={"error": "invalid_client"},
        )

        with pytest.raises(DwollaApiException) as exc_info:
            await dwolla.create_on_demand_authorization()
        assert exc_info.value.status_code == 401


class TestFundingSources:
    @pytest.mark.asyncio
    async def test_on_demand_authorization_returns_links(self, dwolla, httpx_mock: HTTPXMock):
        _add_token(httpx_mock)
        _add_on_demand_authorization(httpx_mock)

        links = await dwolla.create_on_demand_authorization()

        assert links == {"self": {"href": AUTH_LINK}}

    @pytest.mark.asyncio
    async def test_create_funding_source(self, dwolla, httpx_mock: HTTPXMock):
        location = f"{BASE_URL}/funding-sources/375c6781-2a17-476c-84f7-db7d2f6ffb31"
        _add_token(httpx_mock)
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/customers/cust-1/funding-sources",
            status_code=201,
            headers={"Location": location},
        )

        result = await dwolla.create_funding_source(
            FundingSource(
                customer_id="cust-1",
                name="Plaid Checking",
                processor_token="processor-sandbox-abc",
                links={"on-demand-authorization": Link(href=AUTH_LINK)},
            )
        )

        assert result == location
        request = httpx_mock.get_request(url=f"{BASE_URL}/customers/cust-1/funding-sources")
        assert json.loads(request.content) == {
            "name": "Plaid Checking",
            "plaidToken": "processor-sandbox-abc",
            "_links": {"on-demand-authorization": {"href": AUTH_LINK}},
        }

    @pytest.mark.asyncio
    async def test_validation_error_message(self, dwolla, httpx_mock: HTTPXMock):
        _add_token(httpx_mock)
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/customers/cust-1/funding-sources",
            status_code=400,
            json={
                "code": "ValidationError",
                "message": "Validation error(s) present. See embedded errors list for more details.",
                "_embedded": {
                    "errors": [
                        {
                            "code": "Invalid",
                            "message": "Invalid Plaid token.",
                            "path": "/plaidToken",
                        }
                    ]
                },
            },
        )

        with pytest.raises(DwollaApiException) as exc_info:
            await dwolla.create_funding_source(
                FundingSource(customer_id="cust-1", name="Bank", processor_token="bad")
            )

        assert exc_info.value.code == "ValidationError"
        assert "Invalid Plaid token." in exc_info.value.message
        assert exc_info.value.status_code == 400


class TestTransfers:
    @pytest.mark.asyncio
    async def test_create_transfer(self, dwolla, httpx_mock: HTTPXMock):
        location = f"{BASE_URL}/transfers/15c6bcce-46f7-e811-8112-e8dd3bececa8"
        _add_token(httpx_mock)
        httpx_mock.add_response(
            method="POST",
            url=f"{BASE_URL}/transfers",
            status_code=201,
            headers={"Location": location},
        )

        result = await dwolla.create_transfer(
            Transfer(source=f"{BASE_URL}/funding-sources/a", destination=f"{BASE_URL}/funding-sources/b", amount="10.00"),
            idempotency_key="key-123",
        )

        assert result == location
        request = httpx_mock.get_request(url=f"{BASE_URL}/transfers")
        assert request.headers["Idempotency-Key"] == "key-123"
        assert json.loads(request.content)["amount"] == {"currency": "USD", "value": "10.00"}


class TestSharedClient:
    @pytest.fixture(autouse=True)
    def fresh_client(self):
        get_dwolla_client.cache_clear()
        yield
        get_dwolla_client.cache_clear()

    def test_dependency_reuses_client(self):
        assert get_transfer_service().dwolla is get_transfer_service().dwolla

    @pytest.mark.asyncio
    async def test_token_shared_across_requests(self, httpx_mock: HTTPXMock):
        _add_token(httpx_mock)
        for index in range(2):
            httpx_mock.add_response(
                method="POST",
                url=f"{BASE_URL}/transfers",
                status_code=201,
                headers={"Location": f"{BASE_URL}/transfers/t-{index}"},
            )

        for _ in range(2):
            await get_transfer_service().create_transfer(
                f"{BASE_URL}/funding-sources/a", f"{BASE_URL}/funding-sources/b", "5.00"
            )

        token_requests = [r for r in httpx_mock.get_requests() if r.url.path == "/token"]
        transfer_requests = [r for r in httpx_mock.get_requests() if r.url.path == "/transfers"]
        assert len(token_requests) == 1
        assert len(transfer_requests) == 2
