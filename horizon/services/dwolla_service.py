"""
Dwolla payment network client.
"""

import time
from functools import lru_cache
from typing import Any, Dict, Optional

import httpx

from ..constants import (
    ContentTypes,
    DwollaEnvironments,
    DwollaHosts,
    DwollaPaths,
    DwollaTokens,
    RequestHeaders,
)
from ..exceptions import ConfigurationError, DwollaApiException
from ..models.transfer import FundingSource, Transfer
from ..settings import settings
from ..utils.logger import get_logger

logger = get_logger(__name__)


def get_dwolla_base_url(environment: str) -> str:
    environment_map = {
        DwollaEnvironments.SANDBOX: DwollaHosts.SANDBOX,
        DwollaEnvironments.PRODUCTION: DwollaHosts.PRODUCTION,
    }
    try:
        return environment_map[environment.lower()]
    except KeyError:
        raise ConfigurationError(
            f"Dwolla environment must be 'sandbox' or 'production', got '{environment}'"
        )


class DwollaClient:
    """Async client for the handful of Dwolla endpoints the app uses."""

    def __init__(
        self,
        key: str,
        secret: str,
        base_url: str,
        timeout: float = 30.0,
    ):
        if not key or not secret:
            raise ConfigurationError("Dwolla key and secret are required")

        self.key = key
        self.secret = secret
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._access_token: Optional[str] = None
        self._token_expires_at = 0.0

    async def _get_access_token(self) -> str:
        """Client-credentials token, reused until shortly before it expires."""
        if self._access_token and time.monotonic() < self._token_expires_at:
            return self._access_token

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(
                f"{self.base_url}{DwollaPaths.TOKEN}",
                auth=(self.key, self.secret),
                data={"grant_type": "client_credentials"},
            )

        if response.is_error:
            raise DwollaApiException(response)

        token_data = response.json()
        self._access_token = token_data["access_token"]
        expires_in = int(token_data.get("expires_in", 3600))
        self._token_expires_at = (
            time.monotonic() + expires_in - DwollaTokens.EXPIRY_MARGIN_SECONDS
        )
        logger.debug("Dwolla access token refreshed")
        return self._access_token

    async def post(
        self,
        path: str,
        body: Optional[Dict[str, Any]] = None,
        headers: Optional[Dict[str, str]] = None,
    ) -> httpx.Response:
        """POST a HAL+JSON body; ``path`` may be relative or a full resource URL."""
        access_token = await self._get_access_token()
        url = path if path.startswith("http") else f"{self.base_url}{path}"

        request_headers = {
            "Accept": ContentTypes.DWOLLA_HAL_JSON,
            "Content-Type": ContentTypes.DWOLLA_HAL_JSON,
            "Authorization": f"Bearer {access_token}",
        }
        if headers:
            request_headers.update(headers)

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.post(url, json=body or {}, headers=request_headers)

        if response.is_error:
            logger.warning(f"Dwolla POST {path} failed with {response.status_code}")
            raise DwollaApiException(response)
        return response

    async def create_on_demand_authorization(self) -> Dict[str, Any]:
        """Authorization grant; its ``_links`` are attached to new funding sources."""
        response = await self.post(DwollaPaths.ON_DEMAND_AUTHORIZATIONS)
        return response.json()["_links"]

    async def create_funding_source(self, funding_source: FundingSource) -> str:
        """Register the funding source and return its URL."""
        path = DwollaPaths.CUSTOMER_FUNDING_SOURCES.format(
            customer_id=funding_source.customer_id
        )
        response = await self.post(path, funding_source.to_request_body())
        return response.headers[RequestHeaders.LOCATION]

    async def create_transfer(
        self, transfer: Transfer, idempotency_key: Optional[str] = None
    ) -> str:
        """Initiate the transfer and return its URL."""
        headers = {RequestHeaders.IDEMPOTENCY_KEY: idempotency_key} if idempotency_key else None
        response = await self.post(
            DwollaPaths.TRANSFERS, transfer.to_request_body(), headers=headers
        )
        return response.headers[RequestHeaders.LOCATION]


def create_dwolla_client() -> DwollaClient:
    base_url = settings.dwolla_base_url or get_dwolla_base_url(settings.dwolla_env)
    return DwollaClient(
        settings.dwolla_key,
        settings.dwolla_secret,
        base_url,
        timeout=settings.http_timeout_seconds,
    )


@lru_cache()
def get_dwolla_client() -> DwollaClient:
    """Process-wide client, so the bearer token outlives a single request."""
    return create_dwolla_client()
