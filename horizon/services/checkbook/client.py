"""
Checkbook API client.

The per-operation methods are generated from ``OPERATIONS``; the client itself
only knows how to authenticate, pick a server and send a request.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional, Tuple

import httpx

from ...constants import ContentTypes
from ...exceptions import CheckbookApiException
from ...utils.logger import get_logger
from .operations import OPERATIONS, Operation

logger = get_logger(__name__)

_TEMPLATE_VARIABLE = re.compile(r"\{(\w+)\}")

USER_AGENT = "checkbook-docs/3.0.0 (horizon)"


@dataclass
class FetchResponse:
    status: int
    data: Any
    headers: Dict[str, str] = field(default_factory=dict)


def fill_template(template: str, values: Mapping[str, Any]) -> Tuple[str, Dict[str, Any]]:
    """
    Substitute ``{name}`` placeholders from ``values``.

    Returns the filled string and the values that were not used.
    """
    remaining = dict(values)
    missing = []

    def substitute(match: re.Match) -> str:
        name = match.group(1)
        if name not in remaining:
            missing.append(name)
            return match.group(0)
        return str(remaining.pop(name))

    filled = _TEMPLATE_VARIABLE.sub(substitute, template)
    if missing:
        raise ValueError(f"Missing value for {', '.join(missing)} in '{template}'")
    return filled, remaining


def _decode_body(response: httpx.Response) -> Any:
    if not response.content:
        return None
    content_type = response.headers.get("content-type", "")
    if "json" in content_type:
        return response.json()
    if content_type.startswith("text/"):
        return response.text
    return response.content


class CheckbookClient:
    """Async client for the Checkbook payments API."""

    def __init__(self, server_url: Optional[str] = None, timeout: float = 30.0):
        self.server_url = server_url.rstrip("/") if server_url else None
        self.timeout = timeout
        self._authorization: Optional[str] = None

    def config(self, timeout: Optional[float] = None) -> None:
        """Override client options. ``timeout`` is in seconds."""
        if timeout is not None:
            self.timeout = timeout

    def auth(self, *values: Any) -> "CheckbookClient":
        """Set credentials. Checkbook expects ``Authorization: <key>:<secret>``."""
        if not values or len(values) > 2:
            raise ValueError("auth() takes an API key and an optional secret")
        self._authorization = ":".join(str(value) for value in values)
        return self

    def server(self, url: str, variables: Optional[Mapping[str, Any]] = None) -> None:
        """Use ``url`` as base URL, filling ``{variable}`` placeholders."""
        filled, _ = fill_template(url, variables or {})
        self.server_url = filled.rstrip("/")

    async def fetch(
        self,
        path: str,
        method: str,
        body: Optional[Dict[str, Any]] = None,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> FetchResponse:
        """Send one request; path parameters come from ``metadata``, the rest is the query."""
        if not self.server_url:
            raise ValueError("No server configured; call server() first")

        resolved_path, query = fill_template(path, metadata or {})
        headers = {
            "Accept": ContentTypes.APPLICATION_JSON,
            "User-Agent": USER_AGENT,
        }
        if self._authorization:
            headers["Authorization"] = self._authorization

        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.request(
                method.upper(),
                f"{self.server_url}{resolved_path}",
                json=body,
                params=query or None,
                headers=headers,
            )

        if response.is_error:
            logger.warning(
                f"Checkbook {method.upper()} {resolved_path} failed with {response.status_code}"
            )
            raise CheckbookApiException(response)

        return FetchResponse(
            status=response.status_code,
            data=_decode_body(response),
            headers=dict(response.headers),
        )


def _make_operation(name: str, operation: Operation):
    async def call(
        self: CheckbookClient,
        body: Optional[Dict[str, Any]] = None,
        metadata: Optional[Mapping[str, Any]] = None,
    ) -> FetchResponse:
        return await self.fetch(operation.path, operation.method, body, metadata)

    call.__name__ = name
    call.__qualname__ = f"CheckbookClient.{name}"
    call.__doc__ = f"{operation.summary}.\n\n{operation.method.upper()} {operation.path}"
    return call


for _name, _operation in OPERATIONS.items():
    setattr(CheckbookClient, _name, _make_operation(_name, _operation))
