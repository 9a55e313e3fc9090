"""
Custom exception classes.
"""

import json
from fastapi import HTTPException
from typing import Any, Dict, Optional

import httpx
from plaid.exceptions import ApiException

from .models.plaid import PlaidError


class BaseCustomException(HTTPException):
    """Base custom exception."""

    def __init__(
        self,
        status_code: int,
        detail: Any = None,
        headers: Optional[Dict[str, Any]] = None,
    ) -> None:
        super().__init__(status_code, detail, headers)


class AuthenticationError(BaseCustomException):
    """Authentication error."""

    def __init__(self, detail: str = "Authentication failed"):
        super().__init__(status_code=401, detail=detail)


class ConfigurationError(BaseCustomException):
    """Missing or invalid vendor configuration."""

    def __init__(self, detail: str):
        super().__init__(status_code=500, detail=detail)


def _vendor_status(status_code: int) -> int:
    """Client errors pass through; anything else from a vendor is a bad gateway."""
    if 400 <= status_code < 500:
        return status_code
    return 502


def _response_payload(response: httpx.Response) -> Optional[Dict[str, Any]]:
    try:
        payload = response.json()
    except (ValueError, json.JSONDecodeError):
        return None
    return payload if isinstance(payload, dict) else None


class VendorApiException(BaseCustomException):
    """Error returned by one of the hosted vendor APIs."""

    vendor = "vendor"

    def __init__(self, response: httpx.Response, message: Optional[str] = None):
        self.response = response
        self.vendor_status = response.status_code
        self.payload = _response_payload(response)
        self.message = message or self.extract_message(self.payload) or response.text
        super().__init__(
            status_code=_vendor_status(response.status_code),
            detail=f"{self.vendor} error ({response.status_code}): {self.message}",
        )

    @staticmethod
    def extract_message(payload: Optional[Dict[str, Any]]) -> Optional[str]:
        if not payload:
            return None
        return payload.get("message")


class AppwriteApiException(VendorApiException):
    """Appwrite error. Body shape: {"message", "code", "type", "version"}."""

    vendor = "Appwrite"

    def __init__(self, response: httpx.Response):
        super().__init__(response)
        self.error_type = (self.payload or {}).get("type")


class DwollaApiException(VendorApiException):
    """
    Dwolla error.

    Validation failures nest the field errors under ``_embedded.errors``;
    their messages are appended to the top-level one.
    """

    vendor = "Dwolla"

    def __init__(self, response: httpx.Response):
        super().__init__(response)
        self.code = (self.payload or {}).get("code")

    @staticmethod
    def extract_message(payload: Optional[Dict[str, Any]]) -> Optional[str]:
        if not payload:
            return None
        message = payload.get("message")
        errors = (payload.get("_embedded") or {}).get("errors") or []
        details = [error.get("message") for error in errors if error.get("message")]
        if details:
            message = f"{message} ({'; '.join(details)})" if message else "; ".join(details)
        return message


class CheckbookApiException(VendorApiException):
    """Checkbook error. The body carries the reason under ``error``."""

    vendor = "Checkbook"

    @staticmethod
    def extract_message(payload: Optional[Dict[str, Any]]) -> Optional[str]:
        if not payload:
            return None
        return payload.get("error") or payload.get("message")


class PlaidApiException(BaseCustomException):
    """
    Custom exception for Plaid API errors.

    It parses the error body from Plaid's ApiException.
    It handles two cases:
    1. The body is a clean JSON string.
    2. The body is a descriptive HTTP error message that CONTAINS a JSON string.
    """

    def __init__(self, original_exception: ApiException):
        self.original_exception = original_exception
        raw_body_string = original_exception.body or ""
        json_to_parse = None

        marker = "HTTP response body: "

        if marker in raw_body_string:
            json_to_parse = raw_body_string.split(marker, 1)[1]
        else:
            json_to_parse = raw_body_string

        try:
            if not json_to_parse:
                raise ValueError(
                    "Could not find a JSON payload in the API exception body."
                )

            self.plaid_error: Optional[PlaidError] = PlaidError.model_validate_json(
                json_to_parse
            )

            detail_message = (
                f"Plaid Error: {self.plaid_error.error_code} - "
                f"{self.plaid_error.error_message} "
                f"(Request ID: {self.plaid_error.request_id})"
            )
        except ValueError:
            # pydantic's ValidationError is a ValueError too
            self.plaid_error = None
            detail_message = (
                f"Failed to parse Plaid API error. Raw response: {raw_body_string}"
            )

        super().__init__(status_code=502, detail=detail_message)
