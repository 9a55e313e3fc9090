"""
Plaid-related Pydantic models for data validation and serialization.
"""

from typing import Optional
from pydantic import BaseModel, Field


class PlaidError(BaseModel):
    """Error body returned by the Plaid API."""

    error_type: str
    error_code: str
    error_message: str
    display_message: Optional[str] = None
    request_id: Optional[str] = None

    class Config:
        extra = "ignore"


class LinkTokenResponse(BaseModel):
    link_token: str


class ExchangePublicTokenRequest(BaseModel):
    """Public token from Plaid Link plus the Dwolla customer to fund."""

    public_token: str = Field(..., min_length=1)
    dwolla_customer_id: str = Field(..., min_length=1)


class LinkedBankResponse(BaseModel):
    """Result of linking a bank through Plaid and registering it with Dwolla."""

    item_id: str
    account_id: str
    bank_name: str
    funding_source_url: str
