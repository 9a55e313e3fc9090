"""
Payment network request/response models.
"""

from typing import Dict, Literal, Optional
from pydantic import BaseModel, Field


class Link(BaseModel):
    href: str

    class Config:
        extra = "allow"


class AddFundingSourceRequest(BaseModel):
    """Register a bank account with a Dwolla customer."""

    dwolla_customer_id: str = Field(..., min_length=1)
    processor_token: str = Field(..., min_length=1)
    bank_name: str = Field(..., min_length=1)


class FundingSource(BaseModel):
    """Funding source as registered with the payment network."""

    customer_id: str
    name: str
    processor_token: str
    links: Dict[str, Link] = Field(default_factory=dict)
    location: Optional[str] = None

    def to_request_body(self) -> dict:
        return {
            "name": self.name,
            "plaidToken": self.processor_token,
            "_links": {
                rel: link.model_dump(exclude_none=True)
                for rel, link in self.links.items()
            },
        }


class FundingSourceResponse(BaseModel):
    customer_id: str
    name: str
    funding_source_url: str


class TransferRequest(BaseModel):
    source_funding_source_url: str = Field(..., min_length=1)
    destination_funding_source_url: str = Field(..., min_length=1)
    amount: str = Field(..., min_length=1, description="Decimal string, e.g. '10.00'")


class Transfer(BaseModel):
    """Transfer between two funding sources. Always in USD."""

    source: str
    destination: str
    amount: str
    currency: Literal["USD"] = "USD"

    def to_request_body(self) -> dict:
        return {
            "_links": {
                "source": {"href": self.source},
                "destination": {"href": self.destination},
            },
            "amount": {"currency": self.currency, "value": self.amount},
        }


class TransferResponse(BaseModel):
    transfer_url: str
