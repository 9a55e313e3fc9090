"""
Checkbook action models.
"""

from pydantic import BaseModel, EmailStr, Field


class CheckbookCustomerRequest(BaseModel):
    first_name: str = Field(..., min_length=1, alias="firstName")
    last_name: str = Field(..., min_length=1, alias="lastName")
    email: EmailStr

    class Config:
        populate_by_name = True


class CheckbookBankRequest(BaseModel):
    processor_token: str = Field(..., min_length=1)
