"""
Sign-in and sign-up form schemas.
"""

from typing import List, Literal, Optional
from pydantic import BaseModel, Field, EmailStr, field_validator


class SignInForm(BaseModel):
    """Sign-in form."""

    email: EmailStr
    password: str = Field(..., min_length=8)


class SignUpForm(SignInForm):
    """Sign-up form: sign-in fields plus the applicant's personal details."""

    first_name: str = Field(..., min_length=3, alias="firstName")
    last_name: str = Field(..., min_length=3, alias="lastName")
    address1: str = Field(..., max_length=50)
    city: str = Field(..., max_length=50)
    state: str = Field(..., min_length=2, max_length=2)
    postal_code: str = Field(..., min_length=3, max_length=6, alias="postalCode")
    date_of_birth: str = Field(..., min_length=3, alias="dateOfBirth")
    ssn: str = Field(..., min_length=3)

    class Config:
        populate_by_name = True

    @field_validator("first_name", "last_name", "address1", "city", "state", mode="before")
    @classmethod
    def strip_whitespace(cls, v):
        # Length rules apply to the stripped value
        return v.strip() if isinstance(v, str) else v

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}"


class FormField(BaseModel):
    name: str
    label: str
    placeholder: str
    type: Literal["text", "email", "password"] = "text"


class FormLink(BaseModel):
    prompt: str
    label: str
    href: str


class AuthFormDefinition(BaseModel):
    """Everything the browser needs to draw the sign-in or sign-up screen."""

    type: Literal["sign-in", "sign-up"]
    title: str
    subtitle: str
    fields: List[FormField]
    submit_label: str
    submit_url: str
    footer: FormLink
    logo: Optional[str] = None
