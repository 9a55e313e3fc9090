"""
Identity provider models.
"""

from typing import Optional, Dict, Any
from pydantic import BaseModel, Field


class User(BaseModel):
    """Account record owned by the identity provider."""

    id: str = Field(..., alias="$id")
    name: str = ""
    email: str
    created_at: Optional[str] = Field(None, alias="$createdAt")
    updated_at: Optional[str] = Field(None, alias="$updatedAt")
    status: bool = True
    email_verification: bool = Field(False, alias="emailVerification")
    prefs: Dict[str, Any] = Field(default_factory=dict)

    class Config:
        extra = "ignore"
        populate_by_name = True

    @property
    def first_name(self) -> str:
        return self.name.partition(" ")[0]

    @property
    def last_name(self) -> str:
        return self.name.partition(" ")[2]


class Session(BaseModel):
    """Email/password session issued by the identity provider."""

    id: str = Field(..., alias="$id")
    user_id: str = Field(..., alias="userId")
    secret: str = ""
    expire: Optional[str] = None
    provider: Optional[str] = None
    created_at: Optional[str] = Field(None, alias="$createdAt")

    class Config:
        extra = "ignore"
        populate_by_name = True


class SessionResponse(BaseModel):
    """Session as returned to the browser; the secret only travels in the cookie."""

    id: str = Field(..., alias="$id")
    user_id: str = Field(..., alias="userId")
    expire: Optional[str] = None
    provider: Optional[str] = None

    class Config:
        populate_by_name = True
        from_attributes = True


class LogoutResponse(BaseModel):
    success: bool
