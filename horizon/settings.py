"""
Application configuration settings.
"""

from typing import Optional
from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings."""

    # API Settings
    project_name: str = Field(default="Horizon API")
    version: str = Field(default="1.0.0")
    api_v1_prefix: str = Field(default="/api/v1")
    debug: bool = Field(default=False)

    # CORS
    frontend_url: str = Field(default="http://localhost:3000")
    allowed_origins: str = Field(
        default="http://localhost:3000,http://localhost:5173"
    )

    @property
    def allowed_origins_list(self) -> list[str]:
        """Get allowed origins as a list."""
        return [
            origin.strip()
            for origin in self.allowed_origins.split(",")
            if origin.strip()
        ]

    # Appwrite (identity provider)
    appwrite_endpoint: str = Field(default="https://cloud.appwrite.io/v1")
    appwrite_project: str = Field(default="")
    appwrite_key: str = Field(default="")
    session_cookie_name: str = Field(default="appwrite-session")

    # Dwolla (payment network)
    dwolla_env: str = Field(default="sandbox")
    dwolla_key: str = Field(default="")
    dwolla_secret: str = Field(default="")
    dwolla_base_url: Optional[str] = Field(default=None)

    # Plaid (bank aggregator)
    plaid_client_id: str = Field(default="")
    plaid_secret: str = Field(default="")
    plaid_env: str = Field(default="sandbox")

    # Checkbook (payments API)
    checkbook_key: str = Field(default="")
    checkbook_secret: str = Field(default="")
    checkbook_base_url: str = Field(default="https://sandbox.checkbook.io")

    # Outbound HTTP
    http_timeout_seconds: float = Field(default=30.0)

    # Logging
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default=None)

    # Environment
    environment: str = Field(default="development")

    class Config:
        env_file = ".env"
        case_sensitive = False
        extra = "ignore"


def get_settings() -> Settings:
    """Get settings instance."""
    return Settings()


# Global settings instance
settings = get_settings()
