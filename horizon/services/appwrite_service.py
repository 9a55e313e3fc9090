"""
Appwrite identity provider client.

Two flavours of client are used, mirroring the Appwrite server SDK:
- the admin client authenticates with the project API key and may create
  accounts and email/password sessions on behalf of a user;
- the session client authenticates with a user's session secret and acts as
  that user (read the account, delete the current session).
"""

from typing import Any, Dict, Optional

import httpx

from ..constants import AppwriteHeaders, AppwriteIds, AppwritePaths, ContentTypes
from ..exceptions import AppwriteApiException, AuthenticationError, ConfigurationError
from ..models.user import Session, User
from ..settings import settings
from ..utils.logger import get_logger

logger = get_logger(__name__)


class AppwriteClient:
    """Thin async wrapper over the Appwrite REST API."""

    def __init__(
        self,
        endpoint: str,
        project_id: str,
        api_key: Optional[str] = None,
        session_secret: Optional[str] = None,
        timeout: float = 30.0,
    ):
        if not endpoint or not project_id:
            raise ConfigurationError("Appwrite endpoint and project are required")

        self.endpoint = endpoint.rstrip("/")
        self.timeout = timeout
        self.headers = {
            AppwriteHeaders.PROJECT: project_id,
            "Content-Type": ContentTypes.APPLICATION_JSON,
        }
        if api_key:
            self.headers[AppwriteHeaders.KEY] = api_key
        if session_secret:
            self.headers[AppwriteHeaders.SESSION] = session_secret

    async def _request(
        self, method: str, path: str, json: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        url = f"{self.endpoint}{path}"
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            response = await client.request(method, url, json=json, headers=self.headers)

        if response.is_error:
            logger.warning(f"Appwrite {method} {path} failed with {response.status_code}")
            raise AppwriteApiException(response)

        # DELETE answers 204 with an empty body
        if response.status_code == 204 or not response.content:
            return {}
        return response.json()

    async def create_account(
        self, email: str, password: str, name: str, user_id: str = AppwriteIds.UNIQUE
    ) -> User:
        data = await self._request(
            "POST",
            AppwritePaths.ACCOUNT,
            json={"userId": user_id, "email": email, "password": password, "name": name},
        )
        return User.model_validate(data)

    async def create_email_password_session(self, email: str, password: str) -> Session:
        data = await self._request(
            "POST",
            AppwritePaths.EMAIL_SESSION,
            json={"email": email, "password": password},
        )
        return Session.model_validate(data)

    async def delete_session(self, session_id: str = AppwriteIds.CURRENT_SESSION) -> None:
        await self._request(
            "DELETE", AppwritePaths.SESSION.format(session_id=session_id)
        )

    async def get_account(self) -> User:
        data = await self._request("GET", AppwritePaths.ACCOUNT)
        return User.model_validate(data)

    async def get_user(self, user_id: str) -> User:
        data = await self._request("GET", AppwritePaths.USER.format(user_id=user_id))
        return User.model_validate(data)


def create_admin_client() -> AppwriteClient:
    """Client acting with the project API key."""
    return AppwriteClient(
        settings.appwrite_endpoint,
        settings.appwrite_project,
        api_key=settings.appwrite_key,
        timeout=settings.http_timeout_seconds,
    )


def create_session_client(session_secret: Optional[str]) -> AppwriteClient:
    """Client acting as the user who owns ``session_secret``."""
    if not session_secret:
        raise AuthenticationError("No session")
    return AppwriteClient(
        settings.appwrite_endpoint,
        settings.appwrite_project,
        session_secret=session_secret,
        timeout=settings.http_timeout_seconds,
    )
