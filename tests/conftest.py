"""
Test configuration and fixtures.
"""
import os

os.environ.setdefault("ENVIRONMENT", "test")
os.environ.setdefault("APPWRITE_ENDPOINT", "https://appwrite.example.com/v1")
os.environ.setdefault("APPWRITE_PROJECT", "test-project")
os.environ.setdefault("APPWRITE_KEY", "test-api-key")
os.environ.setdefault("DWOLLA_ENV", "sandbox")
os.environ.setdefault("DWOLLA_KEY", "test-dwolla-key")
os.environ.setdefault("DWOLLA_SECRET", "test-dwolla-secret")
os.environ.setdefault("PLAID_CLIENT_ID", "test-plaid-client")
os.environ.setdefault("PLAID_SECRET", "test-plaid-secret")
os.environ.setdefault("CHECKBOOK_KEY", "test-checkbook-key")
os.environ.setdefault("CHECKBOOK_SECRET", "test-checkbook-secret")
os.environ.setdefault("CHECKBOOK_BASE_URL", "https://checkbook.example.com")

import secrets
from typing import Dict, List, Optional

import httpx
import pytest
from fastapi.testclient import TestClient

from horizon.dependencies import get_user_service
from horizon.exceptions import AppwriteApiException, AuthenticationError
from horizon.main import app
from horizon.models.user import Session, User
from horizon.services.user_service import UserService


class FakeAppwriteBackend:
    """In-memory stand-in for the Appwrite project."""

    def __init__(self):
        self.accounts: Dict[str, dict] = {}
        self.sessions: Dict[str, str] = {}  # secret -> user id
        self.calls: List[str] = []

    def admin_client(self) -> "FakeAppwriteClient":
        return FakeAppwriteClient(self)

    def session_client(self, session_secret: Optional[str]) -> "FakeAppwriteClient":
        if not session_secret:
            raise AuthenticationError("No session")
        return FakeAppwriteClient(self, session_secret)


class FakeAppwriteClient:
    def __init__(self, backend: FakeAppwriteBackend, session_secret: Optional[str] = None):
        self.backend = backend
        self.session_secret = session_secret

    @staticmethod
    def _error(status_code: int, message: str, error_type: str) -> AppwriteApiException:
        return AppwriteApiException(
            httpx.Response(
                status_code, json={"message": message, "code": status_code, "type": error_type}
            )
        )

    def _user(self, account: dict) -> User:
        return User.model_validate(
            {"$id": account["id"], "name": account["name"], "email": account["email"]}
        )

    async def create_account(self, email, password, name, user_id="unique()"):
        self.backend.calls.append("create_account")
        if any(a["email"] == email for a in self.backend.accounts.values()):
            raise self._error(409, "A user with the same email already exists", "user_already_exists")
        new_id = f"user-{len(self.backend.accounts) + 1}"
        self.backend.accounts[new_id] = {
            "id": new_id,
            "email": email,
            "password": password,
            "name": name,
        }
        return self._user(self.backend.accounts[new_id])

    async def create_email_password_session(self, email, password):
        self.backend.calls.append("create_session")
        for account in self.backend.accounts.values():
            if account["email"] == email and account["password"] == password:
                secret = secrets.token_hex(16)
                self.backend.sessions[secret] = account["id"]
                return Session.model_validate(
                    {"$id": f"session-{len(self.backend.sessions)}", "userId": account["id"], "secret": secret}
                )
        raise self._error(401, "Invalid credentials", "user_invalid_credentials")

    async def delete_session(self, session_id="current"):
        self.backend.calls.append("delete_session")
        if self.session_secret not in self.backend.sessions:
            raise self._error(401, "Session not found", "general_unauthorized_scope")
        del self.backend.sessions[self.session_secret]

    async def get_account(self):
        user_id = self.backend.sessions.get(self.session_secret)
        if not user_id:
            raise self._error(401, "User (role: guests) missing scope (account)", "general_unauthorized_scope")
        return self._user(self.backend.accounts[user_id])

    async def get_user(self, user_id):
        if user_id not in self.backend.accounts:
            raise self._error(404, "User with the requested ID could not be found.", "user_not_found")
        return self._user(self.backend.accounts[user_id])


@pytest.fixture
def appwrite_backend() -> FakeAppwriteBackend:
    return FakeAppwriteBackend()


@pytest.fixture
def user_service(appwrite_backend: FakeAppwriteBackend) -> UserService:
    return UserService(
        admin_client_factory=appwrite_backend.admin_client,
        session_client_factory=appwrite_backend.session_client,
    )


@pytest.fixture
def client(user_service: UserService):
    """Create a test client backed by the in-memory identity provider."""
    app.dependency_overrides[get_user_service] = lambda: user_service
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def sign_up_data() -> dict:
    return {
        "firstName": "Jane",
        "lastName": "Doe",
        "address1": "123 Main St",
        "city": "New York",
        "state": "NY",
        "postalCode": "11101",
        "dateOfBirth": "1990-01-01",
        "ssn": "1234",
        "email": "jane.doe@example.com",
        "password": "correct-horse",
    }


@pytest.fixture
def test_user() -> User:
    return User.model_validate(
        {"$id": "user-42", "name": "Jane Doe", "email": "jane.doe@example.com"}
    )
