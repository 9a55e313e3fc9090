"""
User service: sign-up, sign-in and session handling against Appwrite.

Every action logs vendor failures and returns ``None`` so callers only have to
tell success from "nothing happened".
"""

from typing import Callable, Optional

from fastapi import Request, Response

from ..models.auth import SignUpForm
from ..models.user import Session, User
from ..utils.cookies import delete_session_cookie, get_session_secret, set_session_cookie
from ..utils.logger import get_logger
from .appwrite_service import AppwriteClient, create_admin_client, create_session_client

logger = get_logger(__name__)


class UserService:
    """Identity server actions."""

    def __init__(
        self,
        admin_client_factory: Callable[[], AppwriteClient] = create_admin_client,
        session_client_factory: Callable[
            [Optional[str]], AppwriteClient
        ] = create_session_client,
    ):
        self.admin_client_factory = admin_client_factory
        self.session_client_factory = session_client_factory

    async def sign_in(
        self, email: str, password: str, response: Response
    ) -> Optional[Session]:
        """Open an email/password session and store its secret in the cookie."""
        try:
            account = self.admin_client_factory()
            session = await account.create_email_password_session(email, password)

            set_session_cookie(response, session.secret)

            logger.info(f"User signed in: {session.user_id}")
            return session
        except Exception as e:
            logger.error(f"Sign-in failed for {email}: {e}")
            return None

    async def sign_up(self, user_data: SignUpForm, response: Response) -> Optional[User]:
        """Create the account, then sign the new user in."""
        try:
            account = self.admin_client_factory()

            new_user_account = await account.create_account(
                email=user_data.email,
                password=user_data.password,
                name=user_data.full_name,
            )
            session = await account.create_email_password_session(
                user_data.email, user_data.password
            )

            set_session_cookie(response, session.secret)

            logger.info(f"User account created: {new_user_account.id}")
            return new_user_account
        except Exception as e:
            logger.error(f"Sign-up failed for {user_data.email}: {e}")
            return None

    async def logout_account(self, request: Request, response: Response) -> Optional[bool]:
        """
        Clear the session cookie, then end the session at Appwrite.

        Returns True only when both steps complete.
        """
        try:
            session_secret = get_session_secret(request)
            delete_session_cookie(response)

            account = self.session_client_factory(session_secret)
            await account.delete_session()

            logger.info("User logged out")
            return True
        except Exception as e:
            logger.error(f"Logout failed: {e}")
            return None

    async def get_logged_in_user(self, session_secret: Optional[str]) -> Optional[User]:
        try:
            account = self.session_client_factory(session_secret)
            return await account.get_account()
        except Exception as e:
            logger.info(f"No logged in user: {e}")
            return None

    async def get_user_info(self, user_id: str) -> Optional[User]:
        """Look up any user by id with the admin client."""
        try:
            admin = self.admin_client_factory()
            return await admin.get_user(user_id)
        except Exception as e:
            logger.error(f"Failed to get user info for {user_id}: {e}")
            return None
