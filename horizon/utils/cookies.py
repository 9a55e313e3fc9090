"""
Session cookie helpers.
"""

from typing import Optional

from fastapi import Request, Response

from ..constants import SessionCookie
from ..settings import settings


def set_session_cookie(response: Response, secret: str) -> None:
    """Persist the identity provider's session secret in the browser."""
    response.set_cookie(
        key=settings.session_cookie_name,
        value=secret,
        path=SessionCookie.PATH,
        httponly=SessionCookie.HTTP_ONLY,
        samesite=SessionCookie.SAME_SITE,
        secure=SessionCookie.SECURE,
    )


def delete_session_cookie(response: Response) -> None:
    response.delete_cookie(
        key=settings.session_cookie_name,
        path=SessionCookie.PATH,
        httponly=SessionCookie.HTTP_ONLY,
        samesite=SessionCookie.SAME_SITE,
        secure=SessionCookie.SECURE,
    )


def get_session_secret(request: Request) -> Optional[str]:
    return request.cookies.get(settings.session_cookie_name)
