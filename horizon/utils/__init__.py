"""
Utility modules for the application.
"""

from .logger import get_logger, setup_logging
from .cookies import delete_session_cookie, get_session_secret, set_session_cookie

__all__ = [
    "get_logger",
    "setup_logging",
    "delete_session_cookie",
    "get_session_secret",
    "set_session_cookie",
]
