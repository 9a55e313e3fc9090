"""
Identity provider and session cookie constants.
"""


# Appwrite request headers
class AppwriteHeaders:
    PROJECT = "X-Appwrite-Project"
    KEY = "X-Appwrite-Key"
    SESSION = "X-Appwrite-Session"


# Appwrite REST paths
class AppwritePaths:
    ACCOUNT = "/account"
    EMAIL_SESSION = "/account/sessions/email"
    SESSION = "/account/sessions/{session_id}"
    USER = "/users/{user_id}"


class AppwriteIds:
    # Server generates the document id
    UNIQUE = "unique()"
    CURRENT_SESSION = "current"


# Session cookie attributes
class SessionCookie:
    PATH = "/"
    HTTP_ONLY = True
    SAME_SITE = "strict"
    SECURE = True


class AuthFormTypes:
    SIGN_IN = "sign-in"
    SIGN_UP = "sign-up"
