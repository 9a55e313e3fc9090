"""
API-related constants.
"""

# API Route Prefixes
class ApiRoutes:
    AUTH_PREFIX = "/auth"
    DASHBOARD_PREFIX = "/dashboard"
    TRANSFERS_PREFIX = "/transfers"
    PLAID_PREFIX = "/plaid"
    CHECKBOOK_PREFIX = "/checkbook"


# API Route Tags
class ApiTags:
    AUTH = "Authentication"
    DASHBOARD = "dashboard"
    TRANSFERS = "transfers"
    PLAID = "plaid"
    CHECKBOOK = "checkbook"


# HTTP Status Messages
class HttpMessages:
    NO_ACTIVE_SESSION = "No active session"
    SIGN_IN_FAILED = "Sign-in failed"
    SIGN_UP_FAILED = "Sign-up failed"
    LOGOUT_FAILED = "Logout failed"
    FUNDING_SOURCE_FAILED = "Failed to add funding source"
    TRANSFER_FAILED = "Transfer failed"
    CHECKBOOK_CUSTOMER_FAILED = "Failed to create Checkbook customer"
    CHECKBOOK_BANK_FAILED = "Failed to connect bank account to Checkbook"


# Content Types
class ContentTypes:
    APPLICATION_JSON = "application/json"
    DWOLLA_HAL_JSON = "application/vnd.dwolla.v1.hal+json"


# Request Headers
class RequestHeaders:
    IDEMPOTENCY_KEY = "Idempotency-Key"
    REQUEST_ID = "X-Request-ID"
    LOCATION = "location"
