"""
Payment network constants.
"""


# Default Currency
class Currency:
    USD = "USD"


class DwollaEnvironments:
    SANDBOX = "sandbox"
    PRODUCTION = "production"


class DwollaHosts:
    SANDBOX = "https://api-sandbox.dwolla.com"
    PRODUCTION = "https://api.dwolla.com"


class DwollaPaths:
    TOKEN = "/token"
    ON_DEMAND_AUTHORIZATIONS = "/on-demand-authorizations"
    CUSTOMER_FUNDING_SOURCES = "/customers/{customer_id}/funding-sources"
    TRANSFERS = "/transfers"


class DwollaTokens:
    # Refresh the bearer token this many seconds before it expires
    EXPIRY_MARGIN_SECONDS = 60
