"""
Plaid-related constants.
"""

# Plaid Environments
class PlaidEnvironments:
    SANDBOX = "sandbox"
    PRODUCTION = "production"


# Plaid Products
class PlaidProducts:
    AUTH = "auth"


# Plaid Link Token Configuration
class PlaidLinkConfig:
    COUNTRY_CODE_US = "US"
    LANGUAGE_EN = "en"


class PlaidProcessors:
    DWOLLA = "dwolla"
