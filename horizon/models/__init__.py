"""
Pydantic models for the application.
"""

from .user import User, Session, SessionResponse, LogoutResponse
from .auth import SignInForm, SignUpForm, AuthFormDefinition, FormField, FormLink
from .transfer import (
    AddFundingSourceRequest,
    FundingSource,
    FundingSourceResponse,
    Link,
    Transfer,
    TransferRequest,
    TransferResponse,
)
from .plaid import (
    PlaidError,
    LinkTokenResponse,
    ExchangePublicTokenRequest,
    LinkedBankResponse,
)
from .dashboard import (
    BankBalance,
    DashboardPage,
    DashboardTransaction,
    DashboardUser,
    HeaderBox,
    RightSidebar,
    TotalBalanceBox,
)
from .checkbook import CheckbookCustomerRequest, CheckbookBankRequest

__all__ = [
    "User",
    "Session",
    "SessionResponse",
    "LogoutResponse",
    "SignInForm",
    "SignUpForm",
    "AuthFormDefinition",
    "FormField",
    "FormLink",
    "AddFundingSourceRequest",
    "FundingSource",
    "FundingSourceResponse",
    "Link",
    "Transfer",
    "TransferRequest",
    "TransferResponse",
    "PlaidError",
    "LinkTokenResponse",
    "ExchangePublicTokenRequest",
    "LinkedBankResponse",
    "BankBalance",
    "DashboardPage",
    "DashboardTransaction",
    "DashboardUser",
    "HeaderBox",
    "RightSidebar",
    "TotalBalanceBox",
    "CheckbookCustomerRequest",
    "CheckbookBankRequest",
]
