"""
Dashboard page composition.

The page is built from placeholder data until accounts and transactions are
read from Plaid; only the greeting uses the signed-in user.
"""

from typing import List, Optional

from ..models.dashboard import (
    BankBalance,
    DashboardPage,
    DashboardTransaction,
    DashboardUser,
    HeaderBox,
    RightSidebar,
    TotalBalanceBox,
)
from ..models.user import User

GREETING_TITLE = "Good afternoon"
GREETING_SUBTEXT = "Access and manage your account and transactions efficiently."
GUEST_NAME = "Guest"

MOCK_USER = DashboardUser(first_name="Max", last_name="GMV", email="contact@mail.ru")
MOCK_BANKS = [
    BankBalance(current_balance=123.45),
    BankBalance(current_balance=678.9),
]


class DashboardService:
    def __init__(
        self,
        banks: Optional[List[BankBalance]] = None,
        transactions: Optional[List[DashboardTransaction]] = None,
    ):
        self.banks = MOCK_BANKS if banks is None else banks
        self.transactions = transactions or []

    @staticmethod
    def to_dashboard_user(user: Optional[User]) -> Optional[DashboardUser]:
        if user is None:
            return None
        return DashboardUser(
            first_name=user.first_name, last_name=user.last_name, email=user.email
        )

    def build_page(self, user: Optional[User] = None) -> DashboardPage:
        logged_in = self.to_dashboard_user(user) or MOCK_USER

        total_current_balance = round(
            sum(bank.current_balance for bank in self.banks), 2
        )

        return DashboardPage(
            header=HeaderBox(
                type="greeting",
                title=GREETING_TITLE,
                user=logged_in.first_name or GUEST_NAME,
                subtext=GREETING_SUBTEXT,
            ),
            total_balance=TotalBalanceBox(
                accounts=[],
                total_banks=len(self.banks),
                total_current_balance=total_current_balance,
            ),
            recent_transactions=self.transactions,
            right_sidebar=RightSidebar(
                user=logged_in,
                transactions=self.transactions,
                banks=self.banks,
            ),
        )
