"""
Dashboard page models.
"""

from typing import List, Optional
from pydantic import BaseModel


class DashboardUser(BaseModel):
    first_name: str
    last_name: str = ""
    email: Optional[str] = None


class BankBalance(BaseModel):
    name: Optional[str] = None
    current_balance: float


class DashboardTransaction(BaseModel):
    name: str
    amount: float
    date: str
    category: Optional[str] = None


class HeaderBox(BaseModel):
    type: str
    title: str
    user: str
    subtext: str


class TotalBalanceBox(BaseModel):
    accounts: List[BankBalance]
    total_banks: int
    total_current_balance: float


class RightSidebar(BaseModel):
    user: Optional[DashboardUser]
    transactions: List[DashboardTransaction]
    banks: List[BankBalance]


class DashboardPage(BaseModel):
    header: HeaderBox
    total_balance: TotalBalanceBox
    recent_transactions: List[DashboardTransaction]
    right_sidebar: RightSidebar
