"""Application services (use cases)."""

from .account_service import AccountService
from .bnpl_service import BNPLService
from .dashboard_service import DashboardService
from .debt_service import DebtService
from .expense_service import ExpenseService
from .friend_debt_service import FriendDebtService
from .ibadah_service import IbadahService

__all__ = [
    "AccountService",
    "BNPLService",
    "DashboardService",
    "DebtService",
    "ExpenseService",
    "FriendDebtService",
    "IbadahService",
]
