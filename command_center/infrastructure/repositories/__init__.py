"""Repository implementations."""

from .account_repository import PostgresAccountRepository
from .debt_repository import PostgresDebtRepository
from .expense_repository import PostgresExpenseRepository
from .friend_debt_repository import PostgresFriendDebtRepository
from .ibadah_repository import PostgresIbadahRepository
from .plan_repository import PostgresPlanRepository

__all__ = [
    "PostgresAccountRepository",
    "PostgresDebtRepository",
    "PostgresExpenseRepository",
    "PostgresFriendDebtRepository",
    "PostgresIbadahRepository",
    "PostgresPlanRepository",
]
