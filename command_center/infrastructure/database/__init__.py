"""Database infrastructure."""

from .connection import get_db_session, DatabaseSessionManager, db_manager
from .models import (
    AccountModel,
    Base,
    DebtModel,
    DebtPaymentModel,
    ExpenseModel,
    FriendDebtModel,
    InstallmentModel,
    PlanModel,
    PrayerModel,
    QuranLogModel,
)

__all__ = [
    "get_db_session",
    "DatabaseSessionManager",
    "db_manager",
    "AccountModel",
    "Base",
    "DebtModel",
    "DebtPaymentModel",
    "ExpenseModel",
    "FriendDebtModel",
    "InstallmentModel",
    "PlanModel",
    "PrayerModel",
    "QuranLogModel",
]
