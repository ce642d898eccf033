"""Domain Entities - Core business objects."""

from .account import Account, AccountType
from .bnpl import InstallmentPlan, Installment, PlanStatus
from .debt import Debt, DebtCategory, DebtPayment
from .expense import Expense, ExpenseCategory, TransactionType
from .friend_debt import FriendDebt, FriendDebtDirection, FriendDebtStatus
from .ibadah import (
    DAILY_PRAYERS,
    Prayer,
    PrayerLocation,
    PrayerName,
    PrayerStatus,
    QuranLog,
)

__all__ = [
    "Account",
    "AccountType",
    "InstallmentPlan",
    "Installment",
    "PlanStatus",
    "Debt",
    "DebtCategory",
    "DebtPayment",
    "Expense",
    "ExpenseCategory",
    "TransactionType",
    "FriendDebt",
    "FriendDebtDirection",
    "FriendDebtStatus",
    "DAILY_PRAYERS",
    "Prayer",
    "PrayerLocation",
    "PrayerName",
    "PrayerStatus",
    "QuranLog",
]
