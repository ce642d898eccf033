"""Pydantic schemas for API request/response validation."""

from .account import (
    AccountResponseSchema,
    AccountsSummarySchema,
    CreateAccountSchema,
    UpdateAccountSchema,
)
from .bnpl import (
    CreatePlanSchema,
    DueSchema,
    InstallmentSchema,
    PlanResponseSchema,
    PlanSummarySchema,
    ScheduleItemSchema,
)
from .dashboard import DashboardSchema
from .debt import (
    CreateDebtSchema,
    DebtPaymentSchema,
    DebtResponseSchema,
    DebtSummarySchema,
    PaymentRecordedSchema,
    RecordDebtPaymentSchema,
    UpcomingPaymentSchema,
)
from .error import ErrorResponseSchema
from .expense import (
    CreateExpenseSchema,
    DailySpendingSchema,
    ExpenseListSchema,
    ExpenseResponseSchema,
    MonthlySpendingSchema,
)
from .friend_debt import (
    CreateFriendDebtSchema,
    FriendDebtResponseSchema,
    FriendDebtSummarySchema,
)
from .ibadah import (
    LogPrayerSchema,
    LogQuranSchema,
    PrayerDaySchema,
    PrayerSlotSchema,
    QuranLogSchema,
    QuranSummarySchema,
)

__all__ = [
    "AccountResponseSchema",
    "AccountsSummarySchema",
    "CreateAccountSchema",
    "UpdateAccountSchema",
    "CreatePlanSchema",
    "DueSchema",
    "InstallmentSchema",
    "PlanResponseSchema",
    "PlanSummarySchema",
    "ScheduleItemSchema",
    "DashboardSchema",
    "CreateDebtSchema",
    "DebtPaymentSchema",
    "DebtResponseSchema",
    "DebtSummarySchema",
    "PaymentRecordedSchema",
    "RecordDebtPaymentSchema",
    "UpcomingPaymentSchema",
    "ErrorResponseSchema",
    "CreateExpenseSchema",
    "DailySpendingSchema",
    "ExpenseListSchema",
    "ExpenseResponseSchema",
    "MonthlySpendingSchema",
    "CreateFriendDebtSchema",
    "FriendDebtResponseSchema",
    "FriendDebtSummarySchema",
    "LogPrayerSchema",
    "LogQuranSchema",
    "PrayerDaySchema",
    "PrayerSlotSchema",
    "QuranLogSchema",
    "QuranSummarySchema",
]
