"""Data Transfer Objects for application layer."""

from .account import (
    AccountResponse,
    AccountsSummaryResponse,
    CreateAccountRequest,
    UpdateAccountRequest,
)
from .bnpl import (
    CreatePlanRequest,
    DueDTO,
    InstallmentDTO,
    PlanResponse,
    PlanSummaryResponse,
    ScheduleItem,
)
from .dashboard import DashboardResponse
from .debt import (
    CreateDebtRequest,
    DebtPaymentResponse,
    DebtResponse,
    DebtSummaryResponse,
    PaymentRecordedResponse,
    RecordPaymentRequest,
    UpcomingPaymentDTO,
)
from .expense import (
    CreateExpenseRequest,
    DailySpendingResponse,
    ExpenseListResponse,
    ExpenseResponse,
    MonthlySpendingResponse,
)
from .friend_debt import (
    CreateFriendDebtRequest,
    FriendDebtResponse,
    FriendDebtSummaryResponse,
)
from .ibadah import (
    LogPrayerRequest,
    LogQuranRequest,
    PrayerDayResponse,
    PrayerSlotDTO,
    QuranLogResponse,
    QuranSummaryResponse,
)

__all__ = [
    "AccountResponse",
    "AccountsSummaryResponse",
    "CreateAccountRequest",
    "UpdateAccountRequest",
    "CreatePlanRequest",
    "DueDTO",
    "InstallmentDTO",
    "PlanResponse",
    "PlanSummaryResponse",
    "ScheduleItem",
    "DashboardResponse",
    "CreateDebtRequest",
    "DebtPaymentResponse",
    "DebtResponse",
    "DebtSummaryResponse",
    "PaymentRecordedResponse",
    "RecordPaymentRequest",
    "UpcomingPaymentDTO",
    "CreateExpenseRequest",
    "DailySpendingResponse",
    "ExpenseListResponse",
    "ExpenseResponse",
    "MonthlySpendingResponse",
    "CreateFriendDebtRequest",
    "FriendDebtResponse",
    "FriendDebtSummaryResponse",
    "LogPrayerRequest",
    "LogQuranRequest",
    "PrayerDayResponse",
    "PrayerSlotDTO",
    "QuranLogResponse",
    "QuranSummaryResponse",
]
