"""Data transfer object for the combined dashboard view."""

from dataclasses import dataclass
from datetime import date

from .bnpl import PlanSummaryResponse
from .debt import DebtSummaryResponse
from .expense import DailySpendingResponse
from .friend_debt import FriendDebtSummaryResponse
from .ibadah import PrayerDayResponse


@dataclass(frozen=True)
class DashboardResponse:
    as_of: date
    debts: DebtSummaryResponse
    bnpl: PlanSummaryResponse
    ious: FriendDebtSummaryResponse
    prayers: PrayerDayResponse
    spending: DailySpendingResponse
