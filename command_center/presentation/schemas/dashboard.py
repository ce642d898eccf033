"""Dashboard Pydantic schema."""

from datetime import date

from .base import ResponseSchema
from .bnpl import PlanSummarySchema
from .debt import DebtSummarySchema
from .expense import DailySpendingSchema
from .friend_debt import FriendDebtSummarySchema
from .ibadah import PrayerDaySchema


class DashboardSchema(ResponseSchema):
    as_of: date
    debts: DebtSummarySchema
    bnpl: PlanSummarySchema
    ious: FriendDebtSummarySchema
    prayers: PrayerDaySchema
    spending: DailySpendingSchema
