"""Dashboard service - one snapshot across finance and ibadah."""

from datetime import date
from typing import Optional

import structlog

from command_center.application.dto import DashboardResponse

from .bnpl_service import BNPLService
from .debt_service import DebtService
from .expense_service import ExpenseService
from .friend_debt_service import FriendDebtService
from .ibadah_service import IbadahService

logger = structlog.get_logger(__name__)


class DashboardService:
    """Composes the per-area summaries for a single day."""

    def __init__(
        self,
        bnpl_service: BNPLService,
        debt_service: DebtService,
        friend_debt_service: FriendDebtService,
        ibadah_service: IbadahService,
        expense_service: ExpenseService,
    ):
        self._bnpl = bnpl_service
        self._debts = debt_service
        self._ious = friend_debt_service
        self._ibadah = ibadah_service
        self._expenses = expense_service

    async def get_dashboard(self, user_id: str, today: Optional[date] = None) -> DashboardResponse:
        today = today or date.today()

        dashboard = DashboardResponse(
            as_of=today,
            debts=await self._debts.get_summary(user_id, today),
            bnpl=await self._bnpl.get_summary(user_id, today),
            ious=await self._ious.get_summary(user_id, today),
            prayers=await self._ibadah.get_day(user_id, today),
            spending=await self._expenses.get_daily_spending(user_id, today),
        )

        logger.info(
            "dashboard_built",
            user_id=user_id,
            as_of=today.isoformat(),
            debt_count=dashboard.debts.debt_count,
            plan_count=dashboard.bnpl.plan_count,
        )

        return dashboard
