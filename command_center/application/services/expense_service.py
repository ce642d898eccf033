"""Expense service - daily spending and income use cases."""

from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from typing import Dict, List, Optional, Sequence
from uuid import UUID

import structlog

from command_center.application.dto import (
    CreateExpenseRequest,
    DailySpendingResponse,
    ExpenseListResponse,
    ExpenseResponse,
    MonthlySpendingResponse,
)
from command_center.core.config import settings as app_settings
from command_center.core.metrics import record_expense
from command_center.domain.entities import Expense
from command_center.domain.exceptions import ExpenseNotFoundException
from command_center.domain.interfaces import ExpenseRepository
from command_center.service.accounting import (
    AccountingSettings,
    accounting_settings,
    format_money,
    quantize_money,
    sum_money,
)

logger = structlog.get_logger(__name__)


def budget_used(total: Decimal, budget: Decimal) -> Decimal:
    """Percent of a budget spent, to one decimal place; not capped at 100."""
    if budget <= 0:
        return Decimal("0.0")
    return (total / budget * 100).quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def by_category(expenses: Sequence[Expense]) -> Dict[str, Decimal]:
    totals: Dict[str, Decimal] = {}
    for expense in expenses:
        key = expense.category.value
        totals[key] = quantize_money(totals.get(key, Decimal("0")) + expense.amount)
    return totals


class ExpenseService:
    """
    Application service for logging and summarizing daily spending.

    Income entries are listed alongside expenses but never count against
    the daily or monthly budget.
    """

    def __init__(
        self,
        expense_repository: ExpenseRepository,
        daily_budget: Decimal = app_settings.daily_budget,
        monthly_budget: Decimal = app_settings.monthly_budget,
        settings: AccountingSettings = accounting_settings,
    ):
        self._expense_repo = expense_repository
        self._daily_budget = daily_budget
        self._monthly_budget = monthly_budget
        self._settings = settings

    async def create_expense(self, request: CreateExpenseRequest) -> ExpenseResponse:
        expense = Expense(
            user_id=request.user_id,
            amount=quantize_money(request.amount),
            category=request.category,
            expense_date=request.expense_date,
            description=request.description,
            transaction_type=request.transaction_type,
        )
        await self._expense_repo.save(expense)

        logger.info(
            "expense_logged",
            user_id=request.user_id,
            expense_id=str(expense.id),
            category=expense.category.value,
            transaction_type=expense.transaction_type.value,
            amount=str(expense.amount),
        )
        record_expense(expense.category.value)

        return ExpenseResponse.from_entity(expense)

    async def list_expenses(
        self,
        user_id: str,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        limit: int = 20,
    ) -> ExpenseListResponse:
        """Transactions in a date range, or the most recent ones when no range is given."""
        if start_date is None and end_date is None:
            expenses = await self._expense_repo.list_recent(user_id, limit=limit)
        else:
            start = start_date or end_date
            end = end_date or start_date
            expenses = await self._expense_repo.list_by_date_range(user_id, start, end)

        income = sum_money(expense.amount for expense in expenses if expense.is_income)
        spent = sum_money(expense.amount for expense in expenses if not expense.is_income)

        return ExpenseListResponse(
            expenses=[ExpenseResponse.from_entity(expense) for expense in expenses],
            count=len(expenses),
            income_total=quantize_money(income),
            expense_total=quantize_money(spent),
            net=quantize_money(income - spent),
            net_display=format_money(income - spent, self._settings),
        )

    async def get_daily_spending(
        self,
        user_id: str,
        spending_date: Optional[date] = None,
    ) -> DailySpendingResponse:
        """
        Total spent on one day against the daily budget.

        ``percentage_used`` is not capped, so it exceeds 100 when over
        budget.
        """
        spending_date = spending_date or date.today()
        entries = await self._expense_repo.list_by_date_range(user_id, spending_date, spending_date)
        expenses = [entry for entry in entries if not entry.is_income]

        total = sum_money(expense.amount for expense in expenses)
        budget = quantize_money(self._daily_budget)

        return DailySpendingResponse(
            spending_date=spending_date,
            total=quantize_money(total),
            total_display=format_money(total, self._settings),
            budget=budget,
            remaining=quantize_money(max(budget - total, Decimal("0"))),
            percentage_used=budget_used(total, budget),
            over_budget=total > budget,
            by_category=by_category(expenses),
            expense_count=len(expenses),
            expenses=[ExpenseResponse.from_entity(expense) for expense in expenses],
        )

    async def get_monthly_spending(
        self,
        user_id: str,
        as_of: Optional[date] = None,
    ) -> MonthlySpendingResponse:
        """Spending from the first of the month up to ``as_of`` against the monthly budget."""
        as_of = as_of or date.today()
        month_start = as_of.replace(day=1)
        entries = await self._expense_repo.list_by_date_range(user_id, month_start, as_of)
        expenses = [entry for entry in entries if not entry.is_income]

        total = sum_money(expense.amount for expense in expenses)
        income = sum_money(entry.amount for entry in entries if entry.is_income)
        budget = quantize_money(self._monthly_budget)

        logger.info(
            "monthly_spending_computed",
            user_id=user_id,
            month_start=month_start.isoformat(),
            total=str(quantize_money(total)),
        )

        return MonthlySpendingResponse(
            month_start=month_start,
            as_of=as_of,
            total=quantize_money(total),
            total_display=format_money(total, self._settings),
            budget=budget,
            remaining=quantize_money(max(budget - total, Decimal("0"))),
            percentage_used=budget_used(total, budget),
            over_budget=total > budget,
            by_category=by_category(expenses),
            expense_count=len(expenses),
            income_total=quantize_money(income),
        )

    async def delete_expense(self, user_id: str, expense_id: UUID) -> None:
        deleted = await self._expense_repo.delete(user_id, expense_id)
        if not deleted:
            raise ExpenseNotFoundException(str(expense_id))

        logger.info("expense_deleted", user_id=user_id, expense_id=str(expense_id))
