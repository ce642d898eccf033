"""Data transfer objects for daily expenses and income."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Optional

from command_center.domain.entities import Expense, ExpenseCategory, TransactionType
from command_center.service.accounting import quantize_money


@dataclass(frozen=True)
class CreateExpenseRequest:
    user_id: str
    amount: Decimal
    category: ExpenseCategory
    expense_date: date
    description: Optional[str] = None
    transaction_type: TransactionType = TransactionType.EXPENSE


@dataclass(frozen=True)
class ExpenseResponse:
    expense_id: str
    amount: Decimal
    category: str
    transaction_type: str
    expense_date: date
    description: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, expense: Expense) -> "ExpenseResponse":
        return cls(
            expense_id=str(expense.id),
            amount=quantize_money(expense.amount),
            category=expense.category.value,
            transaction_type=expense.transaction_type.value,
            expense_date=expense.expense_date,
            description=expense.description,
            created_at=expense.created_at,
        )


@dataclass(frozen=True)
class ExpenseListResponse:
    """Transactions with money in and money out totalled separately."""

    expenses: List[ExpenseResponse]
    count: int
    income_total: Decimal
    expense_total: Decimal
    net: Decimal
    net_display: str


@dataclass(frozen=True)
class DailySpendingResponse:
    """Spending for one day measured against the daily budget."""

    spending_date: date
    total: Decimal
    total_display: str
    budget: Decimal
    remaining: Decimal
    percentage_used: Decimal
    over_budget: bool
    by_category: Dict[str, Decimal]
    expense_count: int
    expenses: List[ExpenseResponse]


@dataclass(frozen=True)
class MonthlySpendingResponse:
    """Month-to-date spending measured against the monthly budget."""

    month_start: date
    as_of: date
    total: Decimal
    total_display: str
    budget: Decimal
    remaining: Decimal
    percentage_used: Decimal
    over_budget: bool
    by_category: Dict[str, Decimal]
    expense_count: int
    income_total: Decimal
