"""Expense Pydantic schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Dict, List, Optional

from pydantic import BaseModel, Field

from command_center.domain.entities import ExpenseCategory, TransactionType

from .base import ResponseSchema


class CreateExpenseSchema(BaseModel):
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, examples=["12.50"])
    category: ExpenseCategory = Field(..., examples=["food"])
    transaction_type: TransactionType = Field(
        TransactionType.EXPENSE,
        description="income entries are listed but never count against a budget",
    )
    expense_date: Optional[date] = Field(None, description="Defaults to today")
    description: Optional[str] = Field(None, examples=["Nasi lemak"])


class ExpenseResponseSchema(ResponseSchema):
    expense_id: str
    amount: Decimal
    category: str
    transaction_type: str = Field(..., examples=["expense"])
    expense_date: date
    description: Optional[str]
    created_at: datetime


class ExpenseListSchema(ResponseSchema):
    """Listed transactions with income and expense totals."""

    expenses: List[ExpenseResponseSchema]
    count: int
    income_total: Decimal = Field(..., examples=["3000.00"])
    expense_total: Decimal = Field(..., examples=["45.50"])
    net: Decimal = Field(..., description="income_total - expense_total", examples=["2954.50"])
    net_display: str = Field(..., examples=["RM 2,954.50"])


class DailySpendingSchema(ResponseSchema):
    """One day's spending against the daily budget."""

    spending_date: date
    total: Decimal
    total_display: str
    budget: Decimal
    remaining: Decimal
    percentage_used: Decimal = Field(..., description="Not capped at 100")
    over_budget: bool
    by_category: Dict[str, Decimal]
    expense_count: int
    expenses: List[ExpenseResponseSchema]


class MonthlySpendingSchema(ResponseSchema):
    """Month-to-date spending against the monthly budget."""

    month_start: date
    as_of: date
    total: Decimal
    total_display: str
    budget: Decimal
    remaining: Decimal
    percentage_used: Decimal = Field(..., description="Not capped at 100")
    over_budget: bool
    by_category: Dict[str, Decimal]
    expense_count: int
    income_total: Decimal
