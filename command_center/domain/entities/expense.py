"""Expense entity for daily spending and income."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class ExpenseCategory(str, Enum):
    FOOD = "food"
    TRANSPORT = "transport"
    GIRLFRIEND = "girlfriend"
    SHOPPING = "shopping"
    BILLS = "bills"
    OTHER = "other"


class TransactionType(str, Enum):
    EXPENSE = "expense"
    INCOME = "income"


@dataclass
class Expense:
    user_id: str
    amount: Decimal
    category: ExpenseCategory
    expense_date: date
    description: Optional[str] = None
    transaction_type: TransactionType = TransactionType.EXPENSE
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_income(self) -> bool:
        return self.transaction_type == TransactionType.INCOME
