"""Debt domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class DebtCategory(str, Enum):
    CREDIT_CARD = "credit_card"
    INSTALLMENT = "installment"
    PAYLATER = "paylater"
    LOAN = "loan"
    INSURANCE = "insurance"
    OTHER = "other"


@dataclass
class Debt:
    """
    A formal debt such as a credit card or loan.

    ``due_day`` is a day-of-month (1-31), not a full date.
    """

    user_id: str
    name: str
    total_amount: Decimal
    current_balance: Decimal
    due_day: int
    category: DebtCategory = DebtCategory.OTHER
    interest_rate: Decimal = Decimal("0")
    minimum_payment: Decimal = Decimal("0")
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def amount_paid(self) -> Decimal:
        return max(self.total_amount - self.current_balance, Decimal("0"))


@dataclass
class DebtPayment:
    """An append-only record of money paid towards a debt."""

    debt_id: UUID
    amount: Decimal
    payment_date: date
    notes: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
