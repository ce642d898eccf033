"""BNPL installment plan domain entities."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import List, Optional
from uuid import UUID, uuid4


class PlanStatus(str, Enum):
    ACTIVE = "active"
    COMPLETED = "completed"
    OVERDUE = "overdue"


@dataclass
class Installment:
    """A single scheduled payment within a plan, identified by sequence."""

    sequence: int
    amount: Decimal
    due_date: Optional[date] = None
    is_paid: bool = False
    paid_at: Optional[datetime] = None
    id: UUID = field(default_factory=uuid4)

    def mark_paid(self, paid_at: datetime | None = None) -> None:
        self.is_paid = True
        self.paid_at = paid_at or datetime.utcnow()


@dataclass
class InstallmentPlan:
    """
    A purchase split into fixed installments.

    When ``installments`` is non-empty the schedule is the source of truth
    for paid counts and remaining balance; ``installments_paid`` is only
    read for plans tracked without a detailed schedule.
    """

    user_id: str
    merchant: str
    total_amount: Decimal
    installment_amount: Decimal
    installments_total: int
    item_name: Optional[str] = None
    installments_paid: int = 0
    account_id: Optional[str] = None
    next_due_date: Optional[date] = None
    # Day of month payments fall on; survives clamping in short months
    due_day: Optional[int] = None
    notes: Optional[str] = None
    installments: List[Installment] = field(default_factory=list)
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def has_schedule(self) -> bool:
        return len(self.installments) > 0

    @property
    def paid_count(self) -> int:
        if self.has_schedule:
            return sum(1 for inst in self.installments if inst.is_paid)
        return self.installments_paid

    @property
    def total_count(self) -> int:
        if self.has_schedule:
            return len(self.installments)
        return self.installments_total

    def ordered_installments(self) -> List[Installment]:
        return sorted(self.installments, key=lambda inst: inst.sequence)

    def get_installment(self, sequence: int) -> Optional[Installment]:
        for inst in self.installments:
            if inst.sequence == sequence:
                return inst
        return None
