"""Account entity for bank, card and e-wallet balances."""

from dataclasses import dataclass, field
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class AccountType(str, Enum):
    BANK = "bank"
    CARD = "card"
    EWALLET = "ewallet"
    BNPL = "bnpl"
    OTHER = "other"


@dataclass
class Account:
    """
    A place money sits or is borrowed from.

    Credit lines (cards, BNPL) carry a negative ``balance`` for the amount
    owed and a positive ``credit_limit``. ``billing_day`` is a day-of-month.
    """

    user_id: str
    name: str
    account_type: AccountType
    balance: Decimal = Decimal("0")
    provider: Optional[str] = None
    credit_limit: Optional[Decimal] = None
    billing_day: Optional[int] = None
    notes: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def has_limit(self) -> bool:
        return self.credit_limit is not None and self.credit_limit > 0
