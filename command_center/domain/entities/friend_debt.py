"""Informal IOU between the user and a friend."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from enum import Enum
from typing import Optional
from uuid import UUID, uuid4


class FriendDebtDirection(str, Enum):
    THEY_OWE_ME = "they_owe_me"
    I_OWE_THEM = "i_owe_them"


class FriendDebtStatus(str, Enum):
    PENDING = "pending"
    PAID = "paid"
    CANCELLED = "cancelled"


@dataclass
class FriendDebt:
    user_id: str
    friend_name: str
    amount: Decimal
    direction: FriendDebtDirection
    description: Optional[str] = None
    due_date: Optional[date] = None
    status: FriendDebtStatus = FriendDebtStatus.PENDING
    id: UUID = field(default_factory=uuid4)
    created_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def is_pending(self) -> bool:
        return self.status == FriendDebtStatus.PENDING
