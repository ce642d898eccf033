"""Data transfer objects for friend IOUs."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from command_center.domain.entities import FriendDebt, FriendDebtDirection
from command_center.service.accounting import days_between, quantize_money


@dataclass(frozen=True)
class CreateFriendDebtRequest:
    user_id: str
    friend_name: str
    amount: Decimal
    direction: FriendDebtDirection
    description: Optional[str] = None
    due_date: Optional[date] = None


@dataclass(frozen=True)
class FriendDebtResponse:
    iou_id: str
    friend_name: str
    amount: Decimal
    direction: str
    description: Optional[str]
    due_date: Optional[date]
    status: str
    is_overdue: bool
    created_at: datetime

    @classmethod
    def from_entity(cls, iou: FriendDebt, today: date) -> "FriendDebtResponse":
        overdue = (
            iou.is_pending
            and iou.due_date is not None
            and days_between(today, iou.due_date) < 0
        )
        return cls(
            iou_id=str(iou.id),
            friend_name=iou.friend_name,
            amount=quantize_money(iou.amount),
            direction=iou.direction.value,
            description=iou.description,
            due_date=iou.due_date,
            status=iou.status.value,
            is_overdue=overdue,
            created_at=iou.created_at,
        )


@dataclass(frozen=True)
class FriendDebtSummaryResponse:
    """Pending IOU totals. A positive net position means friends owe the user."""

    they_owe_me: Decimal
    i_owe_them: Decimal
    net_position: Decimal
    net_display: str
    pending_count: int
    overdue_count: int
