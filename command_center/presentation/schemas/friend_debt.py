"""IOU Pydantic schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field

from command_center.domain.entities import FriendDebtDirection

from .base import ResponseSchema


class CreateFriendDebtSchema(BaseModel):
    friend_name: str = Field(..., min_length=1, max_length=100, examples=["Ali"])
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, examples=["50.00"])
    direction: FriendDebtDirection = Field(
        ...,
        description="they_owe_me when the user lent money, i_owe_them when borrowed",
    )
    description: Optional[str] = None
    due_date: Optional[date] = None


class FriendDebtResponseSchema(ResponseSchema):
    iou_id: str
    friend_name: str
    amount: Decimal
    direction: str
    description: Optional[str]
    due_date: Optional[date]
    status: str
    is_overdue: bool
    created_at: datetime


class FriendDebtSummarySchema(ResponseSchema):
    they_owe_me: Decimal
    i_owe_them: Decimal
    net_position: Decimal = Field(..., description="Positive when friends owe the user")
    net_display: str
    pending_count: int
    overdue_count: int
