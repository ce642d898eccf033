"""Debt Pydantic schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, Field

from command_center.domain.entities import DebtCategory

from .base import ResponseSchema


class CreateDebtSchema(BaseModel):
    """Schema for POST /v1/debts request body."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Maybank Visa"])
    total_amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, examples=["5000.00"])
    current_balance: Optional[Decimal] = Field(
        None,
        ge=0,
        max_digits=12,
        decimal_places=2,
        description="Outstanding balance; defaults to the total amount",
    )
    due_day: int = Field(..., ge=1, le=31, description="Day of month the payment is due")
    category: DebtCategory = DebtCategory.OTHER
    interest_rate: Decimal = Field(Decimal("0"), ge=0, le=100, max_digits=5, decimal_places=2)
    minimum_payment: Decimal = Field(Decimal("0"), ge=0, max_digits=12, decimal_places=2)


class RecordDebtPaymentSchema(BaseModel):
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, examples=["250.00"])
    payment_date: Optional[date] = Field(None, description="Defaults to today")
    notes: Optional[str] = None


class DebtResponseSchema(ResponseSchema):
    debt_id: str
    name: str
    category: str
    total_amount: Decimal
    current_balance: Decimal
    balance_display: str = Field(..., examples=["RM 4,750.00"])
    amount_paid: Decimal
    percentage_paid: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal
    due_day: int
    next_due_date: date
    created_at: datetime


class DebtPaymentSchema(ResponseSchema):
    payment_id: str
    debt_id: str
    amount: Decimal
    payment_date: date
    notes: Optional[str]
    created_at: datetime


class PaymentRecordedSchema(ResponseSchema):
    payment: DebtPaymentSchema
    debt: DebtResponseSchema


class UpcomingPaymentSchema(ResponseSchema):
    debt_id: str
    name: str
    due_day: int
    due_date: date
    days_until: int
    label: str = Field(..., examples=["Due in 3 days"])
    minimum_payment: Decimal


class DebtSummarySchema(ResponseSchema):
    """Totals across debts plus payments due in the upcoming window."""

    total_debt: Decimal = Field(..., examples=["1000.00"])
    total_debt_display: str = Field(..., examples=["RM 1,000.00"])
    total_original: Decimal
    total_paid: Decimal
    percentage_paid: Decimal = Field(..., examples=["33.3"])
    debt_count: int
    window_days: int
    upcoming: List[UpcomingPaymentSchema]
    total_upcoming: Decimal
    total_upcoming_display: str
