"""BNPL plan Pydantic schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .base import ResponseSchema


class ScheduleItemSchema(BaseModel):
    """One installment of an explicit schedule."""

    sequence: int = Field(..., ge=1, description="1-based position in the schedule", examples=[1])
    amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, examples=["100.00"])
    due_date: Optional[date] = Field(None, examples=["2025-11-01"])
    is_paid: bool = Field(False, description="Whether this installment is already paid")


class CreatePlanSchema(BaseModel):
    """Schema for POST /v1/bnpl request body."""

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "merchant": "Shopee",
                    "item_name": "Air fryer",
                    "total_amount": "1200.00",
                    "installments_total": 12,
                    "installments_paid": 3,
                    "next_due_date": "2025-11-15",
                    "generate_schedule": True,
                }
            ]
        }
    )
    merchant: str = Field(..., min_length=1, max_length=255, examples=["Shopee"])
    item_name: Optional[str] = Field(None, max_length=255)
    total_amount: Decimal = Field(..., gt=0, max_digits=12, decimal_places=2, examples=["1200.00"])
    installments_total: Optional[int] = Field(
        None,
        ge=1,
        le=120,
        description="Number of installments; taken from the schedule when one is given",
    )
    installment_amount: Optional[Decimal] = Field(
        None,
        gt=0,
        max_digits=12,
        decimal_places=2,
        description="Fixed installment amount; defaults to total / count",
    )
    installments_paid: int = Field(0, ge=0, description="Installments already paid")
    account_id: Optional[str] = Field(None, max_length=255)
    next_due_date: Optional[date] = Field(
        None,
        description="Next due date, or the first due date of a generated schedule",
    )
    notes: Optional[str] = None
    generate_schedule: bool = Field(
        False,
        description="Split the total into an even monthly schedule",
    )
    schedule: List[ScheduleItemSchema] = Field(
        default_factory=list,
        description="Explicit schedule; overrides installments_total and generation",
    )

    @field_validator("merchant")
    @classmethod
    def validate_merchant(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("merchant cannot be empty or whitespace")
        return v.strip()


class InstallmentSchema(ResponseSchema):
    sequence: int
    amount: Decimal
    due_date: Optional[date]
    is_paid: bool
    paid_at: Optional[datetime]


class DueSchema(ResponseSchema):
    state: str = Field(..., examples=["due_in_days"])
    days: Optional[int] = Field(None, description="Days until due, or days late when overdue")
    label: str = Field(..., examples=["Due in 5 days"])


class PlanResponseSchema(ResponseSchema):
    """A plan with derived balance, progress and due information."""

    plan_id: str
    merchant: str
    item_name: Optional[str]
    account_id: Optional[str]
    notes: Optional[str]
    total_amount: Decimal
    installment_amount: Decimal
    remaining_balance: Decimal = Field(..., examples=["900.00"])
    remaining_display: str = Field(..., examples=["RM 900.00"])
    paid_amount: Decimal
    installments_total: int
    installments_paid: int
    installments_remaining: int
    progress_percent: int = Field(..., ge=0, le=100, examples=[25])
    next_installment_amount: Decimal
    next_due_date: Optional[date]
    status: str = Field(..., examples=["active"])
    due: DueSchema
    is_due_soon: bool
    has_schedule: bool
    installments: List[InstallmentSchema]
    created_at: datetime


class PlanSummarySchema(ResponseSchema):
    plan_count: int
    active_count: int
    overdue_count: int
    completed_count: int
    due_soon_count: int
    total_remaining: Decimal
    total_remaining_display: str
    monthly_commitment: Decimal = Field(
        ...,
        description="Sum of the next installment of every open plan",
    )
    monthly_commitment_display: str
