"""Account Pydantic schemas."""

from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from pydantic import BaseModel, Field, field_validator

from command_center.domain.entities import AccountType

from .base import ResponseSchema


class CreateAccountSchema(BaseModel):
    """Schema for POST /v1/accounts request body."""

    name: str = Field(..., min_length=1, max_length=255, examples=["Maybank Visa"])
    account_type: AccountType = Field(..., examples=["card"])
    provider: Optional[str] = Field(None, max_length=100, examples=["Maybank"])
    balance: Decimal = Field(
        Decimal("0"),
        max_digits=12,
        decimal_places=2,
        description="Current balance; negative for what is owed on a credit line",
        examples=["-1500.00"],
    )
    credit_limit: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2, examples=["5000.00"])
    billing_day: Optional[int] = Field(None, ge=1, le=31, description="Day of month the statement is issued")
    notes: Optional[str] = None

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("name cannot be empty or whitespace")
        return v.strip()


class UpdateAccountSchema(BaseModel):
    """Schema for PATCH /v1/accounts/{account_id}; omitted fields are left unchanged."""

    balance: Optional[Decimal] = Field(None, max_digits=12, decimal_places=2, examples=["-1200.00"])
    credit_limit: Optional[Decimal] = Field(None, gt=0, max_digits=12, decimal_places=2)
    billing_day: Optional[int] = Field(None, ge=1, le=31)
    notes: Optional[str] = None


class AccountResponseSchema(ResponseSchema):
    account_id: str
    name: str
    account_type: str
    provider: Optional[str]
    balance: Decimal
    balance_display: str = Field(..., examples=["-RM 1,500.00"])
    credit_limit: Optional[Decimal]
    available_credit: Optional[Decimal] = Field(None, examples=["3500.00"])
    utilization_percent: Optional[Decimal] = Field(None, examples=["30.0"])
    billing_day: Optional[int]
    next_billing_date: Optional[date]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime


class AccountsSummarySchema(ResponseSchema):
    """Totals across accounts and combined credit utilization."""

    total_balance: Decimal = Field(..., examples=["3500.00"])
    total_balance_display: str = Field(..., examples=["RM 3,500.00"])
    account_count: int
    total_credit_limit: Decimal
    credit_used: Decimal
    available_credit: Decimal
    credit_utilization: Decimal = Field(..., description="Percent of combined limits in use", examples=["30.0"])
    high_utilization: bool
