"""Data transfer objects for account operations."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import Optional

from command_center.domain.entities import Account, AccountType
from command_center.service.accounting import (
    AccountingSettings,
    AccountsSummary,
    account_utilization,
    accounting_settings,
    available_credit,
    format_money,
    quantize_money,
)
from command_center.service.accounting.debts import next_occurrence


@dataclass(frozen=True)
class CreateAccountRequest:
    user_id: str
    name: str
    account_type: AccountType
    balance: Decimal = Decimal("0")
    provider: Optional[str] = None
    credit_limit: Optional[Decimal] = None
    billing_day: Optional[int] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class UpdateAccountRequest:
    """Partial update; fields left as None keep their stored value."""

    user_id: str
    balance: Optional[Decimal] = None
    credit_limit: Optional[Decimal] = None
    billing_day: Optional[int] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class AccountResponse:
    account_id: str
    name: str
    account_type: str
    provider: Optional[str]
    balance: Decimal
    balance_display: str
    credit_limit: Optional[Decimal]
    available_credit: Optional[Decimal]
    utilization_percent: Optional[Decimal]
    billing_day: Optional[int]
    next_billing_date: Optional[date]
    notes: Optional[str]
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(
        cls,
        account: Account,
        today: date,
        settings: AccountingSettings = accounting_settings,
    ) -> "AccountResponse":
        available = available_credit(account)
        return cls(
            account_id=str(account.id),
            name=account.name,
            account_type=account.account_type.value,
            provider=account.provider,
            balance=quantize_money(account.balance),
            balance_display=format_money(account.balance, settings),
            credit_limit=quantize_money(account.credit_limit) if account.credit_limit is not None else None,
            available_credit=quantize_money(available) if available is not None else None,
            utilization_percent=account_utilization(account),
            billing_day=account.billing_day,
            next_billing_date=next_occurrence(account.billing_day, today) if account.billing_day else None,
            notes=account.notes,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )


@dataclass(frozen=True)
class AccountsSummaryResponse:
    total_balance: Decimal
    total_balance_display: str
    account_count: int
    total_credit_limit: Decimal
    credit_used: Decimal
    available_credit: Decimal
    credit_utilization: Decimal
    high_utilization: bool

    @classmethod
    def from_summary(
        cls,
        summary: AccountsSummary,
        settings: AccountingSettings = accounting_settings,
    ) -> "AccountsSummaryResponse":
        return cls(
            total_balance=quantize_money(summary.total_balance),
            total_balance_display=format_money(summary.total_balance, settings),
            account_count=summary.account_count,
            total_credit_limit=quantize_money(summary.total_credit_limit),
            credit_used=quantize_money(summary.credit_used),
            available_credit=quantize_money(summary.available_credit),
            credit_utilization=summary.credit_utilization,
            high_utilization=summary.high_utilization,
        )
