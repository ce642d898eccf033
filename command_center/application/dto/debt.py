"""Data transfer objects for debt operations."""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from command_center.domain.entities import Debt, DebtCategory, DebtPayment
from command_center.service.accounting import (
    AccountingSettings,
    DebtSummary,
    UpcomingPayment,
    accounting_settings,
    due_descriptor,
    format_money,
    percentage_paid,
    quantize_money,
)
from command_center.service.accounting.debts import next_occurrence


@dataclass(frozen=True)
class CreateDebtRequest:
    user_id: str
    name: str
    total_amount: Decimal
    due_day: int
    current_balance: Optional[Decimal] = None
    category: DebtCategory = DebtCategory.OTHER
    interest_rate: Decimal = Decimal("0")
    minimum_payment: Decimal = Decimal("0")


@dataclass(frozen=True)
class RecordPaymentRequest:
    user_id: str
    amount: Decimal
    payment_date: Optional[date] = None
    notes: Optional[str] = None


@dataclass(frozen=True)
class DebtResponse:
    debt_id: str
    name: str
    category: str
    total_amount: Decimal
    current_balance: Decimal
    balance_display: str
    amount_paid: Decimal
    percentage_paid: Decimal
    interest_rate: Decimal
    minimum_payment: Decimal
    due_day: int
    next_due_date: date
    created_at: datetime

    @classmethod
    def from_entity(
        cls,
        debt: Debt,
        today: date,
        settings: AccountingSettings = accounting_settings,
    ) -> "DebtResponse":
        return cls(
            debt_id=str(debt.id),
            name=debt.name,
            category=debt.category.value,
            total_amount=quantize_money(debt.total_amount),
            current_balance=quantize_money(debt.current_balance),
            balance_display=format_money(debt.current_balance, settings),
            amount_paid=quantize_money(debt.amount_paid),
            percentage_paid=percentage_paid([debt]),
            interest_rate=debt.interest_rate,
            minimum_payment=quantize_money(debt.minimum_payment),
            due_day=debt.due_day,
            next_due_date=next_occurrence(debt.due_day, today),
            created_at=debt.created_at,
        )


@dataclass(frozen=True)
class DebtPaymentResponse:
    payment_id: str
    debt_id: str
    amount: Decimal
    payment_date: date
    notes: Optional[str]
    created_at: datetime

    @classmethod
    def from_entity(cls, payment: DebtPayment) -> "DebtPaymentResponse":
        return cls(
            payment_id=str(payment.id),
            debt_id=str(payment.debt_id),
            amount=quantize_money(payment.amount),
            payment_date=payment.payment_date,
            notes=payment.notes,
            created_at=payment.created_at,
        )


@dataclass(frozen=True)
class PaymentRecordedResponse:
    """A recorded payment together with the debt's new balance."""

    payment: DebtPaymentResponse
    debt: DebtResponse


@dataclass(frozen=True)
class UpcomingPaymentDTO:
    debt_id: str
    name: str
    due_day: int
    due_date: date
    days_until: int
    label: str
    minimum_payment: Decimal

    @classmethod
    def from_upcoming(cls, item: UpcomingPayment, today: date) -> "UpcomingPaymentDTO":
        return cls(
            debt_id=str(item.debt.id),
            name=item.debt.name,
            due_day=item.debt.due_day,
            due_date=item.due_date,
            days_until=item.days_until,
            label=due_descriptor(today, item.due_date).label,
            minimum_payment=quantize_money(item.minimum_payment),
        )


@dataclass(frozen=True)
class DebtSummaryResponse:
    total_debt: Decimal
    total_debt_display: str
    total_original: Decimal
    total_paid: Decimal
    percentage_paid: Decimal
    debt_count: int
    window_days: int
    upcoming: List[UpcomingPaymentDTO]
    total_upcoming: Decimal
    total_upcoming_display: str

    @classmethod
    def from_summary(
        cls,
        summary: DebtSummary,
        today: date,
        window_days: int,
        settings: AccountingSettings = accounting_settings,
    ) -> "DebtSummaryResponse":
        return cls(
            total_debt=quantize_money(summary.total_debt),
            total_debt_display=format_money(summary.total_debt, settings),
            total_original=quantize_money(summary.total_original),
            total_paid=quantize_money(max(summary.total_original - summary.total_debt, Decimal("0"))),
            percentage_paid=summary.percentage_paid,
            debt_count=summary.debt_count,
            window_days=window_days,
            upcoming=[UpcomingPaymentDTO.from_upcoming(item, today) for item in summary.upcoming],
            total_upcoming=quantize_money(summary.total_upcoming),
            total_upcoming_display=format_money(summary.total_upcoming, settings),
        )
