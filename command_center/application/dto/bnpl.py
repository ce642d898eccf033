"""Data transfer objects for BNPL plan operations."""

from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import Decimal
from typing import List, Optional

from command_center.domain.entities import InstallmentPlan
from command_center.service.accounting import (
    AccountingSettings,
    accounting_settings,
    format_money,
    plan_metrics,
    quantize_money,
)


@dataclass(frozen=True)
class ScheduleItem:
    """One row of an explicit installment schedule supplied by the caller."""

    sequence: int
    amount: Decimal
    due_date: Optional[date] = None
    is_paid: bool = False


@dataclass(frozen=True)
class CreatePlanRequest:
    """
    Input for creating a BNPL plan.

    Three shapes are accepted: an explicit ``schedule``; a generated even
    schedule (``generate_schedule``) split over ``installments_total``;
    or a scalar plan tracked only by ``installments_paid``.
    """

    user_id: str
    merchant: str
    total_amount: Decimal
    installments_total: Optional[int] = None
    installment_amount: Optional[Decimal] = None
    installments_paid: int = 0
    item_name: Optional[str] = None
    account_id: Optional[str] = None
    next_due_date: Optional[date] = None
    notes: Optional[str] = None
    generate_schedule: bool = False
    schedule: List[ScheduleItem] = field(default_factory=list)

    def validate(self, tolerance: Decimal) -> List[str]:
        errors = []

        if not self.user_id or not self.user_id.strip():
            errors.append("user_id is required")

        if self.schedule:
            sequences = sorted(item.sequence for item in self.schedule)
            if sequences != list(range(1, len(sequences) + 1)):
                errors.append("schedule sequences must be unique and contiguous from 1")

            schedule_sum = sum((item.amount for item in self.schedule), Decimal("0"))
            if abs(schedule_sum - self.total_amount) > tolerance:
                errors.append(
                    f"schedule sums to {schedule_sum} but total_amount is {self.total_amount}"
                )

            if self.installments_total is not None and self.installments_total != len(self.schedule):
                errors.append("installments_total must match the schedule length")
            return errors

        if self.installments_total is None:
            errors.append("installments_total is required without an explicit schedule")
        elif self.installments_paid > self.installments_total:
            errors.append("installments_paid cannot exceed installments_total")

        return errors


@dataclass(frozen=True)
class InstallmentDTO:
    """Single installment within a plan response."""

    sequence: int
    amount: Decimal
    due_date: Optional[date]
    is_paid: bool
    paid_at: Optional[datetime]


@dataclass(frozen=True)
class DueDTO:
    state: str
    days: Optional[int]
    label: str


@dataclass(frozen=True)
class PlanResponse:
    """A plan with every derived figure computed as of ``today``."""

    plan_id: str
    merchant: str
    item_name: Optional[str]
    account_id: Optional[str]
    notes: Optional[str]
    total_amount: Decimal
    installment_amount: Decimal
    remaining_balance: Decimal
    remaining_display: str
    paid_amount: Decimal
    installments_total: int
    installments_paid: int
    installments_remaining: int
    progress_percent: int
    next_installment_amount: Decimal
    next_due_date: Optional[date]
    status: str
    due: DueDTO
    is_due_soon: bool
    has_schedule: bool
    installments: List[InstallmentDTO]
    created_at: datetime

    @classmethod
    def from_entity(
        cls,
        plan: InstallmentPlan,
        today: date,
        settings: AccountingSettings = accounting_settings,
    ) -> "PlanResponse":
        metrics = plan_metrics(plan, today, settings)

        return cls(
            plan_id=str(plan.id),
            merchant=plan.merchant,
            item_name=plan.item_name,
            account_id=plan.account_id,
            notes=plan.notes,
            total_amount=quantize_money(plan.total_amount),
            installment_amount=quantize_money(plan.installment_amount),
            remaining_balance=quantize_money(metrics.remaining_balance),
            remaining_display=format_money(metrics.remaining_balance, settings),
            paid_amount=quantize_money(metrics.paid_amount),
            installments_total=metrics.installments_total,
            installments_paid=metrics.installments_paid,
            installments_remaining=metrics.installments_remaining,
            progress_percent=metrics.progress_percent,
            next_installment_amount=quantize_money(metrics.next_installment_amount),
            next_due_date=metrics.next_due_date,
            status=metrics.status.value,
            due=DueDTO(**metrics.due.to_dict()),
            is_due_soon=metrics.is_due_soon,
            has_schedule=plan.has_schedule,
            installments=[
                InstallmentDTO(
                    sequence=inst.sequence,
                    amount=quantize_money(inst.amount),
                    due_date=inst.due_date,
                    is_paid=inst.is_paid,
                    paid_at=inst.paid_at,
                )
                for inst in plan.ordered_installments()
            ],
            created_at=plan.created_at,
        )


@dataclass(frozen=True)
class PlanSummaryResponse:
    """Totals across all of a user's plans."""

    plan_count: int
    active_count: int
    overdue_count: int
    completed_count: int
    due_soon_count: int
    total_remaining: Decimal
    total_remaining_display: str
    monthly_commitment: Decimal
    monthly_commitment_display: str
