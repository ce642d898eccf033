"""
Installment Accounting Engine.

Derives read-only figures from an InstallmentPlan: remaining balance,
progress, due-date descriptors and lifecycle status. Every function here
is pure and total over well-formed plans; zero installment counts yield
zero rather than an error. Input validation belongs to the API schemas.
"""

from dataclasses import dataclass
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import List, Optional

from command_center.domain.entities import Installment, InstallmentPlan, PlanStatus

from .dates import DateLike, add_months, days_between
from .money import CENT, ZERO, Number, sum_money, to_decimal
from .settings import AccountingSettings, accounting_settings


class DueState(str, Enum):
    NO_DUE_DATE = "no_due_date"
    OVERDUE = "overdue"
    DUE_TODAY = "due_today"
    DUE_TOMORROW = "due_tomorrow"
    DUE_IN_DAYS = "due_in_days"
    COMPLETED = "completed"


@dataclass(frozen=True)
class DueDescriptor:
    """
    How soon (or how late) a payment is relative to today.

    ``days_until`` is the signed calendar-day difference (negative when
    overdue); ``days`` is the non-negative figure shown to the user.
    """

    state: DueState
    days_until: Optional[int] = None

    @property
    def days(self) -> Optional[int]:
        if self.days_until is None:
            return None
        return abs(self.days_until)

    @property
    def label(self) -> str:
        if self.state == DueState.COMPLETED:
            return "Completed"
        if self.state == DueState.NO_DUE_DATE:
            return "No due date set"
        if self.state == DueState.OVERDUE:
            suffix = "" if self.days == 1 else "s"
            return f"Overdue by {self.days} day{suffix}"
        if self.state == DueState.DUE_TODAY:
            return "Due today"
        if self.state == DueState.DUE_TOMORROW:
            return "Due tomorrow"
        return f"Due in {self.days} days"

    def to_dict(self) -> dict:
        return {
            "state": self.state.value,
            "days": self.days,
            "label": self.label,
        }


@dataclass(frozen=True)
class PlanMetrics:
    """Display figures for a single plan as of a given day."""

    total: Decimal
    remaining_balance: Decimal
    paid_amount: Decimal
    installments_total: int
    installments_paid: int
    installments_remaining: int
    progress_percent: int
    next_installment_amount: Decimal
    next_due_date: Optional[date]
    status: PlanStatus
    due: DueDescriptor
    is_due_soon: bool


# =============================================================================
# Balances and progress
# =============================================================================

def remaining_balance(plan: InstallmentPlan) -> Decimal:
    """
    Amount still owed on a plan, never negative.

    With a detailed schedule this is the sum of unpaid installments and
    the scalar ``installments_paid`` is ignored. Without one it is
    ``total - installment_amount * installments_paid`` floored at zero.
    """
    if plan.has_schedule:
        return sum_money(inst.amount for inst in plan.installments if not inst.is_paid)

    owed = to_decimal(plan.total_amount) - to_decimal(plan.installment_amount) * plan.installments_paid
    return max(owed, ZERO)


def plan_total(plan: InstallmentPlan) -> Decimal:
    """Schedule sum when a schedule exists, else the stored total."""
    if plan.has_schedule:
        return sum_money(inst.amount for inst in plan.installments)
    return to_decimal(plan.total_amount)


def percent_of(part: Number, whole: Number) -> int:
    """Whole-number percentage, half-up, clamped to [0, 100]; 0 for an empty whole."""
    whole_value = to_decimal(whole)
    if whole_value <= 0:
        return 0
    ratio = to_decimal(part) / whole_value * 100
    rounded = int(ratio.quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    return max(0, min(100, rounded))


def progress_percent(plan: InstallmentPlan) -> int:
    """Share of installments paid, as a whole percentage."""
    return percent_of(plan.paid_count, plan.total_count)


def next_installment_amount(plan: InstallmentPlan) -> Decimal:
    """Amount of the first unpaid installment, or the fixed installment amount."""
    for inst in plan.ordered_installments():
        if not inst.is_paid:
            return to_decimal(inst.amount)
    return to_decimal(plan.installment_amount)


# =============================================================================
# Due dates
# =============================================================================

def due_descriptor(today: DateLike, next_due_date: Optional[DateLike]) -> DueDescriptor:
    """
    Classify a due date relative to today by whole calendar days.

    Both values are truncated to their date before differencing, so the
    time of day never shifts the result.
    """
    if next_due_date is None:
        return DueDescriptor(DueState.NO_DUE_DATE)

    diff = days_between(today, next_due_date)

    if diff < 0:
        return DueDescriptor(DueState.OVERDUE, diff)
    if diff == 0:
        return DueDescriptor(DueState.DUE_TODAY, diff)
    if diff == 1:
        return DueDescriptor(DueState.DUE_TOMORROW, diff)
    return DueDescriptor(DueState.DUE_IN_DAYS, diff)


def is_due_soon(
    diff: Optional[int],
    settings: AccountingSettings = accounting_settings,
) -> bool:
    """True when a payment falls due within the next few days (today included)."""
    if diff is None:
        return False
    return 0 <= diff <= settings.due_soon_days


def next_due_date(plan: InstallmentPlan) -> Optional[date]:
    """
    First unpaid installment's due date, falling back to the stored date.

    A fully paid schedule has no next due date.
    """
    if plan.has_schedule:
        unpaid = [inst for inst in plan.ordered_installments() if not inst.is_paid]
        if not unpaid:
            return None
        if unpaid[0].due_date is not None:
            return unpaid[0].due_date
    return plan.next_due_date


def next_due_after_payment(
    plan: InstallmentPlan,
    paid: Optional[Installment] = None,
) -> Optional[date]:
    """
    Next due date once a payment has been applied to ``plan``.

    A dated schedule moves to its first unpaid installment's date. Scalar
    plans and undated schedules step the stored date one month ahead,
    kept on ``plan.due_day`` so a plan due on the 31st returns to the 31st
    after February. Paying a later installment ahead of an earlier one
    leaves the stored date alone. Paid-off plans have no next due date.
    """
    if plan.total_count > 0 and plan.paid_count >= plan.total_count:
        return None

    if plan.has_schedule:
        unpaid = [inst for inst in plan.ordered_installments() if not inst.is_paid]
        if unpaid[0].due_date is not None:
            return unpaid[0].due_date
        if paid is not None and paid.sequence > unpaid[0].sequence:
            return plan.next_due_date

    if plan.next_due_date is None:
        return None
    return add_months(plan.next_due_date, 1, anchor_day=plan.due_day)


def derive_status(
    paid_count: int,
    installments_total: int,
    due_date: Optional[DateLike],
    today: DateLike,
) -> PlanStatus:
    """Lifecycle status as a projection of counts and the next due date."""
    if installments_total > 0 and paid_count >= installments_total:
        return PlanStatus.COMPLETED
    if due_date is not None and days_between(today, due_date) < 0:
        return PlanStatus.OVERDUE
    return PlanStatus.ACTIVE


def plan_status(plan: InstallmentPlan, today: DateLike) -> PlanStatus:
    return derive_status(plan.paid_count, plan.total_count, next_due_date(plan), today)


def plan_due_descriptor(plan: InstallmentPlan, today: DateLike) -> DueDescriptor:
    if plan_status(plan, today) == PlanStatus.COMPLETED:
        return DueDescriptor(DueState.COMPLETED)
    return due_descriptor(today, next_due_date(plan))


def plan_metrics(
    plan: InstallmentPlan,
    today: DateLike,
    settings: AccountingSettings = accounting_settings,
) -> PlanMetrics:
    """Bundle every derived figure the dashboard shows for a plan."""
    total = plan_total(plan)
    remaining = remaining_balance(plan)
    due = plan_due_descriptor(plan, today)

    return PlanMetrics(
        total=total,
        remaining_balance=remaining,
        paid_amount=max(total - remaining, ZERO),
        installments_total=plan.total_count,
        installments_paid=plan.paid_count,
        installments_remaining=max(plan.total_count - plan.paid_count, 0),
        progress_percent=progress_percent(plan),
        next_installment_amount=next_installment_amount(plan),
        next_due_date=next_due_date(plan),
        status=plan_status(plan, today),
        due=due,
        is_due_soon=is_due_soon(due.days_until, settings),
    )


# =============================================================================
# Schedule construction
# =============================================================================

def build_even_schedule(
    total_amount: Number,
    count: int,
    first_due_date: Optional[date] = None,
    paid_count: int = 0,
    paid_at: Optional[datetime] = None,
) -> List[Installment]:
    """
    Split a total into ``count`` installments that add up to the cent.

    The remainder after an even split is handed out one cent at a time to
    the earliest installments. Due dates run monthly from
    ``first_due_date``; the first ``paid_count`` installments start paid.

    Example:
        100.00 over 3 -> [33.34, 33.33, 33.33]
    """
    if count <= 0:
        return []

    total_cents = int((to_decimal(total_amount) / CENT).quantize(Decimal("1"), rounding=ROUND_HALF_UP))
    if total_cents <= 0:
        return []

    base = total_cents // count
    remainder = total_cents - base * count

    schedule = []
    for index in range(count):
        cents = base + (1 if index < remainder else 0)
        due = None
        if first_due_date is not None:
            due = add_months(first_due_date, index, anchor_day=first_due_date.day)

        installment = Installment(
            sequence=index + 1,
            amount=Decimal(cents) * CENT,
            due_date=due,
        )
        if index < paid_count:
            installment.mark_paid(paid_at)
        schedule.append(installment)

    return schedule


def average_installment(total_amount: Number, count: int) -> Decimal:
    """Fixed installment amount for a plan, rounded to cents."""
    if count <= 0:
        return to_decimal(total_amount)
    return (to_decimal(total_amount) / count).quantize(CENT, rounding=ROUND_HALF_UP)


def schedule_gap(plan_total_amount: Number, schedule: List[Installment]) -> Decimal:
    """Absolute difference between a plan total and its schedule sum."""
    return abs(to_decimal(plan_total_amount) - sum_money(inst.amount for inst in schedule))
