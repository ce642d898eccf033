"""
Unit Tests for the Installment Accounting Engine.

These tests verify:
1. Remaining balance and progress (scalar and scheduled plans)
2. Due-date descriptors and the due-soon flag
3. Derived lifecycle status
4. Even schedule generation

Test Categories:
- test_remaining_*: Remaining balance tests
- test_progress_*: Progress percentage tests
- test_due_*: Due descriptor tests
- test_status_*: Status derivation tests
- test_schedule_*: Schedule generation tests
"""

from datetime import date, datetime, timedelta
from decimal import Decimal

import pytest

from command_center.domain.entities import Installment, InstallmentPlan, PlanStatus
from command_center.service.accounting import (
    AccountingSettings,
    DueState,
    average_installment,
    build_even_schedule,
    derive_status,
    due_descriptor,
    is_due_soon,
    next_due_after_payment,
    next_due_date,
    next_installment_amount,
    percent_of,
    plan_due_descriptor,
    plan_metrics,
    plan_status,
    progress_percent,
    remaining_balance,
    schedule_gap,
)

TODAY = date(2025, 3, 10)


# =============================================================================
# Test Fixtures
# =============================================================================

def make_plan(
    total: str = "1200",
    installment: str = "100",
    count: int = 12,
    paid: int = 0,
    next_due: date | None = None,
    installments: list[Installment] | None = None,
) -> InstallmentPlan:
    """Helper to build a plan without touching the database."""
    return InstallmentPlan(
        user_id="user_1",
        merchant="Shopee",
        total_amount=Decimal(total),
        installment_amount=Decimal(installment),
        installments_total=count,
        installments_paid=paid,
        next_due_date=next_due,
        installments=installments or [],
    )


def make_schedule(amounts: list[str], paid: int = 0, first_due: date | None = None) -> list[Installment]:
    schedule = []
    for index, amount in enumerate(amounts):
        due = first_due + timedelta(days=30 * index) if first_due else None
        schedule.append(
            Installment(
                sequence=index + 1,
                amount=Decimal(amount),
                due_date=due,
                is_paid=index < paid,
            )
        )
    return schedule


# =============================================================================
# Remaining Balance Tests
# =============================================================================

class TestRemainingBalance:

    def test_remaining_scalar_plan(self):
        """1200 over 12 x 100 with 3 paid leaves 900."""
        plan = make_plan(paid=3)

        assert remaining_balance(plan) == Decimal("900")

    def test_remaining_never_negative(self):
        """Overpaid scalar counts floor at zero."""
        plan = make_plan(paid=15)

        assert remaining_balance(plan) == Decimal("0")

    def test_remaining_schedule_ignores_scalar_count(self):
        """The schedule wins even when the scalar paid count disagrees."""
        plan = make_plan(
            total="500",
            count=5,
            paid=4,
            installments=make_schedule(["100"] * 5, paid=2),
        )

        assert remaining_balance(plan) == Decimal("300")
        assert plan.paid_count == 2

    def test_remaining_fully_paid_schedule(self):
        plan = make_plan(total="300", count=3, installments=make_schedule(["100"] * 3, paid=3))

        assert remaining_balance(plan) == Decimal("0")


# =============================================================================
# Progress Tests
# =============================================================================

class TestProgress:

    def test_progress_scalar_plan(self):
        assert progress_percent(make_plan(paid=3)) == 25

    def test_progress_zero_total(self):
        """A plan with no installments reports 0 rather than dividing by zero."""
        plan = make_plan(total="0", count=0)

        assert progress_percent(plan) == 0

    def test_progress_uses_schedule(self):
        plan = make_plan(
            total="500",
            count=5,
            paid=4,
            installments=make_schedule(["100"] * 5, paid=2),
        )

        assert progress_percent(plan) == 40

    def test_progress_clamped_to_100(self):
        assert progress_percent(make_plan(paid=20)) == 100

    @pytest.mark.parametrize(
        "part,whole,expected",
        [
            (1, 3, 33),
            (2, 3, 67),
            (1, 8, 13),
            (0, 5, 0),
            (5, 0, 0),
        ],
    )
    def test_percent_of_rounds_half_up(self, part, whole, expected):
        assert percent_of(part, whole) == expected

    @pytest.mark.parametrize("paid", [0, 1, 6, 12, 13, 40])
    def test_progress_always_in_bounds(self, paid):
        value = progress_percent(make_plan(paid=paid))

        assert 0 <= value <= 100


# =============================================================================
# Due Descriptor Tests
# =============================================================================

class TestDueDescriptor:

    def test_due_today(self):
        descriptor = due_descriptor(TODAY, TODAY)

        assert descriptor.state == DueState.DUE_TODAY
        assert descriptor.label == "Due today"

    def test_due_yesterday_is_overdue_by_one(self):
        descriptor = due_descriptor(TODAY, TODAY - timedelta(days=1))

        assert descriptor.state == DueState.OVERDUE
        assert descriptor.days == 1
        assert descriptor.label == "Overdue by 1 day"

    def test_overdue_plural_label(self):
        descriptor = due_descriptor(TODAY, TODAY - timedelta(days=3))

        assert descriptor.label == "Overdue by 3 days"

    def test_due_tomorrow(self):
        descriptor = due_descriptor(TODAY, TODAY + timedelta(days=1))

        assert descriptor.state == DueState.DUE_TOMORROW
        assert descriptor.label == "Due tomorrow"

    def test_due_in_days(self):
        descriptor = due_descriptor(TODAY, TODAY + timedelta(days=5))

        assert descriptor.state == DueState.DUE_IN_DAYS
        assert descriptor.days == 5
        assert descriptor.label == "Due in 5 days"

    def test_due_no_date(self):
        descriptor = due_descriptor(TODAY, None)

        assert descriptor.state == DueState.NO_DUE_DATE
        assert descriptor.days is None
        assert descriptor.label == "No due date set"

    def test_due_ignores_time_of_day(self):
        """Late evening still counts as the same calendar day."""
        descriptor = due_descriptor(datetime(2025, 3, 10, 23, 59), date(2025, 3, 11))

        assert descriptor.state == DueState.DUE_TOMORROW

    def test_due_descriptor_idempotent(self):
        due = TODAY + timedelta(days=4)

        assert due_descriptor(TODAY, due) == due_descriptor(TODAY, due)

    def test_due_completed_plan(self):
        plan = make_plan(paid=12, next_due=TODAY - timedelta(days=10))

        descriptor = plan_due_descriptor(plan, TODAY)

        assert descriptor.state == DueState.COMPLETED
        assert descriptor.label == "Completed"

    @pytest.mark.parametrize(
        "diff,expected",
        [(None, False), (-1, False), (0, True), (3, True), (4, False)],
    )
    def test_due_soon_window(self, diff, expected):
        assert is_due_soon(diff) is expected

    def test_due_soon_threshold_configurable(self):
        settings = AccountingSettings(due_soon_days=7)

        assert is_due_soon(6, settings) is True


# =============================================================================
# Status Tests
# =============================================================================

class TestStatus:

    def test_status_completed(self):
        assert derive_status(12, 12, None, TODAY) == PlanStatus.COMPLETED

    def test_status_completed_beats_overdue(self):
        assert derive_status(12, 12, TODAY - timedelta(days=5), TODAY) == PlanStatus.COMPLETED

    def test_status_overdue(self):
        assert derive_status(3, 12, TODAY - timedelta(days=1), TODAY) == PlanStatus.OVERDUE

    def test_status_active_when_due_today(self):
        assert derive_status(3, 12, TODAY, TODAY) == PlanStatus.ACTIVE

    def test_status_active_without_date(self):
        assert derive_status(0, 12, None, TODAY) == PlanStatus.ACTIVE

    def test_status_zero_total_is_not_completed(self):
        assert derive_status(0, 0, None, TODAY) == PlanStatus.ACTIVE

    def test_status_from_schedule(self):
        plan = make_plan(
            total="300",
            count=3,
            installments=make_schedule(["100"] * 3, paid=1, first_due=TODAY - timedelta(days=40)),
        )

        # Second installment was due 10 days ago
        assert plan_status(plan, TODAY) == PlanStatus.OVERDUE


# =============================================================================
# Next Due Date Tests
# =============================================================================

class TestNextDueDate:

    def test_next_due_first_unpaid(self):
        schedule = make_schedule(["100"] * 3, paid=1, first_due=date(2025, 1, 1))
        plan = make_plan(total="300", count=3, installments=schedule)

        assert next_due_date(plan) == schedule[1].due_date
        assert next_installment_amount(plan) == Decimal("100")

    def test_next_due_none_when_schedule_paid(self):
        schedule = make_schedule(["100"] * 2, paid=2, first_due=date(2025, 1, 1))
        plan = make_plan(total="200", count=2, next_due=date(2025, 6, 1), installments=schedule)

        assert next_due_date(plan) is None

    def test_next_due_falls_back_to_stored(self):
        plan = make_plan(next_due=date(2025, 4, 1))

        assert next_due_date(plan) == date(2025, 4, 1)

    def test_next_due_undated_schedule_uses_stored(self):
        plan = make_plan(
            total="200",
            count=2,
            next_due=date(2025, 4, 1),
            installments=make_schedule(["100", "100"]),
        )

        assert next_due_date(plan) == date(2025, 4, 1)

    def test_next_due_after_payment_keeps_month_end_anchor(self):
        """A plan due on the 31st returns to the 31st after a short month."""
        plan = make_plan(count=4, next_due=date(2025, 1, 31))
        plan.due_day = 31

        plan.installments_paid = 1
        plan.next_due_date = next_due_after_payment(plan)
        assert plan.next_due_date == date(2025, 2, 28)

        plan.installments_paid = 2
        plan.next_due_date = next_due_after_payment(plan)
        assert plan.next_due_date == date(2025, 3, 31)

    def test_next_due_after_payment_without_anchor_follows_stored_day(self):
        plan = make_plan(count=4, paid=1, next_due=date(2025, 2, 28))

        assert next_due_after_payment(plan) == date(2025, 3, 28)

    def test_next_due_after_payment_advances_undated_schedule(self):
        """Paying the first of an undated schedule moves the stored date a month on."""
        schedule = make_schedule(["100", "100"])
        plan = make_plan(total="200", count=2, next_due=date(2025, 3, 1), installments=schedule)
        plan.due_day = 1

        schedule[0].mark_paid()

        assert next_due_after_payment(plan, schedule[0]) == date(2025, 4, 1)

    def test_next_due_after_payment_out_of_order_keeps_date(self):
        """Paying a later undated installment first leaves the earlier one due."""
        schedule = make_schedule(["100"] * 3)
        plan = make_plan(total="300", count=3, next_due=date(2025, 3, 1), installments=schedule)

        schedule[2].mark_paid()

        assert next_due_after_payment(plan, schedule[2]) == date(2025, 3, 1)

    def test_next_due_after_payment_dated_schedule_uses_first_unpaid(self):
        schedule = make_schedule(["100"] * 3, first_due=date(2025, 1, 1))
        plan = make_plan(total="300", count=3, installments=schedule)

        schedule[0].mark_paid()

        assert next_due_after_payment(plan, schedule[0]) == schedule[1].due_date

    def test_next_due_after_payment_none_when_paid_off(self):
        plan = make_plan(count=2, paid=2, next_due=date(2025, 3, 1))

        assert next_due_after_payment(plan) is None


# =============================================================================
# Plan Metrics Tests
# =============================================================================

class TestPlanMetrics:

    def test_metrics_scalar_plan(self):
        plan = make_plan(paid=3, next_due=TODAY + timedelta(days=2))

        metrics = plan_metrics(plan, TODAY)

        assert metrics.remaining_balance == Decimal("900")
        assert metrics.paid_amount == Decimal("300")
        assert metrics.progress_percent == 25
        assert metrics.installments_remaining == 9
        assert metrics.status == PlanStatus.ACTIVE
        assert metrics.due.state == DueState.DUE_IN_DAYS
        assert metrics.is_due_soon is True

    def test_metrics_completed_plan_not_due_soon(self):
        plan = make_plan(paid=12, next_due=TODAY)

        metrics = plan_metrics(plan, TODAY)

        assert metrics.status == PlanStatus.COMPLETED
        assert metrics.remaining_balance == Decimal("0")
        assert metrics.is_due_soon is False


# =============================================================================
# Schedule Generation Tests
# =============================================================================

class TestBuildEvenSchedule:

    def test_schedule_remainder_to_earliest(self):
        schedule = build_even_schedule(Decimal("100"), 3)

        assert [inst.amount for inst in schedule] == [
            Decimal("33.34"),
            Decimal("33.33"),
            Decimal("33.33"),
        ]
        assert sum(inst.amount for inst in schedule) == Decimal("100")

    def test_schedule_sequences_contiguous(self):
        schedule = build_even_schedule(Decimal("1200"), 12)

        assert [inst.sequence for inst in schedule] == list(range(1, 13))

    def test_schedule_monthly_dates_clamped(self):
        """31 Jan runs to 28 Feb and back to 31 Mar."""
        schedule = build_even_schedule(Decimal("300"), 3, first_due_date=date(2025, 1, 31))

        assert [inst.due_date for inst in schedule] == [
            date(2025, 1, 31),
            date(2025, 2, 28),
            date(2025, 3, 31),
        ]

    def test_schedule_marks_paid_prefix(self):
        schedule = build_even_schedule(Decimal("400"), 4, paid_count=2)

        assert [inst.is_paid for inst in schedule] == [True, True, False, False]
        assert schedule[0].paid_at is not None

    def test_schedule_empty_for_zero_count(self):
        assert build_even_schedule(Decimal("100"), 0) == []

    def test_schedule_gap(self):
        schedule = build_even_schedule(Decimal("100"), 3)

        assert schedule_gap(Decimal("100.03"), schedule) == Decimal("0.03")

    def test_average_installment(self):
        assert average_installment(Decimal("100"), 3) == Decimal("33.33")
        assert average_installment(Decimal("1200"), 12) == Decimal("100.00")
