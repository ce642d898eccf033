"""
Debt Aggregator.

Summarizes a user's debts for the dashboard: totals, share paid off, and
which minimum payments fall due in the coming window.
"""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import ROUND_HALF_UP, Decimal
from typing import List, Optional, Sequence

from command_center.domain.entities import Debt

from .dates import DateLike, add_months, clamp_day, days_between, start_of_day
from .money import ZERO, Number, sum_money, to_decimal
from .settings import AccountingSettings, UpcomingWindowMode, accounting_settings


@dataclass(frozen=True)
class UpcomingPayment:
    """A debt whose minimum payment falls inside the upcoming window."""

    debt: Debt
    due_date: date
    days_until: int

    @property
    def minimum_payment(self) -> Decimal:
        return to_decimal(self.debt.minimum_payment)


@dataclass(frozen=True)
class DebtSummary:
    total_debt: Decimal
    total_original: Decimal
    percentage_paid: Decimal
    upcoming: List[UpcomingPayment]
    total_upcoming: Decimal
    debt_count: int


def total_debt(debts: Sequence[Debt]) -> Decimal:
    """Sum of outstanding balances."""
    return sum_money(debt.current_balance for debt in debts)


def total_original(debts: Sequence[Debt]) -> Decimal:
    return sum_money(debt.total_amount for debt in debts)


def percentage_paid(debts: Sequence[Debt]) -> Decimal:
    """
    Share of the original debt already repaid, to one decimal place.

    Returns 0 when there is nothing owed originally.
    """
    original = total_original(debts)
    if original <= 0:
        return Decimal("0.0")
    paid = (original - total_debt(debts)) / original * 100
    return paid.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def next_occurrence(due_day: int, today: DateLike) -> date:
    """Next date on/after today that falls on ``due_day`` (clamped to month end)."""
    current = start_of_day(today)
    candidate = clamp_day(current.year, current.month, due_day)
    if candidate < current:
        candidate = add_months(current.replace(day=1), 1, anchor_day=due_day)
    return candidate


def upcoming_payments(
    debts: Sequence[Debt],
    today: DateLike,
    window_days: Optional[int] = None,
    settings: AccountingSettings = accounting_settings,
) -> List[UpcomingPayment]:
    """
    Debts with a payment due between today and ``today + window_days``.

    In ``calendar`` mode each debt's next real due date is checked against
    the window, so windows that cross into next month work. In
    ``day_of_month`` mode only day numbers are compared
    (``today.day <= due_day <= (today + window).day``), which matches
    nothing once the window wraps past month end.
    """
    window = settings.upcoming_window_days if window_days is None else window_days
    current = start_of_day(today)
    results: List[UpcomingPayment] = []

    if settings.upcoming_window_mode == UpcomingWindowMode.DAY_OF_MONTH:
        window_end_day = (current + timedelta(days=window)).day
        for debt in debts:
            if not debt.due_day:
                continue
            if current.day <= debt.due_day <= window_end_day:
                due = clamp_day(current.year, current.month, debt.due_day)
                results.append(UpcomingPayment(debt, due, days_between(current, due)))
        return sorted(results, key=lambda item: item.debt.due_day)

    for debt in debts:
        if not debt.due_day:
            continue
        due = next_occurrence(debt.due_day, current)
        diff = days_between(current, due)
        if diff <= window:
            results.append(UpcomingPayment(debt, due, diff))

    return sorted(results, key=lambda item: (item.due_date, item.debt.due_day))


def total_upcoming(upcoming: Sequence[UpcomingPayment]) -> Decimal:
    """Sum of minimum payments across the upcoming window."""
    return sum_money(item.minimum_payment for item in upcoming)


def apply_payment(current_balance: Number, amount: Number) -> Decimal:
    """Balance after a payment, floored at zero."""
    return max(to_decimal(current_balance) - to_decimal(amount), ZERO)


def summarize_debts(
    debts: Sequence[Debt],
    today: DateLike,
    window_days: Optional[int] = None,
    settings: AccountingSettings = accounting_settings,
) -> DebtSummary:
    upcoming = upcoming_payments(debts, today, window_days, settings)
    return DebtSummary(
        total_debt=total_debt(debts),
        total_original=total_original(debts),
        percentage_paid=percentage_paid(debts),
        upcoming=upcoming,
        total_upcoming=total_upcoming(upcoming),
        debt_count=len(debts),
    )
