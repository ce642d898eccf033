"""Calendar helpers shared by the installment and debt engines."""

import calendar
from datetime import date, datetime
from typing import Union

DateLike = Union[date, datetime]


def start_of_day(value: DateLike) -> date:
    """Truncate a datetime to its calendar date; dates pass through."""
    if isinstance(value, datetime):
        return value.date()
    return value


def days_between(today: DateLike, target: DateLike) -> int:
    """Whole calendar days from ``today`` to ``target`` (negative if past)."""
    return (start_of_day(target) - start_of_day(today)).days


def clamp_day(year: int, month: int, day: int) -> date:
    """Build a date, pulling ``day`` back to the month's last day if needed."""
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, min(day, last_day))


def add_months(value: date, months: int, anchor_day: int | None = None) -> date:
    """
    Shift a date by whole months, keeping the day where the month allows.

    ``anchor_day`` keeps a schedule on its original day after passing
    through a short month (31 Jan -> 28 Feb -> 31 Mar).
    """
    month_index = value.month - 1 + months
    year = value.year + month_index // 12
    month = month_index % 12 + 1
    return clamp_day(year, month, anchor_day or value.day)
