"""Money helpers: Decimal coercion, rounding and display formatting."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable, Union

from .settings import AccountingSettings, accounting_settings

Number = Union[Decimal, int, float, str]

CENT = Decimal("0.01")
ZERO = Decimal("0")


def to_decimal(value: Number | None) -> Decimal:
    """Coerce a stored or user-supplied amount to Decimal (None -> 0)."""
    if value is None:
        return ZERO
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        return Decimal(str(value))
    return Decimal(value)


def quantize_money(value: Number) -> Decimal:
    """Round to cents, half away from zero."""
    return to_decimal(value).quantize(CENT, rounding=ROUND_HALF_UP)


def sum_money(values: Iterable[Number]) -> Decimal:
    return sum((to_decimal(v) for v in values), ZERO)


def format_money(
    amount: Number | None,
    settings: AccountingSettings = accounting_settings,
) -> str:
    """
    Format an amount as a currency string.

    Args:
        amount: Amount in major units (ringgit)
        settings: Accounting settings (symbol and separator)

    Returns:
        e.g. ``RM 1,234.50`` or ``-RM 12.00``

    Example:
        >>> format_money(Decimal("1234.5"))
        'RM 1,234.50'
    """
    value = quantize_money(amount)
    sign = "-" if value < 0 else ""
    digits = f"{abs(value):,.2f}"
    if settings.thousands_separator != ",":
        digits = digits.replace(",", settings.thousands_separator)
    return f"{sign}{settings.currency_symbol} {digits}"
