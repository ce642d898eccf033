"""
Account Aggregator.

Balances and credit utilization across a user's accounts. Credit lines
store what is owed as a negative balance, so the available credit on a
card is ``credit_limit + balance``.
"""

from dataclasses import dataclass
from decimal import ROUND_HALF_UP, Decimal
from typing import Optional, Sequence

from command_center.domain.entities import Account

from .money import ZERO, Number, sum_money, to_decimal
from .settings import AccountingSettings, accounting_settings


@dataclass(frozen=True)
class AccountsSummary:
    total_balance: Decimal
    account_count: int
    total_credit_limit: Decimal
    credit_used: Decimal
    available_credit: Decimal
    credit_utilization: Decimal
    high_utilization: bool


def utilization_percent(used: Number, limit: Number) -> Decimal:
    """Share of a limit in use, to one decimal place; 0 without a limit."""
    limit_value = to_decimal(limit)
    if limit_value <= 0:
        return Decimal("0.0")
    ratio = to_decimal(used) / limit_value * 100
    return ratio.quantize(Decimal("0.1"), rounding=ROUND_HALF_UP)


def available_credit(account: Account) -> Optional[Decimal]:
    """Limit left to spend, or None for accounts without a credit limit."""
    if not account.has_limit:
        return None
    return to_decimal(account.credit_limit) + to_decimal(account.balance)


def account_utilization(account: Account) -> Optional[Decimal]:
    if not account.has_limit:
        return None
    return utilization_percent(abs(to_decimal(account.balance)), account.credit_limit)


def total_balance(accounts: Sequence[Account]) -> Decimal:
    return sum_money(account.balance for account in accounts)


def credit_utilization(accounts: Sequence[Account]) -> Decimal:
    """
    Combined utilization over the accounts that have a credit limit.

    Accounts without a limit count towards neither the used amount nor
    the total limit.
    """
    limited = [account for account in accounts if account.has_limit]
    used = sum_money(abs(to_decimal(account.balance)) for account in limited)
    return utilization_percent(used, sum_money(account.credit_limit for account in limited))


def summarize_accounts(
    accounts: Sequence[Account],
    settings: AccountingSettings = accounting_settings,
) -> AccountsSummary:
    limited = [account for account in accounts if account.has_limit]
    total_limit = sum_money(account.credit_limit for account in limited)
    used = sum_money(abs(to_decimal(account.balance)) for account in limited)
    utilization = utilization_percent(used, total_limit)

    return AccountsSummary(
        total_balance=total_balance(accounts),
        account_count=len(accounts),
        total_credit_limit=total_limit,
        credit_used=used,
        available_credit=max(sum_money(available_credit(account) for account in limited), ZERO),
        credit_utilization=utilization,
        high_utilization=utilization > settings.utilization_warning_percent,
    )
