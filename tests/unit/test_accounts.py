"""
Unit Tests for the Account Aggregator.

These tests verify:
1. Available credit and per-account utilization
2. Combined utilization over accounts with a limit
3. Summary totals and the high-utilization flag
"""

from decimal import Decimal

import pytest

from command_center.domain.entities import Account, AccountType
from command_center.service.accounting import (
    AccountingSettings,
    account_utilization,
    available_credit,
    credit_utilization,
    summarize_accounts,
    total_balance,
    utilization_percent,
)


def make_account(
    balance: str,
    limit: str | None = None,
    account_type: AccountType = AccountType.CARD,
) -> Account:
    return Account(
        user_id="user_1",
        name=f"{account_type.value} account",
        account_type=account_type,
        balance=Decimal(balance),
        credit_limit=Decimal(limit) if limit is not None else None,
    )


class TestAvailableCredit:

    def test_available_credit_is_limit_plus_balance(self):
        assert available_credit(make_account("-1500", "5000")) == Decimal("3500")

    def test_available_credit_none_without_limit(self):
        assert available_credit(make_account("2000", account_type=AccountType.BANK)) is None

    def test_zero_limit_counts_as_no_limit(self):
        account = make_account("-10", "0")

        assert available_credit(account) is None
        assert account_utilization(account) is None


class TestUtilization:

    def test_account_utilization_one_decimal(self):
        assert account_utilization(make_account("-1000", "3000")) == Decimal("33.3")

    def test_utilization_uses_absolute_balance(self):
        """A credit balance in the user's favour still reads as a share of the limit."""
        assert account_utilization(make_account("500", "1000")) == Decimal("50.0")

    def test_utilization_can_exceed_100(self):
        assert utilization_percent(Decimal("1200"), Decimal("1000")) == Decimal("120.0")

    def test_utilization_zero_for_empty_limit(self):
        assert utilization_percent(Decimal("50"), Decimal("0")) == Decimal("0.0")

    def test_combined_utilization_skips_accounts_without_limit(self):
        accounts = [
            make_account("-1500", "5000"),
            make_account("-500", "1000", AccountType.BNPL),
            make_account("9000", account_type=AccountType.BANK),
        ]

        assert credit_utilization(accounts) == Decimal("33.3")

    def test_combined_utilization_without_limits(self):
        assert credit_utilization([make_account("100", account_type=AccountType.EWALLET)]) == Decimal("0.0")


class TestSummarizeAccounts:

    def test_summary_totals(self):
        accounts = [
            make_account("2000", account_type=AccountType.BANK),
            make_account("-1500", "5000"),
            make_account("200", account_type=AccountType.EWALLET),
        ]

        summary = summarize_accounts(accounts)

        assert summary.account_count == 3
        assert summary.total_balance == Decimal("700")
        assert summary.total_credit_limit == Decimal("5000")
        assert summary.credit_used == Decimal("1500")
        assert summary.available_credit == Decimal("3500")
        assert summary.credit_utilization == Decimal("30.0")
        assert summary.high_utilization is False

    def test_summary_empty(self):
        summary = summarize_accounts([])

        assert summary.account_count == 0
        assert summary.total_balance == Decimal("0")
        assert summary.credit_utilization == Decimal("0.0")
        assert total_balance([]) == Decimal("0")

    @pytest.mark.parametrize(
        "threshold, expected",
        [
            (Decimal("30"), True),
            (Decimal("40"), False),
        ],
    )
    def test_high_utilization_threshold_configurable(self, threshold, expected):
        settings = AccountingSettings(utilization_warning_percent=threshold)

        summary = summarize_accounts([make_account("-350", "1000")], settings)

        assert summary.high_utilization is expected
