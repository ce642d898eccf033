"""
Accounting engine for installment plans, debts and accounts.
"""

from .settings import AccountingSettings, UpcomingWindowMode, accounting_settings
from .money import format_money, quantize_money, sum_money, to_decimal
from .dates import add_months, days_between, start_of_day
from .installments import (
    DueDescriptor,
    DueState,
    PlanMetrics,
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
from .accounts import (
    AccountsSummary,
    account_utilization,
    available_credit,
    credit_utilization,
    summarize_accounts,
    total_balance,
    utilization_percent,
)
from .debts import (
    DebtSummary,
    UpcomingPayment,
    apply_payment,
    percentage_paid,
    summarize_debts,
    total_debt,
    total_upcoming,
    upcoming_payments,
)

__all__ = [
    # Settings
    "AccountingSettings",
    "UpcomingWindowMode",
    "accounting_settings",
    # Money
    "format_money",
    "quantize_money",
    "sum_money",
    "to_decimal",
    # Dates
    "add_months",
    "days_between",
    "start_of_day",
    # Installments
    "DueDescriptor",
    "DueState",
    "PlanMetrics",
    "average_installment",
    "build_even_schedule",
    "derive_status",
    "due_descriptor",
    "is_due_soon",
    "next_due_after_payment",
    "next_due_date",
    "next_installment_amount",
    "percent_of",
    "plan_due_descriptor",
    "plan_metrics",
    "plan_status",
    "progress_percent",
    "remaining_balance",
    "schedule_gap",
    # Accounts
    "AccountsSummary",
    "account_utilization",
    "available_credit",
    "credit_utilization",
    "summarize_accounts",
    "total_balance",
    "utilization_percent",
    # Debts
    "DebtSummary",
    "UpcomingPayment",
    "apply_payment",
    "percentage_paid",
    "summarize_debts",
    "total_debt",
    "total_upcoming",
    "upcoming_payments",
]
