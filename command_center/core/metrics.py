"""Prometheus metrics for the Life Command Center service.

Business Metrics:
- lifecc_bnpl_plans_created_total: Plans created by schedule mode
- lifecc_installments_paid_total: Installments marked paid
- lifecc_debt_payments_total: Debt payments recorded
- lifecc_debt_payment_amount_total: Sum of debt payments (ringgit)
- lifecc_accounts_created_total: Accounts created by type
- lifecc_expenses_logged_total: Expenses logged by category
- lifecc_prayers_logged_total: Prayers logged by status

Technical Metrics:
- lifecc_http_requests_total: HTTP requests by endpoint/status
- lifecc_http_request_latency_seconds: HTTP request latency
"""

from decimal import Decimal

from prometheus_client import Counter, Histogram, REGISTRY, generate_latest
from prometheus_client.exposition import CONTENT_TYPE_LATEST


# =============================================================================
# Business Metrics
# =============================================================================

plans_created_total = Counter(
    "lifecc_bnpl_plans_created_total",
    "Total number of BNPL plans created",
    ["mode"],  # schedule, scalar
)

installments_paid_total = Counter(
    "lifecc_installments_paid_total",
    "Total number of BNPL installments marked paid",
)

debt_payments_total = Counter(
    "lifecc_debt_payments_total",
    "Total number of debt payments recorded",
    ["category"],
)

debt_payment_amount_total = Counter(
    "lifecc_debt_payment_amount_total",
    "Total amount of debt payments recorded, in ringgit",
)

accounts_created_total = Counter(
    "lifecc_accounts_created_total",
    "Total number of accounts created",
    ["account_type"],
)

expenses_logged_total = Counter(
    "lifecc_expenses_logged_total",
    "Total number of expenses logged",
    ["category"],
)

prayers_logged_total = Counter(
    "lifecc_prayers_logged_total",
    "Total number of prayer entries logged",
    ["status"],
)


# =============================================================================
# Technical Metrics
# =============================================================================

http_requests_total = Counter(
    "lifecc_http_requests_total",
    "Total HTTP requests by endpoint and status",
    ["method", "endpoint", "status"],
)

http_request_latency = Histogram(
    "lifecc_http_request_latency_seconds",
    "HTTP request latency by endpoint",
    ["method", "endpoint"],
    buckets=[0.01, 0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0],
)


# =============================================================================
# Helper Functions
# =============================================================================

def record_plan_created(has_schedule: bool) -> None:
    """Record a new BNPL plan."""
    plans_created_total.labels(mode="schedule" if has_schedule else "scalar").inc()


def record_installment_paid() -> None:
    """Record an installment being marked paid."""
    installments_paid_total.inc()


def record_debt_payment(category: str, amount: Decimal) -> None:
    """Record a debt payment and its amount."""
    debt_payments_total.labels(category=category).inc()
    debt_payment_amount_total.inc(float(amount))


def record_account_created(account_type: str) -> None:
    """Record a new account."""
    accounts_created_total.labels(account_type=account_type).inc()


def record_expense(category: str) -> None:
    """Record a logged expense."""
    expenses_logged_total.labels(category=category).inc()


def record_prayer(status: str) -> None:
    """Record a logged prayer."""
    prayers_logged_total.labels(status=status).inc()


def record_http_request(method: str, endpoint: str, status: int, duration: float) -> None:
    """Record an HTTP request."""
    http_requests_total.labels(method=method, endpoint=endpoint, status=str(status)).inc()
    http_request_latency.labels(method=method, endpoint=endpoint).observe(duration)


def get_metrics() -> bytes:
    """Get current metrics in Prometheus format."""
    return generate_latest(REGISTRY)


def get_metrics_content_type() -> str:
    """Get the content type for metrics response."""
    return CONTENT_TYPE_LATEST
