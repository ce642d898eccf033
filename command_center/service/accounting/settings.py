"""
Accounting Settings for the installment and debt engine.

Environment variables use the ACCOUNTING_ prefix:
    ACCOUNTING_DUE_SOON_DAYS=3
    ACCOUNTING_UPCOMING_WINDOW_DAYS=15
    ACCOUNTING_UPCOMING_WINDOW_MODE=calendar
    ACCOUNTING_CURRENCY_SYMBOL=RM
    ACCOUNTING_UTILIZATION_WARNING_PERCENT=30

Usage:
    from command_center.service.accounting.settings import accounting_settings

    window = accounting_settings.upcoming_window_days

    # Or create custom settings for testing
    custom = AccountingSettings(upcoming_window_mode="day_of_month")
"""

from decimal import Decimal
from enum import Enum
from functools import lru_cache

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class UpcomingWindowMode(str, Enum):
    """How debt due days are matched against the upcoming window."""

    CALENDAR = "calendar"
    DAY_OF_MONTH = "day_of_month"


class AccountingSettings(BaseSettings):
    """
    Configurable parameters for installment and debt calculations.

    All settings can be overridden via environment variables with the
    ACCOUNTING_ prefix. Monetary values are in ringgit.
    """

    model_config = SettingsConfigDict(
        env_prefix="ACCOUNTING_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # === Due dates ===
    due_soon_days: int = Field(
        default=3,
        ge=0,
        description="A payment due within this many days is flagged as due soon",
    )

    # === Debt window ===
    upcoming_window_days: int = Field(
        default=15,
        ge=0,
        le=31,
        description="Days ahead to look for upcoming debt payments",
    )
    upcoming_window_mode: UpcomingWindowMode = Field(
        default=UpcomingWindowMode.CALENDAR,
        description="calendar: next real due date; day_of_month: compare day numbers only",
    )

    # === Schedules ===
    schedule_tolerance: Decimal = Field(
        default=Decimal("0.05"),
        ge=0,
        description="Allowed gap between a schedule's sum and the plan total",
    )

    # === Accounts ===
    utilization_warning_percent: Decimal = Field(
        default=Decimal("30"),
        ge=0,
        le=100,
        description="Credit utilization above this share of the limit is flagged as high",
    )

    # === Money formatting ===
    currency_symbol: str = Field(
        default="RM",
        description="Symbol placed before formatted amounts",
    )
    thousands_separator: str = Field(
        default=",",
        description="Digit group separator for formatted amounts",
    )


@lru_cache
def get_accounting_settings() -> AccountingSettings:
    """Get cached accounting settings instance."""
    return AccountingSettings()


accounting_settings = get_accounting_settings()
