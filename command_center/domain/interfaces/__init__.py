"""
Domain Interfaces (Ports)
"""

from .repositories import (
    AccountRepository,
    DebtRepository,
    ExpenseRepository,
    FriendDebtRepository,
    IbadahRepository,
    PlanRepository,
)

__all__ = [
    "AccountRepository",
    "DebtRepository",
    "ExpenseRepository",
    "FriendDebtRepository",
    "IbadahRepository",
    "PlanRepository",
]
