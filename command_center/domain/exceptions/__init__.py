"""Domain Exceptions - Business rule violations and domain errors."""

from .base import DomainException, InvalidRequestException, MissingUserException
from .account import AccountNotFoundException
from .bnpl import (
    InstallmentAlreadyPaidException,
    InstallmentNotFoundException,
    PlanCompletedException,
    PlanHasScheduleException,
    PlanNotFoundException,
)
from .debt import (
    DebtNotFoundException,
    FriendDebtNotFoundException,
    FriendDebtNotPendingException,
)
from .expense import ExpenseNotFoundException

__all__ = [
    "DomainException",
    "InvalidRequestException",
    "MissingUserException",
    "AccountNotFoundException",
    "InstallmentAlreadyPaidException",
    "InstallmentNotFoundException",
    "PlanCompletedException",
    "PlanHasScheduleException",
    "PlanNotFoundException",
    "DebtNotFoundException",
    "FriendDebtNotFoundException",
    "FriendDebtNotPendingException",
    "ExpenseNotFoundException",
]
