"""Repository interfaces for data persistence.

Every method takes the owning ``user_id`` explicitly; implementations
must never return or modify rows that belong to another user.
"""

from abc import ABC, abstractmethod
from datetime import date
from typing import List, Optional
from uuid import UUID

from command_center.domain.entities import (
    Account,
    Debt,
    DebtPayment,
    Expense,
    FriendDebt,
    FriendDebtStatus,
    InstallmentPlan,
    Prayer,
    QuranLog,
)


class PlanRepository(ABC):
    """
    Abstract repository for BNPL plan persistence.

    Implementations may use PostgreSQL, in-memory storage, etc.
    """

    @abstractmethod
    async def save(self, plan: InstallmentPlan) -> InstallmentPlan:
        """
        Persist a new plan with its installment schedule.

        Args:
            plan: The plan to save

        Returns:
            The saved plan
        """
        ...

    @abstractmethod
    async def update(self, plan: InstallmentPlan) -> InstallmentPlan:
        """
        Write back paid flags, paid count and next due date of a plan.

        Args:
            plan: A plan previously loaded from this repository

        Returns:
            The updated plan
        """
        ...

    @abstractmethod
    async def get_by_id(self, user_id: str, plan_id: UUID) -> Optional[InstallmentPlan]:
        """
        Retrieve a plan by ID, scoped to its owner.

        Returns:
            The plan if found for this user, None otherwise
        """
        ...

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[InstallmentPlan]:
        """
        Retrieve all plans for a user.

        Returns:
            Plans ordered by next due date (undated last), newest first on ties
        """
        ...

    @abstractmethod
    async def delete(self, user_id: str, plan_id: UUID) -> bool:
        """
        Delete a plan and its schedule.

        Returns:
            True if a plan was deleted
        """
        ...


class DebtRepository(ABC):
    """Abstract repository for debts and their payment history."""

    @abstractmethod
    async def save(self, debt: Debt) -> Debt:
        ...

    @abstractmethod
    async def get_by_id(self, user_id: str, debt_id: UUID) -> Optional[Debt]:
        ...

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[Debt]:
        """Retrieve all debts for a user, ordered by due day."""
        ...

    @abstractmethod
    async def update_balance(self, debt: Debt) -> Debt:
        ...

    @abstractmethod
    async def add_payment(self, payment: DebtPayment) -> DebtPayment:
        ...

    @abstractmethod
    async def list_payments(self, user_id: str, debt_id: UUID) -> List[DebtPayment]:
        """Payments for a debt, newest first."""
        ...

    @abstractmethod
    async def delete(self, user_id: str, debt_id: UUID) -> bool:
        ...


class FriendDebtRepository(ABC):
    """Abstract repository for informal IOUs."""

    @abstractmethod
    async def save(self, friend_debt: FriendDebt) -> FriendDebt:
        ...

    @abstractmethod
    async def get_by_id(self, user_id: str, iou_id: UUID) -> Optional[FriendDebt]:
        ...

    @abstractmethod
    async def list_by_user(
        self,
        user_id: str,
        status: Optional[FriendDebtStatus] = None,
    ) -> List[FriendDebt]:
        """IOUs for a user, optionally filtered by status, newest first."""
        ...

    @abstractmethod
    async def update_status(self, friend_debt: FriendDebt) -> FriendDebt:
        ...


class IbadahRepository(ABC):
    """Abstract repository for prayers and Quran reading logs."""

    @abstractmethod
    async def upsert_prayer(self, prayer: Prayer) -> Prayer:
        """
        Insert a prayer or update the existing row for the same
        (user, date, prayer name).
        """
        ...

    @abstractmethod
    async def list_prayers(self, user_id: str, prayer_date: date) -> List[Prayer]:
        ...

    @abstractmethod
    async def add_quran_log(self, log: QuranLog) -> QuranLog:
        ...

    @abstractmethod
    async def list_quran_logs(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> List[QuranLog]:
        """Logs between two dates (inclusive), newest first."""
        ...


class ExpenseRepository(ABC):
    """Abstract repository for daily expenses."""

    @abstractmethod
    async def save(self, expense: Expense) -> Expense:
        ...

    @abstractmethod
    async def list_by_date_range(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> List[Expense]:
        """Expenses between two dates (inclusive), newest first."""
        ...

    @abstractmethod
    async def list_recent(self, user_id: str, limit: int = 20) -> List[Expense]:
        ...

    @abstractmethod
    async def delete(self, user_id: str, expense_id: UUID) -> bool:
        ...


class AccountRepository(ABC):
    """Abstract repository for bank, card and e-wallet accounts."""

    @abstractmethod
    async def save(self, account: Account) -> Account:
        ...

    @abstractmethod
    async def get_by_id(self, user_id: str, account_id: UUID) -> Optional[Account]:
        ...

    @abstractmethod
    async def list_by_user(self, user_id: str) -> List[Account]:
        """Accounts for a user, ordered by type then name."""
        ...

    @abstractmethod
    async def update(self, account: Account) -> Account:
        """Write back the balance, limit, billing day and notes of an account."""
        ...

    @abstractmethod
    async def delete(self, user_id: str, account_id: UUID) -> bool:
        ...
