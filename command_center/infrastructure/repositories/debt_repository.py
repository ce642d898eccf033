"""PostgreSQL implementation of DebtRepository."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from command_center.domain.entities import Debt, DebtCategory, DebtPayment
from command_center.domain.interfaces import DebtRepository
from command_center.infrastructure.database.models import DebtModel, DebtPaymentModel


class PostgresDebtRepository(DebtRepository):
    """
    PostgreSQL implementation of the Debt repository.

    Payments are only reachable through a debt owned by the caller.
    """

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, debt: Debt) -> Debt:
        """Persist a debt to the database."""
        model = DebtModel(
            id=str(debt.id),
            user_id=debt.user_id,
            name=debt.name,
            total_amount=debt.total_amount,
            current_balance=debt.current_balance,
            interest_rate=debt.interest_rate,
            minimum_payment=debt.minimum_payment,
            due_day=debt.due_day,
            category=debt.category.value,
            created_at=debt.created_at,
            updated_at=debt.updated_at,
        )

        self._session.add(model)
        await self._session.flush()

        return debt

    async def get_by_id(self, user_id: str, debt_id: UUID) -> Optional[Debt]:
        model = await self._get_model(user_id, debt_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def list_by_user(self, user_id: str) -> List[Debt]:
        stmt = (
            select(DebtModel)
            .where(DebtModel.user_id == user_id)
            .order_by(DebtModel.due_day.asc(), DebtModel.created_at.asc())
        )
        result = await self._session.execute(stmt)

        return [self._to_entity(model) for model in result.scalars().all()]

    async def update_balance(self, debt: Debt) -> Debt:
        """Write back the current balance of a debt."""
        model = await self._get_model(debt.user_id, debt.id)

        if model is None:
            raise ValueError(f"Debt {debt.id} not found")

        debt.updated_at = datetime.utcnow()
        model.current_balance = debt.current_balance
        model.updated_at = debt.updated_at

        await self._session.flush()

        return debt

    async def add_payment(self, payment: DebtPayment) -> DebtPayment:
        model = DebtPaymentModel(
            id=str(payment.id),
            debt_id=str(payment.debt_id),
            amount=payment.amount,
            payment_date=payment.payment_date,
            notes=payment.notes,
            created_at=payment.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        return payment

    async def list_payments(self, user_id: str, debt_id: UUID) -> List[DebtPayment]:
        stmt = (
            select(DebtPaymentModel)
            .join(DebtModel, DebtModel.id == DebtPaymentModel.debt_id)
            .where(DebtModel.user_id == user_id)
            .where(DebtPaymentModel.debt_id == str(debt_id))
            .order_by(
                DebtPaymentModel.payment_date.desc(),
                DebtPaymentModel.created_at.desc(),
            )
        )
        result = await self._session.execute(stmt)

        return [
            DebtPayment(
                id=UUID(str(model.id)),
                debt_id=UUID(str(model.debt_id)),
                amount=model.amount,
                payment_date=model.payment_date,
                notes=model.notes,
                created_at=model.created_at,
            )
            for model in result.scalars().all()
        ]

    async def delete(self, user_id: str, debt_id: UUID) -> bool:
        stmt = (
            select(DebtModel)
            .options(selectinload(DebtModel.payments))
            .where(DebtModel.id == str(debt_id))
            .where(DebtModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        return True

    async def _get_model(self, user_id: str, debt_id: UUID) -> Optional[DebtModel]:
        stmt = (
            select(DebtModel)
            .where(DebtModel.id == str(debt_id))
            .where(DebtModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: DebtModel) -> Debt:
        """Convert database model to domain entity."""
        return Debt(
            id=UUID(str(model.id)),
            user_id=model.user_id,
            name=model.name,
            total_amount=model.total_amount,
            current_balance=model.current_balance,
            interest_rate=model.interest_rate,
            minimum_payment=model.minimum_payment,
            due_day=model.due_day,
            category=DebtCategory(model.category),
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
