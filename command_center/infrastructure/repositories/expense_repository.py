"""PostgreSQL implementation of ExpenseRepository."""

from datetime import date
from typing import List
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from command_center.domain.entities import Expense, ExpenseCategory, TransactionType
from command_center.domain.interfaces import ExpenseRepository
from command_center.infrastructure.database.models import ExpenseModel


class PostgresExpenseRepository(ExpenseRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, expense: Expense) -> Expense:
        model = ExpenseModel(
            id=str(expense.id),
            user_id=expense.user_id,
            amount=expense.amount,
            category=expense.category.value,
            description=expense.description,
            expense_date=expense.expense_date,
            transaction_type=expense.transaction_type.value,
            created_at=expense.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        return expense

    async def list_by_date_range(
        self,
        user_id: str,
        start_date: date,
        end_date: date,
    ) -> List[Expense]:
        stmt = (
            select(ExpenseModel)
            .where(ExpenseModel.user_id == user_id)
            .where(ExpenseModel.expense_date >= start_date)
            .where(ExpenseModel.expense_date <= end_date)
            .order_by(ExpenseModel.expense_date.desc(), ExpenseModel.created_at.desc())
        )
        result = await self._session.execute(stmt)

        return [self._to_entity(model) for model in result.scalars().all()]

    async def list_recent(self, user_id: str, limit: int = 20) -> List[Expense]:
        stmt = (
            select(ExpenseModel)
            .where(ExpenseModel.user_id == user_id)
            .order_by(ExpenseModel.expense_date.desc(), ExpenseModel.created_at.desc())
            .limit(limit)
        )
        result = await self._session.execute(stmt)

        return [self._to_entity(model) for model in result.scalars().all()]

    async def delete(self, user_id: str, expense_id: UUID) -> bool:
        stmt = (
            select(ExpenseModel)
            .where(ExpenseModel.id == str(expense_id))
            .where(ExpenseModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        return True

    def _to_entity(self, model: ExpenseModel) -> Expense:
        return Expense(
            id=UUID(str(model.id)),
            user_id=model.user_id,
            amount=model.amount,
            category=ExpenseCategory(model.category),
            description=model.description,
            expense_date=model.expense_date,
            transaction_type=TransactionType(model.transaction_type),
            created_at=model.created_at,
        )
