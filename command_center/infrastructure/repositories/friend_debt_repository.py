"""PostgreSQL implementation of FriendDebtRepository."""

from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from command_center.domain.entities import (
    FriendDebt,
    FriendDebtDirection,
    FriendDebtStatus,
)
from command_center.domain.interfaces import FriendDebtRepository
from command_center.infrastructure.database.models import FriendDebtModel


class PostgresFriendDebtRepository(FriendDebtRepository):
    """PostgreSQL-backed IOU repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, friend_debt: FriendDebt) -> FriendDebt:
        model = FriendDebtModel(
            id=str(friend_debt.id),
            user_id=friend_debt.user_id,
            friend_name=friend_debt.friend_name,
            amount=friend_debt.amount,
            debt_type=friend_debt.direction.value,
            description=friend_debt.description,
            due_date=friend_debt.due_date,
            status=friend_debt.status.value,
            created_at=friend_debt.created_at,
        )

        self._session.add(model)
        await self._session.flush()

        return friend_debt

    async def get_by_id(self, user_id: str, iou_id: UUID) -> Optional[FriendDebt]:
        model = await self._get_model(user_id, iou_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def list_by_user(
        self,
        user_id: str,
        status: Optional[FriendDebtStatus] = None,
    ) -> List[FriendDebt]:
        stmt = select(FriendDebtModel).where(FriendDebtModel.user_id == user_id)

        if status is not None:
            stmt = stmt.where(FriendDebtModel.status == status.value)

        stmt = stmt.order_by(FriendDebtModel.created_at.desc())
        result = await self._session.execute(stmt)

        return [self._to_entity(model) for model in result.scalars().all()]

    async def update_status(self, friend_debt: FriendDebt) -> FriendDebt:
        model = await self._get_model(friend_debt.user_id, friend_debt.id)

        if model is None:
            raise ValueError(f"IOU {friend_debt.id} not found")

        model.status = friend_debt.status.value
        await self._session.flush()

        return friend_debt

    async def _get_model(self, user_id: str, iou_id: UUID) -> Optional[FriendDebtModel]:
        stmt = (
            select(FriendDebtModel)
            .where(FriendDebtModel.id == str(iou_id))
            .where(FriendDebtModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: FriendDebtModel) -> FriendDebt:
        return FriendDebt(
            id=UUID(str(model.id)),
            user_id=model.user_id,
            friend_name=model.friend_name,
            amount=model.amount,
            direction=FriendDebtDirection(model.debt_type),
            description=model.description,
            due_date=model.due_date,
            status=FriendDebtStatus(model.status),
            created_at=model.created_at,
        )
