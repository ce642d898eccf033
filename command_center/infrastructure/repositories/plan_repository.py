"""PostgreSQL repository implementation for BNPL plans."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from command_center.domain.entities import Installment, InstallmentPlan
from command_center.domain.interfaces import PlanRepository
from command_center.infrastructure.database.models import InstallmentModel, PlanModel


class PostgresPlanRepository(PlanRepository):
    """PostgreSQL-backed plan repository."""

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, plan: InstallmentPlan) -> InstallmentPlan:
        model = PlanModel(
            id=str(plan.id),
            user_id=plan.user_id,
            account_id=plan.account_id,
            merchant=plan.merchant,
            item_name=plan.item_name,
            total_amount=plan.total_amount,
            installment_amount=plan.installment_amount,
            installments_total=plan.total_count,
            installments_paid=plan.paid_count,
            next_due_date=plan.next_due_date,
            due_day=plan.due_day,
            notes=plan.notes,
            created_at=plan.created_at,
            updated_at=plan.updated_at,
        )

        for installment in plan.installments:
            model.installments.append(
                InstallmentModel(
                    id=str(installment.id),
                    plan_id=str(plan.id),
                    sequence=installment.sequence,
                    amount=installment.amount,
                    due_date=installment.due_date,
                    is_paid=installment.is_paid,
                    paid_at=installment.paid_at,
                )
            )

        self._session.add(model)
        await self._session.flush()

        return plan

    async def update(self, plan: InstallmentPlan) -> InstallmentPlan:
        model = await self._get_model(plan.user_id, plan.id)

        if model is None:
            raise ValueError(f"Plan {plan.id} not found")

        plan.updated_at = datetime.utcnow()
        model.installments_paid = plan.paid_count
        model.next_due_date = plan.next_due_date
        model.updated_at = plan.updated_at

        by_id = {str(inst.id): inst for inst in plan.installments}
        for inst_model in model.installments:
            installment = by_id.get(str(UUID(str(inst_model.id))))
            if installment is None:
                continue
            inst_model.is_paid = installment.is_paid
            inst_model.paid_at = installment.paid_at

        await self._session.flush()

        return plan

    async def get_by_id(self, user_id: str, plan_id: UUID) -> Optional[InstallmentPlan]:
        model = await self._get_model(user_id, plan_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def list_by_user(self, user_id: str) -> List[InstallmentPlan]:
        stmt = (
            select(PlanModel)
            .options(selectinload(PlanModel.installments))
            .where(PlanModel.user_id == user_id)
            .order_by(
                PlanModel.next_due_date.asc().nulls_last(),
                PlanModel.created_at.desc(),
            )
        )
        result = await self._session.execute(stmt)
        models = result.scalars().all()

        return [self._to_entity(model) for model in models]

    async def delete(self, user_id: str, plan_id: UUID) -> bool:
        model = await self._get_model(user_id, plan_id)

        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        return True

    async def _get_model(self, user_id: str, plan_id: UUID) -> Optional[PlanModel]:
        stmt = (
            select(PlanModel)
            .options(selectinload(PlanModel.installments))
            .where(PlanModel.id == str(plan_id))
            .where(PlanModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: PlanModel) -> InstallmentPlan:
        installments = [
            Installment(
                id=UUID(str(inst.id)),
                sequence=inst.sequence,
                amount=inst.amount,
                due_date=inst.due_date,
                is_paid=inst.is_paid,
                paid_at=inst.paid_at,
            )
            for inst in model.installments
        ]

        return InstallmentPlan(
            id=UUID(str(model.id)),
            user_id=model.user_id,
            account_id=model.account_id,
            merchant=model.merchant,
            item_name=model.item_name,
            total_amount=model.total_amount,
            installment_amount=model.installment_amount,
            installments_total=model.installments_total,
            installments_paid=model.installments_paid,
            next_due_date=model.next_due_date,
            due_day=model.due_day,
            notes=model.notes,
            installments=installments,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
