"""BNPL service - installment plan use cases."""

from datetime import date, datetime
from typing import List, Optional
from uuid import UUID

import structlog

from command_center.application.dto import (
    CreatePlanRequest,
    PlanResponse,
    PlanSummaryResponse,
)
from command_center.core.metrics import record_installment_paid, record_plan_created
from command_center.domain.entities import Installment, InstallmentPlan, PlanStatus
from command_center.domain.exceptions import (
    InstallmentAlreadyPaidException,
    InstallmentNotFoundException,
    InvalidRequestException,
    PlanCompletedException,
    PlanHasScheduleException,
    PlanNotFoundException,
)
from command_center.domain.interfaces import AccountRepository, PlanRepository
from command_center.service.accounting import (
    AccountingSettings,
    accounting_settings,
    average_installment,
    build_even_schedule,
    format_money,
    next_due_after_payment,
    next_due_date,
    plan_metrics,
    quantize_money,
    sum_money,
)

logger = structlog.get_logger(__name__)


class BNPLService:
    """
    Application service for BNPL plan use cases.

    Every operation is scoped to the calling user; a plan owned by
    someone else is reported as not found.
    """

    def __init__(
        self,
        plan_repository: PlanRepository,
        account_repository: Optional[AccountRepository] = None,
        settings: AccountingSettings = accounting_settings,
    ):
        self._plan_repo = plan_repository
        self._account_repo = account_repository
        self._settings = settings

    async def create_plan(
        self,
        request: CreatePlanRequest,
        today: Optional[date] = None,
    ) -> PlanResponse:
        """
        Create a plan from an explicit schedule, a generated even
        schedule, or scalar counts.

        Raises:
            InvalidRequestException: If cross-field validation fails or
                ``account_id`` names no account of this user
        """
        errors = request.validate(self._settings.schedule_tolerance)
        if errors:
            raise InvalidRequestException("; ".join(errors))
        if request.account_id is not None:
            await self._check_account(request.user_id, request.account_id)

        today = today or date.today()
        log = logger.bind(user_id=request.user_id, merchant=request.merchant)

        plan = self._build_plan(request)
        plan.next_due_date = next_due_date(plan)

        await self._plan_repo.save(plan)

        log.info(
            "plan_created",
            plan_id=str(plan.id),
            has_schedule=plan.has_schedule,
            installments_total=plan.total_count,
            installments_paid=plan.paid_count,
        )
        record_plan_created(plan.has_schedule)

        return PlanResponse.from_entity(plan, today, self._settings)

    async def list_plans(self, user_id: str, today: Optional[date] = None) -> List[PlanResponse]:
        today = today or date.today()
        plans = await self._plan_repo.list_by_user(user_id)

        logger.info("user_plans_retrieved", user_id=user_id, count=len(plans))

        return [PlanResponse.from_entity(plan, today, self._settings) for plan in plans]

    async def get_plan(
        self,
        user_id: str,
        plan_id: UUID,
        today: Optional[date] = None,
    ) -> PlanResponse:
        """
        Retrieve a plan by ID.

        Raises:
            PlanNotFoundException: If the user has no such plan
        """
        plan = await self._load(user_id, plan_id)
        return PlanResponse.from_entity(plan, today or date.today(), self._settings)

    async def get_summary(self, user_id: str, today: Optional[date] = None) -> PlanSummaryResponse:
        """Counts by status plus remaining balance and monthly commitment."""
        today = today or date.today()
        plans = await self._plan_repo.list_by_user(user_id)
        metrics = [plan_metrics(plan, today, self._settings) for plan in plans]

        open_metrics = [m for m in metrics if m.status != PlanStatus.COMPLETED]
        total_remaining = sum_money(m.remaining_balance for m in metrics)
        monthly = sum_money(m.next_installment_amount for m in open_metrics)

        return PlanSummaryResponse(
            plan_count=len(metrics),
            active_count=sum(1 for m in metrics if m.status == PlanStatus.ACTIVE),
            overdue_count=sum(1 for m in metrics if m.status == PlanStatus.OVERDUE),
            completed_count=sum(1 for m in metrics if m.status == PlanStatus.COMPLETED),
            due_soon_count=sum(1 for m in open_metrics if m.is_due_soon),
            total_remaining=quantize_money(total_remaining),
            total_remaining_display=format_money(total_remaining, self._settings),
            monthly_commitment=quantize_money(monthly),
            monthly_commitment_display=format_money(monthly, self._settings),
        )

    async def pay_installment(
        self,
        user_id: str,
        plan_id: UUID,
        sequence: int,
        today: Optional[date] = None,
    ) -> PlanResponse:
        """
        Mark one scheduled installment as paid.

        Raises:
            PlanNotFoundException: If the user has no such plan
            InstallmentNotFoundException: If the plan has no such sequence
            InstallmentAlreadyPaidException: If it was paid already
        """
        plan = await self._load(user_id, plan_id)

        installment = plan.get_installment(sequence)
        if installment is None:
            raise InstallmentNotFoundException(str(plan_id), sequence)
        if installment.is_paid:
            raise InstallmentAlreadyPaidException(str(plan_id), sequence)

        installment.mark_paid()
        plan.next_due_date = next_due_after_payment(plan, installment)
        await self._plan_repo.update(plan)

        logger.info(
            "installment_paid",
            user_id=user_id,
            plan_id=str(plan_id),
            sequence=sequence,
            installments_paid=plan.paid_count,
            installments_total=plan.total_count,
        )
        record_installment_paid()

        return PlanResponse.from_entity(plan, today or date.today(), self._settings)

    async def record_payment(
        self,
        user_id: str,
        plan_id: UUID,
        today: Optional[date] = None,
    ) -> PlanResponse:
        """
        Record one payment on a plan tracked without a schedule.

        The paid count goes up by one and the next due date moves a
        calendar month ahead, or is cleared once the plan is paid off.

        Raises:
            PlanHasScheduleException: If the plan tracks a schedule
            PlanCompletedException: If nothing is left to pay
        """
        plan = await self._load(user_id, plan_id)

        if plan.has_schedule:
            raise PlanHasScheduleException(str(plan_id))
        if plan.installments_paid >= plan.installments_total:
            raise PlanCompletedException(str(plan_id))

        plan.installments_paid += 1
        plan.next_due_date = next_due_after_payment(plan)

        await self._plan_repo.update(plan)

        logger.info(
            "installment_paid",
            user_id=user_id,
            plan_id=str(plan_id),
            installments_paid=plan.installments_paid,
            installments_total=plan.installments_total,
        )
        record_installment_paid()

        return PlanResponse.from_entity(plan, today or date.today(), self._settings)

    async def delete_plan(self, user_id: str, plan_id: UUID) -> None:
        deleted = await self._plan_repo.delete(user_id, plan_id)
        if not deleted:
            raise PlanNotFoundException(str(plan_id))

        logger.info("plan_deleted", user_id=user_id, plan_id=str(plan_id))

    async def _load(self, user_id: str, plan_id: UUID) -> InstallmentPlan:
        plan = await self._plan_repo.get_by_id(user_id, plan_id)

        if plan is None:
            logger.warning("plan_not_found", user_id=user_id, plan_id=str(plan_id))
            raise PlanNotFoundException(str(plan_id))

        return plan

    async def _check_account(self, user_id: str, account_id: str) -> None:
        if self._account_repo is None:
            return
        try:
            parsed = UUID(account_id)
        except ValueError:
            raise InvalidRequestException(f"Unknown account: {account_id}")

        if await self._account_repo.get_by_id(user_id, parsed) is None:
            logger.warning("plan_account_not_found", user_id=user_id, account_id=account_id)
            raise InvalidRequestException(f"Unknown account: {account_id}")

    def _build_plan(self, request: CreatePlanRequest) -> InstallmentPlan:
        now = datetime.utcnow()

        if request.schedule:
            installments = []
            for item in sorted(request.schedule, key=lambda i: i.sequence):
                installment = Installment(
                    sequence=item.sequence,
                    amount=quantize_money(item.amount),
                    due_date=item.due_date,
                )
                if item.is_paid:
                    installment.mark_paid(now)
                installments.append(installment)
            count = len(installments)
        else:
            count = request.installments_total
            installments = []
            if request.generate_schedule:
                installments = build_even_schedule(
                    request.total_amount,
                    count,
                    first_due_date=request.next_due_date,
                    paid_count=request.installments_paid,
                    paid_at=now,
                )

        installment_amount = request.installment_amount
        if installment_amount is None:
            installment_amount = average_installment(request.total_amount, count)

        plan = InstallmentPlan(
            user_id=request.user_id,
            merchant=request.merchant,
            item_name=request.item_name,
            account_id=request.account_id,
            notes=request.notes,
            total_amount=quantize_money(request.total_amount),
            installment_amount=quantize_money(installment_amount),
            installments_total=count,
            installments_paid=request.installments_paid,
            next_due_date=request.next_due_date,
            due_day=request.next_due_date.day if request.next_due_date else None,
            installments=installments,
        )
        # The schedule decides the paid count when there is one
        plan.installments_paid = plan.paid_count

        return plan
