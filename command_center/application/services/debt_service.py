"""Debt service - debt tracking and payment use cases."""

from datetime import date
from typing import List, Optional
from uuid import UUID

import structlog

from command_center.application.dto import (
    CreateDebtRequest,
    DebtPaymentResponse,
    DebtResponse,
    DebtSummaryResponse,
    PaymentRecordedResponse,
    RecordPaymentRequest,
)
from command_center.core.metrics import record_debt_payment
from command_center.domain.entities import Debt, DebtPayment
from command_center.domain.exceptions import DebtNotFoundException
from command_center.domain.interfaces import DebtRepository
from command_center.service.accounting import (
    AccountingSettings,
    accounting_settings,
    apply_payment,
    quantize_money,
    summarize_debts,
)

logger = structlog.get_logger(__name__)


class DebtService:
    """
    Application service for debt use cases.

    Balances only move through recorded payments, and never drop below
    zero.
    """

    def __init__(
        self,
        debt_repository: DebtRepository,
        settings: AccountingSettings = accounting_settings,
    ):
        self._debt_repo = debt_repository
        self._settings = settings

    async def create_debt(
        self,
        request: CreateDebtRequest,
        today: Optional[date] = None,
    ) -> DebtResponse:
        balance = request.current_balance
        if balance is None:
            balance = request.total_amount

        debt = Debt(
            user_id=request.user_id,
            name=request.name,
            total_amount=quantize_money(request.total_amount),
            current_balance=quantize_money(balance),
            due_day=request.due_day,
            category=request.category,
            interest_rate=request.interest_rate,
            minimum_payment=quantize_money(request.minimum_payment),
        )
        await self._debt_repo.save(debt)

        logger.info(
            "debt_created",
            user_id=request.user_id,
            debt_id=str(debt.id),
            category=debt.category.value,
            due_day=debt.due_day,
        )

        return DebtResponse.from_entity(debt, today or date.today(), self._settings)

    async def list_debts(self, user_id: str, today: Optional[date] = None) -> List[DebtResponse]:
        today = today or date.today()
        debts = await self._debt_repo.list_by_user(user_id)

        logger.info("user_debts_retrieved", user_id=user_id, count=len(debts))

        return [DebtResponse.from_entity(debt, today, self._settings) for debt in debts]

    async def get_debt(
        self,
        user_id: str,
        debt_id: UUID,
        today: Optional[date] = None,
    ) -> DebtResponse:
        debt = await self._load(user_id, debt_id)
        return DebtResponse.from_entity(debt, today or date.today(), self._settings)

    async def get_summary(
        self,
        user_id: str,
        today: Optional[date] = None,
        window_days: Optional[int] = None,
    ) -> DebtSummaryResponse:
        """
        Totals, percentage paid and upcoming minimum payments.

        Args:
            user_id: The user's identifier
            today: Reference date for the upcoming window
            window_days: Window length; defaults to the configured window
        """
        today = today or date.today()
        window = self._settings.upcoming_window_days if window_days is None else window_days

        debts = await self._debt_repo.list_by_user(user_id)
        summary = summarize_debts(debts, today, window, self._settings)

        logger.info(
            "debt_summary_computed",
            user_id=user_id,
            debt_count=summary.debt_count,
            upcoming_count=len(summary.upcoming),
            window_mode=self._settings.upcoming_window_mode.value,
        )

        return DebtSummaryResponse.from_summary(summary, today, window, self._settings)

    async def record_payment(
        self,
        debt_id: UUID,
        request: RecordPaymentRequest,
        today: Optional[date] = None,
    ) -> PaymentRecordedResponse:
        """
        Record a payment and reduce the debt's balance.

        Raises:
            DebtNotFoundException: If the user has no such debt
        """
        today = today or date.today()
        debt = await self._load(request.user_id, debt_id)

        payment = DebtPayment(
            debt_id=debt.id,
            amount=quantize_money(request.amount),
            payment_date=request.payment_date or today,
            notes=request.notes,
        )
        await self._debt_repo.add_payment(payment)

        previous_balance = debt.current_balance
        debt.current_balance = apply_payment(debt.current_balance, payment.amount)
        await self._debt_repo.update_balance(debt)

        logger.info(
            "debt_payment_recorded",
            user_id=request.user_id,
            debt_id=str(debt.id),
            amount=str(payment.amount),
            previous_balance=str(previous_balance),
            new_balance=str(debt.current_balance),
        )
        record_debt_payment(debt.category.value, payment.amount)

        return PaymentRecordedResponse(
            payment=DebtPaymentResponse.from_entity(payment),
            debt=DebtResponse.from_entity(debt, today, self._settings),
        )

    async def list_payments(self, user_id: str, debt_id: UUID) -> List[DebtPaymentResponse]:
        await self._load(user_id, debt_id)
        payments = await self._debt_repo.list_payments(user_id, debt_id)
        return [DebtPaymentResponse.from_entity(payment) for payment in payments]

    async def delete_debt(self, user_id: str, debt_id: UUID) -> None:
        deleted = await self._debt_repo.delete(user_id, debt_id)
        if not deleted:
            raise DebtNotFoundException(str(debt_id))

        logger.info("debt_deleted", user_id=user_id, debt_id=str(debt_id))

    async def _load(self, user_id: str, debt_id: UUID) -> Debt:
        debt = await self._debt_repo.get_by_id(user_id, debt_id)

        if debt is None:
            logger.warning("debt_not_found", user_id=user_id, debt_id=str(debt_id))
            raise DebtNotFoundException(str(debt_id))

        return debt
