"""IOU service - money lent to and borrowed from friends."""

from datetime import date
from typing import List, Optional
from uuid import UUID

import structlog

from command_center.application.dto import (
    CreateFriendDebtRequest,
    FriendDebtResponse,
    FriendDebtSummaryResponse,
)
from command_center.domain.entities import (
    FriendDebt,
    FriendDebtDirection,
    FriendDebtStatus,
)
from command_center.domain.exceptions import (
    FriendDebtNotFoundException,
    FriendDebtNotPendingException,
)
from command_center.domain.interfaces import FriendDebtRepository
from command_center.service.accounting import (
    AccountingSettings,
    accounting_settings,
    format_money,
    quantize_money,
    sum_money,
)

logger = structlog.get_logger(__name__)


class FriendDebtService:
    """Application service for informal IOUs between the user and friends."""

    def __init__(
        self,
        friend_debt_repository: FriendDebtRepository,
        settings: AccountingSettings = accounting_settings,
    ):
        self._iou_repo = friend_debt_repository
        self._settings = settings

    async def create_iou(
        self,
        request: CreateFriendDebtRequest,
        today: Optional[date] = None,
    ) -> FriendDebtResponse:
        iou = FriendDebt(
            user_id=request.user_id,
            friend_name=request.friend_name,
            amount=quantize_money(request.amount),
            direction=request.direction,
            description=request.description,
            due_date=request.due_date,
        )
        await self._iou_repo.save(iou)

        logger.info(
            "iou_created",
            user_id=request.user_id,
            iou_id=str(iou.id),
            direction=iou.direction.value,
        )

        return FriendDebtResponse.from_entity(iou, today or date.today())

    async def list_ious(
        self,
        user_id: str,
        status: Optional[FriendDebtStatus] = None,
        today: Optional[date] = None,
    ) -> List[FriendDebtResponse]:
        today = today or date.today()
        ious = await self._iou_repo.list_by_user(user_id, status)
        return [FriendDebtResponse.from_entity(iou, today) for iou in ious]

    async def get_summary(
        self,
        user_id: str,
        today: Optional[date] = None,
    ) -> FriendDebtSummaryResponse:
        """Totals over pending IOUs only."""
        today = today or date.today()
        pending = await self._iou_repo.list_by_user(user_id, FriendDebtStatus.PENDING)

        they_owe_me = sum_money(
            iou.amount for iou in pending if iou.direction == FriendDebtDirection.THEY_OWE_ME
        )
        i_owe_them = sum_money(
            iou.amount for iou in pending if iou.direction == FriendDebtDirection.I_OWE_THEM
        )
        net = they_owe_me - i_owe_them
        overdue = [
            iou for iou in pending if FriendDebtResponse.from_entity(iou, today).is_overdue
        ]

        return FriendDebtSummaryResponse(
            they_owe_me=quantize_money(they_owe_me),
            i_owe_them=quantize_money(i_owe_them),
            net_position=quantize_money(net),
            net_display=format_money(net, self._settings),
            pending_count=len(pending),
            overdue_count=len(overdue),
        )

    async def mark_paid(
        self,
        user_id: str,
        iou_id: UUID,
        today: Optional[date] = None,
    ) -> FriendDebtResponse:
        return await self._settle(user_id, iou_id, FriendDebtStatus.PAID, today)

    async def cancel(
        self,
        user_id: str,
        iou_id: UUID,
        today: Optional[date] = None,
    ) -> FriendDebtResponse:
        return await self._settle(user_id, iou_id, FriendDebtStatus.CANCELLED, today)

    async def _settle(
        self,
        user_id: str,
        iou_id: UUID,
        status: FriendDebtStatus,
        today: Optional[date],
    ) -> FriendDebtResponse:
        """
        Move a pending IOU to a final status.

        Raises:
            FriendDebtNotFoundException: If the user has no such IOU
            FriendDebtNotPendingException: If it is already paid or cancelled
        """
        iou = await self._iou_repo.get_by_id(user_id, iou_id)

        if iou is None:
            raise FriendDebtNotFoundException(str(iou_id))
        if not iou.is_pending:
            raise FriendDebtNotPendingException(str(iou_id), iou.status.value)

        iou.status = status
        await self._iou_repo.update_status(iou)

        logger.info(
            "iou_settled",
            user_id=user_id,
            iou_id=str(iou_id),
            status=status.value,
        )

        return FriendDebtResponse.from_entity(iou, today or date.today())
