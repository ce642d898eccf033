"""Friend IOU API endpoints."""

from typing import Annotated, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query

from command_center.application.dto import CreateFriendDebtRequest
from command_center.application.services import FriendDebtService
from command_center.core.dependencies import AsOf, CurrentUser, get_friend_debt_service
from command_center.domain.entities import FriendDebtStatus
from command_center.presentation.schemas import (
    CreateFriendDebtSchema,
    ErrorResponseSchema,
    FriendDebtResponseSchema,
    FriendDebtSummarySchema,
)

iou_router = APIRouter(
    prefix="/ious",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing user identifier"},
    },
)

IouId = Annotated[UUID, Path(description="UUID of the IOU")]
Service = Annotated[FriendDebtService, Depends(get_friend_debt_service)]

SETTLE_RESPONSES = {
    404: {"model": ErrorResponseSchema, "description": "IOU not found"},
    409: {"model": ErrorResponseSchema, "description": "IOU is no longer pending"},
}


@iou_router.post("", response_model=FriendDebtResponseSchema, status_code=201, summary="Create IOU")
async def create_iou(
    request: CreateFriendDebtSchema,
    user_id: CurrentUser,
    as_of: AsOf,
    iou_service: Service,
) -> FriendDebtResponseSchema:
    dto = CreateFriendDebtRequest(
        user_id=user_id,
        friend_name=request.friend_name,
        amount=request.amount,
        direction=request.direction,
        description=request.description,
        due_date=request.due_date,
    )
    response = await iou_service.create_iou(dto, today=as_of)
    return FriendDebtResponseSchema.model_validate(response)


@iou_router.get("", response_model=List[FriendDebtResponseSchema], summary="List IOUs")
async def list_ious(
    user_id: CurrentUser,
    as_of: AsOf,
    iou_service: Service,
    status: Annotated[Optional[FriendDebtStatus], Query(description="Filter by status")] = None,
) -> List[FriendDebtResponseSchema]:
    ious = await iou_service.list_ious(user_id, status=status, today=as_of)
    return [FriendDebtResponseSchema.model_validate(iou) for iou in ious]


@iou_router.get("/summary", response_model=FriendDebtSummarySchema, summary="IOU Summary")
async def get_summary(user_id: CurrentUser, as_of: AsOf, iou_service: Service) -> FriendDebtSummarySchema:
    summary = await iou_service.get_summary(user_id, today=as_of)
    return FriendDebtSummarySchema.model_validate(summary)


@iou_router.post(
    "/{iou_id}/paid",
    response_model=FriendDebtResponseSchema,
    summary="Mark IOU Paid",
    responses=SETTLE_RESPONSES,
)
async def mark_paid(iou_id: IouId, user_id: CurrentUser, as_of: AsOf, iou_service: Service) -> FriendDebtResponseSchema:
    response = await iou_service.mark_paid(user_id, iou_id, today=as_of)
    return FriendDebtResponseSchema.model_validate(response)


@iou_router.post(
    "/{iou_id}/cancel",
    response_model=FriendDebtResponseSchema,
    summary="Cancel IOU",
    responses=SETTLE_RESPONSES,
)
async def cancel(iou_id: IouId, user_id: CurrentUser, as_of: AsOf, iou_service: Service) -> FriendDebtResponseSchema:
    response = await iou_service.cancel(user_id, iou_id, today=as_of)
    return FriendDebtResponseSchema.model_validate(response)
