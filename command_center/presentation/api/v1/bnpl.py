"""BNPL plan API endpoints."""

from typing import Annotated, List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response

from command_center.application.dto import CreatePlanRequest, ScheduleItem
from command_center.application.services import BNPLService
from command_center.core.dependencies import AsOf, CurrentUser, get_bnpl_service
from command_center.presentation.schemas import (
    CreatePlanSchema,
    ErrorResponseSchema,
    PlanResponseSchema,
    PlanSummarySchema,
)

bnpl_router = APIRouter(
    prefix="/bnpl",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing user identifier"},
    },
)

PlanId = Annotated[UUID, Path(description="UUID of the plan")]
Service = Annotated[BNPLService, Depends(get_bnpl_service)]


@bnpl_router.post(
    "",
    response_model=PlanResponseSchema,
    status_code=201,
    summary="Create BNPL Plan",
    description="""
    Create a plan from an explicit schedule, an evenly generated monthly
    schedule, or scalar counts only.
    """,
    responses={
        400: {"model": ErrorResponseSchema, "description": "Schedule does not match the plan"},
    },
)
async def create_plan(
    request: CreatePlanSchema,
    user_id: CurrentUser,
    as_of: AsOf,
    bnpl_service: Service,
) -> PlanResponseSchema:
    dto = CreatePlanRequest(
        user_id=user_id,
        merchant=request.merchant,
        item_name=request.item_name,
        total_amount=request.total_amount,
        installments_total=request.installments_total,
        installment_amount=request.installment_amount,
        installments_paid=request.installments_paid,
        account_id=request.account_id,
        next_due_date=request.next_due_date,
        notes=request.notes,
        generate_schedule=request.generate_schedule,
        schedule=[
            ScheduleItem(
                sequence=item.sequence,
                amount=item.amount,
                due_date=item.due_date,
                is_paid=item.is_paid,
            )
            for item in request.schedule
        ],
    )

    response = await bnpl_service.create_plan(dto, today=as_of)
    return PlanResponseSchema.model_validate(response)


@bnpl_router.get(
    "",
    response_model=List[PlanResponseSchema],
    summary="List BNPL Plans",
    description="All plans for the user, soonest due first.",
)
async def list_plans(user_id: CurrentUser, as_of: AsOf, bnpl_service: Service) -> List[PlanResponseSchema]:
    plans = await bnpl_service.list_plans(user_id, today=as_of)
    return [PlanResponseSchema.model_validate(plan) for plan in plans]


@bnpl_router.get(
    "/summary",
    response_model=PlanSummarySchema,
    summary="BNPL Summary",
)
async def get_summary(user_id: CurrentUser, as_of: AsOf, bnpl_service: Service) -> PlanSummarySchema:
    summary = await bnpl_service.get_summary(user_id, today=as_of)
    return PlanSummarySchema.model_validate(summary)


@bnpl_router.get(
    "/{plan_id}",
    response_model=PlanResponseSchema,
    summary="Get BNPL Plan",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Plan not found"},
    },
)
async def get_plan(
    plan_id: PlanId,
    user_id: CurrentUser,
    as_of: AsOf,
    bnpl_service: Service,
) -> PlanResponseSchema:
    response = await bnpl_service.get_plan(user_id, plan_id, today=as_of)
    return PlanResponseSchema.model_validate(response)


@bnpl_router.post(
    "/{plan_id}/installments/{sequence}/pay",
    response_model=PlanResponseSchema,
    summary="Pay Installment",
    description="Mark one installment of a scheduled plan as paid.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Plan or installment not found"},
        409: {"model": ErrorResponseSchema, "description": "Installment already paid"},
    },
)
async def pay_installment(
    plan_id: PlanId,
    sequence: Annotated[int, Path(ge=1, description="Installment sequence number")],
    user_id: CurrentUser,
    as_of: AsOf,
    bnpl_service: Service,
) -> PlanResponseSchema:
    response = await bnpl_service.pay_installment(user_id, plan_id, sequence, today=as_of)
    return PlanResponseSchema.model_validate(response)


@bnpl_router.post(
    "/{plan_id}/pay",
    response_model=PlanResponseSchema,
    summary="Record Plan Payment",
    description="Record one payment on a plan tracked without a schedule.",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Plan not found"},
        409: {"model": ErrorResponseSchema, "description": "Plan has a schedule or is fully paid"},
    },
)
async def record_payment(
    plan_id: PlanId,
    user_id: CurrentUser,
    as_of: AsOf,
    bnpl_service: Service,
) -> PlanResponseSchema:
    response = await bnpl_service.record_payment(user_id, plan_id, today=as_of)
    return PlanResponseSchema.model_validate(response)


@bnpl_router.delete(
    "/{plan_id}",
    status_code=204,
    summary="Delete BNPL Plan",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Plan not found"},
    },
)
async def delete_plan(plan_id: PlanId, user_id: CurrentUser, bnpl_service: Service) -> Response:
    await bnpl_service.delete_plan(user_id, plan_id)
    return Response(status_code=204)
