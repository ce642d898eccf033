"""Debt API endpoints."""

from typing import Annotated, List, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Response

from command_center.application.dto import CreateDebtRequest, RecordPaymentRequest
from command_center.application.services import DebtService
from command_center.core.dependencies import AsOf, CurrentUser, get_debt_service
from command_center.presentation.schemas import (
    CreateDebtSchema,
    DebtPaymentSchema,
    DebtResponseSchema,
    DebtSummarySchema,
    ErrorResponseSchema,
    PaymentRecordedSchema,
    RecordDebtPaymentSchema,
)

debt_router = APIRouter(
    prefix="/debts",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing user identifier"},
    },
)

DebtId = Annotated[UUID, Path(description="UUID of the debt")]
Service = Annotated[DebtService, Depends(get_debt_service)]


@debt_router.post(
    "",
    response_model=DebtResponseSchema,
    status_code=201,
    summary="Create Debt",
)
async def create_debt(
    request: CreateDebtSchema,
    user_id: CurrentUser,
    as_of: AsOf,
    debt_service: Service,
) -> DebtResponseSchema:
    dto = CreateDebtRequest(
        user_id=user_id,
        name=request.name,
        total_amount=request.total_amount,
        current_balance=request.current_balance,
        due_day=request.due_day,
        category=request.category,
        interest_rate=request.interest_rate,
        minimum_payment=request.minimum_payment,
    )
    response = await debt_service.create_debt(dto, today=as_of)
    return DebtResponseSchema.model_validate(response)


@debt_router.get(
    "",
    response_model=List[DebtResponseSchema],
    summary="List Debts",
)
async def list_debts(user_id: CurrentUser, as_of: AsOf, debt_service: Service) -> List[DebtResponseSchema]:
    debts = await debt_service.list_debts(user_id, today=as_of)
    return [DebtResponseSchema.model_validate(debt) for debt in debts]


@debt_router.get(
    "/summary",
    response_model=DebtSummarySchema,
    summary="Debt Summary",
    description="""
    Total outstanding debt, percentage paid off, and the minimum payments
    due within the upcoming window.
    """,
)
async def get_summary(
    user_id: CurrentUser,
    as_of: AsOf,
    debt_service: Service,
    window_days: Annotated[
        Optional[int],
        Query(ge=0, le=31, description="Upcoming window length; defaults to the configured window"),
    ] = None,
) -> DebtSummarySchema:
    summary = await debt_service.get_summary(user_id, today=as_of, window_days=window_days)
    return DebtSummarySchema.model_validate(summary)


@debt_router.get(
    "/{debt_id}",
    response_model=DebtResponseSchema,
    summary="Get Debt",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Debt not found"},
    },
)
async def get_debt(debt_id: DebtId, user_id: CurrentUser, as_of: AsOf, debt_service: Service) -> DebtResponseSchema:
    response = await debt_service.get_debt(user_id, debt_id, today=as_of)
    return DebtResponseSchema.model_validate(response)


@debt_router.post(
    "/{debt_id}/payments",
    response_model=PaymentRecordedSchema,
    status_code=201,
    summary="Record Debt Payment",
    description="Record a payment and reduce the balance (never below zero).",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Debt not found"},
    },
)
async def record_payment(
    debt_id: DebtId,
    request: RecordDebtPaymentSchema,
    user_id: CurrentUser,
    as_of: AsOf,
    debt_service: Service,
) -> PaymentRecordedSchema:
    dto = RecordPaymentRequest(
        user_id=user_id,
        amount=request.amount,
        payment_date=request.payment_date,
        notes=request.notes,
    )
    response = await debt_service.record_payment(debt_id, dto, today=as_of)
    return PaymentRecordedSchema.model_validate(response)


@debt_router.get(
    "/{debt_id}/payments",
    response_model=List[DebtPaymentSchema],
    summary="List Debt Payments",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Debt not found"},
    },
)
async def list_payments(debt_id: DebtId, user_id: CurrentUser, debt_service: Service) -> List[DebtPaymentSchema]:
    payments = await debt_service.list_payments(user_id, debt_id)
    return [DebtPaymentSchema.model_validate(payment) for payment in payments]


@debt_router.delete(
    "/{debt_id}",
    status_code=204,
    summary="Delete Debt",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Debt not found"},
    },
)
async def delete_debt(debt_id: DebtId, user_id: CurrentUser, debt_service: Service) -> Response:
    await debt_service.delete_debt(user_id, debt_id)
    return Response(status_code=204)
