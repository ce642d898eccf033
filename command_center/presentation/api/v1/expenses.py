"""Expense API endpoints."""

from datetime import date
from typing import Annotated, Optional
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Query, Response

from command_center.application.dto import CreateExpenseRequest
from command_center.application.services import ExpenseService
from command_center.core.dependencies import AsOf, CurrentUser, get_expense_service
from command_center.presentation.schemas import (
    CreateExpenseSchema,
    DailySpendingSchema,
    ErrorResponseSchema,
    ExpenseListSchema,
    ExpenseResponseSchema,
    MonthlySpendingSchema,
)

expense_router = APIRouter(
    prefix="/expenses",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing user identifier"},
    },
)

Service = Annotated[ExpenseService, Depends(get_expense_service)]


@expense_router.post("", response_model=ExpenseResponseSchema, status_code=201, summary="Log Expense")
async def create_expense(
    request: CreateExpenseSchema,
    user_id: CurrentUser,
    as_of: AsOf,
    expense_service: Service,
) -> ExpenseResponseSchema:
    dto = CreateExpenseRequest(
        user_id=user_id,
        amount=request.amount,
        category=request.category,
        expense_date=request.expense_date or as_of,
        description=request.description,
        transaction_type=request.transaction_type,
    )
    response = await expense_service.create_expense(dto)
    return ExpenseResponseSchema.model_validate(response)


@expense_router.get(
    "",
    response_model=ExpenseListSchema,
    summary="List Expenses",
    description="Expenses and income between two dates (inclusive), or the most recent ones, with totals.",
)
async def list_expenses(
    user_id: CurrentUser,
    expense_service: Service,
    start_date: Annotated[Optional[date], Query()] = None,
    end_date: Annotated[Optional[date], Query()] = None,
    limit: Annotated[int, Query(ge=1, le=100)] = 20,
) -> ExpenseListSchema:
    response = await expense_service.list_expenses(user_id, start_date, end_date, limit)
    return ExpenseListSchema.model_validate(response)


@expense_router.get("/today", response_model=DailySpendingSchema, summary="Today's Spending")
async def get_today(user_id: CurrentUser, as_of: AsOf, expense_service: Service) -> DailySpendingSchema:
    response = await expense_service.get_daily_spending(user_id, as_of)
    return DailySpendingSchema.model_validate(response)


@expense_router.get(
    "/month",
    response_model=MonthlySpendingSchema,
    summary="Month-to-date Spending",
    description="Spending from the first of the month up to the as-of day, against the monthly budget.",
)
async def get_month(user_id: CurrentUser, as_of: AsOf, expense_service: Service) -> MonthlySpendingSchema:
    response = await expense_service.get_monthly_spending(user_id, as_of)
    return MonthlySpendingSchema.model_validate(response)


@expense_router.delete(
    "/{expense_id}",
    status_code=204,
    summary="Delete Expense",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Expense not found"},
    },
)
async def delete_expense(
    expense_id: Annotated[UUID, Path()],
    user_id: CurrentUser,
    expense_service: Service,
) -> Response:
    await expense_service.delete_expense(user_id, expense_id)
    return Response(status_code=204)
