"""Account API endpoints."""

from typing import Annotated, List
from uuid import UUID

from fastapi import APIRouter, Depends, Path, Response

from command_center.application.dto import CreateAccountRequest, UpdateAccountRequest
from command_center.application.services import AccountService
from command_center.core.dependencies import AsOf, CurrentUser, get_account_service
from command_center.presentation.schemas import (
    AccountResponseSchema,
    AccountsSummarySchema,
    CreateAccountSchema,
    ErrorResponseSchema,
    UpdateAccountSchema,
)

account_router = APIRouter(
    prefix="/accounts",
    responses={
        401: {"model": ErrorResponseSchema, "description": "Missing user identifier"},
    },
)

AccountId = Annotated[UUID, Path(description="UUID of the account")]
Service = Annotated[AccountService, Depends(get_account_service)]


@account_router.post(
    "",
    response_model=AccountResponseSchema,
    status_code=201,
    summary="Create Account",
)
async def create_account(
    request: CreateAccountSchema,
    user_id: CurrentUser,
    as_of: AsOf,
    account_service: Service,
) -> AccountResponseSchema:
    dto = CreateAccountRequest(
        user_id=user_id,
        name=request.name,
        account_type=request.account_type,
        provider=request.provider,
        balance=request.balance,
        credit_limit=request.credit_limit,
        billing_day=request.billing_day,
        notes=request.notes,
    )
    response = await account_service.create_account(dto, today=as_of)
    return AccountResponseSchema.model_validate(response)


@account_router.get("", response_model=List[AccountResponseSchema], summary="List Accounts")
async def list_accounts(
    user_id: CurrentUser,
    as_of: AsOf,
    account_service: Service,
) -> List[AccountResponseSchema]:
    accounts = await account_service.list_accounts(user_id, today=as_of)
    return [AccountResponseSchema.model_validate(account) for account in accounts]


@account_router.get(
    "/summary",
    response_model=AccountsSummarySchema,
    summary="Account Summary",
    description="Total balance across accounts and combined credit utilization of the cards with a limit.",
)
async def get_summary(user_id: CurrentUser, account_service: Service) -> AccountsSummarySchema:
    summary = await account_service.get_summary(user_id)
    return AccountsSummarySchema.model_validate(summary)


@account_router.get(
    "/{account_id}",
    response_model=AccountResponseSchema,
    summary="Get Account",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Account not found"},
    },
)
async def get_account(
    account_id: AccountId,
    user_id: CurrentUser,
    as_of: AsOf,
    account_service: Service,
) -> AccountResponseSchema:
    response = await account_service.get_account(user_id, account_id, today=as_of)
    return AccountResponseSchema.model_validate(response)


@account_router.patch(
    "/{account_id}",
    response_model=AccountResponseSchema,
    summary="Update Account",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Account not found"},
    },
)
async def update_account(
    account_id: AccountId,
    request: UpdateAccountSchema,
    user_id: CurrentUser,
    as_of: AsOf,
    account_service: Service,
) -> AccountResponseSchema:
    dto = UpdateAccountRequest(
        user_id=user_id,
        balance=request.balance,
        credit_limit=request.credit_limit,
        billing_day=request.billing_day,
        notes=request.notes,
    )
    response = await account_service.update_account(account_id, dto, today=as_of)
    return AccountResponseSchema.model_validate(response)


@account_router.delete(
    "/{account_id}",
    status_code=204,
    summary="Delete Account",
    responses={
        404: {"model": ErrorResponseSchema, "description": "Account not found"},
    },
)
async def delete_account(account_id: AccountId, user_id: CurrentUser, account_service: Service) -> Response:
    await account_service.delete_account(user_id, account_id)
    return Response(status_code=204)
