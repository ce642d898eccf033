"""Dependency injection for FastAPI."""

from datetime import date
from typing import Annotated, Optional

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from command_center.application.services import (
    AccountService,
    BNPLService,
    DashboardService,
    DebtService,
    ExpenseService,
    FriendDebtService,
    IbadahService,
)
from command_center.core.config import settings
from command_center.domain.exceptions import MissingUserException
from command_center.infrastructure.database import get_db_session
from command_center.infrastructure.repositories import (
    PostgresAccountRepository,
    PostgresDebtRepository,
    PostgresExpenseRepository,
    PostgresFriendDebtRepository,
    PostgresIbadahRepository,
    PostgresPlanRepository,
)
from command_center.service.accounting import AccountingSettings, accounting_settings


# Request context
async def get_current_user_id(request: Request) -> str:
    """
    Read the calling user's id from the identity header.

    Raises:
        MissingUserException: If the header is absent or blank
    """
    user_id = request.headers.get(settings.user_id_header, "").strip()
    if not user_id:
        raise MissingUserException(settings.user_id_header)
    return user_id


async def get_as_of(
    as_of: Annotated[
        Optional[date],
        Query(description="Evaluate date-dependent figures as of this day (defaults to today)"),
    ] = None,
) -> date:
    return as_of or date.today()


def get_accounting_settings() -> AccountingSettings:
    return accounting_settings


CurrentUser = Annotated[str, Depends(get_current_user_id)]
AsOf = Annotated[date, Depends(get_as_of)]


# Repository dependencies
async def get_plan_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresPlanRepository:
    """Get a PlanRepository instance."""
    return PostgresPlanRepository(session)


async def get_debt_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresDebtRepository:
    """Get a DebtRepository instance."""
    return PostgresDebtRepository(session)


async def get_friend_debt_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresFriendDebtRepository:
    return PostgresFriendDebtRepository(session)


async def get_ibadah_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresIbadahRepository:
    return PostgresIbadahRepository(session)


async def get_expense_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresExpenseRepository:
    return PostgresExpenseRepository(session)


async def get_account_repository(
    session: Annotated[AsyncSession, Depends(get_db_session)],
) -> PostgresAccountRepository:
    return PostgresAccountRepository(session)


# Service dependencies
async def get_bnpl_service(
    plan_repo: Annotated[PostgresPlanRepository, Depends(get_plan_repository)],
    account_repo: Annotated[PostgresAccountRepository, Depends(get_account_repository)],
    accounting: Annotated[AccountingSettings, Depends(get_accounting_settings)],
) -> BNPLService:
    """Get a BNPLService instance."""
    return BNPLService(plan_repository=plan_repo, account_repository=account_repo, settings=accounting)


async def get_debt_service(
    debt_repo: Annotated[PostgresDebtRepository, Depends(get_debt_repository)],
    accounting: Annotated[AccountingSettings, Depends(get_accounting_settings)],
) -> DebtService:
    """Get a DebtService instance."""
    return DebtService(debt_repository=debt_repo, settings=accounting)


async def get_friend_debt_service(
    iou_repo: Annotated[PostgresFriendDebtRepository, Depends(get_friend_debt_repository)],
    accounting: Annotated[AccountingSettings, Depends(get_accounting_settings)],
) -> FriendDebtService:
    return FriendDebtService(friend_debt_repository=iou_repo, settings=accounting)


async def get_ibadah_service(
    ibadah_repo: Annotated[PostgresIbadahRepository, Depends(get_ibadah_repository)],
) -> IbadahService:
    return IbadahService(ibadah_repository=ibadah_repo)


async def get_expense_service(
    expense_repo: Annotated[PostgresExpenseRepository, Depends(get_expense_repository)],
    accounting: Annotated[AccountingSettings, Depends(get_accounting_settings)],
) -> ExpenseService:
    return ExpenseService(
        expense_repository=expense_repo,
        daily_budget=settings.daily_budget,
        monthly_budget=settings.monthly_budget,
        settings=accounting,
    )


async def get_account_service(
    account_repo: Annotated[PostgresAccountRepository, Depends(get_account_repository)],
    accounting: Annotated[AccountingSettings, Depends(get_accounting_settings)],
) -> AccountService:
    return AccountService(account_repository=account_repo, settings=accounting)


async def get_dashboard_service(
    bnpl_service: Annotated[BNPLService, Depends(get_bnpl_service)],
    debt_service: Annotated[DebtService, Depends(get_debt_service)],
    friend_debt_service: Annotated[FriendDebtService, Depends(get_friend_debt_service)],
    ibadah_service: Annotated[IbadahService, Depends(get_ibadah_service)],
    expense_service: Annotated[ExpenseService, Depends(get_expense_service)],
) -> DashboardService:
    """Get a DashboardService wired to the per-area services."""
    return DashboardService(
        bnpl_service=bnpl_service,
        debt_service=debt_service,
        friend_debt_service=friend_debt_service,
        ibadah_service=ibadah_service,
        expense_service=expense_service,
    )
