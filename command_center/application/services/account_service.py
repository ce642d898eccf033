"""Account service - balances and credit utilization use cases."""

from datetime import date
from typing import List, Optional
from uuid import UUID

import structlog

from command_center.application.dto import (
    AccountResponse,
    AccountsSummaryResponse,
    CreateAccountRequest,
    UpdateAccountRequest,
)
from command_center.core.metrics import record_account_created
from command_center.domain.entities import Account
from command_center.domain.exceptions import AccountNotFoundException
from command_center.domain.interfaces import AccountRepository
from command_center.service.accounting import (
    AccountingSettings,
    accounting_settings,
    quantize_money,
    summarize_accounts,
)

logger = structlog.get_logger(__name__)


class AccountService:
    """
    Application service for bank, card and e-wallet accounts.

    Balances are set by the user rather than derived from transactions.
    """

    def __init__(
        self,
        account_repository: AccountRepository,
        settings: AccountingSettings = accounting_settings,
    ):
        self._account_repo = account_repository
        self._settings = settings

    async def create_account(
        self,
        request: CreateAccountRequest,
        today: Optional[date] = None,
    ) -> AccountResponse:
        account = Account(
            user_id=request.user_id,
            name=request.name,
            account_type=request.account_type,
            provider=request.provider,
            balance=quantize_money(request.balance),
            credit_limit=quantize_money(request.credit_limit) if request.credit_limit is not None else None,
            billing_day=request.billing_day,
            notes=request.notes,
        )
        await self._account_repo.save(account)

        logger.info(
            "account_created",
            user_id=request.user_id,
            account_id=str(account.id),
            account_type=account.account_type.value,
            has_limit=account.has_limit,
        )
        record_account_created(account.account_type.value)

        return AccountResponse.from_entity(account, today or date.today(), self._settings)

    async def list_accounts(self, user_id: str, today: Optional[date] = None) -> List[AccountResponse]:
        today = today or date.today()
        accounts = await self._account_repo.list_by_user(user_id)

        logger.info("user_accounts_retrieved", user_id=user_id, count=len(accounts))

        return [AccountResponse.from_entity(account, today, self._settings) for account in accounts]

    async def get_account(
        self,
        user_id: str,
        account_id: UUID,
        today: Optional[date] = None,
    ) -> AccountResponse:
        account = await self._load(user_id, account_id)
        return AccountResponse.from_entity(account, today or date.today(), self._settings)

    async def get_summary(self, user_id: str) -> AccountsSummaryResponse:
        """Total balance and combined credit utilization across accounts."""
        accounts = await self._account_repo.list_by_user(user_id)
        summary = summarize_accounts(accounts, self._settings)

        logger.info(
            "account_summary_computed",
            user_id=user_id,
            account_count=summary.account_count,
            credit_utilization=str(summary.credit_utilization),
        )

        return AccountsSummaryResponse.from_summary(summary, self._settings)

    async def update_account(
        self,
        account_id: UUID,
        request: UpdateAccountRequest,
        today: Optional[date] = None,
    ) -> AccountResponse:
        """
        Overwrite the fields supplied in ``request``.

        Raises:
            AccountNotFoundException: If the user has no such account
        """
        account = await self._load(request.user_id, account_id)
        previous_balance = account.balance

        if request.balance is not None:
            account.balance = quantize_money(request.balance)
        if request.credit_limit is not None:
            account.credit_limit = quantize_money(request.credit_limit)
        if request.billing_day is not None:
            account.billing_day = request.billing_day
        if request.notes is not None:
            account.notes = request.notes

        await self._account_repo.update(account)

        logger.info(
            "account_updated",
            user_id=request.user_id,
            account_id=str(account.id),
            previous_balance=str(previous_balance),
            new_balance=str(account.balance),
        )

        return AccountResponse.from_entity(account, today or date.today(), self._settings)

    async def delete_account(self, user_id: str, account_id: UUID) -> None:
        deleted = await self._account_repo.delete(user_id, account_id)
        if not deleted:
            raise AccountNotFoundException(str(account_id))

        logger.info("account_deleted", user_id=user_id, account_id=str(account_id))

    async def _load(self, user_id: str, account_id: UUID) -> Account:
        account = await self._account_repo.get_by_id(user_id, account_id)

        if account is None:
            logger.warning("account_not_found", user_id=user_id, account_id=str(account_id))
            raise AccountNotFoundException(str(account_id))

        return account
