"""PostgreSQL implementation of AccountRepository."""

from datetime import datetime
from typing import List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from command_center.domain.entities import Account, AccountType
from command_center.domain.interfaces import AccountRepository
from command_center.infrastructure.database.models import AccountModel


class PostgresAccountRepository(AccountRepository):

    def __init__(self, session: AsyncSession):
        self._session = session

    async def save(self, account: Account) -> Account:
        model = AccountModel(
            id=str(account.id),
            user_id=account.user_id,
            name=account.name,
            account_type=account.account_type.value,
            provider=account.provider,
            balance=account.balance,
            credit_limit=account.credit_limit,
            billing_day=account.billing_day,
            notes=account.notes,
            created_at=account.created_at,
            updated_at=account.updated_at,
        )

        self._session.add(model)
        await self._session.flush()

        return account

    async def get_by_id(self, user_id: str, account_id: UUID) -> Optional[Account]:
        model = await self._get_model(user_id, account_id)

        if model is None:
            return None

        return self._to_entity(model)

    async def list_by_user(self, user_id: str) -> List[Account]:
        stmt = (
            select(AccountModel)
            .where(AccountModel.user_id == user_id)
            .order_by(AccountModel.account_type.asc(), AccountModel.name.asc())
        )
        result = await self._session.execute(stmt)

        return [self._to_entity(model) for model in result.scalars().all()]

    async def update(self, account: Account) -> Account:
        model = await self._get_model(account.user_id, account.id)

        if model is None:
            raise ValueError(f"Account {account.id} not found")

        account.updated_at = datetime.utcnow()
        model.balance = account.balance
        model.credit_limit = account.credit_limit
        model.billing_day = account.billing_day
        model.notes = account.notes
        model.updated_at = account.updated_at

        await self._session.flush()

        return account

    async def delete(self, user_id: str, account_id: UUID) -> bool:
        model = await self._get_model(user_id, account_id)

        if model is None:
            return False

        await self._session.delete(model)
        await self._session.flush()

        return True

    async def _get_model(self, user_id: str, account_id: UUID) -> Optional[AccountModel]:
        stmt = (
            select(AccountModel)
            .where(AccountModel.id == str(account_id))
            .where(AccountModel.user_id == user_id)
        )
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _to_entity(self, model: AccountModel) -> Account:
        return Account(
            id=UUID(str(model.id)),
            user_id=model.user_id,
            name=model.name,
            account_type=AccountType(model.account_type),
            provider=model.provider,
            balance=model.balance,
            credit_limit=model.credit_limit,
            billing_day=model.billing_day,
            notes=model.notes,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
