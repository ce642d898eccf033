"""Account-related domain exceptions."""

from .base import DomainException


class AccountNotFoundException(DomainException):
    def __init__(self, account_id: str):
        super().__init__(
            message=f"Account not found: {account_id}",
            code="ACCOUNT_NOT_FOUND",
        )
        self.account_id = account_id
