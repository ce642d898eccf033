"""Expense-related domain exceptions."""

from .base import DomainException


class ExpenseNotFoundException(DomainException):
    def __init__(self, expense_id: str):
        super().__init__(
            message=f"Expense not found: {expense_id}",
            code="EXPENSE_NOT_FOUND",
        )
        self.expense_id = expense_id
