"""Debt-related domain exceptions."""

from .base import DomainException


class DebtNotFoundException(DomainException):
    """Raised when a debt cannot be found for the requesting user."""

    def __init__(self, debt_id: str):
        super().__init__(
            message=f"Debt not found: {debt_id}",
            code="DEBT_NOT_FOUND",
        )
        self.debt_id = debt_id


class FriendDebtNotFoundException(DomainException):
    def __init__(self, iou_id: str):
        super().__init__(
            message=f"IOU not found: {iou_id}",
            code="IOU_NOT_FOUND",
        )
        self.iou_id = iou_id


class FriendDebtNotPendingException(DomainException):
    """Raised when settling or cancelling an IOU that is no longer pending."""

    def __init__(self, iou_id: str, status: str):
        super().__init__(
            message=f"IOU {iou_id} is already {status}",
            code="IOU_NOT_PENDING",
        )
        self.iou_id = iou_id
        self.status = status
