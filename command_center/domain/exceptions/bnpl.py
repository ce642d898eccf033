"""BNPL plan-related domain exceptions."""

from .base import DomainException


class PlanNotFoundException(DomainException):
    """Raised when a plan cannot be found for the requesting user."""

    def __init__(self, plan_id: str):
        super().__init__(
            message=f"Plan not found: {plan_id}",
            code="PLAN_NOT_FOUND",
        )
        self.plan_id = plan_id


class InstallmentNotFoundException(DomainException):
    """Raised when a plan has no installment with the given sequence."""

    def __init__(self, plan_id: str, sequence: int):
        super().__init__(
            message=f"Installment {sequence} not found in plan {plan_id}",
            code="INSTALLMENT_NOT_FOUND",
        )
        self.plan_id = plan_id
        self.sequence = sequence


class InstallmentAlreadyPaidException(DomainException):
    def __init__(self, plan_id: str, sequence: int):
        super().__init__(
            message=f"Installment {sequence} of plan {plan_id} is already paid",
            code="INSTALLMENT_ALREADY_PAID",
        )
        self.plan_id = plan_id
        self.sequence = sequence


class PlanHasScheduleException(DomainException):
    """Raised when a scalar payment is recorded against a scheduled plan."""

    def __init__(self, plan_id: str):
        super().__init__(
            message=f"Plan {plan_id} tracks a schedule; pay a specific installment instead",
            code="PLAN_HAS_SCHEDULE",
        )
        self.plan_id = plan_id


class PlanCompletedException(DomainException):
    def __init__(self, plan_id: str):
        super().__init__(
            message=f"Plan {plan_id} is already fully paid",
            code="PLAN_COMPLETED",
        )
        self.plan_id = plan_id
