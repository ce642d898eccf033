"""Error handling middleware and exception handlers."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
import structlog

from command_center.domain.exceptions import (
    AccountNotFoundException,
    DebtNotFoundException,
    DomainException,
    ExpenseNotFoundException,
    FriendDebtNotFoundException,
    FriendDebtNotPendingException,
    InstallmentAlreadyPaidException,
    InstallmentNotFoundException,
    InvalidRequestException,
    MissingUserException,
    PlanCompletedException,
    PlanHasScheduleException,
    PlanNotFoundException,
)
from .request_context import get_request_id

logger = structlog.get_logger(__name__)

NOT_FOUND_EXCEPTIONS = (
    AccountNotFoundException,
    PlanNotFoundException,
    InstallmentNotFoundException,
    DebtNotFoundException,
    FriendDebtNotFoundException,
    ExpenseNotFoundException,
)

CONFLICT_EXCEPTIONS = (
    InstallmentAlreadyPaidException,
    PlanHasScheduleException,
    PlanCompletedException,
    FriendDebtNotPendingException,
)


def _error_response(status_code: int, exc: DomainException) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={
            "error": exc.code,
            "message": exc.message,
            "request_id": get_request_id(),
        },
    )


def error_handler_middleware(app: FastAPI) -> None:
    """
    Register exception handlers with the FastAPI app.

    Maps domain exceptions to appropriate HTTP responses.
    """

    async def not_found_handler(request: Request, exc: DomainException) -> JSONResponse:
        """Handle missing resources, including ones owned by another user."""
        logger.info("resource_not_found", code=exc.code, message=exc.message)
        return _error_response(404, exc)

    async def conflict_handler(request: Request, exc: DomainException) -> JSONResponse:
        """Handle operations that clash with the resource's current state."""
        logger.info("state_conflict", code=exc.code, message=exc.message)
        return _error_response(409, exc)

    for exc_class in NOT_FOUND_EXCEPTIONS:
        app.add_exception_handler(exc_class, not_found_handler)

    for exc_class in CONFLICT_EXCEPTIONS:
        app.add_exception_handler(exc_class, conflict_handler)

    @app.exception_handler(MissingUserException)
    async def missing_user_handler(
        request: Request,
        exc: MissingUserException,
    ) -> JSONResponse:
        """Handle requests without a user identifier."""
        logger.warning("missing_user_id", header=exc.header_name, path=request.url.path)
        return _error_response(401, exc)

    @app.exception_handler(InvalidRequestException)
    async def invalid_request_handler(
        request: Request,
        exc: InvalidRequestException,
    ) -> JSONResponse:
        """Handle invalid request errors."""
        logger.info("invalid_request", message=exc.message)
        return _error_response(400, exc)

    @app.exception_handler(DomainException)
    async def domain_exception_handler(
        request: Request,
        exc: DomainException,
    ) -> JSONResponse:
        """Handle generic domain exceptions."""
        logger.warning(
            "domain_exception",
            code=exc.code,
            message=exc.message,
        )
        return _error_response(400, exc)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(
        request: Request,
        exc: Exception,
    ) -> JSONResponse:
        """Handle unexpected exceptions."""
        logger.exception(
            "unhandled_exception",
            error=str(exc),
            error_type=type(exc).__name__,
        )
        return JSONResponse(
            status_code=500,
            content={
                "error": "INTERNAL_ERROR",
                "message": "An unexpected error occurred.",
                "request_id": get_request_id(),
            },
        )
