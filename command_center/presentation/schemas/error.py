"""Error body shared by every failing endpoint."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponseSchema(BaseModel):
    """
    Body returned for domain errors and unexpected failures.

    ``error`` is a stable machine-readable code (``PLAN_NOT_FOUND``,
    ``INSTALLMENT_ALREADY_PAID``); ``message`` is meant for people.
    """

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": "INSTALLMENT_ALREADY_PAID",
                    "message": "Installment 2 of plan 550e8400-e29b-41d4-a716-446655440000 is already paid",
                    "request_id": "6f1c2a0e-1d8b-4f7e-9a55-0b8f3f3b1c21",
                },
                {
                    "error": "MISSING_USER_ID",
                    "message": "Missing user identifier header: X-User-ID",
                    "request_id": None,
                },
            ]
        }
    )

    error: str = Field(..., description="Error code")
    message: str = Field(..., description="Human-readable explanation")
    request_id: Optional[str] = Field(None, description="Echo of X-Request-ID for correlating logs")
