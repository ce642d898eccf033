"""Per-request tracing context."""

import uuid
from contextvars import ContextVar
from typing import Optional

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request

from command_center.core.config import settings

request_id_var: ContextVar[Optional[str]] = ContextVar("request_id", default=None)


def get_request_id() -> Optional[str]:
    return request_id_var.get()


class RequestContextMiddleware(BaseHTTPMiddleware):
    """
    Tags every log line of a request with its request id and caller.

    The id comes from ``X-Request-ID`` when the client sends one and is
    generated otherwise; either way it is returned on the response. The
    user id is bound only for logging here; endpoints still resolve it
    through the ``CurrentUser`` dependency.
    """

    HEADER_NAME = "X-Request-ID"

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get(self.HEADER_NAME) or str(uuid.uuid4())
        context = {"request_id": request_id}

        user_id = request.headers.get(settings.user_id_header, "").strip()
        if user_id:
            context["user_id"] = user_id

        token = request_id_var.set(request_id)
        structlog.contextvars.bind_contextvars(**context)

        try:
            response = await call_next(request)
        finally:
            structlog.contextvars.unbind_contextvars(*context)
            request_id_var.reset(token)

        response.headers[self.HEADER_NAME] = request_id
        return response
