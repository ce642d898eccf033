"""Access logging and HTTP metrics."""

import time

import structlog
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

from command_center.core.metrics import record_http_request

logger = structlog.get_logger(__name__)


def _endpoint_label(request: Request) -> str:
    # Route template, e.g. /v1/bnpl/{plan_id}, keeps label cardinality bounded
    route = request.scope.get("route")
    return getattr(route, "path", None) or "unmatched"


class LoggingMiddleware(BaseHTTPMiddleware):
    """
    Emits ``request_started`` / ``request_completed`` events with timing and
    counts every request in the HTTP metrics. Server errors are logged at
    warning level; unhandled exceptions are logged and re-raised.
    """

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        log = logger.bind(method=request.method, path=request.url.path)
        log.info("request_started", query=str(request.query_params) or None)

        started = time.perf_counter()
        status_code = 500
        try:
            response = await call_next(request)
            status_code = response.status_code
        except Exception as e:
            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round((time.perf_counter() - started) * 1000, 2),
            )
            raise
        finally:
            elapsed = time.perf_counter() - started
            record_http_request(request.method, _endpoint_label(request), status_code, elapsed)

        emit = log.warning if status_code >= 500 else log.info
        emit("request_completed", status_code=status_code, duration_ms=round(elapsed * 1000, 2))

        return response
