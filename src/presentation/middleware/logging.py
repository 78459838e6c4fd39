"""Request/response logging middleware with timing."""

import time
from typing import Callable

import structlog
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from starlette.responses import Response

logger = structlog.get_logger(__name__)

# Polled by infrastructure; not worth a log line per call.
QUIET_PATHS = frozenset({"/metrics", "/v1/health"})


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs request start, completion, and duration."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        path = request.url.path
        if path in QUIET_PATHS:
            return await call_next(request)

        start_time = time.perf_counter()
        log = logger.bind(method=request.method, path=path)
        log.info("request_started")

        try:
            response = await call_next(request)
        except Exception as e:
            log.error(
                "request_failed",
                error=str(e),
                error_type=type(e).__name__,
                duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
            )
            raise

        log.info(
            "request_completed",
            status_code=response.status_code,
            duration_ms=round((time.perf_counter() - start_time) * 1000, 2),
        )
        return response
