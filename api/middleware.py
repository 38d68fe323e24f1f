"""Request tracing and access logging."""

from __future__ import annotations

import time
import uuid
from collections.abc import Awaitable, Callable

import structlog
from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware

CallNext = Callable[[Request], Awaitable[Response]]

logger = structlog.get_logger()

# Fields the analyze route leaves on request.state for the access log
ANALYSIS_STATE_FIELDS = ("analyzed_url", "risk_level", "error_code")

# Polled endpoints only logged at debug level
QUIET_PATHS = frozenset({"/health", "/api/analyze/health", "/metrics"})


class RequestContextMiddleware(BaseHTTPMiddleware):
    """Tag every request with an ID, echoed back as X-Request-ID."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())

        # Pipeline log lines of this request carry the ID too
        structlog.contextvars.clear_contextvars()
        structlog.contextvars.bind_contextvars(request_id=request_id)
        request.state.request_id = request_id

        response = await call_next(request)
        response.headers["X-Request-ID"] = request_id
        return response


def analysis_context(request: Request) -> dict[str, str]:
    """The inspected URL and outcome, when the route recorded them."""
    return {
        name.removeprefix("analyzed_"): value
        for name in ANALYSIS_STATE_FIELDS
        if (value := getattr(request.state, name, None)) is not None
    }


class AccessLogMiddleware(BaseHTTPMiddleware):
    """One log line per request, with the analyzed URL for inspections."""

    async def dispatch(self, request: Request, call_next: CallNext) -> Response:
        start_time = time.perf_counter()
        response = await call_next(request)
        duration_ms = round((time.perf_counter() - start_time) * 1000, 2)

        path = request.url.path
        if path in QUIET_PATHS:
            log = logger.debug
        elif response.status_code >= 500:
            log = logger.warning
        else:
            log = logger.info

        log(
            "request_completed",
            method=request.method,
            path=path,
            status_code=response.status_code,
            duration_ms=duration_ms,
            **analysis_context(request),
        )
        return response
