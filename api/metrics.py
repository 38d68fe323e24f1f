"""Prometheus metrics for monitoring and observability."""

from __future__ import annotations

import time
from collections.abc import Awaitable, Callable

from fastapi import Request, Response
from prometheus_client import (
    CONTENT_TYPE_LATEST,
    Counter,
    Histogram,
    generate_latest,
)
from starlette.middleware.base import BaseHTTPMiddleware

# Request metrics
REQUEST_COUNT = Counter(
    "seo_inspector_http_requests_total",
    "Total HTTP requests",
    ["method", "endpoint", "status_code"],
)

REQUEST_LATENCY = Histogram(
    "seo_inspector_http_request_duration_seconds",
    "HTTP request latency in seconds",
    ["method", "endpoint"],
    buckets=[0.05, 0.1, 0.25, 0.5, 1.0, 2.5, 5.0, 10.0, 20.0, 40.0, 60.0],
)

# Analysis metrics
ANALYSES_TOTAL = Counter(
    "seo_inspector_analyses_total",
    "Completed analyses by risk level",
    ["risk_level"],
)

ANALYSIS_FAILURES_TOTAL = Counter(
    "seo_inspector_analysis_failures_total",
    "Failed analyses by error code",
    ["code"],
)

RENDER_TOTAL = Counter(
    "seo_inspector_render_total",
    "Browser renders by outcome",
    ["status"],
)


def get_metrics() -> bytes:
    """Generate Prometheus metrics output."""
    metrics: bytes = generate_latest()
    return metrics


def get_metrics_content_type() -> str:
    """Get the content type for Prometheus metrics."""
    content_type: str = CONTENT_TYPE_LATEST
    return content_type


class MetricsMiddleware(BaseHTTPMiddleware):
    """Middleware to collect request metrics."""

    EXCLUDE_PATHS = {"/metrics", "/health", "/api/analyze/health", "/favicon.ico"}

    async def dispatch(
        self,
        request: Request,
        call_next: Callable[[Request], Awaitable[Response]],
    ) -> Response:
        if request.url.path in self.EXCLUDE_PATHS:
            return await call_next(request)

        method = request.method
        endpoint = request.url.path
        start_time = time.perf_counter()

        response = await call_next(request)

        REQUEST_COUNT.labels(
            method=method,
            endpoint=endpoint,
            status_code=str(response.status_code),
        ).inc()
        REQUEST_LATENCY.labels(method=method, endpoint=endpoint).observe(
            time.perf_counter() - start_time
        )
        return response


def record_analysis(risk_level: str, rendered: bool) -> None:
    """Record a completed analysis."""
    ANALYSES_TOTAL.labels(risk_level=risk_level).inc()
    RENDER_TOTAL.labels(status="rendered" if rendered else "disabled").inc()


def record_analysis_failure(code: str) -> None:
    """Record a failed analysis."""
    ANALYSIS_FAILURES_TOTAL.labels(code=code).inc()
