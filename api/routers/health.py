"""Health check and metrics endpoints."""

import time
from datetime import UTC, datetime

from fastapi import APIRouter, Response
from pydantic import BaseModel, Field

from api.config import get_settings
from api.metrics import get_metrics, get_metrics_content_type
from inspector.models import format_timestamp

router = APIRouter(tags=["Health"])

API_VERSION = "0.1.0"

# Track server start time for uptime calculation
_server_start_time = time.time()


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Health status")
    timestamp: str = Field(..., description="ISO 8601 timestamp")
    version: str = Field(..., description="API version")
    uptime_seconds: int = Field(..., description="Server uptime in seconds")
    render_enabled: bool = Field(..., description="Whether browser rendering is configured")


@router.get("/health", response_model=HealthResponse)
async def health_check() -> HealthResponse:
    """
    Basic health check endpoint.

    Returns healthy if the API is running. Does not launch a browser or
    fetch anything.
    """
    return HealthResponse(
        status="healthy",
        timestamp=format_timestamp(datetime.now(UTC)),
        version=API_VERSION,
        uptime_seconds=int(time.time() - _server_start_time),
        render_enabled=get_settings().render_enabled,
    )


@router.get("/metrics", include_in_schema=False)
async def metrics() -> Response:
    """Prometheus scrape endpoint."""
    return Response(content=get_metrics(), media_type=get_metrics_content_type())
