"""URL analysis endpoints."""

from datetime import UTC, datetime
from typing import Any
from urllib.parse import urlparse

import structlog
from fastapi import APIRouter, Depends, Request
from fastapi.responses import ORJSONResponse

from api.exceptions import error_response_for
from api.metrics import record_analysis, record_analysis_failure
from api.schemas.analyze import AnalyzeErrorResponse, AnalyzeHealthResponse, AnalyzeResponse
from inspector.errors import InspectorError, ValidationError
from inspector.models import format_timestamp
from inspector.pipeline import InspectionPipeline

router = APIRouter(prefix="/analyze", tags=["Analyze"])
logger = structlog.get_logger(__name__)

# Schemes that cannot be parsed without a host
HOST_REQUIRED_SCHEMES = ("http", "https")


def get_pipeline() -> InspectionPipeline:
    """Dependency: a fresh pipeline per request."""
    return InspectionPipeline.from_settings()


def validate_url(payload: Any) -> str:
    """
    Extract and validate the URL from a request body.

    Raises:
        ValidationError: URL missing, not a string, or not an absolute
            URL. Schemes the fetcher cannot handle (``ftp:``, ``mailto:``)
            pass here and fail as a fetch error.
    """
    url = payload.get("url") if isinstance(payload, dict) else None
    if not url or not isinstance(url, str):
        raise ValidationError("URL is required and must be a string")

    try:
        parsed = urlparse(url)
        # Accessing .port validates it
        _ = parsed.port
    except ValueError as e:
        raise ValidationError(
            "Please provide a valid URL with protocol (http:// or https://)",
            error="Invalid URL",
        ) from e

    scheme = parsed.scheme.lower()
    if not scheme or (scheme in HOST_REQUIRED_SCHEMES and not parsed.hostname):
        raise ValidationError(
            "Please provide a valid URL with protocol (http:// or https://)",
            error="Invalid URL",
        )
    return url


async def _read_json(request: Request) -> Any:
    try:
        return await request.json()
    except ValueError:
        # Empty or non-JSON body is treated like a missing URL
        return None


@router.post(
    "",
    response_model=AnalyzeResponse,
    responses={400: {"model": AnalyzeErrorResponse}, 500: {"model": AnalyzeErrorResponse}},
)
async def analyze(
    request: Request,
    pipeline: InspectionPipeline = Depends(get_pipeline),
) -> Any:
    """
    Analyze a URL for crawler-visible content and SEO signals.

    Body: ``{"url": "https://example.com"}``
    """
    try:
        url = validate_url(await _read_json(request))
    except ValidationError as e:
        logger.info("analyze_invalid_request", error=e.error, message=e.message)
        request.state.error_code = e.code
        return error_response_for(e)

    request.state.analyzed_url = url
    try:
        report = await pipeline.analyze(url)
    except InspectorError as e:
        logger.warning("analyze_failed", url=url, code=e.code, message=e.message)
        request.state.error_code = e.code
        record_analysis_failure(e.code)
        return error_response_for(e)

    request.state.risk_level = report.diagnosis.risk_level.value
    record_analysis(report.diagnosis.risk_level.value, report.rendered_enabled)
    return AnalyzeResponse.model_validate(report.to_dict())


@router.get("/health", response_model=AnalyzeHealthResponse)
async def analyze_health() -> ORJSONResponse:
    """Liveness of the analyze service."""
    return ORJSONResponse(
        content={
            "status": "ok",
            "service": "analyze",
            "timestamp": format_timestamp(datetime.now(UTC)),
        }
    )
