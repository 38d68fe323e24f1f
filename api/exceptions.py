"""HTTP error payloads for failed analyses.

Every failure response of the analyze endpoint has the shape
``{"error", "message"}``; fatal analysis failures also carry a HIGH-risk
``diagnosis`` so clients can render one consistent failure state.
"""

from typing import Any

from fastapi import status
from fastapi.responses import ORJSONResponse

from inspector.errors import AnalysisError, FetchError, ValidationError
from inspector.models import IssueCode
from inspector.scoring.diagnosis import failure_diagnosis

FETCH_FAILED_RECOMMENDATION = (
    "Ensure the URL is accessible and the server is responding correctly."
)
ANALYSIS_ERROR_RECOMMENDATION = "Please try again or contact support if the issue persists."


def error_content(error: str, message: str, **extra: Any) -> dict[str, Any]:
    """Standard error body."""
    return {"error": error, "message": message, **extra}


def validation_error_response(exc: ValidationError) -> ORJSONResponse:
    """400 for a missing or malformed URL."""
    return ORJSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content=error_content(exc.error, exc.message),
    )


def fetch_error_response(exc: FetchError) -> ORJSONResponse:
    """500 when the raw HTML could not be fetched."""
    diagnosis = failure_diagnosis(
        IssueCode.FETCH_FAILED,
        # FetchError messages already start with "Failed to fetch URL: "
        summary=exc.message,
        recommendation=FETCH_FAILED_RECOMMENDATION,
    )
    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("Fetch failed", exc.message, diagnosis=diagnosis.to_dict()),
    )


def analysis_error_response(message: str) -> ORJSONResponse:
    """500 for any other failure during analysis."""
    diagnosis = failure_diagnosis(
        IssueCode.ANALYSIS_ERROR,
        summary=f"An unexpected error occurred during analysis: {message}",
        recommendation=ANALYSIS_ERROR_RECOMMENDATION,
    )
    return ORJSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content=error_content("Analysis failed", message, diagnosis=diagnosis.to_dict()),
    )


def error_response_for(exc: Exception) -> ORJSONResponse:
    """Map any exception raised by the pipeline to its HTTP response."""
    if isinstance(exc, ValidationError):
        return validation_error_response(exc)
    if isinstance(exc, FetchError):
        return fetch_error_response(exc)
    if isinstance(exc, AnalysisError):
        return analysis_error_response(exc.message)
    return analysis_error_response(str(exc))
