"""Exceptions raised by the inspection pipeline."""


class InspectorError(Exception):
    """Base exception for inspection failures."""

    code = "inspector_error"

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(InspectorError):
    """The URL submitted for analysis is unusable."""

    code = "validation_error"

    def __init__(self, message: str, error: str = "Invalid request"):
        self.error = error
        super().__init__(message)


class FetchError(InspectorError):
    """Raw HTML could not be retrieved. Fatal for the analysis."""

    code = "fetch_failed"


class RenderError(InspectorError):
    """The browser render failed. Always absorbed by the pipeline."""

    code = "render_failed"


class AnalysisError(InspectorError):
    """Unexpected failure after the document was fetched."""

    code = "analysis_error"
