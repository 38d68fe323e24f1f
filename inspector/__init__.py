"""SEO Inspector - content visibility diagnostics."""

# Lazy imports to avoid requiring Playwright/httpx at import time
# Use explicit imports when these are needed:
# from inspector.pipeline import InspectionPipeline, analyze_url
# from inspector.models import AnalysisReport, ContentProfile, Diagnosis

__all__ = [
    "InspectionPipeline",
    "analyze_url",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for pipeline entry points."""
    if name in ("InspectionPipeline", "analyze_url"):
        from inspector.pipeline import InspectionPipeline, analyze_url

        return locals()[name]
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")
