"""Pydantic schemas package."""

from api.schemas.analyze import (
    AnalyzeErrorResponse,
    AnalyzeHealthResponse,
    AnalyzeResponse,
)

__all__ = [
    "AnalyzeErrorResponse",
    "AnalyzeHealthResponse",
    "AnalyzeResponse",
]
