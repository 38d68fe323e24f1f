"""Schemas for the analyze endpoint.

Field names are snake_case; the wire format is camelCase via aliases.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base model serialized with camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class FetchInfo(CamelModel):
    status: int = Field(..., description="HTTP status of the raw fetch")
    html_size: int = Field(..., description="Body size in bytes (UTF-8)")
    headers: dict[str, str] = Field(..., description="SEO-relevant response headers")


class ContentInfo(CamelModel):
    """Text measurements for one document variant."""

    text_length: int
    semantic_text_length: int
    hidden_text_length: int
    hidden_elements_count: int
    paragraph_count: int
    preview_text: str = Field(..., description="First 200 characters of the text")
    full_text: str


class RenderedContentInfo(ContentInfo):
    enabled: bool = Field(..., description="False when rendering failed or is disabled")


class MetricsInfo(CamelModel):
    """Ratios in [0, 1], rounded to 3 decimals."""

    content_coverage: float
    semantic_coverage: float
    html_semantic_ratio: float
    rendered_semantic_ratio: float
    html_hidden_ratio: float
    rendered_hidden_ratio: float


class SignalInfo(CamelModel):
    exists: bool
    source: Literal["html", "rendered"] | None = None


class CanonicalInfo(CamelModel):
    exists: bool


class SEOSignalsInfo(CamelModel):
    title: SignalInfo
    meta_description: SignalInfo
    h1: SignalInfo
    canonical: CanonicalInfo
    hreflang_count: int


class DiagnosisInfo(CamelModel):
    risk_level: Literal["LOW", "MEDIUM", "HIGH"]
    issues: list[str] = Field(..., description="Issue codes in the order they were raised")
    summary: str
    recommendation: str


class MetaInfo(CamelModel):
    response_time: str = Field(..., description='Wall time, e.g. "1532ms"')
    timestamp: str = Field(..., description="ISO 8601 timestamp")


class AnalyzeResponse(CamelModel):
    """Full analysis report."""

    url: str
    fetch: FetchInfo
    html_content: ContentInfo
    rendered_content: RenderedContentInfo
    metrics: MetricsInfo
    seo_signals: SEOSignalsInfo
    diagnosis: DiagnosisInfo
    meta: MetaInfo = Field(..., alias="_meta")


class AnalyzeErrorResponse(BaseModel):
    """Error body; ``diagnosis`` is present for fetch and analysis failures."""

    error: str
    message: str
    diagnosis: DiagnosisInfo | None = None


class AnalyzeHealthResponse(BaseModel):
    status: str
    service: str
    timestamp: str
