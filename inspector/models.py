"""Data model for a single URL inspection.

Every object here is created fresh for one analysis request and thrown
away once the response is serialized.
"""

from dataclasses import dataclass, field
from datetime import UTC, datetime
from enum import Enum

from inspector.errors import RenderError

PREVIEW_LENGTH = 200
FINDING_PREVIEW_LENGTH = 100
MAX_HIDDEN_FINDINGS = 3


class RiskLevel(str, Enum):
    """Crawlability risk for a page."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class IssueCode(str, Enum):
    """Issue codes emitted by the diagnoser."""

    # Coverage
    MAIN_CONTENT_MISSING_IN_HTML = "MAIN_CONTENT_MISSING_IN_HTML"
    CONTENT_RENDERED_BY_JS = "CONTENT_RENDERED_BY_JS"
    LOW_CONTENT_COVERAGE = "LOW_CONTENT_COVERAGE"
    HEAVY_CLIENT_SIDE_RENDERING = "HEAVY_CLIENT_SIDE_RENDERING"
    MODERATE_CONTENT_COVERAGE = "MODERATE_CONTENT_COVERAGE"

    # Signals
    MISSING_TITLE_TAG = "MISSING_TITLE_TAG"
    MISSING_META_DESCRIPTION = "MISSING_META_DESCRIPTION"
    MISSING_H1 = "MISSING_H1"
    H1_ONLY_IN_RENDERED_DOM = "H1_ONLY_IN_RENDERED_DOM"

    # Failures
    FETCH_FAILED = "FETCH_FAILED"
    ANALYSIS_ERROR = "ANALYSIS_ERROR"


class HiddenKind(str, Enum):
    """How an element is hidden. Values are the markers used in debug output."""

    DISPLAY_NONE = "display:none"
    VISIBILITY_HIDDEN = "visibility:hidden"
    ARIA_HIDDEN = 'aria-hidden="true"'
    HIDDEN_ATTRIBUTE = "hidden attribute"


class SignalSource(str, Enum):
    """Where an SEO signal was found."""

    HTML = "html"
    RENDERED = "rendered"


@dataclass
class FetchResult:
    """Raw HTML as served to a crawler."""

    url: str
    final_url: str
    status: int
    html_size_bytes: int
    headers: dict[str, str]
    html: str
    fetch_time_ms: int = 0

    def to_dict(self) -> dict:
        return {
            "status": self.status,
            "htmlSize": self.html_size_bytes,
            "headers": dict(self.headers),
        }


@dataclass
class HiddenContentFinding:
    """One hidden element with meaningful text."""

    kind: HiddenKind
    preview_text: str
    length: int

    def describe(self) -> str:
        """Human-readable one-liner for logs."""
        return f"[{self.kind.value}] {self.preview_text}... ({self.length} chars)"


@dataclass
class HiddenContentResult:
    """Aggregate of all hidden-element scans over one document."""

    hidden_text_length: int = 0
    hidden_elements_count: int = 0
    findings: list[HiddenContentFinding] = field(default_factory=list)


@dataclass
class ContentProfile:
    """Text measurements for one document variant (raw or rendered)."""

    text_length: int = 0
    semantic_text_length: int = 0
    hidden_text_length: int = 0
    hidden_elements_count: int = 0
    paragraph_count: int = 0
    preview_text: str = ""
    full_text: str = ""
    hidden_findings: list[HiddenContentFinding] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "textLength": self.text_length,
            "semanticTextLength": self.semantic_text_length,
            "hiddenTextLength": self.hidden_text_length,
            "hiddenElementsCount": self.hidden_elements_count,
            "paragraphCount": self.paragraph_count,
            "previewText": self.preview_text,
            "fullText": self.full_text,
        }


@dataclass
class Signal:
    """Presence of a single SEO signal."""

    exists: bool = False
    source: SignalSource | None = None

    def to_dict(self) -> dict:
        return {
            "exists": self.exists,
            "source": self.source.value if self.source else None,
        }


@dataclass
class SEOSignalSet:
    """Canonical on-page SEO signals."""

    title: Signal = field(default_factory=Signal)
    meta_description: Signal = field(default_factory=Signal)
    h1: Signal = field(default_factory=Signal)
    canonical: bool = False
    hreflang_count: int = 0

    def to_dict(self) -> dict:
        return {
            "title": self.title.to_dict(),
            "metaDescription": self.meta_description.to_dict(),
            "h1": self.h1.to_dict(),
            "canonical": {"exists": self.canonical},
            "hreflangCount": self.hreflang_count,
        }


@dataclass
class CoverageMetrics:
    """Coverage and quality ratios, all in [0, 1]."""

    content_coverage: float
    semantic_coverage: float
    html_semantic_ratio: float
    rendered_semantic_ratio: float
    html_hidden_ratio: float
    rendered_hidden_ratio: float

    def rounded(self, digits: int = 3) -> "CoverageMetrics":
        """Copy rounded for serialization."""
        return CoverageMetrics(
            content_coverage=round(self.content_coverage, digits),
            semantic_coverage=round(self.semantic_coverage, digits),
            html_semantic_ratio=round(self.html_semantic_ratio, digits),
            rendered_semantic_ratio=round(self.rendered_semantic_ratio, digits),
            html_hidden_ratio=round(self.html_hidden_ratio, digits),
            rendered_hidden_ratio=round(self.rendered_hidden_ratio, digits),
        )

    def to_dict(self) -> dict:
        rounded = self.rounded()
        return {
            "contentCoverage": rounded.content_coverage,
            "semanticCoverage": rounded.semantic_coverage,
            "htmlSemanticRatio": rounded.html_semantic_ratio,
            "renderedSemanticRatio": rounded.rendered_semantic_ratio,
            "htmlHiddenRatio": rounded.html_hidden_ratio,
            "renderedHiddenRatio": rounded.rendered_hidden_ratio,
        }


@dataclass
class Diagnosis:
    """Risk verdict with ordered issue codes."""

    risk_level: RiskLevel
    issues: list[str]
    summary: str
    recommendation: str

    def to_dict(self) -> dict:
        return {
            "riskLevel": self.risk_level.value,
            "issues": list(self.issues),
            "summary": self.summary,
            "recommendation": self.recommendation,
        }


@dataclass
class RenderedDocument:
    """Body of a page after client-side scripts settled."""

    body_text: str
    body_html: str


def format_timestamp(moment: datetime) -> str:
    """ISO 8601 in UTC with millisecond precision and a Z suffix."""
    return moment.astimezone(UTC).isoformat(timespec="milliseconds").replace("+00:00", "Z")


# Result of a best-effort render: the document, or the reason it is missing
RenderOutcome = RenderedDocument | RenderError


@dataclass
class AnalysisReport:
    """Final report for one URL."""

    url: str
    fetch: FetchResult
    html_content: ContentProfile
    rendered_content: ContentProfile
    rendered_enabled: bool
    metrics: CoverageMetrics
    seo_signals: SEOSignalSet
    diagnosis: Diagnosis
    response_time_ms: int
    timestamp: datetime

    def to_dict(self) -> dict:
        """Convert to the wire format of the analyze endpoint."""
        return {
            "url": self.url,
            "fetch": self.fetch.to_dict(),
            "htmlContent": self.html_content.to_dict(),
            "renderedContent": {
                "enabled": self.rendered_enabled,
                **self.rendered_content.to_dict(),
            },
            "metrics": self.metrics.to_dict(),
            "seoSignals": self.seo_signals.to_dict(),
            "diagnosis": self.diagnosis.to_dict(),
            "_meta": {
                "responseTime": f"{self.response_time_ms}ms",
                "timestamp": format_timestamp(self.timestamp),
            },
        }
