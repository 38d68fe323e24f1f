"""Rule-based risk diagnosis.

Coverage rules run first and pick exactly one outcome. The signal
overlay then runs unconditionally; it can raise the risk level but never
lowers it. Issue codes keep their first-insertion order.
"""

from inspector.models import Diagnosis, IssueCode, RiskLevel, SEOSignalSet, SignalSource

# Raw text below this while rendered text exceeds RENDERED_TEXT_THRESHOLD
# means the main content only exists after JavaScript runs
MISSING_CONTENT_THRESHOLD = 300
RENDERED_TEXT_THRESHOLD = 1000

LOW_COVERAGE_THRESHOLD = 0.3
MODERATE_COVERAGE_THRESHOLD = 0.5

MISSING_TITLE_PREFIX = "Critical: Missing title tag. "

JS_RENDERED_SUMMARY = (
    "Main page content is not present in the initial HTML and only appears after "
    "JavaScript execution."
)
JS_RENDERED_RECOMMENDATION = (
    "Implement Server-Side Rendering (SSR) or Static Site Generation (SSG). Ensure critical "
    "page content (title, meta description, H1, primary text) is rendered directly in the "
    "HTML by the server."
)
LOW_COVERAGE_SUMMARY = (
    "Less than 30% of the final page content is present in the initial HTML response. "
    "Search engines may have difficulty indexing this content."
)
LOW_COVERAGE_RECOMMENDATION = (
    "Move more content into the initial HTML payload. Consider using SSR for above-the-fold "
    "content and critical SEO elements."
)
MODERATE_COVERAGE_SUMMARY = (
    "Approximately 30-50% of content is present in initial HTML. Some SEO risk exists but "
    "is manageable."
)
MODERATE_COVERAGE_RECOMMENDATION = (
    "Continue to improve initial HTML content coverage. Prioritize rendering critical content "
    "server-side."
)
GOOD_COVERAGE_SUMMARY = (
    "Good content coverage in initial HTML. Search engines should have no difficulty "
    "indexing this page."
)
GOOD_COVERAGE_RECOMMENDATION = (
    "Current implementation is SEO-friendly. Maintain this approach for new pages."
)

_RISK_ORDER = {RiskLevel.LOW: 0, RiskLevel.MEDIUM: 1, RiskLevel.HIGH: 2}


class IssueList:
    """Append-only, insertion-ordered list of issue codes."""

    def __init__(self) -> None:
        self._codes: list[str] = []

    def add(self, code: IssueCode) -> None:
        self._codes.append(code.value)

    def add_once(self, code: IssueCode) -> None:
        if code.value not in self._codes:
            self._codes.append(code.value)

    def __contains__(self, code: object) -> bool:
        if isinstance(code, IssueCode):
            code = code.value
        return code in self._codes

    def __len__(self) -> int:
        return len(self._codes)

    def to_list(self) -> list[str]:
        return list(self._codes)


def escalate(current: RiskLevel, candidate: RiskLevel) -> RiskLevel:
    """The higher of two risk levels."""
    return candidate if _RISK_ORDER[candidate] > _RISK_ORDER[current] else current


def diagnose(
    coverage: float,
    html_text_length: int,
    rendered_text_length: int,
    signals: SEOSignalSet,
) -> Diagnosis:
    """
    Turn coverage and signals into a risk verdict.

    Args:
        coverage: Content coverage ratio (raw / rendered)
        html_text_length: Text length of the raw HTML
        rendered_text_length: Text length after rendering (raw length when
            rendering was unavailable)
        signals: SEO signals of the page

    Returns:
        Diagnosis with risk level, ordered issues, summary and recommendation
    """
    issues = IssueList()

    if (
        html_text_length < MISSING_CONTENT_THRESHOLD
        and rendered_text_length > RENDERED_TEXT_THRESHOLD
    ):
        risk_level = RiskLevel.HIGH
        issues.add(IssueCode.MAIN_CONTENT_MISSING_IN_HTML)
        issues.add(IssueCode.CONTENT_RENDERED_BY_JS)
        summary = JS_RENDERED_SUMMARY
        recommendation = JS_RENDERED_RECOMMENDATION
    elif coverage < LOW_COVERAGE_THRESHOLD:
        risk_level = RiskLevel.MEDIUM
        issues.add(IssueCode.LOW_CONTENT_COVERAGE)
        issues.add(IssueCode.HEAVY_CLIENT_SIDE_RENDERING)
        summary = LOW_COVERAGE_SUMMARY
        recommendation = LOW_COVERAGE_RECOMMENDATION
    elif coverage < MODERATE_COVERAGE_THRESHOLD:
        risk_level = RiskLevel.MEDIUM
        issues.add(IssueCode.MODERATE_CONTENT_COVERAGE)
        summary = MODERATE_COVERAGE_SUMMARY
        recommendation = MODERATE_COVERAGE_RECOMMENDATION
    else:
        risk_level = RiskLevel.LOW
        summary = GOOD_COVERAGE_SUMMARY
        recommendation = GOOD_COVERAGE_RECOMMENDATION

    # Signal overlay
    if not signals.title.exists:
        risk_level = escalate(risk_level, RiskLevel.HIGH)
        issues.add_once(IssueCode.MISSING_TITLE_TAG)
        summary = MISSING_TITLE_PREFIX + summary

    if not signals.meta_description.exists:
        issues.add_once(IssueCode.MISSING_META_DESCRIPTION)

    if not signals.h1.exists:
        issues.add_once(IssueCode.MISSING_H1)
    elif signals.h1.source == SignalSource.RENDERED:
        issues.add_once(IssueCode.H1_ONLY_IN_RENDERED_DOM)

    return Diagnosis(
        risk_level=risk_level,
        issues=issues.to_list(),
        summary=summary,
        recommendation=recommendation,
    )


def failure_diagnosis(code: IssueCode, summary: str, recommendation: str) -> Diagnosis:
    """HIGH-risk stub attached to failed analyses."""
    return Diagnosis(
        risk_level=RiskLevel.HIGH,
        issues=[code.value],
        summary=summary,
        recommendation=recommendation,
    )
