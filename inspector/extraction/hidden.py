"""Detection of text hidden from readers but present in the markup.

Four markers are scanned independently, in this order: inline
``display:none``, inline ``visibility:hidden``, ``aria-hidden="true"``
and the bare ``hidden`` attribute. Every matching element is counted;
only elements with more than ``MIN_HIDDEN_LENGTH`` characters of text
contribute to the hidden length.
"""

import re

import structlog

from inspector.extraction.cleaner import normalize_text, strip_non_content
from inspector.extraction.tokenizer import scan_elements
from inspector.models import (
    FINDING_PREVIEW_LENGTH,
    MAX_HIDDEN_FINDINGS,
    HiddenContentFinding,
    HiddenContentResult,
    HiddenKind,
)

logger = structlog.get_logger(__name__)

MIN_HIDDEN_LENGTH = 10

STYLE_MARKERS = {
    HiddenKind.DISPLAY_NONE: re.compile(r"display\s*:\s*none", re.I),
    HiddenKind.VISIBILITY_HIDDEN: re.compile(r"visibility\s*:\s*hidden", re.I),
    HiddenKind.ARIA_HIDDEN: re.compile(r"""aria-hidden\s*=\s*["']true["']""", re.I),
}

SCAN_ORDER = [
    HiddenKind.DISPLAY_NONE,
    HiddenKind.VISIBILITY_HIDDEN,
    HiddenKind.ARIA_HIDDEN,
    HiddenKind.HIDDEN_ATTRIBUTE,
]


def _classify(tag: str, start_tag: str, attrs: dict[str, str | None]) -> list[str]:
    kinds = [kind.value for kind, pattern in STYLE_MARKERS.items() if pattern.search(start_tag)]
    if "hidden" in attrs:
        kinds.append(HiddenKind.HIDDEN_ATTRIBUTE.value)
    return kinds


def detect_hidden_content(html: str) -> HiddenContentResult:
    """
    Measure hidden text in a document.

    Args:
        html: Raw HTML string

    Returns:
        HiddenContentResult with total hidden length, element count and up
        to three findings in scan order
    """
    result = HiddenContentResult()
    if not html or not isinstance(html, str):
        return result

    spans = scan_elements(strip_non_content(html), _classify)

    for kind in SCAN_ORDER:
        for span in spans:
            if span.key != kind.value:
                continue

            result.hidden_elements_count += 1

            content = normalize_text(span.text)
            if len(content) <= MIN_HIDDEN_LENGTH:
                continue

            result.hidden_text_length += len(content)
            if len(result.findings) < MAX_HIDDEN_FINDINGS:
                result.findings.append(
                    HiddenContentFinding(
                        kind=kind,
                        preview_text=content[:FINDING_PREVIEW_LENGTH],
                        length=len(content),
                    )
                )

    if result.findings:
        logger.debug(
            "hidden_content_found",
            hidden_elements=result.hidden_elements_count,
            hidden_length=result.hidden_text_length,
            examples=[finding.describe() for finding in result.findings],
        )

    return result
