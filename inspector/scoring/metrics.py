"""Coverage and quality ratios between the raw and rendered documents.

All functions are pure and return values in [0, 1]. Rounding happens
only when a report is serialized.
"""

from inspector.models import ContentProfile, CoverageMetrics


def content_coverage(html_length: int, rendered_length: int) -> float:
    """Share of the rendered text already present in the raw HTML."""
    if rendered_length == 0:
        return 1.0 if html_length > 0 else 0.0
    return min(html_length / rendered_length, 1.0)


def semantic_ratio(semantic_length: int, text_length: int) -> float:
    """Share of a document's text that sits in semantic elements."""
    if text_length == 0:
        return 0.0
    return min(semantic_length / text_length, 1.0)


def hidden_ratio(hidden_length: int, text_length: int) -> float:
    """
    Hidden share of all text, hidden text included.

    The denominator adds the hidden length back on top of the visible
    text length, e.g. 50 hidden / (150 + 50) = 0.25.
    """
    if text_length == 0:
        return 0.0
    return min(hidden_length / (text_length + hidden_length), 1.0)


def calculate_metrics(
    html_profile: ContentProfile,
    rendered_profile: ContentProfile,
    rendered_enabled: bool,
) -> CoverageMetrics:
    """
    Derive all six ratios from the two profiles.

    When rendering is disabled the rendered side mirrors the raw HTML:
    coverage compares raw with itself, semantic coverage is fixed at 1.0
    and the rendered ratios equal the raw ones.
    """
    html_semantic = semantic_ratio(html_profile.semantic_text_length, html_profile.text_length)
    html_hidden = hidden_ratio(html_profile.hidden_text_length, html_profile.text_length)

    if not rendered_enabled:
        return CoverageMetrics(
            content_coverage=content_coverage(html_profile.text_length, html_profile.text_length),
            semantic_coverage=1.0,
            html_semantic_ratio=html_semantic,
            rendered_semantic_ratio=html_semantic,
            html_hidden_ratio=html_hidden,
            rendered_hidden_ratio=html_hidden,
        )

    return CoverageMetrics(
        content_coverage=content_coverage(html_profile.text_length, rendered_profile.text_length),
        semantic_coverage=content_coverage(
            html_profile.semantic_text_length, rendered_profile.semantic_text_length
        ),
        html_semantic_ratio=html_semantic,
        rendered_semantic_ratio=semantic_ratio(
            rendered_profile.semantic_text_length, rendered_profile.text_length
        ),
        html_hidden_ratio=html_hidden,
        rendered_hidden_ratio=hidden_ratio(
            rendered_profile.hidden_text_length, rendered_profile.text_length
        ),
    )
