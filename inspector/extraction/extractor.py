"""Full content profiles for the raw and rendered document variants."""

from inspector.extraction.hidden import detect_hidden_content
from inspector.extraction.semantic import extract_semantic_length
from inspector.extraction.text import extract_text, profile_rendered_text
from inspector.models import ContentProfile, RenderedDocument


def _merge_measurements(profile: ContentProfile, html: str) -> ContentProfile:
    hidden = detect_hidden_content(html)
    profile.semantic_text_length = extract_semantic_length(html)
    profile.hidden_text_length = hidden.hidden_text_length
    profile.hidden_elements_count = hidden.hidden_elements_count
    profile.hidden_findings = hidden.findings
    return profile


def build_profile(html: str) -> ContentProfile:
    """Profile of raw HTML: text, semantic and hidden measurements."""
    profile = extract_text(html)
    if not html or not isinstance(html, str):
        return profile
    return _merge_measurements(profile, html)


def build_rendered_profile(document: RenderedDocument) -> ContentProfile:
    """
    Profile of a rendered page.

    Text comes from the browser's ``innerText``; semantic and hidden
    measurements from the rendered body HTML.
    """
    profile = profile_rendered_text(document.body_text)
    if not document.body_text:
        return profile
    return _merge_measurements(profile, document.body_html or "")


def disabled_profile(reason: str) -> ContentProfile:
    """Placeholder for a render that did not happen."""
    return ContentProfile(full_text=f"(Rendering failed: {reason})")
