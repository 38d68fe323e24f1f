"""Tests for plain text extraction and content profiles."""

from inspector.extraction.cleaner import normalize_text
from inspector.extraction.extractor import build_profile, build_rendered_profile, disabled_profile
from inspector.extraction.text import (
    count_lines,
    count_paragraphs,
    extract_text,
    profile_rendered_text,
)
from inspector.models import RenderedDocument


class TestExtractText:
    """Tests for extract_text function."""

    def test_basic_extraction(self) -> None:
        result = extract_text("<html><body><h1>Hello</h1><p>world</p></body></html>")

        assert result.full_text == "Hello world"
        assert result.text_length == 11

    def test_excludes_non_content(self, ssr_html: str) -> None:
        result = extract_text(ssr_html)

        assert "window.analytics" not in result.full_text
        assert "font-family" not in result.full_text
        assert "Server Rendered Article" in result.full_text
        assert "Search crawlers read the HTML" in result.full_text

    def test_noscript_excluded(self, spa_shell_html: str) -> None:
        result = extract_text(spa_shell_html)

        assert result.full_text == "App"

    def test_entities_decoded(self) -> None:
        result = extract_text("<p>Salt&nbsp;&amp;&nbsp;pepper &mdash; &copy;</p>")
        assert result.full_text == "Salt & pepper — &copy;"

    def test_preview_is_prefix(self) -> None:
        html = "<p>" + "word " * 100 + "</p>"
        result = extract_text(html)

        assert len(result.preview_text) == 200
        assert result.full_text.startswith(result.preview_text)

    def test_idempotent_normalization(self, ssr_html: str) -> None:
        """Re-normalizing the extracted text changes nothing."""
        text = extract_text(ssr_html).full_text
        assert normalize_text(text) == text

    def test_empty_input(self) -> None:
        result = extract_text("")

        assert result.text_length == 0
        assert result.paragraph_count == 0
        assert result.preview_text == ""
        assert result.full_text == ""

    def test_non_string_input(self) -> None:
        assert extract_text(None).text_length == 0  # type: ignore[arg-type]


class TestCountParagraphs:
    """Tests for the paragraph heuristic."""

    def test_counts_long_segments(self) -> None:
        text = (
            "Short. This one is definitely longer than twenty characters. "
            "Another sentence that is long enough!"
        )
        assert count_paragraphs(text) == 2

    def test_no_punctuation(self) -> None:
        assert count_paragraphs("one long run of text without any sentence ending") == 1

    def test_empty(self) -> None:
        assert count_paragraphs("") == 0

    def test_count_lines(self) -> None:
        text = "Nav\nA line of innerText that is long enough\n\n  Footer  \nAnother line long enough to count"
        assert count_lines(text) == 2


class TestRenderedProfile:
    """Tests for profiles built from rendered pages."""

    def test_profile_rendered_text(self) -> None:
        result = profile_rendered_text("Title\n\n  First line of rendered body text\n")

        assert result.full_text == "Title First line of rendered body text"
        assert result.paragraph_count == 1

    def test_rendered_text_not_entity_decoded(self) -> None:
        """innerText is already decoded; literal entity text stays."""
        assert profile_rendered_text("Use &amp; in HTML").full_text == "Use &amp; in HTML"

    def test_build_rendered_profile(self, spa_rendered_document: RenderedDocument) -> None:
        profile = build_rendered_profile(spa_rendered_document)

        assert profile.text_length > 1000
        assert profile.paragraph_count == 21
        assert profile.semantic_text_length > 0
        assert profile.hidden_elements_count == 0

    def test_build_rendered_profile_empty_body(self) -> None:
        profile = build_rendered_profile(RenderedDocument(body_text="", body_html="<div></div>"))

        assert profile.text_length == 0
        assert profile.semantic_text_length == 0


class TestBuildProfile:
    """Tests for the combined raw HTML profile."""

    def test_includes_all_measurements(self) -> None:
        html = (
            "<main><p>Visible paragraph text that is long enough.</p>"
            '<div style="display:none">Hidden promotional text</div></main>'
        )
        profile = build_profile(html)

        assert profile.text_length > 0
        assert profile.semantic_text_length > 0
        assert profile.hidden_elements_count == 1
        assert profile.hidden_text_length == len("Hidden promotional text")
        assert len(profile.hidden_findings) == 1

    def test_hidden_findings_not_serialized(self) -> None:
        profile = build_profile('<div hidden>Hidden promotional text</div>')
        assert "hiddenFindings" not in profile.to_dict()

    def test_disabled_profile(self) -> None:
        profile = disabled_profile("Timeout rendering https://example.com")

        assert profile.text_length == 0
        assert profile.semantic_text_length == 0
        assert profile.preview_text == ""
        assert profile.full_text == "(Rendering failed: Timeout rendering https://example.com)"
