"""Tests for SEO signal detection."""

from inspector.extraction.signals import analyze_seo_signals
from inspector.models import SignalSource


class TestTitleAndDescription:
    """Tests for title and meta description detection."""

    def test_full_document(self, ssr_html: str) -> None:
        signals = analyze_seo_signals(ssr_html)

        assert signals.title.exists
        assert signals.title.source == SignalSource.HTML
        assert signals.meta_description.exists
        assert signals.h1.exists
        assert signals.h1.source == SignalSource.HTML
        assert signals.canonical
        assert signals.hreflang_count == 2

    def test_empty_title(self) -> None:
        """A title with only whitespace does not count."""
        signals = analyze_seo_signals("<head><title>   </title></head>")

        assert not signals.title.exists
        assert signals.title.source is None

    def test_meta_description_case_insensitive(self) -> None:
        html = '<meta name="Description" content="Summary of the page">'
        assert analyze_seo_signals(html).meta_description.exists

    def test_meta_description_attribute_order(self) -> None:
        html = '<meta content="Summary of the page" name="description">'
        assert analyze_seo_signals(html).meta_description.exists

    def test_meta_description_empty_content(self) -> None:
        html = '<meta name="description" content="  ">'
        assert not analyze_seo_signals(html).meta_description.exists

    def test_other_meta_ignored(self) -> None:
        html = '<meta name="keywords" content="seo, crawl">'
        assert not analyze_seo_signals(html).meta_description.exists


class TestHeadingSignal:
    """Tests for H1 detection with the rendered fallback."""

    def test_h1_missing_everywhere(self) -> None:
        signals = analyze_seo_signals("<p>No heading</p>", "<p>Still no heading</p>")

        assert not signals.h1.exists
        assert signals.h1.source is None

    def test_h1_from_rendered(self) -> None:
        signals = analyze_seo_signals('<div id="root"></div>', "<h1>Rendered heading</h1>")

        assert signals.h1.exists
        assert signals.h1.source == SignalSource.RENDERED

    def test_raw_h1_preferred(self) -> None:
        signals = analyze_seo_signals("<h1>Raw</h1>", "<h1>Rendered</h1>")
        assert signals.h1.source == SignalSource.HTML

    def test_h1_with_attributes(self) -> None:
        signals = analyze_seo_signals('<H1 class="hero">Title</H1>')
        assert signals.h1.exists

    def test_no_rendered_html(self) -> None:
        assert not analyze_seo_signals("<div></div>", None).h1.exists


class TestLinkSignals:
    """Tests for canonical and hreflang detection."""

    def test_canonical_rel_tokens(self) -> None:
        html = '<link rel="Canonical" href="https://example.com/">'
        assert analyze_seo_signals(html).canonical

    def test_no_canonical(self) -> None:
        html = '<link rel="stylesheet" href="/style.css">'
        assert not analyze_seo_signals(html).canonical

    def test_hreflang_count(self) -> None:
        html = (
            '<link rel="alternate" hreflang="en" href="/en">'
            '<link rel="alternate" hreflang="x-default" href="/">'
            '<link rel="alternate" hreflang="" href="/blank">'
            '<a hreflang="fr" href="/fr">French</a>'
        )
        assert analyze_seo_signals(html).hreflang_count == 2

    def test_empty_document(self) -> None:
        signals = analyze_seo_signals("")

        assert not signals.title.exists
        assert not signals.meta_description.exists
        assert not signals.h1.exists
        assert not signals.canonical
        assert signals.hreflang_count == 0

    def test_serialization(self) -> None:
        data = analyze_seo_signals('<title>T</title><link rel="canonical" href="/">').to_dict()

        assert data == {
            "title": {"exists": True, "source": "html"},
            "metaDescription": {"exists": False, "source": None},
            "h1": {"exists": False, "source": None},
            "canonical": {"exists": True},
            "hreflangCount": 0,
        }


class TestMarkedSections:
    """Marked sections do not stop signal detection."""

    def test_unknown_marked_section(self) -> None:
        html = "<head><![x[ junk ]]><title>Still found</title></head><body><h1>Heading</h1></body>"
        signals = analyze_seo_signals(html)

        assert signals.title.exists
        assert signals.h1.exists

    def test_marked_section_in_rendered_html(self) -> None:
        signals = analyze_seo_signals("<div></div>", "<![x[ junk ]]><h1>Rendered</h1>")
        assert signals.h1.source == SignalSource.RENDERED
