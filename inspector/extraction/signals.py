"""On-page SEO signal detection."""

from bs4 import BeautifulSoup, Tag

from inspector.extraction.cleaner import strip_marked_sections
from inspector.models import SEOSignalSet, Signal, SignalSource


def _attr_values(tag: Tag, name: str) -> list[str]:
    """Attribute as a list of lowercase tokens (``rel`` is multi-valued)."""
    value = tag.get(name)
    if value is None:
        return []
    if isinstance(value, str):
        value = value.split()
    return [token.lower() for token in value]


def _has_title(soup: BeautifulSoup) -> bool:
    title = soup.find("title")
    return bool(title and title.get_text(strip=True))


def _has_meta_description(soup: BeautifulSoup) -> bool:
    for meta in soup.find_all("meta"):
        if "description" not in _attr_values(meta, "name"):
            continue
        content = meta.get("content")
        if isinstance(content, str) and content.strip():
            return True
    return False


def _has_canonical(soup: BeautifulSoup) -> bool:
    return any("canonical" in _attr_values(link, "rel") for link in soup.find_all("link"))


def _count_hreflang(soup: BeautifulSoup) -> int:
    return sum(
        1
        for link in soup.find_all("link")
        if isinstance(link.get("hreflang"), str) and link.get("hreflang").strip()
    )


def analyze_seo_signals(html: str, rendered_html: str | None = None) -> SEOSignalSet:
    """
    Detect canonical SEO signals.

    Everything is read from the raw HTML. The only exception is H1, which
    falls back to the rendered HTML when the raw document has none.

    Args:
        html: Raw HTML as served to crawlers
        rendered_html: Body HTML after rendering, if available

    Returns:
        SEOSignalSet
    """
    soup = BeautifulSoup(strip_marked_sections(html or ""), "html.parser")
    signals = SEOSignalSet()

    if _has_title(soup):
        signals.title = Signal(exists=True, source=SignalSource.HTML)

    if _has_meta_description(soup):
        signals.meta_description = Signal(exists=True, source=SignalSource.HTML)

    if soup.find("h1") is not None:
        signals.h1 = Signal(exists=True, source=SignalSource.HTML)
    elif rendered_html:
        rendered_soup = BeautifulSoup(strip_marked_sections(rendered_html), "html.parser")
        if rendered_soup.find("h1") is not None:
            signals.h1 = Signal(exists=True, source=SignalSource.RENDERED)

    signals.canonical = _has_canonical(soup)
    signals.hreflang_count = _count_hreflang(soup)

    return signals
