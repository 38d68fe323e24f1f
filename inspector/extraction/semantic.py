"""Semantic text measurement.

Counts how much text lives inside tags search engines treat as content
(``main, article, section, p, h1-h6, li``), skipping elements hidden on
their own opening tag.
"""

from inspector.extraction.cleaner import normalize_text, strip_non_content
from inspector.extraction.tokenizer import scan_elements

SEMANTIC_TAGS = frozenset(
    ["main", "article", "section", "p", "h1", "h2", "h3", "h4", "h5", "h6", "li"]
)

# Checked as plain substrings of the opening tag
HIDDEN_MARKERS = (
    "display:none",
    "display: none",
    "visibility:hidden",
    "visibility: hidden",
    'aria-hidden="true"',
)

# Shorter chunks are usually buttons and menu labels
MIN_CHUNK_LENGTH = 20


def _is_hidden(start_tag: str) -> bool:
    return any(marker in start_tag for marker in HIDDEN_MARKERS)


def _classify(tag: str, start_tag: str, attrs: dict[str, str | None]) -> list[str]:
    return [tag] if tag in SEMANTIC_TAGS else []


def extract_semantic_chunks(html: str) -> list[str]:
    """Visible text chunks from semantic elements, one per element."""
    if not html or not isinstance(html, str):
        return []

    chunks: list[str] = []
    for span in scan_elements(strip_non_content(html), _classify):
        if _is_hidden(span.start_tag):
            continue
        content = normalize_text(span.text)
        if len(content) > MIN_CHUNK_LENGTH:
            chunks.append(content)
    return chunks


def extract_semantic_length(html: str) -> int:
    """
    Length of semantic text in a document.

    Each tag name is scanned on its own, so a paragraph inside ``<main>``
    counts toward both. Only the length is reported.
    """
    return len(" ".join(extract_semantic_chunks(html)))
