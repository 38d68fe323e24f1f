"""Text cleaning primitives shared by the extractors.

These work on raw markup with regular expressions. Entity decoding is
limited to a fixed whitelist; anything else (``&copy;``, ``&#x27;``, ...)
is left in the text as-is.
"""

import re

# Elements whose content is never visible text
NON_CONTENT_PATTERNS = [
    re.compile(r"<script\b[^>]*>[\s\S]*?</script>", re.I),
    re.compile(r"<style\b[^>]*>[\s\S]*?</style>", re.I),
    re.compile(r"<noscript\b[^>]*>[\s\S]*?</noscript>", re.I),
    re.compile(r"<!--[\s\S]*?-->"),
]

# CDATA runs to its ]]>; other marked sections end at the first >
MARKED_SECTION_PATTERN = re.compile(
    r"<!\[CDATA\[[\s\S]*?(?:\]\]>|$)|<!\[[^>]*>?", re.IGNORECASE
)

TAG_PATTERN = re.compile(r"<[^>]+>")
WHITESPACE_PATTERN = re.compile(r"\s+")

HTML_ENTITIES = {
    "&nbsp;": " ",
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&mdash;": "—",
    "&ndash;": "–",
}

ENTITY_PATTERN = re.compile("|".join(re.escape(entity) for entity in HTML_ENTITIES))


def strip_non_content(html: str) -> str:
    """Replace script/style/noscript elements and comments with a space."""
    for pattern in NON_CONTENT_PATTERNS:
        html = pattern.sub(" ", html)
    return html


def strip_marked_sections(html: str) -> str:
    """Replace marked sections with a space. The tag parsers reject unknown ones."""
    return MARKED_SECTION_PATTERN.sub(" ", html)


def strip_tags(html: str) -> str:
    """Replace every remaining tag with a space."""
    return TAG_PATTERN.sub(" ", html)


def decode_entities(text: str) -> str:
    """Decode whitelisted entities in a single pass."""
    return ENTITY_PATTERN.sub(lambda match: HTML_ENTITIES[match.group(0)], text)


def collapse_whitespace(text: str) -> str:
    return WHITESPACE_PATTERN.sub(" ", text).strip()


def normalize_text(text: str) -> str:
    """Entity decoding plus whitespace collapse. Idempotent on entity-free text."""
    return collapse_whitespace(decode_entities(text))


def clean_fragment(fragment: str) -> str:
    """Turn a markup fragment into a single line of plain text."""
    return normalize_text(strip_tags(fragment))
