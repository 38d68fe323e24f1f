"""Plain-text profile of an HTML document as a crawler reads it."""

import re

from inspector.extraction.cleaner import (
    collapse_whitespace,
    normalize_text,
    strip_non_content,
    strip_tags,
)
from inspector.models import PREVIEW_LENGTH, ContentProfile

# Segments shorter than this are navigation/button noise, not prose
MIN_PARAGRAPH_LENGTH = 20

SENTENCE_BOUNDARY = re.compile(r"[.!?]\s+")


def count_paragraphs(text: str) -> int:
    """
    Approximate paragraph count.

    Splits on sentence punctuation followed by whitespace and counts the
    pieces longer than ``MIN_PARAGRAPH_LENGTH``. A heuristic, not sentence
    segmentation.
    """
    return sum(
        1 for segment in SENTENCE_BOUNDARY.split(text) if len(segment.strip()) > MIN_PARAGRAPH_LENGTH
    )


def count_lines(text: str) -> int:
    """Count lines longer than ``MIN_PARAGRAPH_LENGTH`` (rendered ``innerText``)."""
    return sum(1 for line in text.split("\n") if len(line.strip()) > MIN_PARAGRAPH_LENGTH)


def extract_text(html: str) -> ContentProfile:
    """
    Extract readable text from raw HTML.

    Only the text fields of the profile are filled; semantic and hidden
    measurements come from their own scanners.

    Args:
        html: Raw HTML string

    Returns:
        ContentProfile with length, paragraph count, preview and full text
    """
    if not html or not isinstance(html, str):
        return ContentProfile()

    text = normalize_text(strip_tags(strip_non_content(html)))

    return ContentProfile(
        text_length=len(text),
        paragraph_count=count_paragraphs(text),
        preview_text=text[:PREVIEW_LENGTH],
        full_text=text,
    )


def profile_rendered_text(body_text: str) -> ContentProfile:
    """Text fields of a profile built from a browser's ``innerText``."""
    if not body_text:
        return ContentProfile()

    # innerText is already decoded
    text = collapse_whitespace(body_text)
    return ContentProfile(
        text_length=len(text),
        paragraph_count=count_lines(body_text),
        preview_text=text[:PREVIEW_LENGTH],
        full_text=text,
    )
