"""Content extraction package."""

# Lazy imports - use explicit imports when needed:
# from inspector.extraction.text import extract_text
# from inspector.extraction.semantic import extract_semantic_length
# from inspector.extraction.hidden import detect_hidden_content
# from inspector.extraction.signals import analyze_seo_signals
# from inspector.extraction.extractor import build_profile, build_rendered_profile

__all__ = [
    # Text
    "extract_text",
    "count_paragraphs",
    # Semantic
    "extract_semantic_length",
    # Hidden
    "detect_hidden_content",
    # Signals
    "analyze_seo_signals",
    # Profiles
    "build_profile",
    "build_rendered_profile",
    "disabled_profile",
]
