"""Document retrieval: raw HTML fetch and browser rendering."""

# Lazy imports to avoid requiring Playwright at import time
# Use explicit imports when needed:
# from inspector.crawler.fetcher import Fetcher
# from inspector.crawler.render import PageRenderer, RendererConfig, render_document

__all__ = [
    # Fetcher
    "Fetcher",
    "GOOGLEBOT_USER_AGENT",
    "SEO_HEADERS",
    # Render
    "PageRenderer",
    "RendererConfig",
    "render_document",
]
