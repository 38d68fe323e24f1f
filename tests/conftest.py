"""Pytest configuration and fixtures."""

import os
from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient

# Set test environment before any app code runs; no browser in unit tests
os.environ["ENV"] = "test"
os.environ["RENDER_ENABLED"] = "false"

from inspector.models import FetchResult, RenderedDocument  # noqa: E402

SSR_HTML = """<!DOCTYPE html>
<html lang="en">
<head>
    <title>Server Rendered Article</title>
    <meta name="description" content="An article that is fully rendered on the server.">
    <link rel="canonical" href="https://example.com/article">
    <link rel="alternate" hreflang="en" href="https://example.com/article">
    <link rel="alternate" hreflang="de" href="https://example.com/de/article">
    <style>body { font-family: sans-serif; }</style>
    <script>window.analytics = { id: "UA-1" };</script>
</head>
<body>
    <main>
        <article>
            <h1>Why server rendering still matters for search</h1>
            <p>Search crawlers read the HTML your server sends before any script runs.</p>
            <p>Content that only appears after hydration may be indexed late or never.</p>
            <h2>What to check first</h2>
            <ul>
                <li>The title and meta description are present in the raw response.</li>
                <li>The main heading is part of the server markup.</li>
            </ul>
        </article>
    </main>
</body>
</html>
"""

SPA_SHELL_HTML = """<!DOCTYPE html>
<html>
<head>
    <title>App</title>
    <script src="/static/bundle.js"></script>
</head>
<body><div id="root"></div><noscript>You need to enable JavaScript.</noscript></body>
</html>
"""


@pytest.fixture(autouse=True)
def clear_settings_cache() -> None:
    """Use test env values, not stale or .env ones."""
    from api.config import get_settings

    get_settings.cache_clear()


@pytest.fixture
def ssr_html() -> str:
    return SSR_HTML


@pytest.fixture
def spa_shell_html() -> str:
    return SPA_SHELL_HTML


@pytest.fixture
def make_fetch_result():
    """Factory for FetchResult objects."""

    def _make(html: str, url: str = "https://example.com/", status: int = 200) -> FetchResult:
        return FetchResult(
            url=url,
            final_url=url,
            status=status,
            html_size_bytes=len(html.encode("utf-8")),
            headers={"content-type": "text/html; charset=utf-8"},
            html=html,
        )

    return _make


@pytest.fixture
def spa_rendered_document() -> RenderedDocument:
    """What the SPA shell looks like after its bundle has run."""
    paragraphs = [
        f"Paragraph {i} of the client rendered page explains a product feature in detail."
        for i in range(20)
    ]
    body_html = (
        '<div id="root"><main><h1>Client rendered product page</h1>'
        + "".join(f"<p>{text}</p>" for text in paragraphs)
        + "</main></div>"
    )
    body_text = "Client rendered product page\n" + "\n".join(paragraphs)
    return RenderedDocument(body_text=body_text, body_html=body_html)


@pytest.fixture
async def client() -> AsyncGenerator[AsyncClient, None]:
    """Create async test client."""
    from api.main import create_app

    async with AsyncClient(
        transport=ASGITransport(app=create_app()),
        base_url="http://test",
    ) as ac:
        yield ac
