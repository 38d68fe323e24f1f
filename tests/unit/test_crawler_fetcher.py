"""Tests for the crawler HTTP fetcher."""

import httpx
import pytest

from inspector.crawler.fetcher import GOOGLEBOT_USER_AGENT, Fetcher
from inspector.errors import FetchError


def make_fetcher(handler, timeout: float = 30.0) -> Fetcher:
    """Fetcher wired to an in-process mock transport."""
    return Fetcher(
        user_agent=GOOGLEBOT_USER_AGENT,
        timeout=timeout,
        transport=httpx.MockTransport(handler),
    )


class TestFetcher:
    """Tests for Fetcher.fetch."""

    @pytest.mark.asyncio
    async def test_successful_fetch(self) -> None:
        """Test body, status, size and header filtering."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(
                200,
                html="<html><body><p>héllo</p></body></html>",
                headers={"X-Robots-Tag": "noindex", "Server": "nginx", "Set-Cookie": "a=b"},
            )

        result = await make_fetcher(handler).fetch("https://example.com/page")

        assert result.status == 200
        assert result.html == "<html><body><p>héllo</p></body></html>"
        assert result.html_size_bytes == len(result.html.encode("utf-8"))
        assert result.html_size_bytes == len(result.html) + 1
        assert result.headers == {
            "x-robots-tag": "noindex",
            "content-type": "text/html; charset=utf-8",
        }
        assert result.url == "https://example.com/page"

    @pytest.mark.asyncio
    async def test_sends_crawler_headers(self) -> None:
        seen: dict[str, str] = {}

        def handler(request: httpx.Request) -> httpx.Response:
            seen.update(request.headers)
            return httpx.Response(200, html="<p>ok</p>")

        await make_fetcher(handler).fetch("https://example.com/")

        assert seen["user-agent"] == GOOGLEBOT_USER_AGENT
        assert seen["accept"].startswith("text/html")
        assert seen["accept-language"] == "en-US,en;q=0.9"

    @pytest.mark.asyncio
    async def test_error_status_is_not_a_failure(self) -> None:
        """HTTP error codes are reported, not raised."""

        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(404, html="<h1>Not Found</h1>")

        result = await make_fetcher(handler).fetch("https://example.com/missing")

        assert result.status == 404
        assert result.html == "<h1>Not Found</h1>"

    @pytest.mark.asyncio
    async def test_follows_redirects(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.path == "/old":
                return httpx.Response(301, headers={"Location": "https://example.com/new"})
            return httpx.Response(200, html="<p>moved</p>")

        result = await make_fetcher(handler).fetch("https://example.com/old")

        assert result.status == 200
        assert result.final_url == "https://example.com/new"
        assert result.url == "https://example.com/old"

    @pytest.mark.asyncio
    async def test_timeout(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        with pytest.raises(FetchError) as exc_info:
            await make_fetcher(handler, timeout=5.0).fetch("https://example.com/")

        assert exc_info.value.message == "Failed to fetch URL: Request timed out after 5.0s"
        assert exc_info.value.code == "fetch_failed"

    @pytest.mark.asyncio
    async def test_connection_error(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("Connection refused", request=request)

        with pytest.raises(FetchError) as exc_info:
            await make_fetcher(handler).fetch("https://unreachable.example/")

        assert exc_info.value.message == "Failed to fetch URL: Connection refused"

    @pytest.mark.asyncio
    async def test_empty_body(self) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            return httpx.Response(204)

        result = await make_fetcher(handler).fetch("https://example.com/")

        assert result.html == ""
        assert result.html_size_bytes == 0
        assert result.headers == {}

    @pytest.mark.asyncio
    async def test_unsupported_scheme(self) -> None:
        """Non-HTTP schemes fail in the client before any connection is made."""
        fetcher = Fetcher(user_agent=GOOGLEBOT_USER_AGENT)

        with pytest.raises(FetchError) as exc_info:
            await fetcher.fetch("ftp://example.com/")

        assert exc_info.value.message.startswith("Failed to fetch URL: ")
        assert exc_info.value.code == "fetch_failed"
