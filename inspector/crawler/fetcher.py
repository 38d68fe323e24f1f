"""HTTP fetcher that requests pages the way a search crawler does."""

from datetime import UTC, datetime

import httpx
import structlog

from inspector.errors import FetchError
from inspector.models import FetchResult

logger = structlog.get_logger(__name__)

GOOGLEBOT_USER_AGENT = "Mozilla/5.0 (compatible; Googlebot/2.1; +http://www.google.com/bot.html)"

# Response headers relevant to indexing; everything else is dropped
SEO_HEADERS = ("x-robots-tag", "content-type", "content-language", "link")


class Fetcher:
    """Single-attempt HTML fetcher with a crawler user agent."""

    def __init__(
        self,
        user_agent: str,
        timeout: float = 30.0,
        proxy: str | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.user_agent = user_agent
        self.timeout = timeout
        self.proxy = proxy
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            timeout=self.timeout,
            follow_redirects=True,
            proxy=self.proxy,
            transport=self._transport,
        )

    async def fetch(self, url: str) -> FetchResult:
        """
        Fetch raw HTML for a URL.

        Any HTTP status is a successful fetch; only transport failures,
        timeouts and undecodable bodies raise.

        Args:
            url: The URL to fetch

        Returns:
            FetchResult with status, body size, SEO headers and body

        Raises:
            FetchError: The document could not be retrieved
        """
        start_time = datetime.now(UTC)

        try:
            async with self._client() as client:
                response = await client.get(
                    url,
                    headers={
                        "User-Agent": self.user_agent,
                        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
                        "Accept-Language": "en-US,en;q=0.9",
                    },
                )
                html = response.text
        except httpx.TimeoutException as e:
            logger.warning("fetch_timeout", url=url, timeout=self.timeout)
            raise FetchError(f"Failed to fetch URL: Request timed out after {self.timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeDecodeError, LookupError) as e:
            logger.warning("fetch_error", url=url, error=str(e))
            raise FetchError(f"Failed to fetch URL: {e}") from e

        headers = {name: response.headers[name] for name in SEO_HEADERS if response.headers.get(name)}
        fetch_time = int((datetime.now(UTC) - start_time).total_seconds() * 1000)

        logger.info(
            "fetch_complete",
            url=url,
            final_url=str(response.url),
            status=response.status_code,
            html_size=len(html.encode("utf-8")),
            fetch_time_ms=fetch_time,
        )

        return FetchResult(
            url=url,
            final_url=str(response.url),
            status=response.status_code,
            html_size_bytes=len(html.encode("utf-8")),
            headers=headers,
            html=html,
            fetch_time_ms=fetch_time,
        )
