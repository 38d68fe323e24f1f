"""Browser rendering of pages with Playwright.

Rendering is optional enrichment. ``PageRenderer.render`` raises
``RenderError`` on any failure; ``render_document`` turns that into a
value so callers never have to catch it.
"""

from dataclasses import dataclass
from types import TracebackType

import structlog
from playwright.async_api import Browser, Playwright, async_playwright
from playwright.async_api import Error as PlaywrightError
from playwright.async_api import TimeoutError as PlaywrightTimeout

from inspector.crawler.fetcher import GOOGLEBOT_USER_AGENT
from inspector.errors import RenderError
from inspector.models import RenderedDocument, RenderOutcome

logger = structlog.get_logger(__name__)

BODY_SCRIPT = """() => ({
    bodyText: document.body ? document.body.innerText : "",
    bodyHTML: document.body ? document.body.innerHTML : "",
})"""


@dataclass
class RendererConfig:
    """Configuration for the renderer."""

    enabled: bool = True
    user_agent: str = GOOGLEBOT_USER_AGENT

    # Playwright settings
    timeout: int = 30000  # ms navigation timeout
    settle_delay: int = 2000  # ms to wait after network idle
    viewport_width: int = 1920
    viewport_height: int = 1080


class PageRenderer:
    """Renders pages using a headless Chromium."""

    def __init__(self, config: RendererConfig | None = None):
        self.config = config or RendererConfig()
        self._playwright: Playwright | None = None
        self._browser: Browser | None = None

    async def __aenter__(self) -> "PageRenderer":
        await self.start()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc_val: BaseException | None,
        exc_tb: TracebackType | None,
    ) -> None:
        await self.stop()

    async def start(self) -> None:
        """Launch the browser."""
        if self._browser is None:
            self._playwright = await async_playwright().start()
            self._browser = await self._playwright.chromium.launch(
                headless=True,
                args=["--no-sandbox", "--disable-setuid-sandbox"],
            )

    async def stop(self) -> None:
        """Close the browser and the Playwright driver."""
        if self._browser:
            await self._browser.close()
            self._browser = None
        if self._playwright:
            await self._playwright.stop()
            self._playwright = None

    async def render(self, url: str) -> RenderedDocument:
        """
        Render a page and return its body after scripts settle.

        Args:
            url: URL to render

        Returns:
            RenderedDocument with body innerText and innerHTML

        Raises:
            RenderError: Navigation timed out or the browser failed
        """
        try:
            await self.start()
            context = await self._browser.new_context(  # type: ignore[union-attr]
                user_agent=self.config.user_agent,
                viewport={
                    "width": self.config.viewport_width,
                    "height": self.config.viewport_height,
                },
            )
            try:
                page = await context.new_page()
                await page.goto(url, wait_until="networkidle", timeout=self.config.timeout)
                # Lazy-loaded content
                await page.wait_for_timeout(self.config.settle_delay)
                body = await page.evaluate(BODY_SCRIPT)
            finally:
                await context.close()
        except PlaywrightTimeout as e:
            raise RenderError(f"Timeout rendering {url}") from e
        except PlaywrightError as e:
            raise RenderError(str(e)) from e

        return RenderedDocument(body_text=body["bodyText"] or "", body_html=body["bodyHTML"] or "")


async def render_document(url: str, config: RendererConfig | None = None) -> RenderOutcome:
    """
    Best-effort render of a single URL.

    Never raises: every failure comes back as a ``RenderError`` value.
    """
    config = config or RendererConfig()
    if not config.enabled:
        return RenderError("Rendering disabled by configuration")

    logger.info("render_started", url=url)
    try:
        async with PageRenderer(config) as renderer:
            document = await renderer.render(url)
    except RenderError as e:
        logger.warning("render_failed", url=url, error=e.message)
        return e
    except Exception as e:
        # Browser launch problems, missing binaries, resource exhaustion
        logger.warning("render_failed", url=url, error=str(e), error_type=type(e).__name__)
        return RenderError(str(e))

    logger.info("render_complete", url=url, text_length=len(document.body_text))
    return document
