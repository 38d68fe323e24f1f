"""Inspection pipeline: fetch, render, extract, measure, diagnose.

The raw fetch is the only step allowed to fail the analysis. Rendering
runs concurrently with the fetch and degrades to a disabled profile on
any error; everything after the fetch is wrapped into ``AnalysisError``.
"""

import asyncio
import time
from collections.abc import Awaitable, Callable
from datetime import UTC, datetime
from functools import partial

import structlog

from api.config import Settings, get_settings
from inspector.crawler.fetcher import Fetcher
from inspector.crawler.render import RendererConfig, render_document
from inspector.errors import AnalysisError, RenderError
from inspector.extraction.extractor import build_profile, build_rendered_profile, disabled_profile
from inspector.extraction.signals import analyze_seo_signals
from inspector.models import AnalysisReport, ContentProfile, RenderedDocument, RenderOutcome
from inspector.scoring.diagnosis import diagnose
from inspector.scoring.metrics import calculate_metrics

logger = structlog.get_logger(__name__)

Renderer = Callable[[str], Awaitable[RenderOutcome]]


class InspectionPipeline:
    """Runs one analysis per call; holds no state between calls."""

    def __init__(self, fetcher: Fetcher, renderer: Renderer | None = None):
        self.fetcher = fetcher
        self.renderer = renderer or render_document

    @classmethod
    def from_settings(cls, settings: Settings | None = None) -> "InspectionPipeline":
        """Build a pipeline from application settings."""
        settings = settings or get_settings()
        fetcher = Fetcher(
            user_agent=settings.fetch_user_agent,
            timeout=settings.fetch_timeout,
            proxy=settings.fetch_proxy,
        )
        renderer_config = RendererConfig(
            enabled=settings.render_enabled,
            user_agent=settings.fetch_user_agent,
            timeout=settings.render_timeout_ms,
            settle_delay=settings.render_settle_ms,
            viewport_width=settings.render_viewport_width,
            viewport_height=settings.render_viewport_height,
        )
        return cls(fetcher=fetcher, renderer=partial(render_document, config=renderer_config))

    async def _render(self, url: str) -> RenderOutcome:
        # Injected renderers may raise; the contract for callers is a value
        try:
            return await self.renderer(url)
        except RenderError as e:
            return e
        except Exception as e:
            logger.warning("render_failed", url=url, error=str(e))
            return RenderError(str(e))

    async def _build_profiles(
        self, html: str, outcome: RenderOutcome
    ) -> tuple[ContentProfile, ContentProfile]:
        if isinstance(outcome, RenderedDocument):
            html_profile, rendered_profile = await asyncio.gather(
                asyncio.to_thread(build_profile, html),
                asyncio.to_thread(build_rendered_profile, outcome),
            )
            return html_profile, rendered_profile

        html_profile = await asyncio.to_thread(build_profile, html)
        return html_profile, disabled_profile(outcome.message)

    async def analyze(self, url: str) -> AnalysisReport:
        """
        Analyze a single URL.

        Args:
            url: Absolute http(s) URL

        Returns:
            AnalysisReport

        Raises:
            FetchError: Raw HTML could not be fetched
            AnalysisError: Any other failure while building the report
        """
        start_time = time.perf_counter()
        log = logger.bind(url=url)
        log.info("analysis_started")

        render_task = asyncio.create_task(self._render(url))
        try:
            fetch_result = await self.fetcher.fetch(url)
        except BaseException:
            render_task.cancel()
            raise

        try:
            outcome = await render_task
            rendered_enabled = isinstance(outcome, RenderedDocument)
            if not rendered_enabled:
                log.info("render_disabled", reason=outcome.message)

            html_profile, rendered_profile = await self._build_profiles(fetch_result.html, outcome)
            log.info(
                "content_extracted",
                html_text_length=html_profile.text_length,
                rendered_text_length=rendered_profile.text_length,
                hidden_elements=html_profile.hidden_elements_count,
                hidden_examples=[finding.describe() for finding in html_profile.hidden_findings],
            )

            seo_signals = analyze_seo_signals(
                fetch_result.html,
                outcome.body_html if isinstance(outcome, RenderedDocument) else None,
            )

            metrics = calculate_metrics(html_profile, rendered_profile, rendered_enabled)
            rendered_text_length = (
                rendered_profile.text_length if rendered_enabled else html_profile.text_length
            )
            diagnosis = diagnose(
                metrics.content_coverage,
                html_profile.text_length,
                rendered_text_length,
                seo_signals,
            )
        except Exception as e:
            log.error("analysis_error", error=str(e), exc_info=e)
            raise AnalysisError(str(e)) from e

        response_time = int((time.perf_counter() - start_time) * 1000)
        log.info(
            "analysis_complete",
            risk_level=diagnosis.risk_level.value,
            issues=diagnosis.issues,
            content_coverage=round(metrics.content_coverage, 3),
            semantic_coverage=round(metrics.semantic_coverage, 3),
            response_time_ms=response_time,
        )

        return AnalysisReport(
            url=url,
            fetch=fetch_result,
            html_content=html_profile,
            rendered_content=rendered_profile,
            rendered_enabled=rendered_enabled,
            metrics=metrics,
            seo_signals=seo_signals,
            diagnosis=diagnosis,
            response_time_ms=response_time,
            timestamp=datetime.now(UTC),
        )


async def analyze_url(url: str, settings: Settings | None = None) -> AnalysisReport:
    """Convenience function to analyze a URL with application settings."""
    return await InspectionPipeline.from_settings(settings).analyze(url)
