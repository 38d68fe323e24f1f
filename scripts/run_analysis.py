#!/usr/bin/env python
"""Run a single SEO inspection from the command line.

Fetches the raw HTML the way a crawler sees it, renders the page in
headless Chromium, and prints coverage, signals and the diagnosis.

Usage:
    python scripts/run_analysis.py https://example.com
    python scripts/run_analysis.py https://example.com --no-render
    python scripts/run_analysis.py https://example.com --json > report.json
"""

import argparse
import asyncio
import json
import sys

# Add project root to path
sys.path.insert(0, ".")


def print_report(report) -> None:
    """Human-readable summary of an AnalysisReport."""
    metrics = report.metrics.rounded()
    signals = report.seo_signals
    diagnosis = report.diagnosis

    print(f"\n{'='*60}")
    print("SEO Inspector")
    print(f"URL: {report.url}")
    print(f"{'='*60}\n")

    print("[1/4] Fetch")
    print(f"      Status: {report.fetch.status}")
    print(f"      HTML size: {report.fetch.html_size_bytes:,} bytes")
    for name, value in report.fetch.headers.items():
        print(f"      {name}: {value}")

    print("\n[2/4] Content")
    print(
        f"      Raw HTML: {report.html_content.text_length:,} chars, "
        f"{report.html_content.paragraph_count} paragraphs"
    )
    if report.rendered_enabled:
        print(
            f"      Rendered: {report.rendered_content.text_length:,} chars, "
            f"{report.rendered_content.paragraph_count} paragraphs"
        )
    else:
        print(f"      Rendered: {report.rendered_content.full_text}")
    print(f"      Hidden elements: {report.html_content.hidden_elements_count}")

    print("\n[3/4] Metrics")
    print(f"      Content coverage:  {metrics.content_coverage:.1%}")
    print(f"      Semantic coverage: {metrics.semantic_coverage:.1%}")
    print(f"      Semantic ratio:    {metrics.html_semantic_ratio:.1%} (raw)")
    print(f"      Hidden ratio:      {metrics.html_hidden_ratio:.1%} (raw)")

    def _signal(signal) -> str:
        if not signal.exists:
            return "missing"
        return f"found ({signal.source.value})"

    print("\n[4/4] Signals")
    print(f"      Title:            {_signal(signals.title)}")
    print(f"      Meta description: {_signal(signals.meta_description)}")
    print(f"      H1:               {_signal(signals.h1)}")
    print(f"      Canonical:        {'found' if signals.canonical else 'missing'}")
    print(f"      Hreflang links:   {signals.hreflang_count}")

    print(f"\n{'='*60}")
    print(f"RISK: {diagnosis.risk_level.value}")
    if diagnosis.issues:
        print(f"Issues: {', '.join(diagnosis.issues)}")
    print(f"\n{diagnosis.summary}")
    print(f"\nRecommendation: {diagnosis.recommendation}")
    print(f"\nCompleted in {report.response_time_ms}ms")
    print(f"{'='*60}\n")


async def main(url: str, render: bool = True, as_json: bool = False) -> int:
    from api.config import get_settings
    from api.logging import setup_logging
    from inspector.errors import InspectorError
    from inspector.pipeline import InspectionPipeline

    settings = get_settings().model_copy(update={"render_enabled": render})
    setup_logging()

    pipeline = InspectionPipeline.from_settings(settings)
    try:
        report = await pipeline.analyze(url)
    except InspectorError as e:
        print(f"ERROR [{e.code}]: {e.message}", file=sys.stderr)
        return 1

    if as_json:
        print(json.dumps(report.to_dict(), indent=2))
    else:
        print_report(report)
    return 0


if __name__ == "__main__":
    parser = argparse.ArgumentParser(description="Inspect a URL for crawler-visible content")
    parser.add_argument("url", help="URL to analyze")
    parser.add_argument("--no-render", action="store_true", help="Skip browser rendering")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    args = parser.parse_args()

    url = args.url
    if not url.startswith(("http://", "https://")):
        url = "https://" + url

    sys.exit(asyncio.run(main(url, render=not args.no_render, as_json=args.json)))
