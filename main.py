#!/usr/bin/env python3
"""
stockscope - stock price series analysis
Launcher script
"""

import argparse
import asyncio
from pathlib import Path

from loguru import logger

from stockscope.core.logging import configure_logging


def run_web_service() -> None:
    """Run the web service."""
    logger.info("Starting stockscope web service...")
    from stockscope.web.main import stockscope_main

    stockscope_main()


def run_library_mode(path: Path) -> None:
    """Analyze a CSV file through the library API."""
    from stockscope import AnalysisSession

    async def example() -> None:
        session = AnalysisSession()
        outcome = session.load(path.read_bytes())
        stats = session.statistics
        logger.info(
            "Loaded series",
            points=len(outcome.snapshot),
            minimum=stats.min,
            maximum=stats.max,
            mean=stats.mean,
            period_return_percent=stats.period_return_percent,
        )
        insight = await session.refresh_insight()
        if insight is not None:
            logger.info("Insight: {}", insight.text)

    asyncio.run(example())


def main() -> None:
    """Entry point."""
    configure_logging(level="INFO")

    parser = argparse.ArgumentParser(description="stockscope - stock price series analysis")
    parser.add_argument("mode", choices=["web", "library"], help="web (service) or library (analyze a file)")
    parser.add_argument("path", nargs="?", type=Path, help="CSV file for library mode")

    args = parser.parse_args()

    if args.mode == "web":
        run_web_service()
    elif args.path is None:
        parser.error("library mode requires a CSV path")
    else:
        run_library_mode(args.path)


if __name__ == "__main__":
    main()
