"""Series command implementations for the stockscope CLI."""

from __future__ import annotations

import asyncio
from pathlib import Path

import typer

from stockscope.core.exceptions.base import IngestionError
from stockscope.core.services.session import AnalysisSession, UploadOutcome
from stockscope.core.services.statistics import date_range_label

from .constants import VALIDATION_EXIT_CODE
from .utils import emit_exception, open_formatter, read_input

FILE_HELP = "CSV file with Date and Close (or Price) columns."


def register(app: typer.Typer) -> None:
    """Register the series commands on the provided application."""

    app.command("analyze")(analyze_command)
    app.command("points")(points_command)
    app.command("export")(export_command)


def get_session() -> AnalysisSession:
    """Factory hook for obtaining an :class:`AnalysisSession` instance."""

    return AnalysisSession()


def _load(path: Path) -> tuple[AnalysisSession, UploadOutcome]:
    source = read_input(path)
    session = get_session()
    try:
        outcome = session.load(source)
    except IngestionError as error:
        emit_exception(error)
        raise typer.Exit(code=VALIDATION_EXIT_CODE) from error
    return session, outcome


def analyze_command(
    ctx: typer.Context,
    path: Path = typer.Argument(..., help=FILE_HELP),
    insights: bool = typer.Option(False, "--insights", help="Also request an AI-written insight."),
) -> None:
    """Show summary statistics for the windowed series."""

    session, outcome = _load(path)
    stats = session.statistics
    ingestion = outcome.ingestion
    metrics: dict[str, object] = {
        "points": len(outcome.snapshot),
        "rejected_rows": ingestion.rejected_rows if ingestion else 0,
        "range": date_range_label(outcome.snapshot.points),
        **stats.to_dict(),
    }
    if insights:
        result = asyncio.run(session.refresh_insight())
        if result is not None:
            metrics["insight"] = result.text

    with open_formatter(ctx) as formatter:
        formatter.statistics(metrics)


def points_command(ctx: typer.Context, path: Path = typer.Argument(..., help=FILE_HELP)) -> None:
    """Print the windowed series in chronological order."""

    _, outcome = _load(path)
    with open_formatter(ctx) as formatter:
        formatter.points((point.date.isoformat(), point.price) for point in outcome.snapshot.points)


def export_command(ctx: typer.Context, path: Path = typer.Argument(..., help=FILE_HELP)) -> None:
    """Print the down-sampled payload sent to the insight service."""

    session, _ = _load(path)
    with open_formatter(ctx) as formatter:
        formatter.points((point.date, point.price) for point in session.export())


__all__ = ["analyze_command", "export_command", "get_session", "points_command", "register"]
