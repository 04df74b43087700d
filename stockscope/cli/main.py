"""Main entry point for the stockscope command line interface."""

from __future__ import annotations

from pathlib import Path

import typer

from stockscope.core.logging import configure_logging

from .constants import OUTPUT_FORMATS
from .series import register as register_series_commands


def create_app() -> typer.Typer:
    """Create a Typer application instance for stockscope."""

    app = typer.Typer(add_completion=False, help="stockscope command line interface")

    @app.callback()
    def main(
        ctx: typer.Context,
        format: str = typer.Option(
            "table",
            "--format",
            "-f",
            help="Output format (table or jsonl).",
            show_default=True,
        ),
        output: Path | None = typer.Option(
            None,
            "--output",
            "-o",
            help="Write output to a file instead of stdout.",
        ),
        log_level: str = typer.Option(
            "WARNING",
            "--log-level",
            help="Logging level for structured logs on stderr.",
            show_default=True,
        ),
        no_color: bool = typer.Option(
            False,
            "--no-color",
            help="Disable colorized output for table format.",
        ),
    ) -> None:
        ctx.ensure_object(dict)
        normalized_format = format.strip().lower()
        if normalized_format not in OUTPUT_FORMATS:
            raise typer.BadParameter(
                f"Unsupported format '{format}'. Available formats: {', '.join(OUTPUT_FORMATS)}.",
                param_hint="--format",
            )

        ctx.obj.update(
            {
                "format": normalized_format,
                "output_path": output,
                "no_color": no_color,
            }
        )
        configure_logging(log_level.upper())

    register_series_commands(app)
    return app


app = create_app()


def run() -> None:
    """Console script entry point."""

    app()


if __name__ == "__main__":
    run()
