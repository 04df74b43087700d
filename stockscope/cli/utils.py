"""Input, output and error helpers shared across CLI commands."""

from __future__ import annotations

import json
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from typing import Any

import typer

from stockscope.core.exceptions import ErrorCode, StockScopeError, format_error_response

from .constants import IO_EXIT_CODE
from .formatters import OutputFormatter, create_formatter


def read_input(path: Path) -> bytes:
    """Read a CSV file, exiting with the I/O code when it cannot be read."""

    try:
        return path.read_bytes()
    except OSError as exc:
        emit_error(ErrorCode.INPUT_READ_ERROR, path=str(path), reason=exc.strerror or str(exc))
        raise typer.Exit(code=IO_EXIT_CODE) from exc


@contextmanager
def open_formatter(ctx: typer.Context) -> Iterator[OutputFormatter]:
    """Yield the formatter chosen by the global options.

    Output goes to ``--output`` when given, otherwise to stdout.
    """

    options = ctx.ensure_object(dict)
    name = options.get("format", "table")
    no_color = bool(options.get("no_color", False))
    output_path: Path | None = options.get("output_path")

    if output_path is None:
        yield create_formatter(name, sys.stdout, no_color=no_color)
        return

    try:
        stream = open(output_path, "w", encoding="utf-8")
    except OSError as exc:
        emit_error(ErrorCode.OUTPUT_WRITE_ERROR, path=str(output_path), reason=exc.strerror or str(exc))
        raise typer.Exit(code=IO_EXIT_CODE) from exc
    with stream:
        yield create_formatter(name, stream, no_color=no_color)


def emit_error(error_code: ErrorCode | str, message: str | None = None, **details: Any) -> None:
    """Print the structured error payload to stderr."""

    payload = format_error_response(error_code, message, **details)
    typer.echo(json.dumps(payload, ensure_ascii=False, default=str), err=True)


def emit_exception(error: StockScopeError) -> None:
    emit_error(error.error_code, error.message, **error.details)


__all__ = ["emit_error", "emit_exception", "open_formatter", "read_input"]
