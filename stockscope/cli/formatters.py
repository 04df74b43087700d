"""Renderers for statistics and point listings."""

from __future__ import annotations

import json
from abc import ABC, abstractmethod
from collections.abc import Iterable, Mapping, Sequence
from typing import TextIO

from rich.box import SIMPLE
from rich.console import Console
from rich.table import Table

STATISTICS_COLUMNS = ("metric", "value")
POINT_COLUMNS = ("date", "price")

Row = Sequence[object]


class OutputFormatter(ABC):
    """Writes command results to ``stream``."""

    def __init__(self, stream: TextIO) -> None:
        self.stream = stream

    def statistics(self, metrics: Mapping[str, object]) -> None:
        """One ``metric, value`` row per entry, in mapping order."""

        self.write(STATISTICS_COLUMNS, list(metrics.items()))

    def points(self, points: Iterable[tuple[str, float]]) -> None:
        """One ``date, price`` row per point."""

        self.write(POINT_COLUMNS, list(points))

    @abstractmethod
    def write(self, columns: Sequence[str], rows: Sequence[Row]) -> None:
        """Emit ``rows`` under ``columns``."""


class TableFormatter(OutputFormatter):
    """Rich table; prices and metrics shown with two decimals."""

    def __init__(self, stream: TextIO, *, no_color: bool = False) -> None:
        super().__init__(stream)
        self.no_color = no_color

    def write(self, columns: Sequence[str], rows: Sequence[Row]) -> None:
        console = Console(file=self.stream, color_system=None if self.no_color else "auto", no_color=self.no_color)
        table = Table(box=SIMPLE)
        for column in columns:
            table.add_column(column, header_style="" if self.no_color else "bold")
        for row in rows:
            table.add_row(*(_cell(value) for value in row))
        console.print(table)
        if not rows:
            console.print("No data available.")


class JSONLFormatter(OutputFormatter):
    """One JSON object per row."""

    def write(self, columns: Sequence[str], rows: Sequence[Row]) -> None:
        for row in rows:
            self.stream.write(json.dumps(dict(zip(columns, row)), ensure_ascii=False, default=str))
            self.stream.write("\n")
        self.stream.flush()


def _cell(value: object) -> str:
    if value is None:
        return "-"
    if isinstance(value, float):
        return f"{value:,.2f}"
    return str(value)


def create_formatter(name: str, stream: TextIO, *, no_color: bool = False) -> OutputFormatter:
    """Instantiate the formatter registered under ``name``."""

    if name == "table":
        return TableFormatter(stream, no_color=no_color)
    if name == "jsonl":
        return JSONLFormatter(stream)
    raise ValueError(f"Unsupported format '{name}'. Available formats: table, jsonl.")


__all__ = ["JSONLFormatter", "OutputFormatter", "TableFormatter", "create_formatter"]
