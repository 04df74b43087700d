"""Data models supporting the ingestion pipeline."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from typing import TYPE_CHECKING, TypeAlias

if TYPE_CHECKING:
    from stockscope.core.models.series import StockPoint

Scalar: TypeAlias = str | int | float | None
RawRecord: TypeAlias = Mapping[str, Scalar]


@dataclass(slots=True, frozen=True)
class NormalizationResult:
    """Points that survived normalization, in input order."""

    surviving_count: int
    points: tuple[StockPoint, ...]


@dataclass(slots=True, frozen=True)
class IngestionResult:
    """Result payload returned after ingesting one input."""

    points: tuple[StockPoint, ...]
    parsed_rows: int
    rejected_rows: int
    duration_ms: float

    @property
    def surviving_rows(self) -> int:
        return len(self.points)


__all__ = ["IngestionResult", "NormalizationResult", "RawRecord", "Scalar"]
