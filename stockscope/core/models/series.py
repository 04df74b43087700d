"""Series data models: points, snapshots and derived statistics."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from datetime import date


@dataclass(slots=True, frozen=True)
class StockPoint:
    """A single validated observation at calendar-day resolution."""

    date: date
    price: float


class SeriesState(str, Enum):
    """Lifecycle states of the series store."""

    EMPTY = "empty"
    LOADED = "loaded"


@dataclass(slots=True, frozen=True)
class SeriesSnapshot:
    """Read-only view of the stored series handed to consumers."""

    state: SeriesState
    generation: int
    points: tuple[StockPoint, ...] = ()

    @property
    def is_loaded(self) -> bool:
        return self.state is SeriesState.LOADED

    def __len__(self) -> int:
        return len(self.points)


@dataclass(slots=True, frozen=True)
class Statistics:
    """Aggregate metrics over a series.

    ``period_return_percent`` is ``None`` when the first price is zero and the
    return is therefore undefined.
    """

    min: float = 0.0
    max: float = 0.0
    mean: float = 0.0
    period_return_percent: float | None = 0.0

    def to_dict(self) -> dict[str, float | None]:
        return {
            "min": self.min,
            "max": self.max,
            "mean": self.mean,
            "period_return_percent": self.period_return_percent,
        }


__all__ = ["SeriesSnapshot", "SeriesState", "Statistics", "StockPoint"]
