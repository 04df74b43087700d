"""
Web API data models
Request/response envelopes for the FastAPI service.
"""

from __future__ import annotations

from datetime import UTC, datetime
from datetime import date as CalendarDate
from typing import Any

from pydantic import BaseModel, Field

from stockscope.core.models import InsightResult, SeriesSnapshot, Statistics


class APIResponse(BaseModel):
    """Standard API response envelope."""

    success: bool = Field(..., description="Whether the request succeeded")
    data: Any | None = Field(None, description="Response payload")
    message: str | None = Field(None, description="Human readable message")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Response timestamp")
    request_id: str | None = Field(None, description="Request id for tracing")


class ErrorResponse(BaseModel):
    """Error response envelope."""

    success: bool = Field(False, description="Request failed")
    error: str = Field(..., description="Error type")
    code: str = Field(..., description="Error code")
    message: str = Field(..., description="Error message")
    details: dict[str, Any] | None = Field(None, description="Structured error details")
    timestamp: datetime = Field(default_factory=lambda: datetime.now(UTC), description="Error timestamp")
    request_id: str | None = Field(None, description="Request id for tracing")


class PointModel(BaseModel):
    """A single (date, price) observation."""

    date: CalendarDate
    price: float


class SeriesModel(BaseModel):
    """Current series as seen by the chart consumer."""

    state: str
    generation: int
    count: int
    range: str = ""
    points: list[PointModel] = Field(default_factory=list)

    @classmethod
    def from_snapshot(cls, snapshot: SeriesSnapshot, range_label: str = "") -> SeriesModel:
        return cls(
            state=snapshot.state.value,
            generation=snapshot.generation,
            count=len(snapshot),
            range=range_label,
            points=[PointModel(date=point.date, price=point.price) for point in snapshot.points],
        )


class StatisticsModel(BaseModel):
    """Summary statistics of the current series."""

    min: float
    max: float
    mean: float
    period_return_percent: float | None = Field(None, description="None when the first price is zero")

    @classmethod
    def from_statistics(cls, statistics: Statistics) -> StatisticsModel:
        return cls(**statistics.to_dict())


class InsightModel(BaseModel):
    """Insight text with its provenance."""

    text: str
    ok: bool
    generation: int
    error_code: str | None = None

    @classmethod
    def from_result(cls, result: InsightResult) -> InsightModel:
        return cls(text=result.text, ok=result.ok, generation=result.generation, error_code=result.error_code)
