"""Analysis session orchestrating uploads, statistics and insights."""

from __future__ import annotations

from collections.abc import Awaitable
from dataclasses import dataclass

from loguru import logger

from stockscope.core.data.ingestion import IngestionConfig, IngestionResult, ingest
from stockscope.core.logging import log_context
from stockscope.core.models.insight import InsightPoint, InsightResult
from stockscope.core.models.series import SeriesSnapshot, Statistics
from stockscope.core.services.insights import InsightClient, export_points
from stockscope.core.services.series_store import SeriesStore
from stockscope.core.services.statistics import compute_statistics


@dataclass(slots=True, frozen=True)
class UploadOutcome:
    """What happened to one upload attempt."""

    applied: bool
    generation: int
    snapshot: SeriesSnapshot
    ingestion: IngestionResult | None = None


class AnalysisSession:
    """Owns one :class:`SeriesStore` and derives everything consumers need.

    Statistics are recomputed on every series change and the latest insight is
    dropped whenever the series it describes is replaced or cleared.
    """

    def __init__(
        self,
        *,
        store: SeriesStore | None = None,
        insight_client: InsightClient | None = None,
        ingestion_config: IngestionConfig | None = None,
    ) -> None:
        self.store = store or SeriesStore()
        self.insight_client = insight_client or InsightClient.from_settings()
        self.ingestion_config = ingestion_config or IngestionConfig()
        self._insight: InsightResult | None = None
        self._on_series_change(self.store.current())
        self.store.subscribe(self._on_series_change)

    def _on_series_change(self, snapshot: SeriesSnapshot) -> None:
        self._statistics = (snapshot.generation, compute_statistics(snapshot.points))
        self._insight = None

    def snapshot(self) -> SeriesSnapshot:
        return self.store.current()

    @property
    def statistics(self) -> Statistics:
        snapshot = self.snapshot()
        generation, statistics = self._statistics
        if generation != snapshot.generation:
            self._on_series_change(snapshot)
            _, statistics = self._statistics
        return statistics

    @property
    def latest_insight(self) -> InsightResult | None:
        return self._insight

    def export(self) -> list[InsightPoint]:
        """Insight payload for the current series."""

        return export_points(self.snapshot().points, max_points=self.insight_client.config.max_points)

    def load(self, source: str | bytes, *, generation: int | None = None) -> UploadOutcome:
        """Ingest ``source`` synchronously and replace the series.

        Ingestion errors propagate and leave the store untouched.
        """

        if generation is None:
            generation = self.store.issue_generation()
        with log_context(generation=generation):
            result = ingest(source, config=self.ingestion_config)
            applied = self.store.replace(result.points, generation)
        return UploadOutcome(applied=applied, generation=generation, snapshot=self.snapshot(), ingestion=result)

    async def upload(self, read: Awaitable[str | bytes]) -> UploadOutcome:
        """Await ``read`` and load its result unless a newer upload superseded it."""

        generation = self.store.issue_generation()
        with log_context(generation=generation):
            source = await read
            if not self.store.is_current(generation):
                logger.warning("Ignoring stale upload", latest_generation=self.store.latest_generation)
                return UploadOutcome(applied=False, generation=generation, snapshot=self.snapshot())
        return self.load(source, generation=generation)

    def clear(self) -> SeriesSnapshot:
        self.store.clear()
        return self.snapshot()

    async def refresh_insight(self) -> InsightResult | None:
        """Request an insight for the current series.

        Returns ``None`` when there is no series. A result for a series that
        was replaced while the request was in flight is returned to the caller
        but not kept as the session's latest insight.
        """

        snapshot = self.snapshot()
        if not snapshot.is_loaded:
            return None

        result = await self.insight_client.generate(snapshot.points, generation=snapshot.generation)
        if self.snapshot().generation == snapshot.generation:
            self._insight = result
        else:
            logger.warning("Dropping insight for superseded series", generation=snapshot.generation)
        return result


__all__ = ["AnalysisSession", "UploadOutcome"]
