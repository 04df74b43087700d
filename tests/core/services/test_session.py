from __future__ import annotations

import asyncio

import httpx
import pytest

from stockscope.core.config import InsightConfig
from stockscope.core.exceptions import EmptyInputError, NoValidDataError
from stockscope.core.models import SeriesSnapshot, SeriesState, Statistics
from stockscope.core.services import AnalysisSession, InsightClient, SeriesStore

NEWER_CSV = "Date,Close\n2024-02-01,10\n2024-03-01,20\n"


def _completion(content: str) -> dict:
    return {"choices": [{"message": {"content": content}}]}


def _session(handler=None) -> AnalysisSession:
    handler = handler or (lambda request: httpx.Response(200, json=_completion("Steady climb.")))
    client = InsightClient(InsightConfig(), api_key="sk-test", transport=httpx.MockTransport(handler))
    return AnalysisSession(insight_client=client)


def test_load_updates_series_and_statistics(scenario_csv: str) -> None:
    session = _session()

    outcome = session.load(scenario_csv)

    assert outcome.applied
    assert outcome.ingestion is not None
    assert outcome.ingestion.parsed_rows == 3
    assert session.snapshot().state is SeriesState.LOADED
    assert session.statistics.min == 90
    assert session.statistics.period_return_percent == pytest.approx(66.6667, rel=1e-4)


def test_failed_load_keeps_previous_series(scenario_csv: str) -> None:
    session = _session()
    session.load(scenario_csv)
    before = session.snapshot()

    with pytest.raises(NoValidDataError):
        session.load("Day,Value\n2024-01-01,1\n")
    with pytest.raises(EmptyInputError):
        session.load("")

    assert session.snapshot().points == before.points
    assert session.statistics.max == 150


def test_clear_resets_statistics(scenario_csv: str) -> None:
    session = _session()
    session.load(scenario_csv)

    snapshot = session.clear()

    assert snapshot.state is SeriesState.EMPTY
    assert session.statistics == Statistics()


def test_shared_store_is_used() -> None:
    store = SeriesStore()
    session = AnalysisSession(store=store, insight_client=InsightClient(api_key=None))

    session.load(NEWER_CSV)

    assert store.current().points == session.snapshot().points


@pytest.mark.asyncio
async def test_stale_upload_does_not_overwrite_newer_upload(scenario_csv: str) -> None:
    session = _session()
    release_first = asyncio.Event()

    async def slow_read() -> str:
        await release_first.wait()
        return scenario_csv

    async def fast_read() -> str:
        return NEWER_CSV

    first = asyncio.create_task(session.upload(slow_read()))
    await asyncio.sleep(0)

    second = await session.upload(fast_read())
    release_first.set()
    stale = await first

    assert second.applied
    assert not stale.applied
    assert [point.price for point in session.snapshot().points] == [10, 20]
    assert session.statistics.max == 20


@pytest.mark.asyncio
async def test_clear_discards_in_flight_upload(scenario_csv: str) -> None:
    session = _session()
    release = asyncio.Event()

    async def slow_read() -> str:
        await release.wait()
        return scenario_csv

    pending = asyncio.create_task(session.upload(slow_read()))
    await asyncio.sleep(0)
    session.clear()
    release.set()
    outcome = await pending

    assert not outcome.applied
    assert session.snapshot().state is SeriesState.EMPTY


@pytest.mark.asyncio
async def test_refresh_insight_stores_latest_result(scenario_csv: str) -> None:
    session = _session()
    session.load(scenario_csv)

    result = await session.refresh_insight()

    assert result is not None
    assert result.ok
    assert session.latest_insight == result
    assert result.generation == session.snapshot().generation


@pytest.mark.asyncio
async def test_refresh_insight_without_series_returns_none() -> None:
    session = _session()

    assert await session.refresh_insight() is None
    assert session.latest_insight is None


@pytest.mark.asyncio
async def test_insight_for_replaced_series_is_not_kept(scenario_csv: str) -> None:
    session: AnalysisSession

    def handler(request: httpx.Request) -> httpx.Response:
        session.load(NEWER_CSV)
        return httpx.Response(200, json=_completion("About the old series."))

    session = _session(handler)
    session.load(scenario_csv)

    result = await session.refresh_insight()

    assert result is not None
    assert result.ok
    assert session.latest_insight is None


@pytest.mark.asyncio
async def test_new_series_drops_previous_insight(scenario_csv: str) -> None:
    session = _session()
    session.load(scenario_csv)
    await session.refresh_insight()

    session.load(NEWER_CSV)

    assert session.latest_insight is None


def test_huge_prices_keep_store_and_statistics_in_sync() -> None:
    session = _session()
    session.load("Date,Close\n2023-01-05,10\n2023-01-06,20\n")

    outcome = session.load("Date,Close\n2023-01-05,1e308\n2023-01-06,1e308\n")

    assert outcome.applied
    assert [point.price for point in session.snapshot().points] == [1e308, 1e308]
    assert session.statistics.max == 1e308
    assert session.statistics.mean == 1e308
    assert session.statistics.period_return_percent == 0.0


def test_statistics_match_store_when_a_listener_fails(scenario_csv: str) -> None:
    store = SeriesStore()

    def failing_listener(snapshot: SeriesSnapshot) -> None:
        raise RuntimeError("listener failed")

    store.subscribe(failing_listener)
    session = AnalysisSession(store=store, insight_client=InsightClient(api_key=None))

    with pytest.raises(RuntimeError):
        session.load(scenario_csv)

    assert session.snapshot().is_loaded
    assert session.statistics.min == 90
    assert session.statistics.max == 150


def test_export_uses_current_series(scenario_csv: str) -> None:
    session = _session()
    session.load(scenario_csv)

    assert [point.date for point in session.export()] == ["2023-01-05", "2023-01-10", "2023-06-01"]
