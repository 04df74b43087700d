from __future__ import annotations

import os
from datetime import date, timedelta

import pytest

from stockscope.core.config import StockScopeSettings
from stockscope.core.models import StockPoint
from stockscope.core.services import InsightClient


@pytest.mark.integration
@pytest.mark.asyncio
async def test_live_insight_request() -> None:
    if not os.environ.get("OPENROUTER_API_KEY"):
        pytest.skip("OPENROUTER_API_KEY is not set")

    client = InsightClient.from_settings(StockScopeSettings())
    start = date(2023, 1, 2)
    points = [StockPoint(date=start + timedelta(days=offset), price=100 + offset) for offset in range(30)]

    result = await client.generate(points)

    assert result.ok, result.error_message
    assert result.text
