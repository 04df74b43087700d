from __future__ import annotations

from datetime import date

import pytest

from stockscope.core.exceptions import UndefinedReturnError
from stockscope.core.models import Statistics, StockPoint
from stockscope.core.services import compute_statistics, date_range_label, period_return_percent, prepare_series


def _series(*pairs: tuple[str, float]) -> tuple[StockPoint, ...]:
    return prepare_series(StockPoint(date=date.fromisoformat(day), price=price) for day, price in pairs)


def test_statistics_for_scenario_series() -> None:
    points = _series(("2023-01-10", 100), ("2023-06-01", 150), ("2023-01-05", 90))

    stats = compute_statistics(points)

    assert stats.min == 90
    assert stats.max == 150
    assert stats.mean == pytest.approx(340 / 3)
    assert stats.period_return_percent == pytest.approx(66.6667, rel=1e-4)


def test_empty_series_has_zero_metrics() -> None:
    assert compute_statistics(()) == Statistics(min=0.0, max=0.0, mean=0.0, period_return_percent=0.0)
    assert period_return_percent(()) == 0.0


def test_single_point_series() -> None:
    stats = compute_statistics(_series(("2023-04-01", 42.5)))

    assert stats == Statistics(min=42.5, max=42.5, mean=42.5, period_return_percent=0.0)


def test_zero_first_price_leaves_return_undefined() -> None:
    points = _series(("2023-01-02", 0), ("2023-01-03", 10))

    stats = compute_statistics(points)

    assert stats.period_return_percent is None
    assert stats.min == 0
    assert stats.max == 10
    with pytest.raises(UndefinedReturnError) as exc_info:
        period_return_percent(points)
    assert exc_info.value.error_code == "UNDEFINED_RETURN"
    assert exc_info.value.details["first_price"] == 0


def test_negative_prices_are_accepted() -> None:
    stats = compute_statistics(_series(("2023-01-02", -4), ("2023-01-03", -2)))

    assert stats.min == -4
    assert stats.max == -2
    assert stats.period_return_percent == pytest.approx(-50.0)


def test_mean_stays_between_min_and_max() -> None:
    points = _series(*[(f"2023-01-{day:02d}", 0.1) for day in range(1, 11)])

    stats = compute_statistics(points)

    assert stats.min <= stats.mean <= stats.max


def test_date_range_label() -> None:
    points = _series(("2023-06-01", 150), ("2023-01-05", 90))

    assert date_range_label(points) == "Jan 05, 2023 -> Jun 01, 2023"
    assert date_range_label(()) == ""


def test_statistics_to_dict() -> None:
    stats = Statistics(min=1.0, max=3.0, mean=2.0, period_return_percent=None)

    assert stats.to_dict() == {"min": 1.0, "max": 3.0, "mean": 2.0, "period_return_percent": None}


def test_mean_of_huge_prices_stays_finite() -> None:
    stats = compute_statistics(_series(("2023-01-05", 1e308), ("2023-01-06", 1e308), ("2023-01-07", 1.5e308)))

    assert stats.min == 1e308
    assert stats.max == 1.5e308
    assert stats.min <= stats.mean <= stats.max
    assert stats.period_return_percent == pytest.approx(50.0)


def test_overflowing_return_is_undefined() -> None:
    points = _series(("2023-01-05", 1e-320), ("2023-01-06", 1e300))

    stats = compute_statistics(points)

    assert stats.period_return_percent is None
    with pytest.raises(UndefinedReturnError):
        period_return_percent(points)
