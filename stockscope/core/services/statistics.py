"""Statistics engine computing aggregate metrics over a series."""

from __future__ import annotations

from collections.abc import Sequence
from math import fsum, isfinite

from stockscope.core.exceptions.base import UndefinedReturnError
from stockscope.core.models.series import Statistics, StockPoint

_DATE_LABEL_FORMAT = "%b %d, %Y"


def period_return_percent(points: Sequence[StockPoint]) -> float:
    """Percent change from the first to the last point in current order.

    An empty series has a return of ``0``.

    Raises:
        UndefinedReturnError: the first price is zero, or the change is too
            large to represent as a finite float.
    """

    if not points:
        return 0.0
    first = points[0].price
    last = points[-1].price
    if first == 0:
        raise UndefinedReturnError(first_price=first, details={"last_price": last})
    change = (last - first) / first * 100
    if not isfinite(change):
        raise UndefinedReturnError(first_price=first, details={"last_price": last})
    return change


def _mean(prices: Sequence[float], low: float, high: float) -> float:
    # scaled into [-1, 1] so the sum of finite prices stays finite
    scale = max(abs(low), abs(high))
    if scale == 0:
        return 0.0
    mean = fsum(price / scale for price in prices) / len(prices) * scale
    return min(max(mean, low), high)


def compute_statistics(points: Sequence[StockPoint]) -> Statistics:
    """Compute min, max, mean and period return for ``points``.

    Every metric is ``0`` for an empty series. The period return is ``None``
    when it is undefined: a zero first price or a non-finite change.
    """

    if not points:
        return Statistics()

    prices = [point.price for point in points]
    low = min(prices)
    high = max(prices)
    try:
        change: float | None = period_return_percent(points)
    except UndefinedReturnError:
        change = None

    return Statistics(min=low, max=high, mean=_mean(prices, low, high), period_return_percent=change)


def date_range_label(points: Sequence[StockPoint]) -> str:
    """Human readable ``start -> end`` label; empty for an empty series."""

    if not points:
        return ""
    start = points[0].date.strftime(_DATE_LABEL_FORMAT)
    end = points[-1].date.strftime(_DATE_LABEL_FORMAT)
    return f"{start} -> {end}"


__all__ = ["compute_statistics", "date_range_label", "period_return_percent"]
