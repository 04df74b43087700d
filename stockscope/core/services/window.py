"""Sorting and year-anchored window filtering of a series."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from datetime import date

from stockscope.core.models.series import StockPoint


def sort_points(points: Iterable[StockPoint]) -> tuple[StockPoint, ...]:
    """Stable sort by date; points sharing a date keep their input order."""

    return tuple(sorted(points, key=lambda point: point.date))


def window_bounds(points: Sequence[StockPoint]) -> tuple[date, date] | None:
    """Return ``(January 1 of the first point's year, last point's date)``."""

    if not points:
        return None
    first_date = points[0].date
    return date(first_date.year, 1, 1), points[-1].date


def filter_window(points: Sequence[StockPoint]) -> tuple[StockPoint, ...]:
    """Keep the points inside the analysis window of an ascending series."""

    bounds = window_bounds(points)
    if bounds is None:
        return ()
    anchor, last_date = bounds
    return tuple(point for point in points if anchor <= point.date <= last_date)


def prepare_series(points: Iterable[StockPoint]) -> tuple[StockPoint, ...]:
    """Sort ``points`` and restrict them to the analysis window."""

    return filter_window(sort_points(points))


__all__ = ["filter_window", "prepare_series", "sort_points", "window_bounds"]
