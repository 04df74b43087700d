"""Point normalizer mapping raw records to validated stock points."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from datetime import date
from math import isfinite

import pandas as pd

from stockscope.core.data.ingestion.config import IngestionConfig
from stockscope.core.data.ingestion.models import NormalizationResult, RawRecord, Scalar
from stockscope.core.models.series import StockPoint

_LEADING_NUMBER = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def resolve_field(record: RawRecord, candidates: Sequence[str]) -> Scalar:
    """Return the value of the first candidate key present with a value."""

    for key in candidates:
        value = record.get(key)
        if value is not None:
            return value
    return None


def parse_date(value: Scalar) -> date | None:
    """Parse ``value`` permissively into a calendar date.

    Time-of-day and timezone information are discarded. Numeric cells are
    read from their digits, so ``20240105`` is 5 January 2024.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, float):
        if not isfinite(value) or not value.is_integer():
            return None
        value = int(value)

    text = str(value).strip()
    if not text:
        return None
    try:
        parsed = pd.to_datetime(text, errors="coerce")
    except (ValueError, TypeError, OverflowError):
        return None
    if pd.isna(parsed):
        return None
    return parsed.date()


def parse_price(value: Scalar) -> float | None:
    """Parse ``value`` as a finite real number.

    Text is read up to the end of its leading decimal literal, so
    ``"101.5 USD"`` is 101.5 and ``"1_000"`` is 1. Text without a leading
    number is rejected.
    """

    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, (int, float)):
        price = float(value)
    else:
        match = _LEADING_NUMBER.match(value.lstrip())
        if match is None:
            return None
        price = float(match.group())
    return price if isfinite(price) else None


def normalize_record(record: RawRecord, *, config: IngestionConfig | None = None) -> StockPoint | None:
    """Map a record to a :class:`StockPoint`, or ``None`` when it is rejected."""

    config = config or IngestionConfig()
    price = parse_price(resolve_field(record, config.price_columns))
    if price is None:
        return None
    point_date = parse_date(resolve_field(record, config.date_columns))
    if point_date is None:
        return None
    return StockPoint(date=point_date, price=price)


def normalize_records(
    records: Iterable[RawRecord], *, config: IngestionConfig | None = None
) -> NormalizationResult:
    """Normalize a batch; rejected rows are dropped without error."""

    config = config or IngestionConfig()
    points = tuple(
        point for point in (normalize_record(record, config=config) for record in records) if point is not None
    )
    return NormalizationResult(surviving_count=len(points), points=points)


__all__ = ["normalize_record", "normalize_records", "parse_date", "parse_price", "resolve_field"]
