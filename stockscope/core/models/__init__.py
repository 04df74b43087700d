"""Core data models."""

from .columns import DATE_COLUMNS, PRICE_COLUMNS
from .insight import InsightPoint, InsightResult
from .series import SeriesSnapshot, SeriesState, Statistics, StockPoint

__all__ = [
    "DATE_COLUMNS",
    "PRICE_COLUMNS",
    "InsightPoint",
    "InsightResult",
    "SeriesSnapshot",
    "SeriesState",
    "Statistics",
    "StockPoint",
]
