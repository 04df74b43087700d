"""Core functionality for stockscope."""

from stockscope.core.exceptions import StockScopeError
from stockscope.core.models import SeriesSnapshot, SeriesState, Statistics, StockPoint
from stockscope.core.services import AnalysisSession, SeriesStore

__all__ = [
    "AnalysisSession",
    "SeriesSnapshot",
    "SeriesState",
    "SeriesStore",
    "Statistics",
    "StockPoint",
    "StockScopeError",
]
