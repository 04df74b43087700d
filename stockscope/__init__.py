"""stockscope - stock price series analysis

Turns a loosely structured (date, price) CSV into a validated, year-anchored
series with summary statistics and an optional AI-written insight.
"""

from stockscope.core.data.ingestion import IngestionConfig, ingest
from stockscope.core.exceptions import (
    CsvFormatError,
    EmptyInputError,
    NoValidDataError,
    StockScopeError,
    UndefinedReturnError,
)
from stockscope.core.models import SeriesSnapshot, SeriesState, Statistics, StockPoint
from stockscope.core.services import AnalysisSession, SeriesStore, compute_statistics, prepare_series

# Global session instance
_session: AnalysisSession | None = None


def get_session() -> AnalysisSession:
    """Return the process-wide analysis session."""
    global _session
    if _session is None:
        _session = AnalysisSession()
    return _session


def analyze(source: str | bytes) -> tuple[SeriesSnapshot, Statistics]:
    """Load ``source`` into the global session and return the series with its statistics.

    Examples:
        >>> import stockscope
        >>> series, stats = stockscope.analyze("Date,Close\\n2023-01-05,90\\n2023-06-01,150\\n")
        >>> round(stats.period_return_percent, 2)
        66.67
    """
    session = get_session()
    outcome = session.load(source)
    return outcome.snapshot, session.statistics


__version__ = "0.1.0"

__all__ = [
    "AnalysisSession",
    "CsvFormatError",
    "EmptyInputError",
    "IngestionConfig",
    "NoValidDataError",
    "SeriesSnapshot",
    "SeriesState",
    "SeriesStore",
    "Statistics",
    "StockPoint",
    "StockScopeError",
    "UndefinedReturnError",
    "analyze",
    "compute_statistics",
    "get_session",
    "ingest",
    "prepare_series",
]
