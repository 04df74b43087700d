"""Series services: windowing, statistics, storage, insights and sessions."""

from stockscope.core.services.insights import InsightClient, export_points
from stockscope.core.services.series_store import SeriesListener, SeriesStore
from stockscope.core.services.session import AnalysisSession, UploadOutcome
from stockscope.core.services.statistics import compute_statistics, date_range_label, period_return_percent
from stockscope.core.services.window import filter_window, prepare_series, sort_points, window_bounds

__all__ = [
    "AnalysisSession",
    "InsightClient",
    "SeriesListener",
    "SeriesStore",
    "UploadOutcome",
    "compute_statistics",
    "date_range_label",
    "export_points",
    "filter_window",
    "period_return_percent",
    "prepare_series",
    "sort_points",
    "window_bounds",
]
