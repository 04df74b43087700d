"""Logging utilities for the analysis pipeline."""

from stockscope.core.logging.config import LogConfig
from stockscope.core.logging.logger import (
    StructuredLogger,
    configure_logging,
    current_trace_id,
    log_context,
    logger,
)

__all__ = [
    "LogConfig",
    "StructuredLogger",
    "configure_logging",
    "current_trace_id",
    "log_context",
    "logger",
]
