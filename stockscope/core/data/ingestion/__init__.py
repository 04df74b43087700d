"""Ingestion pipeline: row parsing and point normalization."""

from __future__ import annotations

from stockscope.core.data.ingestion.config import IngestionConfig, IngestionConfigError
from stockscope.core.data.ingestion.models import IngestionResult, NormalizationResult, RawRecord
from stockscope.core.data.ingestion.normalizer import (
    normalize_record,
    normalize_records,
    parse_date,
    parse_price,
    resolve_field,
)
from stockscope.core.data.ingestion.parser import decode_input, parse_rows
from stockscope.core.data.ingestion.service import ingest

__all__ = [
    "IngestionConfig",
    "IngestionConfigError",
    "IngestionResult",
    "NormalizationResult",
    "RawRecord",
    "decode_input",
    "ingest",
    "normalize_record",
    "normalize_records",
    "parse_date",
    "parse_price",
    "parse_rows",
    "resolve_field",
]
