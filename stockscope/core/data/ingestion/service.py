"""Ingestion service running parse and normalization as one step."""

from __future__ import annotations

from time import perf_counter

from loguru import logger

from stockscope.core.data.ingestion.config import IngestionConfig
from stockscope.core.data.ingestion.models import IngestionResult
from stockscope.core.data.ingestion.normalizer import normalize_records
from stockscope.core.data.ingestion.parser import parse_rows
from stockscope.core.exceptions.base import NoValidDataError
from stockscope.core.exceptions.codes import ErrorCode


def ingest(source: str | bytes, *, config: IngestionConfig | None = None) -> IngestionResult:
    """Parse and normalize ``source`` into unsorted stock points.

    Raises:
        EmptyInputError: the input has no data rows.
        NoValidDataError: no row produced a valid point.
        CsvFormatError: the input is not readable delimited text.
    """

    config = config or IngestionConfig()
    start = perf_counter()

    records = parse_rows(source, config=config)
    normalized = normalize_records(records, config=config)
    rejected = len(records) - normalized.surviving_count

    if normalized.surviving_count == 0:
        logger.bind(error_code=ErrorCode.NO_VALID_DATA.value).warning(
            "No valid points in input", parsed_rows=len(records)
        )
        raise NoValidDataError(
            parsed_rows=len(records),
            date_columns=config.date_columns,
            price_columns=config.price_columns,
        )

    duration_ms = (perf_counter() - start) * 1000
    logger.info(
        "Ingested input",
        parsed_rows=len(records),
        surviving_rows=normalized.surviving_count,
        rejected_rows=rejected,
    )
    return IngestionResult(
        points=normalized.points,
        parsed_rows=len(records),
        rejected_rows=rejected,
        duration_ms=duration_ms,
    )


__all__ = ["ingest"]
