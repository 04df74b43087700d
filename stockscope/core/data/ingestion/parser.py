"""Row parser turning delimited text into untyped records."""

from __future__ import annotations

import io

import pandas as pd
from loguru import logger

from stockscope.core.data.ingestion.config import IngestionConfig
from stockscope.core.data.ingestion.models import RawRecord, Scalar
from stockscope.core.exceptions.base import CsvFormatError, EmptyInputError


def decode_input(source: str | bytes, *, encoding: str = "utf-8-sig") -> str:
    """Return ``source`` as text, dropping a leading byte order mark."""

    if isinstance(source, bytes):
        try:
            return source.decode(encoding)
        except UnicodeDecodeError as exc:
            raise CsvFormatError(
                f"Input is not valid {encoding} text",
                details={"position": exc.start},
            ) from exc
    return source.removeprefix("\ufeff")


def _to_scalar(value: object) -> Scalar:
    if value is None or isinstance(value, (str, int, float)):
        return value
    return str(value)


def parse_rows(source: str | bytes, *, config: IngestionConfig | None = None) -> list[RawRecord]:
    """Parse ``source`` into one record per data row, preserving row order.

    The first line is the header. Blank lines are skipped and numeric cells
    are typed opportunistically; empty cells become ``None``. Lines with more
    fields than the header are dropped.

    Raises:
        EmptyInputError: no data rows remain after skipping blank lines.
        CsvFormatError: the text cannot be read as delimited text.
    """

    config = config or IngestionConfig()
    text = decode_input(source, encoding=config.encoding)
    if not text.strip():
        raise EmptyInputError()

    try:
        frame = pd.read_csv(
            io.StringIO(text),
            sep=config.delimiter,
            skip_blank_lines=True,
            index_col=False,
            on_bad_lines="skip",
            low_memory=False,
        )
    except pd.errors.EmptyDataError as exc:
        raise EmptyInputError() from exc
    except pd.errors.ParserError as exc:
        raise CsvFormatError(f"Parse error: {exc}") from exc

    if len(frame.index) == 0:
        raise EmptyInputError(details={"columns": [str(column) for column in frame.columns]})

    frame = frame.astype(object).where(frame.notna(), None)
    records: list[RawRecord] = [
        {str(key): _to_scalar(value) for key, value in row.items()}
        for row in frame.to_dict(orient="records")
    ]
    logger.debug("Parsed CSV input", rows=len(records), columns=len(frame.columns))
    return records


__all__ = ["decode_input", "parse_rows"]
