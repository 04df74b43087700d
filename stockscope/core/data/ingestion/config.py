"""Configuration primitives for the ingestion service."""

from __future__ import annotations

from dataclasses import dataclass

from stockscope.core.exceptions.base import StockScopeError
from stockscope.core.exceptions.codes import ErrorCode
from stockscope.core.models.columns import DATE_COLUMNS, PRICE_COLUMNS


class IngestionConfigError(StockScopeError):
    """Raised when ingestion configuration is invalid."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorCode.CONFIGURATION_ERROR.value)


@dataclass(slots=True, frozen=True)
class IngestionConfig:
    """Runtime configuration controlling parsing and normalization."""

    date_columns: tuple[str, ...] = DATE_COLUMNS
    price_columns: tuple[str, ...] = PRICE_COLUMNS
    delimiter: str = ","
    encoding: str = "utf-8-sig"

    def __post_init__(self) -> None:
        if not self.date_columns:
            raise IngestionConfigError("date_columns must not be empty")
        if not self.price_columns:
            raise IngestionConfigError("price_columns must not be empty")
        if len(self.delimiter) != 1:
            raise IngestionConfigError("delimiter must be a single character")
