"""stockscope core exception classes."""

from collections.abc import Sequence
from typing import Any

from stockscope.core.exceptions.codes import ErrorCode
from stockscope.core.models.columns import DATE_COLUMNS, PRICE_COLUMNS


class StockScopeError(Exception):
    """Base exception for stockscope."""

    def __init__(
        self,
        message: str,
        error_code: str = ErrorCode.GENERAL_ERROR.value,
        details: dict[str, Any] | None = None,
    ):
        """Initialise the exception.

        Args:
            message: human readable message
            error_code: one of the :class:`ErrorCode` values
            details: extra structured context
        """
        super().__init__(message)
        self.message = message
        self.error_code = error_code
        self.details = details or {}


class IngestionError(StockScopeError):
    """Base class for failures that reject a whole upload."""


class EmptyInputError(IngestionError):
    """The raw input contained no data rows."""

    def __init__(self, message: str = "Empty CSV file", details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.EMPTY_INPUT.value, details)


class NoValidDataError(IngestionError):
    """Rows were present but none of them normalized to a valid point."""

    def __init__(
        self,
        parsed_rows: int = 0,
        date_columns: Sequence[str] = DATE_COLUMNS,
        price_columns: Sequence[str] = PRICE_COLUMNS,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        super_details.update(
            {
                "parsed_rows": parsed_rows,
                "date_columns": list(date_columns),
                "price_columns": list(price_columns),
            }
        )
        message = f"Missing required columns: {date_columns[0]}, {price_columns[0]}"
        super().__init__(message, ErrorCode.NO_VALID_DATA.value, super_details)
        self.parsed_rows = parsed_rows


class CsvFormatError(IngestionError):
    """The input could not be read as delimited text."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message, ErrorCode.CSV_FORMAT_ERROR.value, details)


class UndefinedReturnError(StockScopeError):
    """Period return requested for a zero first price or an overflowing change."""

    def __init__(self, first_price: float = 0.0, details: dict[str, Any] | None = None):
        super_details = details or {}
        super_details["first_price"] = first_price
        super().__init__(
            "Period return is undefined for this series",
            ErrorCode.UNDEFINED_RETURN.value,
            super_details,
        )


class InsightError(StockScopeError):
    """Insight generation failed; never leaves the insight client."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.INSIGHT_UNAVAILABLE,
        status_code: int | None = None,
        details: dict[str, Any] | None = None,
    ):
        super_details = details or {}
        if status_code is not None:
            super_details["status_code"] = status_code
        super().__init__(message, error_code.value, super_details)
        self.status_code = status_code
