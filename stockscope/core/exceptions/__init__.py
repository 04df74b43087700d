"""Exception handling module."""

from stockscope.core.exceptions.base import (
    CsvFormatError,
    EmptyInputError,
    IngestionError,
    InsightError,
    NoValidDataError,
    StockScopeError,
    UndefinedReturnError,
)
from stockscope.core.exceptions.codes import ErrorCode
from stockscope.core.exceptions.messages import (
    INSIGHT_FALLBACK_MESSAGE,
    ErrorMessageTemplate,
    format_error_response,
)

__all__ = [
    "StockScopeError",
    "IngestionError",
    "EmptyInputError",
    "NoValidDataError",
    "CsvFormatError",
    "UndefinedReturnError",
    "InsightError",
    "ErrorCode",
    "ErrorMessageTemplate",
    "INSIGHT_FALLBACK_MESSAGE",
    "format_error_response",
]
