"""Standardized error codes for stockscope exceptions."""

from enum import Enum


class ErrorCode(str, Enum):
    """Error codes shared by the CLI, the web layer and the logs."""

    # General errors
    GENERAL_ERROR = "GENERAL_ERROR"
    INTERNAL_ERROR = "INTERNAL_ERROR"
    CONFIGURATION_ERROR = "CONFIGURATION_ERROR"

    # File I/O errors
    INPUT_READ_ERROR = "INPUT_READ_ERROR"
    OUTPUT_WRITE_ERROR = "OUTPUT_WRITE_ERROR"

    # Ingestion errors
    EMPTY_INPUT = "EMPTY_INPUT"
    NO_VALID_DATA = "NO_VALID_DATA"
    CSV_FORMAT_ERROR = "CSV_FORMAT_ERROR"

    # Statistics errors
    UNDEFINED_RETURN = "UNDEFINED_RETURN"

    # Insight errors
    INSIGHT_UNAVAILABLE = "INSIGHT_UNAVAILABLE"
    INSIGHT_MISSING_KEY = "INSIGHT_MISSING_KEY"
    INSIGHT_EMPTY_SERIES = "INSIGHT_EMPTY_SERIES"
    INSIGHT_HTTP_ERROR = "INSIGHT_HTTP_ERROR"
    INSIGHT_NETWORK_ERROR = "INSIGHT_NETWORK_ERROR"
    INSIGHT_BAD_RESPONSE = "INSIGHT_BAD_RESPONSE"


__all__ = ["ErrorCode"]
