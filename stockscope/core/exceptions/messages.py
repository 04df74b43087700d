"""User-facing error message templates."""

from typing import Any

from stockscope.core.exceptions.codes import ErrorCode

INSIGHT_FALLBACK_MESSAGE = (
    "AI insights unavailable. Please configure OPENROUTER_API_KEY in your project settings and try again."
)


class ErrorMessageTemplate:
    """Maps error codes to actionable messages."""

    _templates: dict[ErrorCode, str] = {
        ErrorCode.GENERAL_ERROR: "An unknown error occurred",
        ErrorCode.INTERNAL_ERROR: "Internal server error",
        ErrorCode.CONFIGURATION_ERROR: "Configuration error: {reason}",
        ErrorCode.INPUT_READ_ERROR: "Unable to read '{path}': {reason}",
        ErrorCode.OUTPUT_WRITE_ERROR: "Unable to open '{path}' for writing: {reason}",
        ErrorCode.EMPTY_INPUT: "Empty CSV file",
        ErrorCode.NO_VALID_DATA: "Missing required columns: {date_column}, {price_column}",
        ErrorCode.CSV_FORMAT_ERROR: "Parse error: {reason}",
        ErrorCode.UNDEFINED_RETURN: "Period return is undefined for this series",
        ErrorCode.INSIGHT_UNAVAILABLE: INSIGHT_FALLBACK_MESSAGE,
        ErrorCode.INSIGHT_MISSING_KEY: INSIGHT_FALLBACK_MESSAGE,
        ErrorCode.INSIGHT_EMPTY_SERIES: INSIGHT_FALLBACK_MESSAGE,
        ErrorCode.INSIGHT_HTTP_ERROR: INSIGHT_FALLBACK_MESSAGE,
        ErrorCode.INSIGHT_NETWORK_ERROR: INSIGHT_FALLBACK_MESSAGE,
        ErrorCode.INSIGHT_BAD_RESPONSE: INSIGHT_FALLBACK_MESSAGE,
    }

    @classmethod
    def get_message(cls, error_code: ErrorCode, **kwargs: Any) -> str:
        """Render the template for ``error_code``.

        Missing template variables fall back to the generic message tagged
        with the error code.
        """
        template = cls._templates.get(error_code, cls._templates[ErrorCode.GENERAL_ERROR])
        try:
            return template.format(**kwargs)
        except KeyError:
            return f"{cls._templates[ErrorCode.GENERAL_ERROR]} (error code: {error_code.value})"


def format_error_response(error_code: ErrorCode | str, message: str | None = None, **kwargs: Any) -> dict[str, Any]:
    """Build the error payload shared by the CLI and the web layer.

    ``message`` defaults to the rendered template for ``error_code``; the
    keyword arguments fill the template and become the payload details.
    """
    error_code = ErrorCode(error_code)
    if message is None:
        message = ErrorMessageTemplate.get_message(error_code, **kwargs)

    return {
        "error": {
            "code": error_code.value,
            "message": message,
            "details": kwargs,
        }
    }
