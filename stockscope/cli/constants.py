"""Exit codes and output formats shared by CLI commands."""

VALIDATION_EXIT_CODE = 10
IO_EXIT_CODE = 20

OUTPUT_FORMATS = ("table", "jsonl")

__all__ = ["IO_EXIT_CODE", "OUTPUT_FORMATS", "VALIDATION_EXIT_CODE"]
