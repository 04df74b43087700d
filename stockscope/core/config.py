"""
Configuration management for stockscope.

Settings come from environment variables (``STOCKSCOPE_`` prefix, nested
groups separated by ``__``), an optional ``.env`` file, or a TOML file.
The OpenRouter credential is read from ``OPENROUTER_API_KEY``.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from pydantic import AliasChoices, BaseModel, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class InsightConfig(BaseModel):
    """Configuration for the insight text-generation service."""

    base_url: str = Field("https://openrouter.ai/api/v1", description="Chat completions API root")
    model: str = Field("openai/gpt-oss-20b:free", description="Model identifier")
    timeout: float = Field(30.0, gt=0, description="Request timeout in seconds")
    max_points: int = Field(366, ge=1, description="Most recent points sent per request")
    max_tokens: int = Field(220, ge=1, description="Completion token cap")
    temperature: float = Field(0.4, ge=0, le=2, description="Sampling temperature")
    app_title: str = Field("AI Stock Visualizer", description="X-Title header value")
    referer: str = Field("http://localhost", description="HTTP-Referer header value")


class LoggingConfig(BaseModel):
    """Configuration for logging."""

    level: str = Field("INFO", description="Log level")
    file_path: Path | None = Field(None, description="Optional JSON lines log file")


class StockScopeSettings(BaseSettings):
    """Main stockscope configuration."""

    model_config = SettingsConfigDict(
        env_prefix="STOCKSCOPE_",
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        populate_by_name=True,
        extra="ignore",
    )

    debug: bool = Field(False, description="Enable debug mode")
    host: str = Field("0.0.0.0", description="Web service bind host")
    port: int = Field(8000, description="Web service bind port")
    openrouter_api_key: str | None = Field(
        None,
        validation_alias=AliasChoices("OPENROUTER_API_KEY", "STOCKSCOPE_OPENROUTER_API_KEY", "openrouter_api_key"),
        description="Credential for the insight service",
    )

    insight: InsightConfig = Field(default_factory=lambda: InsightConfig(), description="Insight configuration")
    logging: LoggingConfig = Field(default_factory=lambda: LoggingConfig(), description="Logging configuration")

    @classmethod
    def load_from_file(cls, config_path: Path) -> StockScopeSettings:
        """Load configuration from a TOML file; file values take precedence over the environment."""
        if not config_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {config_path}")

        with open(config_path, "rb") as f:
            config_data: dict[str, Any] = tomllib.load(f)
        return cls(**config_data)


_settings: StockScopeSettings | None = None


def get_settings() -> StockScopeSettings:
    """Get the process-wide settings instance."""
    global _settings
    if _settings is None:
        _settings = StockScopeSettings()
    return _settings


def reset_settings() -> None:
    """Forget the cached settings so the next call re-reads the environment."""
    global _settings
    _settings = None


__all__ = [
    "InsightConfig",
    "LoggingConfig",
    "StockScopeSettings",
    "get_settings",
    "reset_settings",
]
