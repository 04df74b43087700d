"""
Insight export and client for the external text-generation service.

The client speaks the OpenRouter chat completions protocol. Failures of any
kind are converted into an :class:`InsightResult` carrying the fallback
message, so callers never see an exception from this module's boundary.
"""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Any

import httpx
from loguru import logger

from stockscope.core.config import InsightConfig, StockScopeSettings, get_settings
from stockscope.core.exceptions.base import InsightError
from stockscope.core.exceptions.codes import ErrorCode
from stockscope.core.exceptions.messages import INSIGHT_FALLBACK_MESSAGE
from stockscope.core.models.insight import InsightPoint, InsightResult
from stockscope.core.models.series import StockPoint

SYSTEM_PROMPT = (
    "You are a financial analyst. Given this stock's daily price data for the year, "
    "provide a concise analysis: - General trend - Key highs/lows - Notable price movements "
    "- Possible causes (generic). Output 4-5 sentences max in simple English."
)
NO_INSIGHT_TEXT = "No insights generated."


def export_points(points: Sequence[StockPoint], *, max_points: int | None = None) -> list[InsightPoint]:
    """Down-sample ``points`` for the insight service.

    Dates become ``YYYY-MM-DD`` strings and prices are rounded to four
    decimals. With ``max_points`` only the most recent points are kept.
    """

    selected = points[-max_points:] if max_points else points
    return [InsightPoint(date=point.date.isoformat(), price=round(point.price, 4)) for point in selected]


class InsightClient:
    """Async client requesting a short natural-language analysis of a series."""

    def __init__(
        self,
        config: InsightConfig | None = None,
        api_key: str | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.config = config or InsightConfig()
        self.api_key = api_key
        self._transport = transport

    @classmethod
    def from_settings(cls, settings: StockScopeSettings | None = None) -> InsightClient:
        """Build a client from application settings."""

        settings = settings or get_settings()
        return cls(settings.insight, settings.openrouter_api_key)

    def build_payload(self, points: Sequence[InsightPoint]) -> dict[str, Any]:
        """Chat completion request body for ``points``."""

        data = json.dumps([point.to_dict() for point in points[-self.config.max_points :]])
        return {
            "model": self.config.model,
            "messages": [
                {"role": "system", "content": SYSTEM_PROMPT},
                {"role": "user", "content": f"Here is the stock data as an array of {{date, price}}:\n{data}"},
            ],
            "max_tokens": self.config.max_tokens,
            "temperature": self.config.temperature,
        }

    def _headers(self) -> dict[str, str]:
        return {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
            "HTTP-Referer": self.config.referer,
            "X-Title": self.config.app_title,
        }

    async def request_insight(self, points: Sequence[InsightPoint]) -> str:
        """Perform the request and return the insight text.

        Raises:
            InsightError: missing credential, empty input or a failed exchange.
            httpx.HTTPError: transport level failure.
        """

        if not self.api_key:
            raise InsightError("Missing OPENROUTER_API_KEY", ErrorCode.INSIGHT_MISSING_KEY)
        if not points:
            raise InsightError("Invalid payload: no points to analyze", ErrorCode.INSIGHT_EMPTY_SERIES)

        async with httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=httpx.Timeout(self.config.timeout),
            transport=self._transport,
        ) as client:
            response = await client.post("/chat/completions", json=self.build_payload(points), headers=self._headers())

        if response.status_code >= 400:
            raise InsightError(
                f"OpenRouter error: {response.text}",
                ErrorCode.INSIGHT_HTTP_ERROR,
                status_code=response.status_code,
            )

        try:
            body = response.json()
            content = body["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as exc:
            raise InsightError("Malformed insight response", ErrorCode.INSIGHT_BAD_RESPONSE) from exc

        text = content.strip() if isinstance(content, str) else ""
        return text or NO_INSIGHT_TEXT

    async def generate(self, points: Sequence[StockPoint], *, generation: int = 0) -> InsightResult:
        """Request an insight for ``points``; never raises."""

        exported = export_points(points, max_points=self.config.max_points)
        try:
            text = await self.request_insight(exported)
        except InsightError as error:
            return self._fallback(generation, error.error_code, error.message)
        except httpx.HTTPError as error:
            return self._fallback(generation, ErrorCode.INSIGHT_NETWORK_ERROR.value, str(error))
        except Exception as error:  # pragma: no cover - boundary safety net
            logger.exception("Unexpected insight failure")
            return self._fallback(generation, ErrorCode.INSIGHT_UNAVAILABLE.value, str(error))

        logger.info("Insight generated", generation=generation, points=len(exported))
        return InsightResult(text=text, ok=True, generation=generation)

    def _fallback(self, generation: int, error_code: str, message: str) -> InsightResult:
        logger.bind(error_code=error_code).warning("Insight unavailable: {}", message, generation=generation)
        return InsightResult(
            text=INSIGHT_FALLBACK_MESSAGE,
            ok=False,
            generation=generation,
            error_code=error_code,
            error_message=message,
        )


__all__ = ["InsightClient", "NO_INSIGHT_TEXT", "SYSTEM_PROMPT", "export_points"]
