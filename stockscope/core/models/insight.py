"""Models exchanged with the insight service."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True, frozen=True)
class InsightPoint:
    """Down-sampled point sent to the text-generation service."""

    date: str
    price: float

    def to_dict(self) -> dict[str, str | float]:
        return {"date": self.date, "price": self.price}


@dataclass(slots=True, frozen=True)
class InsightResult:
    """Outcome of an insight request; ``text`` is always displayable."""

    text: str
    ok: bool
    generation: int = 0
    error_code: str | None = None
    error_message: str | None = None


__all__ = ["InsightPoint", "InsightResult"]
