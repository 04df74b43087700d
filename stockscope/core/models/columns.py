"""Accepted header names for the date and price columns, in priority order."""

from __future__ import annotations

DATE_COLUMNS: tuple[str, ...] = ("Date", "date", "DATE")
PRICE_COLUMNS: tuple[str, ...] = ("Close", "close", "CLOSE", "Price", "price", "PRICE")

__all__ = ["DATE_COLUMNS", "PRICE_COLUMNS"]
