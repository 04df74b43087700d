from __future__ import annotations

from datetime import date

import pytest

from stockscope.core.data.ingestion import IngestionResult, ingest
from stockscope.core.exceptions import EmptyInputError, NoValidDataError


def test_ingest_returns_points_in_input_order(scenario_csv: str) -> None:
    result = ingest(scenario_csv)

    assert isinstance(result, IngestionResult)
    assert [point.date for point in result.points] == [date(2023, 1, 10), date(2023, 6, 1), date(2023, 1, 5)]
    assert result.parsed_rows == 3
    assert result.rejected_rows == 0
    assert result.surviving_rows == 3
    assert result.duration_ms >= 0


def test_ingest_counts_rejected_rows() -> None:
    text = "Date,Close\n2023-01-10,100\n2023-01-11,abc\nnot-a-date,5\n2023-01-12,101\n"

    result = ingest(text)

    assert result.parsed_rows == 4
    assert result.rejected_rows == 2
    assert [point.price for point in result.points] == [100.0, 101.0]


def test_all_rows_rejected_raises_no_valid_data() -> None:
    with pytest.raises(NoValidDataError) as exc_info:
        ingest('Date,Price\n"2024-03-01","not-a-number"\n')

    error = exc_info.value
    assert error.error_code == "NO_VALID_DATA"
    assert error.message == "Missing required columns: Date, Close"
    assert error.details["parsed_rows"] == 1
    assert "Price" in error.details["price_columns"]


def test_unrecognized_headers_raise_no_valid_data() -> None:
    with pytest.raises(NoValidDataError):
        ingest("Day,Value\n2023-01-10,100\n")


def test_empty_input_is_distinct_from_no_valid_data() -> None:
    with pytest.raises(EmptyInputError) as exc_info:
        ingest("Date,Close\n")

    assert not isinstance(exc_info.value, NoValidDataError)
