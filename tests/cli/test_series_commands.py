from __future__ import annotations

import json
from pathlib import Path

import httpx
import pytest
from typer.testing import CliRunner

from stockscope.cli import series as series_module
from stockscope.cli.main import create_app
from stockscope.core.config import InsightConfig
from stockscope.core.services import AnalysisSession, InsightClient


@pytest.fixture
def runner() -> CliRunner:
    return CliRunner()


@pytest.fixture
def stub_session(monkeypatch: pytest.MonkeyPatch) -> AnalysisSession:
    def handler(request: httpx.Request) -> httpx.Response:
        return httpx.Response(200, json={"choices": [{"message": {"content": "Prices rose over the year."}}]})

    client = InsightClient(InsightConfig(), api_key="sk-test", transport=httpx.MockTransport(handler))
    session = AnalysisSession(insight_client=client)
    monkeypatch.setattr(series_module, "get_session", lambda: session)
    return session


def _json_rows(output: str, key: str) -> list[dict[str, object]]:
    rows = []
    for line in output.splitlines():
        if not line.startswith("{"):
            continue
        payload = json.loads(line)
        if key in payload:
            rows.append(payload)
    return rows


def _metrics(output: str) -> dict[str, object]:
    return {row["metric"]: row["value"] for row in _json_rows(output, "metric")}


def test_analyze_jsonl_outputs_statistics(runner: CliRunner, scenario_file: Path, stub_session: AnalysisSession) -> None:
    result = runner.invoke(create_app(), ["--format", "jsonl", "analyze", str(scenario_file)])

    assert result.exit_code == 0, result.output
    metrics = _metrics(result.output)
    assert metrics["points"] == 3
    assert metrics["rejected_rows"] == 0
    assert metrics["range"] == "Jan 05, 2023 -> Jun 01, 2023"
    assert metrics["min"] == 90
    assert metrics["max"] == 150
    assert metrics["period_return_percent"] == pytest.approx(66.6667, rel=1e-4)
    assert "insight" not in metrics


def test_analyze_table_output(runner: CliRunner, scenario_file: Path, stub_session: AnalysisSession) -> None:
    result = runner.invoke(create_app(), ["--no-color", "analyze", str(scenario_file)])

    assert result.exit_code == 0, result.output
    assert "period_return_percent" in result.output
    assert "66.67" in result.output
    assert "113.33" in result.output


def test_analyze_with_insights(runner: CliRunner, scenario_file: Path, stub_session: AnalysisSession) -> None:
    result = runner.invoke(create_app(), ["--format", "jsonl", "analyze", str(scenario_file), "--insights"])

    assert result.exit_code == 0, result.output
    assert _metrics(result.output)["insight"] == "Prices rose over the year."
    assert stub_session.latest_insight is not None


def test_points_are_sorted(runner: CliRunner, scenario_file: Path, stub_session: AnalysisSession) -> None:
    result = runner.invoke(create_app(), ["--format", "jsonl", "points", str(scenario_file)])

    assert result.exit_code == 0, result.output
    rows = _json_rows(result.output, "price")
    assert rows == [
        {"date": "2023-01-05", "price": 90.0},
        {"date": "2023-01-10", "price": 100.0},
        {"date": "2023-06-01", "price": 150.0},
    ]


def test_export_writes_to_output_file(
    runner: CliRunner, scenario_file: Path, stub_session: AnalysisSession, tmp_path: Path
) -> None:
    destination = tmp_path / "export.jsonl"

    result = runner.invoke(
        create_app(), ["--format", "jsonl", "--output", str(destination), "export", str(scenario_file)]
    )

    assert result.exit_code == 0, result.output
    lines = destination.read_text(encoding="utf-8").splitlines()
    assert [json.loads(line)["date"] for line in lines] == ["2023-01-05", "2023-01-10", "2023-06-01"]


def test_empty_file_exits_with_validation_code(runner: CliRunner, tmp_path: Path, stub_session: AnalysisSession) -> None:
    path = tmp_path / "empty.csv"
    path.write_text("", encoding="utf-8")

    result = runner.invoke(create_app(), ["analyze", str(path)])

    assert result.exit_code == 10
    assert "EMPTY_INPUT" in result.output


def test_unrecognized_columns_exit_with_validation_code(
    runner: CliRunner, tmp_path: Path, stub_session: AnalysisSession
) -> None:
    path = tmp_path / "bad.csv"
    path.write_text("Day,Value\n2024-01-01,1\n", encoding="utf-8")

    result = runner.invoke(create_app(), ["analyze", str(path)])

    assert result.exit_code == 10
    assert "NO_VALID_DATA" in result.output
    assert "Missing required columns: Date, Close" in result.output


def test_missing_file_exits_with_io_code(runner: CliRunner, tmp_path: Path, stub_session: AnalysisSession) -> None:
    result = runner.invoke(create_app(), ["analyze", str(tmp_path / "missing.csv")])

    assert result.exit_code == 20
    assert "INPUT_READ_ERROR" in result.output


def test_unknown_format_is_rejected(runner: CliRunner, scenario_file: Path) -> None:
    result = runner.invoke(create_app(), ["--format", "xml", "analyze", str(scenario_file)])

    assert result.exit_code != 0


def test_error_payload_is_structured(runner: CliRunner, tmp_path: Path, stub_session: AnalysisSession) -> None:
    path = tmp_path / "bad.csv"
    path.write_text('Date,Price\n"2024-03-01","not-a-number"\n', encoding="utf-8")

    result = runner.invoke(create_app(), ["analyze", str(path)])

    errors = _json_rows(result.output, "error")
    assert len(errors) == 1
    error = errors[0]["error"]
    assert error["code"] == "NO_VALID_DATA"
    assert error["details"]["parsed_rows"] == 1
    assert error["details"]["price_columns"][0] == "Close"


def test_unwritable_output_exits_with_io_code(
    runner: CliRunner, scenario_file: Path, stub_session: AnalysisSession, tmp_path: Path
) -> None:
    destination = tmp_path / "missing-dir" / "out.jsonl"

    result = runner.invoke(create_app(), ["--output", str(destination), "points", str(scenario_file)])

    assert result.exit_code == 20
    error = _json_rows(result.output, "error")[0]["error"]
    assert error["code"] == "OUTPUT_WRITE_ERROR"
    assert error["details"]["path"] == str(destination)
