"""Pytest configuration for the stockscope test suite."""

from __future__ import annotations

from pathlib import Path

import pytest

from stockscope.core.logging import configure_logging

SCENARIO_CSV = "Date,Close\n2023-01-10,100\n2023-06-01,150\n2023-01-05,90\n"


def pytest_addoption(parser: pytest.Parser) -> None:
    """Register command-line options for controlling integration tests."""

    parser.addoption(
        "--stockscope-run-integration",
        action="store_true",
        default=False,
        help="Run stockscope integration tests that require external services.",
    )


def pytest_configure(config: pytest.Config) -> None:
    """Register the integration marker for stockscope tests."""

    config.addinivalue_line(
        "markers",
        "integration: marks stockscope tests requiring network or external services",
    )


def pytest_collection_modifyitems(config: pytest.Config, items: list[pytest.Item]) -> None:
    """Skip integration tests unless explicitly requested."""

    if config.getoption("--stockscope-run-integration"):
        return

    skip_integration = pytest.mark.skip(reason="integration tests require --stockscope-run-integration")
    for item in items:
        if "integration" in item.keywords:
            item.add_marker(skip_integration)


@pytest.fixture(autouse=True)
def _silence_logging() -> None:
    """Detach log sinks so streams captured by earlier tests are never written to."""

    configure_logging("DEBUG", console_output=False)


@pytest.fixture
def scenario_csv() -> str:
    """Three out-of-order rows under a ``Close`` header."""
    return SCENARIO_CSV


@pytest.fixture
def scenario_file(tmp_path: Path) -> Path:
    path = tmp_path / "prices.csv"
    path.write_text(SCENARIO_CSV, encoding="utf-8")
    return path
