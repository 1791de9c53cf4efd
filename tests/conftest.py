# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Shared test fixtures and configuration."""

from __future__ import annotations

import copy
import json
from pathlib import Path
from typing import Any

import pytest

FIXTURES_DIR = Path(__file__).parent / "fixtures" / "sarif"

MINIMAL_SARIF: dict[str, Any] = {
    "version": "2.1.0",
    "runs": [
        {
            "tool": {"driver": {"name": "ExampleScanner", "rules": []}},
            "results": [],
        }
    ],
}


@pytest.fixture
def fixtures_dir() -> Path:
    return FIXTURES_DIR


@pytest.fixture
def example_sarif() -> dict[str, Any]:
    """The single-finding ExampleScanner document as parsed JSON."""
    return json.loads((FIXTURES_DIR / "example_scanner.sarif").read_text(encoding="utf-8"))


@pytest.fixture
def multi_run_sarif() -> dict[str, Any]:
    return json.loads((FIXTURES_DIR / "multi_run.sarif").read_text(encoding="utf-8"))


@pytest.fixture
def make_sarif():
    """Build a one-run SARIF document from rules and results."""

    def _make(
        results: list[dict[str, Any]] | None = None,
        rules: list[dict[str, Any]] | None = None,
        driver_name: str = "ExampleScanner",
    ) -> dict[str, Any]:
        doc = copy.deepcopy(MINIMAL_SARIF)
        run = doc["runs"][0]
        run["tool"]["driver"]["name"] = driver_name
        run["tool"]["driver"]["rules"] = rules or []
        run["results"] = results or []
        return doc

    return _make


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    """Keep developer SARIFDECK_* settings out of the tests."""
    for name in (
        "SARIFDECK_FAIL_ON",
        "SARIFDECK_LOG_FORMAT",
        "SARIFDECK_MAX_PAYLOAD_BYTES",
        "SARIFDECK_INCLUDE_RAW_RESULTS",
    ):
        monkeypatch.delenv(name, raising=False)
