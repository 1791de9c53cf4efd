# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Integration tests for the public SDK: files on disk through to output."""

from __future__ import annotations

import json

import pytest

from sarifdeck import (
    SarifDecodeError,
    SarifValidationError,
    aggregate_findings,
    normalize_file,
    validate_file,
)
from sarifdeck.core.config import Settings
from sarifdeck.core.constants import Severity
from sarifdeck.sdk import load_payload


class TestNormalizeFile:
    def test_plain_sarif_uses_file_name(self, fixtures_dir):
        normalized = normalize_file(fixtures_dir / "example_scanner.sarif")
        assert normalized.metadata.file_name == "example_scanner.sarif"
        assert normalized.stats.by_severity[Severity.WARNING] == 1

    def test_accepts_string_path(self, fixtures_dir):
        normalized = normalize_file(str(fixtures_dir / "multi_run.sarif"))
        assert normalized.stats.total_findings == 4

    def test_envelope_name_wins_over_path(self, fixtures_dir):
        normalized = normalize_file(fixtures_dir / "envelope.json")
        assert normalized.metadata.file_name == "uploaded-from-browser.sarif"
        assert normalized.findings[0].message == "Use of assert detected."

    def test_explicit_name_wins(self, fixtures_dir):
        normalized = normalize_file(fixtures_dir / "envelope.json", file_name="override.sarif")
        assert normalized.metadata.file_name == "override.sarif"

    def test_utf8_bom(self, tmp_path, example_sarif):
        path = tmp_path / "bom.sarif"
        path.write_bytes(b"\xef\xbb\xbf" + json.dumps(example_sarif).encode("utf-8"))
        assert normalize_file(path).stats.total_findings == 1

    def test_size_limit(self, fixtures_dir):
        with pytest.raises(SarifDecodeError, match="byte limit"):
            normalize_file(
                fixtures_dir / "example_scanner.sarif",
                settings=Settings(max_payload_bytes=16),
            )

    def test_directory_is_a_read_error(self, tmp_path):
        with pytest.raises(SarifDecodeError, match="Cannot read"):
            normalize_file(tmp_path)

    def test_missing_file_is_a_read_error(self, tmp_path):
        with pytest.raises(SarifDecodeError, match="Cannot read"):
            validate_file(tmp_path / "missing.sarif")

    def test_deeply_nested_file(self, tmp_path):
        path = tmp_path / "deep.sarif"
        path.write_text("[" * 100_000, encoding="utf-8")
        with pytest.raises(SarifDecodeError, match="Invalid JSON"):
            normalize_file(path)

    def test_oversized_file_rejected_before_parsing(self, tmp_path):
        path = tmp_path / "huge.sarif"
        path.write_text("[" * 4096, encoding="utf-8")
        with pytest.raises(SarifDecodeError, match="byte limit"):
            normalize_file(path, settings=Settings(max_payload_bytes=1024))

    def test_invalid_json(self, fixtures_dir):
        with pytest.raises(SarifDecodeError, match="Invalid JSON"):
            normalize_file(fixtures_dir / "not_json.sarif")

    def test_invalid_schema(self, fixtures_dir):
        with pytest.raises(SarifValidationError) as exc_info:
            normalize_file(fixtures_dir / "missing_driver_name.sarif")
        paths = [issue.path for issue in exc_info.value.issues]
        assert "runs.0.tool.driver.name" in paths
        assert "runs.0.results.0.message" in paths

    def test_aggregate_across_files(self, fixtures_dir):
        docs = [
            normalize_file(fixtures_dir / name)
            for name in ("example_scanner.sarif", "multi_run.sarif", "envelope.json")
        ]
        stats = aggregate_findings(docs)
        assert stats.document_count == 3
        assert stats.total == 6
        assert stats.by_severity[Severity.NOTE] == 2
        assert stats.tool_names == ("ExampleScanner", "CodeQL", "Semgrep OSS", "Bandit")


class TestValidateFile:
    def test_valid(self, fixtures_dir):
        assert validate_file(fixtures_dir / "empty_runs.sarif") is None

    def test_invalid(self, fixtures_dir):
        with pytest.raises(SarifValidationError):
            validate_file(fixtures_dir / "missing_driver_name.sarif")


class TestLoadPayload:
    def test_returns_sarif_and_name(self, fixtures_dir):
        sarif, name = load_payload(fixtures_dir / "envelope.json")
        assert isinstance(sarif, str)
        assert name == "uploaded-from-browser.sarif"
