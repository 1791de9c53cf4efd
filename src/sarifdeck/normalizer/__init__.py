# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF validation and normalization engine."""

from sarifdeck.normalizer.engine import NormalizeOptions, normalize_result, normalize_sarif
from sarifdeck.normalizer.payload import SarifPayload, extract_sarif_payload
from sarifdeck.normalizer.stats import aggregate_findings, count_by_severity
from sarifdeck.normalizer.validator import parse_sarif

__all__ = [
    "NormalizeOptions",
    "SarifPayload",
    "aggregate_findings",
    "count_by_severity",
    "extract_sarif_payload",
    "normalize_result",
    "normalize_sarif",
    "parse_sarif",
]
