# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""sarifdeck - SARIF report normalization for findings viewers."""

__version__ = "0.1.0"

from sarifdeck.core.exceptions import (
    EmptyPayloadError,
    SarifDeckError,
    SarifDecodeError,
    SarifError,
    SarifValidationError,
)
from sarifdeck.models.normalized import NormalizedFinding, NormalizedSarif
from sarifdeck.normalizer import (
    NormalizeOptions,
    aggregate_findings,
    normalize_sarif,
    parse_sarif,
)
from sarifdeck.sdk import normalize_file, validate_file

__all__ = [
    "EmptyPayloadError",
    "NormalizeOptions",
    "NormalizedFinding",
    "NormalizedSarif",
    "SarifDeckError",
    "SarifDecodeError",
    "SarifError",
    "SarifValidationError",
    "__version__",
    "aggregate_findings",
    "normalize_file",
    "normalize_sarif",
    "parse_sarif",
    "validate_file",
]
