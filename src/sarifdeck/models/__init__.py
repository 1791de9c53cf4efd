# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Domain models for sarifdeck."""

from sarifdeck.models.normalized import (
    AggregateStats,
    DocumentMetadata,
    DocumentStats,
    FindingLocation,
    NormalizedFinding,
    NormalizedSarif,
    ToolSummary,
)
from sarifdeck.models.sarif import SarifLog, SarifResult, SarifRule, SarifRun

__all__ = [
    "AggregateStats",
    "DocumentMetadata",
    "DocumentStats",
    "FindingLocation",
    "NormalizedFinding",
    "NormalizedSarif",
    "SarifLog",
    "SarifResult",
    "SarifRule",
    "SarifRun",
    "ToolSummary",
]
