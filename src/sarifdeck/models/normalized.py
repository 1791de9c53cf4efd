# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Normalized finding and document models.

These are the engine's output. Attributes are snake_case in Python and
serialise to the camelCase field names consumers of the JSON expect
(``ruleId``, ``dedupeKey``, ``bySeverity`` ...). Every model is frozen.
"""

from __future__ import annotations

from datetime import datetime
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from sarifdeck.core.constants import SEVERITY_ORDER, Severity


def empty_severity_counts() -> dict[Severity, int]:
    """Return a counter with every canonical severity set to zero."""
    return {severity: 0 for severity in SEVERITY_ORDER}


class _CamelModel(BaseModel):
    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        frozen=True,
    )


class ToolSummary(_CamelModel):
    name: str
    version: str | None = None
    information_uri: str | None = None


class FindingLocation(_CamelModel):
    """Primary location of a finding. Absent bounds stay ``None``, never 0."""

    file: str | None = None
    uri_base_id: str | None = None
    start_line: int | None = None
    start_column: int | None = None
    end_line: int | None = None
    end_column: int | None = None
    snippet: str | None = None


class NormalizedFinding(_CamelModel):
    """One SARIF result, flattened for display."""

    id: str
    rule_id: str
    rule_name: str | None = None
    rule_description: str | None = None
    severity: Severity
    message: str
    tool: ToolSummary
    location: FindingLocation | None = None
    remediation: str | None = None
    help_url: str | None = None
    tags: tuple[str, ...] = ()
    partial_fingerprints: dict[str, str] = Field(default_factory=dict)
    fingerprints: dict[str, str] = Field(default_factory=dict)
    properties: dict[str, Any] = Field(default_factory=dict)
    dedupe_key: str = Field(min_length=64, max_length=64)
    raw_result: dict[str, Any] = Field(default_factory=dict)


class DocumentMetadata(_CamelModel):
    sarif_version: str
    tool_names: tuple[str, ...] = ()
    uploaded_at: datetime
    file_name: str | None = None


class DocumentStats(_CamelModel):
    total_findings: int = 0
    by_severity: dict[Severity, int] = Field(default_factory=empty_severity_counts)


class NormalizedSarif(_CamelModel):
    """Normalized form of one SARIF log."""

    metadata: DocumentMetadata
    stats: DocumentStats
    findings: tuple[NormalizedFinding, ...] = ()

    def to_dict(self, *, include_raw: bool = True) -> dict[str, Any]:
        """Serialise to plain JSON-compatible data with camelCase keys."""
        exclude = None if include_raw else {"findings": {"__all__": {"raw_result"}}}
        return self.model_dump(
            mode="json", by_alias=True, exclude_none=True, exclude=exclude
        )

    def to_json(self, *, indent: int | None = 2, include_raw: bool = True) -> str:
        exclude = None if include_raw else {"findings": {"__all__": {"raw_result"}}}
        return self.model_dump_json(
            indent=indent, by_alias=True, exclude_none=True, exclude=exclude
        )


class AggregateStats(_CamelModel):
    """Statistics across the findings of several normalized documents."""

    total: int = 0
    by_severity: dict[Severity, int] = Field(default_factory=empty_severity_counts)
    tool_names: tuple[str, ...] = ()
    document_count: int = 0
