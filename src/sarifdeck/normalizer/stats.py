# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Severity counters and statistics across normalized documents."""

from __future__ import annotations

import logging
from collections.abc import Iterable

from sarifdeck.core.constants import Severity
from sarifdeck.models.normalized import (
    AggregateStats,
    NormalizedFinding,
    NormalizedSarif,
    empty_severity_counts,
)

logger = logging.getLogger("sarifdeck.normalizer.stats")


class SeverityTally:
    """Running count of findings per canonical severity."""

    def __init__(self) -> None:
        self._counts = empty_severity_counts()

    def add(self, severity: Severity) -> None:
        self._counts[severity] += 1

    @property
    def total(self) -> int:
        return sum(self._counts.values())

    def snapshot(self) -> dict[Severity, int]:
        return dict(self._counts)


def count_by_severity(findings: Iterable[NormalizedFinding]) -> dict[Severity, int]:
    tally = SeverityTally()
    for finding in findings:
        tally.add(finding.severity)
    return tally.snapshot()


def aggregate_findings(documents: Iterable[NormalizedSarif]) -> AggregateStats:
    """Combine the findings of several documents into one summary.

    Tool names come from each finding's tool summary, in first-seen order,
    so a run without results contributes no tool name.
    """
    tally = SeverityTally()
    tool_names: dict[str, None] = {}
    document_count = 0

    for document in documents:
        document_count += 1
        for finding in document.findings:
            tally.add(finding.severity)
            tool_names.setdefault(finding.tool.name)

    logger.debug(
        "Aggregated %d finding(s) across %d document(s)", tally.total, document_count
    )
    return AggregateStats(
        total=tally.total,
        by_severity=tally.snapshot(),
        tool_names=tuple(tool_names),
        document_count=document_count,
    )
