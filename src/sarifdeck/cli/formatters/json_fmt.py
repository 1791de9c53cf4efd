# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""JSON output formatter."""

from __future__ import annotations

import json

from sarifdeck.models.normalized import AggregateStats, NormalizedSarif


def format_json(document: NormalizedSarif, *, include_raw: bool = True) -> str:
    """Return a normalized document as a formatted JSON string."""
    return document.to_json(indent=2, include_raw=include_raw)


def format_json_many(documents: list[NormalizedSarif], *, include_raw: bool = True) -> str:
    data = [d.to_dict(include_raw=include_raw) for d in documents]
    return json.dumps(data, indent=2, ensure_ascii=False)


def format_json_summary(stats: AggregateStats) -> str:
    """Return a compact JSON summary (no findings detail)."""
    return stats.model_dump_json(indent=2, by_alias=True)
