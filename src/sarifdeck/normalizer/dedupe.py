# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Content-derived dedupe key for normalized findings."""

from __future__ import annotations

import hashlib
import json

from sarifdeck.core.constants import DEDUPE_SEPARATOR, PRIMARY_FINGERPRINT_SOURCES, Severity
from sarifdeck.models.normalized import FindingLocation
from sarifdeck.models.sarif import SarifResult


def primary_fingerprints(result: SarifResult) -> list[str]:
    """Collect the primary-location fingerprints present on *result*.

    Missing or empty slots are skipped rather than recorded as nulls.
    """
    values: list[str] = []
    for source, algorithm in PRIMARY_FINGERPRINT_SOURCES:
        value = (getattr(result, source) or {}).get(algorithm)
        if value:
            values.append(value)
    return values


def _field(value: object | None) -> str:
    return "" if value is None else str(value)


def build_dedupe_key(
    *,
    rule_id: str,
    severity: Severity,
    message: str,
    location: FindingLocation | None,
    fingerprints: list[str],
) -> str:
    """Return the SHA-256 hex digest identifying a finding's content.

    Two findings with the same rule, severity, message, primary location
    and primary fingerprints get the same key regardless of any other
    property.
    """
    parts = [
        rule_id,
        str(severity),
        message,
        _field(location.file if location else None),
        _field(location.start_line if location else None),
        _field(location.start_column if location else None),
        json.dumps(fingerprints, separators=(",", ":"), ensure_ascii=False),
    ]
    payload = DEDUPE_SEPARATOR.join(parts)
    return hashlib.sha256(payload.encode("utf-8")).hexdigest()


def dedupe_key_for(
    result: SarifResult,
    *,
    rule_id: str,
    severity: Severity,
    message: str,
    location: FindingLocation | None,
) -> str:
    return build_dedupe_key(
        rule_id=rule_id,
        severity=severity,
        message=message,
        location=location,
        fingerprints=primary_fingerprints(result),
    )
