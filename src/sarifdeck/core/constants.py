# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Enumerations and fixed constants used across the normalization engine."""

from enum import StrEnum


class Severity(StrEnum):
    ERROR = "error"
    WARNING = "warning"
    NOTE = "note"
    NONE = "none"
    PASS = "pass"
    OPEN = "open"
    REVIEW = "review"
    INFORMATIONAL = "informational"
    UNKNOWN = "unknown"


# Display order for summaries; also the key order of ``bySeverity``.
SEVERITY_ORDER: tuple[Severity, ...] = tuple(Severity)

UNKNOWN_RULE_ID = "unknown"
UNKNOWN_TOOL_NAME = "unknown"

# Fingerprint slots consulted for the dedupe key, in priority order.
# Each entry is (source attribute on the result, fingerprint algorithm name).
PRIMARY_FINGERPRINT_SOURCES: tuple[tuple[str, str], ...] = (
    ("partialFingerprints", "primaryLocationFingerprint"),
    ("partialFingerprints", "primaryLocationFingerprint/v2"),
    ("fingerprints", "primaryLocationFingerprint"),
    ("fingerprints", "primaryLocationFingerprint/v2"),
)

DEDUPE_SEPARATOR = "::"
