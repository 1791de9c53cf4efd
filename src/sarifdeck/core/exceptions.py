# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Custom exception hierarchy for sarifdeck."""

from __future__ import annotations

from dataclasses import dataclass


class SarifDeckError(Exception):
    """Base exception for all sarifdeck errors."""


class ConfigurationError(SarifDeckError):
    """Invalid or missing configuration."""


class SarifError(SarifDeckError):
    """A SARIF payload could not be turned into a document."""


class EmptyPayloadError(SarifError):
    """The payload was absent or empty before any parsing was attempted."""


class SarifDecodeError(SarifError):
    """The payload text is not valid JSON (or not valid UTF-8)."""


@dataclass(frozen=True, slots=True)
class ValidationIssue:
    """A single schema mismatch, addressed by its dot-joined field path."""

    path: str
    message: str

    def __str__(self) -> str:
        return f"{self.path} {self.message}"


class SarifValidationError(SarifError):
    """The payload parsed, but does not match the SARIF schema."""

    def __init__(self, issues: list[ValidationIssue]) -> None:
        self.issues = list(issues)
        super().__init__(
            "SARIF format is invalid: " + ", ".join(str(issue) for issue in self.issues)
        )
