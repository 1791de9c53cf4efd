# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Standardized exit codes for CI/CD pipeline integrations.

Exit codes:
    0  CLEAN: no finding matched the fail-on severities
    1  FINDINGS: at least one finding matched a fail-on severity
    2  INPUT_ERROR: an input could not be parsed or validated
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import IntEnum

from sarifdeck.core.constants import Severity
from sarifdeck.core.exceptions import ConfigurationError
from sarifdeck.models.normalized import NormalizedSarif


class CIExitCode(IntEnum):
    """Exit codes used by sarifdeck in CI mode."""

    CLEAN = 0
    FINDINGS = 1
    INPUT_ERROR = 2


def parse_fail_on(values: Iterable[str]) -> set[Severity]:
    """Convert severity names to ``Severity`` members.

    Raises:
        ValueError: If a name is not one of the canonical severities.
    """
    severities: set[Severity] = set()
    for value in values:
        normalized = value.strip().lower()
        if not normalized:
            continue
        try:
            severities.add(Severity(normalized))
        except ValueError:
            msg = (
                f"Unknown severity: {value!r}. "
                f"Expected one of: {', '.join(Severity)}"
            )
            raise ValueError(msg) from None
    return severities


def documents_to_exit_code(
    documents: Iterable[NormalizedSarif], fail_on: set[Severity]
) -> CIExitCode:
    """Return FINDINGS if any document counted a finding at a fail-on severity."""
    for document in documents:
        if any(document.stats.by_severity.get(sev, 0) for sev in fail_on):
            return CIExitCode.FINDINGS
    return CIExitCode.CLEAN


def resolve_fail_on(
    option: str | None,
    configured: Iterable[str],
    default: Iterable[str] = ("error",),
) -> set[Severity]:
    """Pick the fail-on severities: the CLI option, then settings, then *default*.

    Raises:
        ValueError: If the CLI option names an unknown severity.
        ConfigurationError: If ``SARIFDECK_FAIL_ON`` names an unknown severity.
    """
    if option:
        return parse_fail_on(option.split(","))
    configured = list(configured)
    if not configured:
        return parse_fail_on(default)
    try:
        return parse_fail_on(configured)
    except ValueError as exc:
        msg = f"Invalid SARIFDECK_FAIL_ON setting: {exc}"
        raise ConfigurationError(msg) from exc
