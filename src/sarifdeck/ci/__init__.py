# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""CI/CD integration module for sarifdeck.

Provides exit codes for gating pipelines on normalized findings.
"""

from sarifdeck.ci.exit_codes import (
    CIExitCode,
    documents_to_exit_code,
    parse_fail_on,
    resolve_fail_on,
)

__all__ = [
    "CIExitCode",
    "documents_to_exit_code",
    "parse_fail_on",
    "resolve_fail_on",
]
