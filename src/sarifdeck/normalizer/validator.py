# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Parse and validate raw SARIF payloads.

Accepts an already-structured value (``dict``), JSON text (``str``) or UTF-8
encoded JSON (``bytes``). Decoding failures and schema mismatches raise
distinct exceptions, both carrying a readable diagnostic.
"""

from __future__ import annotations

import json
import logging

from pydantic import ValidationError

from sarifdeck.core.exceptions import (
    EmptyPayloadError,
    SarifDecodeError,
    SarifValidationError,
    ValidationIssue,
)
from sarifdeck.models.sarif import SarifLog

logger = logging.getLogger("sarifdeck.normalizer.validator")

ROOT_PATH = "<root>"
NESTED_TOO_DEEPLY = "Value is nested too deeply"


def parse_sarif(raw: object) -> SarifLog:
    """Return a validated :class:`SarifLog` for *raw* or raise a ``SarifError``.

    Raises
    ------
    EmptyPayloadError
        *raw* is ``None``, or empty / whitespace-only text.
    SarifDecodeError
        *raw* is text that is not valid JSON (or nests too deeply to parse),
        or bytes that are not UTF-8.
    SarifValidationError
        The decoded value does not satisfy the schema, or nests too deeply
        to validate.
    """
    if raw is None:
        raise EmptyPayloadError("SARIF payload is missing")

    payload = raw
    if isinstance(payload, bytes | bytearray):
        payload = decode_text(bytes(payload))
    if isinstance(payload, str):
        payload = load_json(payload)

    try:
        return SarifLog.model_validate(payload)
    except ValidationError as exc:
        issues = collect_issues(exc)
        logger.debug("SARIF validation failed with %d issue(s)", len(issues))
        raise SarifValidationError(issues) from exc
    except RecursionError as exc:
        raise SarifValidationError([ValidationIssue(ROOT_PATH, NESTED_TOO_DEEPLY)]) from exc


def decode_text(data: bytes) -> str:
    """Decode a UTF-8 payload, tolerating a leading byte-order mark."""
    if not data:
        raise EmptyPayloadError("SARIF payload is empty")
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as exc:
        raise SarifDecodeError(f"SARIF payload is not valid UTF-8: {exc}") from exc


def load_json(text: str) -> object:
    if not text.strip():
        raise EmptyPayloadError("SARIF payload is empty")
    try:
        return json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise SarifDecodeError(f"Invalid JSON: {exc}") from exc


def format_path(loc: tuple[int | str, ...]) -> str:
    """Dot-join a pydantic error location; the empty location is ``<root>``."""
    return ".".join(str(part) for part in loc) or ROOT_PATH


def collect_issues(exc: ValidationError) -> list[ValidationIssue]:
    return [
        ValidationIssue(path=format_path(error["loc"]), message=error["msg"])
        for error in exc.errors(include_url=False)
    ]
