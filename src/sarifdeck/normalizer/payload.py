# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Unwrap SARIF payloads delivered inside an upload envelope.

Uploaders send either a bare SARIF log or ``{"sarif": ..., "fileName": ...}``
where ``sarif`` may itself be SARIF text. Bodies that are not JSON at all are
passed through unchanged so the validator can report the decode problem.
"""

from __future__ import annotations

import base64
import binascii
import json
from dataclasses import dataclass
from pathlib import Path

from sarifdeck.core.exceptions import EmptyPayloadError, SarifDecodeError


@dataclass(frozen=True, slots=True)
class SarifPayload:
    sarif: object
    file_name: str | None = None


def extract_sarif_payload(body: str | bytes, *, is_base64: bool = False) -> SarifPayload:
    """Split an upload body into the SARIF value and an optional file name."""
    text = _decode_body(body, is_base64=is_base64)
    if not text.strip():
        raise EmptyPayloadError("Request body is empty")

    try:
        parsed = json.loads(text)
    except (json.JSONDecodeError, RecursionError):
        return SarifPayload(sarif=text)

    if isinstance(parsed, dict) and "sarif" in parsed:
        return SarifPayload(
            sarif=parsed["sarif"],
            file_name=_name(parsed.get("fileName")) or _name(parsed.get("filename")),
        )
    if isinstance(parsed, dict):
        return SarifPayload(sarif=parsed, file_name=_name(parsed.get("fileName")))
    return SarifPayload(sarif=parsed)


def read_payload_file(path: Path, *, max_bytes: int) -> bytes:
    """Read *path*, refusing files larger than *max_bytes*."""
    try:
        size = path.stat().st_size
        if size > max_bytes:
            raise SarifDecodeError(
                f"{path.name} is {size} bytes, larger than the {max_bytes} byte limit"
            )
        return path.read_bytes()
    except OSError as exc:
        raise SarifDecodeError(f"Cannot read {path}: {exc}") from exc


def _decode_body(body: str | bytes, *, is_base64: bool) -> str:
    if is_base64:
        try:
            body = base64.b64decode(body, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise SarifDecodeError(f"Request body is not valid base64: {exc}") from exc
    if isinstance(body, bytes):
        try:
            return body.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise SarifDecodeError(f"Request body is not valid UTF-8: {exc}") from exc
    return body


def _name(value: object) -> str | None:
    return value if isinstance(value, str) and value else None
