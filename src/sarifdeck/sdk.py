# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Public SDK interface for embedding sarifdeck in other tools.

Usage::

    from sarifdeck import normalize_file, normalize_sarif

    normalized = normalize_sarif(sarif_text, file_name="scan.sarif")
    print(normalized.stats.total_findings)

    normalized = normalize_file("reports/codeql.sarif")
"""

from __future__ import annotations

import logging
from pathlib import Path

from sarifdeck.core.config import Settings, get_settings
from sarifdeck.models.normalized import NormalizedSarif
from sarifdeck.normalizer.engine import normalize_sarif
from sarifdeck.normalizer.payload import extract_sarif_payload, read_payload_file
from sarifdeck.normalizer.validator import parse_sarif

logger = logging.getLogger("sarifdeck.sdk")


def load_payload(
    path: str | Path,
    *,
    settings: Settings | None = None,
) -> tuple[object, str]:
    """Read *path* and unwrap an upload envelope if there is one.

    Returns the SARIF value and the file name to report: the envelope's
    ``fileName`` when present, otherwise the file's own name.
    """
    settings = settings or get_settings()
    path = Path(path)
    body = read_payload_file(path, max_bytes=settings.max_payload_bytes)
    payload = extract_sarif_payload(body)
    return payload.sarif, payload.file_name or path.name


def normalize_file(
    path: str | Path,
    *,
    file_name: str | None = None,
    settings: Settings | None = None,
) -> NormalizedSarif:
    """Normalize the SARIF log stored at *path*.

    Parameters
    ----------
    path:
        SARIF file, or a JSON envelope ``{"sarif": ..., "fileName": ...}``.
    file_name:
        Display name to record in the metadata; overrides the envelope's
        name and the file's own name.
    settings:
        Optional ``Settings`` override; falls back to ``get_settings()``.
    """
    sarif, detected_name = load_payload(path, settings=settings)
    logger.debug("Normalizing %s", path)
    return normalize_sarif(sarif, file_name=file_name or detected_name)


def validate_file(path: str | Path, *, settings: Settings | None = None) -> None:
    """Raise a ``SarifError`` if the file at *path* is not a usable SARIF log."""
    sarif, _ = load_payload(path, settings=settings)
    parse_sarif(sarif)
