# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""SARIF normalization engine.

Walks every run and result of a validated SARIF log and produces one
:class:`NormalizedFinding` per result, plus document-level metadata and
severity statistics. The engine holds no state between calls.
"""

from __future__ import annotations

import copy
import logging
from dataclasses import dataclass
from datetime import UTC, datetime

from sarifdeck.core.constants import UNKNOWN_TOOL_NAME
from sarifdeck.core.exceptions import SarifValidationError, ValidationIssue
from sarifdeck.models.normalized import (
    DocumentMetadata,
    DocumentStats,
    NormalizedFinding,
    NormalizedSarif,
    ToolSummary,
)
from sarifdeck.models.sarif import SarifDriver, SarifResult, SarifRun
from sarifdeck.normalizer.dedupe import dedupe_key_for
from sarifdeck.normalizer.resolvers import (
    RuleIndex,
    finding_id,
    first_present,
    merge_tags,
    pick_location,
    pick_message,
    pick_remediation,
    pick_rule_description,
    resolve_rule_id,
    resolve_severity,
)
from sarifdeck.normalizer.stats import SeverityTally
from sarifdeck.normalizer.validator import NESTED_TOO_DEEPLY, parse_sarif

logger = logging.getLogger("sarifdeck.normalizer.engine")


@dataclass(frozen=True, slots=True)
class NormalizeOptions:
    """Caller-supplied options; the file name is never inferred from content."""

    file_name: str | None = None


def normalize_sarif(
    raw: object,
    options: NormalizeOptions | None = None,
    *,
    file_name: str | None = None,
) -> NormalizedSarif:
    """Validate *raw* and return its normalized form.

    *raw* may be a parsed JSON value, JSON text or UTF-8 bytes. Errors from
    :func:`parse_sarif` propagate unchanged; no partial document is ever
    returned.
    """
    options = options or NormalizeOptions(file_name=file_name)
    sarif_log = parse_sarif(raw)

    findings: list[NormalizedFinding] = []
    tool_names: dict[str, None] = {}
    tally = SeverityTally()

    for run_index, run in enumerate(sarif_log.runs):
        driver = run.tool.driver
        if driver.name:
            tool_names.setdefault(driver.name)

        run_findings = _normalize_run(run, run_index, tally)
        logger.debug(
            "Run %d (%s): %d result(s)",
            run_index,
            driver.name,
            len(run_findings),
            extra={"run_index": run_index, "tool": driver.name},
        )
        findings.extend(run_findings)

    logger.info(
        "Normalized %d finding(s) from %d run(s)%s",
        len(findings),
        len(sarif_log.runs),
        f" in {options.file_name}" if options.file_name else "",
        extra={"file_name": options.file_name, "findings": len(findings)},
    )

    return NormalizedSarif(
        metadata=DocumentMetadata(
            sarif_version=sarif_log.version,
            tool_names=tuple(tool_names),
            uploaded_at=datetime.now(UTC),
            file_name=options.file_name,
        ),
        stats=DocumentStats(
            total_findings=len(findings),
            by_severity=tally.snapshot(),
        ),
        findings=tuple(findings),
    )


def _normalize_run(
    run: SarifRun, run_index: int, tally: SeverityTally
) -> list[NormalizedFinding]:
    driver = run.tool.driver
    rules = RuleIndex(driver.rules)
    tool = _tool_summary(driver)

    out: list[NormalizedFinding] = []
    for result_index, result in enumerate(run.results):
        try:
            finding = normalize_result(
                result,
                rules=rules,
                tool=tool,
                run_index=run_index,
                result_index=result_index,
            )
        except RecursionError as exc:
            path = f"runs.{run_index}.results.{result_index}"
            raise SarifValidationError([ValidationIssue(path, NESTED_TOO_DEEPLY)]) from exc
        tally.add(finding.severity)
        out.append(finding)
    return out


def normalize_result(
    result: SarifResult,
    *,
    rules: RuleIndex,
    tool: ToolSummary,
    run_index: int = 0,
    result_index: int = 0,
) -> NormalizedFinding:
    """Flatten one SARIF result. Every result yields exactly one finding."""
    rule = rules.resolve(result)
    rule_id = resolve_rule_id(result, rule)
    severity = resolve_severity(result, rule)
    message = pick_message(result.message)
    location = pick_location(result)

    return NormalizedFinding(
        id=finding_id(result, run_index, result_index),
        rule_id=rule_id,
        rule_name=rule.name if rule else None,
        rule_description=pick_rule_description(rule),
        severity=severity,
        message=message,
        tool=tool,
        location=location,
        remediation=pick_remediation(result, rule),
        help_url=rule.helpUri if rule else None,
        tags=merge_tags(result, rule),
        partial_fingerprints=dict(result.partialFingerprints or {}),
        fingerprints=dict(result.fingerprints or {}),
        properties=copy.deepcopy(result.properties or {}),
        dedupe_key=dedupe_key_for(
            result,
            rule_id=rule_id,
            severity=severity,
            message=message,
            location=location,
        ),
        raw_result=result.model_dump(mode="json", exclude_defaults=True),
    )


def _tool_summary(driver: SarifDriver) -> ToolSummary:
    return ToolSummary(
        name=driver.name or UNKNOWN_TOOL_NAME,
        version=first_present(driver.semanticVersion, driver.version),
        information_uri=driver.informationUri,
    )
