# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Field resolvers for SARIF's optional and overlapping attributes.

Each resolver is an ordered list of candidates where the first usable
value wins.
"""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any, TypeVar

from sarifdeck.core.constants import UNKNOWN_RULE_ID, Severity
from sarifdeck.models.normalized import FindingLocation
from sarifdeck.models.sarif import SarifMessage, SarifResult, SarifRule

T = TypeVar("T")


def first_present(*candidates: T | None) -> T | None:
    """Return the first candidate that is neither ``None`` nor ``""``."""
    for candidate in candidates:
        if candidate is not None and candidate != "":
            return candidate
    return None


# ---------------------------------------------------------------------------
# Rules
# ---------------------------------------------------------------------------


class RuleIndex:
    """Lookup of a run's rule definitions by id.

    The first rule seen for an id wins. Positional lookup (``ruleIndex``)
    addresses the de-duplicated ids in insertion order, so a rule list with
    repeated ids does not line up with the original list positions.
    """

    def __init__(self, rules: Iterable[SarifRule] | None = None) -> None:
        by_id: dict[str, SarifRule] = {}
        for rule in rules or ():
            if rule.id:
                by_id.setdefault(rule.id, rule)
        self._by_id = by_id
        self._ordered = tuple(by_id.values())

    def __len__(self) -> int:
        return len(self._ordered)

    def __contains__(self, rule_id: object) -> bool:
        return rule_id in self._by_id

    def get(self, rule_id: str | None) -> SarifRule | None:
        if not rule_id:
            return None
        return self._by_id.get(rule_id)

    def at(self, position: int | None) -> SarifRule | None:
        if position is None or not 0 <= position < len(self._ordered):
            return None
        return self._ordered[position]

    def resolve(self, result: SarifResult) -> SarifRule | None:
        """Find the rule for *result*: ``ruleId`` first, then ``ruleIndex``."""
        rule = self.get(result.ruleId)
        if rule is not None:
            return rule
        return self.at(result.ruleIndex)


def resolve_rule_id(result: SarifResult, rule: SarifRule | None) -> str:
    return first_present(rule.id if rule else None, result.ruleId) or UNKNOWN_RULE_ID


def pick_rule_description(rule: SarifRule | None) -> str | None:
    if rule is None:
        return None
    short, full = rule.shortDescription, rule.fullDescription
    return first_present(
        short.text if short else None,
        short.markdown if short else None,
        full.text if full else None,
        full.markdown if full else None,
    )


# ---------------------------------------------------------------------------
# Severity
# ---------------------------------------------------------------------------


def canonical_severity(value: str | None) -> Severity:
    """Lower-case *value* and map it onto the closed severity set."""
    try:
        return Severity((value or Severity.UNKNOWN).lower())
    except ValueError:
        return Severity.UNKNOWN


def resolve_severity(result: SarifResult, rule: SarifRule | None) -> Severity:
    config = rule.defaultConfiguration if rule else None
    level = first_present(
        result.level,
        config.level if config else None,
        config.severity if config else None,
    )
    return canonical_severity(level)


# ---------------------------------------------------------------------------
# Messages, locations, remediation
# ---------------------------------------------------------------------------


def message_text(message: SarifMessage | None) -> str | None:
    """Plain text of a SARIF message, falling back to its markdown."""
    if message is None:
        return None
    return first_present(message.text, message.markdown)


def pick_message(message: SarifMessage | None) -> str:
    return message_text(message) or ""


def pick_location(result: SarifResult) -> FindingLocation | None:
    """Flatten the first location's physical location.

    Later locations and ``relatedLocations`` are not surfaced.
    """
    if not result.locations:
        return None
    physical = result.locations[0].physicalLocation
    if physical is None:
        return None

    artifact = physical.artifactLocation
    region = physical.region
    snippet = region.snippet if region else None
    return FindingLocation(
        file=artifact.uri if artifact else None,
        uri_base_id=artifact.uriBaseId if artifact else None,
        start_line=region.startLine if region else None,
        start_column=region.startColumn if region else None,
        end_line=region.endLine if region else None,
        end_column=region.endColumn if region else None,
        snippet=snippet.text if snippet else None,
    )


def pick_remediation(result: SarifResult, rule: SarifRule | None) -> str | None:
    fix = result.fixes[0] if result.fixes else None
    return first_present(
        message_text(fix.description) if fix else None,
        message_text(rule.help) if rule else None,
    )


# ---------------------------------------------------------------------------
# Tags and identity
# ---------------------------------------------------------------------------


def extract_tags(source: Any) -> list[str]:
    """Coerce a ``properties.tags`` value into a list of strings."""
    if isinstance(source, str):
        return [source]
    if isinstance(source, list | tuple):
        return [tag for tag in source if isinstance(tag, str)]
    return []


def merge_tags(result: SarifResult, rule: SarifRule | None) -> tuple[str, ...]:
    """Union of result and rule tags, in order of first appearance."""
    result_tags = extract_tags((result.properties or {}).get("tags"))
    rule_tags = extract_tags((rule.properties or {}).get("tags")) if rule else []
    return tuple(dict.fromkeys([*result_tags, *rule_tags]))


def finding_id(result: SarifResult, run_index: int, result_index: int) -> str:
    synthesized = f"{run_index}-{result_index}-{result.ruleId or UNKNOWN_RULE_ID}"
    return first_present(result.id, result.guid) or synthesized
