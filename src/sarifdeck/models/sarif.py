# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Permissive SARIF 2.x input models.

Only the fields the normalizer reads are declared. Everything else is
optional, and unknown keys on runs, tools, drivers, rules and results are
kept (``extra="allow"``) so vendor extensions survive a round trip through
``rawResult``.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class SarifMessage(BaseModel):
    text: str | None = None
    markdown: str | None = None


class SarifSnippet(BaseModel):
    text: str | None = None


class SarifRegion(BaseModel):
    startLine: int | None = None
    startColumn: int | None = None
    endLine: int | None = None
    endColumn: int | None = None
    snippet: SarifSnippet | None = None


class SarifArtifactLocation(BaseModel):
    uri: str | None = None
    uriBaseId: str | None = None


class SarifPhysicalLocation(BaseModel):
    artifactLocation: SarifArtifactLocation | None = None
    region: SarifRegion | None = None


class SarifLocation(BaseModel):
    physicalLocation: SarifPhysicalLocation | None = None
    message: SarifMessage | None = None


class SarifFix(BaseModel):
    description: SarifMessage | None = None


class SarifRuleConfig(BaseModel):
    level: str | None = None
    severity: str | None = None


class SarifRule(BaseModel):
    model_config = ConfigDict(extra="allow")

    id: str
    name: str | None = None
    shortDescription: SarifMessage | None = None
    fullDescription: SarifMessage | None = None
    help: SarifMessage | None = None
    helpUri: str | None = None
    properties: dict[str, Any] | None = None
    defaultConfiguration: SarifRuleConfig | None = None


class SarifResult(BaseModel):
    model_config = ConfigDict(extra="allow")

    ruleId: str | None = None
    ruleIndex: int | None = None
    message: SarifMessage
    level: str | None = None
    kind: str | None = None
    baselineState: str | None = None
    locations: list[SarifLocation] | None = None
    relatedLocations: list[SarifLocation] | None = None
    fixes: list[SarifFix] | None = None
    fingerprints: dict[str, str] | None = None
    partialFingerprints: dict[str, str] | None = None
    properties: dict[str, Any] | None = None
    id: str | None = None
    guid: str | None = None


class SarifDriver(BaseModel):
    model_config = ConfigDict(extra="allow")

    name: str
    fullName: str | None = None
    semanticVersion: str | None = None
    version: str | None = None
    organization: str | None = None
    informationUri: str | None = None
    rules: list[SarifRule] | None = None


class SarifTool(BaseModel):
    model_config = ConfigDict(extra="allow")

    driver: SarifDriver


class SarifAutomationDetails(BaseModel):
    id: str | None = None
    guid: str | None = None


class SarifRun(BaseModel):
    model_config = ConfigDict(extra="allow")

    tool: SarifTool
    automationDetails: SarifAutomationDetails | None = None
    results: list[SarifResult] = Field(default_factory=list)


class SarifLog(BaseModel):
    version: str
    runs: list[SarifRun]
