# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Rich console output formatter for normalized SARIF documents."""

from __future__ import annotations

from rich.console import Console
from rich.table import Table
from rich.text import Text

from sarifdeck import __version__
from sarifdeck.core.constants import SEVERITY_ORDER, Severity
from sarifdeck.models.normalized import AggregateStats, FindingLocation, NormalizedSarif

console = Console()

SEVERITY_COLORS = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.NOTE: "cyan",
    Severity.NONE: "dim",
    Severity.PASS: "green",
    Severity.OPEN: "magenta",
    Severity.REVIEW: "blue",
    Severity.INFORMATIONAL: "dim",
    Severity.UNKNOWN: "white",
}

_MESSAGE_WIDTH = 120


def _format_location(location: FindingLocation | None) -> str:
    if location is None or not location.file:
        return "-"
    if location.start_line is None:
        return location.file
    if location.start_column is None:
        return f"{location.file}:{location.start_line}"
    return f"{location.file}:{location.start_line}:{location.start_column}"


def format_severity_counts(by_severity: dict[Severity, int]) -> str:
    parts = [f"{by_severity[sev]} {sev}" for sev in SEVERITY_ORDER if by_severity.get(sev)]
    return ", ".join(parts) if parts else "0 findings"


def format_document(document: NormalizedSarif) -> None:
    """Print a normalized document to the console with Rich formatting."""
    meta = document.metadata
    console.print()
    console.print(f"[bold]sarifdeck v{__version__}[/bold] - SARIF findings")
    console.print()

    info_table = Table(show_header=False, box=None, padding=(0, 2))
    info_table.add_column("key", style="dim")
    info_table.add_column("value")
    if meta.file_name:
        info_table.add_row("File:", meta.file_name)
    info_table.add_row("SARIF:", meta.sarif_version)
    info_table.add_row("Tools:", ", ".join(meta.tool_names) or "-")
    console.print(info_table)
    console.print()

    if document.findings:
        table = Table(show_lines=False)
        table.add_column("Severity", no_wrap=True)
        table.add_column("Rule", style="bold", no_wrap=True)
        table.add_column("Location")
        table.add_column("Message")
        for finding in sorted(
            document.findings, key=lambda f: SEVERITY_ORDER.index(f.severity)
        ):
            table.add_row(
                Text(str(finding.severity), style=SEVERITY_COLORS[finding.severity]),
                finding.rule_id,
                _format_location(finding.location),
                finding.message[:_MESSAGE_WIDTH],
            )
        console.print(table)
    else:
        console.print("  No findings.", style="bold green")
    console.print()

    summary = format_severity_counts(document.stats.by_severity)
    console.print(f"  Summary: {document.stats.total_findings} findings ({summary})")
    console.print()


def format_aggregate(stats: AggregateStats) -> None:
    """Print the combined summary for several documents."""
    console.print(
        f"  Total: {stats.total} findings across {stats.document_count} file(s)"
        f" ({format_severity_counts(stats.by_severity)})"
    )
    if stats.tool_names:
        console.print(f"  Tools: {', '.join(stats.tool_names)}", style="dim")
    console.print()
