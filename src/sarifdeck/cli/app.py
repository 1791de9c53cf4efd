# Copyright (c) 2026 Veritas Aequitas Holdings LLC. All rights reserved.
"""Typer CLI application root."""

from __future__ import annotations

import logging
import sys
from enum import StrEnum
from pathlib import Path
from typing import Annotated

import typer

from sarifdeck.core.exceptions import SarifError

logger = logging.getLogger("sarifdeck.cli")

app = typer.Typer(
    name="sarifdeck",
    help="Normalize SARIF reports into UI-ready findings",
    no_args_is_help=True,
)

# Used when --ci-mode is set without --fail-on or SARIFDECK_FAIL_ON.
DEFAULT_FAIL_ON = ["error"]


class OutputFormat(StrEnum):
    CONSOLE = "console"
    JSON = "json"
    SUMMARY = "summary"


def _setup() -> None:
    from sarifdeck.core.config import get_settings
    from sarifdeck.core.logging import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_format)


@app.command()
def normalize(
    files: Annotated[
        list[Path], typer.Argument(help="SARIF files (or upload envelopes) to normalize")
    ],
    fmt: Annotated[
        OutputFormat,
        typer.Option("--format", "-f", help="Output format"),
    ] = OutputFormat.CONSOLE,
    output: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file path"),
    ] = None,
    file_name: Annotated[
        str | None,
        typer.Option("--file-name", help="Display name to record (single file only)"),
    ] = None,
    no_raw: Annotated[
        bool, typer.Option("--no-raw", help="Omit rawResult from JSON output")
    ] = False,
    ci_mode: Annotated[
        bool,
        typer.Option("--ci-mode", help="Enable CI mode with standardized exit codes"),
    ] = False,
    fail_on: Annotated[
        str | None,
        typer.Option("--fail-on", help="Comma-separated severities that fail CI mode"),
    ] = None,
) -> None:
    """Normalize one or more SARIF reports."""
    from sarifdeck.ci.exit_codes import CIExitCode, documents_to_exit_code, resolve_fail_on
    from sarifdeck.core.config import get_settings
    from sarifdeck.core.exceptions import ConfigurationError
    from sarifdeck.normalizer.stats import aggregate_findings
    from sarifdeck.sdk import normalize_file

    _setup()
    settings = get_settings()

    if file_name and len(files) > 1:
        typer.echo("--file-name can only be used with a single file", err=True)
        raise typer.Exit(1)

    try:
        fail_on_severities = resolve_fail_on(fail_on, settings.fail_on, DEFAULT_FAIL_ON)
    except (ValueError, ConfigurationError) as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(1) from None

    documents = []
    failed = False
    for path in files:
        if not path.is_file():
            typer.echo(f"File not found: {path}", err=True)
            failed = True
            continue
        try:
            documents.append(normalize_file(path, file_name=file_name, settings=settings))
        except SarifError as exc:
            logger.warning("Rejected %s: %s", path, exc)
            typer.echo(f"{path}: {exc}", err=True)
            failed = True

    include_raw = settings.include_raw_results and not no_raw

    if fmt == OutputFormat.CONSOLE:
        from sarifdeck.cli.formatters.console import format_aggregate, format_document

        for document in documents:
            format_document(document)
        if len(documents) > 1:
            format_aggregate(aggregate_findings(documents))
    elif fmt == OutputFormat.JSON:
        from sarifdeck.cli.formatters.json_fmt import format_json, format_json_many

        if len(files) == 1 and documents:
            _write_output(format_json(documents[0], include_raw=include_raw), output)
        elif documents:
            _write_output(format_json_many(documents, include_raw=include_raw), output)
    elif fmt == OutputFormat.SUMMARY:
        from sarifdeck.cli.formatters.json_fmt import format_json_summary

        _write_output(format_json_summary(aggregate_findings(documents)), output)

    if failed:
        raise typer.Exit(int(CIExitCode.INPUT_ERROR) if ci_mode else 1)
    if ci_mode:
        raise typer.Exit(int(documents_to_exit_code(documents, fail_on_severities)))


@app.command()
def validate(
    files: Annotated[list[Path], typer.Argument(help="SARIF files to validate")],
) -> None:
    """Check that SARIF files parse and match the schema."""
    from sarifdeck.ci.exit_codes import CIExitCode
    from sarifdeck.sdk import validate_file

    _setup()

    failed = False
    for path in files:
        if not path.is_file():
            typer.echo(f"File not found: {path}", err=True)
            failed = True
            continue
        try:
            validate_file(path)
        except SarifError as exc:
            typer.echo(f"{path}: {exc}", err=True)
            failed = True
        else:
            typer.echo(f"{path}: OK")

    if failed:
        raise typer.Exit(int(CIExitCode.INPUT_ERROR))


@app.command()
def version() -> None:
    """Print the sarifdeck version."""
    from sarifdeck import __version__

    typer.echo(__version__)


def _write_output(text: str, output: Path | None) -> None:
    if output:
        output.write_text(text, encoding="utf-8")
        typer.echo(f"Output written to {output}")
    else:
        sys.stdout.write(text + "\n")
