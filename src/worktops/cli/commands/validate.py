"""Validate command for checking configuration files.

This module provides the `validate` command that checks a JSON configuration
file for errors and warnings, including clamped treatments and cutouts that
will not be drawn.
"""

from pathlib import Path
from typing import Annotated

import typer

from worktops.application.config import (
    ConfigError,
    ValidationResult,
    load_config,
    validate_config,
)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate a worktop configuration file.

    Checks the configuration file for:
    - JSON syntax errors
    - Schema validation errors (missing required fields, invalid types, etc.)
    - Drawing advisories (clamped corners, dropped cutouts, ignored edges)

    Exit codes:
        0 - Configuration is valid with no warnings
        1 - Configuration has errors (cannot be used)
        2 - Configuration is valid but has warnings

    Example:
        worktops validate kitchen.json
    """
    typer.echo(f"Validating {config_file}...")
    typer.echo()

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo()
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    result = validate_config(config)
    _display_validation_result(result)
    raise typer.Exit(code=result.exit_code)


def display_load_error(error: ConfigError) -> None:
    """Display a configuration loading error on stderr."""
    typer.echo("Errors:", err=True)
    match error.error_type:
        case "file_not_found":
            lines = [f"File not found: {error.path}"]
        case "json_parse":
            lines = ["Invalid JSON syntax"] + [
                f"  Line {d.get('line', '?')}, Column {d.get('column', '?')}: "
                f"{d.get('message', 'Unknown error')}"
                for d in error.details
            ]
        case "validation":
            lines = []
            for detail in error.details:
                lines.append(f"{detail.get('path') or 'worktop'}: {detail.get('message')}")
                value = detail.get("value")
                # Whole sections are echoed back by pydantic; skip those.
                if value is not None and not isinstance(value, (dict, list)):
                    lines.append(f"  Value: {value!r}")
        case _:
            lines = [error.message]
    for line in lines:
        typer.echo(f"  {line}", err=True)


def _display_validation_result(result: ValidationResult) -> None:
    if result.errors:
        typer.echo("Errors:", err=True)
    for error in result.errors:
        typer.echo(f"  {error.path}: {error.message}", err=True)
        if error.value is not None:
            typer.echo(f"    Value: {error.value!r}", err=True)

    if result.warnings:
        typer.echo("Warnings:")
    for warning in result.warnings:
        suffix = f" ({warning.suggestion})" if warning.suggestion else ""
        typer.echo(f"  {warning.path}: {warning.message}{suffix}")
    typer.echo()

    counts = f"{len(result.errors)} error(s), {len(result.warnings)} warning(s)"
    match result.exit_code:
        case 0:
            typer.echo("Validation passed. Configuration is valid.")
        case 2:
            typer.echo(f"Validation passed with {len(result.warnings)} warning(s)")
        case _:
            typer.echo(f"Validation failed: {counts}", err=True)
