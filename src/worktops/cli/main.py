"""Typer CLI for worktop drawings."""

from pathlib import Path
from typing import Annotated

import typer

from worktops.application import DrawingOutput, GenerateDrawingCommand
from worktops.application.config import (
    ConfigError,
    WorktopDrawingConfiguration,
    load_config,
)
from worktops.cli.commands import display_load_error, validate_command
from worktops.infrastructure.exporters import ExporterRegistry, ExportManager

app = typer.Typer(
    name="worktops",
    help="Generate annotated worktop drawings from JSON configurations.",
)

# Register validate command
app.command(name="validate")(validate_command)


def _parse_formats(output_format: str) -> list[str]:
    """Parse a comma-separated format list, exiting on unknown formats."""
    formats = [f.strip().lower() for f in output_format.split(",") if f.strip()]
    try:
        return ExporterRegistry.resolve_formats(formats)
    except KeyError:
        available = ExporterRegistry.available_formats()
        invalid = [
            f for f in formats if f != "all" and not ExporterRegistry.is_registered(f)
        ]
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)


def _load_all(config_files: list[Path]) -> list[WorktopDrawingConfiguration]:
    configs: list[WorktopDrawingConfiguration] = []
    for config_file in config_files:
        try:
            configs.append(load_config(config_file))
        except ConfigError as e:
            typer.echo(f"Configuration error in {config_file}:", err=True)
            display_load_error(e)
            raise typer.Exit(code=1)
    return configs


def _report(output: DrawingOutput) -> None:
    for warning in output.warnings:
        typer.echo(f"Warning: {output.name}: {warning}", err=True)
    for error in output.errors:
        typer.echo(f"Error: {output.name}: {error}", err=True)


@app.command()
def generate(
    config_files: Annotated[
        list[Path],
        typer.Argument(help="One or more JSON configuration files"),
    ],
    output_format: Annotated[
        str | None,
        typer.Option(
            "--format",
            "-f",
            help="Comma-separated export formats: svg,dxf,json (or 'all'). "
            "Defaults to each configuration's output.formats",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option(
            "--output-dir",
            "-o",
            help="Output directory. Defaults to output.output_dir or the "
            "current directory",
        ),
    ] = None,
    project_name: Annotated[
        str | None,
        typer.Option(
            "--project-name",
            help="Base name for exported files. Defaults to output.project_name",
        ),
    ] = None,
    to_stdout: Annotated[
        bool,
        typer.Option(
            "--stdout", help="Print the export to stdout instead of writing files"
        ),
    ] = False,
) -> None:
    """Generate worktop drawings from configuration files.

    Each configuration is drawn independently. Cutouts that do not fit are
    left out of the drawing and reported as warnings.

    Example:
        worktops generate kitchen.json -f svg,dxf -o drawings/
    """
    cli_formats = _parse_formats(output_format) if output_format else None
    configs = _load_all(config_files)

    command = GenerateDrawingCommand()
    outputs = command.execute_many(configs, names=[str(f) for f in config_files])

    failed = False
    for output in outputs:
        _report(output)
        failed = failed or not output.is_valid
    if failed:
        raise typer.Exit(code=1)

    for config_file, config, output in zip(config_files, configs, outputs):
        formats = cli_formats or _parse_formats(",".join(config.output.formats))
        drawing = output.drawing
        assert drawing is not None

        if to_stdout:
            if len(formats) != 1:
                typer.echo("--stdout requires exactly one format", err=True)
                raise typer.Exit(code=1)
            exporter = ExporterRegistry.get(formats[0])()
            typer.echo(exporter.export_string(drawing))
            continue

        name = project_name or config.output.project_name
        if len(config_files) > 1:
            name = f"{name}_{config_file.stem}"
        out_dir = output_dir or Path(config.output.output_dir or ".")

        manager = ExportManager(out_dir)
        try:
            files = manager.export_all(formats, drawing, name)
        except OSError as e:
            typer.echo(f"Export error: {e}", err=True)
            raise typer.Exit(code=1)

        typer.echo(f"Exported files for {config_file}:")
        for fmt, path in files.items():
            typer.echo(f"  {fmt.upper()}: {path}")


@app.command()
def formats() -> None:
    """List the available export formats."""
    for format_name in ExporterRegistry.available_formats():
        exporter_class = ExporterRegistry.get(format_name)
        typer.echo(
            f"{format_name}\t.{exporter_class.file_extension}\t{exporter_class.media_type}"
        )


if __name__ == "__main__":
    app()
