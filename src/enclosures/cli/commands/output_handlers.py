"""Output handling for the enclosures CLI: single documents and multi-format export."""

from __future__ import annotations

from pathlib import Path
from typing import TYPE_CHECKING

import typer

from enclosures.infrastructure.exporters import ExporterRegistry, ExportManager

if TYPE_CHECKING:
    from enclosures.application.dtos import PanelNetOutput

__all__ = [
    "handle_multi_format_export",
    "parse_formats",
    "write_single_format",
]


def parse_formats(output_formats_str: str) -> list[str]:
    """Parse a comma-separated format list ("all" selects every format).

    Unknown formats print an error and exit with code 1.
    """
    if output_formats_str.strip().lower() == "all":
        return ExporterRegistry.available_formats()

    formats = [f.strip().lower() for f in output_formats_str.split(",") if f.strip()]
    available = ExporterRegistry.available_formats()
    invalid = [f for f in formats if f not in available]
    if invalid:
        typer.echo(f"Unknown formats: {', '.join(invalid)}", err=True)
        typer.echo(f"Available formats: {', '.join(available)}", err=True)
        raise typer.Exit(code=1)
    if not formats:
        typer.echo("No valid formats to export.", err=True)
        raise typer.Exit(code=1)
    return formats


def handle_multi_format_export(
    formats: list[str],
    output_dir: Path | None,
    project_name: str,
    result: PanelNetOutput,
) -> None:
    """Export to every format in ``formats`` and list the written files."""
    manager = ExportManager(output_dir or Path("."))
    try:
        files = manager.export_all(formats, result, project_name)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)

    typer.echo("Exported files:")
    for fmt, path in files.items():
        typer.echo(f"  {fmt.upper()}: {path}")


def write_single_format(
    format_name: str,
    result: PanelNetOutput,
    output_file: Path | None,
) -> None:
    """Write one document to ``output_file`` or stdout."""
    try:
        exporter = ExporterRegistry.get(format_name)()
    except KeyError:
        available = ", ".join(ExporterRegistry.available_formats())
        typer.echo(f"Unknown format: {format_name}", err=True)
        typer.echo(f"Available formats: {available}", err=True)
        raise typer.Exit(code=1)

    if output_file is None:
        typer.echo(exporter.export_string(result), nl=False)
        return

    try:
        output_file.parent.mkdir(parents=True, exist_ok=True)
        exporter.export(result, output_file)
    except OSError as e:
        typer.echo(f"Export error: {e}", err=True)
        raise typer.Exit(code=1)
    typer.echo(f"{format_name.upper()} written to {output_file}")
