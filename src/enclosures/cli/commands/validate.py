"""Validate command for checking configuration files.

Loads a JSON configuration, then runs the full panel net generation so
domain problems (thickness too large for the box, kerf too large for the
finger joints) are reported as well as schema errors.
"""

from pathlib import Path
from typing import Annotated

import typer

from enclosures.application import GeneratePanelNetCommand
from enclosures.application.config import ConfigError, config_to_spec, load_config
from enclosures.domain import EnclosureError


def display_load_error(error: ConfigError) -> None:
    """Print a configuration loading error to stderr."""
    typer.echo("Errors:", err=True)
    if error.error_type == "file_not_found":
        typer.echo(f"  File not found: {error.path}", err=True)
    elif error.error_type == "json_parse":
        typer.echo("  Invalid JSON syntax", err=True)
        for detail in error.details:
            line = detail.get("line", "?")
            column = detail.get("column", "?")
            message = detail.get("message", "Unknown error")
            typer.echo(f"    Line {line}, Column {column}: {message}", err=True)
    elif error.error_type == "validation" and error.details:
        for detail in error.details:
            typer.echo(f"  {detail.get('path', 'unknown')}: {detail.get('message')}", err=True)
            value = detail.get("value")
            if value is not None:
                typer.echo(f"    Value: {value!r}", err=True)
    else:
        typer.echo(f"  {error.message}", err=True)


def validate_command(
    config_file: Annotated[
        Path,
        typer.Argument(help="Path to the JSON configuration file to validate"),
    ],
) -> None:
    """Validate an enclosure configuration file.

    Exit codes:
        0 - Configuration is valid
        1 - Configuration has errors

    Example:
        enclosures validate my-enclosure.json
    """
    typer.echo(f"Validating {config_file}...")

    try:
        config = load_config(config_file)
    except ConfigError as e:
        display_load_error(e)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    try:
        output = GeneratePanelNetCommand().execute(config_to_spec(config))
    except EnclosureError as e:
        typer.echo("Errors:", err=True)
        typer.echo(f"  {e}", err=True)
        typer.echo("Validation failed.", err=True)
        raise typer.Exit(code=1)

    typer.echo(
        f"Validation passed: {len(output.documents)} panels, "
        f"{output.net.cutout_count} cutouts."
    )
