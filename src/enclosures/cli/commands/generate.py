"""Generate and summary commands.

Both build an EnclosureConfiguration from an optional config file plus CLI
overrides, convert it to the domain spec and run GeneratePanelNetCommand.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Annotated

import typer

from enclosures.application import GeneratePanelNetCommand, PanelNetOutput
from enclosures.application.config import (
    ConfigError,
    EnclosureConfiguration,
    config_to_spec,
    load_config,
    load_config_from_dict,
    merge_config_with_cli,
)
from enclosures.cli.commands.output_handlers import (
    handle_multi_format_export,
    parse_formats,
    write_single_format,
)
from enclosures.cli.commands.validate import display_load_error
from enclosures.domain import EnclosureError
from enclosures.infrastructure import PanelSummaryFormatter

logger = logging.getLogger(__name__)

__all__ = [
    "generate_command",
    "resolve_configuration",
    "run_generation",
    "summary_command",
]


def resolve_configuration(
    config_file: Path | None,
    *,
    length: float | None = None,
    width: float | None = None,
    height: float | None = None,
    accessories: list[str] | None = None,
    **overrides,
) -> EnclosureConfiguration:
    """Load the config file (if any) and apply CLI overrides.

    Without a config file, length, width and height are required.

    Raises:
        ConfigError: If the file or the merged values are invalid.
    """
    if config_file is not None:
        config = load_config(config_file)
    else:
        missing = [
            name
            for name, value in (("length", length), ("width", width), ("height", height))
            if value is None
        ]
        if missing:
            raise ConfigError(
                message=(
                    f"Missing dimension(s): {', '.join('--' + m for m in missing)}. "
                    "Provide them or use --config."
                ),
                error_type="missing_dimensions",
            )
        config = load_config_from_dict(
            {
                "schema_version": "1.0",
                "enclosure": {"length": length, "width": width, "height": height},
            }
        )

    try:
        return merge_config_with_cli(
            config,
            length=length,
            width=width,
            height=height,
            accessories=accessories or None,
            **overrides,
        )
    except ValueError as e:
        # Pydantic's ValidationError is a ValueError
        raise ConfigError(message=str(e), error_type="validation", path=config_file) from e


def run_generation(config: EnclosureConfiguration) -> PanelNetOutput:
    """Run the panel net command, exiting with code 1 on domain errors."""
    try:
        spec = config_to_spec(config)
        return GeneratePanelNetCommand().execute(
            spec,
            svg_scale=config.output.svg.scale,
            dxf_units=config.output.dxf.units,
        )
    except EnclosureError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)


def _load_or_exit(config_file: Path | None, **kwargs) -> EnclosureConfiguration:
    try:
        return resolve_configuration(config_file, **kwargs)
    except ConfigError as e:
        display_load_error(e)
        raise typer.Exit(code=1)


ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", "-c", help="Path to JSON configuration file"),
]
LengthOption = Annotated[
    float | None, typer.Option("--length", help="Box length (front to back) in inches")
]
WidthOption = Annotated[
    float | None, typer.Option("--width", help="Box width in inches")
]
HeightOption = Annotated[
    float | None, typer.Option("--height", help="Box height in inches")
]
ThicknessOption = Annotated[
    float | None, typer.Option("--thickness", "-t", help="Material thickness in inches")
]
TabSizeOption = Annotated[
    float | None, typer.Option("--tab-size", help="Target finger tab size in inches")
]
KerfOption = Annotated[
    float | None, typer.Option("--kerf", help="Laser kerf in inches")
]
AccessoryOption = Annotated[
    list[str] | None,
    typer.Option(
        "--accessory",
        "-a",
        help="Accessory preset name, repeatable (see 'enclosures presets')",
    ),
]
DuctOption = Annotated[
    bool | None, typer.Option("--duct/--no-duct", help="Add the air duct and exhaust")
]
SensorOption = Annotated[
    bool | None,
    typer.Option("--temp-sensors/--no-temp-sensors", help="Add temperature sensor holes"),
]


def generate_command(
    config_file: ConfigOption = None,
    length: LengthOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    thickness: ThicknessOption = None,
    tab_size: TabSizeOption = None,
    kerf: KerfOption = None,
    accessories: AccessoryOption = None,
    has_duct: DuctOption = None,
    has_temp_sensors: SensorOption = None,
    spacing: Annotated[
        float | None, typer.Option("--spacing", help="Gap between panels in inches")
    ] = None,
    no_labels: Annotated[
        bool, typer.Option("--no-labels", help="Omit panel name labels")
    ] = False,
    output_format: Annotated[
        str | None,
        typer.Option("--format", "-f", help="Output format: svg, dxf, json"),
    ] = None,
    output_file: Annotated[
        Path | None,
        typer.Option("--output", "-o", help="Output file (default: stdout)"),
    ] = None,
    output_formats: Annotated[
        str | None,
        typer.Option(
            "--output-formats",
            help="Comma-separated export formats: svg,dxf,json (or 'all')",
        ),
    ] = None,
    output_dir: Annotated[
        Path | None,
        typer.Option("--output-dir", help="Output directory for multi-format export"),
    ] = None,
    project_name: Annotated[
        str,
        typer.Option("--project-name", help="Project name for output file naming"),
    ] = "enclosure",
    units: Annotated[
        str | None,
        typer.Option("--units", help="DXF units: inches or mm"),
    ] = None,
) -> None:
    """Generate the laser-cut panel net of an enclosure.

    Example:
        enclosures generate --length 24 --width 6 --height 8 -a "RTX 3080" --duct -o case.svg
    """
    formats = parse_formats(output_formats) if output_formats else None
    config = _load_or_exit(
        config_file,
        length=length,
        width=width,
        height=height,
        accessories=accessories,
        thickness=thickness,
        tab_size=tab_size,
        kerf=kerf,
        has_duct=has_duct,
        has_temp_sensors=has_temp_sensors,
        spacing=spacing,
        show_labels=False if no_labels else None,
        formats=formats,
        dxf_units=units,
    )
    result = run_generation(config)

    if formats is not None:
        handle_multi_format_export(formats, output_dir, project_name, result)
        return

    format_name = (output_format or config.output.formats[0]).lower()
    write_single_format(format_name, result, output_file)


def summary_command(
    config_file: ConfigOption = None,
    length: LengthOption = None,
    width: WidthOption = None,
    height: HeightOption = None,
    thickness: ThicknessOption = None,
    tab_size: TabSizeOption = None,
    kerf: KerfOption = None,
    accessories: AccessoryOption = None,
    has_duct: DuctOption = None,
    has_temp_sensors: SensorOption = None,
    detail: Annotated[
        bool, typer.Option("--detail", help="List cutouts by purpose per panel")
    ] = False,
) -> None:
    """Show panel sizes, tab counts and cutout counts."""
    config = _load_or_exit(
        config_file,
        length=length,
        width=width,
        height=height,
        accessories=accessories,
        thickness=thickness,
        tab_size=tab_size,
        kerf=kerf,
        has_duct=has_duct,
        has_temp_sensors=has_temp_sensors,
    )
    result = run_generation(config)
    typer.echo(PanelSummaryFormatter(show_cutout_detail=detail).format(result))
