"""Configuration merging utilities for CLI override support.

Precedence is CLI args > config values > defaults. Only non-None CLI
arguments override configuration values.
"""

from typing import Any

from enclosures.application.config.schemas import EnclosureConfiguration

# CLI option name -> (config section, field)
_FIELD_MAP: dict[str, tuple[str, str]] = {
    "length": ("enclosure", "length"),
    "width": ("enclosure", "width"),
    "height": ("enclosure", "height"),
    "thickness": ("material", "thickness"),
    "tab_size": ("joints", "tab_size"),
    "kerf": ("joints", "kerf"),
    "has_duct": ("thermal", "has_duct"),
    "has_temp_sensors": ("thermal", "has_temp_sensors"),
    "spacing": ("layout", "spacing"),
    "show_labels": ("layout", "show_labels"),
}


def merge_config_with_cli(
    config: EnclosureConfiguration,
    *,
    accessories: list[str] | None = None,
    formats: list[str] | None = None,
    svg_scale: float | None = None,
    dxf_units: str | None = None,
    **overrides: Any,
) -> EnclosureConfiguration:
    """Merge CLI arguments with configuration values.

    Args:
        config: The base configuration.
        accessories: Preset names replacing the configured accessory list.
        formats: Replacement for output.formats.
        svg_scale: Override for output.svg.scale.
        dxf_units: Override for output.dxf.units.
        **overrides: Any of length, width, height, thickness, tab_size, kerf,
            has_duct, has_temp_sensors, spacing and show_labels.

    Returns:
        A new, re-validated EnclosureConfiguration.

    Raises:
        TypeError: If an unknown override name is passed.

    Example:
        >>> merged = merge_config_with_cli(config, width=8.0, kerf=0.008)
        >>> merged.enclosure.width
        8.0
    """
    unknown = set(overrides) - set(_FIELD_MAP)
    if unknown:
        raise TypeError(f"Unknown override(s): {', '.join(sorted(unknown))}")

    data = config.model_dump()
    for name, value in overrides.items():
        if value is None:
            continue
        section, field = _FIELD_MAP[name]
        data[section][field] = value

    if accessories is not None:
        data["accessories"] = [{"preset": name} for name in accessories]
    if formats is not None:
        data["output"]["formats"] = formats
    if svg_scale is not None:
        data["output"]["svg"]["scale"] = svg_scale
    if dxf_units is not None:
        data["output"]["dxf"]["units"] = dxf_units

    return EnclosureConfiguration.model_validate(data)
