"""Configuration schema and loading system for enclosure specifications.

Public API:
    - EnclosureConfiguration: Root configuration model
    - load_config: Load configuration from a JSON file
    - load_config_from_dict: Load configuration from a dictionary
    - ConfigError: Exception for configuration errors
    - merge_config_with_cli: Apply CLI overrides
    - config_to_spec: Convert a configuration to the domain EnclosureSpec

Example:
    >>> from pathlib import Path
    >>> from enclosures.application.config import load_config, ConfigError
    >>>
    >>> try:
    ...     config = load_config(Path("my-enclosure.json"))
    ...     print(f"Box: {config.enclosure.length}x{config.enclosure.width}")
    ... except ConfigError as e:
    ...     print(f"Error: {e}")
"""

from enclosures.application.config.adapter import (
    config_to_accessory,
    config_to_spec,
)
from enclosures.application.config.loader import (
    ConfigError,
    load_config,
    load_config_from_dict,
)
from enclosures.application.config.merger import merge_config_with_cli
from enclosures.application.config.schemas import (
    SUPPORTED_VERSIONS,
    AccessoryConfig,
    DxfOutputConfigSchema,
    EnclosureConfiguration,
    EnclosureDimensionsConfig,
    JointConfigSchema,
    LayoutConfig,
    MaterialConfig,
    OutputConfig,
    SvgOutputConfigSchema,
    ThermalConfig,
)

__all__ = [
    "AccessoryConfig",
    "ConfigError",
    "DxfOutputConfigSchema",
    "EnclosureConfiguration",
    "EnclosureDimensionsConfig",
    "JointConfigSchema",
    "LayoutConfig",
    "MaterialConfig",
    "OutputConfig",
    "SUPPORTED_VERSIONS",
    "SvgOutputConfigSchema",
    "ThermalConfig",
    "config_to_accessory",
    "config_to_spec",
    "load_config",
    "load_config_from_dict",
    "merge_config_with_cli",
]
