"""Unit tests for configuration merger.

These tests verify:
- CLI args override config values when provided
- CLI args are ignored when None
- Accessory presets and output options can be replaced
- The merged config is re-validated
"""

import pytest
from pydantic import ValidationError

from enclosures.application.config import (
    AccessoryConfig,
    EnclosureConfiguration,
    EnclosureDimensionsConfig,
    ThermalConfig,
    merge_config_with_cli,
)


class TestMergeConfigWithCli:
    """Tests for merge_config_with_cli function."""

    @pytest.fixture
    def base_config(self) -> EnclosureConfiguration:
        """Create a base configuration for testing."""
        return EnclosureConfiguration(
            schema_version="1.0",
            enclosure=EnclosureDimensionsConfig(length=24.0, width=6.0, height=8.0),
            accessories=[AccessoryConfig(preset="RTX 3060")],
            thermal=ThermalConfig(has_duct=True),
        )

    def test_no_overrides_returns_equivalent_config(
        self, base_config: EnclosureConfiguration
    ) -> None:
        """When no CLI args provided, merged config matches original."""
        merged = merge_config_with_cli(base_config)
        assert merged == base_config

    def test_none_values_ignored(self, base_config: EnclosureConfiguration) -> None:
        """None overrides keep the configured values."""
        merged = merge_config_with_cli(
            base_config, width=None, kerf=None, has_duct=None, accessories=None
        )
        assert merged.enclosure.width == 6.0
        assert merged.thermal.has_duct is True
        assert len(merged.accessories) == 1

    def test_override_dimensions(self, base_config: EnclosureConfiguration) -> None:
        """CLI dimensions override config dimensions."""
        merged = merge_config_with_cli(base_config, width=8.0, height=10.0)

        assert merged.enclosure.width == 8.0
        assert merged.enclosure.height == 10.0
        # Other values unchanged
        assert merged.enclosure.length == 24.0

    def test_override_material_and_joints(
        self, base_config: EnclosureConfiguration
    ) -> None:
        """Thickness, tab size and kerf land in their sections."""
        merged = merge_config_with_cli(
            base_config, thickness=0.125, tab_size=0.75, kerf=0.008
        )

        assert merged.material.thickness == 0.125
        assert merged.joints.tab_size == 0.75
        assert merged.joints.kerf == 0.008

    def test_false_overrides_apply(self, base_config: EnclosureConfiguration) -> None:
        """A False flag is an override, not a missing value."""
        merged = merge_config_with_cli(base_config, has_duct=False, show_labels=False)

        assert merged.thermal.has_duct is False
        assert merged.layout.show_labels is False

    def test_accessories_replaced_by_presets(
        self, base_config: EnclosureConfiguration
    ) -> None:
        """Accessory presets from the CLI replace the configured list."""
        merged = merge_config_with_cli(base_config, accessories=["RTX 3080", "RTX 4090"])

        assert [a.name for a in merged.accessories] == ["RTX 3080", "RTX 4090"]
        assert merged.accessories[0].length == 11.2

    def test_output_overrides(self, base_config: EnclosureConfiguration) -> None:
        """Formats, SVG scale and DXF units can be overridden."""
        merged = merge_config_with_cli(
            base_config, formats=["dxf", "json"], svg_scale=72.0, dxf_units="mm"
        )

        assert merged.output.formats == ["dxf", "json"]
        assert merged.output.svg.scale == 72.0
        assert merged.output.dxf.units == "mm"

    def test_original_not_mutated(self, base_config: EnclosureConfiguration) -> None:
        """Merging returns a new configuration."""
        merge_config_with_cli(base_config, width=12.0)
        assert base_config.enclosure.width == 6.0

    def test_unknown_override_rejected(
        self, base_config: EnclosureConfiguration
    ) -> None:
        """Unknown option names are a programming error."""
        with pytest.raises(TypeError, match="depth"):
            merge_config_with_cli(base_config, depth=12.0)

    def test_invalid_override_revalidated(
        self, base_config: EnclosureConfiguration
    ) -> None:
        """Overrides go through schema validation."""
        with pytest.raises(ValidationError):
            merge_config_with_cli(base_config, width=-1.0)

    def test_unknown_preset_rejected(self, base_config: EnclosureConfiguration) -> None:
        """An unknown CLI preset fails validation."""
        with pytest.raises(ValidationError, match="Unknown accessory preset"):
            merge_config_with_cli(base_config, accessories=["GTX 9999"])
