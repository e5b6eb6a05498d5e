"""Unit tests for the configuration adapter.

These tests verify:
- config_to_spec converts every section into the domain EnclosureSpec
- Accessory presets are resolved before conversion
- Domain rules the schema does not check surface as domain errors
"""

import pytest

from enclosures.application.config import (
    AccessoryConfig,
    config_to_accessory,
    config_to_spec,
    load_config_from_dict,
)
from enclosures.domain import (
    DegenerateJointError,
    EnclosureSpec,
    InvalidDimensionError,
)


class TestConfigToSpec:
    """Tests for config_to_spec function."""

    def test_minimal_config(self, config_data: dict) -> None:
        """Defaults fill in material, joints and layout."""
        spec = config_to_spec(load_config_from_dict(config_data))

        assert isinstance(spec, EnclosureSpec)
        assert spec.dimensions.length == 24.0
        assert spec.dimensions.thickness == 0.25
        assert spec.joints.tab_target_size == 0.5
        assert spec.joints.kerf == 0.01
        assert spec.accessories == ()
        assert spec.layout.spacing == 0.5
        assert spec.layout.show_labels is True

    def test_full_config(self, config_data: dict) -> None:
        """Every section maps onto the domain spec."""
        config_data.update(
            {
                "material": {"thickness": 0.125},
                "joints": {"tab_size": 0.75, "kerf": 0.005},
                "accessories": [
                    {"preset": "RTX 3080"},
                    {"name": "Capture card", "length": 7.0, "height": 4.0, "width": 1.0},
                ],
                "thermal": {"has_duct": True, "has_temp_sensors": True},
                "layout": {"spacing": 1.0, "show_labels": False},
            }
        )
        spec = config_to_spec(load_config_from_dict(config_data))

        assert spec.dimensions.thickness == 0.125
        assert spec.joints.tab_target_size == 0.75
        assert [a.name for a in spec.accessories] == ["RTX 3080", "Capture card"]
        assert spec.accessories[0].tdp == 320
        assert spec.accessories[1].tdp is None
        assert spec.thermal.has_duct and spec.thermal.has_temp_sensors
        assert spec.layout.spacing == 1.0
        assert spec.layout.show_labels is False

    def test_preset_fields_can_be_overridden(self, config_data: dict) -> None:
        """Explicit accessory fields win over the preset."""
        config_data["accessories"] = [{"preset": "RTX 3080", "length": 12.5}]
        spec = config_to_spec(load_config_from_dict(config_data))

        assert spec.accessories[0].length == 12.5
        assert spec.accessories[0].height == 4.4

    def test_thickness_too_large_for_box(self, config_data: dict) -> None:
        """The thickness rule is enforced by the domain."""
        config_data["material"] = {"thickness": 1.5}
        with pytest.raises(InvalidDimensionError):
            config_to_spec(load_config_from_dict(config_data))

    def test_kerf_equal_to_tab_size(self, config_data: dict) -> None:
        """A kerf equal to the tab size is a degenerate joint."""
        config_data["joints"] = {"tab_size": 0.5, "kerf": 0.5}
        with pytest.raises(DegenerateJointError):
            config_to_spec(load_config_from_dict(config_data))


class TestConfigToAccessory:
    """Tests for config_to_accessory function."""

    def test_unnamed_accessory_gets_default_name(self) -> None:
        """Accessories without a name or preset are called "Accessory"."""
        slot = config_to_accessory(
            AccessoryConfig(length=5.0, height=3.0, width=1.0), index=2
        )
        assert slot.name == "Accessory"
        assert slot.length == 5.0
