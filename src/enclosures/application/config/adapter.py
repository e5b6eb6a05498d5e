"""Adapter from EnclosureConfiguration to the domain EnclosureSpec."""

from enclosures.application.config.schemas import (
    AccessoryConfig,
    EnclosureConfiguration,
)
from enclosures.domain import (
    AccessorySlot,
    BoxDimensions,
    EnclosureSpec,
    InvalidAccessoryError,
    JointConfig,
    LayoutOptions,
    ThermalOptions,
)


def config_to_accessory(config: AccessoryConfig, index: int) -> AccessorySlot:
    """Convert one accessory entry, tagging domain errors with its index.

    Raises:
        InvalidAccessoryError: If a dimension is not positive.
    """
    try:
        return AccessorySlot(
            name=config.name or f"Accessory {index + 1}",
            length=config.length,  # type: ignore[arg-type]
            height=config.height,  # type: ignore[arg-type]
            width=config.width,  # type: ignore[arg-type]
            tdp=config.tdp,
        )
    except InvalidAccessoryError as e:
        raise InvalidAccessoryError(f"accessories[{index}]: {e}", index=index) from e


def config_to_spec(config: EnclosureConfiguration) -> EnclosureSpec:
    """Convert a validated configuration into the domain EnclosureSpec.

    Cross-field rules that the schema does not check (thickness against the
    box size, kerf against the tab size) are enforced by the domain value
    objects.

    Raises:
        InvalidDimensionError: If a dimension or joint setting is out of range.
        DegenerateJointError: If the kerf is not smaller than the tab size.
        InvalidAccessoryError: If an accessory dimension is not positive.

    Example:
        >>> config = load_config(Path("my-enclosure.json"))
        >>> spec = config_to_spec(config)
        >>> output = GeneratePanelNetCommand().execute(spec)
    """
    dimensions = BoxDimensions(
        length=config.enclosure.length,
        width=config.enclosure.width,
        height=config.enclosure.height,
        thickness=config.material.thickness,
    )
    joints = JointConfig(
        tab_target_size=config.joints.tab_size,
        kerf=config.joints.kerf,
    )
    accessories = tuple(
        config_to_accessory(accessory, index)
        for index, accessory in enumerate(config.accessories)
    )
    return EnclosureSpec(
        dimensions=dimensions,
        joints=joints,
        accessories=accessories,
        thermal=ThermalOptions(
            has_duct=config.thermal.has_duct,
            has_temp_sensors=config.thermal.has_temp_sensors,
        ),
        layout=LayoutOptions(
            spacing=config.layout.spacing,
            show_labels=config.layout.show_labels,
        ),
    )
