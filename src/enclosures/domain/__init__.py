"""Domain layer - enclosure geometry and panel net rules."""

from .errors import (
    CutoutOutOfBoundsError,
    DegenerateJointError,
    EnclosureError,
    InvalidAccessoryError,
    InvalidDimensionError,
)
from .presets import ACCESSORY_PRESETS, get_preset
from .value_objects import (
    PANEL_ORDER,
    AccessorySlot,
    BoxDimensions,
    Circle,
    Cutout,
    CutoutGrid,
    EdgeSide,
    EdgeSpec,
    EnclosureSpec,
    JointConfig,
    LayoutOptions,
    PanelDocument,
    PanelFootprint,
    PanelNet,
    PanelRole,
    Point2D,
    Rectangle,
    RoundedSlot,
    SheetLayout,
    ThermalOptions,
)

__all__ = [
    "ACCESSORY_PRESETS",
    "AccessorySlot",
    "BoxDimensions",
    "Circle",
    "Cutout",
    "CutoutGrid",
    "CutoutOutOfBoundsError",
    "DegenerateJointError",
    "EdgeSide",
    "EdgeSpec",
    "EnclosureError",
    "EnclosureSpec",
    "InvalidAccessoryError",
    "InvalidDimensionError",
    "JointConfig",
    "LayoutOptions",
    "PANEL_ORDER",
    "PanelDocument",
    "PanelFootprint",
    "PanelNet",
    "PanelRole",
    "Point2D",
    "Rectangle",
    "RoundedSlot",
    "SheetLayout",
    "ThermalOptions",
    "get_preset",
]
