"""Per-panel cutout policy.

Each panel role has one rule function that turns the accessory list and
thermal options into cutouts in the panel's local frame (origin at the
bottom-left corner, y up). The rules clamp sizes so that every cutout keeps
``margin`` clear of the panel edge; a cutout that cannot shrink enough to
fit is skipped. Rules may return grid cutouts, which ``plan_cutouts``
expands into independent copies before checking bounds.

Accessory slots are projected onto the panels along the box length: slot
``i`` of ``n`` is centered at ``length * (i + 1) / (n + 1)``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from ..errors import CutoutOutOfBoundsError
from ..value_objects import (
    AccessorySlot,
    Circle,
    Cutout,
    CutoutGrid,
    EnclosureSpec,
    PanelRole,
    Point2D,
    RoundedSlot,
    ThermalOptions,
)

logger = logging.getLogger(__name__)

__all__ = [
    "FAN_THRESHOLD_LENGTH",
    "check_bounds",
    "expand_grid",
    "fan_count_for",
    "plan_cutouts",
    "plan_panel_cutouts",
]

# Slots at least this long get three fans, shorter ones two.
FAN_THRESHOLD_LENGTH = 11.0
MAX_FAN_DIAMETER = 1.5

DUCT_FRACTION = 0.5
DUCT_CORNER_RADIUS = 0.25

BRACKET_HEIGHT = 1.0
BRACKET_CORNER_RADIUS = 0.25

VENT_COUNT = 3
VENT_WIDTH_FRACTION = 0.6
VENT_HEIGHT = 0.5

POWER_CABLE_WIDTH = 2.0
POWER_CABLE_HEIGHT = 1.0
POWER_CABLE_CORNER_RADIUS = 0.2
POWER_CABLE_BOTTOM_OFFSET = 0.5

SENSOR_RADIUS = 0.125
SENSOR_EDGE_OFFSET = 0.5

# Float slack for the containment check.
_EPSILON = 1e-9

CutoutRule = Callable[
    [float, float, Sequence[AccessorySlot], ThermalOptions, float], list[Cutout]
]


def fan_count_for(slot: AccessorySlot) -> int:
    """Number of cooling fans over an accessory slot."""
    return 3 if slot.length >= FAN_THRESHOLD_LENGTH else 2


def _slot_center(index: int, count: int, extent: float) -> float:
    return extent * (index + 1) / (count + 1)


def _rounded_slot(width: float, height: float, radius: float) -> RoundedSlot:
    return RoundedSlot(width, height, min(radius, width / 2, height / 2))


def _top_rule(
    width: float,
    height: float,
    accessories: Sequence[AccessorySlot],
    thermal: ThermalOptions,
    margin: float,
) -> list[Cutout]:
    cutouts: list[Cutout] = []
    count = len(accessories)
    band = height / (count + 1) if count else height

    for index, slot in enumerate(accessories):
        center_y = _slot_center(index, count, height)
        fans = fan_count_for(slot)
        extent = min(slot.length, band)
        pitch = extent / (fans + 1)
        first_y = center_y - extent / 2 + pitch
        last_y = first_y + pitch * (fans - 1)
        diameter = min(
            MAX_FAN_DIAMETER,
            slot.width,
            0.8 * pitch,
            width - 2 * margin,
            2 * (first_y - margin),
            2 * (height - margin - last_y),
        )
        if diameter <= 0:
            logger.debug(f"Skipping fan vents for '{slot.name}': no room on top panel")
            continue
        cutouts.append(
            Cutout(
                shape=Circle(diameter / 2),
                center=Point2D(width / 2, first_y),
                purpose="fan_vent",
                grid=CutoutGrid(count_x=1, count_y=fans, spacing_y=pitch),
            )
        )

    if thermal.has_duct:
        duct_width = min(width * DUCT_FRACTION, width - 2 * margin)
        duct_height = min(height * DUCT_FRACTION, height - 2 * margin)
        if duct_width > 0 and duct_height > 0:
            cutouts.append(
                Cutout(
                    shape=_rounded_slot(duct_width, duct_height, DUCT_CORNER_RADIUS),
                    center=Point2D(width / 2, height / 2),
                    purpose="air_duct",
                )
            )
        else:
            logger.debug("Skipping air duct: no room on top panel")
    return cutouts


def _bottom_rule(
    width: float,
    height: float,
    accessories: Sequence[AccessorySlot],
    thermal: ThermalOptions,
    margin: float,
) -> list[Cutout]:
    cutouts: list[Cutout] = []
    count = len(accessories)
    band = height / (count + 1) if count else height
    bracket_width = min(width * 0.5, width - 2 * margin)

    for index, slot in enumerate(accessories):
        # The bottom panel's y axis runs from the back of the box to the front
        center_y = height - _slot_center(index, count, height)
        bracket_height = min(
            BRACKET_HEIGHT,
            band,
            2 * (center_y - margin),
            2 * (height - margin - center_y),
        )
        if bracket_width <= 0 or bracket_height <= 0:
            logger.debug(f"Skipping mounting bracket for '{slot.name}': no room")
            continue
        cutouts.append(
            Cutout(
                shape=_rounded_slot(
                    bracket_width, bracket_height, BRACKET_CORNER_RADIUS
                ),
                center=Point2D(width / 2, center_y),
                purpose="mounting_bracket",
            )
        )
    return cutouts


def _vent_row(
    width: float, height: float, margin: float, purpose: str
) -> list[Cutout]:
    """Three evenly spaced horizontal rounded slots, as one grid."""
    pitch = height / (VENT_COUNT + 1)
    slot_width = min(width * VENT_WIDTH_FRACTION, width - 2 * margin)
    slot_height = min(VENT_HEIGHT, 0.8 * pitch, 2 * (pitch - margin))
    if slot_width <= 0 or slot_height <= 0:
        logger.debug(f"Skipping {purpose} slots: panel too small")
        return []
    return [
        Cutout(
            shape=_rounded_slot(slot_width, slot_height, slot_height / 2),
            center=Point2D(width / 2, pitch),
            purpose=purpose,
            grid=CutoutGrid(count_x=1, count_y=VENT_COUNT, spacing_y=pitch),
        )
    ]


def _front_rule(
    width: float,
    height: float,
    accessories: Sequence[AccessorySlot],
    thermal: ThermalOptions,
    margin: float,
) -> list[Cutout]:
    if not accessories:
        return []
    return _vent_row(width, height, margin, "air_intake")


def _back_rule(
    width: float,
    height: float,
    accessories: Sequence[AccessorySlot],
    thermal: ThermalOptions,
    margin: float,
) -> list[Cutout]:
    cutouts: list[Cutout] = []

    if thermal.has_duct:
        radius = min(min(width, height) / 3, min(width, height) / 2 - margin)
        if radius > 0:
            cutouts.append(
                Cutout(
                    shape=Circle(radius),
                    center=Point2D(width / 2, height / 2),
                    purpose="exhaust",
                )
            )
        else:
            logger.debug("Skipping exhaust vent: back panel too small")

    if accessories:
        cable_width = min(POWER_CABLE_WIDTH, width - 2 * margin)
        bottom = max(POWER_CABLE_BOTTOM_OFFSET, margin)
        cable_height = min(POWER_CABLE_HEIGHT, height - margin - bottom)
        if cable_width > 0 and cable_height > 0:
            cutouts.append(
                Cutout(
                    shape=_rounded_slot(
                        cable_width, cable_height, POWER_CABLE_CORNER_RADIUS
                    ),
                    center=Point2D(width / 2, bottom + cable_height / 2),
                    purpose="power_cable",
                )
            )
        else:
            logger.debug("Skipping power cable cutout: back panel too small")
    return cutouts


def _left_rule(
    width: float,
    height: float,
    accessories: Sequence[AccessorySlot],
    thermal: ThermalOptions,
    margin: float,
) -> list[Cutout]:
    if not accessories:
        return []
    return _vent_row(width, height, margin, "ventilation")


def _right_rule(
    width: float,
    height: float,
    accessories: Sequence[AccessorySlot],
    thermal: ThermalOptions,
    margin: float,
) -> list[Cutout]:
    cutouts = _left_rule(width, height, accessories, thermal, margin)
    if not thermal.has_temp_sensors:
        return cutouts

    count = len(accessories)
    sensor_x = min(width - SENSOR_EDGE_OFFSET, width - margin - SENSOR_RADIUS)
    low = margin + SENSOR_RADIUS
    high = height - margin - SENSOR_RADIUS
    for index, slot in enumerate(accessories):
        if sensor_x < low or high < low:
            logger.debug(f"Skipping temperature sensor hole for '{slot.name}'")
            continue
        # Slots crowded toward the panel edge share the nearest legal height.
        sensor_y = min(max(_slot_center(index, count, height), low), high)
        cutouts.append(
            Cutout(
                shape=Circle(SENSOR_RADIUS),
                center=Point2D(sensor_x, sensor_y),
                purpose="temp_sensor",
            )
        )
    return cutouts


_RULES: dict[PanelRole, CutoutRule] = {
    PanelRole.TOP: _top_rule,
    PanelRole.BOTTOM: _bottom_rule,
    PanelRole.FRONT: _front_rule,
    PanelRole.BACK: _back_rule,
    PanelRole.LEFT: _left_rule,
    PanelRole.RIGHT: _right_rule,
}


def expand_grid(cutout: Cutout) -> list[Cutout]:
    """Turn a grid cutout into independent copies.

    Copies are ordered row by row (x varies fastest) and placed at
    ``anchor + (i * spacing_x, j * spacing_y)``. A cutout without a grid
    comes back as a single-element list.
    """
    if cutout.grid is None:
        return [cutout]
    grid = cutout.grid
    return [
        Cutout(
            shape=cutout.shape,
            center=cutout.center.offset(i * grid.spacing_x, j * grid.spacing_y),
            purpose=cutout.purpose,
        )
        for j in range(grid.count_y)
        for i in range(grid.count_x)
    ]


def check_bounds(
    cutout: Cutout,
    role: PanelRole,
    index: int,
    width: float,
    height: float,
    margin: float,
) -> None:
    """Assert that a cutout stays inside ``[margin, size - margin]``.

    Raises:
        CutoutOutOfBoundsError: If any side of the bounding box crosses the
            margin.
    """
    min_x, min_y, max_x, max_y = cutout.bounds
    if (
        min_x < margin - _EPSILON
        or min_y < margin - _EPSILON
        or max_x > width - margin + _EPSILON
        or max_y > height - margin + _EPSILON
    ):
        raise CutoutOutOfBoundsError(
            f"Cutout {index} ({cutout.purpose}) on the {role.value} panel spans "
            f"({min_x:.4f}, {min_y:.4f})-({max_x:.4f}, {max_y:.4f}), outside "
            f"the {margin:.4f} margin of a {width} x {height} panel",
            role=role.value,
            index=index,
        )


def plan_cutouts(
    role: PanelRole,
    panel_width: float,
    panel_height: float,
    accessories: Sequence[AccessorySlot],
    thermal: ThermalOptions,
    margin: float,
) -> tuple[Cutout, ...]:
    """Compute the expanded cutouts of one panel.

    Args:
        role: Which panel.
        panel_width: Panel width in its local frame.
        panel_height: Panel height in its local frame.
        accessories: Accessory slots, in mounting order.
        thermal: Duct and sensor options.
        margin: Clearance kept from every panel edge.

    Returns:
        Cutouts without grids, each checked against the margin.

    Raises:
        CutoutOutOfBoundsError: If a rule produced a cutout outside the margin.
    """
    planned = _RULES[role](panel_width, panel_height, accessories, thermal, margin)
    expanded: list[Cutout] = []
    for cutout in planned:
        expanded.extend(expand_grid(cutout))

    for index, cutout in enumerate(expanded):
        check_bounds(cutout, role, index, panel_width, panel_height, margin)

    logger.debug(f"{role.value} panel: {len(expanded)} cutouts")
    return tuple(expanded)


def plan_panel_cutouts(role: PanelRole, spec: EnclosureSpec) -> tuple[Cutout, ...]:
    """Convenience wrapper taking sizes and options from an EnclosureSpec."""
    width, height = spec.panel_size(role)
    return plan_cutouts(
        role,
        width,
        height,
        spec.accessories,
        spec.thermal,
        spec.cutout_margin,
    )
