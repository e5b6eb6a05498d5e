"""Cross-shaped unfolding of the six panels onto one sheet.

::

               +--------+
               |  top   |
      +--------+--------+--------+--------+
      |  left  | front  | right  |  back  |
      +--------+--------+--------+--------+
               | bottom |
               +--------+

The middle row holds the four wall panels in the order they wrap around
the box. Top and bottom sit above and below the front panel. Every gap,
including the border around the sheet, equals the layout spacing.
"""

from __future__ import annotations

import logging

from ..value_objects import (
    BoxDimensions,
    PanelFootprint,
    PanelRole,
    Point2D,
    SheetLayout,
)

logger = logging.getLogger(__name__)

__all__ = ["layout_panels", "sheet_size"]


def sheet_size(dims: BoxDimensions, spacing: float) -> tuple[float, float]:
    """Sheet width and height for a box with the given spacing."""
    width = 2 * dims.length + 2 * dims.width + 5 * spacing
    height = 2 * dims.length + dims.height + 4 * spacing
    return width, height


def layout_panels(dims: BoxDimensions, spacing: float) -> SheetLayout:
    """Place all six panel footprints.

    Args:
        dims: Box dimensions.
        spacing: Gap between panels and around the sheet border.

    Returns:
        SheetLayout with footprints in bottom, top, left, front, right, back
        order.
    """
    length, width, height = dims.length, dims.width, dims.height
    row_y = 2 * spacing + length

    left_x = spacing
    front_x = left_x + length + spacing
    right_x = front_x + width + spacing
    back_x = right_x + length + spacing

    footprints = (
        PanelFootprint(PanelRole.BOTTOM, width, length, Point2D(front_x, spacing)),
        PanelFootprint(
            PanelRole.TOP, width, length, Point2D(front_x, row_y + height + spacing)
        ),
        PanelFootprint(PanelRole.LEFT, length, height, Point2D(left_x, row_y)),
        PanelFootprint(PanelRole.FRONT, width, height, Point2D(front_x, row_y)),
        PanelFootprint(PanelRole.RIGHT, length, height, Point2D(right_x, row_y)),
        PanelFootprint(PanelRole.BACK, width, height, Point2D(back_x, row_y)),
    )

    sheet_width, sheet_height = sheet_size(dims, spacing)
    logger.debug(f"Sheet layout {sheet_width:.3f} x {sheet_height:.3f} in")
    return SheetLayout(
        footprints=footprints,
        spacing=spacing,
        width=sheet_width,
        height=sheet_height,
    )
