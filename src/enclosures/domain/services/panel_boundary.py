"""Closed panel outlines built from four finger-jointed edges.

Each edge is traced by ``generate_edge``. Where two edges meet, the last
segment of the incoming edge and the first segment of the outgoing edge are
extended to a shared corner vertex, offset from the panel corner by both
segments' depths. Stepping both edges back to the exact corner would make
the outline cross itself when both segments are notches.
"""

from __future__ import annotations

import logging

from ..value_objects import EDGE_WALK_ORDER, EdgeSide, EdgeSpec, Point2D
from .adjacency import is_reversed
from .finger_joints import generate_edge

logger = logging.getLogger(__name__)

__all__ = ["build_boundary", "edge_frame"]

Vector2 = tuple[float, float]


def edge_frame(
    side: EdgeSide, width: float, height: float
) -> tuple[Point2D, Vector2, Vector2]:
    """Start corner, walk direction and outward normal of a panel edge.

    The walk is counter-clockwise starting from the panel's local (0, 0).
    """
    if side == EdgeSide.BOTTOM:
        return Point2D(0.0, 0.0), (1.0, 0.0), (0.0, -1.0)
    if side == EdgeSide.RIGHT:
        return Point2D(width, 0.0), (0.0, 1.0), (1.0, 0.0)
    if side == EdgeSide.TOP:
        return Point2D(width, height), (-1.0, 0.0), (0.0, 1.0)
    return Point2D(0.0, height), (0.0, -1.0), (-1.0, 0.0)


def _place(start: Point2D, direction: Vector2, normal: Vector2, offset: Point2D) -> Point2D:
    return Point2D(
        start.x + offset.x * direction[0] + offset.y * normal[0],
        start.y + offset.x * direction[1] + offset.y * normal[1],
    )


def build_boundary(
    width: float,
    height: float,
    edges: tuple[EdgeSpec, ...],
    kerf: float,
) -> tuple[Point2D, ...]:
    """Walk the four edges of a panel and return its closed outline.

    Args:
        width: Panel width in its local frame.
        height: Panel height in its local frame.
        edges: One EdgeSpec per side. Order does not matter.
        kerf: Tab/notch depth.

    Returns:
        Points in counter-clockwise order. The first point is the corner
        vertex between the left and bottom edges and is repeated at the end.
    """
    by_side = {edge.side: edge for edge in edges}

    # Per side: placed interior points plus first and last segment depths
    traced: list[tuple[Point2D, Vector2, list[Point2D], float, float]] = []
    for side in EDGE_WALK_ORDER:
        edge = by_side[side]
        start, direction, normal = edge_frame(side, width, height)
        # inverted is measured along the box axis, so flip it when the
        # walk runs the other way
        phase = edge.inverted != is_reversed(edge.role, side)
        offsets = generate_edge(edge.length, edge.tab_count, kerf, phase)
        # Drop the first segment's step out and the last segment's corner
        # points; the corner vertices replace them
        interior = [_place(start, direction, normal, p) for p in offsets[1:-2]]
        traced.append((start, normal, interior, offsets[0].y, offsets[-2].y))
        logger.debug(
            f"{edge.role.value}.{side.value}: {edge.tab_count} tabs, "
            f"inverted={edge.inverted}, walk phase={phase}"
        )

    points: list[Point2D] = []
    for index, (start, normal, interior, first_depth, _) in enumerate(traced):
        _, prev_normal, _, _, prev_last_depth = traced[index - 1]
        points.append(
            Point2D(
                start.x + prev_last_depth * prev_normal[0] + first_depth * normal[0],
                start.y + prev_last_depth * prev_normal[1] + first_depth * normal[1],
            )
        )
        points.extend(interior)
    points.append(points[0])
    return tuple(points)
