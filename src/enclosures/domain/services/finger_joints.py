"""Finger joint edge generation.

An edge of length L with n tabs is split into 2n equal segments. Walking
from one corner to the next, segment i protrudes by the kerf when
``(i % 2 == 0) != inverted`` and recedes by the kerf otherwise. Two edges
with the same tab count and opposite phase interlock.

All functions here are pure; offsets are returned in edge-local
coordinates as (along, perpendicular) pairs where positive perpendicular
values point out of the panel.
"""

from __future__ import annotations

import math

from ..errors import DegenerateJointError
from ..value_objects import EdgeSpec, Point2D

MIN_TAB_COUNT = 3

__all__ = [
    "MIN_TAB_COUNT",
    "compute_tab_count",
    "generate_edge",
    "segment_phases",
    "tab_pitch",
    "validate_edge",
]


def compute_tab_count(edge_length: float, target_tab_size: float) -> int:
    """Derive the number of tabs for an edge.

    Args:
        edge_length: Length of the edge in inches.
        target_tab_size: Desired tab size in inches.

    Returns:
        ``max(3, floor(edge_length / target_tab_size))``. Never below 3 so an
        edge always has enough fingers to hold.
    """
    return max(MIN_TAB_COUNT, math.floor(edge_length / target_tab_size))


def tab_pitch(length: float, tab_count: int) -> float:
    """Length of one tab plus one notch."""
    return length / tab_count


def validate_edge(edge: EdgeSpec, kerf: float) -> None:
    """Reject an edge whose segments would self-intersect.

    Raises:
        DegenerateJointError: If the kerf is at least half the tab pitch
            (one segment width).
    """
    segment_width = edge.segment_width
    if kerf >= segment_width:
        raise DegenerateJointError(
            f"Kerf {kerf} is too large for the {edge.side.value} edge of the "
            f"{edge.role.value} panel: segment width is {segment_width:.4f} "
            f"({edge.tab_count} tabs over {edge.length})",
            role=edge.role.value,
            side=edge.side.value,
            kerf=kerf,
            segment_width=segment_width,
        )


def generate_edge(
    length: float, tab_count: int, kerf: float, inverted: bool
) -> list[Point2D]:
    """Trace one finger-jointed edge from corner to corner.

    The starting corner (0, 0) is not included; the last point is always
    exactly (length, 0) so consecutive edges meet on the panel's corners.

    Args:
        length: Edge length in inches.
        tab_count: Number of tabs (the edge has 2 * tab_count segments).
        kerf: Perpendicular offset of tabs and notches.
        inverted: Phase flag; False starts with a tab.

    Returns:
        Offsets as Point2D(along, perpendicular), three per segment.
    """
    segments = tab_count * 2
    points: list[Point2D] = []
    for i in range(segments):
        is_tab = (i % 2 == 0) != inverted
        depth = kerf if is_tab else -kerf
        start = length * i / segments
        end = length * (i + 1) / segments
        points.append(Point2D(start, depth))
        points.append(Point2D(end, depth))
        points.append(Point2D(end, 0.0))
    # Guard the corner against float drift in the division above
    points[-1] = Point2D(length, 0.0)
    return points


def segment_phases(tab_count: int, inverted: bool) -> tuple[bool, ...]:
    """Tab (True) or notch (False) for each segment in walk order."""
    return tuple((i % 2 == 0) != inverted for i in range(tab_count * 2))
