"""Domain services for panel net generation."""

from .adjacency import (
    PANEL_FRAMES,
    SHARED_EDGES,
    EdgeRef,
    PanelFrame,
    SharedEdge,
    edge_endpoints_3d,
    edge_specs_for,
    is_reversed,
    mate_of,
)
from .cutout_planner import (
    FAN_THRESHOLD_LENGTH,
    check_bounds,
    expand_grid,
    fan_count_for,
    plan_cutouts,
    plan_panel_cutouts,
)
from .finger_joints import (
    MIN_TAB_COUNT,
    compute_tab_count,
    generate_edge,
    segment_phases,
    tab_pitch,
    validate_edge,
)
from .panel_boundary import build_boundary, edge_frame
from .sheet_layout import layout_panels, sheet_size

__all__ = [
    "EdgeRef",
    "FAN_THRESHOLD_LENGTH",
    "MIN_TAB_COUNT",
    "PANEL_FRAMES",
    "PanelFrame",
    "SHARED_EDGES",
    "SharedEdge",
    "build_boundary",
    "check_bounds",
    "compute_tab_count",
    "edge_endpoints_3d",
    "edge_frame",
    "edge_specs_for",
    "expand_grid",
    "fan_count_for",
    "generate_edge",
    "is_reversed",
    "layout_panels",
    "mate_of",
    "plan_cutouts",
    "plan_panel_cutouts",
    "segment_phases",
    "sheet_size",
    "tab_pitch",
    "validate_edge",
]
