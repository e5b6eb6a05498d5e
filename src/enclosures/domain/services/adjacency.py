"""Box topology: which panel edges meet, and in which direction.

``PANEL_FRAMES`` places each panel's local 2D frame onto the assembled box
(X = width, Y = length, Z = height). ``SHARED_EDGES`` lists the twelve
physical box edges as pairs of panel edges. Joint phase is derived from
these two tables only:

- On every shared edge the higher ranked panel is tab-first and the other
  notch-first, so the pair always has opposite ``inverted`` flags.
- ``inverted`` is measured from the edge's canonical start (its lower box
  coordinate). A panel whose counter-clockwise walk runs the other way
  generates the edge with the opposite phase, which keeps tabs and notches
  in the same physical place for both panels.
"""

from __future__ import annotations

from dataclasses import dataclass

from ..value_objects import (
    EDGE_WALK_ORDER,
    EdgeSide,
    EdgeSpec,
    EnclosureSpec,
    PanelRole,
)
from .finger_joints import compute_tab_count

Vector3 = tuple[float, float, float]

__all__ = [
    "EdgeRef",
    "PANEL_FRAMES",
    "PanelFrame",
    "SHARED_EDGES",
    "SharedEdge",
    "edge_endpoints_3d",
    "edge_specs_for",
    "is_reversed",
    "mate_of",
]


@dataclass(frozen=True)
class PanelFrame:
    """Maps panel-local (u, v) to box coordinates: origin + u * x_axis + v * y_axis."""

    origin: tuple[str | None, str | None, str | None]
    x_axis: Vector3
    y_axis: Vector3


# Origins are expressed per box axis as the name of the dimension the panel
# sits at (None means zero) so the frames work for any box size.
PANEL_FRAMES: dict[PanelRole, PanelFrame] = {
    PanelRole.FRONT: PanelFrame(
        origin=(None, None, None),
        x_axis=(1.0, 0.0, 0.0),
        y_axis=(0.0, 0.0, 1.0),
    ),
    PanelRole.RIGHT: PanelFrame(
        origin=("width", None, None),
        x_axis=(0.0, 1.0, 0.0),
        y_axis=(0.0, 0.0, 1.0),
    ),
    PanelRole.BACK: PanelFrame(
        origin=("width", "length", None),
        x_axis=(-1.0, 0.0, 0.0),
        y_axis=(0.0, 0.0, 1.0),
    ),
    PanelRole.LEFT: PanelFrame(
        origin=(None, "length", None),
        x_axis=(0.0, -1.0, 0.0),
        y_axis=(0.0, 0.0, 1.0),
    ),
    PanelRole.BOTTOM: PanelFrame(
        origin=(None, "length", None),
        x_axis=(1.0, 0.0, 0.0),
        y_axis=(0.0, -1.0, 0.0),
    ),
    PanelRole.TOP: PanelFrame(
        origin=(None, None, "height"),
        x_axis=(1.0, 0.0, 0.0),
        y_axis=(0.0, 1.0, 0.0),
    ),
}

# Higher rank is tab-first on a shared edge.
PANEL_RANK: dict[PanelRole, int] = {
    PanelRole.TOP: 2,
    PanelRole.BOTTOM: 2,
    PanelRole.FRONT: 1,
    PanelRole.BACK: 1,
    PanelRole.LEFT: 0,
    PanelRole.RIGHT: 0,
}


@dataclass(frozen=True)
class EdgeRef:
    """One side of one panel."""

    role: PanelRole
    side: EdgeSide


@dataclass(frozen=True)
class SharedEdge:
    """A physical box edge where two panels meet."""

    a: EdgeRef
    b: EdgeRef

    @property
    def tab_first(self) -> EdgeRef:
        """The panel edge that starts with a tab."""
        if PANEL_RANK[self.a.role] >= PANEL_RANK[self.b.role]:
            return self.a
        return self.b


def _ref(role: PanelRole, side: EdgeSide) -> EdgeRef:
    return EdgeRef(role, side)


SHARED_EDGES: tuple[SharedEdge, ...] = (
    # Bottom panel around its perimeter
    SharedEdge(_ref(PanelRole.BOTTOM, EdgeSide.TOP), _ref(PanelRole.FRONT, EdgeSide.BOTTOM)),
    SharedEdge(_ref(PanelRole.BOTTOM, EdgeSide.BOTTOM), _ref(PanelRole.BACK, EdgeSide.BOTTOM)),
    SharedEdge(_ref(PanelRole.BOTTOM, EdgeSide.LEFT), _ref(PanelRole.LEFT, EdgeSide.BOTTOM)),
    SharedEdge(_ref(PanelRole.BOTTOM, EdgeSide.RIGHT), _ref(PanelRole.RIGHT, EdgeSide.BOTTOM)),
    # Top panel around its perimeter
    SharedEdge(_ref(PanelRole.TOP, EdgeSide.BOTTOM), _ref(PanelRole.FRONT, EdgeSide.TOP)),
    SharedEdge(_ref(PanelRole.TOP, EdgeSide.TOP), _ref(PanelRole.BACK, EdgeSide.TOP)),
    SharedEdge(_ref(PanelRole.TOP, EdgeSide.LEFT), _ref(PanelRole.LEFT, EdgeSide.TOP)),
    SharedEdge(_ref(PanelRole.TOP, EdgeSide.RIGHT), _ref(PanelRole.RIGHT, EdgeSide.TOP)),
    # Vertical corners
    SharedEdge(_ref(PanelRole.FRONT, EdgeSide.LEFT), _ref(PanelRole.LEFT, EdgeSide.RIGHT)),
    SharedEdge(_ref(PanelRole.FRONT, EdgeSide.RIGHT), _ref(PanelRole.RIGHT, EdgeSide.LEFT)),
    SharedEdge(_ref(PanelRole.BACK, EdgeSide.LEFT), _ref(PanelRole.RIGHT, EdgeSide.RIGHT)),
    SharedEdge(_ref(PanelRole.BACK, EdgeSide.RIGHT), _ref(PanelRole.LEFT, EdgeSide.LEFT)),
)


def mate_of(ref: EdgeRef) -> tuple[EdgeRef, SharedEdge]:
    """Find the panel edge that meets ``ref`` and the shared edge entry."""
    for shared in SHARED_EDGES:
        if shared.a == ref:
            return shared.b, shared
        if shared.b == ref:
            return shared.a, shared
    raise KeyError(f"No mate for {ref.role.value}.{ref.side.value}")


def _local_corners(side: EdgeSide, width: float, height: float) -> tuple[tuple[float, float], tuple[float, float]]:
    """Start and end of an edge in the counter-clockwise walk."""
    if side == EdgeSide.BOTTOM:
        return (0.0, 0.0), (width, 0.0)
    if side == EdgeSide.RIGHT:
        return (width, 0.0), (width, height)
    if side == EdgeSide.TOP:
        return (width, height), (0.0, height)
    return (0.0, height), (0.0, 0.0)


def _to_box(frame: PanelFrame, spec: EnclosureSpec, u: float, v: float) -> Vector3:
    dims = spec.dimensions
    origin = [getattr(dims, name) if name else 0.0 for name in frame.origin]
    return (
        origin[0] + u * frame.x_axis[0] + v * frame.y_axis[0],
        origin[1] + u * frame.x_axis[1] + v * frame.y_axis[1],
        origin[2] + u * frame.x_axis[2] + v * frame.y_axis[2],
    )


def edge_endpoints_3d(ref: EdgeRef, spec: EnclosureSpec) -> tuple[Vector3, Vector3]:
    """Box coordinates of an edge's walk start and end corners."""
    frame = PANEL_FRAMES[ref.role]
    width, height = spec.panel_size(ref.role)
    start, end = _local_corners(ref.side, width, height)
    return _to_box(frame, spec, *start), _to_box(frame, spec, *end)


def is_reversed(role: PanelRole, side: EdgeSide) -> bool:
    """Whether the counter-clockwise walk runs against the edge's canonical direction.

    The canonical direction points toward increasing box coordinate. Only
    the sign matters, so a unit box is enough to decide.
    """
    frame = PANEL_FRAMES[role]
    start, end = _local_corners(side, 1.0, 1.0)
    du = end[0] - start[0]
    dv = end[1] - start[1]
    direction = tuple(du * frame.x_axis[i] + dv * frame.y_axis[i] for i in range(3))
    return sum(direction) < 0


def edge_specs_for(role: PanelRole, spec: EnclosureSpec) -> tuple[EdgeSpec, ...]:
    """Build the four EdgeSpecs of a panel in walk order."""
    width, height = spec.panel_size(role)
    edges: list[EdgeSpec] = []
    for side in EDGE_WALK_ORDER:
        length = width if side in (EdgeSide.BOTTOM, EdgeSide.TOP) else height
        ref = EdgeRef(role, side)
        _, shared = mate_of(ref)
        edges.append(
            EdgeSpec(
                role=role,
                side=side,
                length=length,
                tab_count=compute_tab_count(length, spec.joints.tab_target_size),
                inverted=shared.tab_first != ref,
            )
        )
    return tuple(edges)
