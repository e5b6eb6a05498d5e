"""Format-neutral drawing primitives shared by the exporters.

``DrawingBuilder`` turns panel documents into closed polylines, circles
and text labels in drawing units. Serializers only format what the builder
produced, so every output format draws exactly the same geometry.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from enclosures.domain import (
    Circle,
    Cutout,
    PanelDocument,
    Point2D,
    Rectangle,
    RoundedSlot,
)

if TYPE_CHECKING:
    from enclosures.application.dtos import PanelNetOutput

DEFAULT_ARC_SEGMENTS = 8
LABEL_HEIGHT = 0.4

Vertex = tuple[float, float]


@dataclass(frozen=True)
class Polyline:
    """Closed polyline. The closing segment is implied, not repeated."""

    points: tuple[Vertex, ...]
    layer: str


@dataclass(frozen=True)
class CircleEntity:
    center: Vertex
    radius: float
    layer: str


@dataclass(frozen=True)
class Label:
    position: Vertex
    text: str
    height: float


@dataclass(frozen=True)
class PanelGroup:
    """Primitives belonging to one panel."""

    name: str
    outline: Polyline
    polylines: tuple[Polyline, ...] = ()
    circles: tuple[CircleEntity, ...] = ()
    label: Label | None = None


@dataclass(frozen=True)
class Drawing:
    """Finished drawing in drawing units, y up.

    ``min_x``/``min_y`` and ``width``/``height`` describe the canvas.
    """

    scale: float
    min_x: float
    min_y: float
    width: float
    height: float
    groups: tuple[PanelGroup, ...] = field(default_factory=tuple)


def rounded_rect_points(
    center: Point2D,
    width: float,
    height: float,
    radius: float,
    arc_segments: int = DEFAULT_ARC_SEGMENTS,
) -> list[Vertex]:
    """Counter-clockwise outline of a rounded rectangle.

    Each corner is approximated by ``arc_segments`` straight segments. A zero
    radius yields the four plain corners.
    """
    half_w = width / 2
    half_h = height / 2
    if radius <= 0:
        return [
            (center.x - half_w, center.y - half_h),
            (center.x + half_w, center.y - half_h),
            (center.x + half_w, center.y + half_h),
            (center.x - half_w, center.y + half_h),
        ]

    inner_w = half_w - radius
    inner_h = half_h - radius
    # Corner arc centers with their start angle, counter-clockwise from
    # the bottom-right corner
    corners = (
        (center.x + inner_w, center.y - inner_h, -90.0),
        (center.x + inner_w, center.y + inner_h, 0.0),
        (center.x - inner_w, center.y + inner_h, 90.0),
        (center.x - inner_w, center.y - inner_h, 180.0),
    )
    points: list[Vertex] = []
    for cx, cy, start in corners:
        for step in range(arc_segments + 1):
            angle = math.radians(start + 90.0 * step / arc_segments)
            point = (cx + radius * math.cos(angle), cy + radius * math.sin(angle))
            # Fully rounded ends share the arc endpoints of neighboring corners
            if points and _same(points[-1], point):
                continue
            points.append(point)
    if _same(points[-1], points[0]):
        points.pop()
    return points


def _same(a: Vertex, b: Vertex) -> bool:
    return math.isclose(a[0], b[0], abs_tol=1e-12) and math.isclose(
        a[1], b[1], abs_tol=1e-12
    )


class DrawingBuilder:
    """Accumulates panels into a Drawing.

    Args:
        scale: Drawing units per inch, applied to every coordinate.
        arc_segments: Straight segments per rounded corner.
        show_labels: Whether to place the panel name at its centroid.
    """

    def __init__(
        self,
        scale: float = 1.0,
        arc_segments: int = DEFAULT_ARC_SEGMENTS,
        show_labels: bool = True,
    ) -> None:
        if scale <= 0:
            raise ValueError(f"scale must be positive, got {scale}")
        if arc_segments < 1:
            raise ValueError(f"arc_segments must be at least 1, got {arc_segments}")
        self.scale = scale
        self.arc_segments = arc_segments
        self.show_labels = show_labels
        self._groups: list[PanelGroup] = []

    def _vertex(self, point: Point2D, origin: Point2D) -> Vertex:
        return ((origin.x + point.x) * self.scale, (origin.y + point.y) * self.scale)

    def add_panel(self, document: PanelDocument, origin: Point2D) -> DrawingBuilder:
        """Add one panel with its local (0, 0) placed at ``origin`` (inches)."""
        boundary = document.boundary
        if document.is_closed:
            boundary = boundary[:-1]
        outline = Polyline(
            points=tuple(self._vertex(p, origin) for p in boundary),
            layer="OUTLINE",
        )

        polylines: list[Polyline] = []
        circles: list[CircleEntity] = []
        for cutout in document.cutouts:
            shape = cutout.shape
            if isinstance(shape, Circle):
                circles.append(
                    CircleEntity(
                        center=self._vertex(cutout.center, origin),
                        radius=shape.radius * self.scale,
                        layer="CUTOUTS",
                    )
                )
            else:
                polylines.append(self._cutout_polyline(cutout, origin))

        label = None
        if self.show_labels:
            label = Label(
                position=self._vertex(
                    Point2D(document.width / 2, document.height / 2), origin
                ),
                text=document.role.label,
                height=min(LABEL_HEIGHT, document.height / 4) * self.scale,
            )

        self._groups.append(
            PanelGroup(
                name=document.role.value,
                outline=outline,
                polylines=tuple(polylines),
                circles=tuple(circles),
                label=label,
            )
        )
        return self

    def _cutout_polyline(self, cutout: Cutout, origin: Point2D) -> Polyline:
        shape = cutout.shape
        if isinstance(shape, Rectangle):
            local = rounded_rect_points(cutout.center, shape.width, shape.height, 0.0)
        elif isinstance(shape, RoundedSlot):
            local = rounded_rect_points(
                cutout.center,
                shape.width,
                shape.height,
                shape.corner_radius,
                self.arc_segments,
            )
        else:
            raise TypeError(f"Unsupported cutout shape: {type(shape).__name__}")
        return Polyline(
            points=tuple(self._vertex(Point2D(x, y), origin) for x, y in local),
            layer="CUTOUTS",
        )

    def build(
        self, min_x: float, min_y: float, width: float, height: float
    ) -> Drawing:
        """Finish the drawing with a canvas given in inches."""
        return Drawing(
            scale=self.scale,
            min_x=min_x * self.scale,
            min_y=min_y * self.scale,
            width=width * self.scale,
            height=height * self.scale,
            groups=tuple(self._groups),
        )


def build_sheet_drawing(
    output: PanelNetOutput, scale: float, arc_segments: int = DEFAULT_ARC_SEGMENTS
) -> Drawing:
    """Drawing of all six panels placed on their sheet footprints."""
    builder = DrawingBuilder(scale, arc_segments, output.show_labels)
    for document in output.documents:
        footprint = output.layout.footprint(document.role)
        builder.add_panel(document, footprint.origin)
    return builder.build(0.0, 0.0, output.layout.width, output.layout.height)


def build_panel_drawing(
    document: PanelDocument,
    scale: float,
    show_labels: bool = True,
    arc_segments: int = DEFAULT_ARC_SEGMENTS,
) -> Drawing:
    """Drawing of one panel at its local origin.

    The canvas covers the outline including protruding tabs.
    """
    builder = DrawingBuilder(scale, arc_segments, show_labels)
    builder.add_panel(document, Point2D(0.0, 0.0))
    xs = [p.x for p in document.boundary]
    ys = [p.y for p in document.boundary]
    return builder.build(min(xs), min(ys), max(xs) - min(xs), max(ys) - min(ys))
