"""Value objects for the enclosure domain.

Every type here is an immutable dataclass. All lengths are in inches.
The box coordinate system used throughout is X = width, Y = length,
Z = height, with the origin at the front-bottom-left corner.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from .errors import (
    DegenerateJointError,
    InvalidAccessoryError,
    InvalidDimensionError,
)

DEFAULT_TAB_TARGET_SIZE = 0.5
DEFAULT_KERF = 0.01
DEFAULT_PANEL_SPACING = 0.5


class PanelRole(str, Enum):
    """The six faces of the enclosure."""

    TOP = "top"
    BOTTOM = "bottom"
    FRONT = "front"
    BACK = "back"
    LEFT = "left"
    RIGHT = "right"

    @property
    def label(self) -> str:
        """Human-readable panel name, e.g. "Top Panel"."""
        return f"{self.value.title()} Panel"


class EdgeSide(str, Enum):
    """Edge identity within a panel's local frame."""

    TOP = "top"
    RIGHT = "right"
    BOTTOM = "bottom"
    LEFT = "left"


# Counter-clockwise walk order used for every panel boundary.
EDGE_WALK_ORDER: tuple[EdgeSide, ...] = (
    EdgeSide.BOTTOM,
    EdgeSide.RIGHT,
    EdgeSide.TOP,
    EdgeSide.LEFT,
)

# Fixed panel order for documents and emitted output.
PANEL_ORDER: tuple[PanelRole, ...] = (
    PanelRole.BOTTOM,
    PanelRole.TOP,
    PanelRole.LEFT,
    PanelRole.FRONT,
    PanelRole.RIGHT,
    PanelRole.BACK,
)


@dataclass(frozen=True)
class Point2D:
    """2D point or offset in inches."""

    x: float
    y: float

    def offset(self, dx: float, dy: float) -> Point2D:
        """Return a new point shifted by (dx, dy)."""
        return Point2D(self.x + dx, self.y + dy)


@dataclass(frozen=True)
class BoxDimensions:
    """Outer enclosure dimensions and material thickness."""

    length: float
    width: float
    height: float
    thickness: float

    def __post_init__(self) -> None:
        for name in ("length", "width", "height", "thickness"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidDimensionError(
                    f"{name} must be positive, got {value}", field=name
                )
        limit = min(self.length, self.width, self.height) / 4
        if self.thickness >= limit:
            raise InvalidDimensionError(
                f"thickness {self.thickness} must be less than a quarter of the "
                f"smallest box dimension ({limit:.4f})",
                field="thickness",
            )


@dataclass(frozen=True)
class JointConfig:
    """Finger joint settings shared by every edge."""

    tab_target_size: float = DEFAULT_TAB_TARGET_SIZE
    kerf: float = DEFAULT_KERF

    def __post_init__(self) -> None:
        if self.tab_target_size <= 0:
            raise InvalidDimensionError(
                f"tab_target_size must be positive, got {self.tab_target_size}",
                field="tab_target_size",
            )
        if self.kerf <= 0:
            raise InvalidDimensionError(
                f"kerf must be positive, got {self.kerf}", field="kerf"
            )
        if self.kerf >= self.tab_target_size:
            raise DegenerateJointError(
                f"kerf {self.kerf} must be smaller than the tab target size "
                f"{self.tab_target_size}",
                kerf=self.kerf,
            )


@dataclass(frozen=True)
class AccessorySlot:
    """A module mounted inside the enclosure (e.g. a graphics card).

    Attributes:
        name: Display name.
        length: Length along the box's long axis in inches.
        height: Height in inches.
        width: Thickness of the module in inches.
        tdp: Thermal design power in watts, if known.
    """

    name: str
    length: float
    height: float
    width: float
    tdp: float | None = None

    def __post_init__(self) -> None:
        for name in ("length", "height", "width"):
            value = getattr(self, name)
            if value <= 0:
                raise InvalidAccessoryError(
                    f"Accessory '{self.name}' {name} must be positive, got {value}"
                )
        if self.tdp is not None and self.tdp < 0:
            raise InvalidAccessoryError(
                f"Accessory '{self.name}' tdp cannot be negative, got {self.tdp}"
            )


@dataclass(frozen=True)
class ThermalOptions:
    """Optional thermal features that gate extra cutouts."""

    has_duct: bool = False
    has_temp_sensors: bool = False


@dataclass(frozen=True)
class LayoutOptions:
    """Sheet layout settings."""

    spacing: float = DEFAULT_PANEL_SPACING
    show_labels: bool = True

    def __post_init__(self) -> None:
        if self.spacing <= 0:
            raise InvalidDimensionError(
                f"spacing must be positive, got {self.spacing}", field="spacing"
            )


@dataclass(frozen=True)
class EnclosureSpec:
    """Complete, validated input to the panel net pipeline."""

    dimensions: BoxDimensions
    joints: JointConfig = field(default_factory=JointConfig)
    accessories: tuple[AccessorySlot, ...] = ()
    thermal: ThermalOptions = field(default_factory=ThermalOptions)
    layout: LayoutOptions = field(default_factory=LayoutOptions)

    def __post_init__(self) -> None:
        # Accept any sequence but store a tuple so the spec stays hashable.
        if not isinstance(self.accessories, tuple):
            object.__setattr__(self, "accessories", tuple(self.accessories))
        if self.layout.spacing <= 2 * self.joints.kerf:
            raise InvalidDimensionError(
                f"spacing {self.layout.spacing} must exceed twice the kerf "
                f"({self.joints.kerf}) so neighboring outlines stay apart",
                field="spacing",
            )

    @property
    def cutout_margin(self) -> float:
        """Minimum clearance between cutouts and the panel edge.

        Cutouts stay clear of the mating panel's material plus the kerf,
        so they can never reach the finger joints.
        """
        return self.dimensions.thickness + self.joints.kerf

    def panel_size(self, role: PanelRole) -> tuple[float, float]:
        """Return (width, height) of a panel in its local frame."""
        dims = self.dimensions
        if role in (PanelRole.TOP, PanelRole.BOTTOM):
            return dims.width, dims.length
        if role in (PanelRole.FRONT, PanelRole.BACK):
            return dims.width, dims.height
        return dims.length, dims.height


@dataclass(frozen=True)
class EdgeSpec:
    """Finger joint description for one panel edge.

    ``inverted`` is the phase counted from the edge's canonical start
    corner (the end with the lower box coordinate): False means the first
    segment is a tab, True means it is a notch.
    """

    role: PanelRole
    side: EdgeSide
    length: float
    tab_count: int
    inverted: bool

    def __post_init__(self) -> None:
        if self.tab_count < 3:
            raise ValueError("tab_count must be at least 3")
        if self.length <= 0:
            raise ValueError("Edge length must be positive")

    @property
    def segment_count(self) -> int:
        """Number of alternating tab/notch segments on the edge."""
        return self.tab_count * 2

    @property
    def segment_width(self) -> float:
        """Width of one tab or notch segment."""
        return self.length / self.segment_count


@dataclass(frozen=True)
class PanelFootprint:
    """A panel's rectangle on the sheet."""

    role: PanelRole
    width: float
    height: float
    origin: Point2D

    @property
    def max_x(self) -> float:
        return self.origin.x + self.width

    @property
    def max_y(self) -> float:
        return self.origin.y + self.height

    @property
    def centroid(self) -> Point2D:
        return Point2D(self.origin.x + self.width / 2, self.origin.y + self.height / 2)

    def padded_intersects(self, other: PanelFootprint, padding: float) -> bool:
        """Check whether the footprints come closer than ``padding``.

        Touching at exactly ``padding`` does not count as an intersection.
        """
        return (
            self.origin.x < other.max_x + padding
            and other.origin.x < self.max_x + padding
            and self.origin.y < other.max_y + padding
            and other.origin.y < self.max_y + padding
        )


@dataclass(frozen=True)
class SheetLayout:
    """Placement of all panels on one virtual sheet."""

    footprints: tuple[PanelFootprint, ...]
    spacing: float
    width: float
    height: float

    def footprint(self, role: PanelRole) -> PanelFootprint:
        """Look up the footprint for a panel role."""
        for footprint in self.footprints:
            if footprint.role == role:
                return footprint
        raise KeyError(f"No footprint for panel '{role.value}'")


# --- Cutouts ---


@dataclass(frozen=True)
class Rectangle:
    """Sharp-cornered rectangular opening."""

    width: float
    height: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("Rectangle dimensions must be positive")

    @property
    def half_extents(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


@dataclass(frozen=True)
class Circle:
    """Circular opening."""

    radius: float

    def __post_init__(self) -> None:
        if self.radius <= 0:
            raise ValueError("Circle radius must be positive")

    @property
    def half_extents(self) -> tuple[float, float]:
        return self.radius, self.radius


@dataclass(frozen=True)
class RoundedSlot:
    """Rectangular opening with rounded corners."""

    width: float
    height: float
    corner_radius: float

    def __post_init__(self) -> None:
        if self.width <= 0 or self.height <= 0:
            raise ValueError("RoundedSlot dimensions must be positive")
        if self.corner_radius < 0:
            raise ValueError("Corner radius cannot be negative")
        if self.corner_radius > min(self.width, self.height) / 2:
            raise ValueError("Corner radius cannot exceed half the slot's short side")

    @property
    def half_extents(self) -> tuple[float, float]:
        return self.width / 2, self.height / 2


CutoutShape = Rectangle | Circle | RoundedSlot


@dataclass(frozen=True)
class CutoutGrid:
    """Repetition grid: count_x by count_y copies offset from the anchor."""

    count_x: int = 1
    count_y: int = 1
    spacing_x: float = 0.0
    spacing_y: float = 0.0

    def __post_init__(self) -> None:
        if self.count_x < 1 or self.count_y < 1:
            raise ValueError("Grid counts must be at least 1")

    @property
    def size(self) -> int:
        return self.count_x * self.count_y


@dataclass(frozen=True)
class Cutout:
    """An opening cut into a panel, positioned by its center.

    Attributes:
        shape: Rectangle, Circle or RoundedSlot.
        center: Center of the shape (grid anchor) in panel-local inches.
        purpose: Short identifier such as "fan_vent" or "power_cable".
        grid: Optional repetition grid.
    """

    shape: CutoutShape
    center: Point2D
    purpose: str = "cutout"
    grid: CutoutGrid | None = None

    @property
    def bounds(self) -> tuple[float, float, float, float]:
        """Bounding box (min_x, min_y, max_x, max_y) of a single instance."""
        hx, hy = self.shape.half_extents
        return (
            self.center.x - hx,
            self.center.y - hy,
            self.center.x + hx,
            self.center.y + hy,
        )


@dataclass(frozen=True)
class PanelDocument:
    """Finished geometry for one panel in its local frame.

    ``boundary`` is a closed polyline (first point equals last point) and
    ``cutouts`` holds already-expanded cutouts (no grids).
    """

    role: PanelRole
    width: float
    height: float
    edges: tuple[EdgeSpec, ...]
    boundary: tuple[Point2D, ...]
    cutouts: tuple[Cutout, ...] = ()

    def edge(self, side: EdgeSide) -> EdgeSpec:
        """Look up the EdgeSpec for one side of the panel."""
        for spec in self.edges:
            if spec.side == side:
                return spec
        raise KeyError(f"Panel '{self.role.value}' has no edge '{side.value}'")

    @property
    def is_closed(self) -> bool:
        return bool(self.boundary) and self.boundary[0] == self.boundary[-1]


@dataclass(frozen=True)
class PanelNet:
    """All six panel documents plus their sheet layout."""

    spec: EnclosureSpec
    documents: tuple[PanelDocument, ...]
    layout: SheetLayout

    def document(self, role: PanelRole) -> PanelDocument:
        """Look up the document for a panel role."""
        for document in self.documents:
            if document.role == role:
                return document
        raise KeyError(f"No document for panel '{role.value}'")

    @property
    def cutout_count(self) -> int:
        return sum(len(doc.cutouts) for doc in self.documents)
