"""Data Transfer Objects for the application layer."""

from __future__ import annotations

from dataclasses import dataclass

from enclosures.domain import (
    EdgeSide,
    EnclosureSpec,
    PanelDocument,
    PanelNet,
    PanelRole,
    SheetLayout,
)

DEFAULT_SVG_SCALE = 96.0


@dataclass(frozen=True)
class PanelNetOutput:
    """Result of one panel net generation, ready for export.

    Attributes:
        net: The six panel documents and their sheet layout.
        svg_scale: Drawing units per inch for SVG output.
        dxf_units: "inches" or "mm" for DXF output.
    """

    net: PanelNet
    svg_scale: float = DEFAULT_SVG_SCALE
    dxf_units: str = "inches"

    @property
    def spec(self) -> EnclosureSpec:
        return self.net.spec

    @property
    def documents(self) -> tuple[PanelDocument, ...]:
        return self.net.documents

    @property
    def layout(self) -> SheetLayout:
        return self.net.layout

    @property
    def show_labels(self) -> bool:
        return self.net.spec.layout.show_labels

    def document(self, role: PanelRole) -> PanelDocument:
        """Look up one panel document."""
        return self.net.document(role)

    @property
    def tab_counts(self) -> dict[str, int]:
        """Tab count per box axis, keyed "width", "length" and "height"."""
        front = self.net.document(PanelRole.FRONT)
        right = self.net.document(PanelRole.RIGHT)
        return {
            "width": front.edge(EdgeSide.BOTTOM).tab_count,
            "length": right.edge(EdgeSide.BOTTOM).tab_count,
            "height": front.edge(EdgeSide.RIGHT).tab_count,
        }
