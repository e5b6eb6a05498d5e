"""Application commands (use cases) for panel net generation."""

from __future__ import annotations

import logging

from enclosures.domain import (
    PANEL_ORDER,
    EdgeSpec,
    EnclosureSpec,
    PanelDocument,
    PanelNet,
    PanelRole,
)
from enclosures.domain.services import (
    build_boundary,
    edge_specs_for,
    layout_panels,
    plan_panel_cutouts,
    validate_edge,
)

from .dtos import DEFAULT_SVG_SCALE, PanelNetOutput

logger = logging.getLogger(__name__)


class GeneratePanelNetCommand:
    """Command to generate the six-panel net of an enclosure.

    Every edge of every panel is validated before any boundary is walked,
    so the command either returns a complete output or raises.
    """

    def execute(
        self,
        spec: EnclosureSpec,
        svg_scale: float = DEFAULT_SVG_SCALE,
        dxf_units: str = "inches",
    ) -> PanelNetOutput:
        """Execute the generation command.

        Args:
            spec: Validated enclosure specification.
            svg_scale: Drawing units per inch for SVG export.
            dxf_units: "inches" or "mm" for DXF export.

        Returns:
            PanelNetOutput wrapping the finished PanelNet.

        Raises:
            DegenerateJointError: If the kerf is too large for any edge.
            CutoutOutOfBoundsError: If a cutout rule produced an invalid cutout.
        """
        edges = {role: edge_specs_for(role, spec) for role in PANEL_ORDER}
        self._validate_edges(edges, spec.joints.kerf)

        documents = tuple(
            self._build_document(role, edges[role], spec) for role in PANEL_ORDER
        )
        layout = layout_panels(spec.dimensions, spec.layout.spacing)
        net = PanelNet(spec=spec, documents=documents, layout=layout)

        logger.info(
            f"Generated panel net: {len(documents)} panels, "
            f"{net.cutout_count} cutouts, sheet {layout.width:.2f} x "
            f"{layout.height:.2f} in"
        )
        return PanelNetOutput(net=net, svg_scale=svg_scale, dxf_units=dxf_units)

    def _validate_edges(
        self, edges: dict[PanelRole, tuple[EdgeSpec, ...]], kerf: float
    ) -> None:
        for panel_edges in edges.values():
            for edge in panel_edges:
                validate_edge(edge, kerf)

    def _build_document(
        self,
        role: PanelRole,
        edges: tuple[EdgeSpec, ...],
        spec: EnclosureSpec,
    ) -> PanelDocument:
        width, height = spec.panel_size(role)
        boundary = build_boundary(width, height, edges, spec.joints.kerf)
        cutouts = plan_panel_cutouts(role, spec)
        logger.debug(
            f"{role.label}: {width} x {height} in, {len(boundary)} boundary "
            f"points, {len(cutouts)} cutouts"
        )
        return PanelDocument(
            role=role,
            width=width,
            height=height,
            edges=edges,
            boundary=boundary,
            cutouts=cutouts,
        )
