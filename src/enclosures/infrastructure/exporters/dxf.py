"""DXF format exporter for laser cutting.

Generates 2D DXF files (R2010 format). Panel outlines and polygonal cutouts
become closed LWPOLYLINE entities, circular cutouts become CIRCLE entities.
Output is reproducible: the creation marker, header timestamps and GUIDs that
ezdxf would otherwise vary are fixed while the document is built and written.
"""

from __future__ import annotations

import logging
from io import StringIO
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

import ezdxf
from ezdxf import units as dxf_units
from ezdxf.enums import InsertUnits, TextEntityAlignment

from enclosures.infrastructure.exporters.base import ExporterRegistry
from enclosures.infrastructure.exporters.drawing import (
    DEFAULT_ARC_SEGMENTS,
    Drawing,
    PanelGroup,
    build_panel_drawing,
    build_sheet_drawing,
)

if TYPE_CHECKING:
    from ezdxf.document import Drawing as DxfDocument
    from ezdxf.layouts import Modelspace

    from enclosures.application.dtos import PanelNetOutput
    from enclosures.domain import PanelDocument


logger = logging.getLogger(__name__)


# Layer configuration for DXF output
LAYERS = {
    "OUTLINE": {"color": 7},  # White - panel outlines
    "CUTOUTS": {"color": 1},  # Red - vents, slots and holes
    "LABELS": {"color": 5},  # Blue - text labels
}

UNIT_SCALES = {"inches": 1.0, "mm": 25.4}
_INSUNITS = {"inches": dxf_units.IN, "mm": dxf_units.MM}


def insunits_for_scale(scale: float) -> int:
    """Return the $INSUNITS code matching drawing units per inch.

    Only 1.0 (inches) and 25.4 (millimeters) name a real unit; any other
    scale is declared unitless.
    """
    for unit_name, unit_scale in UNIT_SCALES.items():
        if scale == unit_scale:
            return _INSUNITS[unit_name]
    return InsertUnits.Unitless


@ExporterRegistry.register("dxf")
class DxfExporter:
    """Exports panel nets to DXF.

    Attributes:
        format_name: "dxf"
        file_extension: "dxf"
    """

    format_name: ClassVar[str] = "dxf"
    file_extension: ClassVar[str] = "dxf"

    def __init__(
        self,
        units: str | None = None,
        arc_segments: int = DEFAULT_ARC_SEGMENTS,
    ) -> None:
        """Initialize the DXF exporter.

        Args:
            units: "inches" or "mm". None uses the output's configured units.
            arc_segments: Straight segments per rounded corner.
        """
        if units is not None and units not in UNIT_SCALES:
            raise ValueError(f"Invalid units: {units}. Must be 'inches' or 'mm'")
        self.units = units
        self.arc_segments = arc_segments

    def export_string(self, output: PanelNetOutput) -> str:
        """Export the whole sheet as DXF text."""
        unit_name = self.units or output.dxf_units
        drawing = build_sheet_drawing(output, UNIT_SCALES[unit_name], self.arc_segments)
        return self._render(drawing, _INSUNITS[unit_name])

    def export(self, output: PanelNetOutput, path: Path) -> None:
        """Write the sheet DXF to ``path``."""
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported DXF to {path}")

    def emit(self, document: PanelDocument, scale: float) -> str:
        """Export a single panel at its local origin.

        ``scale`` is the number of drawing units per inch; 1.0 marks the file
        as inches, 25.4 as millimeters and anything else as unitless.
        """
        drawing = build_panel_drawing(document, scale, arc_segments=self.arc_segments)
        return self._render(drawing, insunits_for_scale(scale))

    def _render(self, drawing: Drawing, insunits: int) -> str:
        previous = ezdxf.options.write_fixed_meta_data_for_testing
        ezdxf.options.write_fixed_meta_data_for_testing = True
        try:
            doc = self._create_document(drawing, insunits)
            stream = StringIO()
            doc.write(stream)
        finally:
            ezdxf.options.write_fixed_meta_data_for_testing = previous
        return stream.getvalue()

    def _create_document(self, drawing: Drawing, insunits: int) -> DxfDocument:
        doc = ezdxf.new("R2010")
        doc.units = insunits
        for name, props in LAYERS.items():
            doc.layers.add(name, color=props["color"])
        msp = doc.modelspace()
        for group in drawing.groups:
            self._draw_group(msp, group)
        return doc

    def _draw_group(self, msp: Modelspace, group: PanelGroup) -> None:
        for polyline in (group.outline, *group.polylines):
            msp.add_lwpolyline(
                polyline.points, close=True, dxfattribs={"layer": polyline.layer}
            )
        for circle in group.circles:
            msp.add_circle(circle.center, circle.radius, dxfattribs={"layer": circle.layer})
        if group.label is not None:
            msp.add_text(
                group.label.text,
                height=group.label.height,
                dxfattribs={"layer": "LABELS"},
            ).set_placement(group.label.position, align=TextEntityAlignment.MIDDLE_CENTER)


__all__ = ["DxfExporter", "LAYERS", "UNIT_SCALES", "insunits_for_scale"]
