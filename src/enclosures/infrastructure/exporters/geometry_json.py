"""JSON exporter with the full panel net geometry.

Exports, in design units (inches):
- The normalized input (dimensions, joints, accessories, thermal options)
- Per panel: size, sheet origin, edge specs, boundary and cutouts
- Sheet size and spacing

Keys are sorted and numbers rounded to six decimals so repeated exports
are byte-identical.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import TYPE_CHECKING, Any, ClassVar

from enclosures.domain import Circle, Cutout, PanelDocument, Rectangle, RoundedSlot
from enclosures.infrastructure.exporters.base import ExporterRegistry

if TYPE_CHECKING:
    from enclosures.application.dtos import PanelNetOutput
    from enclosures.domain import EnclosureSpec


logger = logging.getLogger(__name__)

# Version of the JSON document layout
SCHEMA_VERSION = "1.0"


def _num(value: float) -> float:
    return round(value, 6) + 0.0


def _shape_data(cutout: Cutout) -> dict[str, Any]:
    shape = cutout.shape
    if isinstance(shape, Circle):
        return {"type": "circle", "radius": _num(shape.radius)}
    if isinstance(shape, RoundedSlot):
        return {
            "type": "rounded_slot",
            "width": _num(shape.width),
            "height": _num(shape.height),
            "corner_radius": _num(shape.corner_radius),
        }
    if isinstance(shape, Rectangle):
        return {
            "type": "rectangle",
            "width": _num(shape.width),
            "height": _num(shape.height),
        }
    raise TypeError(f"Unsupported cutout shape: {type(shape).__name__}")


def _spec_data(spec: EnclosureSpec) -> dict[str, Any]:
    dims = spec.dimensions
    return {
        "dimensions": {
            "length": dims.length,
            "width": dims.width,
            "height": dims.height,
            "thickness": dims.thickness,
        },
        "joints": {
            "tab_target_size": spec.joints.tab_target_size,
            "kerf": spec.joints.kerf,
        },
        "accessories": [
            {
                "name": slot.name,
                "length": slot.length,
                "height": slot.height,
                "width": slot.width,
                "tdp": slot.tdp,
            }
            for slot in spec.accessories
        ],
        "thermal": {
            "has_duct": spec.thermal.has_duct,
            "has_temp_sensors": spec.thermal.has_temp_sensors,
        },
    }


def panel_data(document: PanelDocument) -> dict[str, Any]:
    """Geometry of one panel in its local frame."""
    return {
        "role": document.role.value,
        "width": _num(document.width),
        "height": _num(document.height),
        "edges": [
            {
                "side": edge.side.value,
                "length": _num(edge.length),
                "tab_count": edge.tab_count,
                "inverted": edge.inverted,
            }
            for edge in document.edges
        ],
        "boundary": [[_num(p.x), _num(p.y)] for p in document.boundary],
        "cutouts": [
            {
                "purpose": cutout.purpose,
                "center": [_num(cutout.center.x), _num(cutout.center.y)],
                "shape": _shape_data(cutout),
            }
            for cutout in document.cutouts
        ],
    }


@ExporterRegistry.register("json")
class GeometryJsonExporter:
    """JSON geometry dump of a panel net.

    Attributes:
        format_name: "json"
        file_extension: "json"
    """

    format_name: ClassVar[str] = "json"
    file_extension: ClassVar[str] = "json"

    def __init__(self, indent: int = 2) -> None:
        self.indent = indent

    def export_string(self, output: PanelNetOutput) -> str:
        panels = []
        for document in output.documents:
            data = panel_data(document)
            origin = output.layout.footprint(document.role).origin
            data["origin"] = [_num(origin.x), _num(origin.y)]
            panels.append(data)

        data = {
            "schema_version": SCHEMA_VERSION,
            "units": "inches",
            "config": _spec_data(output.spec),
            "tab_counts": output.tab_counts,
            "sheet": {
                "width": _num(output.layout.width),
                "height": _num(output.layout.height),
                "spacing": output.layout.spacing,
            },
            "panels": panels,
        }
        return json.dumps(data, indent=self.indent, sort_keys=True) + "\n"

    def export(self, output: PanelNetOutput, path: Path) -> None:
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported JSON to {path}")

    def emit(self, document: PanelDocument, scale: float) -> str:
        """Single panel geometry; ``scale`` is ignored, JSON stays in inches."""
        return json.dumps(panel_data(document), indent=self.indent, sort_keys=True) + "\n"


__all__ = ["GeometryJsonExporter", "SCHEMA_VERSION", "panel_data"]
