"""Exporter framework for panel net outputs.

- Exporter Protocol: Interface of all exporters
- ExporterRegistry: Central registry for format discovery
- ExportManager: Coordinates multi-format export operations
- DrawingBuilder: Format-neutral primitives every exporter serializes

Registered exporters:
- dxf: DXF (R2010) for CAD and laser software
- json: Geometry dump in inches
- svg: SVG sheet for laser cutting

Usage:
    from enclosures.infrastructure.exporters import ExporterRegistry, ExportManager

    svg = ExporterRegistry.get("svg")()
    text = svg.export_string(output)

    manager = ExportManager(output_dir=Path("./output"))
    results = manager.export_all(["svg", "dxf"], output, project_name="gpu_case")
"""

from enclosures.infrastructure.exporters.base import (
    Exporter,
    ExporterRegistry,
    ExportManager,
)
from enclosures.infrastructure.exporters.drawing import (
    Drawing,
    DrawingBuilder,
    build_panel_drawing,
    build_sheet_drawing,
    rounded_rect_points,
)
from enclosures.infrastructure.exporters.dxf import DxfExporter
from enclosures.infrastructure.exporters.geometry_json import GeometryJsonExporter
from enclosures.infrastructure.exporters.svg import SvgExporter

__all__ = [
    "Drawing",
    "DrawingBuilder",
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "GeometryJsonExporter",
    "SvgExporter",
    "build_panel_drawing",
    "build_sheet_drawing",
    "rounded_rect_points",
]
