"""Infrastructure layer - exporters and formatters."""

from .exporters import (
    DxfExporter,
    Exporter,
    ExporterRegistry,
    ExportManager,
    GeometryJsonExporter,
    SvgExporter,
)
from .formatters import PanelSummaryFormatter

__all__ = [
    "DxfExporter",
    "ExportManager",
    "Exporter",
    "ExporterRegistry",
    "GeometryJsonExporter",
    "PanelSummaryFormatter",
    "SvgExporter",
]
