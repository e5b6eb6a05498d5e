"""SVG exporter for laser cutting.

Panel outlines are drawn in black and cutouts in red, both as unfilled
hairline strokes. The document declares its size in inches and uses a
viewBox of ``scale`` units per inch (96 by default). Drawing coordinates
are y-up; the y axis is flipped only when the markup is written.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING, ClassVar

from enclosures.infrastructure.exporters.base import ExporterRegistry
from enclosures.infrastructure.exporters.drawing import (
    DEFAULT_ARC_SEGMENTS,
    Drawing,
    Polyline,
    build_panel_drawing,
    build_sheet_drawing,
)

if TYPE_CHECKING:
    from enclosures.application.dtos import PanelNetOutput
    from enclosures.domain import PanelDocument

logger = logging.getLogger(__name__)

OUTLINE_STROKE = "#000000"
CUTOUT_STROKE = "#FF0000"
LABEL_FILL = "#0000FF"
# Stroke width in inches
STROKE_WIDTH = 0.01


def format_number(value: float) -> str:
    """Fixed four-decimal formatting with negative zero normalized."""
    return f"{round(value, 4) + 0.0:.4f}"


class SvgSerializer:
    """Writes a Drawing as SVG markup."""

    def __init__(self, drawing: Drawing) -> None:
        self.drawing = drawing
        self._top = drawing.min_y + drawing.height

    def _x(self, x: float) -> str:
        return format_number(x - self.drawing.min_x)

    def _y(self, y: float) -> str:
        return format_number(self._top - y)

    def _path(self, polyline: Polyline, stroke: str, stroke_width: str) -> str:
        commands = [
            f"{'M' if i == 0 else 'L'} {self._x(x)} {self._y(y)}"
            for i, (x, y) in enumerate(polyline.points)
        ]
        return (
            f'    <path d="{" ".join(commands)} Z" fill="none" '
            f'stroke="{stroke}" stroke-width="{stroke_width}"/>'
        )

    def serialize(self) -> str:
        drawing = self.drawing
        scale = drawing.scale
        stroke_width = format_number(STROKE_WIDTH * scale)
        parts = [
            '<?xml version="1.0" encoding="UTF-8"?>',
            (
                f'<svg xmlns="http://www.w3.org/2000/svg" '
                f'width="{format_number(drawing.width / scale)}in" '
                f'height="{format_number(drawing.height / scale)}in" '
                f'viewBox="0 0 {format_number(drawing.width)} '
                f'{format_number(drawing.height)}">'
            ),
        ]
        for group in drawing.groups:
            parts.append(f'  <g id="panel-{group.name}">')
            parts.append(self._path(group.outline, OUTLINE_STROKE, stroke_width))
            for polyline in group.polylines:
                parts.append(self._path(polyline, CUTOUT_STROKE, stroke_width))
            for circle in group.circles:
                cx, cy = circle.center
                parts.append(
                    f'    <circle cx="{self._x(cx)}" cy="{self._y(cy)}" '
                    f'r="{format_number(circle.radius)}" fill="none" '
                    f'stroke="{CUTOUT_STROKE}" stroke-width="{stroke_width}"/>'
                )
            if group.label is not None:
                x, y = group.label.position
                parts.append(
                    f'    <text x="{self._x(x)}" y="{self._y(y)}" '
                    f'font-family="sans-serif" '
                    f'font-size="{format_number(group.label.height)}" '
                    f'text-anchor="middle" dominant-baseline="middle" '
                    f'fill="{LABEL_FILL}">{group.label.text}</text>'
                )
            parts.append("  </g>")
        parts.append("</svg>")
        return "\n".join(parts) + "\n"


@ExporterRegistry.register("svg")
class SvgExporter:
    """SVG exporter for the panel sheet.

    Attributes:
        format_name: Identifier for this export format.
        file_extension: File extension for SVG files.
    """

    format_name: ClassVar[str] = "svg"
    file_extension: ClassVar[str] = "svg"

    def __init__(
        self,
        scale: float | None = None,
        arc_segments: int = DEFAULT_ARC_SEGMENTS,
    ) -> None:
        """Initialize the SVG exporter.

        Args:
            scale: Units per inch. None uses the output's configured scale.
            arc_segments: Straight segments per rounded corner.
        """
        self.scale = scale
        self.arc_segments = arc_segments

    def export_string(self, output: PanelNetOutput) -> str:
        """Render the whole sheet as an SVG document."""
        scale = self.scale if self.scale is not None else output.svg_scale
        drawing = build_sheet_drawing(output, scale, self.arc_segments)
        return SvgSerializer(drawing).serialize()

    def export(self, output: PanelNetOutput, path: Path) -> None:
        """Write the sheet SVG to ``path``."""
        path.write_text(self.export_string(output), encoding="utf-8")
        logger.info(f"Exported SVG to {path}")

    def emit(self, document: PanelDocument, scale: float) -> str:
        """Render a single panel at its local origin."""
        drawing = build_panel_drawing(document, scale, arc_segments=self.arc_segments)
        return SvgSerializer(drawing).serialize()


__all__ = ["SvgExporter", "SvgSerializer", "format_number"]
