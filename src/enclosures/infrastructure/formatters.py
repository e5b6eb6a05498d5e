"""Text formatters for panel net summaries."""

from __future__ import annotations

from collections import Counter

from enclosures.application.dtos import PanelNetOutput
from enclosures.domain import PanelDocument
from enclosures.domain.value_objects import EDGE_WALK_ORDER


class PanelSummaryFormatter:
    """Formats a panel net as a fixed-width table.

    One row per panel with its size, tab count per edge (bottom, right,
    top, left) and cutout count, followed by the sheet size.
    """

    def __init__(self, show_cutout_detail: bool = False) -> None:
        """Initialize formatter.

        Args:
            show_cutout_detail: Whether to list cutouts by purpose under
                each panel.
        """
        self._show_cutout_detail = show_cutout_detail

    def format(self, output: PanelNetOutput) -> str:
        """Format the panel net summary."""
        lines = [
            "PANEL NET",
            "=" * 72,
            f"{'Panel':<14} {'Width':<9} {'Height':<9} {'Tabs (B/R/T/L)':<18} {'Cutouts'}",
            "-" * 72,
        ]
        for document in output.documents:
            lines.append(self._format_row(document))
            if self._show_cutout_detail:
                lines.extend(self._format_cutouts(document))

        layout = output.layout
        spec = output.spec
        lines.append("-" * 72)
        lines.append(f"{'TOTAL CUTOUTS':<52} {output.net.cutout_count}")
        lines.append(
            f"Sheet: {layout.width:.3f} x {layout.height:.3f} in "
            f"(spacing {layout.spacing})"
        )
        lines.append(
            f"Material: {spec.dimensions.thickness} in, tab target "
            f"{spec.joints.tab_target_size} in, kerf {spec.joints.kerf} in"
        )
        return "\n".join(lines)

    def _format_row(self, document: PanelDocument) -> str:
        tabs = "/".join(str(document.edge(side).tab_count) for side in EDGE_WALK_ORDER)
        return (
            f"{document.role.label:<14} {document.width:<9.3f} "
            f"{document.height:<9.3f} {tabs:<18} {len(document.cutouts)}"
        )

    def _format_cutouts(self, document: PanelDocument) -> list[str]:
        counts = Counter(cutout.purpose for cutout in document.cutouts)
        return [f"    {purpose}: {count}" for purpose, count in sorted(counts.items())]
