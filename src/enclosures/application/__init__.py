"""Application layer - use cases and configuration."""

from .commands import GeneratePanelNetCommand
from .dtos import DEFAULT_SVG_SCALE, PanelNetOutput

__all__ = [
    "DEFAULT_SVG_SCALE",
    "GeneratePanelNetCommand",
    "PanelNetOutput",
]
