"""Domain errors raised while building an enclosure panel net.

All errors derive from ``EnclosureError`` (a ``ValueError``) so callers can
catch configuration problems in one place. Each error carries enough context
(panel role, edge, accessory or cutout index) to diagnose the failure.
"""

from __future__ import annotations


class EnclosureError(ValueError):
    """Base class for enclosure geometry errors."""


class InvalidDimensionError(EnclosureError):
    """A box dimension, thickness or joint setting is out of range."""

    def __init__(self, message: str, field: str | None = None) -> None:
        self.field = field
        super().__init__(message)


class DegenerateJointError(EnclosureError):
    """The kerf is too large for the finger joint segments of an edge.

    Attributes:
        role: Panel role the edge belongs to (None for config-level checks).
        side: Edge side within the panel (None for config-level checks).
        kerf: Kerf that was requested.
        segment_width: Width of one tab/notch segment on the edge.
    """

    def __init__(
        self,
        message: str,
        role: str | None = None,
        side: str | None = None,
        kerf: float | None = None,
        segment_width: float | None = None,
    ) -> None:
        self.role = role
        self.side = side
        self.kerf = kerf
        self.segment_width = segment_width
        super().__init__(message)


class InvalidAccessoryError(EnclosureError):
    """An accessory slot has a non-positive dimension."""

    def __init__(self, message: str, index: int | None = None) -> None:
        self.index = index
        super().__init__(message)


class CutoutOutOfBoundsError(EnclosureError, AssertionError):
    """A planned cutout left the panel interior.

    This signals a bug in the cutout rules rather than bad user input.
    """

    def __init__(self, message: str, role: str, index: int) -> None:
        self.role = role
        self.index = index
        super().__init__(message)


__all__ = [
    "CutoutOutOfBoundsError",
    "DegenerateJointError",
    "EnclosureError",
    "InvalidAccessoryError",
    "InvalidDimensionError",
]
