"""Unit tests for panel boundary construction."""

from __future__ import annotations

import pytest

from enclosures.domain import (
    BoxDimensions,
    EdgeSide,
    EnclosureSpec,
    PanelRole,
    Point2D,
)
from enclosures.domain.services import build_boundary, edge_frame, edge_specs_for

KERF = 0.01


def _boundary(spec: EnclosureSpec, role: PanelRole) -> tuple[Point2D, ...]:
    width, height = spec.panel_size(role)
    return build_boundary(width, height, edge_specs_for(role, spec), spec.joints.kerf)


def _segments(points: tuple[Point2D, ...]) -> list[tuple[Point2D, Point2D]]:
    return list(zip(points, points[1:]))


def _touch(a: tuple[Point2D, Point2D], b: tuple[Point2D, Point2D]) -> bool:
    """Axis-aligned segments touch when their bounding boxes overlap."""
    (a0, a1), (b0, b1) = a, b
    return (
        min(a0.x, a1.x) <= max(b0.x, b1.x)
        and min(b0.x, b1.x) <= max(a0.x, a1.x)
        and min(a0.y, a1.y) <= max(b0.y, b1.y)
        and min(b0.y, b1.y) <= max(a0.y, a1.y)
    )


@pytest.fixture
def small_spec() -> EnclosureSpec:
    """Small box so pairwise segment checks stay fast."""
    return EnclosureSpec(
        dimensions=BoxDimensions(length=5.0, width=3.0, height=4.0, thickness=0.25)
    )


class TestEdgeFrame:
    """Tests for edge_frame."""

    def test_counter_clockwise_corners(self) -> None:
        """Edges start at the four corners in counter-clockwise order."""
        starts = [edge_frame(side, 4.0, 2.0)[0] for side in EdgeSide]
        assert set(starts) == {
            Point2D(0.0, 0.0),
            Point2D(4.0, 0.0),
            Point2D(4.0, 2.0),
            Point2D(0.0, 2.0),
        }

    def test_normals_point_outward(self) -> None:
        """Normals point away from the panel center."""
        assert edge_frame(EdgeSide.BOTTOM, 4.0, 2.0)[2] == (0.0, -1.0)
        assert edge_frame(EdgeSide.RIGHT, 4.0, 2.0)[2] == (1.0, 0.0)
        assert edge_frame(EdgeSide.TOP, 4.0, 2.0)[2] == (0.0, 1.0)
        assert edge_frame(EdgeSide.LEFT, 4.0, 2.0)[2] == (-1.0, 0.0)


class TestBuildBoundary:
    """Tests for build_boundary."""

    @pytest.mark.parametrize("role", list(PanelRole))
    def test_closed(self, plain_spec: EnclosureSpec, role: PanelRole) -> None:
        """First and last points are equal."""
        points = _boundary(plain_spec, role)
        assert points[0] == points[-1]

    def test_point_count(self, plain_spec: EnclosureSpec) -> None:
        """Six points per tab, less the merged corner points, plus the closing point."""
        points = _boundary(plain_spec, PanelRole.FRONT)
        tabs = 12 + 16 + 12 + 16
        assert len(points) == 6 * tabs - 7

    def test_within_kerf_of_panel(self, plain_spec: EnclosureSpec) -> None:
        """No point strays more than one kerf outside the panel rectangle."""
        width, height = plain_spec.panel_size(PanelRole.RIGHT)
        for point in _boundary(plain_spec, PanelRole.RIGHT):
            assert -KERF - 1e-12 <= point.x <= width + KERF + 1e-12
            assert -KERF - 1e-12 <= point.y <= height + KERF + 1e-12

    def test_axis_aligned_segments(self, plain_spec: EnclosureSpec) -> None:
        """Every segment is horizontal or vertical."""
        for a, b in _segments(_boundary(plain_spec, PanelRole.TOP)):
            assert a.x == b.x or a.y == b.y

    def test_no_zero_length_segments(self, plain_spec: EnclosureSpec) -> None:
        """Consecutive points are distinct."""
        for a, b in _segments(_boundary(plain_spec, PanelRole.BACK)):
            assert a != b

    @pytest.mark.parametrize("role", list(PanelRole))
    def test_segments_never_cross(self, small_spec: EnclosureSpec, role: PanelRole) -> None:
        """Only consecutive segments share a point."""
        segments = _segments(_boundary(small_spec, role))
        count = len(segments)
        for i in range(count):
            for j in range(i + 2, count):
                if i == 0 and j == count - 1:
                    continue
                assert not _touch(segments[i], segments[j]), (
                    f"{role.value}: segments {i} and {j} cross"
                )

    def test_corner_vertex_offset_by_both_depths(self, plain_spec: EnclosureSpec) -> None:
        """The outline starts at the left/bottom corner moved by both edge depths."""
        start = _boundary(plain_spec, PanelRole.TOP)[0]
        assert abs(start.x) == pytest.approx(KERF)
        assert abs(start.y) == pytest.approx(KERF)

    def test_tab_first_edge_protrudes(self, plain_spec: EnclosureSpec) -> None:
        """The top panel's bottom edge starts with a tab below y = 0."""
        points = _boundary(plain_spec, PanelRole.TOP)
        assert points[1].y == pytest.approx(-KERF)

    def test_deterministic(self, plain_spec: EnclosureSpec) -> None:
        """Repeated builds produce identical points."""
        assert _boundary(plain_spec, PanelRole.LEFT) == _boundary(
            plain_spec, PanelRole.LEFT
        )
