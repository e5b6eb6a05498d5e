"""Unit tests for finger joint edge generation."""

from __future__ import annotations

import pytest

from enclosures.domain import DegenerateJointError, EdgeSide, EdgeSpec, PanelRole, Point2D
from enclosures.domain.services import (
    MIN_TAB_COUNT,
    compute_tab_count,
    generate_edge,
    segment_phases,
    tab_pitch,
    validate_edge,
)


class TestComputeTabCount:
    """Tests for compute_tab_count."""

    @pytest.mark.parametrize(
        "length,expected",
        [(6.0, 12), (24.0, 48), (8.0, 16), (6.3, 12)],
    )
    def test_floor_of_length_over_target(self, length: float, expected: int) -> None:
        """Tab count is the floor of length over the target size."""
        assert compute_tab_count(length, 0.5) == expected

    def test_never_below_minimum(self) -> None:
        """Short edges still get the minimum number of tabs."""
        assert compute_tab_count(1.0, 0.5) == MIN_TAB_COUNT
        assert compute_tab_count(0.1, 0.5) == MIN_TAB_COUNT

    def test_non_decreasing_in_length(self) -> None:
        """Longer edges never get fewer tabs."""
        counts = [compute_tab_count(0.25 * i, 0.5) for i in range(1, 200)]
        assert counts == sorted(counts)

    def test_tab_pitch(self) -> None:
        """Pitch is one tab plus one notch."""
        assert tab_pitch(6.0, 12) == pytest.approx(0.5)


class TestGenerateEdge:
    """Tests for generate_edge."""

    def test_three_points_per_segment(self) -> None:
        """Each of the 2n segments contributes three points."""
        points = generate_edge(3.0, 3, 0.01, inverted=False)
        assert len(points) == 3 * 6

    def test_ends_exactly_on_corner(self) -> None:
        """The last point is exactly (length, 0)."""
        points = generate_edge(7.3, 14, 0.01, inverted=True)
        assert points[-1] == Point2D(7.3, 0.0)

    def test_first_segment_is_tab(self) -> None:
        """Non-inverted edges start by protruding."""
        points = generate_edge(3.0, 3, 0.01, inverted=False)
        assert points[0] == Point2D(0.0, 0.01)
        assert points[1] == Point2D(0.5, 0.01)
        assert points[3].y == -0.01

    def test_inverted_starts_with_notch(self) -> None:
        """Inverted edges start by receding."""
        points = generate_edge(3.0, 3, 0.01, inverted=True)
        assert points[0] == Point2D(0.0, -0.01)
        assert points[3].y == 0.01

    def test_along_coordinates_monotonic(self) -> None:
        """The walk never moves backwards along the edge."""
        points = generate_edge(5.0, 10, 0.02, inverted=False)
        along = [p.x for p in points]
        assert along == sorted(along)
        assert min(along) == 0.0
        assert max(along) == 5.0

    def test_perpendicular_offsets_bounded_by_kerf(self) -> None:
        """Tabs and notches move exactly one kerf out or in."""
        points = generate_edge(5.0, 10, 0.02, inverted=False)
        assert {p.y for p in points} == {0.02, -0.02, 0.0}


class TestSegmentPhases:
    """Tests for segment_phases."""

    def test_alternates(self) -> None:
        """Segments alternate tab and notch."""
        assert segment_phases(3, False) == (True, False, True, False, True, False)

    def test_inverted_is_complement(self) -> None:
        """Inverting flips every segment."""
        normal = segment_phases(5, False)
        inverted = segment_phases(5, True)
        assert all(a != b for a, b in zip(normal, inverted))

    def test_reversed_walk_flips_phase(self) -> None:
        """Walking an edge backwards is the same as inverting it."""
        assert tuple(reversed(segment_phases(4, False))) == segment_phases(4, True)


class TestValidateEdge:
    """Tests for validate_edge."""

    def _edge(self, length: float = 1.5) -> EdgeSpec:
        return EdgeSpec(
            role=PanelRole.FRONT,
            side=EdgeSide.BOTTOM,
            length=length,
            tab_count=3,
            inverted=False,
        )

    def test_accepts_small_kerf(self) -> None:
        """A kerf below the segment width passes."""
        validate_edge(self._edge(), 0.1)

    def test_rejects_kerf_equal_to_segment(self) -> None:
        """A kerf equal to the segment width is degenerate."""
        with pytest.raises(DegenerateJointError) as exc_info:
            validate_edge(self._edge(), 0.25)
        error = exc_info.value
        assert error.role == "front"
        assert error.side == "bottom"
        assert error.segment_width == pytest.approx(0.25)

    def test_rejects_large_kerf(self) -> None:
        """A kerf wider than a segment is degenerate."""
        with pytest.raises(DegenerateJointError, match="front panel"):
            validate_edge(self._edge(), 0.4)
