"""Tests for SVG path generators."""

from __future__ import annotations

import math

import pytest

from core.charting.shapes import (
    TAU,
    arc_centroid,
    arc_path,
    area_path,
    baseline_area_path,
    line_path,
    link_horizontal,
    link_radial,
    pie_layout,
    polar,
    polygon_path,
    ribbon_path,
)

pytestmark = pytest.mark.unit


def test_linear_line_path() -> None:
    """Straight segments join the points in order."""

    assert line_path([(0, 0), (10, 10), (20, 5)]) == "M0,0L10,10L20,5"
    assert line_path([]) == ""


def test_step_curve_changes_level_halfway() -> None:
    """Step curves move horizontally to the midpoint, then vertically."""

    assert line_path([(0, 0), (10, 10)], curve="step") == "M0,0L5,0L5,10L10,10"


def test_monotone_curve_emits_one_cubic_per_segment() -> None:
    """Monotone interpolation draws one Bezier per gap."""

    path = line_path([(0, 0), (10, 5), (20, 30), (30, 31)], curve="monotone_x")
    assert path.startswith("M0,0")
    assert path.count("C") == 3
    assert path.endswith("30,31")


def test_basis_curve_starts_with_a_short_line() -> None:
    """The B-spline begins at the first point and ends at the last."""

    path = line_path([(0, 0), (6, 6), (12, 0)], curve="basis")
    assert path.startswith("M0,0L1,1")
    assert path.endswith("L12,0")


def test_unknown_curve_is_rejected() -> None:
    """Only the supported curves may be requested."""

    with pytest.raises(ValueError):
        line_path([(0, 0)], curve="wobbly")  # type: ignore[arg-type]


def test_area_paths_close_the_outline() -> None:
    """Areas trace the top forwards and the bottom backwards."""

    assert area_path([(0, 0), (10, 0)], [(0, 10), (10, 10)]) == "M0,0L10,0L10,10L0,10Z"
    assert baseline_area_path([(0, 0), (10, 5)], 20) == "M0,0L10,5L10,20L0,20Z"
    assert area_path([], []) == ""


def test_polygon_path_is_closed() -> None:
    """Polygons end with a close command."""

    assert polygon_path([(0, 0), (1, 0), (1, 1)]) == "M0,0L1,0L1,1Z"


def test_polar_measures_clockwise_from_twelve() -> None:
    """Angle zero points up and a quarter turn points right."""

    assert polar(0, 10) == pytest.approx((0, -10))
    assert polar(math.pi / 2, 10) == pytest.approx((10, 0))


def test_pie_slice_arc_path() -> None:
    """A zero inner radius closes the sector through the centre."""

    path = arc_path(inner_radius=0, outer_radius=10, start_angle=0, end_angle=math.pi / 2)
    assert path == "M0,-10A10,10,0,0,1,10,0L0,0Z"


def test_full_donut_draws_two_rings() -> None:
    """A full turn with an inner radius draws outer and inner circles."""

    path = arc_path(inner_radius=5, outer_radius=10, start_angle=0, end_angle=TAU)
    assert path.count("M") == 2
    assert path.count("A") == 4


def test_degenerate_arc() -> None:
    """A zero outer radius collapses to the origin."""

    assert arc_path(inner_radius=0, outer_radius=0, start_angle=0, end_angle=1) == "M0,0Z"


def test_arc_centroid_is_mid_angle_mid_radius() -> None:
    """The centroid sits halfway along both the angle and the radius."""

    x, y = arc_centroid(inner_radius=10, outer_radius=30, start_angle=0, end_angle=math.pi)
    assert (x, y) == pytest.approx((20, 0))


def test_pie_layout_is_proportional_and_in_data_order() -> None:
    """Slices keep data order and split the full turn by value."""

    slices = pie_layout([1, 1, 2])
    assert [s.index for s in slices] == [0, 1, 2]
    assert slices[0].end_angle - slices[0].start_angle == pytest.approx(TAU / 4)
    assert slices[2].end_angle == pytest.approx(TAU)


def test_pie_layout_handles_all_zero_values() -> None:
    """Zero totals give zero-width slices instead of dividing by zero."""

    slices = pie_layout([0, 0])
    assert all(s.start_angle == s.end_angle == 0 for s in slices)


def test_ribbon_path_between_two_groups() -> None:
    """Ribbons draw two arcs joined through the centre."""

    path = ribbon_path(radius=100, source_angles=(0, 0.5), target_angles=(2, 2.5))
    assert path.count("A") == 2
    assert path.count("Q") == 2
    assert path.endswith("Z")

    self_loop = ribbon_path(radius=100, source_angles=(0, 0.5), target_angles=(0, 0.5))
    assert self_loop.count("A") == 1


def test_links() -> None:
    """Horizontal and radial links are single cubic curves."""

    assert link_horizontal((0, 0), (10, 20)) == "M0,0C5,0,5,20,10,20"
    radial = link_radial((0, 10), (math.pi / 2, 20))
    assert radial.startswith("M0,-10C")
    assert radial.endswith("20,0")
