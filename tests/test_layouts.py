import math

import pytest

from windowgen.core.panes import pane_outline_from_outline
from windowgen.core.registry import create_default_registry
from windowgen.errors import DegenerateGeometryError, UnsupportedConfigurationError
from windowgen.models import (
    GenerationConfig, LineSegment2D, Outline, PaneLayout, Point2D, RegionProperties,
    WindowParameters, WindowRegion, WindowShape,
)
from windowgen.rules.grid import GridMullionLayout
from windowgen.rules.radial import RadialMullionLayout


def _on_boundary(outline: Outline, p: Point2D, tol: float = 1e-9) -> bool:
    for edge in outline.edges():
        a, b = edge.p1, edge.p2
        dx, dz = b.x - a.x, b.z - a.z
        t = ((p.x - a.x) * dx + (p.z - a.z) * dz) / (dx * dx + dz * dz)
        t = max(0.0, min(1.0, t))
        if p.distance_to(Point2D(x=a.x + t * dx, z=a.z + t * dz)) < tol:
            return True
    return False


def _angle_between(start: Point2D, end: Point2D) -> float:
    return math.degrees(math.atan2(end.x - start.x, end.z - start.z)) % 360.0


def _angle_diff(a: float, b: float) -> float:
    return abs((a - b + 180.0) % 360.0 - 180.0)


def test_grid_on_rectangular_pane():
    pane = WindowShape.RECTANGLE.build_outline(Point2D(x=0, z=0), 2.0, 1.0)
    layout = PaneLayout(panes_horizontal=3, panes_vertical=2)

    paths = GridMullionLayout().generate(pane, layout, None, GenerationConfig())

    assert len(paths) == (2 - 1) + (3 - 1)

    horizontal = paths[0].points
    assert horizontal[0].x == pytest.approx(-1.0)
    assert horizontal[1].x == pytest.approx(1.0)
    assert horizontal[0].z == pytest.approx(0.5)
    assert horizontal[1].z == pytest.approx(0.5)

    for path, x in zip(paths[1:], [-1.0 / 3.0, 1.0 / 3.0]):
        start, end = path.points
        assert start.x == pytest.approx(x)
        assert end.x == pytest.approx(x)
        assert start.z == pytest.approx(0.0)
        assert end.z == pytest.approx(1.0)


@pytest.mark.parametrize("h,v", [(1, 1), (2, 1), (1, 4), (4, 3)])
def test_grid_counts_and_clipping_on_round_pane(h, v):
    pane = WindowShape.CIRCLE.build_outline(Point2D(x=0, z=0), 1.0, 1.0)
    layout = PaneLayout(panes_horizontal=h, panes_vertical=v)

    paths = GridMullionLayout().generate(pane, layout, None, GenerationConfig())

    assert len(paths) == (v - 1) + (h - 1)
    for path in paths:
        assert len(path.points) == 2
        assert all(_on_boundary(pane, p) for p in path.points)
        # clipped to the circle, so never longer than its diameter
        assert path.length <= 1.0 + 1e-9


def test_full_radial_spokes():
    pane = WindowShape.CIRCLE.build_outline(Point2D(x=0, z=-1), 2.0, 2.0)
    layout = PaneLayout(panes_horizontal=6, radial=True)

    paths = RadialMullionLayout().generate(pane, layout, None, GenerationConfig())

    assert len(paths) == 6
    center = pane.centroid
    angles = [_angle_between(p.points[0], p.points[1]) for p in paths]
    for path in paths:
        assert path.points[0].distance_to(center) < 1e-9
        assert _on_boundary(pane, path.points[1])
    for a, b in zip(angles, angles[1:]):
        assert _angle_diff(b - a, 60.0) < 1e-6


def test_partial_radial_spokes_skip_border():
    border = LineSegment2D(p1=Point2D(x=-0.5, z=1.0), p2=Point2D(x=0.5, z=1.0))
    pane = WindowShape.SEMICIRCLE.build_on_segment(border, 1.0)
    layout = PaneLayout(panes_horizontal=4, radial=True)

    paths = RadialMullionLayout().generate(pane, layout, border, GenerationConfig())

    assert len(paths) == 3
    angles = [_angle_between(p.points[0], p.points[1]) for p in paths]
    for angle, expected in zip(angles, [315.0, 0.0, 45.0]):
        assert _angle_diff(angle, expected) < 1e-6
    for path in paths:
        assert path.points[0] == border.center
        assert path.points[1].z > 1.0
        assert _on_boundary(pane, path.points[1])


def test_registry_picks_layout_by_radial_flag():
    registry = create_default_registry()
    config = GenerationConfig()
    assert registry.get_layout_rule(PaneLayout(), config).get_id() == "mullion.grid"
    assert registry.get_layout_rule(PaneLayout(radial=True), config).get_id() == "mullion.radial"


def test_disabled_layout_is_unsupported():
    registry = create_default_registry()
    config = GenerationConfig(disabled_layouts=["mullion.radial"])
    with pytest.raises(UnsupportedConfigurationError):
        registry.get_layout_rule(PaneLayout(panes_horizontal=3, radial=True), config)


def test_circular_window_with_four_spokes(service):
    params = WindowParameters(
        width=2.0,
        height=2.0,
        overall=RegionProperties(
            shape=WindowShape.CIRCLE,
            panes=PaneLayout(panes_horizontal=4, radial=True),
        ),
    )
    window = service.build(Point2D(x=0, z=-1), params)
    radius = window.pane_outline.bounding_box().size_x / 2

    assert len(window.frame_paths) == 4
    for path, expected in zip(window.frame_paths, [0.0, 90.0, 180.0, 270.0]):
        start, end = path.points
        assert start.distance_to(Point2D(x=0, z=0)) < 1e-9
        assert start.distance_to(end) == pytest.approx(radius)
        assert _angle_diff(_angle_between(start, end), expected) < 1e-6


def test_arched_window_with_radial_top(service):
    params = WindowParameters(
        width=1.0,
        height=1.0,
        regions={
            WindowRegion.CENTER: RegionProperties(panes=PaneLayout(panes_horizontal=2)),
            WindowRegion.TOP: RegionProperties(
                shape=WindowShape.SEMICIRCLE,
                panes=PaneLayout(panes_horizontal=3, radial=True),
            ),
        },
    )
    window = service.build(Point2D(x=0, z=0), params)

    # 1 vertical bar in CENTER, 2 spokes in TOP, 1 border bar
    assert len(window.frame_paths) == 4
    border = window.region_borders[WindowRegion.TOP]
    assert window.frame_paths[-1].points == (border.p1, border.p2)
    spokes = window.frame_paths[1:3]
    for spoke, expected in zip(spokes, [330.0, 30.0]):
        assert spoke.points[0] == border.center
        assert _angle_diff(_angle_between(*spoke.points), expected) < 1e-6


def test_overall_panes_take_precedence_over_regions(service):
    params = WindowParameters(
        width=1.0,
        height=1.0,
        overall=RegionProperties(panes=PaneLayout(panes_horizontal=2, panes_vertical=2)),
        regions={
            WindowRegion.CENTER: RegionProperties(),
            WindowRegion.TOP: RegionProperties(
                shape=WindowShape.SEMICIRCLE,
                panes=PaneLayout(panes_horizontal=5, radial=True),
            ),
        },
    )
    window = service.build(Point2D(x=0, z=0), params)
    assert len(window.frame_paths) == 2
    assert all(_on_boundary(window.pane_outline, p) for path in window.frame_paths for p in path.points)


def test_no_panes_means_no_frame_paths(service):
    window = service.build(Point2D(x=0, z=0), WindowParameters())
    assert window.frame_paths == ()


def test_generation_is_idempotent(service):
    params = WindowParameters(
        width=1.4,
        height=1.1,
        regions={
            WindowRegion.CENTER: RegionProperties(panes=PaneLayout(panes_horizontal=3, panes_vertical=2)),
            WindowRegion.TOP: RegionProperties(
                shape=WindowShape.SEMICIRCLE,
                panes=PaneLayout(panes_horizontal=4, radial=True),
            ),
        },
    )
    first = service.build(Point2D(x=5, z=1), params)
    second = service.build(Point2D(x=5, z=1), params)
    assert first == second


@pytest.mark.parametrize("top_shape", [
    WindowShape.RECTANGLE, WindowShape.TRIANGLE, WindowShape.SEMICIRCLE,
])
def test_scoped_spokes_reach_far_side_of_top_pane(service, top_shape):
    params = WindowParameters(
        width=1.0,
        height=1.2,
        regions={
            WindowRegion.CENTER: RegionProperties(),
            WindowRegion.TOP: RegionProperties(
                shape=top_shape,
                panes=PaneLayout(panes_horizontal=4, radial=True),
            ),
        },
    )
    window = service.build(Point2D(x=0, z=0), params)
    top_pane = pane_outline_from_outline(
        window.region_outlines[WindowRegion.TOP], window.config.frame.inner_frame_width,
    )
    base_z = top_pane.bounding_box().min_z

    spokes = window.frame_paths[:3]
    assert len(spokes) == 3
    for spoke in spokes:
        start, end = spoke.points
        assert start.distance_to(end) > 0.2
        assert end.z > base_z + 0.1
        assert _on_boundary(top_pane, end)
        # just past the end is outside the pane
        assert not top_pane.contains(end.lerp(start, -0.01))


def test_spoke_that_misses_the_pane_fails():
    pane = WindowShape.RECTANGLE.build_outline(Point2D(x=0, z=0), 1.0, 1.0)
    far_border = LineSegment2D(p1=Point2D(x=50.0, z=50.0), p2=Point2D(x=51.0, z=50.0))
    layout = PaneLayout(panes_horizontal=4, radial=True)

    with pytest.raises(DegenerateGeometryError):
        RadialMullionLayout().generate(pane, layout, far_border, GenerationConfig())


def test_grid_on_flat_pane_fails():
    flat = Outline.from_points([
        Point2D(x=0, z=0), Point2D(x=1, z=0), Point2D(x=2, z=0),
    ])
    with pytest.raises(DegenerateGeometryError):
        GridMullionLayout().generate(flat, PaneLayout(panes_vertical=2), None, GenerationConfig())
