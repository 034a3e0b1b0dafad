import pytest
from pydantic import ValidationError

from windowgen.core.composer import OutlineComposer, merge_region_outlines
from windowgen.errors import DegenerateGeometryError, UnsupportedConfigurationError
from windowgen.models import (
    LineSegment2D, Outline, Point2D, RegionProperties, WindowParameters, WindowRegion, WindowShape,
)


def _arched(width=1.0, height=1.0):
    return WindowParameters(
        width=width,
        height=height,
        regions={
            WindowRegion.CENTER: RegionProperties(shape=WindowShape.RECTANGLE),
            WindowRegion.TOP: RegionProperties(shape=WindowShape.SEMICIRCLE),
        },
    )


def test_simple_window_uses_overall_shape():
    params = WindowParameters(
        width=1.0, height=1.0, overall=RegionProperties(shape=WindowShape.CIRCLE),
    )
    composed = OutlineComposer().compose(Point2D(x=0, z=0), params)

    assert len(composed.outline.vertices) == 32
    assert composed.region_outlines == {}
    assert composed.region_borders == {}


def test_center_only_region_map_falls_back_to_simple_outline():
    params = WindowParameters(
        width=1.0, height=1.0,
        regions={WindowRegion.CENTER: RegionProperties(shape=WindowShape.TRIANGLE)},
    )
    composed = OutlineComposer().compose(Point2D(x=0, z=0), params)
    assert len(composed.outline.vertices) == 4
    assert composed.region_borders == {}


def test_square_with_semicircular_top():
    composed = OutlineComposer().compose(Point2D(x=0, z=0), _arched())
    outline = composed.outline

    assert len(outline.vertices) >= 5
    assert outline.is_simple()
    assert not outline.is_clockwise()
    closed = outline.closed_vertices()
    assert closed[0] == closed[-1]

    bbox = outline.bounding_box()
    assert bbox.min_x == pytest.approx(-0.5)
    assert bbox.max_x == pytest.approx(0.5)
    assert bbox.min_z == pytest.approx(0.0)
    assert bbox.max_z == pytest.approx(2.0)

    # square body plus a half ellipse of radii 0.5 and 1.0
    center = composed.region_outlines[WindowRegion.CENTER]
    top = composed.region_outlines[WindowRegion.TOP]
    assert outline.area == pytest.approx(center.area + top.area, rel=1e-9)


def test_merged_vertex_count_and_no_consecutive_duplicates():
    composed = OutlineComposer().compose(Point2D(x=2, z=1), _arched(1.2, 1.5))
    center = composed.region_outlines[WindowRegion.CENTER]
    top = composed.region_outlines[WindowRegion.TOP]

    closed = composed.outline.closed_vertices()
    assert len(closed) == (len(center.vertices) - 1) + (len(top.vertices) - 1) + 1

    for a, b in zip(closed, closed[1:]):
        assert a.distance_to(b) > 1e-9


def test_top_border_is_center_top_edge():
    composed = OutlineComposer().compose(Point2D(x=0, z=0), _arched())
    border = composed.region_borders[WindowRegion.TOP]
    assert border.p1 == Point2D(x=0.5, z=1.0)
    assert border.p2 == Point2D(x=-0.5, z=1.0)


def test_composition_is_idempotent():
    composer = OutlineComposer()
    first = composer.compose(Point2D(x=1, z=0.8), _arched())
    second = composer.compose(Point2D(x=1, z=0.8), _arched())
    assert first == second


@pytest.mark.parametrize("region", [WindowRegion.LEFT, WindowRegion.RIGHT, WindowRegion.BOTTOM])
def test_other_region_combinations_are_rejected(region):
    params = WindowParameters(
        regions={
            WindowRegion.CENTER: RegionProperties(),
            WindowRegion.TOP: RegionProperties(shape=WindowShape.SEMICIRCLE),
            region: RegionProperties(),
        },
    )
    with pytest.raises(UnsupportedConfigurationError):
        OutlineComposer().compose(Point2D(x=0, z=0), params)


def test_center_and_left_is_rejected():
    params = WindowParameters(
        regions={
            WindowRegion.CENTER: RegionProperties(),
            WindowRegion.LEFT: RegionProperties(),
        },
    )
    with pytest.raises(UnsupportedConfigurationError):
        OutlineComposer().compose(Point2D(x=0, z=0), params)


def test_region_map_without_center_is_invalid():
    with pytest.raises(ValidationError):
        WindowParameters(regions={WindowRegion.TOP: RegionProperties()})


@pytest.mark.parametrize("flipped", ["center", "top"])
def test_merge_rejects_clockwise_region(flipped):
    center = WindowShape.RECTANGLE.build_outline(Point2D(x=0, z=0), 1.0, 1.0)
    border = LineSegment2D(p1=Point2D(x=0.5, z=1.0), p2=Point2D(x=-0.5, z=1.0))
    top = WindowShape.SEMICIRCLE.build_on_segment(border.reversed(), 1.0)
    if flipped == "center":
        center = Outline.from_points(list(reversed(center.vertices)))
    else:
        top = Outline.from_points(list(reversed(top.vertices)))

    with pytest.raises(DegenerateGeometryError):
        merge_region_outlines(center, top, border)
