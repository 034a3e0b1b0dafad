"""3D output — lifts a GeometryWindow onto a wall surface and draws it."""

from __future__ import annotations
import logging

from windowgen.kernel.base import GeometryKernel
from windowgen.kernel.shapely_kernel import ShapelyKernel
from windowgen.models import (
    ExtrudeOption, FrameDimensions, GeometryWindow, Point2D, Point3D, Triangle3D,
)
from windowgen.models.mesh import TexCoord
from windowgen.surface.base import WallSurface
from windowgen.target.base import Target

logger = logging.getLogger(__name__)


def triangle_strip_between(left: list[Point3D], right: list[Point3D]) -> list[Point3D]:
    """Interleave two equally long vertex rows into one triangle strip."""
    if len(left) != len(right):
        raise ValueError("Strip rows must have the same number of vertices")
    strip: list[Point3D] = []
    for a, b in zip(left, right):
        strip.append(a)
        strip.append(b)
    return strip


def triangle_tex_coords(
    triangles: list[Triangle3D], surface: WallSurface,
) -> list[list[TexCoord]]:
    """Global wall texture coordinates, three per triangle."""
    return [[surface.tex_coords_global(v) for t in triangles for v in t.vertices()]]


def strip_wall_tex_coords(strip: list[Point3D]) -> list[list[TexCoord]]:
    """u runs along the strip, v across it (wall-like texture on frame sides)."""
    coords: list[TexCoord] = []
    u = 0.0
    for i in range(0, len(strip) - 1, 2):
        if i > 0:
            u += strip[i - 2].distance_to(strip[i])
        coords.append((u, 0.0))
        coords.append((u, strip[i].distance_to(strip[i + 1])))
    return [coords]


def frame_cross_section(frame: FrameDimensions) -> list[Point2D]:
    """Rectangular profile of an inner frame bar, centered on the path."""
    hw = frame.inner_frame_width / 2
    ht = frame.inner_frame_thickness / 2
    return [
        Point2D(x=-hw, z=-ht),
        Point2D(x=hw, z=-ht),
        Point2D(x=hw, z=ht),
        Point2D(x=-hw, z=ht),
    ]


class WindowRenderer:
    """
    Emits pane, outer frame and inner frame bars of a window.

    All geometry is computed before the first draw call, so a failing
    kernel operation leaves the target untouched.
    """

    def __init__(self, kernel: GeometryKernel | None = None) -> None:
        self.kernel = kernel or ShapelyKernel()

    def render(self, window: GeometryWindow, target: Target, surface: WallSurface) -> None:
        frame = window.config.frame
        params = window.params

        normal = surface.normal_at(window.outline.centroid)
        to_back = normal * -frame.depth
        to_outer_frame = normal * (-frame.depth + frame.outer_frame_thickness)

        # Glass pane at the back of the recess
        pane_triangles = [
            surface.convert_triangle_to_3d(t).shift(to_back)
            for t in self.kernel.triangulate(window.pane_outline)
        ]

        # Front face of the outer frame
        inner_outlines = self.kernel.buffer_inward(window.outline, frame.outer_frame_width)
        front_triangles = [
            surface.convert_triangle_to_3d(t).shift(to_outer_frame)
            for t in self.kernel.triangulate_with_holes(window.outline, inner_outlines)
        ]

        # Sides of the outer frame, from its front face back to the pane
        side_material = params.frame_material
        if window.is_round:
            side_material = side_material.make_smooth()

        side_strips: list[list[Point3D]] = []
        for inner in inner_outlines:
            loop = surface.convert_points_to_3d(inner.closed_vertices())
            side_strips.append(triangle_strip_between(
                [p.shift(to_outer_frame) for p in loop],
                [p.shift(to_back) for p in loop],
            ))

        # Inner frame bars
        bar_paths = [
            [surface.convert_to_3d(p).shift(to_back) for p in path.points]
            for path in window.frame_paths
        ]

        pane_material = window.pane_material
        target.draw_triangles(
            pane_material, pane_triangles, triangle_tex_coords(pane_triangles, surface),
        )
        target.draw_triangles(
            params.frame_material, front_triangles, triangle_tex_coords(front_triangles, surface),
        )
        for strip in side_strips:
            target.draw_triangle_strip(side_material, strip, strip_wall_tex_coords(strip))

        # bars are closed solids, capped where they meet the outer frame
        cross_section = frame_cross_section(frame)
        bar_options = {ExtrudeOption.START_CAP, ExtrudeOption.END_CAP}
        for path in bar_paths:
            target.draw_extruded_shape(
                params.frame_material, cross_section, path, [normal] * len(path), bar_options,
            )

        logger.debug(
            "Rendered window: %d pane triangles, %d frame triangles, %d side strips, %d bars",
            len(pane_triangles), len(front_triangles), len(side_strips), len(bar_paths),
        )
