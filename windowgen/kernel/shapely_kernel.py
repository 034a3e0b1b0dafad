"""Geometry kernel backed by shapely (GEOS)."""

from __future__ import annotations
import logging

import shapely
from shapely.geometry import MultiPolygon, Polygon
from shapely.geometry.polygon import orient
from shapely.validation import explain_validity

from windowgen.errors import BufferingError, TriangulationError
from windowgen.kernel.base import GeometryKernel
from windowgen.models import Outline, Point2D, Triangle2D

logger = logging.getLogger(__name__)


def to_polygon(outline: Outline, holes: list[Outline] | None = None) -> Polygon:
    return Polygon(
        [(p.x, p.z) for p in outline.vertices],
        [[(p.x, p.z) for p in h.vertices] for h in holes or []],
    )


def _outline_from_ring(coords: list[tuple[float, float]]) -> Outline:
    return Outline.from_points([Point2D(x=x, z=z) for x, z in coords])


class ShapelyKernel(GeometryKernel):
    """Constrained Delaunay triangulation and mitred buffering via shapely."""

    def __init__(self, mitre_limit: float = 5.0) -> None:
        self.mitre_limit = mitre_limit

    def triangulate(self, outline: Outline) -> list[Triangle2D]:
        return self.triangulate_with_holes(outline, [])

    def triangulate_with_holes(self, outer: Outline, holes: list[Outline]) -> list[Triangle2D]:
        polygon = to_polygon(outer, holes)
        if polygon.is_empty or not polygon.is_valid:
            raise TriangulationError(
                f"Cannot triangulate invalid polygon: {explain_validity(polygon)}"
            )

        result = shapely.constrained_delaunay_triangles(polygon)

        triangles: list[Triangle2D] = []
        for tri in shapely.get_parts(result):
            if tri.is_empty or tri.area < 1e-14:
                continue
            coords = list(orient(tri, sign=1.0).exterior.coords)[:3]
            a, b, c = (Point2D(x=x, z=z) for x, z in coords)
            triangles.append(Triangle2D(v1=a, v2=b, v3=c))

        if not triangles:
            raise TriangulationError("Triangulation produced no triangles")

        logger.debug(
            "Triangulated polygon with %d vertices and %d holes into %d triangles",
            len(outer.vertices), len(holes), len(triangles),
        )
        return triangles

    def buffer_inward(self, outline: Outline, distance: float) -> list[Outline]:
        polygon = to_polygon(outline)
        buffered = polygon.buffer(-distance, join_style="mitre", mitre_limit=self.mitre_limit)

        if isinstance(buffered, Polygon):
            parts = [buffered]
        elif isinstance(buffered, MultiPolygon):
            parts = list(buffered.geoms)
        else:
            parts = [g for g in shapely.get_parts(buffered) if isinstance(g, Polygon)]

        loops = [
            _outline_from_ring(list(orient(p, sign=1.0).exterior.coords))
            for p in parts
            if not p.is_empty and p.area > 1e-12
        ]
        if not loops:
            raise BufferingError(
                f"Inward buffer by {distance} m left nothing of a "
                f"{len(outline.vertices)}-vertex outline"
            )
        return loops
