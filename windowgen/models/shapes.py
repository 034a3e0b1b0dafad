"""Closed 2D shapes: window outlines and the shape kinds that build them."""

from __future__ import annotations
import math
from enum import Enum
from itertools import combinations
from pydantic import BaseModel, ConfigDict, field_validator

from windowgen.errors import DegenerateGeometryError
from .geometry import BoundingBox2D, LineSegment2D, Point2D, Vector2D


POINT_TOLERANCE = 1e-9


class Outline(BaseModel):
    """
    Simple closed polygon on the wall plane.

    Vertices are stored once, without repeating the first vertex at the end;
    use `closed_vertices()` for the explicit loop. Window outlines are
    counterclockwise.
    """
    model_config = ConfigDict(frozen=True)

    vertices: tuple[Point2D, ...]

    @field_validator("vertices")
    @classmethod
    def _strip_closing_vertex(cls, v: tuple[Point2D, ...]) -> tuple[Point2D, ...]:
        if len(v) > 1 and v[0].distance_to(v[-1]) < POINT_TOLERANCE:
            v = v[:-1]
        if len(v) < 3:
            raise ValueError("An outline needs at least 3 distinct vertices")
        return v

    @classmethod
    def from_points(cls, points: list[Point2D]) -> Outline:
        return cls(vertices=tuple(points))

    def closed_vertices(self) -> list[Point2D]:
        return list(self.vertices) + [self.vertices[0]]

    def edges(self) -> list[LineSegment2D]:
        n = len(self.vertices)
        return [
            LineSegment2D(p1=self.vertices[i], p2=self.vertices[(i + 1) % n])
            for i in range(n)
        ]

    @property
    def signed_area(self) -> float:
        """Shoelace area; positive for counterclockwise loops."""
        total = 0.0
        for edge in self.edges():
            total += edge.p1.x * edge.p2.z - edge.p2.x * edge.p1.z
        return total / 2

    @property
    def area(self) -> float:
        return abs(self.signed_area)

    def is_clockwise(self) -> bool:
        return self.signed_area < 0

    @property
    def centroid(self) -> Point2D:
        a = self.signed_area
        if abs(a) < 1e-12:
            raise DegenerateGeometryError("Outline has zero area, centroid is undefined")
        cx = 0.0
        cz = 0.0
        for edge in self.edges():
            f = edge.p1.x * edge.p2.z - edge.p2.x * edge.p1.z
            cx += (edge.p1.x + edge.p2.x) * f
            cz += (edge.p1.z + edge.p2.z) * f
        return Point2D(x=cx / (6 * a), z=cz / (6 * a))

    @property
    def diameter(self) -> float:
        """Largest distance between any two vertices."""
        return max(p.distance_to(q) for p, q in combinations(self.vertices, 2))

    def bounding_box(self) -> BoundingBox2D:
        xs = [p.x for p in self.vertices]
        zs = [p.z for p in self.vertices]
        return BoundingBox2D(min_x=min(xs), min_z=min(zs), max_x=max(xs), max_z=max(zs))

    def scale(self, factor: float) -> Outline:
        """Scale uniformly about the centroid."""
        c = self.centroid
        return Outline(vertices=tuple(
            Point2D(x=c.x + (p.x - c.x) * factor, z=c.z + (p.z - c.z) * factor)
            for p in self.vertices
        ))

    def intersection_positions(self, segment: LineSegment2D) -> list[Point2D]:
        """Points where `segment` crosses the boundary, in edge order.

        A crossing exactly through a vertex is reported once.
        """
        result: list[Point2D] = []
        for edge in self.edges():
            hit = edge.intersection(segment)
            if hit is None:
                continue
            if any(hit.distance_to(p) < POINT_TOLERANCE for p in result):
                continue
            result.append(hit)
        return result

    def intersection_segments(self, segment: LineSegment2D) -> list[LineSegment2D]:
        """Boundary edges crossed by `segment`, in edge order."""
        return [e for e in self.edges() if e.intersection(segment) is not None]

    def is_simple(self) -> bool:
        """True if no two non-adjacent edges touch and no vertex repeats."""
        edges = self.edges()
        n = len(edges)
        for i in range(n):
            if edges[i].length < POINT_TOLERANCE:
                return False
        for i, j in combinations(range(n), 2):
            if j == i + 1 or (i == 0 and j == n - 1):
                continue
            if edges[i].intersection(edges[j]) is not None:
                return False
        return True

    def contains(self, point: Point2D) -> bool:
        """Even-odd point-in-polygon test."""
        inside = False
        for edge in self.edges():
            a, b = edge.p1, edge.p2
            if (a.z > point.z) != (b.z > point.z):
                x_cross = a.x + (point.z - a.z) * (b.x - a.x) / (b.z - a.z)
                if point.x < x_cross:
                    inside = not inside
        return inside


class FramePath(BaseModel):
    """Centerline of one inner frame bar (mullion)."""
    model_config = ConfigDict(frozen=True)

    points: tuple[Point2D, ...]

    @field_validator("points")
    @classmethod
    def _at_least_two(cls, v: tuple[Point2D, ...]) -> tuple[Point2D, ...]:
        if len(v) < 2:
            raise ValueError("A frame path needs at least 2 points")
        return v

    @classmethod
    def between(cls, start: Point2D, end: Point2D) -> FramePath:
        return cls(points=(start, end))

    @classmethod
    def from_segment(cls, segment: LineSegment2D) -> FramePath:
        return cls(points=(segment.p1, segment.p2))

    @property
    def length(self) -> float:
        return sum(a.distance_to(b) for a, b in zip(self.points, self.points[1:]))


class WindowShape(str, Enum):
    RECTANGLE = "rectangle"
    CIRCLE = "circle"
    TRIANGLE = "triangle"
    SEMICIRCLE = "semicircle"

    def build_outline(
        self, position: Point2D, width: float, height: float, segments: int = 32,
    ) -> Outline:
        """Build the shape standing on `position` (its bottom center)."""
        return self._build(position, Vector2D(x=1.0, z=0.0), width, height, segments)

    def build_on_segment(
        self, base: LineSegment2D, height: float, segments: int = 32,
    ) -> Outline:
        """Build the shape on top of `base`.

        The shape lies to the left of the direction from `base.p1` to
        `base.p2`, so it stays counterclockwise; its width is the segment length.
        """
        if base.length < POINT_TOLERANCE:
            raise DegenerateGeometryError("Cannot build a shape on a zero-length segment")
        return self._build(base.center, base.direction(), base.length, height, segments)

    def _build(
        self, origin: Point2D, u: Vector2D, width: float, height: float, segments: int,
    ) -> Outline:
        if width <= 0 or height <= 0:
            raise DegenerateGeometryError(
                f"Shape {self.value} needs positive size, got {width} x {height}"
            )
        v = u.perpendicular()
        return Outline(vertices=tuple(
            Point2D(x=origin.x + u.x * lx + v.x * lz, z=origin.z + u.z * lx + v.z * lz)
            for lx, lz in self._local_vertices(width, height, segments)
        ))

    def _local_vertices(
        self, width: float, height: float, segments: int,
    ) -> list[tuple[float, float]]:
        hw = width / 2
        if self is WindowShape.CIRCLE:
            # ellipse inscribed in the width x height box, first vertex at angle 0
            return [
                (hw * math.cos(2 * math.pi * i / segments),
                 height / 2 + height / 2 * math.sin(2 * math.pi * i / segments))
                for i in range(segments)
            ]
        if self is WindowShape.SEMICIRCLE:
            steps = max(2, segments // 2)
            return [
                (hw * math.cos(math.pi * i / steps), height * math.sin(math.pi * i / steps))
                for i in range(steps + 1)
            ]
        if self is WindowShape.TRIANGLE:
            return [(-hw, 0.0), (hw, 0.0), (0.0, height)]
        return [(-hw, 0.0), (hw, 0.0), (hw, height), (-hw, height)]
