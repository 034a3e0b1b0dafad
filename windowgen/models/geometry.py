"""Geometric primitives used throughout the generator."""

from __future__ import annotations
import math
from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Point on the wall plane (x along the wall, z upwards)."""
    model_config = ConfigDict(frozen=True)

    x: float
    z: float

    def distance_to(self, other: Point2D) -> float:
        return math.sqrt((self.x - other.x) ** 2 + (self.z - other.z) ** 2)

    def lerp(self, other: Point2D, t: float) -> Point2D:
        return Point2D(
            x=self.x + (other.x - self.x) * t,
            z=self.z + (other.z - self.z) * t,
        )

    def add(self, dx: float, dz: float) -> Point2D:
        return Point2D(x=self.x + dx, z=self.z + dz)

    def __add__(self, other: Point2D | Vector2D) -> Point2D:
        return Point2D(x=self.x + other.x, z=self.z + other.z)


class Point3D(BaseModel):
    """Point in 3D space (y is up)."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def distance_to(self, other: Point3D) -> float:
        return math.sqrt(
            (self.x - other.x) ** 2
            + (self.y - other.y) ** 2
            + (self.z - other.z) ** 2
        )

    def shift(self, offset: Vector3D) -> Point3D:
        return Point3D(x=self.x + offset.x, y=self.y + offset.y, z=self.z + offset.z)


class Vector2D(BaseModel):
    """2D vector for direction calculations on the wall plane."""
    model_config = ConfigDict(frozen=True)

    x: float
    z: float

    @classmethod
    def from_angle(cls, degrees: float) -> Vector2D:
        """Unit vector for a compass angle: 0 is +z, 90 is +x."""
        rad = math.radians(degrees)
        return cls(x=math.sin(rad), z=math.cos(rad))

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.z * self.z)

    def normalized(self) -> Vector2D:
        ln = self.length()
        if ln < 1e-10:
            return Vector2D(x=0.0, z=0.0)
        return Vector2D(x=self.x / ln, z=self.z / ln)

    def perpendicular(self) -> Vector2D:
        """90-degree counterclockwise rotation."""
        return Vector2D(x=-self.z, z=self.x)

    def cross(self, other: Vector2D) -> float:
        return self.x * other.z - self.z * other.x

    def __mul__(self, scalar: float) -> Vector2D:
        return Vector2D(x=self.x * scalar, z=self.z * scalar)


class Vector3D(BaseModel):
    """3D direction, used for surface normals and shifts."""
    model_config = ConfigDict(frozen=True)

    x: float
    y: float
    z: float

    def length(self) -> float:
        return math.sqrt(self.x * self.x + self.y * self.y + self.z * self.z)

    def normalized(self) -> Vector3D:
        ln = self.length()
        if ln < 1e-10:
            raise ValueError("Cannot normalize zero-length vector")
        return Vector3D(x=self.x / ln, y=self.y / ln, z=self.z / ln)

    def cross(self, other: Vector3D) -> Vector3D:
        return Vector3D(
            x=self.y * other.z - self.z * other.y,
            y=self.z * other.x - self.x * other.z,
            z=self.x * other.y - self.y * other.x,
        )

    def dot(self, other: Vector3D) -> float:
        return self.x * other.x + self.y * other.y + self.z * other.z

    def __mul__(self, scalar: float) -> Vector3D:
        return Vector3D(x=self.x * scalar, y=self.y * scalar, z=self.z * scalar)


class LineSegment2D(BaseModel):
    """Straight segment between two wall-plane points."""
    model_config = ConfigDict(frozen=True)

    p1: Point2D
    p2: Point2D

    @property
    def length(self) -> float:
        return self.p1.distance_to(self.p2)

    @property
    def center(self) -> Point2D:
        return self.p1.lerp(self.p2, 0.5)

    def direction(self) -> Vector2D:
        return direction_from_points(self.p1, self.p2).normalized()

    def reversed(self) -> LineSegment2D:
        return LineSegment2D(p1=self.p2, p2=self.p1)

    def intersection(self, other: LineSegment2D) -> Point2D | None:
        """Intersection point with another segment, or None.

        Parallel (including collinear) segments count as not intersecting.
        """
        d1 = direction_from_points(self.p1, self.p2)
        d2 = direction_from_points(other.p1, other.p2)
        denom = d1.cross(d2)
        if abs(denom) < 1e-12:
            return None

        offset = direction_from_points(self.p1, other.p1)
        t = offset.cross(d2) / denom
        u = offset.cross(d1) / denom
        eps = 1e-9
        if -eps <= t <= 1 + eps and -eps <= u <= 1 + eps:
            return self.p1.lerp(self.p2, t)
        return None


class BoundingBox2D(BaseModel):
    """Axis-aligned rectangle on the wall plane."""
    model_config = ConfigDict(frozen=True)

    min_x: float
    min_z: float
    max_x: float
    max_z: float

    @property
    def size_x(self) -> float:
        return self.max_x - self.min_x

    @property
    def size_z(self) -> float:
        return self.max_z - self.min_z

    @property
    def center(self) -> Point2D:
        return Point2D(x=(self.min_x + self.max_x) / 2, z=(self.min_z + self.max_z) / 2)


class Triangle2D(BaseModel):
    """Triangle on the wall plane, counterclockwise."""
    model_config = ConfigDict(frozen=True)

    v1: Point2D
    v2: Point2D
    v3: Point2D

    @property
    def area(self) -> float:
        a = direction_from_points(self.v1, self.v2)
        b = direction_from_points(self.v1, self.v3)
        return abs(a.cross(b)) / 2


class Triangle3D(BaseModel):
    """Triangle in 3D space."""
    model_config = ConfigDict(frozen=True)

    v1: Point3D
    v2: Point3D
    v3: Point3D

    def vertices(self) -> list[Point3D]:
        return [self.v1, self.v2, self.v3]

    def shift(self, offset: Vector3D) -> Triangle3D:
        return Triangle3D(
            v1=self.v1.shift(offset),
            v2=self.v2.shift(offset),
            v3=self.v3.shift(offset),
        )


def direction_from_points(start: Point2D, end: Point2D) -> Vector2D:
    """Get direction vector from start to end."""
    return Vector2D(x=end.x - start.x, z=end.z - start.z)
