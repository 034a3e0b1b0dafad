"""Flat wall surface."""

from __future__ import annotations

from windowgen.models import Point2D, Point3D, Vector3D
from windowgen.surface.base import WallSurface


class PlanarWallSurface(WallSurface):
    """
    A vertical (or tilted) planar wall.

    `origin` is where wall-local (0, 0) lies in 3D, `direction` the
    horizontal run of the wall and `up` its local upward axis. The
    outward normal is direction x up, so a viewer in front of the wall
    sees x to the right and z upwards.
    """

    def __init__(
        self,
        origin: Point3D,
        direction: Vector3D,
        up: Vector3D | None = None,
    ) -> None:
        self.origin = origin
        self.direction = direction.normalized()
        self.up = (up or Vector3D(x=0.0, y=1.0, z=0.0)).normalized()
        if abs(self.direction.dot(self.up)) > 1e-6:
            raise ValueError("Wall direction and up vector must be perpendicular")
        self.normal = self.direction.cross(self.up).normalized()

    def normal_at(self, point: Point2D) -> Vector3D:
        return self.normal

    def convert_to_3d(self, point: Point2D) -> Point3D:
        return Point3D(
            x=self.origin.x + self.direction.x * point.x + self.up.x * point.z,
            y=self.origin.y + self.direction.y * point.x + self.up.y * point.z,
            z=self.origin.z + self.direction.z * point.x + self.up.z * point.z,
        )

    def tex_coords_global(self, point: Point3D) -> tuple[float, float]:
        rel = Vector3D(
            x=point.x - self.origin.x,
            y=point.y - self.origin.y,
            z=point.z - self.origin.z,
        )
        return (rel.dot(self.direction), rel.dot(self.up))
