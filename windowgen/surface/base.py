"""Wall surface abstraction consumed by the window renderer."""

from __future__ import annotations
from abc import ABC, abstractmethod

from windowgen.models import Point2D, Point3D, Triangle2D, Triangle3D, Vector3D


class WallSurface(ABC):
    """
    Maps wall-local 2D coordinates (x along the wall, z upwards) to 3D.

    Implementations are read-only; the window code never mutates them.
    """

    @abstractmethod
    def normal_at(self, point: Point2D) -> Vector3D:
        """Outward unit normal of the wall at a wall-local point."""
        ...

    @abstractmethod
    def convert_to_3d(self, point: Point2D) -> Point3D:
        ...

    @abstractmethod
    def tex_coords_global(self, point: Point3D) -> tuple[float, float]:
        """Texture coordinate consistent across the whole wall."""
        ...

    def convert_points_to_3d(self, points: list[Point2D]) -> list[Point3D]:
        return [self.convert_to_3d(p) for p in points]

    def convert_triangle_to_3d(self, triangle: Triangle2D) -> Triangle3D:
        return Triangle3D(
            v1=self.convert_to_3d(triangle.v1),
            v2=self.convert_to_3d(triangle.v2),
            v3=self.convert_to_3d(triangle.v3),
        )
