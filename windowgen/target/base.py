"""Abstract drawing target that receives window geometry."""

from __future__ import annotations
from abc import ABC, abstractmethod

from windowgen.models import (
    ExtrudeOption, Material, Point2D, Point3D, Triangle3D, Vector3D,
)
from windowgen.models.mesh import TexCoord


class Target(ABC):
    """
    Receiver for draw calls.

    The window renderer only writes to a target, it never reads back.
    Serializing concurrent writers is up to the implementation.
    """

    @abstractmethod
    def draw_triangles(
        self,
        material: Material,
        triangles: list[Triangle3D],
        tex_coords: list[list[TexCoord]],
    ) -> None:
        ...

    @abstractmethod
    def draw_triangle_strip(
        self,
        material: Material,
        vertices: list[Point3D],
        tex_coords: list[list[TexCoord]],
    ) -> None:
        ...

    @abstractmethod
    def draw_extruded_shape(
        self,
        material: Material,
        cross_section: list[Point2D],
        path: list[Point3D],
        up_vectors: list[Vector3D],
        options: set[ExtrudeOption],
    ) -> None:
        ...
