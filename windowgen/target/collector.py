"""Target that records draw calls into a WindowMesh."""

from __future__ import annotations

from windowgen.models import (
    ExtrudedShape, ExtrudeOption, Material, Point2D, Point3D, Triangle3D,
    TriangleBatch, TriangleStrip, Vector3D, WindowMesh,
)
from windowgen.models.mesh import TexCoord
from windowgen.target.base import Target


class MeshCollector(Target):
    """Keeps every draw call so the result can be inspected or exported."""

    def __init__(self) -> None:
        self.triangle_batches: list[TriangleBatch] = []
        self.triangle_strips: list[TriangleStrip] = []
        self.extrusions: list[ExtrudedShape] = []

    def draw_triangles(
        self,
        material: Material,
        triangles: list[Triangle3D],
        tex_coords: list[list[TexCoord]],
    ) -> None:
        self.triangle_batches.append(TriangleBatch(
            material=material, triangles=list(triangles), tex_coords=tex_coords,
        ))

    def draw_triangle_strip(
        self,
        material: Material,
        vertices: list[Point3D],
        tex_coords: list[list[TexCoord]],
    ) -> None:
        self.triangle_strips.append(TriangleStrip(
            material=material, vertices=list(vertices), tex_coords=tex_coords,
        ))

    def draw_extruded_shape(
        self,
        material: Material,
        cross_section: list[Point2D],
        path: list[Point3D],
        up_vectors: list[Vector3D],
        options: set[ExtrudeOption],
    ) -> None:
        self.extrusions.append(ExtrudedShape(
            material=material,
            cross_section=list(cross_section),
            path=list(path),
            up_vectors=list(up_vectors),
            options=set(options),
        ))

    def mesh(self) -> WindowMesh:
        return WindowMesh(
            triangle_batches=list(self.triangle_batches),
            triangle_strips=list(self.triangle_strips),
            extrusions=list(self.extrusions),
        )
