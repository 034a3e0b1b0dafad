"""Renderable window output, as recorded draw calls."""

from __future__ import annotations
from enum import Enum
from pydantic import BaseModel

from .geometry import Point2D, Point3D, Triangle3D, Vector3D
from .parameters import Material

TexCoord = tuple[float, float]


class ExtrudeOption(str, Enum):
    START_CAP = "start_cap"
    END_CAP = "end_cap"


class TriangleBatch(BaseModel):
    """Independent triangles sharing one material."""
    material: Material
    triangles: list[Triangle3D]
    tex_coords: list[list[TexCoord]] = []  # One texture layer: 3 coords per triangle, flattened


class TriangleStrip(BaseModel):
    """A strip where every three consecutive vertices form a triangle."""
    material: Material
    vertices: list[Point3D]
    tex_coords: list[list[TexCoord]] = []


class ExtrudedShape(BaseModel):
    """A 2D cross-section swept along a 3D path."""
    material: Material
    cross_section: list[Point2D]
    path: list[Point3D]
    up_vectors: list[Vector3D]  # Orientation of the cross-section at each path vertex
    options: set[ExtrudeOption] = set()


class WindowMesh(BaseModel):
    """Everything one window sent to its drawing target."""
    triangle_batches: list[TriangleBatch] = []
    triangle_strips: list[TriangleStrip] = []
    extrusions: list[ExtrudedShape] = []
    stats: MeshStats = None  # type: ignore[assignment]

    def model_post_init(self, __context: object) -> None:
        if self.stats is None:
            self.stats = MeshStats.from_mesh(self)

    def materials(self) -> set[str]:
        names = {b.material.name for b in self.triangle_batches}
        names.update(s.material.name for s in self.triangle_strips)
        names.update(e.material.name for e in self.extrusions)
        return names


class MeshStats(BaseModel):
    """Summary statistics for a window mesh."""
    triangles: int = 0
    strips: int = 0
    strip_triangles: int = 0
    extrusions: int = 0

    @classmethod
    def from_mesh(cls, mesh: WindowMesh) -> MeshStats:
        triangles = sum(len(b.triangles) for b in mesh.triangle_batches)
        strip_triangles = sum(max(0, len(s.vertices) - 2) for s in mesh.triangle_strips)
        return cls(
            triangles=triangles,
            strips=len(mesh.triangle_strips),
            strip_triangles=strip_triangles,
            extrusions=len(mesh.extrusions),
        )
