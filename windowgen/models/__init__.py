from .geometry import (
    Point2D, Point3D, Vector2D, Vector3D, LineSegment2D, BoundingBox2D,
    Triangle2D, Triangle3D, direction_from_points,
)
from .shapes import Outline, FramePath, WindowShape
from .parameters import (
    WindowRegion, PaneLayout, RegionProperties, Material, WindowParameters,
    FrameDimensions, GenerationConfig,
)
from .mesh import (
    ExtrudeOption, TriangleBatch, TriangleStrip, ExtrudedShape, WindowMesh, MeshStats,
)
from .context import WindowContext
from .window import GeometryWindow

__all__ = [
    "Point2D", "Point3D", "Vector2D", "Vector3D", "LineSegment2D", "BoundingBox2D",
    "Triangle2D", "Triangle3D", "direction_from_points",
    "Outline", "FramePath", "WindowShape",
    "WindowRegion", "PaneLayout", "RegionProperties", "Material", "WindowParameters",
    "FrameDimensions", "GenerationConfig",
    "ExtrudeOption", "TriangleBatch", "TriangleStrip", "ExtrudedShape", "WindowMesh", "MeshStats",
    "WindowContext", "GeometryWindow",
]
