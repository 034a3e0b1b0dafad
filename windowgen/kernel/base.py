"""Abstract geometry kernel.

Triangulation and polygon buffering are delegated to a kernel so the
window algorithms do not depend on one particular geometry library.
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from windowgen.models import Outline, Triangle2D


class GeometryKernel(ABC):
    """Polygon operations the window generator needs from a geometry library."""

    @abstractmethod
    def triangulate(self, outline: Outline) -> list[Triangle2D]:
        """Triangulate the interior of a simple polygon without holes.

        Raises TriangulationError if the polygon cannot be triangulated.
        """
        ...

    @abstractmethod
    def triangulate_with_holes(self, outer: Outline, holes: list[Outline]) -> list[Triangle2D]:
        """Triangulate the area inside `outer` and outside all `holes`."""
        ...

    @abstractmethod
    def buffer_inward(self, outline: Outline, distance: float) -> list[Outline]:
        """
        Offset the polygon inwards by `distance`.

        Non-convex polygons may split into several loops. Returns the
        outer loop of each resulting polygon, counterclockwise; raises
        BufferingError if nothing is left.
        """
        ...
