"""Exceptions raised while building window geometry.

Every error here is fatal for the window being built. Callers (the
building generator) decide whether to skip the window or abort.
"""

from __future__ import annotations


class WindowGeometryError(Exception):
    """Base class for all window construction failures."""


class UnsupportedConfigurationError(WindowGeometryError):
    """The parameters ask for something this engine cannot build,
    e.g. a region combination other than CENTER + TOP."""


class DegenerateGeometryError(WindowGeometryError):
    """Zero-size outline, missed intersection or wrong winding."""


class TriangulationError(WindowGeometryError):
    """The geometry kernel could not triangulate a polygon."""


class BufferingError(WindowGeometryError):
    """An inward buffer collapsed to zero loops."""
