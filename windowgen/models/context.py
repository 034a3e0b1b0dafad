"""Window context — accumulates state during one window generation pass."""

from __future__ import annotations
from pydantic import BaseModel, Field

from .geometry import LineSegment2D, Point2D
from .parameters import GenerationConfig, WindowParameters, WindowRegion
from .shapes import FramePath, Outline


class WindowContext(BaseModel):
    """
    Holds all state while a single window is generated.

    The composer fills in outlines and region borders,
    the pane deriver the pane outline, layouts add frame paths.
    The generator orchestrates the flow and freezes the result.
    """
    # Input
    position: Point2D
    params: WindowParameters
    transparent: bool = True
    config: GenerationConfig = Field(default_factory=GenerationConfig)

    # Composition results
    outline: Outline | None = None
    region_outlines: dict[WindowRegion, Outline] = {}
    region_borders: dict[WindowRegion, LineSegment2D] = {}
    pane_outline: Outline | None = None

    # Output (populated by layouts)
    frame_paths: list[FramePath] = []

    def add_frame_paths(self, paths: list[FramePath]) -> None:
        self.frame_paths.extend(paths)
