"""The finished 2D description of one window instance."""

from __future__ import annotations
from pydantic import BaseModel, ConfigDict

from .geometry import LineSegment2D, Point2D
from .parameters import GenerationConfig, Material, WindowParameters, WindowRegion
from .shapes import FramePath, Outline, WindowShape


class GeometryWindow(BaseModel):
    """A window with its outline, glass pane and inner frame bars.

    Built once by the generator, read-only afterwards.
    """
    model_config = ConfigDict(frozen=True)

    position: Point2D
    params: WindowParameters
    transparent: bool
    config: GenerationConfig

    outline: Outline
    pane_outline: Outline
    frame_paths: tuple[FramePath, ...] = ()
    region_outlines: dict[WindowRegion, Outline] = {}
    region_borders: dict[WindowRegion, LineSegment2D] = {}

    @property
    def inset_distance(self) -> float:
        """How far the outer frame face sits behind the wall surface."""
        frame = self.config.frame
        return frame.depth - frame.outer_frame_thickness

    @property
    def pane_material(self) -> Material:
        return self.params.pane_material(self.transparent)

    @property
    def is_round(self) -> bool:
        return self.params.overall.shape is WindowShape.CIRCLE
