"""Grid mullions — horizontal and vertical bars across the pane.

Each bar is probed with an oversized line through the pane's bounding box
and clipped to the pane boundary, so arched or round panes get bars that
end exactly at the glass edge.
"""

from __future__ import annotations
import logging

from windowgen.errors import DegenerateGeometryError
from windowgen.models import (
    FramePath, GenerationConfig, LineSegment2D, Outline, PaneLayout, Point2D,
)
from windowgen.rules.base import MullionLayoutRule

logger = logging.getLogger(__name__)


class GridMullionLayout(MullionLayoutRule):
    """Rectangular grid: (V-1) horizontal bars and (H-1) vertical bars."""

    priority = 50

    def get_id(self) -> str:
        return "mullion.grid"

    def get_name(self) -> str:
        return "Grid Mullions"

    def applies(self, layout: PaneLayout) -> bool:
        return not layout.radial

    def generate(
        self,
        pane_outline: Outline,
        layout: PaneLayout,
        border: LineSegment2D | None,
        config: GenerationConfig,
    ) -> list[FramePath]:
        paths: list[FramePath] = []
        bbox = pane_outline.bounding_box()
        center = bbox.center

        # Horizontal bars, bottom to top
        for i in range(1, layout.panes_vertical):
            z = bbox.min_z + bbox.size_z * i / layout.panes_vertical
            probe = LineSegment2D(
                p1=Point2D(x=center.x - bbox.size_x, z=z),
                p2=Point2D(x=center.x + bbox.size_x, z=z),
            )
            hits = self._hits(pane_outline, probe)
            paths.append(FramePath.between(
                min(hits, key=lambda p: p.x),
                max(hits, key=lambda p: p.x),
            ))

        # Vertical bars, left to right
        for i in range(1, layout.panes_horizontal):
            x = bbox.min_x + bbox.size_x * i / layout.panes_horizontal
            probe = LineSegment2D(
                p1=Point2D(x=x, z=center.z - bbox.size_z),
                p2=Point2D(x=x, z=center.z + bbox.size_z),
            )
            hits = self._hits(pane_outline, probe)
            paths.append(FramePath.between(
                min(hits, key=lambda p: p.z),
                max(hits, key=lambda p: p.z),
            ))

        logger.debug(
            "Grid layout %dx%d produced %d frame paths",
            layout.panes_horizontal, layout.panes_vertical, len(paths),
        )
        return paths

    def _hits(self, pane_outline: Outline, probe: LineSegment2D) -> list[Point2D]:
        hits = pane_outline.intersection_positions(probe)
        if len(hits) < 2:
            raise DegenerateGeometryError(
                f"Mullion probe {probe.p1} -> {probe.p2} crossed the pane outline "
                f"{len(hits)} time(s), expected at least 2"
            )
        return hits
