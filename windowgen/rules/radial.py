"""Radial mullions — spokes from a center point to the pane edge."""

from __future__ import annotations
import logging

from windowgen.errors import DegenerateGeometryError
from windowgen.models import (
    FramePath, GenerationConfig, LineSegment2D, Outline, PaneLayout, Vector2D,
)
from windowgen.rules.base import MullionLayoutRule

logger = logging.getLogger(__name__)

# Partial sweep for a region sitting on top of its border: from pointing
# left (270) over straight up (0) to pointing right (90).
PARTIAL_SWEEP_START = 270.0
PARTIAL_SWEEP_END = 90.0


class RadialMullionLayout(MullionLayoutRule):
    """Spokes at equal angles; concentric rings are not generated."""

    priority = 50

    def get_id(self) -> str:
        return "mullion.radial"

    def get_name(self) -> str:
        return "Radial Mullions"

    def applies(self, layout: PaneLayout) -> bool:
        return layout.radial

    def generate(
        self,
        pane_outline: Outline,
        layout: PaneLayout,
        border: LineSegment2D | None,
        config: GenerationConfig,
    ) -> list[FramePath]:
        if layout.panes_vertical > 1:
            logger.debug(
                "Radial layout ignores panes_vertical=%d (no concentric rings)",
                layout.panes_vertical,
            )

        n = layout.panes_horizontal
        if border is None:
            center = pane_outline.centroid
            start = 0.0
            step = 360.0 / n
        else:
            # TODO: derive the sweep from the border direction to support LEFT/RIGHT/BOTTOM
            center = border.center
            start = PARTIAL_SWEEP_START
            step = ((PARTIAL_SWEEP_END - PARTIAL_SWEEP_START) % 360.0) / n

        ray_length = 2 * pane_outline.diameter
        paths: list[FramePath] = []

        for i in range(n):
            if i == 0 and border is not None:
                # the border itself is already a frame bar
                continue
            angle = (start + step * i) % 360.0
            direction = Vector2D.from_angle(angle)
            probe = LineSegment2D(p1=center, p2=center + direction * ray_length)
            hits = pane_outline.intersection_positions(probe)
            if not hits:
                raise DegenerateGeometryError(
                    f"Spoke at {angle:.1f} degrees from {center} never reaches the pane outline"
                )
            # a scoped center lies below the pane, so the spoke may enter it first
            paths.append(FramePath.between(center, max(hits, key=center.distance_to)))

        logger.debug("Radial layout with %d panes produced %d spokes", n, len(paths))
        return paths
