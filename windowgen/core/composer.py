"""Outline composition — one simple outline from the window's regions."""

from __future__ import annotations
import logging
from pydantic import BaseModel, ConfigDict

from windowgen.errors import DegenerateGeometryError, UnsupportedConfigurationError
from windowgen.models import (
    GenerationConfig, LineSegment2D, Outline, Point2D, WindowParameters, WindowRegion,
)

logger = logging.getLogger(__name__)

# Region combinations that can be merged into one outline. LEFT, RIGHT and
# BOTTOM are valid regions but no merge is implemented for them yet.
SUPPORTED_COMBINATIONS: frozenset[frozenset[WindowRegion]] = frozenset({
    frozenset({WindowRegion.CENTER, WindowRegion.TOP}),
})


class ComposedOutline(BaseModel):
    """Result of composing a window's outline."""
    model_config = ConfigDict(frozen=True)

    outline: Outline
    region_outlines: dict[WindowRegion, Outline] = {}
    region_borders: dict[WindowRegion, LineSegment2D] = {}


def merge_region_outlines(center: Outline, top: Outline, border: LineSegment2D) -> Outline:
    """
    Join CENTER without the border edge to TOP without the border edge.

    `border` is the CENTER edge TOP was built on, running from `p1` to `p2`
    in CENTER's vertex order. Both outlines must be counterclockwise.
    """
    if center.is_clockwise() or top.is_clockwise():
        raise DegenerateGeometryError("CENTER and TOP outlines must be counterclockwise")

    merged: list[Point2D] = []

    center_vs = list(center.vertices)
    i = center_vs.index(border.p2)
    stop = center_vs.index(border.p1)
    while i != stop:
        merged.append(center_vs[i])
        i = (i + 1) % len(center_vs)

    top_vs = list(top.vertices)
    start = min(range(len(top_vs)), key=lambda k: top_vs[k].distance_to(border.p1))
    end = min(range(len(top_vs)), key=lambda k: top_vs[k].distance_to(border.p2))
    i = start
    while i != end:
        merged.append(top_vs[i])
        i = (i + 1) % len(top_vs)

    merged.append(merged[0])
    outline = Outline.from_points(merged)

    if outline.is_clockwise() or not outline.is_simple():
        raise DegenerateGeometryError(
            "Merging CENTER and TOP did not produce a simple counterclockwise outline"
        )
    return outline


class OutlineComposer:
    """Builds the window outline, merging CENTER and TOP regions when present."""

    def __init__(self, config: GenerationConfig | None = None) -> None:
        self.config = config or GenerationConfig()

    def compose(self, position: Point2D, params: WindowParameters) -> ComposedOutline:
        combination = frozenset(params.regions)
        if len(combination) > 1 and combination not in SUPPORTED_COMBINATIONS:
            raise UnsupportedConfigurationError(
                "Only CENTER + TOP region composition is supported, got "
                + ", ".join(sorted(r.value.upper() for r in combination))
            )

        if not params.uses_regions:
            outline = params.overall.shape.build_outline(
                position, params.width, params.height, self.config.circle_segments,
            )
            return ComposedOutline(outline=outline)

        return self._compose_center_top(position, params)

    def _compose_center_top(self, position: Point2D, params: WindowParameters) -> ComposedOutline:
        segments = self.config.circle_segments

        center_outline = params.regions[WindowRegion.CENTER].shape.build_outline(
            position, params.width, params.height, segments,
        )

        # The TOP region sits on the edge hit by a ray going straight up
        centroid = center_outline.centroid
        ray = LineSegment2D(p1=centroid, p2=centroid.add(0, self.config.probe_length))
        hit_edges = center_outline.intersection_segments(ray)
        if not hit_edges:
            raise DegenerateGeometryError(
                "Ray from the CENTER centroid does not leave the CENTER outline upwards"
            )
        top_border = hit_edges[0]

        # The border runs right-to-left along CENTER; TOP is built on its reverse
        top_outline = params.regions[WindowRegion.TOP].shape.build_on_segment(
            top_border.reversed(), self.config.top_region_height, segments,
        )

        merged = merge_region_outlines(center_outline, top_outline, top_border)

        logger.debug(
            "Composed CENTER (%d vertices) and TOP (%d vertices) into %d vertices",
            len(center_outline.vertices), len(top_outline.vertices), len(merged.vertices),
        )

        return ComposedOutline(
            outline=merged,
            region_outlines={
                WindowRegion.CENTER: center_outline,
                WindowRegion.TOP: top_outline,
            },
            region_borders={WindowRegion.TOP: top_border},
        )

