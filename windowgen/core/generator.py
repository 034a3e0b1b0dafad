"""Main window generator — orchestrates composition, panes and layouts."""

from __future__ import annotations
import logging

from windowgen.models import (
    FramePath, GenerationConfig, GeometryWindow, Point2D, WindowContext, WindowParameters,
)
from windowgen.core.composer import OutlineComposer
from windowgen.core.panes import pane_outline_from_outline
from windowgen.core.registry import LayoutRegistry

logger = logging.getLogger(__name__)


class WindowGenerator:
    """
    Stateless window generator.

    Takes a position + params, composes the outline, derives the pane,
    runs the applicable mullion layouts and returns a GeometryWindow.
    """

    def __init__(self, registry: LayoutRegistry) -> None:
        self.registry = registry

    def generate(
        self,
        position: Point2D,
        params: WindowParameters,
        transparent: bool = True,
        config: GenerationConfig | None = None,
    ) -> GeometryWindow:
        if config is None:
            config = GenerationConfig()

        # Build context
        context = WindowContext(
            position=position,
            params=params,
            transparent=transparent,
            config=config,
        )

        # Composition phase: outline, regions and their borders
        composed = OutlineComposer(config).compose(position, params)
        context.outline = composed.outline
        context.region_outlines = dict(composed.region_outlines)
        context.region_borders = dict(composed.region_borders)

        # Glass pane inside the inner frame
        context.pane_outline = pane_outline_from_outline(
            context.outline, config.frame.inner_frame_width, config.minimum_pane_scale,
        )

        # Layout phase: inner frame bars
        self._place_frame_paths(context)

        logger.debug(
            "Generated window at (%.3f, %.3f): %d outline vertices, %d frame paths",
            position.x, position.z, len(context.outline.vertices), len(context.frame_paths),
        )

        return GeometryWindow(
            position=position,
            params=params,
            transparent=transparent,
            config=config,
            outline=context.outline,
            pane_outline=context.pane_outline,
            frame_paths=tuple(context.frame_paths),
            region_outlines=context.region_outlines,
            region_borders=context.region_borders,
        )

    def _place_frame_paths(self, context: WindowContext) -> None:
        params = context.params
        config = context.config

        overall_panes = params.overall.panes
        if overall_panes is not None:
            rule = self.registry.get_layout_rule(overall_panes, config)
            context.add_frame_paths(rule.generate(context.pane_outline, overall_panes, None, config))
            return

        if not context.region_outlines:
            return

        for region, region_outline in context.region_outlines.items():
            properties = params.regions.get(region)
            if properties is None or properties.panes is None:
                continue
            region_pane = pane_outline_from_outline(
                region_outline, config.frame.inner_frame_width, config.minimum_pane_scale,
            )
            rule = self.registry.get_layout_rule(properties.panes, config)
            context.add_frame_paths(rule.generate(
                region_pane, properties.panes, context.region_borders.get(region), config,
            ))

        context.add_frame_paths([
            FramePath.from_segment(border) for border in context.region_borders.values()
        ])
