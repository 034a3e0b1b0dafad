"""Glass pane outline derived from a window outline."""

from __future__ import annotations

from windowgen.models import Outline

MINIMUM_PANE_SCALE = 0.1


def pane_outline_from_outline(
    outline: Outline,
    inner_frame_width: float,
    minimum_scale: float = MINIMUM_PANE_SCALE,
) -> Outline:
    """
    Shrink `outline` about its centroid to leave room for the inner frame.

    UNIFORM_SCALE_INSET: scaling only approximates a constant-width inset;
    it is close enough for thin frames. Tiny outlines are never scaled
    below `minimum_scale`.
    """
    factor = max(minimum_scale, 1 - inner_frame_width / outline.diameter)
    return outline.scale(factor)
