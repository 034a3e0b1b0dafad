"""Layout registry — stores and resolves mullion layout rules."""

from __future__ import annotations
import logging

from windowgen.errors import UnsupportedConfigurationError
from windowgen.models import GenerationConfig, PaneLayout
from windowgen.rules.base import MullionLayoutRule

logger = logging.getLogger(__name__)


class LayoutRegistry:
    """
    Central registry for all mullion layouts.

    Layouts are registered at startup. During generation, the registry
    returns the layout that handles a given PaneLayout.
    """

    def __init__(self) -> None:
        self._rules: dict[str, MullionLayoutRule] = {}

    def register(self, rule: MullionLayoutRule) -> None:
        """Register a mullion layout."""
        self._rules[rule.get_id()] = rule

    def get_layout_rule(self, layout: PaneLayout, config: GenerationConfig) -> MullionLayoutRule:
        """
        Return the layout rule for `layout`, lowest priority first.

        Respects GenerationConfig.enabled_layouts and disabled_layouts.
        """
        candidates = list(self._rules.values())

        # If enabled_layouts is specified, only use those
        if config.enabled_layouts:
            candidates = [r for r in candidates if r.get_id() in config.enabled_layouts]

        # Remove explicitly disabled layouts
        if config.disabled_layouts:
            candidates = [r for r in candidates if r.get_id() not in config.disabled_layouts]

        applicable = sorted(
            (r for r in candidates if r.applies(layout)),
            key=lambda r: r.priority,
        )
        if not applicable:
            raise UnsupportedConfigurationError(
                f"No enabled mullion layout handles {layout!r}"
            )

        rule = applicable[0]
        logger.debug("Using layout %s for %r", rule.get_id(), layout)
        return rule


def create_default_registry() -> LayoutRegistry:
    """Create a registry with the grid and radial layouts."""
    from windowgen.rules.grid import GridMullionLayout
    from windowgen.rules.radial import RadialMullionLayout

    registry = LayoutRegistry()
    registry.register(GridMullionLayout())
    registry.register(RadialMullionLayout())
    return registry
