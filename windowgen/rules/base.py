"""Abstract base class for all mullion layout rules.

Every layout in the system implements this interface. Layouts are:
- Self-contained: each places inner frame bars in one pattern
- Selectable: the registry picks the first layout that applies to a PaneLayout
- Pure: the same pane outline and layout always give the same frame paths
"""

from __future__ import annotations
from abc import ABC, abstractmethod

from windowgen.models import FramePath, GenerationConfig, LineSegment2D, Outline, PaneLayout


class MullionLayoutRule(ABC):
    """
    Base class for all mullion layouts.

    Subclasses implement `applies()` and `generate()`.
    The registry filters by `applies()`, sorts by `priority`
    and hands the pane outline to the first match.
    """

    # Lower priority = asked first. Default 100.
    priority: int = 100

    @abstractmethod
    def get_id(self) -> str:
        """Unique identifier for this layout (e.g., 'mullion.grid')."""
        ...

    @abstractmethod
    def get_name(self) -> str:
        """Human-readable name (e.g., 'Grid Mullions')."""
        ...

    @abstractmethod
    def applies(self, layout: PaneLayout) -> bool:
        """Return True if this rule handles the given pane layout."""
        ...

    @abstractmethod
    def generate(
        self,
        pane_outline: Outline,
        layout: PaneLayout,
        border: LineSegment2D | None,
        config: GenerationConfig,
    ) -> list[FramePath]:
        """
        Generate frame bar centerlines inside `pane_outline`.

        `border` is the segment a partial region (e.g. a TOP arch) shares
        with the rest of the window, or None for a whole window.
        """
        ...
