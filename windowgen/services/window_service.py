"""High-level window service — facade for building generators."""

from __future__ import annotations

from windowgen.core.generator import WindowGenerator
from windowgen.core.registry import LayoutRegistry, create_default_registry
from windowgen.core.renderer import WindowRenderer
from windowgen.kernel.base import GeometryKernel
from windowgen.models import (
    GenerationConfig, GeometryWindow, Point2D, WindowMesh, WindowParameters,
)
from windowgen.surface.base import WallSurface
from windowgen.target.base import Target
from windowgen.target.collector import MeshCollector


class WindowService:
    """Builds window geometry and draws it onto wall surfaces."""

    def __init__(
        self,
        registry: LayoutRegistry | None = None,
        kernel: GeometryKernel | None = None,
    ) -> None:
        self.registry = registry or create_default_registry()
        self.generator = WindowGenerator(self.registry)
        self.renderer = WindowRenderer(kernel)

    def build(
        self,
        position: Point2D,
        params: WindowParameters,
        transparent: bool = True,
        config: GenerationConfig | None = None,
    ) -> GeometryWindow:
        return self.generator.generate(position, params, transparent, config)

    def render(self, window: GeometryWindow, target: Target, surface: WallSurface) -> None:
        self.renderer.render(window, target, surface)

    def build_mesh(
        self,
        position: Point2D,
        params: WindowParameters,
        surface: WallSurface,
        transparent: bool = True,
        config: GenerationConfig | None = None,
    ) -> WindowMesh:
        """Build and render one window, returning the recorded draw calls."""
        window = self.build(position, params, transparent, config)
        collector = MeshCollector()
        self.render(window, collector, surface)
        return collector.mesh()

