"""Window parameters and generation configuration."""

from __future__ import annotations
import logging
import re
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, model_validator

from .shapes import WindowShape

logger = logging.getLogger(__name__)


class WindowRegion(str, Enum):
    """Named sub-areas of a composed window outline."""
    CENTER = "center"
    TOP = "top"
    LEFT = "left"
    RIGHT = "right"
    BOTTOM = "bottom"


class PaneLayout(BaseModel):
    """How the glass is divided into panes by inner frame bars."""
    model_config = ConfigDict(frozen=True)

    panes_horizontal: int = Field(default=1, ge=1)  # Panes side by side
    panes_vertical: int = Field(default=1, ge=1)    # Panes stacked on top of each other
    radial: bool = False                            # Spokes from the center instead of a grid


class RegionProperties(BaseModel):
    """Shape and pane layout of the whole window or of one region."""
    model_config = ConfigDict(frozen=True)

    shape: WindowShape = WindowShape.RECTANGLE
    panes: PaneLayout | None = None


class Material(BaseModel):
    """Opaque handle for the renderer; only the flags matter here."""
    model_config = ConfigDict(frozen=True)

    name: str
    transparent: bool = False
    smooth: bool = False  # Interpolate normals across faces

    def make_smooth(self) -> Material:
        return self.model_copy(update={"smooth": True})


FRAME_MATERIAL = Material(name="window_frame")
GLASS_TRANSPARENT = Material(name="glass_transparent", transparent=True)
GLASS_OPAQUE = Material(name="glass_opaque")


class WindowParameters(BaseModel):
    """Immutable description of one window type."""
    model_config = ConfigDict(frozen=True)

    width: float = Field(default=1.0, gt=0)     # Meters
    height: float = Field(default=1.2, gt=0)    # Meters
    overall: RegionProperties = Field(default_factory=RegionProperties)
    regions: dict[WindowRegion, RegionProperties] = {}
    frame_material: Material = FRAME_MATERIAL
    transparent_material: Material = GLASS_TRANSPARENT
    opaque_material: Material = GLASS_OPAQUE

    @model_validator(mode="after")
    def _regions_need_center(self) -> WindowParameters:
        if self.regions and WindowRegion.CENTER not in self.regions:
            raise ValueError("A window region map must define the CENTER region")
        return self

    @property
    def uses_regions(self) -> bool:
        return WindowRegion.CENTER in self.regions and WindowRegion.TOP in self.regions

    def pane_material(self, transparent: bool) -> Material:
        return self.transparent_material if transparent else self.opaque_material

    @classmethod
    def from_tags(cls, tags: dict[str, str], **overrides: object) -> WindowParameters:
        """
        Build parameters from OSM-style window tags.

        Understood keys: window:shape, window:width, window:height,
        window:panes ("HxV"), window:panes:arrangement ("radial"),
        window:regions ("center;top") and window:<region>:shape,
        window:<region>:panes, window:<region>:panes:arrangement.
        """
        values: dict[str, object] = {}

        width = _parse_length(tags.get("window:width"))
        if width is not None:
            values["width"] = width
        height = _parse_length(tags.get("window:height"))
        if height is not None:
            values["height"] = height

        values["overall"] = _region_properties(tags, "window")

        region_names = tags.get("window:regions")
        if region_names:
            regions: dict[WindowRegion, RegionProperties] = {}
            for name in region_names.split(";"):
                name = name.strip().lower()
                try:
                    region = WindowRegion(name)
                except ValueError:
                    logger.warning("Ignoring unknown window region %r", name)
                    continue
                regions[region] = _region_properties(tags, f"window:{region.value}")
            values["regions"] = regions

        values.update(overrides)
        return cls(**values)


class FrameDimensions(BaseModel):
    """Depths and frame sizes, fixed per window type (meters)."""
    depth: float = 0.10                   # Pane recess behind the wall surface
    outer_frame_width: float = 0.10
    inner_frame_width: float = 0.05
    outer_frame_thickness: float = 0.05
    inner_frame_thickness: float = 0.03


class GenerationConfig(BaseModel):
    """Controls outline tessellation and which layouts are applied."""
    frame: FrameDimensions = Field(default_factory=FrameDimensions)
    circle_segments: int = Field(default=32, ge=8)   # Vertices of a full ellipse
    top_region_height: float = Field(default=1.0, gt=0)
    minimum_pane_scale: float = Field(default=0.1, gt=0, le=1)
    probe_length: float = 1000.0                     # Ray used to find the TOP border
    enabled_layouts: list[str] = []                  # Empty = use all registered defaults
    disabled_layouts: list[str] = []                 # Explicitly disable specific layouts


_PANES_PATTERN = re.compile(r"^\s*(\d+)\s*[xX*]\s*(\d+)\s*$")


def _parse_length(value: str | None) -> float | None:
    if value is None:
        return None
    text = value.strip().lower()
    if text.endswith("m"):
        text = text[:-1].strip()
    try:
        return float(text)
    except ValueError:
        logger.warning("Ignoring unparseable window length %r", value)
        return None


def _parse_panes(value: str | None, arrangement: str | None) -> PaneLayout | None:
    if value is None:
        return None
    match = _PANES_PATTERN.match(value)
    if match is None:
        logger.warning("Ignoring unparseable pane layout %r", value)
        return None
    return PaneLayout(
        panes_horizontal=int(match.group(1)),
        panes_vertical=int(match.group(2)),
        radial=(arrangement or "").strip().lower() == "radial",
    )


def _region_properties(tags: dict[str, str], prefix: str) -> RegionProperties:
    shape = WindowShape.RECTANGLE
    shape_value = tags.get(f"{prefix}:shape")
    if shape_value:
        try:
            shape = WindowShape(shape_value.strip().lower())
        except ValueError:
            logger.warning("Unknown window shape %r, using rectangle", shape_value)
    panes = _parse_panes(tags.get(f"{prefix}:panes"), tags.get(f"{prefix}:panes:arrangement"))
    return RegionProperties(shape=shape, panes=panes)
