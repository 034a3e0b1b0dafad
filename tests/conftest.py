from __future__ import annotations

import sys
from pathlib import Path

import pytest

# Ensure repo root is importable when running pytest from any CWD.
REPO_ROOT = Path(__file__).resolve().parents[1]
if str(REPO_ROOT) not in sys.path:
    sys.path.insert(0, str(REPO_ROOT))

from windowgen.models import Point3D, Vector3D  # noqa: E402
from windowgen.services.window_service import WindowService  # noqa: E402
from windowgen.surface.planar import PlanarWallSurface  # noqa: E402


@pytest.fixture
def wall() -> PlanarWallSurface:
    """Wall running along +x through the origin, facing +z."""
    return PlanarWallSurface(
        origin=Point3D(x=0.0, y=0.0, z=0.0),
        direction=Vector3D(x=1.0, y=0.0, z=0.0),
    )


@pytest.fixture
def service() -> WindowService:
    return WindowService()
