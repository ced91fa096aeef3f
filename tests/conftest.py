"""Shared fixtures for the GFS test-suite."""

from __future__ import annotations

import os

import pytest

# QtSvg render tests run headless.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from gfs.drivers.golden_spiral import GoldenSpiralDriver  # noqa: E402
from gfs.engine.fractal_engine import FractalEngine  # noqa: E402
from gfs.svg.surface import SvgSurface  # noqa: E402

ALL_GLYPHS = {"glyphs": {"square": True, "rectangle": True, "spiral": True}, "secondarySpiral": True}


@pytest.fixture
def surface() -> SvgSurface:
    # 400x250 -> ratio 1.6 <= PHI
    return SvgSurface.create(400, 250, margin=0)


@pytest.fixture
def make_engine(surface: SvgSurface):
    def _make(depth: int = 3, options: dict | None = None) -> FractalEngine:
        return FractalEngine(surface.start, GoldenSpiralDriver(options), depth=depth)

    return _make


def node_ids(root) -> set[int]:
    return {id(n) for n in root.iter()}
