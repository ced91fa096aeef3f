"""Drivers de fractal disponibles."""

from __future__ import annotations

from typing import Any, Mapping, Optional

from gfs.drivers.golden_spiral import GoldenSpiralDriver
from gfs.engine.driver import FractalDriver
from gfs.utils.errors import GfsConfigError

DRIVERS = {
    "golden_spiral": GoldenSpiralDriver,
}


def make_driver(name: str, options: Optional[Mapping[str, Any]] = None) -> FractalDriver:
    """Instancia un driver por nombre ('golden_spiral')."""
    key = (name or "").strip().lower().replace("-", "_")
    cls = DRIVERS.get(key)
    if cls is None:
        raise GfsConfigError(f"Driver desconocido: {name!r} (disponibles: {', '.join(sorted(DRIVERS))})")
    return cls(options)
