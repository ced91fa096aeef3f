# File: gfs/geom/color.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.1
# Status: stable
# Date: 2026-10-19
# Purpose: Rampa de color logarítmica (dominio numérico -> '#rrggbb').
# Notes:
# - Se usa para el stroke del espiral según secondary_count.
# - El parseo de colores lo hace QColor (hex corto/largo y nombres SVG).
from __future__ import annotations

import math
from dataclasses import dataclass

from PySide6.QtGui import QColor


def parse_color(s: str) -> tuple[int, int, int]:
    """'#abc' / '#aabbcc' / 'black' -> (r, g, b)."""
    c = QColor((s or "").strip())
    if not c.isValid():
        raise ValueError(f"color inválido: {s!r}")
    return c.red(), c.green(), c.blue()


def to_hex_color(rgb: tuple[float, float, float]) -> str:
    r, g, b = (max(0, min(255, int(round(v)))) for v in rgb)
    return QColor(r, g, b).name()


@dataclass(frozen=True)
class LogColorRamp:
    """Escala log: domain[0]..domain[1] -> color_from..color_to (interpolación RGB).

    Fuera del dominio el resultado queda saturado en los extremos.
    """

    domain: tuple[float, float] = (1.0, 11.0)
    color_from: str = "#000"
    color_to: str = "#fff"

    def __post_init__(self) -> None:
        d0, d1 = self.domain
        if d0 <= 0 or d1 <= 0 or d0 == d1:
            raise ValueError(f"dominio log inválido: {self.domain!r}")
        # Valida colores al construir, no en cada llamada.
        parse_color(self.color_from)
        parse_color(self.color_to)

    def t(self, value: float) -> float:
        d0, d1 = self.domain
        v = float(value)
        if v <= 0:
            return 0.0
        t = (math.log(v) - math.log(d0)) / (math.log(d1) - math.log(d0))
        return max(0.0, min(1.0, t))

    def __call__(self, value: float) -> str:
        t = self.t(value)
        a = parse_color(self.color_from)
        b = parse_color(self.color_to)
        return to_hex_color(tuple(ca + (cb - ca) * t for ca, cb in zip(a, b)))  # type: ignore[arg-type]
