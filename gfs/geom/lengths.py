# File: gfs/geom/lengths.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Parseo de longitudes declaradas (width/height) de nodos SVG.
# Notes:
# - Solo px (o sin unidad) cuentan como numéricos para el fractal.
# - Unidades físicas se convierten a CSS px (96 ppi); '%' no es utilizable.
from __future__ import annotations

import math
import re
from typing import Any, Literal, Optional

_Unit = Literal["px", "mm", "cm", "in", "pt", "pc", "percent", "unknown"]

# CSS pixels per inch (estándar de facto usado por la mayoría de engines).
CSS_PPI = 96.0

_len_re = re.compile(r"^\s*([+-]?(?:\d+\.?\d*|\d*\.?\d+)(?:[eE][+-]?\d+)?)\s*([a-zA-Z%]*)\s*$")


def parse_length(s: Any) -> tuple[Optional[float], _Unit]:
    """'396px' -> (396.0, 'px'). Números pasan directo como px."""
    if s is None or isinstance(s, bool):
        return None, "unknown"
    if isinstance(s, (int, float)):
        return float(s), "px"
    m = _len_re.match(str(s))
    if not m:
        return None, "unknown"
    v = float(m.group(1))
    u = (m.group(2) or "").lower()
    if u == "":
        # En SVG, width/height sin unidad se interpreta como px (CSS px).
        return v, "px"
    if u == "%":
        return v, "percent"
    if u in {"px", "mm", "cm", "in", "pt", "pc"}:
        return v, u  # type: ignore[return-value]
    return v, "unknown"


def _to_inches(v: float, u: _Unit) -> Optional[float]:
    if u == "in":
        return v
    if u == "cm":
        return v / 2.54
    if u == "mm":
        return v / 25.4
    if u == "pt":
        return v / 72.0
    if u == "pc":
        return v / 6.0  # 1pc = 12pt = 1/6 in
    return None


def length_to_px(s: Any) -> Optional[float]:
    """Longitud declarada -> px, o None si no es utilizable (vacía, %, nan/inf, basura)."""
    v, u = parse_length(s)
    if v is None or u in ("percent", "unknown"):
        return None
    if u == "px":
        px = v
    else:
        inches = _to_inches(v, u)
        if inches is None:
            return None
        px = inches * CSS_PPI
    return px if math.isfinite(px) else None
