# File: gfs/geom/transforms.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Strings de transform SVG y comandos de path (sin estado).
# Notes: Formato numérico estable para que dos draws iguales produzcan atributos iguales.
from __future__ import annotations

from typing import Optional


def fmt_num(v: float) -> str:
    """Número -> texto SVG (sin ceros de relleno, sin '-0')."""
    f = float(v)
    if f == 0:
        return "0"
    if f.is_integer():
        return str(int(f))
    return format(f, ".10g")


def fmt_px(v: float) -> str:
    return f"{fmt_num(v)}px"


def translate(x: float, y: float) -> str:
    return f"translate({fmt_num(x)},{fmt_num(y)})"


def rotate_deg(deg: float, cx: Optional[float] = None, cy: Optional[float] = None) -> str:
    """rotate(deg) o rotate(deg cx cy) si se da el centro."""
    if cx is None or cy is None:
        return f"rotate({fmt_num(deg)})"
    return f"rotate({fmt_num(deg)} {fmt_num(cx)} {fmt_num(cy)})"


def compose(*parts: str) -> str:
    """Concatena transforms en orden de aplicación SVG (izq. a der.)."""
    return " ".join(p for p in parts if p)


def arc_quarter_path(base: float) -> str:
    """Cuarto de círculo de radio `base`, de (base,0) a (0,base)."""
    b = fmt_num(base)
    return f"M {b} 0 A {b} {b} 0 0 0 0 {b}"


def quad_quarter_path(base: float) -> str:
    """Variante bezier cuadrática: fluye mejor pero queda algo ovalada."""
    b = fmt_num(base)
    return f"M 0 {b} Q 0 0 {b} 0"
