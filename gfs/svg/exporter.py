# File: gfs/svg/exporter.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Export de la superficie (árbol SVG en memoria) a texto/archivo SVG.
# Notes: El datum de cada nodo no se serializa (no hay persistencia entre procesos).
from __future__ import annotations

from pathlib import Path
from xml.etree.ElementTree import tostring

from gfs.svg.surface import SvgSurface
from gfs.utils.errors import GfsIOError


def to_svg_string(surface: SvgSurface) -> str:
    """Serializa el documento completo (desde el <svg> raíz)."""
    return tostring(surface.root.to_element(), encoding="unicode")


def export_svg(surface: SvgSurface, out_path: str | Path) -> Path:
    """Escribe el SVG en disco (fuerza extensión .svg)."""
    p = Path(out_path)
    if p.suffix.lower() != ".svg":
        p = p.with_suffix(".svg")

    try:
        p.parent.mkdir(parents=True, exist_ok=True)
        p.write_text(to_svg_string(surface), encoding="utf-8")
        return p
    except OSError as e:
        raise GfsIOError(f"No se pudo exportar SVG: {p}") from e
