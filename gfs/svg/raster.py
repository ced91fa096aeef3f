# File: gfs/svg/raster.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Render SVG (texto) -> QImage/PNG con QtSvg, sin UI.
# Notes: Necesita una QGuiApplication; se crea una mínima si no existe.
from __future__ import annotations

import sys
from pathlib import Path

from PySide6.QtCore import QByteArray, QRectF, Qt
from PySide6.QtGui import QImage, QPainter
from PySide6.QtSvg import QSvgRenderer

from gfs.utils.errors import GfsIOError


def ensure_qt_app() -> None:
    """Crea una app Qt mínima si no existe (necesaria para algunos plugins)."""
    from PySide6.QtGui import QGuiApplication

    if QGuiApplication.instance() is None:
        QGuiApplication(sys.argv[:1] or ["gfs-render"])


def render_svg_image(svg_text: str, *, scale: float = 1.0) -> QImage:
    """Render crudo a un QImage del tamaño por defecto del SVG * scale."""
    r = QSvgRenderer(QByteArray(svg_text.encode("utf-8")))
    if not r.isValid():
        raise GfsIOError("SVG inválido para QtSvg")

    size = r.defaultSize()
    w = max(1, int(round(size.width() * float(scale))))
    h = max(1, int(round(size.height() * float(scale))))

    img = QImage(w, h, QImage.Format_ARGB32_Premultiplied)
    img.fill(Qt.transparent)

    p = QPainter(img)
    p.setRenderHint(QPainter.Antialiasing, True)
    r.render(p, QRectF(0, 0, w, h))
    p.end()
    return img


def render_svg_to_png(svg_text: str, out_png: str | Path, *, scale: float = 1.0) -> Path:
    ensure_qt_app()
    p = Path(out_png)
    if p.suffix.lower() != ".png":
        p = p.with_suffix(".png")
    img = render_svg_image(svg_text, scale=scale)
    try:
        p.parent.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise GfsIOError(f"No se pudo crear la carpeta de salida: {p.parent}") from e
    if not img.save(str(p), "PNG"):
        raise GfsIOError(f"No se pudo guardar PNG: {p}")
    return p
