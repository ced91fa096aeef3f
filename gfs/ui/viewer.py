# File: gfs/ui/viewer.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: wip
# Date: 2026-10-12
# Purpose: Ventana demo: redibuja el fractal con un QTimer (profundidad ping-pong).
# Notes:
# - El timer corre en el hilo UI: los draw() quedan serializados.
# - Se pinta el SVG exportado con QSvgRenderer (no hay items Qt por nodo).
from __future__ import annotations

import logging

from PySide6.QtCore import QByteArray, QRectF, Qt, QTimer
from PySide6.QtGui import QColor, QPainter
from PySide6.QtSvg import QSvgRenderer
from PySide6.QtWidgets import QWidget

from gfs.engine.fractal_engine import FractalEngine
from gfs.svg.exporter import to_svg_string
from gfs.svg.surface import SvgSurface
from gfs.ui.depth_cycle import DepthCycle

log = logging.getLogger(__name__)


class FractalViewer(QWidget):
    def __init__(self, surface: SvgSurface, engine: FractalEngine, *, interval_ms: int = 300,
                 max_depth: int = 10, parent=None) -> None:
        super().__init__(parent)
        self._surface = surface
        self._engine = engine
        self._cycle = DepthCycle(max_depth=max_depth)
        self._renderer = QSvgRenderer(self)

        w, h = surface.size()
        self.resize(int(w or 400), int(h or 250))

        self._timer = QTimer(self)
        self._timer.setInterval(int(interval_ms))
        self._timer.timeout.connect(self.step)

    def start(self) -> None:
        log.info("Loop de dibujo iniciado (%d ms)", self._timer.interval())
        self._timer.start()

    def stop(self) -> None:
        self._timer.stop()
        log.info("Loop detenido en depth=%d", self._engine.depth)

    def step(self) -> None:
        depth = next(self._cycle)
        self.draw(depth)

    def draw(self, depth: int) -> None:
        report = self._engine.set_depth(depth).draw()
        log.debug("draw(%d) %s", depth, report.summary())
        self._renderer.load(QByteArray(to_svg_string(self._surface).encode("utf-8")))
        self.update()

    def paintEvent(self, event) -> None:  # pragma: no cover (UI)
        p = QPainter(self)
        p.fillRect(self.rect(), QColor(255, 255, 255))
        p.setRenderHint(QPainter.Antialiasing, True)
        if self._renderer.isValid():
            size = self._renderer.defaultSize()
            self._renderer.render(p, QRectF(0, 0, size.width(), size.height()))
        p.end()

    def keyPressEvent(self, event) -> None:  # pragma: no cover (UI)
        # Espacio: pausa/reanuda el loop.
        if event.key() == Qt.Key_Space:
            if self._timer.isActive():
                self.stop()
            else:
                self.start()
            return
        super().keyPressEvent(event)
