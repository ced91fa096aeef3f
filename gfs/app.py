# File: gfs/app.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Entry-point de la demo (ventana con loop de redibujo).
# Notes: Para uso sin UI ver gfs.svg.render_cli.
from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from gfs.core.settings import FractalSettings
from gfs.core.version import APP_NAME, APP_VERSION
from gfs.drivers import make_driver
from gfs.engine.fractal_engine import FractalEngine
from gfs.svg.surface import SvgSurface
from gfs.ui.viewer import FractalViewer
from gfs.utils.errors import GfsError
from gfs.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def main() -> int:
    setup_logging()
    settings = FractalSettings.load()
    app = QApplication(sys.argv)

    surface = SvgSurface.create(settings.canvas_w, settings.canvas_h, margin=settings.margin)
    try:
        driver = make_driver("golden_spiral", settings.driver_options)
        engine = FractalEngine(surface.start, driver, depth=1)
        engine.draw()
    except GfsError as e:
        log.error("No se pudo iniciar el fractal: %s", e)
        return 2

    w = FractalViewer(surface, engine, interval_ms=settings.interval_ms, max_depth=settings.max_depth)
    w.setWindowTitle("{} v{}".format(APP_NAME, APP_VERSION))
    w.show()
    w.start()
    log.info("GFS iniciado (v%s)", APP_VERSION)
    return app.exec()


if __name__ == "__main__":
    raise SystemExit(main())
