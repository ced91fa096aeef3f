# File: gfs/svg/render_cli.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Harness CLI: dibuja el fractal y lo exporta a SVG (y opcionalmente PNG), sin UI.
# Notes:
# - Defaults desde gfs_settings.json / env vars; los flags ganan.
# - --sweep redibuja 1..depth sobre la misma superficie (ejercita la reconciliación).
from __future__ import annotations

import argparse
import logging
import os
from pathlib import Path
from typing import Any

from gfs.core.settings import FractalSettings
from gfs.core.version import APP_SHORT, APP_VERSION
from gfs.drivers import make_driver
from gfs.engine.fractal_engine import FractalEngine
from gfs.geom.svgelements_bbox import compute_document_bbox
from gfs.svg.exporter import export_svg, to_svg_string
from gfs.svg.surface import SvgSurface
from gfs.utils.errors import GfsError
from gfs.utils.log import get_logger, setup_logging

log = get_logger(__name__)


def build_options(settings: FractalSettings, args: argparse.Namespace) -> dict[str, Any]:
    """Opciones del driver: settings como base, flags encima."""
    opts: dict[str, Any] = dict(settings.driver_options)
    glyphs: dict[str, Any] = dict(opts.get("glyphs") or {})

    if args.square:
        glyphs["square"] = True
    if args.rectangle or args.rect_last_only:
        glyphs["rectangle"] = {"lastOnly": bool(args.rect_last_only)}
    if args.no_spiral:
        glyphs["spiral"] = False
    elif args.bezier:
        sp = glyphs.get("spiral")
        sp = dict(sp) if isinstance(sp, dict) else {}
        sp["bezier"] = True
        glyphs["spiral"] = sp

    opts["glyphs"] = glyphs
    if args.no_secondary:
        opts["secondarySpiral"] = False
    return opts


def main(argv: list[str] | None = None) -> int:
    settings = FractalSettings.load()

    ap = argparse.ArgumentParser(
        prog="gfs-render",
        description="GFS - Harness CLI: dibuja el espiral áureo y exporta SVG/PNG sin UI.",
    )
    ap.add_argument("--out", default="gfs_out.svg", help="SVG de salida (default: gfs_out.svg)")
    ap.add_argument("--png", default="", help="PNG opcional (render QtSvg)")
    ap.add_argument("--scale", type=float, default=float(os.environ.get("GFS_PNG_SCALE", "1")))
    ap.add_argument("--depth", type=int, default=settings.depth)
    ap.add_argument("--width", type=float, default=settings.canvas_w)
    ap.add_argument("--height", type=float, default=settings.canvas_h)
    ap.add_argument("--driver", default="golden_spiral")
    ap.add_argument("--square", action="store_true", help="Dibuja los cuadrados")
    ap.add_argument("--rectangle", action="store_true", help="Dibuja los rectángulos")
    ap.add_argument("--rect-last-only", action="store_true", help="Rectángulo solo en el último nivel")
    ap.add_argument("--no-spiral", action="store_true", help="No dibuja el arco")
    ap.add_argument("--bezier", action="store_true", help="Arco como bezier cuadrática")
    ap.add_argument("--no-secondary", action="store_true", help="Sin espiral secundario")
    ap.add_argument("--sweep", action="store_true", help="Redibuja 1..depth antes del draw final")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args(argv)

    setup_logging(log_dir=None, level=logging.DEBUG if args.verbose else logging.WARNING)

    try:
        driver = make_driver(args.driver, build_options(settings, args))
        surface = SvgSurface.create(args.width, args.height, margin=settings.margin)
        engine = FractalEngine(surface.start, driver, depth=args.depth)

        totals = {"enter": 0, "update": 0, "exit": 0}
        if args.sweep:
            for d in range(1, engine.depth):
                rep = engine.set_depth(d).draw()
                for k, v in rep.summary().items():
                    totals[k] += v
            engine.set_depth(args.depth)
        rep = engine.draw()
        for k, v in rep.summary().items():
            totals[k] += v

        out = export_svg(surface, Path(args.out).expanduser())
        svg_text = to_svg_string(surface)
        geom = compute_document_bbox(svg_text)

        print(f"[{APP_SHORT}] v{APP_VERSION} {driver.name} depth={engine.depth} -> {out}")
        print(f"[{APP_SHORT}] nodos={surface.node_count()} eventos={totals} bbox={geom.get('bbox')}")

        if args.png:
            from gfs.svg.raster import render_svg_to_png

            png = render_svg_to_png(svg_text, Path(args.png).expanduser(), scale=args.scale)
            print(f"[{APP_SHORT}] PNG -> {png}")
    except GfsError as e:
        log.error("%s", e)
        print(f"[{APP_SHORT}] ERROR: {e}")
        return 2
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
