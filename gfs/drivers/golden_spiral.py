# File: gfs/drivers/golden_spiral.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Driver de referencia: espiral áureo (cuadrado + rectángulo + arco por nivel).
# Notes:
# - Cada nivel: base = width / PHI. La subunidad primaria rota 90° y se apoya en el
#   borde del cuadrado; la secundaria (opcional) ocupa el rectángulo restante.
from __future__ import annotations

import logging
import math
from typing import Any, Mapping, Optional, Union

from gfs.core.models import GlyphSpec, LevelDatum
from gfs.core.version import PHI
from gfs.drivers.options import GoldenSpiralOptions
from gfs.engine.driver import FractalDriver
from gfs.geom import transforms as tf
from gfs.svg.surface import SvgNode
from gfs.utils.errors import GfsDriverContractError, GfsInvalidDimensions

log = logging.getLogger(__name__)

SQUARE = GlyphSpec("rect", "gs-square")
RECTANGLE = GlyphSpec("rect", "gs-rect")
SPIRAL = GlyphSpec("path", "gs-spiral")

RECT_LAST_CLASS = "gs-rect-last"


class GoldenSpiralDriver(FractalDriver):
    name = "Golden Spiral"
    max_subunits = 2

    def __init__(self, options: Union[GoldenSpiralOptions, Mapping[str, Any], None] = None) -> None:
        if isinstance(options, GoldenSpiralOptions):
            self.options = options
        else:
            self.options = GoldenSpiralOptions.from_dict(options)

    # ----------------------------
    # Init
    # ----------------------------
    def initialize(self, start: SvgNode) -> LevelDatum:
        """Datum inicial desde width/height declarados; redimensiona a (width, base)."""
        width, height = start.declared_size()
        if width is None or not math.isfinite(width) or width <= 0:
            raise GfsInvalidDimensions(
                f"{self.name}: el nodo inicial necesita un width numérico > 0 "
                f"(width={start.get_attr('width')!r})"
            )
        if height is None or not math.isfinite(height) or height <= 0:
            raise GfsInvalidDimensions(
                f"{self.name}: el nodo inicial necesita un height numérico > 0 "
                f"(height={start.get_attr('height')!r})"
            )
        if width / height > PHI:
            raise GfsInvalidDimensions(
                f"{self.name}: width/height debe ser <= PHI ({width:g}/{height:g} = {width / height:.4f})"
            )

        datum = LevelDatum(depth=0, width=width, base=width / PHI, parent_base=None, secondary_count=0)
        start.datum = datum
        start.set_attr("width", tf.fmt_px(datum.width))
        start.set_attr("height", tf.fmt_px(datum.base))
        log.info("%s inicializado: width=%g base=%g", self.name, datum.width, datum.base)
        return datum

    # ----------------------------
    # Glyphs
    # ----------------------------
    def make_glyphs_data(self, depth: int, is_last_depth: bool, parent_datum: Any = None) -> list[GlyphSpec]:
        o = self.options
        glyphs: list[GlyphSpec] = []
        if o.square and (not o.square.last_only or is_last_depth):
            glyphs.append(SQUARE)
        if o.rectangle and (not o.rectangle.last_only or is_last_depth):
            glyphs.append(RECTANGLE)
        if o.spiral and (not o.spiral.last_only or is_last_depth):
            glyphs.append(SPIRAL)
        return glyphs

    def form_glyph(self, node: SvgNode, level: LevelDatum, depth: int, is_last_depth: bool,
                   spec: GlyphSpec, index: int) -> None:
        base = level.base
        node.classed(spec.class_, True)

        if spec.class_ == SQUARE.class_:
            node.set_attrs({"width": base, "height": base})

        elif spec.class_ == RECTANGLE.class_:
            node.set_attrs({
                "width": level.width - base,
                "height": base,
                "transform": tf.translate(base, 0),
            })
            highlight = bool(self.options.rectangle) and not self.options.rectangle.no_last_highlight
            node.classed(RECT_LAST_CLASS, is_last_depth and highlight)

        elif spec.class_ == SPIRAL.class_:
            sp = self.options.spiral
            if sp is None:
                return
            attrs: dict[str, Any] = {
                "d": tf.quad_quarter_path(base) if sp.bezier else tf.arc_quarter_path(base),
                "stroke": sp.stroke_for(level),
                "fill": "transparent",
            }
            attrs.update(sp.path_attrs)
            node.set_attrs(attrs)

    # ----------------------------
    # Subunidades
    # ----------------------------
    def make_subunits_data(self, new_depth: int, parent_datum: LevelDatum) -> list[LevelDatum]:
        pbase = parent_datum.base
        count = parent_datum.secondary_count or 0
        data = [
            LevelDatum(
                depth=new_depth,
                width=pbase,
                base=pbase * PHI - pbase,
                parent_base=pbase,
                secondary_count=count,
            )
        ]
        # Espiral doble-recursivo.
        if self.options.secondary_spiral:
            data.append(
                LevelDatum(
                    depth=new_depth,
                    width=pbase,
                    base=pbase * PHI - pbase,
                    parent_base=pbase,
                    secondary_count=count + 1,
                )
            )
        return data

    def form_subunit(self, node: SvgNode, region: LevelDatum, index: int) -> None:
        pb = _parent_base(region)
        if index == 0:
            node.set_attrs({
                "width": tf.fmt_px(region.width),
                "height": tf.fmt_px(pb),
                "transform": tf.compose(
                    tf.rotate_deg(90, pb / 2, pb / 2),
                    tf.translate(0, -pb / PHI),
                ),
            })
        elif index == 1:
            node.set_attrs({
                "width": tf.fmt_px(region.width),
                "height": tf.fmt_px(pb),
                "transform": tf.translate(0, pb - region.base),
            })
        else:
            raise GfsDriverContractError(f"{self.name}: unexpected index {index!r}")


def _parent_base(region: LevelDatum) -> float:
    pb: Optional[float] = region.parent_base
    if pb is None:
        raise GfsDriverContractError("subunidad sin parent_base")
    return pb
