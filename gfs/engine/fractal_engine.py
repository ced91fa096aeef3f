# File: gfs/engine/fractal_engine.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Engine del fractal: recorre niveles 0..depth-1 y reconcilia glyphs/subunidades.
# Notes:
# - Todo el estado para retomar vive en SvgNode.datum; el engine no guarda nodos.
# - La ubicación de una subunidad se calcula solo al crearla (enter), nunca en update.
# - draw() es sincrónico; quien lo llama desde un timer tiene que serializar.
from __future__ import annotations

import logging
from typing import Any, Optional

from gfs.core.models import DrawReport, GlyphSpec
from gfs.core.version import DEFAULT_DEPTH
from gfs.engine.driver import FractalDriver
from gfs.engine.reconcile import key_by_class, key_by_index, reconcile
from gfs.svg.surface import SvgNode
from gfs.utils.errors import GfsConfigError, GfsDriverContractError

log = logging.getLogger(__name__)

GLYPH_CLASS = "glyph"
SUBUNIT_CLASS = "subunit"
LAST_CLASS = "last"


def depth_class(depth: int) -> str:
    return f"depth-{int(depth)}"


def _coerce_depth(v: Any) -> int:
    """Profundidad válida o DEFAULT_DEPTH (<= 0 / no entero)."""
    if isinstance(v, bool):
        return DEFAULT_DEPTH
    try:
        n = int(v)
    except (TypeError, ValueError):
        return DEFAULT_DEPTH
    if n != v or n <= 0:
        return DEFAULT_DEPTH
    return n


class FractalEngine:
    """Dibuja el fractal de `driver` dentro de `start`, reconciliando contra lo existente."""

    def __init__(self, start: SvgNode, driver: FractalDriver, depth: int = DEFAULT_DEPTH) -> None:
        if start is None:
            raise GfsConfigError("Se requiere el nodo inicial (start)")
        self._start = start
        self._driver: Optional[FractalDriver] = None
        self._depth = DEFAULT_DEPTH
        self.configure(depth, driver)

    # ----------------------------
    # Configuración
    # ----------------------------
    def configure(self, depth: int, driver: FractalDriver) -> "FractalEngine":
        self.set_driver(driver)
        self.set_depth(depth)
        return self

    def set_driver(self, driver: FractalDriver) -> "FractalEngine":
        if driver is None:
            raise GfsConfigError("Se requiere un driver de fractal")
        self._driver = driver
        return self

    def set_depth(self, new_depth: int) -> "FractalEngine":
        depth = _coerce_depth(new_depth)
        if depth != new_depth:
            log.debug("Profundidad %r inválida, se usa %d", new_depth, depth)
        self._depth = depth
        return self

    @property
    def depth(self) -> int:
        return self._depth

    @property
    def driver(self) -> FractalDriver:
        if self._driver is None:
            raise GfsConfigError("Engine sin driver configurado")
        return self._driver

    @property
    def start(self) -> SvgNode:
        return self._start

    # ----------------------------
    # Draw
    # ----------------------------
    def draw(self) -> DrawReport:
        """Reconcilia el árbol hasta la profundidad actual y devuelve los eventos."""
        driver = self.driver
        start = self._start

        # Nodo sin datum: el driver calcula el tamaño inicial (puede fallar).
        if start.datum is None:
            driver.initialize(start)

        report = DrawReport(depth=self._depth)
        level: list[SvgNode] = [start]

        for depth_i in range(self._depth):
            is_last = depth_i == self._depth - 1
            next_level: list[SvgNode] = []
            for g in level:
                self._draw_glyphs(g, depth_i, is_last, report)
                next_level.extend(self._draw_subunits(g, depth_i, is_last, report))
            log.debug("[draw] depth=%d nodos=%d last=%s", depth_i, len(level), is_last)
            level = next_level

        log.info("[draw] %s depth=%d %s", driver.name, self._depth, report.summary())
        return report

    def _draw_glyphs(self, g: SvgNode, depth_i: int, is_last: bool, report: DrawReport) -> None:
        driver = self.driver
        specs = list(driver.make_glyphs_data(depth_i, is_last, g.datum))
        dcls = depth_class(depth_i)

        def _create(parent: SvgNode, spec: GlyphSpec, i: int) -> SvgNode:
            return parent.append(spec.tag).classed(f"{GLYPH_CLASS} {dcls}")

        join = reconcile(
            g,
            specs,
            select=lambda p: p.children_with(GLYPH_CLASS, dcls),
            key=key_by_class,
            create=_create,
        )
        for b in join.enter:
            report.record("enter", "glyph", depth_i, b.key)
        for b in join.update:
            report.record("update", "glyph", depth_i, b.key)
        for k in join.exit_keys:
            report.record("exit", "glyph", depth_i, k)

        # Se re-forman también los existentes: el estilo puede cambiar con is_last.
        for b in join.merged():
            driver.form_glyph(b.node, g.datum, depth_i, is_last, b.datum, b.index)

    def _draw_subunits(self, g: SvgNode, depth_i: int, is_last: bool, report: DrawReport) -> list[SvgNode]:
        driver = self.driver
        child_depth = depth_i + 1
        dcls = depth_class(child_depth)

        regions = list(driver.make_subunits_data(child_depth, g.datum))
        if not regions:
            raise GfsDriverContractError(
                f"{driver.name}: make_subunits_data devolvió una lista vacía (depth={child_depth})"
            )
        # Antes de reconciliar: no quedan <g> extra sin ubicar.
        if driver.max_subunits is not None and len(regions) > driver.max_subunits:
            raise GfsDriverContractError(
                f"{driver.name}: {len(regions)} subunidades > max_subunits={driver.max_subunits} "
                f"(depth={child_depth})"
            )

        if is_last:
            g.classed(LAST_CLASS, True)
            for i, node in enumerate(g.children_with(SUBUNIT_CLASS, dcls, tag="g")):
                node.remove()
                report.record("exit", "subunit", child_depth, i)
            return []

        g.classed(LAST_CLASS, False)

        def _create(parent: SvgNode, region: Any, i: int) -> SvgNode:
            return parent.append("g").classed(f"{SUBUNIT_CLASS} {dcls}")

        join = reconcile(
            g,
            regions,
            select=lambda p: p.children_with(SUBUNIT_CLASS, dcls, tag="g"),
            key=key_by_index,
            create=_create,
        )
        # Solo los nuevos se ubican; los existentes conservan su transform.
        for b in join.enter:
            driver.form_subunit(b.node, b.datum, b.index)
            report.record("enter", "subunit", child_depth, b.key)
        for b in join.update:
            report.record("update", "subunit", child_depth, b.key)
        for k in join.exit_keys:
            report.record("exit", "subunit", child_depth, k)

        return [b.node for b in join.merged()]
