# File: gfs/core/models.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Modelos de datos del fractal (datum por nivel + descriptores de glyph).
# Notes: El datum vive pegado al nodo (SvgNode.datum); engine y driver no guardan referencias.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal, Optional

JoinPhase = Literal["enter", "update", "exit"]
JoinKind = Literal["glyph", "subunit"]


@dataclass
class LevelDatum:
    """Estado de un nivel (una región) del fractal.

    - width: ancho de la región.
    - base: lado del cuadrado principal (width / PHI en el espiral áureo).
    - parent_base: base de la región padre (para ubicarse respecto a ella).
    - secondary_count: cuántas veces esta rama salió de un espiral secundario.
    """

    depth: int
    width: float
    base: float
    parent_base: Optional[float] = None
    secondary_count: int = 0


@dataclass(frozen=True)
class GlyphSpec:
    """Descriptor efímero de una forma: tag SVG + clase (clave de reconciliación)."""

    tag: str
    class_: str


@dataclass(frozen=True)
class JoinEvent:
    """Un evento enter/update/exit registrado durante un draw()."""

    phase: JoinPhase
    kind: JoinKind
    depth: int
    key: Any


@dataclass
class DrawReport:
    """Resultado de un draw(): eventos en orden + contadores.

    Al achicar la profundidad, los exits se registran solo en la profundidad
    frontera: los niveles más profundos salen junto con la raíz de su subárbol
    y no generan eventos propios.
    """

    depth: int
    events: list[JoinEvent] = field(default_factory=list)

    def record(self, phase: JoinPhase, kind: JoinKind, depth: int, key: Any) -> None:
        self.events.append(JoinEvent(phase, kind, int(depth), key))

    def count(self, phase: Optional[JoinPhase] = None, *, kind: Optional[JoinKind] = None,
              depth: Optional[int] = None) -> int:
        n = 0
        for e in self.events:
            if phase is not None and e.phase != phase:
                continue
            if kind is not None and e.kind != kind:
                continue
            if depth is not None and e.depth != depth:
                continue
            n += 1
        return n

    def depths(self, phase: JoinPhase) -> set[int]:
        """Profundidades en las que hubo al menos un evento `phase`."""
        return {e.depth for e in self.events if e.phase == phase}

    def summary(self) -> dict[str, int]:
        return {
            "enter": self.count("enter"),
            "update": self.count("update"),
            "exit": self.count("exit"),
        }
