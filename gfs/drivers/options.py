# File: gfs/drivers/options.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Opciones del driver de espiral áureo (qué glyphs dibujar y cómo).
# Notes:
# - from_dict acepta las claves camelCase de la demo original y snake_case.
# - spiral viene activo por defecto; square/rectangle no.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Mapping, Optional, Union

from gfs.core.models import LevelDatum
from gfs.geom.color import LogColorRamp
from gfs.utils.errors import GfsConfigError

StrokeFn = Callable[[LevelDatum], str]

# Rampa del espiral secundario: dominio [1, 11] (log no admite 0, por eso +1).
SECONDARY_COLOR_RAMP = LogColorRamp(domain=(1.0, 11.0), color_from="#000", color_to="#fff")


def default_stroke_fn(level: LevelDatum) -> str:
    return SECONDARY_COLOR_RAMP((level.secondary_count or 0) + 1)


@dataclass
class SquareOptions:
    last_only: bool = False


@dataclass
class RectangleOptions:
    last_only: bool = False
    # Sin la clase gs-rect-last en el último nivel.
    no_last_highlight: bool = False


@dataclass
class SpiralOptions:
    # Bezier cuadrática en vez de arco de círculo.
    bezier: bool = False
    # Overrides finales (stroke, fill, style...). Ganan sobre stroke_fn.
    path_attrs: dict[str, Any] = field(default_factory=dict)
    # None -> stroke fijo '#000'; str -> color fijo.
    stroke_fn: Union[StrokeFn, str, None] = default_stroke_fn
    last_only: bool = False

    def stroke_for(self, level: LevelDatum) -> str:
        if self.stroke_fn is None:
            return "#000"
        if isinstance(self.stroke_fn, str):
            return self.stroke_fn
        return str(self.stroke_fn(level))


@dataclass
class GoldenSpiralOptions:
    square: Optional[SquareOptions] = None
    rectangle: Optional[RectangleOptions] = None
    spiral: Optional[SpiralOptions] = field(default_factory=SpiralOptions)
    # Espiral gemelo que arranca con el ancho del primer cuadrado.
    secondary_spiral: bool = True

    @staticmethod
    def from_dict(d: Optional[Mapping[str, Any]]) -> "GoldenSpiralOptions":
        if d is None:
            return GoldenSpiralOptions()
        if not isinstance(d, Mapping):
            raise GfsConfigError(f"Opciones inválidas: se esperaba dict, llegó {type(d).__name__}")

        glyphs = d.get("glyphs") or {}
        if not isinstance(glyphs, Mapping):
            raise GfsConfigError("glyphs inválido: se espera objeto")

        square = None
        sq_raw = glyphs.get("square", False)
        if _enabled(sq_raw):
            sq = _as_section(sq_raw, "glyphs.square")
            square = SquareOptions(last_only=_flag(sq, "lastOnly", "last_only"))

        rectangle = None
        rc_raw = glyphs.get("rectangle", False)
        if _enabled(rc_raw):
            rc = _as_section(rc_raw, "glyphs.rectangle")
            rectangle = RectangleOptions(
                last_only=_flag(rc, "lastOnly", "last_only"),
                no_last_highlight=_flag(rc, "noLastHighlight", "no_last_highlight"),
            )

        spiral = None
        sp_raw = glyphs.get("spiral", True)
        if _enabled(sp_raw):
            sp = _as_section(sp_raw, "glyphs.spiral")
            path_attrs = _pick(sp, "pathAttrs", "path_attrs", default=None) or {}
            if not isinstance(path_attrs, Mapping):
                raise GfsConfigError("glyphs.spiral.pathAttrs inválido: se espera objeto")
            stroke_fn = _pick(sp, "strokeFn", "stroke_fn", default=default_stroke_fn)
            if stroke_fn is not None and not (callable(stroke_fn) or isinstance(stroke_fn, str)):
                raise GfsConfigError(f"glyphs.spiral.strokeFn inválido: {stroke_fn!r}")
            spiral = SpiralOptions(
                bezier=_flag(sp, "bezier"),
                path_attrs=dict(path_attrs),
                stroke_fn=stroke_fn,
                last_only=_flag(sp, "lastOnly", "last_only"),
            )

        return GoldenSpiralOptions(
            square=square,
            rectangle=rectangle,
            spiral=spiral,
            secondary_spiral=bool(_pick(d, "secondarySpiral", "secondary_spiral", default=True)),
        )


_MISSING = object()


def _pick(d: Mapping[str, Any], *names: str, default: Any = None) -> Any:
    """Primer nombre presente (un None explícito cuenta como presente)."""
    for n in names:
        v = d.get(n, _MISSING)
        if v is not _MISSING:
            return v
    return default


def _flag(d: Mapping[str, Any], *names: str) -> bool:
    return bool(_pick(d, *names, default=False))


def _as_section(v: Any, field_name: str) -> Mapping[str, Any]:
    # `true` equivale a {} (activo con defaults).
    if v is True:
        return {}
    if isinstance(v, Mapping):
        return v
    raise GfsConfigError(f"{field_name} inválido: se espera bool u objeto, llegó {v!r}")


def _enabled(v: Any) -> bool:
    # Un objeto vacío {} también activa el glyph (con defaults).
    return v is not None and v is not False
