# File: gfs/engine/driver.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Contrato de driver: qué dibujar en cada nivel y cómo ubicar las subunidades.
# Notes:
# - Los métodos make_* solo devuelven datos (no tocan el árbol).
# - Los métodos form_* reciben el nodo explícito y le ponen atributos.
from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Optional, Sequence

from gfs.core.models import GlyphSpec
from gfs.svg.surface import SvgNode


class FractalDriver(ABC):
    """Estrategia que conoce la geometría de una familia de fractales.

    El engine no sabe dibujar nada: recorre niveles y le pide datos al driver.
    Un driver no debe guardar referencias a nodos ni a datums entre llamadas.
    """

    name: str = "driver"
    # Cantidad máxima de subunidades por nivel (None = sin límite declarado).
    max_subunits: Optional[int] = None

    @abstractmethod
    def initialize(self, start: SvgNode) -> Any:
        """Calcula el datum inicial desde el tamaño declarado de `start` y lo asocia.

        Raises:
            GfsInvalidDimensions: si el tamaño no sirve para este fractal.
        """

    @abstractmethod
    def make_glyphs_data(self, depth: int, is_last_depth: bool, parent_datum: Any) -> Sequence[GlyphSpec]:
        """Descriptores de las formas de este nivel (clave = `class_`)."""

    @abstractmethod
    def form_glyph(self, node: SvgNode, level: Any, depth: int, is_last_depth: bool,
                   spec: GlyphSpec, index: int) -> None:
        """Aplica tamaño/estilo a la forma `node`; `level` es el datum del nivel padre."""

    @abstractmethod
    def make_subunits_data(self, new_depth: int, parent_datum: Any) -> Sequence[Any]:
        """Descriptores de las subregiones del próximo nivel. Nunca vacío."""

    @abstractmethod
    def form_subunit(self, node: SvgNode, region: Any, index: int) -> None:
        """Ubica la subregión recién creada.

        Raises:
            GfsDriverContractError: si `index` excede la aridad del driver.
        """
