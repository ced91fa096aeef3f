# File: gfs/svg/surface.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Árbol SVG en memoria (superficie de render) que el engine reconcilia.
# Notes:
# - Cada nodo tiene tag, atributos, clases, hijos y (opcional) un datum.
# - El árbol es el único dueño de los nodos; engine/driver no guardan referencias.
from __future__ import annotations

from typing import Any, Iterator, Mapping, Optional
from xml.etree.ElementTree import Element

from gfs.core.version import DEFAULT_MARGIN_PX
from gfs.geom.lengths import length_to_px
from gfs.geom.transforms import fmt_num, fmt_px

SVG_NS = "http://www.w3.org/2000/svg"


class SvgNode:
    """Nodo de la superficie: un elemento SVG con datum opcional."""

    def __init__(self, tag: str, parent: Optional["SvgNode"] = None) -> None:
        self.tag = str(tag)
        self.parent = parent
        self.attrs: dict[str, Any] = {}
        self.children: list[SvgNode] = []
        self.datum: Any = None
        self._classes: list[str] = []

    def __repr__(self) -> str:
        cls = " ".join(self._classes)
        return f"<SvgNode {self.tag} class={cls!r} children={len(self.children)}>"

    # ----------------------------
    # Árbol
    # ----------------------------
    def append(self, tag: str) -> "SvgNode":
        """Crea un hijo `tag` al final de la lista de hijos."""
        child = SvgNode(tag, parent=self)
        self.children.append(child)
        return child

    def remove(self) -> None:
        """Desengancha el nodo (y sus descendientes) del padre."""
        if self.parent is None:
            return
        try:
            self.parent.children.remove(self)
        except ValueError:
            pass
        self.parent = None

    @property
    def is_attached(self) -> bool:
        return self.parent is not None

    def iter(self) -> Iterator["SvgNode"]:
        """Recorrido en profundidad, incluyendo self."""
        yield self
        for c in self.children:
            yield from c.iter()

    def children_with(self, *classes: str, tag: Optional[str] = None) -> list["SvgNode"]:
        """Hijos directos que tienen todas las clases dadas (y el tag, si se pide)."""
        out: list[SvgNode] = []
        for c in self.children:
            if tag is not None and c.tag != tag:
                continue
            if c.has_class(*classes):
                out.append(c)
        return out

    def find_all(self, *classes: str, tag: Optional[str] = None) -> list["SvgNode"]:
        """Descendientes (sin self) con todas las clases dadas."""
        out: list[SvgNode] = []
        for c in self.children:
            for n in c.iter():
                if tag is not None and n.tag != tag:
                    continue
                if n.has_class(*classes):
                    out.append(n)
        return out

    # ----------------------------
    # Clases
    # ----------------------------
    @property
    def classes(self) -> tuple[str, ...]:
        return tuple(self._classes)

    def classed(self, names: str, on: bool = True) -> "SvgNode":
        """Agrega/quita una o varias clases (separadas por espacio)."""
        for name in str(names).split():
            if on and name not in self._classes:
                self._classes.append(name)
            elif not on and name in self._classes:
                self._classes.remove(name)
        return self

    def has_class(self, *names: str) -> bool:
        return all(n in self._classes for n in names)

    # ----------------------------
    # Atributos
    # ----------------------------
    def set_attr(self, name: str, value: Any) -> "SvgNode":
        if value is None:
            self.attrs.pop(name, None)
        else:
            self.attrs[name] = value
        return self

    def set_attrs(self, values: Mapping[str, Any]) -> "SvgNode":
        for k, v in values.items():
            self.set_attr(k, v)
        return self

    def get_attr(self, name: str, default: Any = None) -> Any:
        return self.attrs.get(name, default)

    def declared_size(self) -> tuple[Optional[float], Optional[float]]:
        """(width, height) declarados, en px. None si falta o no es numérico."""
        return length_to_px(self.attrs.get("width")), length_to_px(self.attrs.get("height"))

    # ----------------------------
    # Export
    # ----------------------------
    def to_element(self) -> Element:
        attrib: dict[str, str] = {}
        if self._classes:
            attrib["class"] = " ".join(self._classes)
        for k, v in self.attrs.items():
            attrib[k] = v if isinstance(v, str) else fmt_num(v)
        el = Element(self.tag, attrib)
        for c in self.children:
            el.append(c.to_element())
        return el


class SvgSurface:
    """Documento host: <svg> raíz + <g> inicial donde crece el fractal."""

    def __init__(self, root: SvgNode, start: SvgNode) -> None:
        self.root = root
        self.start = start

    @classmethod
    def create(cls, width: float, height: float, margin: float = DEFAULT_MARGIN_PX) -> "SvgSurface":
        """Arma <svg width height> con un <g> inicial achicado `margin` px."""
        root = SvgNode("svg")
        root.set_attrs({
            "xmlns": SVG_NS,
            "version": "1.1",
            "width": float(width),
            "height": float(height),
        })
        start = root.append("g")
        start.set_attrs({
            "width": fmt_px(float(width) - float(margin)),
            "height": fmt_px(float(height) - float(margin)),
        })
        return cls(root, start)

    def size(self) -> tuple[Optional[float], Optional[float]]:
        return self.root.declared_size()

    def node_count(self) -> int:
        return sum(1 for _ in self.root.iter())
