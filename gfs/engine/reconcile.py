# File: gfs/engine/reconcile.py
# Project: GoldenFractalSvg (GFS)
# Version: 0.1.0
# Status: stable
# Date: 2026-10-12
# Purpose: Diff enter/update/exit por clave entre hijos existentes y descriptores nuevos.
# Notes:
# - Orden de aplicación: create (enter) -> rebind (update) -> remove (exit).
# - La clave de un nodo existente se calcula sobre su datum actual.
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Hashable, Sequence

from gfs.core.models import GlyphSpec
from gfs.svg.surface import SvgNode
from gfs.utils.errors import GfsDriverContractError

KeyFn = Callable[[Any, int], Hashable]
SelectFn = Callable[[SvgNode], list[SvgNode]]
CreateFn = Callable[[SvgNode, Any, int], SvgNode]


def key_by_class(d: Any, i: int) -> Hashable:
    """Clave de glyphs: la clase del descriptor."""
    if isinstance(d, GlyphSpec):
        return d.class_
    return getattr(d, "class_", None)


def key_by_index(d: Any, i: int) -> Hashable:
    """Clave de subunidades: posición en la lista."""
    return i


@dataclass
class Bound:
    """Nodo + descriptor asociado + índice del descriptor en la lista nueva."""

    node: SvgNode
    datum: Any
    index: int
    key: Hashable


@dataclass
class Join:
    enter: list[Bound] = field(default_factory=list)
    update: list[Bound] = field(default_factory=list)
    exit: list[SvgNode] = field(default_factory=list)
    exit_keys: list[Hashable] = field(default_factory=list)

    def merged(self) -> list[Bound]:
        """enter + update en el orden de los descriptores (orden determinístico)."""
        return sorted([*self.enter, *self.update], key=lambda b: b.index)


def reconcile(
    parent: SvgNode,
    descriptors: Sequence[Any],
    *,
    select: SelectFn,
    key: KeyFn,
    create: CreateFn,
) -> Join:
    """Reconcilia los hijos `select(parent)` contra `descriptors`.

    - enter: clave sin nodo existente -> `create(parent, d, i)`; el datum queda asociado.
    - update: clave existente -> el nodo se conserva y recibe el datum nuevo.
    - exit: nodos existentes cuya clave no aparece -> se remueven.

    Claves duplicadas en `descriptors` son un bug del driver. Nodos existentes
    con clave repetida (no debería pasar) sobran y salen por exit.
    """
    existing = select(parent)

    by_key: dict[Hashable, SvgNode] = {}
    leftovers: list[tuple[SvgNode, Hashable]] = []
    for i, node in enumerate(existing):
        k = key(node.datum, i)
        if k in by_key:
            leftovers.append((node, k))
        else:
            by_key[k] = node

    join = Join()
    seen: set[Hashable] = set()
    pending_enter: list[tuple[Any, int, Hashable]] = []
    for i, d in enumerate(descriptors):
        k = key(d, i)
        if k in seen:
            raise GfsDriverContractError(f"clave duplicada entre hermanos: {k!r}")
        seen.add(k)
        node = by_key.pop(k, None)
        if node is None:
            pending_enter.append((d, i, k))
        else:
            join.update.append(Bound(node, d, i, k))

    # El resto de by_key no matcheó ningún descriptor.
    stale = [*by_key.items(), *((k, n) for n, k in leftovers)]

    for d, i, k in pending_enter:
        node = create(parent, d, i)
        node.datum = d
        join.enter.append(Bound(node, d, i, k))

    for b in join.update:
        b.node.datum = b.datum

    for k, node in stale:
        node.remove()
        join.exit.append(node)
        join.exit_keys.append(k)

    return join
