"""Keyed enter/update/exit diff."""

from __future__ import annotations

import pytest

from gfs.core.models import GlyphSpec
from gfs.engine.reconcile import key_by_class, key_by_index, reconcile
from gfs.svg.surface import SvgNode
from gfs.utils.errors import GfsDriverContractError

A = GlyphSpec("rect", "a")
B = GlyphSpec("rect", "b")
C = GlyphSpec("path", "c")
D = GlyphSpec("rect", "d")


def _glyphs(parent: SvgNode, specs):
    return reconcile(
        parent,
        specs,
        select=lambda p: p.children_with("glyph"),
        key=key_by_class,
        create=lambda p, d, i: p.append(d.tag).classed("glyph"),
    )


def test_first_pass_enters_everything() -> None:
    g = SvgNode("g")
    join = _glyphs(g, [A, B, C])

    assert [b.key for b in join.enter] == ["a", "b", "c"]
    assert join.update == [] and join.exit == []
    assert [c.tag for c in g.children] == ["rect", "rect", "path"]
    assert [c.datum for c in g.children] == [A, B, C]


def test_update_enter_exit_split() -> None:
    g = SvgNode("g")
    _glyphs(g, [A, B, C])
    before = {c.datum.class_: c for c in g.children}

    join = _glyphs(g, [B, C, D])

    assert [b.key for b in join.update] == ["b", "c"]
    assert [b.key for b in join.enter] == ["d"]
    assert join.exit_keys == ["a"]
    assert join.exit == [before["a"]]
    assert before["a"].parent is None
    # survivors are the same objects
    assert join.update[0].node is before["b"]
    assert join.update[1].node is before["c"]
    assert [b.key for b in join.merged()] == ["b", "c", "d"]
    assert [b.index for b in join.merged()] == [0, 1, 2]


def test_reordering_keys_is_not_an_enter_or_exit() -> None:
    g = SvgNode("g")
    _glyphs(g, [A, B, C])
    nodes = list(g.children)

    join = _glyphs(g, [C, A, B])

    assert join.enter == [] and join.exit == []
    assert [b.key for b in join.merged()] == ["c", "a", "b"]
    assert g.children == nodes


def test_update_rebinds_datum() -> None:
    g = SvgNode("g")
    _glyphs(g, [A])
    a2 = GlyphSpec("path", "a")

    join = _glyphs(g, [a2])

    assert join.update[0].node.datum is a2
    # tag is not changed on update: the key is the class only
    assert join.update[0].node.tag == "rect"


def test_duplicate_descriptor_keys_are_a_contract_error() -> None:
    g = SvgNode("g")
    with pytest.raises(GfsDriverContractError):
        _glyphs(g, [A, GlyphSpec("path", "a")])


def test_duplicate_existing_nodes_exit() -> None:
    g = SvgNode("g")
    for _ in range(2):
        n = g.append("rect").classed("glyph")
        n.datum = A

    join = _glyphs(g, [A])

    assert len(join.update) == 1
    assert len(join.exit) == 1
    assert len(g.children) == 1


def test_positional_keys() -> None:
    g = SvgNode("g")

    def run(regions):
        return reconcile(
            g,
            regions,
            select=lambda p: p.children_with("subunit"),
            key=key_by_index,
            create=lambda p, d, i: p.append("g").classed("subunit"),
        )

    first = run(["x", "y", "z"])
    assert [b.key for b in first.enter] == [0, 1, 2]

    second = run(["p", "q"])
    assert second.enter == []
    assert [b.key for b in second.update] == [0, 1]
    assert second.exit_keys == [2]
    assert [c.datum for c in g.children] == ["p", "q"]
