"""In-memory SVG node tree used as the render surface."""

from __future__ import annotations

from xml.etree.ElementTree import tostring

from gfs.svg.surface import SVG_NS, SvgNode, SvgSurface


def test_classed_toggles_and_keeps_order() -> None:
    n = SvgNode("rect")
    n.classed("glyph depth-0").classed("gs-square")
    assert n.classes == ("glyph", "depth-0", "gs-square")
    assert n.has_class("glyph", "gs-square")

    n.classed("depth-0", False)
    n.classed("glyph", True)
    assert n.classes == ("glyph", "gs-square")
    assert not n.has_class("depth-0")


def test_append_remove_and_selection() -> None:
    root = SvgNode("g")
    a = root.append("rect").classed("glyph depth-0")
    b = root.append("g").classed("subunit depth-1")
    inner = b.append("path").classed("glyph depth-1")

    assert root.children_with("glyph") == [a]
    assert root.children_with("subunit", tag="g") == [b]
    assert root.children_with("subunit", tag="rect") == []
    assert root.find_all("glyph") == [a, inner]

    b.remove()
    assert b.parent is None
    assert not b.is_attached
    assert root.children == [a]
    # removing twice is a no-op
    b.remove()


def test_attrs_and_declared_size() -> None:
    n = SvgNode("g")
    n.set_attrs({"width": "396px", "height": 246})
    assert n.declared_size() == (396.0, 246.0)
    n.set_attr("height", None)
    assert n.get_attr("height") is None
    assert n.declared_size() == (396.0, None)


def test_surface_create_and_serialize() -> None:
    s = SvgSurface.create(400, 250, margin=4)
    assert s.size() == (400.0, 250.0)
    assert s.start.get_attr("width") == "396px"
    assert s.start.get_attr("height") == "246px"
    assert s.node_count() == 2

    s.start.append("rect").classed("glyph gs-square").set_attrs({"width": 10.5, "height": 10})
    xml = tostring(s.root.to_element(), encoding="unicode")
    assert SVG_NS in xml
    assert 'class="glyph gs-square"' in xml
    assert 'width="10.5"' in xml
