"""Tests for the SVG scene graph and its serialization."""

from __future__ import annotations

import json

import pytest

from core.charting.scene import Node, fmt, shape_count, svg_root, to_svg, translate

pytestmark = pytest.mark.unit


def test_fmt_trims_coordinates() -> None:
    """Coordinates keep at most two decimals and no trailing zeros."""

    assert fmt(2.0) == "2"
    assert fmt(1.239) == "1.24"
    assert fmt(-0.001) == "0"
    assert fmt(float("nan")) == "0"
    assert fmt(7) == "7"
    assert translate(1.5, -2) == "translate(1.5,-2)"


def test_set_maps_python_names_to_svg_attributes() -> None:
    """Underscores become hyphens, `class_` becomes `class`, None removes."""

    node = Node("rect").set(class_="bar", stroke_width=2, text_anchor="middle", viewBox="0 0 1 1")
    assert node.attrs == {"class": "bar", "stroke-width": "2", "text-anchor": "middle", "viewBox": "0 0 1 1"}
    node.set(stroke_width=None)
    assert "stroke-width" not in node.attrs


def test_add_class_does_not_duplicate() -> None:
    """Classes are added once."""

    node = Node("g").add_class("a").add_class("b").add_class("a")
    assert node.classes == ("a", "b")


def test_hover_serializes_sorted_json() -> None:
    """Hover overrides travel as JSON with SVG attribute names."""

    node = Node("circle").hover(stroke_width=3, fill="#000")
    assert json.loads(node.attrs["data-hover"]) == {"fill": "#000", "stroke-width": "3"}


def test_animate_adds_class_and_timing() -> None:
    """Enter transitions become a class plus inline timing."""

    node = Node("path").animate("draw", delay=100, duration=1500)
    assert "anim-draw" in node.classes
    assert node.attrs["pathLength"] == "1"
    assert node.attrs["style"] == "animation-delay: 100ms; animation-duration: 1500ms"


def test_animate_rejects_unknown_kind() -> None:
    """Only the known transitions are accepted."""

    with pytest.raises(ValueError):
        Node("rect").animate("spin")


def test_to_svg_escapes_tooltip_markup() -> None:
    """Tooltip HTML is escaped inside the attribute."""

    root = svg_root(100, 50)
    root.add("rect", class_="bar", width=10, height=20).tooltip("<strong>A & B</strong>")
    markup = to_svg(root)
    assert markup.startswith("<svg")
    assert 'xmlns="http://www.w3.org/2000/svg"' in markup
    assert 'viewBox="0 0 100 50"' in markup
    assert 'data-tooltip="&lt;strong&gt;A &amp; B&lt;/strong&gt;"' in markup


def test_shape_count_and_find_all() -> None:
    """Only elements with tooltips count as interactive shapes."""

    root = svg_root(10, 10)
    group = root.add("g", class_="bars")
    group.add("rect", class_="bar").tooltip("a")
    group.add("rect", class_="bar").tooltip("b")
    group.add("text", "label")
    assert shape_count(root) == 2
    assert len(root.find_all("rect", class_="bar")) == 2
    assert len(root.find_all("text")) == 1
    assert root.find_all(class_="bars") == [group]
