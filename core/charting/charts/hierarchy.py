"""Hierarchical charts drawn from one `TreeNode` tree.

Treemap, sunburst and icicle are plotly figures; the node-link and
circle-packing charts are SVG scenes over igraph / circlify layouts.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

import plotly.graph_objects as go

from mockdata.dto import TreeNode

from .. import palettes
from ..errors import require_data
from ..figures import figure_theme
from ..layout.hierarchy import FlatNode, PlacedNode, cluster, flatten, pack, tidy_tree
from ..registry import register_renderer
from ..scene import Node, fmt, svg_root, translate
from ..shapes import TAU, link_horizontal, link_radial, polar
from ._common import Margin, centered, escape, fixed, frame, js_number, legend

BRANCH = palettes.PRIMARY
LEAF = palettes.POSITIVE
HIERARCHY_HOVER = "<b>%{label}</b><br>Value: %{value:,}<extra></extra>"


def _value_line(placed: PlacedNode) -> str:
    return f"<br/>Value: {js_number(placed.node.value)}" if placed.node.is_leaf and placed.node.value else ""


def _hierarchy_trace(nodes: Sequence[FlatNode], scheme: Sequence[str], *, root_color: str) -> dict[str, Any]:
    """Parallel id/label/parent/value lists colored by top-level branch."""

    branch: dict[int, str] = {}
    colors: list[str] = []
    for node in nodes:
        if node.parent is None:
            colors.append(root_color)
            continue
        if node.depth == 1:
            branch[node.index] = palettes.categorical(tuple(scheme), len(branch))
        else:
            branch[node.index] = branch[node.parent]
        colors.append(branch[node.index])
    return {
        "ids": [f"n{node.index}" for node in nodes],
        "labels": [node.name for node in nodes],
        "parents": ["" if node.parent is None else f"n{node.parent}" for node in nodes],
        "values": [node.value for node in nodes],
        "branchvalues": "total",
        "marker": {"colors": colors, "line": {"color": "white", "width": 2}},
        "hovertemplate": HIERARCHY_HOVER,
    }


@register_renderer("treemap")
def render_treemap(data: TreeNode, *, width: float, height: float) -> go.Figure:
    """Squarified rectangles nested by category."""

    require_data("treemap", data.children)
    trace = _hierarchy_trace(flatten(data), palettes.CATEGORY10, root_color=palettes.GRID)
    fig = go.Figure(
        go.Treemap(
            **trace,
            tiling={"packing": "squarify", "pad": 2},
            textinfo="label+value",
            pathbar={"visible": False},
        )
    )
    fig.update_layout(**figure_theme(width, height))
    return fig


@register_renderer("sunburst")
def render_sunburst(data: TreeNode, *, width: float, height: float) -> go.Figure:
    """Radial partition; rings are depths and angles are value shares."""

    require_data("sunburst", data.children)
    trace = _hierarchy_trace(flatten(data), palettes.CATEGORY10, root_color="white")
    fig = go.Figure(go.Sunburst(**trace, insidetextorientation="radial"))
    fig.update_layout(**figure_theme(width, height))
    return fig


@register_renderer("icicle")
def render_icicle(data: TreeNode, *, width: float, height: float) -> go.Figure:
    """Rectangular partition: one horizontal band per depth."""

    require_data("icicle", data.children)
    trace = _hierarchy_trace(flatten(data), palettes.SET3, root_color=palettes.SET3[0])
    fig = go.Figure(go.Icicle(**trace, tiling={"orientation": "v"}, pathbar={"visible": False}))
    fig.update_layout(**figure_theme(width, height))
    return fig


@register_renderer("circle_packing")
def render_circle_packing(data: TreeNode, *, width: float, height: float) -> Node:
    """Nested circles; leaf areas are proportional to value."""

    require_data("circle_packing", data.children)
    layout = pack(data, width=width, height=height)
    svg = svg_root(width, height)
    g = svg.add("g", class_="plot")
    depth_span = max(placed.node.depth for placed in layout.nodes) or 1

    for index, placed in enumerate(layout.nodes):
        node = placed.node
        circle = g.add(
            "circle",
            class_="node",
            cx=placed.x,
            cy=placed.y,
            r=placed.r,
            fill=palettes.interpolate("Blues", node.depth / depth_span) if node.children else "#90caf9",
            fill_opacity=0.35 if node.children else 0.85,
            stroke="#fff",
            stroke_width=1,
        )
        circle.tooltip(
            f"<strong>{escape(node.name)}</strong><br/>Value: {fixed(node.value, 0)}<br/>Depth: {node.depth}"
        )
        circle.hover(stroke="#0d47a1", stroke_width=2).animate("pop", delay=index * 8, duration=700)
    for placed in layout.leaves():
        if placed.r > 16:
            g.add("text", placed.node.name, x=placed.x, y=placed.y + 3, font_size=10, text_anchor="middle", fill="#0d1b2a")
    return svg


@register_renderer("tree_diagram")
def render_tree_diagram(data: TreeNode, *, width: float, height: float) -> Node:
    """Left-to-right tidy tree."""

    require_data("tree_diagram", data.children)
    f = frame(width, height, Margin(20, 120, 20, 120))
    layout = tidy_tree(data, width=f.inner_height, height=f.inner_width)

    for parent, child in layout.links():
        f.plot.add(
            "path",
            class_="link",
            d=link_horizontal((parent.y, parent.x), (child.y, child.x)),
            fill="none",
            stroke="#999",
            stroke_width=2,
            opacity=0.6,
        ).animate("fade", duration=1000)
    for placed in layout.nodes:
        group = f.plot.add("g", class_="node", transform=translate(placed.y, placed.x))
        dot = group.add("circle", r=6, fill=LEAF if placed.node.is_leaf else BRANCH, stroke="#fff", stroke_width=2)
        dot.tooltip(f"<strong>{escape(placed.node.name)}</strong>{_value_line(placed)}")
        dot.hover(r=8).animate("pop", delay=1000, duration=500)
        group.add("text", placed.node.name, dy=-10, text_anchor="middle", font_size=12, font_weight="bold").animate(
            "fade", delay=1500, duration=500
        )
    return f.root


@register_renderer("dendrogram")
def render_dendrogram(data: TreeNode, *, width: float, height: float) -> Node:
    """Cluster layout with every leaf aligned at the same depth."""

    require_data("dendrogram", data.children)
    f = frame(width, height, Margin(20, 120, 20, 120))
    layout = cluster(data, width=f.inner_height, height=f.inner_width)

    for parent, child in layout.links():
        f.plot.add(
            "path",
            class_="dendro-link",
            d=link_horizontal((parent.y, parent.x), (child.y, child.x)),
            fill="none",
            stroke="#90a4ae",
            stroke_width=1.5,
            opacity=0.9,
        ).animate("fade", duration=700)
    for index, placed in enumerate(layout.nodes):
        leaf = placed.node.is_leaf
        group = f.plot.add("g", class_="dendro-node", transform=translate(placed.y, placed.x))
        dot = group.add("circle", r=6, fill="#66bb6a" if leaf else BRANCH)
        dot.tooltip(f"<strong>{escape(placed.node.name)}</strong><br/>Depth: {placed.node.depth}")
        dot.hover(r=8).animate("pop", delay=index * 30, duration=600)
        group.add(
            "text",
            placed.node.name,
            dy=4,
            x=10 if leaf else -10,
            text_anchor="start" if leaf else "end",
            font_size=11,
            fill="#263238",
        )
    return f.root


@register_renderer("radial_tree")
def render_radial_tree(data: TreeNode, *, width: float, height: float) -> Node:
    """Tidy tree wrapped around the centre; depth grows outward."""

    require_data("radial_tree", data.children)
    radius = min(width - 120, height - 120) / 2
    f = centered(width, height)
    layout = tidy_tree(data, width=TAU, height=radius - 80)
    max_depth = max(placed.node.depth for placed in layout.nodes)

    for level in range(1, max_depth + 2):
        f.plot.add(
            "circle",
            class_="depth-circle",
            r=level * radius / (max_depth + 1),
            fill="none",
            stroke=palettes.GRID,
            stroke_dasharray="3,3",
            stroke_width=1,
        )
    links = layout.links()
    for i, (parent, child) in enumerate(links):
        f.plot.add(
            "path",
            class_="link",
            d=link_radial((parent.x, parent.y), (child.x, child.y)),
            fill="none",
            stroke="#999",
            stroke_width=2,
            stroke_opacity=0.6,
        ).animate("fade", delay=i * 20, duration=1000)

    nodes = layout.nodes
    for i, placed in enumerate(nodes):
        node = placed.node
        x, y = polar(placed.x, placed.y)
        group = f.plot.add("g", class_="node", transform=translate(x, y))
        children = f"<br/>Children: {len(node.children)}" if node.children else ""
        dot = group.add(
            "circle",
            r=4 if node.is_leaf else 6,
            fill=LEAF if node.is_leaf else BRANCH,
            stroke="#fff",
            stroke_width=2,
        )
        dot.tooltip(f"<strong>{escape(node.name)}</strong>{_value_line(placed)}<br/>Depth: {node.depth}{children}")
        dot.hover(r=6 if node.is_leaf else 8).animate("pop", delay=len(links) * 20 + i * 30, duration=600)
        degrees = placed.x * 180 / math.pi - 90
        flipped = placed.x > math.pi
        group.add(
            "text",
            node.name,
            dy="0.31em",
            x=-10 if flipped else 10,
            text_anchor="end" if flipped else "start",
            transform=f"rotate({fmt(degrees + 180 if flipped else degrees)})",
            font_size=10,
            font_weight=400 if node.is_leaf else 600,
        ).animate("fade", delay=len(links) * 20 + len(nodes) * 30 + 400, duration=400)

    f.root.add(
        "text",
        "Radial Tree (Hierarchical Layout)",
        class_="chart-title",
        x=width / 2,
        y=30,
        text_anchor="middle",
        font_weight=600,
    )
    legend(
        f.root,
        [(BRANCH, "Parent nodes"), (LEAF, "Leaf nodes")],
        x=15,
        y=55,
        marker="circle",
        size=10,
        text_x=17,
        text_y=9,
    )
    return f.root
