"""Node-link and flow charts."""

from __future__ import annotations

import math

import plotly.graph_objects as go

from mockdata.dto import ArcDiagramData, ChordData, FlowData, NetworkData

from .. import palettes
from ..axes import axis_left, axis_top
from ..errors import ChartRenderError, require_data
from ..figures import figure_theme
from ..layout.chord import chord_layout
from ..layout.flow import flow_graph, throughput
from ..layout.force import spring_positions
from ..registry import register_renderer
from ..scales import BandScale, OrdinalScale, PointScale, SequentialScale
from ..scene import Node, fmt, svg_root
from ..shapes import PathBuilder, arc_path, ribbon_path
from ._common import Margin, centered, escape, fixed, frame, js_number

ARC_LINK = palettes.PRIMARY
ARC_LINK_HOVER = palettes.PRIMARY_DARK
ADJACENCY_EMPTY = "#e0f2f1"


@register_renderer("force")
def render_force(data: NetworkData, *, width: float, height: float, seed: int = 0) -> Node:
    """Static spring layout; edge width grows with link weight."""

    require_data("force", data.nodes)
    positions = spring_positions(data, width=width, height=height, margin=30, seed=seed)
    svg = svg_root(width, height)
    color = OrdinalScale(palettes.CATEGORY10)

    edges = svg.add("g", class_="links")
    for link in data.links:
        x1, y1 = positions[link.source]
        x2, y2 = positions[link.target]
        edges.add(
            "line",
            class_="link",
            x1=x1,
            y1=y1,
            x2=x2,
            y2=y2,
            stroke="#999",
            stroke_opacity=0.6,
            stroke_width=math.sqrt(link.value) * 2,
        ).animate("fade", duration=600)

    nodes = svg.add("g", class_="nodes")
    for index, node in enumerate(data.nodes):
        cx, cy = positions[node.id]
        circle = nodes.add(
            "circle",
            class_="node",
            cx=cx,
            cy=cy,
            r=15,
            fill=color(str(node.group)),
            stroke="#fff",
            stroke_width=2,
        )
        circle.tooltip(f"<strong>Node {escape(node.id)}</strong><br/>Group: {node.group}")
        circle.hover(r=20).animate("pop", delay=index * 40, duration=600)

    labels = svg.add("g", class_="labels")
    for node in data.nodes:
        cx, cy = positions[node.id]
        labels.add(
            "text",
            node.id,
            x=cx,
            y=cy,
            dy=4,
            font_size=12,
            font_weight="bold",
            fill="#333",
            text_anchor="middle",
        )
    return svg


def _flow_figure(
    chart_type: str,
    data: FlowData,
    *,
    width: float,
    height: float,
    scheme: tuple[str, ...],
    node_width: float,
    node_padding: float,
    margin: int,
) -> go.Figure:
    require_data(chart_type, data.nodes)
    require_data(chart_type, data.links)
    graph = flow_graph(data)
    color = OrdinalScale(scheme, domain=data.nodes)
    node_colors = [color(name) for name in data.nodes]
    fig = go.Figure(
        go.Sankey(
            arrangement="snap",
            valueformat=",",
            node={
                "label": list(data.nodes),
                "color": node_colors,
                "customdata": [throughput(graph, i) for i in range(len(data.nodes))],
                "pad": node_padding,
                "thickness": node_width,
                "line": {"color": "white", "width": 1},
                "hovertemplate": "<b>%{label}</b><br>Value: %{customdata:,}<extra></extra>",
            },
            link={
                "source": [link.source for link in data.links],
                "target": [link.target for link in data.links],
                "value": [link.value for link in data.links],
                "color": [palettes.rgba(node_colors[link.source], 0.5) for link in data.links],
                "hovertemplate": "<b>%{source.label} → %{target.label}</b><br>Value: %{value:,}<extra></extra>",
            },
        )
    )
    fig.update_layout(**figure_theme(width, height, margin=margin))
    return fig


@register_renderer("sankey")
def render_sankey(data: FlowData, *, width: float, height: float) -> go.Figure:
    """Flow bands between node columns; band width is flow volume."""

    return _flow_figure(
        "sankey",
        data,
        width=width,
        height=height,
        scheme=palettes.CATEGORY10,
        node_width=15,
        node_padding=10,
        margin=5,
    )


@register_renderer("alluvial")
def render_alluvial(data: FlowData, *, width: float, height: float) -> go.Figure:
    """Stage-to-stage flows drawn as a Sankey with Set2 node colors."""

    return _flow_figure(
        "alluvial",
        data,
        width=width,
        height=height,
        scheme=palettes.SET2,
        node_width=16,
        node_padding=12,
        margin=20,
    )


@register_renderer("adjacency_matrix")
def render_adjacency_matrix(data: NetworkData, *, width: float, height: float) -> Node:
    """Symmetric connection-strength matrix over the network's nodes."""

    require_data("adjacency_matrix", data.nodes)
    f = frame(width, height, Margin(100, 20, 20, 100))
    ids = [node.id for node in data.nodes]
    index_by_id = {node_id: i for i, node_id in enumerate(ids)}
    matrix = [[0.0] * len(ids) for _ in ids]
    for link in data.links:
        i, j = index_by_id.get(link.source), index_by_id.get(link.target)
        if i is None or j is None:
            continue
        matrix[i][j] += link.value
        matrix[j][i] += link.value

    x = BandScale.with_padding(ids, (0, f.inner_width), 0.06)
    y = BandScale.with_padding(ids, (0, f.inner_height), 0.06)
    color = SequentialScale("GnBu", (0, max(max(row) for row in matrix) or 1))

    index = 0
    for i, source in enumerate(ids):
        for j, target in enumerate(ids):
            value = matrix[i][j]
            cell = f.plot.add(
                "rect",
                class_="cell",
                x=x(target),
                y=y(source),
                width=x.bandwidth,
                height=y.bandwidth,
                fill=color(value) if value else ADJACENCY_EMPTY,
                stroke="#fff",
                stroke_width=0.7,
            )
            cell.tooltip(
                f"<strong>{escape(source)} ↔ {escape(target)}</strong><br/>Connection: {fixed(value, 0)}"
            )
            cell.hover(stroke="#004d40", stroke_width=1.2).animate("fade", delay=index * 2, duration=700)
            index += 1

    top = f.plot.append(axis_top(x))
    for label in top.find_all("text"):
        label.set(transform="rotate(-45)", text_anchor="start")
    f.plot.append(axis_left(y))
    return f.root


def _arc_link_path(x0: float, x1: float, baseline: float) -> str:
    path = PathBuilder()
    path.move_to(x0, baseline)
    path.quad_to((x0 + x1) / 2, baseline - abs(x1 - x0) / 2, x1, baseline)
    return str(path)


@register_renderer("arc_diagram")
def render_arc_diagram(data: ArcDiagramData, *, width: float, height: float) -> Node:
    """Nodes on a line, links as arcs above it; arc height is node distance."""

    require_data("arc_diagram", data.nodes)
    f = frame(width, height, Margin(40, 40, 80, 40))
    x = PointScale([node.id for node in data.nodes], (0, f.inner_width), padding=0.5)
    baseline = f.inner_height * 0.7

    links = f.plot.add("g", class_="links")
    for i, link in enumerate(data.links):
        if link.source not in x.domain or link.target not in x.domain:
            raise ChartRenderError(f"Arc link {link.source}->{link.target} references an unknown node.")
        weight = f"<br/>Weight: {js_number(link.value)}" if link.value else ""
        arc = links.add(
            "path",
            class_="arc-link",
            d=_arc_link_path(x(link.source), x(link.target), baseline),
            fill="none",
            stroke=ARC_LINK,
            stroke_width=math.sqrt(link.value) if link.value else 1.5,
            opacity=0.4,
            data_source=link.source,
            data_target=link.target,
        )
        arc.tooltip(f"<strong>Connection</strong><br/>{escape(link.source)} → {escape(link.target)}{weight}")
        arc.hover(stroke=ARC_LINK_HOVER, opacity=1).animate("fade", delay=i * 50, duration=800)

    nodes = f.plot.add("g", class_="nodes")
    settle = len(data.links) * 50
    for i, node in enumerate(data.nodes):
        dot = nodes.add(
            "circle",
            class_="arc-node",
            cx=x(node.id),
            cy=baseline,
            r=6,
            fill=ARC_LINK,
            stroke="#fff",
            stroke_width=2,
            data_node=node.id,
        )
        dot.tooltip(f"<strong>{escape(node.label)}</strong><br/>ID: {escape(node.id)}")
        dot.hover(r=8, fill=ARC_LINK_HOVER).animate("pop", delay=settle + i * 80, duration=600)
        nodes.add("text", node.label, x=x(node.id), y=baseline + 25, text_anchor="middle", font_weight=500).animate(
            "fade", delay=settle + len(data.nodes) * 80 + 200, duration=400
        )

    f.root.add("text", "Network Arc Diagram", class_="chart-title", x=width / 2, y=20, text_anchor="middle", font_weight=600)
    return f.root


@register_renderer("chord")
def render_chord(data: ChordData, *, width: float, height: float) -> Node:
    """Group arcs around a circle joined by ribbons of mutual flow."""

    require_data("chord", data.labels)
    require_data("chord", data.matrix)
    if len(data.matrix) != len(data.labels):
        raise ChartRenderError("Chord matrix size does not match its labels.")
    outer_radius = min(width, height) / 2 - 40
    inner_radius = outer_radius - 24
    layout = chord_layout(data.matrix, pad_angle=0.05)
    f = centered(width, height)
    color = OrdinalScale(palettes.TABLEAU10, domain=data.labels)

    groups = f.plot.add("g", class_="groups")
    for group in layout.groups:
        label = data.labels[group.index]
        arc = groups.add(
            "path",
            class_="group",
            d=arc_path(
                inner_radius=inner_radius,
                outer_radius=outer_radius,
                start_angle=group.start_angle,
                end_angle=group.end_angle,
            ),
            fill=color(label),
            stroke="#fff",
            opacity=0.9,
        )
        arc.tooltip(f"<strong>{escape(label)}</strong><br/>Total: {fixed(group.value, 0)}")
        arc.hover(opacity=1).animate("fade", duration=700)

    ribbons = f.plot.add("g", class_="ribbons", fill_opacity=0.75)
    for i, chord in enumerate(layout.chords):
        source, target = data.labels[chord.source.index], data.labels[chord.target.index]
        ribbon = ribbons.add(
            "path",
            class_="ribbon",
            d=ribbon_path(
                radius=inner_radius,
                source_angles=(chord.source.start_angle, chord.source.end_angle),
                target_angles=(chord.target.start_angle, chord.target.end_angle),
            ),
            fill=color(source),
            stroke="#eceff1",
            opacity=0.75,
        )
        ribbon.tooltip(f"<strong>{escape(source)} → {escape(target)}</strong><br/>Value: {fixed(chord.source.value, 0)}")
        ribbon.hover(opacity=0.95).animate("fade", delay=i * 25, duration=900)

    labels = f.plot.add("g", class_="labels")
    for group in layout.groups:
        angle = (group.start_angle + group.end_angle) / 2
        flip = angle > math.pi
        labels.add(
            "text",
            data.labels[group.index],
            dy="0.35em",
            transform=f"rotate({fmt(angle * 180 / math.pi - 90)}) translate({fmt(outer_radius + 12)}) rotate({180 if flip else 0})",
            text_anchor="end" if flip else "start",
        )
    return f.root
