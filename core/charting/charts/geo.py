"""Map-style charts over abstract 0-100 region polygons."""

from __future__ import annotations

import math
from collections.abc import Sequence

from mockdata.dto import DotDensityData, FlowMapData, GeoRegion, VoronoiPoint

from .. import palettes
from ..axes import axis_left
from ..errors import ChartRenderError, require_data
from ..layout.geometry import scale_about, vertex_mean
from ..layout.tessellation import voronoi_cells
from ..registry import register_renderer
from ..scales import LinearScale, SequentialScale, SqrtScale, extent
from ..scene import Node, translate
from ..shapes import PathBuilder, line_path, polygon_path
from ._common import Frame, Margin, bottom_axis, escape, fixed, frame, gradient_legend, js_number, locale_number

MAP_DOMAIN = (0.0, 100.0)
REGION_FILL = "#eceff1"
REGION_OUTLINE = "#cfd8dc"
DOT_FILL = "#6a1b9a"
FLOW_STROKE = "#2196f3"
FLOW_STROKE_HOVER = "#1565c0"
LOCATION_FILL = "#ff5722"
# Background land mass behind the flow map locations.
FLOW_MAP_OUTLINE = ((10, 10), (90, 15), (85, 85), (20, 80))


def _map_scales(f: Frame) -> tuple[LinearScale, LinearScale]:
    return LinearScale(MAP_DOMAIN, (0, f.inner_width)), LinearScale(MAP_DOMAIN, (0, f.inner_height))


def _project(points: Sequence[tuple[float, float]], sx: LinearScale, sy: LinearScale) -> list[tuple[float, float]]:
    return [(sx(x), sy(y)) for x, y in points]


def _outlines(f: Frame, regions: Sequence[GeoRegion], sx: LinearScale, sy: LinearScale, *, fill: str) -> None:
    for region in regions:
        f.plot.add(
            "path",
            class_="region-outline",
            d=polygon_path(_project(region.points, sx, sy)),
            fill=fill,
            stroke=REGION_OUTLINE,
            stroke_width=1.5,
        )


@register_renderer("choropleth")
def render_choropleth(data: Sequence[GeoRegion], *, width: float, height: float) -> Node:
    """Regions shaded by their index value on a YlOrRd ramp."""

    require_data("choropleth", data)
    f = frame(width, height, Margin(20, 80, 20, 20))
    sx, sy = _map_scales(f)
    low, high = min(d.value for d in data), max(d.value for d in data)
    color = SequentialScale("YlOrRd", (low or 0, high or 100))

    for i, region in enumerate(data):
        path = f.plot.add(
            "path",
            class_="region",
            d=polygon_path(_project(region.points, sx, sy)),
            fill=color(region.value),
            stroke="#fff",
            stroke_width=2,
        )
        path.tooltip(f"<strong>{escape(region.name)}</strong><br/>Index: {fixed(region.value, 0)}")
        path.hover(stroke="#263238", stroke_width=2.5).animate("fade", delay=i * 50, duration=700)

    for region in data:
        cx, cy = vertex_mean(region.points)
        f.plot.add("text", region.name, class_="region-label", x=sx(cx), y=sy(cy), text_anchor="middle", fill="#263238")

    gradient_legend(
        f.root,
        f.plot,
        gradient_id="choropleth-gradient",
        color=color,
        domain=color.domain,
        x=f.inner_width + 20,
        y=20,
        width=14,
        height=min(160.0, f.inner_height - 40),
        title="Index",
    )
    return f.root


@register_renderer("proportional_symbol")
def render_proportional_symbol(data: Sequence[GeoRegion], *, width: float, height: float) -> Node:
    """A circle per region; circle area is proportional to population."""

    require_data("proportional_symbol", data)
    f = frame(width, height, Margin.uniform(20))
    sx, sy = _map_scales(f)
    radius = SqrtScale((0, max(d.population for d in data) or 1000), (4, 28))

    _outlines(f, data, sx, sy, fill=REGION_FILL)
    for i, region in enumerate(data):
        cx, cy = vertex_mean(region.points)
        symbol = f.plot.add(
            "circle",
            class_="symbol",
            cx=sx(cx),
            cy=sy(cy),
            r=radius(region.population),
            fill=palettes.PRIMARY,
            fill_opacity=0.55,
            stroke="#0d47a1",
            stroke_width=1.2,
        )
        symbol.tooltip(f"<strong>{escape(region.name)}</strong><br/>Population: {locale_number(region.population)}")
        symbol.hover(fill_opacity=0.8).animate("pop", delay=i * 60, duration=700)
    return f.root


@register_renderer("dot_density")
def render_dot_density(data: DotDensityData, *, width: float, height: float) -> Node:
    """Population samples scattered inside their region outlines."""

    require_data("dot_density", data.regions)
    f = frame(width, height, Margin.uniform(20))
    sx, sy = _map_scales(f)
    names = {region.id: region.name for region in data.regions}

    _outlines(f, data.regions, sx, sy, fill="#f5f5f5")
    dots = f.plot.add("g", class_="dots")
    for i, dot in enumerate(data.dots):
        circle = dots.add(
            "circle",
            class_="density-dot",
            cx=sx(dot.x),
            cy=sy(dot.y),
            r=1.6,
            fill=DOT_FILL,
            fill_opacity=0.65,
        )
        circle.tooltip(f"<strong>{escape(names.get(dot.region_id, dot.region_id))}</strong><br/>Population sample")
        circle.hover(r=3, fill_opacity=1).animate("pop", delay=i * 1.5, duration=650)

    key = f.plot.add("g", class_="legend", transform=translate(f.inner_width - 180, f.inner_height - 40))
    key.add("circle", cx=6, cy=6, r=2, fill=DOT_FILL, fill_opacity=0.65)
    key.add("text", "Each dot ≈ population sample", x=16, y=10, fill="#37474f", font_size=12)
    return f.root


@register_renderer("cartogram")
def render_cartogram(data: Sequence[GeoRegion], *, width: float, height: float) -> Node:
    """Regions scaled about their centre in proportion to their value."""

    require_data("cartogram", data)
    f = frame(width, height, Margin.uniform(20))
    sx, sy = _map_scales(f)
    value_extent = extent(d.value for d in data)
    distortion = LinearScale(value_extent, (0.8, 1.45))
    color = SequentialScale("Oranges", value_extent)

    for i, region in enumerate(data):
        scaled = scale_about(region.points, distortion(region.value))
        path = f.plot.add(
            "path",
            class_="cartogram-region",
            d=polygon_path(_project(scaled, sx, sy)),
            fill=color(region.value),
            stroke="#fff",
            stroke_width=2,
        )
        path.tooltip(f"<strong>{escape(region.name)}</strong><br/>Distortion Value: {fixed(region.value, 0)}")
        path.hover(stroke="#e65100", stroke_width=2.5).animate("fade", delay=i * 60, duration=800)
    return f.root


def _flow_curve(x0: float, y0: float, x1: float, y1: float) -> str:
    """Quadratic curve bowed to the left of the travel direction."""

    path = PathBuilder()
    path.move_to(x0, y0)
    dx, dy = x1 - x0, y1 - y0
    length = math.hypot(dx, dy)
    if length == 0:
        path.line_to(x1, y1)
        return str(path)
    offset = length * 0.2
    path.quad_to((x0 + x1) / 2 - dy / length * offset, (y0 + y1) / 2 + dx / length * offset, x1, y1)
    return str(path)


@register_renderer("flow_map")
def render_flow_map(data: FlowMapData, *, width: float, height: float) -> Node:
    """Curved arrows between locations; stroke width encodes volume."""

    require_data("flow_map", data.locations)
    f = frame(width, height, Margin.uniform(40))
    x = LinearScale(extent(d.x for d in data.locations), (0, f.inner_width)).nice()
    y = LinearScale(extent(d.y for d in data.locations), (f.inner_height, 0)).nice()
    flow_width = LinearScale((0, max((d.value for d in data.flows), default=0) or 1), (1, 15))
    locations = {location.id: location for location in data.locations}

    defs = f.root.add("defs")
    marker = defs.add(
        "marker",
        id="flow-map-arrow",
        viewBox="0 0 10 10",
        refX=5,
        refY=5,
        markerWidth=6,
        markerHeight=6,
        orient="auto-start-reverse",
    )
    marker.add("path", d="M 0 0 L 10 5 L 0 10 z", fill=FLOW_STROKE)

    f.plot.add(
        "path",
        class_="map-outline",
        d=line_path([(x(px), y(py)) for px, py in FLOW_MAP_OUTLINE], curve="basis"),
        fill="#f0f0f0",
        stroke="#ccc",
        stroke_width=2,
    )

    for i, flow in enumerate(data.flows):
        source, target = locations.get(flow.source), locations.get(flow.target)
        if source is None or target is None:
            raise ChartRenderError(f"Flow {flow.source}->{flow.target} references an unknown location.")
        arrow = f.plot.add(
            "path",
            class_="flow",
            d=_flow_curve(x(source.x), y(source.y), x(target.x), y(target.y)),
            fill="none",
            stroke=FLOW_STROKE,
            stroke_width=flow_width(flow.value),
            opacity=0.6,
            marker_end="url(#flow-map-arrow)",
        )
        arrow.tooltip(
            f"<strong>Flow</strong><br/>{escape(source.name)} → {escape(target.name)}<br/>Value: {js_number(flow.value)}"
        )
        arrow.hover(stroke=FLOW_STROKE_HOVER, opacity=0.9).animate("fade", delay=i * 100, duration=1000)

    settle = len(data.flows) * 100
    for i, location in enumerate(data.locations):
        group = f.plot.add("g", class_="location")
        dot = group.add(
            "circle",
            cx=x(location.x),
            cy=y(location.y),
            r=7,
            fill=LOCATION_FILL,
            stroke="#fff",
            stroke_width=2,
        )
        dot.tooltip(f"<strong>{escape(location.name)}</strong><br/>Location ID: {escape(location.id)}")
        dot.hover(r=10).animate("pop", delay=settle + i * 100, duration=600)
        group.add(
            "text", location.name, x=x(location.x), y=y(location.y) - 12, text_anchor="middle", font_weight=600
        ).animate("fade", delay=settle + len(data.locations) * 100 + 200, duration=400)

    f.root.add(
        "text", "Flow Map (Migration/Movement)", class_="chart-title", x=width / 2, y=20, text_anchor="middle", font_weight=600
    )
    return f.root


@register_renderer("voronoi")
def render_voronoi(data: Sequence[VoronoiPoint], *, width: float, height: float) -> Node:
    """Nearest-site partition of the plot area."""

    require_data("voronoi", data)
    f = frame(width, height, Margin.uniform(40))
    x = LinearScale(extent(d.x for d in data), (0, f.inner_width)).nice()
    y = LinearScale(extent(d.y for d in data), (f.inner_height, 0)).nice()
    sites = [(x(d.x), y(d.y)) for d in data]
    cells = voronoi_cells(sites, bounds=(0, 0, f.inner_width, f.inner_height))

    color = None
    if any(d.value is not None for d in data):
        values = [d.value or 0 for d in data]
        color = SequentialScale("plasma", (min(values) or 0, max(values) or 100))

    for i, (point, cell) in enumerate(zip(data, cells)):
        if not cell:
            continue
        fill = color(point.value or 0) if color else "#e3f2fd"
        value = f"<br/>Value: {fixed(point.value, 2)}" if point.value is not None else ""
        path = f.plot.add(
            "path",
            class_="cell",
            d=polygon_path(cell),
            fill=fill,
            stroke=palettes.PRIMARY,
            stroke_width=1.5,
            opacity=0.7,
        )
        path.tooltip(
            f"<strong>{escape(point.label or f'Point {i + 1}')}</strong>"
            f"<br/>X: {fixed(point.x, 2)}<br/>Y: {fixed(point.y, 2)}{value}"
        )
        path.hover(fill=fill if color else "#bbdefb", stroke_width=3).animate("fade", delay=i * 30, duration=800)

    for cx, cy in sites:
        f.plot.add("circle", class_="site", cx=cx, cy=cy, r=4, fill="#d32f2f", stroke="#fff", stroke_width=2).animate(
            "pop", delay=len(data) * 30 + 200, duration=600
        )
    for point in data:
        if point.label:
            f.plot.add(
                "text", point.label, class_="label", x=x(point.x), y=y(point.y) - 10, text_anchor="middle", font_weight=600
            ).animate("fade", delay=len(data) * 30 + 800, duration=400)

    bottom_axis(f, x, ticks=6)
    f.plot.append(axis_left(y, ticks=6))
    f.root.add(
        "text",
        "Voronoi Diagram (Nearest Neighbor Partition)",
        class_="chart-title",
        x=width / 2,
        y=20,
        text_anchor="middle",
        font_weight=600,
    )
    return f.root
