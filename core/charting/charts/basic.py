"""Core statistical charts: bars, lines, areas, points and slices."""

from __future__ import annotations

import math
from collections.abc import Sequence

from mockdata.dto import BubblePoint, DatedValue, FunnelStage, LabeledValue, ScatterPoint

from .. import palettes
from ..axes import axis_left
from ..errors import require_data
from ..registry import register_renderer
from ..scales import BandScale, LinearScale, OrdinalScale, SequentialScale, SqrtScale, TimeScale
from ..scene import Node, fmt, translate
from ..shapes import TAU, arc_centroid, arc_path, baseline_area_path, line_path, pie_layout, polar
from ._common import (
    Margin,
    bottom_axis,
    centered,
    escape,
    fixed,
    frame,
    js_number,
    legend,
    locale_number,
    short_date,
    x_axis_caption,
    y_axis_caption,
)

SCATTER_COLORS = {"A": "#1976d2", "B": "#dc004e", "C": "#4caf50"}
AREA_COLORS = ("#1976d2", "#dc004e", "#4caf50")


@register_renderer("bar")
def render_bar(data: Sequence[LabeledValue], *, width: float, height: float) -> Node:
    """Vertical bars that grow from the baseline."""

    require_data("bar", data)
    f = frame(width, height, Margin(20, 30, 60, 60))
    x = BandScale.with_padding([d.label for d in data], (0, f.inner_width), 0.2)
    y = LinearScale((0, max(d.value for d in data) or 100), (f.inner_height, 0)).nice()

    for d in data:
        top = y(d.value)
        bar = f.plot.add(
            "rect",
            class_="bar",
            x=x(d.label),
            y=top,
            width=x.bandwidth,
            height=f.inner_height - top,
            fill=palettes.PRIMARY,
            rx=4,
        )
        bar.tooltip(f"<strong>{escape(d.label)}</strong><br/>Value: {js_number(d.value)}")
        bar.hover(fill=palettes.PRIMARY_DARK).animate("grow-y", duration=800)

    bottom_axis(f, x, label_rotate=-45)
    f.plot.append(axis_left(y))
    x_axis_caption(f, "Categories")
    y_axis_caption(f, "Values")
    return f.root


@register_renderer("line")
def render_line(data: Sequence[DatedValue], *, width: float, height: float) -> Node:
    """A monotone line with a point per observation."""

    require_data("line", data)
    f = frame(width, height, Margin(20, 30, 60, 60))
    x = TimeScale((min(d.date for d in data), max(d.date for d in data)), (0, f.inner_width))
    y = LinearScale((0, max(d.value for d in data) or 100), (f.inner_height, 0)).nice()

    points = [(x(d.date), y(d.value)) for d in data]
    f.plot.add(
        "path",
        class_="line",
        d=line_path(points, curve="monotone_x"),
        fill="none",
        stroke=palettes.PRIMARY,
        stroke_width=2,
    ).animate("draw", duration=1500)

    for d, (cx, cy) in zip(data, points):
        dot = f.plot.add("circle", class_="dot", cx=cx, cy=cy, r=4, fill=palettes.PRIMARY)
        dot.tooltip(f"<strong>{short_date(d.date)}</strong><br/>Value: {fixed(d.value, 1)}")
        dot.hover(r=6, fill=palettes.PRIMARY_DARK).animate("pop", delay=1500, duration=300)

    bottom_axis(f, x, ticks=6, tick_format=lambda value: value.strftime("%b %d"))
    f.plot.append(axis_left(y))
    x_axis_caption(f, "Date")
    y_axis_caption(f, "Values")
    return f.root


@register_renderer("area")
def render_area(data: Sequence[Sequence[DatedValue]], *, width: float, height: float) -> Node:
    """Overlapping translucent areas, one per series."""

    require_data("area", data)
    observations = [d for series in data for d in series]
    require_data("area", observations)
    f = frame(width, height, Margin(20, 30, 60, 60))
    x = TimeScale((min(d.date for d in observations), max(d.date for d in observations)), (0, f.inner_width))
    y = LinearScale((0, max(d.value for d in observations) or 100), (f.inner_height, 0)).nice()
    baseline = y(0)
    labels = [f"Series {i + 1}" for i in range(len(data))]

    for i, series in enumerate(data):
        color = palettes.categorical(AREA_COLORS, i)
        area = f.plot.add(
            "path",
            class_="area",
            d=baseline_area_path([(x(d.date), y(d.value)) for d in series], baseline, curve="monotone_x"),
            fill=color,
            opacity=0.6,
        )
        peak = max((d.value for d in series), default=0.0)
        area.tooltip(f"<strong>{labels[i]}</strong><br/>Peak: {fixed(peak, 1)}")
        area.hover(opacity=0.85).animate("fade", delay=i * 200, duration=1000)

    bottom_axis(f, x, ticks=6, tick_format=lambda value: value.strftime("%b %d"))
    f.plot.append(axis_left(y))
    x_axis_caption(f, "Date")
    y_axis_caption(f, "Values")
    legend(
        f.plot,
        [(palettes.categorical(AREA_COLORS, i), label) for i, label in enumerate(labels)],
        x=f.inner_width - 100,
        y=0,
        opacity=0.6,
    )
    return f.root


@register_renderer("scatter")
def render_scatter(data: Sequence[ScatterPoint], *, width: float, height: float) -> Node:
    """Points colored by category with a side legend."""

    require_data("scatter", data)
    f = frame(width, height, Margin(20, 120, 60, 60))
    x = LinearScale((0, max(d.x for d in data) or 100), (0, f.inner_width)).nice()
    y = LinearScale((0, max(d.y for d in data) or 100), (f.inner_height, 0)).nice()
    color = OrdinalScale(tuple(SCATTER_COLORS.values()), domain=SCATTER_COLORS)

    for i, d in enumerate(data):
        dot = f.plot.add("circle", class_="dot", cx=x(d.x), cy=y(d.y), r=5, fill=color(d.category), opacity=0.7)
        dot.tooltip(
            f"<strong>Category {escape(d.category)}</strong><br/>X: {fixed(d.x, 1)}<br/>Y: {fixed(d.y, 1)}"
        )
        dot.hover(r=8, opacity=1).animate("pop", delay=i * 5, duration=800)

    bottom_axis(f, x)
    f.plot.append(axis_left(y))
    x_axis_caption(f, "X Axis")
    y_axis_caption(f, "Y Axis")
    legend(
        f.plot,
        [(color(key), f"Category {key}") for key in SCATTER_COLORS],
        x=f.inner_width + 20,
        y=20,
        row_height=25,
        marker="circle",
        size=14,
        opacity=0.7,
    )
    return f.root


@register_renderer("pie")
def render_pie(
    data: Sequence[LabeledValue],
    *,
    width: float,
    height: float,
    inner_radius: float = 0,
) -> Node:
    """Pie chart in data order; a positive `inner_radius` draws a donut.

    Args:
        data: Slice labels and values.
        width: Canvas width.
        height: Canvas height.
        inner_radius: Radius of the hollow centre.
    """

    require_data("pie", data)
    f = centered(width, height)
    radius = min(width, height) / 2 - 40
    color = OrdinalScale(palettes.SET3, domain=[d.label for d in data])
    total = sum(d.value for d in data)
    slices = pie_layout([d.value for d in data])

    for d, piece in zip(data, slices):
        angles = {"start_angle": piece.start_angle, "end_angle": piece.end_angle}
        group = f.plot.add("g", class_="arc")
        path = group.add(
            "path",
            class_="slice",
            d=arc_path(inner_radius=inner_radius, outer_radius=radius, **angles),
            fill=color(d.label),
            stroke="white",
            stroke_width=2,
        )
        share = d.value / total * 100 if total else 0.0
        path.tooltip(
            f"<strong>{escape(d.label)}</strong><br/>Value: {js_number(d.value)}<br/>Percentage: {fixed(share, 1)}%"
        )
        path.hover(d=arc_path(inner_radius=inner_radius, outer_radius=radius + 10, **angles))
        path.animate("radial", duration=1000)
        cx, cy = arc_centroid(inner_radius=inner_radius, outer_radius=radius, **angles)
        group.add(
            "text",
            d.label,
            transform=translate(cx, cy),
            text_anchor="middle",
            font_size=12,
            fill="#333",
            font_weight="bold",
        ).animate("fade", delay=1000, duration=500)
    return f.root


@register_renderer("radar")
def render_radar(data: Sequence[LabeledValue], *, width: float, height: float) -> Node:
    """Single-profile radar with concentric level rings."""

    require_data("radar", data)
    f = centered(width, height)
    radius = min(width, height) / 2 - 40
    slice_angle = TAU / len(data)
    max_value = max(d.value for d in data) or 100
    r = LinearScale((0, max_value), (0, radius))

    levels = 5
    for i in range(1, levels + 1):
        f.plot.add(
            "circle",
            class_="grid-circle",
            r=radius * i / levels,
            fill="none",
            stroke="#CDCDCD",
            stroke_width=1,
            opacity=0.5,
        )
    for i, d in enumerate(data):
        axis = f.plot.add("g", class_="axis")
        x2, y2 = polar(slice_angle * i, r(max_value))
        axis.add("line", x1=0, y1=0, x2=x2, y2=y2, stroke="#CDCDCD", stroke_width=1)
        lx, ly = polar(slice_angle * i, r(max_value) + 20)
        axis.add("text", d.label, x=lx, y=ly, text_anchor="middle", font_size=12, font_weight="bold")

    points = [polar(slice_angle * i, r(d.value)) for i, d in enumerate(data)]
    f.plot.add(
        "path",
        class_="radar-area",
        d=line_path(points, curve="linear_closed"),
        fill=palettes.PRIMARY,
        fill_opacity=0.3,
        stroke=palettes.PRIMARY,
        stroke_width=2,
    ).animate("fade", duration=1000)
    for d, (cx, cy) in zip(data, points):
        dot = f.plot.add("circle", class_="dot", cx=cx, cy=cy, r=5, fill=palettes.PRIMARY, stroke="#fff", stroke_width=2)
        dot.tooltip(f"<strong>{escape(d.label)}</strong><br/>Value: {js_number(d.value)}")
        dot.hover(r=8).animate("pop", delay=1000, duration=500)
    return f.root


@register_renderer("bubble")
def render_bubble(data: Sequence[BubblePoint], *, width: float, height: float) -> Node:
    """Scatter with area-true bubble sizes."""

    require_data("bubble", data)
    f = frame(width, height, Margin(20, 120, 60, 60))
    x = LinearScale((0, max(d.x for d in data) or 100), (0, f.inner_width)).nice()
    y = LinearScale((0, max(d.y for d in data) or 100), (f.inner_height, 0)).nice()
    size = SqrtScale((0, max(d.size for d in data) or 100), (4, 28))
    categories = list(dict.fromkeys(d.category for d in data))
    color = OrdinalScale(palettes.TABLEAU10, domain=categories)

    for i, d in enumerate(data):
        bubble = f.plot.add(
            "circle",
            class_="bubble",
            cx=x(d.x),
            cy=y(d.y),
            r=size(d.size),
            fill=color(d.category),
            fill_opacity=0.65,
            stroke="#fff",
            stroke_width=1,
        )
        bubble.tooltip(
            f"<strong>{escape(d.label)}</strong><br/>Category: {escape(d.category)}"
            f"<br/>X: {fixed(d.x, 1)}<br/>Y: {fixed(d.y, 1)}<br/>Size: {fixed(d.size, 1)}"
        )
        bubble.hover(fill_opacity=0.9).animate("pop", delay=i * 8, duration=700)

    bottom_axis(f, x)
    f.plot.append(axis_left(y))
    x_axis_caption(f, "X Axis")
    y_axis_caption(f, "Y Axis")
    legend(
        f.plot,
        [(color(c), c) for c in categories],
        x=f.inner_width + 20,
        y=20,
        row_height=24,
        marker="circle",
        size=14,
        opacity=0.65,
        text_y=11,
    )
    return f.root


@register_renderer("lollipop")
def render_lollipop(data: Sequence[LabeledValue], *, width: float, height: float) -> Node:
    """Ranked stems with a dot head, sorted by descending value."""

    require_data("lollipop", data)
    ranked = sorted(data, key=lambda d: d.value, reverse=True)
    f = frame(width, height, Margin(20, 30, 80, 60))
    x = BandScale.with_padding([d.label for d in ranked], (0, f.inner_width), 0.5)
    y = LinearScale((0, max(d.value for d in ranked) or 1), (f.inner_height, 0)).nice()

    for d in ranked:
        cx = x.center(d.label)
        f.plot.add(
            "line",
            class_="lollipop-stem",
            x1=cx,
            x2=cx,
            y1=f.inner_height,
            y2=y(d.value),
            stroke="#90caf9",
            stroke_width=3,
        ).animate("grow-y", duration=700)
    for i, d in enumerate(ranked):
        head = f.plot.add("circle", class_="lollipop-head", cx=x.center(d.label), cy=y(d.value), r=8, fill=palettes.PRIMARY)
        head.tooltip(f"<strong>{escape(d.label)}</strong><br/>Value: {fixed(d.value, 1)}")
        head.hover(r=10, fill="#0d47a1").animate("pop", delay=i * 40, duration=700)

    bottom_axis(f, x, label_rotate=-35)
    f.plot.append(axis_left(y))
    x_axis_caption(f, "Categories", offset=15)
    y_axis_caption(f, "Values")
    return f.root


@register_renderer("waterfall")
def render_waterfall(data: Sequence[LabeledValue], *, width: float, height: float) -> Node:
    """Floating bars for running totals, joined by dashed connectors."""

    require_data("waterfall", data)
    f = frame(width, height, Margin(20, 30, 70, 70))
    steps: list[tuple[LabeledValue, float, float]] = []
    cumulative = 0.0
    for entry in data:
        start = cumulative
        cumulative += entry.value
        steps.append((entry, start, cumulative))

    low = min(min(start, end) for _entry, start, end in steps)
    high = max(max(start, end) for _entry, start, end in steps)
    x = BandScale.with_padding([entry.label for entry, _start, _end in steps], (0, f.inner_width), 0.2)
    y = LinearScale((min(0.0, low), high), (f.inner_height, 0)).nice()

    f.plot.add("line", class_="baseline", x1=0, x2=f.inner_width, y1=y(0), y2=y(0), stroke="#78909c", stroke_width=1)
    for entry, start, end in steps:
        bar = f.plot.add(
            "rect",
            class_="wf-bar",
            x=x(entry.label),
            y=y(max(start, end)),
            width=x.bandwidth,
            height=abs(y(start) - y(end)),
            fill=palettes.POSITIVE_DARK if entry.value >= 0 else palettes.NEGATIVE_DARK,
            opacity=0.9,
        )
        sign = "+" if entry.value >= 0 else ""
        bar.tooltip(
            f"<strong>{escape(entry.label)}</strong><br/>Change: {sign}{fixed(entry.value, 1)}"
            f"<br/>Cumulative: {fixed(end, 1)}"
        )
        bar.hover(opacity=1).animate("grow-y", duration=800)
    for (entry, _start, end), (following, _next_start, _next_end) in zip(steps, steps[1:]):
        f.plot.add(
            "line",
            class_="connector",
            x1=x(entry.label) + x.bandwidth,
            x2=x(following.label),
            y1=y(end),
            y2=y(end),
            stroke="#607d8b",
            stroke_dasharray="4,3",
        )

    bottom_axis(f, x, label_rotate=-20)
    f.plot.append(axis_left(y))
    x_axis_caption(f, "Stages", offset=15)
    y_axis_caption(f, "Cumulative Value", offset=18)
    return f.root


@register_renderer("funnel")
def render_funnel(data: Sequence[FunnelStage], *, width: float, height: float) -> Node:
    """Trapezoid per stage narrowing toward the next stage's value."""

    require_data("funnel", data)
    f = frame(width, height, Margin(20, 30, 30, 30))
    iw = f.inner_width
    stage_height = f.inner_height / len(data)
    span = LinearScale((0, max(d.value for d in data) or 1), (iw * 0.25, iw))
    color = SequentialScale("Blues", (0, len(data) - 1))

    for index, stage in enumerate(data):
        next_value = data[index + 1].value if index + 1 < len(data) else stage.value * 0.8
        top_width, bottom_width = span(stage.value), span(next_value)
        y_top, y_bottom = index * stage_height, (index + 1) * stage_height
        top_left = (iw - top_width) / 2
        bottom_left = (iw - bottom_width) / 2
        outline = (
            f"M {fmt(top_left)},{fmt(y_top)} L {fmt(top_left + top_width)},{fmt(y_top)} "
            f"L {fmt(bottom_left + bottom_width)},{fmt(y_bottom)} L {fmt(bottom_left)},{fmt(y_bottom)} Z"
        )
        piece = f.plot.add(
            "path", class_="funnel-stage", d=outline, fill=color(index), opacity=0.88, stroke="#fff", stroke_width=1.5
        )
        previous = data[index - 1].value if index else 0.0
        conversion = 100.0 if index == 0 else (stage.value / previous * 100 if previous else math.nan)
        piece.tooltip(
            f"<strong>{escape(stage.stage)}</strong><br/>Value: {locale_number(stage.value)}"
            f"<br/>Step Conversion: {fixed(conversion, 1)}%"
        )
        piece.hover(opacity=1).animate("fade", delay=index * 80, duration=700)
        f.plot.add(
            "text",
            f"{stage.stage}: {locale_number(stage.value)}",
            class_="funnel-label",
            x=iw / 2,
            y=y_top + stage_height / 2 + 4,
            text_anchor="middle",
            font_size=12,
            fill="#0d1b2a",
            font_weight=600,
        )
    return f.root
