"""Time-indexed charts: prices, stacked series, rankings and schedules."""

from __future__ import annotations

import math
from collections.abc import Sequence
from datetime import date
from typing import Literal

from mockdata.dto import (
    BumpSeries,
    Candle,
    DatedValue,
    GanttTask,
    MultiSeries,
    SlopeItem,
    SmallMultiple,
    Sparkline,
    TimelineEvent,
)

from .. import palettes
from ..axes import axis_bottom, axis_left, axis_right, chart_title, grid_lines
from ..errors import ChartRenderError, require_data
from ..layout.stack import stack
from ..registry import register_renderer
from ..scales import BandScale, LinearScale, OrdinalScale, PointScale, TimeScale, extent
from ..scene import Node, svg_root, translate
from ..shapes import area_path, baseline_area_path, line_path
from ._common import (
    Margin,
    bottom_axis,
    escape,
    fixed,
    frame,
    js_number,
    legend,
    short_date,
    x_axis_caption,
    y_axis_caption,
)

HORIZON_BANDS = 3
OPEN_CLOSE_UP = "#2e7d32"
OPEN_CLOSE_DOWN = "#c62828"
NEUTRAL = "#9e9e9e"


def _month_day(value: date) -> str:
    return value.strftime("%b %d")


def _signed(value: float, digits: int = 1) -> str:
    return f"{'+' if value > 0 else ''}{fixed(value, digits)}"


@register_renderer("candlestick")
def render_candlestick(data: Sequence[Candle], *, width: float, height: float) -> Node:
    """OHLC candles over a band of trading days."""

    require_data("candlestick", data)
    f = frame(width, height, Margin(20, 30, 60, 65))
    keys = [d.date.isoformat() for d in data]
    x = BandScale.with_padding(keys, (0, f.inner_width), 0.35)
    low = min(d.low for d in data)
    high = max(d.high for d in data)
    y = LinearScale((low * 0.98, high * 1.02), (f.inner_height, 0)).nice()

    for i, (key, d) in enumerate(zip(keys, data)):
        center = x.center(key)
        f.plot.add(
            "line",
            class_="wick",
            x1=center,
            x2=center,
            y1=y(d.high),
            y2=y(d.low),
            stroke="#546e7a",
            stroke_width=1.3,
        ).animate("fade", duration=700)
        top = y(max(d.open, d.close))
        candle = f.plot.add(
            "rect",
            class_="candle",
            x=x(key),
            y=top,
            width=x.bandwidth,
            height=max(2.0, abs(y(d.open) - y(d.close))),
            fill=OPEN_CLOSE_UP if d.close >= d.open else OPEN_CLOSE_DOWN,
            opacity=0.88,
        )
        candle.tooltip(
            f"<strong>{d.date.strftime('%b %d, %Y')}</strong><br/>Open: {fixed(d.open, 2)}"
            f"<br/>High: {fixed(d.high, 2)}<br/>Low: {fixed(d.low, 2)}<br/>Close: {fixed(d.close, 2)}"
        )
        candle.hover(opacity=1).animate("grow-y", delay=i * 15, duration=700)

    bottom_axis(
        f,
        x,
        tick_values=keys[::5],
        tick_format=lambda key: _month_day(date.fromisoformat(key)),
    )
    f.plot.append(axis_left(y))
    x_axis_caption(f, "Date", offset=12)
    y_axis_caption(f, "Price", offset=18)
    return f.root


@register_renderer("streamgraph")
def render_streamgraph(data: MultiSeries, *, width: float, height: float) -> Node:
    """Layers stacked around a wiggling baseline."""

    require_data("streamgraph", data.rows)
    f = frame(width, height, Margin(20, 30, 60, 60))
    layers = stack(data.keys, [row.values for row in data.rows], offset="wiggle")
    x = TimeScale(extent(row.date for row in data.rows), (0, f.inner_width))
    lowest = min(point[0] for layer in layers for point in layer.points)
    highest = max(point[1] for layer in layers for point in layer.points)
    y = LinearScale((lowest, highest), (f.inner_height, 0))
    color = OrdinalScale(palettes.SET2, data.keys)

    for layer in layers:
        xs = [x(row.date) for row in data.rows]
        path = f.plot.add(
            "path",
            class_="stream-layer",
            d=area_path(
                [(px, y(hi)) for px, (_lo, hi) in zip(xs, layer.points)],
                [(px, y(lo)) for px, (lo, _hi) in zip(xs, layer.points)],
                curve="basis",
            ),
            fill=color(layer.key),
            opacity=0.8,
        )
        values = data.series(layer.key)
        path.tooltip(f"<strong>{escape(layer.key)}</strong><br/>Peak: {fixed(max(values), 1)}")
        path.hover(opacity=0.95).animate("fade", delay=layer.index * 100, duration=900)

    bottom_axis(f, x, ticks=8, tick_format=_month_day)
    f.plot.append(axis_left(y, ticks=6))
    legend(
        f.plot,
        [(color(key), key) for key in data.keys],
        x=f.inner_width - 120,
        y=10,
        row_height=22,
        size=12,
        text_x=18,
        text_y=10,
    )
    return f.root


@register_renderer("stacked_area")
def render_stacked_area(data: MultiSeries, *, width: float, height: float) -> Node:
    """Series stacked from a zero baseline."""

    require_data("stacked_area", data.rows)
    f = frame(width, height, Margin(20, 120, 60, 60))
    layers = stack(data.keys, [row.values for row in data.rows])
    x = TimeScale(extent(row.date for row in data.rows), (0, f.inner_width))
    y = LinearScale((0, max(point[1] for point in layers[-1].points) or 100), (f.inner_height, 0)).nice()
    color = OrdinalScale(palettes.CATEGORY10, data.keys)

    for layer in layers:
        group = f.plot.add("g", class_="layer")
        xs = [x(row.date) for row in data.rows]
        path = group.add(
            "path",
            class_="area",
            d=area_path(
                [(px, y(hi)) for px, (_lo, hi) in zip(xs, layer.points)],
                [(px, y(lo)) for px, (lo, _hi) in zip(xs, layer.points)],
                curve="monotone_x",
            ),
            fill=color(layer.key),
            opacity=0.8,
        )
        values = data.series(layer.key)
        path.tooltip(
            f"<strong>{escape(layer.key)}</strong><br/>Average: {fixed(sum(values) / len(values), 1)}"
        )
        path.hover(opacity=1).animate("wipe", duration=1000)

    bottom_axis(f, x, ticks=6, label_rotate=-45)
    f.plot.append(axis_left(y))
    legend(
        f.plot,
        [(color(key), key) for key in data.keys],
        x=f.inner_width + 10,
        y=0,
        size=12,
        text_x=18,
        text_y=10,
        rx=2,
    )
    x_axis_caption(f, "Date")
    y_axis_caption(f, "Values")
    return f.root


@register_renderer("horizon")
def render_horizon(data: Sequence[DatedValue], *, width: float, height: float) -> Node:
    """Folds a signed series into stacked color bands.

    Each band holds one third of the absolute range. Positive values grow
    upward in blues; negative values are mirrored so they hang from the top
    of the same band slot in reds.
    """

    require_data("horizon", data)
    f = frame(width, height, Margin(20, 30, 40, 60))
    x = TimeScale(extent(d.date for d in data), (0, f.inner_width))
    max_abs = max(abs(d.value) for d in data) or 1.0
    band_span = max_abs / HORIZON_BANDS
    band_height = f.inner_height / HORIZON_BANDS
    xs = [x(d.date) for d in data]

    for band in range(HORIZON_BANDS):
        lo, hi = band * band_span, (band + 1) * band_span
        slot = f.inner_height - (band + 1) * band_height
        shade = (band + 1) / HORIZON_BANDS
        for sign, ramp, opacity in ((1, "Blues", 0.8), (-1, "Reds", 0.65)):
            heights = [max(0.0, min(max(0.0, sign * d.value), hi) - lo) for d in data]
            points = [(px, band_height - h / band_span * band_height) for px, h in zip(xs, heights)]
            if sign > 0:
                transform = translate(0, slot)
                label = "Above zero"
            else:
                transform = f"{translate(0, slot + band_height)} scale(1,-1)"
                label = "Below zero"
            path = f.plot.add(
                "path",
                class_="horizon-band",
                d=baseline_area_path(points, band_height, curve="monotone_x"),
                transform=transform,
                fill=palettes.interpolate(ramp, shade),
                opacity=opacity,
            )
            path.tooltip(
                f"<strong>{label}, band {band + 1}</strong><br/>Range: {fixed(lo, 1)} to {fixed(hi, 1)}"
                f"<br/>Days in band: {sum(1 for h in heights if h > 0)}"
            )
            path.hover(opacity=1).animate("fade", delay=band * 120, duration=800)

    f.plot.add("line", class_="baseline", x1=0, x2=f.inner_width, y1=f.inner_height, y2=f.inner_height, stroke="#607d8b")
    bottom_axis(f, x, ticks=8, tick_format=_month_day)
    return f.root


@register_renderer("bump")
def render_bump(data: Sequence[BumpSeries], *, width: float, height: float) -> Node:
    """Rank trajectories; rank 1 sits at the top."""

    require_data("bump", data)
    f = frame(width, height, Margin(30, 80, 40, 60))
    times = [p.time for p in data[0].points]
    x = PointScale(times, (0, f.inner_width), padding=0.2)
    max_rank = max(p.rank for series in data for p in series.points)
    y = LinearScale((1, max_rank), (0, f.inner_height))

    for i, series in enumerate(data):
        color = palettes.categorical(palettes.TABLEAU10, i)
        points = [(x(p.time), y(p.rank)) for p in series.points]
        f.plot.add(
            "path",
            class_="bump-line",
            d=line_path(points, curve="monotone_x"),
            fill="none",
            stroke=color,
            stroke_width=3,
            opacity=0.9,
        ).animate("draw", delay=i * 80, duration=1000)
        for p, (cx, cy) in zip(series.points, points):
            dot = f.plot.add("circle", class_="dot", cx=cx, cy=cy, r=4, fill=color, stroke="#fff", stroke_width=1.5)
            dot.tooltip(f"<strong>{escape(series.name)}</strong><br/>{escape(p.time)}: #{p.rank}")
            dot.hover(r=6).animate("pop", delay=i * 80 + 800, duration=300)
        end_x, end_y = points[-1]
        f.plot.add("text", series.name, x=end_x + 8, y=end_y + 4, font_size=11, fill=color)

    bottom_axis(f, x)
    f.plot.append(axis_left(y, tick_values=list(range(1, max_rank + 1)), tick_format=lambda rank: f"#{round(rank)}"))
    return f.root


@register_renderer("timeline")
def render_timeline(data: Sequence[TimelineEvent], *, width: float, height: float) -> Node:
    """Events alternating above and below a horizontal time line."""

    require_data("timeline", data)
    f = frame(width, height, Margin(60, 40, 60, 40))
    events = sorted(data, key=lambda event: event.date)
    x = TimeScale((events[0].date, events[-1].date), (0, f.inner_width))
    color = OrdinalScale(palettes.SET2, [event.category or "default" for event in data])
    axis_y = f.inner_height / 2

    f.plot.add("line", class_="timeline-axis", x1=0, x2=f.inner_width, y1=axis_y, y2=axis_y, stroke="#666", stroke_width=3)
    for i, event in enumerate(events):
        event_x = x(event.date)
        top = i % 2 == 0
        label_y = axis_y - 80 if top else axis_y + 80
        stem_y = axis_y - 10 if top else axis_y + 10
        fill = color(event.category or "default")
        group = f.plot.add("g", class_="event-group")
        group.add(
            "line",
            x1=event_x,
            x2=event_x,
            y1=axis_y,
            y2=stem_y,
            stroke=fill,
            stroke_width=2,
            stroke_dasharray="4,2",
        ).animate("fade", delay=i * 100, duration=600)
        marker = group.add("circle", class_="event", cx=event_x, cy=axis_y, r=7, fill=fill, stroke="#fff", stroke_width=2)
        details = f"<br/>{escape(event.description)}" if event.description else ""
        marker.tooltip(f"<strong>{escape(event.label)}</strong><br/>Date: {short_date(event.date)}{details}")
        marker.hover(r=10).animate("pop", delay=i * 100 + 300, duration=600)
        baseline = "auto" if top else "hanging"
        group.add(
            "text",
            event.label,
            x=event_x,
            y=label_y,
            text_anchor="middle",
            dominant_baseline=baseline,
            font_size=11,
            font_weight=600,
        ).animate("fade", delay=i * 100 + 600, duration=400)
        group.add(
            "text",
            short_date(event.date),
            x=event_x,
            y=label_y - 12 if top else label_y + 12,
            text_anchor="middle",
            dominant_baseline=baseline,
            font_size=9,
            fill="#666",
        ).animate("fade", delay=i * 100 + 600, duration=400)

    f.plot.append(axis_bottom(x, ticks=6, label_rotate=-45)).set(transform=translate(0, axis_y + 30))
    if len(color.domain) > 1:
        legend(
            f.plot,
            [(color(category), str(category)) for category in color.domain],
            x=f.inner_width - 100,
            y=0,
            marker="circle",
            size=10,
            text_x=14,
            text_y=9,
        )
    chart_title(f.root, "Event Timeline", x=width / 2, y=25)
    return f.root



@register_renderer("gantt")
def render_gantt(data: Sequence[GanttTask], *, width: float, height: float, today: date | None = None) -> Node:
    """Task bars with completed-progress overlays.

    Args:
        today: When inside the schedule, a dashed marker is drawn at this date.
    """

    require_data("gantt", data)
    f = frame(width, height, Margin(40, 40, 60, 180))
    start = min(task.start for task in data)
    end = max(task.end for task in data)
    x = TimeScale((start, end), (0, f.inner_width))
    y = BandScale.with_padding([task.name for task in data], (0, f.inner_height), 0.3)

    f.plot.append(grid_lines(x, orient="vertical", length=f.inner_height, ticks=6, dasharray="2,2"))
    for task in data:
        group = f.plot.add("g", class_="task", transform=translate(0, y(task.name)))
        span = x(task.end) - x(task.start)
        group.add(
            "rect",
            class_="task-span",
            x=x(task.start),
            width=span,
            height=y.bandwidth,
            fill=palettes.GRID,
            rx=4,
        ).animate("grow-x", duration=800)
        bar = group.add(
            "rect",
            class_="task-progress",
            x=x(task.start),
            width=span * task.progress / 100,
            height=y.bandwidth,
            fill=palettes.PRIMARY,
            rx=4,
        )
        bar.tooltip(
            f"<strong>{escape(task.name)}</strong><br/>Start: {short_date(task.start)}<br/>End: {short_date(task.end)}"
            f"<br/>Duration: {(task.end - task.start).days} days<br/>Progress: {js_number(task.progress)}%"
        )
        bar.hover(fill=palettes.PRIMARY_DARK).animate("grow-x", delay=400, duration=800)
        group.add(
            "text",
            f"{js_number(task.progress)}%",
            x=x(task.start) + span / 2,
            y=y.bandwidth / 2,
            text_anchor="middle",
            dominant_baseline="middle",
            font_size=11,
            font_weight=600,
            fill="#fff",
        ).animate("fade", delay=1200, duration=400)

    f.plot.append(axis_left(y, font_size=12))
    bottom_axis(f, x, ticks=6, label_rotate=-45)
    if today is not None and start <= today <= end:
        marker_x = x(today)
        f.plot.add(
            "line",
            class_="today",
            x1=marker_x,
            x2=marker_x,
            y1=0,
            y2=f.inner_height,
            stroke=palettes.NEGATIVE,
            stroke_width=2,
            stroke_dasharray="5,5",
            opacity=0.7,
        ).animate("fade", delay=1000, duration=400)
        f.plot.add(
            "text",
            "Today",
            x=marker_x,
            y=-10,
            text_anchor="middle",
            font_size=11,
            font_weight=600,
            fill=palettes.NEGATIVE,
        )
    chart_title(f.root, "Project Timeline", x=width / 2, y=20)
    return f.root


@register_renderer("sparklines")
def render_sparklines(
    data: Sequence[Sparkline],
    *,
    width: float,
    height: float,
    type: Literal["line", "bar", "area"] = "line",
    sparkline_height: float = 40,
) -> Node:
    """One compact row per KPI with its latest value and change.

    Args:
        type: Mark used for every row.
        sparkline_height: Height of each mini chart in pixels.

    Raises:
        ChartRenderError: For an unsupported `type`.
    """

    require_data("sparklines", data)
    if type not in ("line", "bar", "area"):
        raise ChartRenderError(f"Unsupported sparkline type: {type!r}")
    f = frame(width, height, Margin(20, 20, 20, 150))
    spark_width = f.inner_width - 100
    row_height = sparkline_height + 30

    for i, row in enumerate(data):
        group = f.plot.add("g", class_="sparkline", transform=translate(0, i * row_height))
        group.add(
            "text",
            row.label,
            x=-10,
            y=sparkline_height / 2,
            text_anchor="end",
            dominant_baseline="middle",
            font_size=13,
            font_weight=500,
        )
        values = row.values
        x = LinearScale((0, max(1, len(values) - 1)), (0, spark_width))
        y = LinearScale(extent(values), (sparkline_height, 0)).nice()
        points = [(x(j), y(v)) for j, v in enumerate(values)]
        if type == "line":
            group.add(
                "path",
                d=line_path(points, curve="monotone_x"),
                fill="none",
                stroke=palettes.PRIMARY,
                stroke_width=2,
            ).animate("draw", duration=1000)
            end_x, end_y = points[-1]
            group.add("circle", cx=end_x, cy=end_y, r=3, fill=palettes.PRIMARY).animate("pop", delay=800, duration=300)
        elif type == "bar":
            bar_width = spark_width / len(values) - 1
            for j, (px, py) in enumerate(points):
                group.add(
                    "rect",
                    x=px - bar_width / 2,
                    y=py,
                    width=bar_width,
                    height=sparkline_height - py,
                    fill=palettes.PRIMARY,
                    rx=1,
                ).animate("grow-y", delay=j * 30, duration=800)
        else:
            group.add(
                "path",
                d=baseline_area_path(points, sparkline_height, curve="monotone_x"),
                fill=palettes.PRIMARY,
                fill_opacity=0.6,
            ).animate("wipe", duration=1000)

        current = values[-1]
        previous = values[-2] if len(values) > 1 else current
        change = current - previous
        percent = fixed(change / previous * 100, 1) if previous else "0.0"
        group.add(
            "text",
            fixed(current, 1),
            x=spark_width + 10,
            y=sparkline_height / 2,
            dominant_baseline="middle",
            font_size=13,
            font_weight=600,
        )
        group.add(
            "text",
            f"{'+' if change >= 0 else ''}{percent}%",
            x=spark_width + 60,
            y=sparkline_height / 2,
            dominant_baseline="middle",
            font_size=11,
            fill=palettes.POSITIVE if change >= 0 else palettes.NEGATIVE,
        )
        # Hit columns centred on each sample stand in for pointer tracking.
        step = spark_width / max(1, len(values) - 1)
        for j, value in enumerate(values):
            hit = group.add(
                "rect",
                class_="hit",
                x=max(0.0, x(j) - step / 2),
                width=min(step, spark_width) if len(values) > 1 else spark_width,
                height=sparkline_height,
                fill="transparent",
            )
            hit.tooltip(f"<strong>{escape(row.label)}</strong><br/>Point {j + 1}: {fixed(value, 1)}")
    return f.root


@register_renderer("small_multiples")
def render_small_multiples(
    data: Sequence[SmallMultiple],
    *,
    width: float,
    height: float,
    chart_type: Literal["line", "area", "scatter"] = "line",
    columns: int = 3,
) -> Node:
    """A grid of identical mini charts sharing one x and one y domain.

    Raises:
        ChartRenderError: For an unsupported `chart_type` or `columns` < 1.
    """

    require_data("small_multiples", data)
    if chart_type not in ("line", "area", "scatter"):
        raise ChartRenderError(f"Unsupported small multiples chart type: {chart_type!r}")
    if columns < 1:
        raise ChartRenderError("Small multiples need at least one column.")
    root = svg_root(width, height, class_="chart")
    margin = Margin(30, 10, 30, 40)
    padding = 20
    rows = math.ceil(len(data) / columns)
    cell_width = (width - padding * (columns + 1)) / columns
    cell_height = (height - padding * (rows + 1)) / rows
    inner_width = cell_width - margin.left - margin.right
    inner_height = cell_height - margin.top - margin.bottom
    x_domain = extent(p.x for d in data for p in d.values)
    y_domain = extent(p.y for d in data for p in d.values)

    for i, panel in enumerate(data):
        column, row = i % columns, i // columns
        left = padding + column * (cell_width + padding) + margin.left
        top = padding + row * (cell_height + padding) + margin.top
        g = root.add("g", class_="multiple", transform=translate(left, top))
        x = LinearScale(x_domain, (0, inner_width))
        y = LinearScale(y_domain, (inner_height, 0))
        g.add(
            "rect",
            class_="cell-background",
            x=-margin.left,
            y=-margin.top,
            width=cell_width,
            height=cell_height,
            fill="#f9f9f9",
            stroke="#ddd",
            stroke_width=1,
            rx=4,
        )
        g.add("text", panel.name, x=inner_width / 2, y=-10, text_anchor="middle", font_size=12, font_weight=600)
        whole = {"ticks": 3, "tick_format": lambda v: str(round(v))}
        g.append(axis_bottom(x, tick_size=-inner_height, **whole)).set(
            class_="axis axis-bottom grid-axis", transform=translate(0, inner_height)
        )
        g.append(axis_left(y, tick_size=-inner_width, **whole)).set(class_="axis axis-left grid-axis")
        points = [(x(p.x), y(p.y)) for p in panel.values]
        if chart_type == "line":
            g.add(
                "path",
                d=line_path(points, curve="monotone_x"),
                fill="none",
                stroke=palettes.PRIMARY,
                stroke_width=2,
            ).animate("draw", delay=i * 100, duration=800)
        elif chart_type == "area":
            g.add(
                "path",
                d=baseline_area_path(points, inner_height, curve="monotone_x"),
                fill=palettes.PRIMARY,
                fill_opacity=0.6,
            ).animate("wipe", delay=i * 100, duration=800)
        else:
            for j, (cx, cy) in enumerate(points):
                g.add("circle", cx=cx, cy=cy, r=3, fill=palettes.PRIMARY, opacity=0.7).animate(
                    "pop", delay=i * 100 + j * 20, duration=600
                )
        overlay = g.add("rect", class_="hit", width=inner_width, height=inner_height, fill="transparent")
        overlay.tooltip(f"<strong>{escape(panel.name)}</strong><br/>{len(panel.values)} data points")
    return root



@register_renderer("slope")
def render_slope(
    data: Sequence[SlopeItem],
    *,
    width: float,
    height: float,
    start_label: str = "Before",
    end_label: str = "After",
) -> Node:
    """Before/after comparison; green rises, red falls."""

    require_data("slope", data)
    f = frame(width, height, Margin(60, 120, 40, 120))
    y = LinearScale(extent(v for d in data for v in (d.start, d.end)), (f.inner_height, 0)).nice()
    right = f.inner_width

    def color(item: SlopeItem) -> str:
        change = item.end - item.start
        if change > 0:
            return palettes.POSITIVE
        if change < 0:
            return palettes.NEGATIVE
        return NEUTRAL

    for item in data:
        change = item.end - item.start
        percent = change / item.start * 100 if item.start else 0.0
        line = f.plot.add(
            "line",
            class_="slope-line",
            x1=0,
            y1=y(item.start),
            x2=right,
            y2=y(item.end),
            stroke=color(item),
            stroke_width=2,
            opacity=0.7,
        )
        line.tooltip(
            f"<strong>{escape(item.label)}</strong><br/>{escape(start_label)}: {fixed(item.start, 1)}"
            f"<br/>{escape(end_label)}: {fixed(item.end, 1)}"
            f"<br/>Change: {_signed(change)} ({_signed(percent)}%)"
        )
        line.hover(stroke_width=4, opacity=1).animate("draw", duration=1000)

    for item in data:
        f.plot.add("circle", class_="start-point", cx=0, cy=y(item.start), r=4, fill=color(item)).animate(
            "pop", delay=800, duration=400
        )
        f.plot.add("circle", class_="end-point", cx=right, cy=y(item.end), r=4, fill=color(item)).animate(
            "pop", delay=800, duration=400
        )
        f.plot.add(
            "text",
            f"{item.label} ({fixed(item.start, 0)})",
            class_="start-label",
            x=-10,
            y=y(item.start),
            text_anchor="end",
            dominant_baseline="middle",
            font_size=11,
            font_weight=500,
        ).animate("fade", delay=1200, duration=400)
        change = item.end - item.start
        arrow = "↑" if change > 0 else "↓" if change < 0 else "→"
        f.plot.add(
            "text",
            f"{item.label} ({fixed(item.end, 0)}) {arrow}",
            class_="end-label",
            x=right + 10,
            y=y(item.end),
            text_anchor="start",
            dominant_baseline="middle",
            font_size=11,
            font_weight=500,
            fill=color(item),
        ).animate("fade", delay=1200, duration=400)

    for x_pos, text in ((0, start_label), (right, end_label)):
        f.plot.add("text", text, x=x_pos, y=-30, text_anchor="middle", font_weight=600)
    f.plot.append(axis_left(y, ticks=6))
    f.plot.append(axis_right(y, ticks=6)).set(transform=translate(right, 0))
    return f.root
