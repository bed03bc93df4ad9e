"""Distribution and density charts."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date, timedelta

import numpy as np

from mockdata.dto import CategorySamples, ContourPoint, DatedValue, Point2D

from .. import palettes
from ..axes import axis_left
from ..errors import require_data
from ..layout.density import bin_values, contour_bands, hexagon_path, hexbin, idw_grid
from ..layout.force import collide_swarm
from ..registry import register_renderer
from ..scales import BandScale, LinearScale, OrdinalScale, SequentialScale, extent
from ..scene import Node, fmt, translate
from ..shapes import area_path, line_path
from ._common import (
    Margin,
    bottom_axis,
    escape,
    fixed,
    frame,
    gradient_legend,
    quantile,
    x_axis_caption,
    y_axis_caption,
)

VIOLIN_COLORS = ("#1976d2", "#4caf50", "#ff9800", "#9c27b0")
DAY_LABELS = ("Sun", "Mon", "Tue", "Wed", "Thu", "Fri", "Sat")


@register_renderer("histogram")
def render_histogram(data: Sequence[float], *, width: float, height: float) -> Node:
    """Frequency bars over round bin edges."""

    require_data("histogram", data)
    f = frame(width, height, Margin(20, 30, 60, 60))
    x = LinearScale(extent(data), (0, f.inner_width)).nice()
    bins = bin_values(data, domain=x.domain, thresholds=16)
    y = LinearScale((0, max(b.count for b in bins) or 1), (f.inner_height, 0)).nice()

    for b in bins:
        top = y(b.count)
        bar = f.plot.add(
            "rect",
            class_="bar",
            x=x(b.x0) + 1,
            y=top,
            width=max(0.0, x(b.x1) - x(b.x0) - 2),
            height=f.inner_height - top,
            fill=palettes.PRIMARY,
            opacity=0.85,
        )
        bar.tooltip(f"<strong>Range:</strong> {fixed(b.x0, 1)} - {fixed(b.x1, 1)}<br/><strong>Count:</strong> {b.count}")
        bar.hover(opacity=1).animate("grow-y", duration=700)

    bottom_axis(f, x)
    f.plot.append(axis_left(y, ticks=6, tick_format=lambda value: str(round(value))))
    x_axis_caption(f, "Value Ranges")
    y_axis_caption(f, "Frequency")
    return f.root


@register_renderer("box_plot")
def render_box_plot(data: Sequence[float], *, width: float, height: float) -> Node:
    """Quartile box, Tukey whiskers (1.5 IQR) and outlier dots."""

    require_data("box_plot", data)
    f = frame(width, height, Margin(20, 30, 60, 60))
    values = sorted(data)
    q1, median, q3 = (quantile(values, p) for p in (0.25, 0.5, 0.75))
    iqr = q3 - q1
    lower_fence, upper_fence = q1 - 1.5 * iqr, q3 + 1.5 * iqr
    inliers = [v for v in values if lower_fence <= v <= upper_fence]
    whisker_min = min(inliers, default=values[0])
    whisker_max = max(inliers, default=values[-1])
    outliers = [v for v in values if v < lower_fence or v > upper_fence]

    y = LinearScale((values[0], values[-1]), (f.inner_height, 0)).nice()
    center = f.inner_width / 2
    box_width = min(180, f.inner_width * 0.45)
    whisker = {"stroke": "#546e7a", "stroke_width": 2}
    f.plot.add("line", class_="whisker", x1=center, x2=center, y1=y(whisker_min), y2=y(whisker_max), **whisker)
    for cap in (whisker_min, whisker_max):
        f.plot.add(
            "line",
            class_="whisker-cap",
            x1=center - box_width / 4,
            x2=center + box_width / 4,
            y1=y(cap),
            y2=y(cap),
            **whisker,
        )

    box = f.plot.add(
        "rect",
        class_="box",
        x=center - box_width / 2,
        y=y(q3),
        width=box_width,
        height=y(q1) - y(q3),
        fill=palettes.PRIMARY,
        opacity=0.7,
        stroke="#0d47a1",
        stroke_width=2,
    )
    box.tooltip(
        f"<strong>Q1:</strong> {fixed(q1, 2)}<br/><strong>Median:</strong> {fixed(median, 2)}"
        f"<br/><strong>Q3:</strong> {fixed(q3, 2)}"
    )
    box.hover(opacity=0.9).animate("grow-y", duration=700)
    f.plot.add(
        "line",
        class_="median",
        x1=center - box_width / 2,
        x2=center + box_width / 2,
        y1=y(median),
        y2=y(median),
        stroke="#0d47a1",
        stroke_width=3,
    )
    for value in outliers:
        dot = f.plot.add("circle", class_="outlier", cx=center, cy=y(value), r=4, fill="#dc004e", opacity=0.9)
        dot.tooltip(f"<strong>Outlier:</strong> {fixed(value, 2)}").hover(r=6).animate("pop", duration=500)

    f.plot.append(axis_left(y))
    label_scale = BandScale(["Distribution"], (center - box_width / 2, center + box_width / 2))
    bottom_axis(f, label_scale)
    y_axis_caption(f, "Values")
    return f.root


@register_renderer("violin")
def render_violin(data: Sequence[CategorySamples], *, width: float, height: float) -> Node:
    """Mirrored histogram outlines per category with a median bar."""

    require_data("violin", data)
    f = frame(width, height, Margin(20, 30, 60, 60))
    all_values = [v for group in data for v in group.values]
    require_data("violin", all_values)
    x = BandScale.with_padding([g.category for g in data], (0, f.inner_width), 0.25)
    y = LinearScale(extent(all_values), (f.inner_height, 0)).nice()
    half_width = x.bandwidth / 2

    for i, group in enumerate(data):
        if not group.values:
            continue
        center = x.center(group.category)
        bins = bin_values(group.values, domain=y.domain, thresholds=24)
        density = LinearScale((0, max(b.count for b in bins) or 1), (0, half_width))
        left = [(center - density(b.count), y(b.mid)) for b in bins]
        right = [(center + density(b.count), y(b.mid)) for b in bins]
        color = palettes.categorical(VIOLIN_COLORS, i)
        values = sorted(group.values)
        q1, median, q3 = (quantile(values, p) for p in (0.25, 0.5, 0.75))

        shape = f.plot.add(
            "path",
            class_="violin",
            d=area_path(right, left, curve="catmull_rom"),
            fill=color,
            opacity=0.6,
            stroke=color,
            stroke_width=1.5,
        )
        shape.tooltip(
            f"<strong>{escape(group.category)}</strong><br/>Q1: {fixed(q1, 2)}"
            f"<br/>Median: {fixed(median, 2)}<br/>Q3: {fixed(q3, 2)}"
        )
        shape.hover(opacity=0.8).animate("fade", delay=i * 100, duration=800)
        f.plot.add(
            "line",
            class_="median",
            x1=center - half_width * 0.45,
            x2=center + half_width * 0.45,
            y1=y(median),
            y2=y(median),
            stroke="#0d47a1",
            stroke_width=2,
        )

    bottom_axis(f, x)
    f.plot.append(axis_left(y))
    x_axis_caption(f, "Categories")
    y_axis_caption(f, "Values")
    return f.root


@register_renderer("ridgeline")
def render_ridgeline(data: Sequence[CategorySamples], *, width: float, height: float) -> Node:
    """Stacked density ridges sharing one value axis."""

    require_data("ridgeline", data)
    f = frame(width, height, Margin(30, 30, 40, 90))
    all_values = [v for series in data for v in series.values]
    require_data("ridgeline", all_values)
    x = LinearScale(extent(all_values), (0, f.inner_width)).nice()
    y = BandScale.with_padding([s.category for s in data], (0, f.inner_height), 0.25)
    ridge_height = y.bandwidth
    color = OrdinalScale(palettes.TABLEAU10, domain=[s.category for s in data])

    for i, series in enumerate(data):
        bins = bin_values(series.values, domain=x.domain, thresholds=26)
        tallest = max((b.count for b in bins), default=0) or 1
        profile = [(x(b.mid), ridge_height - b.count / tallest * ridge_height) for b in bins]
        group = f.plot.add("g", class_="ridge", transform=translate(0, y(series.category)))
        ridge = group.add(
            "path",
            class_="ridge-area",
            d=area_path(profile, [(px, ridge_height) for px, _py in profile], curve="catmull_rom"),
            fill=color(series.category),
            opacity=0.55,
        )
        values = sorted(series.values)
        ridge.tooltip(
            f"<strong>{escape(series.category)}</strong><br/>Samples: {len(values)}"
            f"<br/>Median: {fixed(quantile(values, 0.5), 2)}"
        )
        ridge.hover(opacity=0.8).animate("fade", delay=i * 60, duration=700)
        group.add(
            "path",
            class_="ridge-line",
            d=line_path(profile, curve="catmull_rom"),
            fill="none",
            stroke=color(series.category),
            stroke_width=1.8,
            opacity=0.95,
        ).animate("fade", delay=i * 60, duration=700)

    f.plot.append(axis_left(y))
    bottom_axis(f, x)
    return f.root


@register_renderer("beeswarm")
def render_beeswarm(
    data: Sequence[CategorySamples],
    *,
    width: float,
    height: float,
    radius: float = 4,
    seed: int = 0,
) -> Node:
    """Non-overlapping dots per category, settled by a collision simulation.

    Args:
        data: Samples per category.
        width: Canvas width.
        height: Canvas height.
        radius: Dot radius.
        seed: Seed for the tie-breaking jitter of coincident dots.
    """

    require_data("beeswarm", data)
    f = frame(width, height, Margin(40, 40, 60, 80))
    all_values = [v for group in data for v in group.values]
    require_data("beeswarm", all_values)
    categories = [g.category for g in data]
    x = BandScale.with_padding(categories, (0, f.inner_width), 0.5)
    y = LinearScale(extent(all_values), (f.inner_height, 0)).nice()
    color = OrdinalScale(palettes.SET2, domain=categories)

    for cat_index, group in enumerate(data):
        if not group.values:
            continue
        center = x.center(group.category)
        targets_y = np.array([y(v) for v in group.values])
        targets_x = np.full_like(targets_y, center)
        xs, ys = collide_swarm(
            targets_x,
            targets_y,
            target_x=targets_x,
            target_y=targets_y,
            radius=radius + 1,
            seed=seed + cat_index,
        )
        for i, (value, cx, cy) in enumerate(zip(group.values, xs, ys)):
            bee = f.plot.add(
                "circle",
                class_=f"bee bee-{cat_index}",
                cx=float(cx),
                cy=float(cy),
                r=radius,
                fill=color(group.category),
                stroke="#fff",
                stroke_width=1,
                opacity=0.7,
            )
            bee.tooltip(f"<strong>{escape(group.category)}</strong><br/>Value: {fixed(value, 2)}")
            bee.hover(r=radius + 2, opacity=1, stroke_width=2)
            bee.animate("pop", delay=cat_index * 200 + i * 10, duration=800)

    bottom_axis(f, x, font_size=12)
    f.plot.append(axis_left(y))
    x_axis_caption(f, "Category")
    y_axis_caption(f, "Value")
    f.root.add(
        "text",
        "Distribution Comparison (Beeswarm)",
        class_="chart-title",
        x=width / 2,
        y=20,
        text_anchor="middle",
        font_size=14,
        font_weight=600,
    )
    return f.root


@register_renderer("hexbin")
def render_hexbin(data: Sequence[Point2D], *, width: float, height: float, radius: float = 16) -> Node:
    """Hexagonal bins shaded by point count."""

    require_data("hexbin", data)
    f = frame(width, height, Margin(20, 40, 60, 60))
    x = LinearScale((0, max(p.x for p in data) or 1), (0, f.inner_width)).nice()
    y = LinearScale((0, max(p.y for p in data) or 1), (f.inner_height, 0)).nice()
    bins = hexbin([(x(p.x), y(p.y)) for p in data], radius=radius)
    color = SequentialScale("PuBuGn", (0, max(b.count for b in bins)))
    outline = hexagon_path(radius)

    for i, b in enumerate(bins):
        hexagon = f.plot.add(
            "path",
            class_="hexagon",
            d=outline,
            transform=translate(b.x, b.y),
            fill=color(b.count),
            stroke="#fff",
            stroke_width=1,
            opacity=0.92,
        )
        hexagon.tooltip(f"<strong>Bin Density</strong><br/>Points: {b.count}")
        hexagon.hover(stroke="#004d40", stroke_width=1.5).animate("fade", delay=i * 5, duration=700)

    bottom_axis(f, x)
    f.plot.append(axis_left(y))
    x_axis_caption(f, "X Axis")
    y_axis_caption(f, "Y Axis")
    return f.root


@register_renderer("contour")
def render_contour(
    data: Sequence[ContourPoint],
    *,
    width: float,
    height: float,
    thresholds: int = 10,
) -> Node:
    """Filled isoline bands over an inverse-distance-weighted surface.

    Args:
        data: Scattered samples.
        width: Canvas width.
        height: Canvas height.
        thresholds: Approximate number of contour levels.
    """

    require_data("contour", data)
    f = frame(width, height, Margin(40, 120, 60, 60))
    x_domain = extent(p.x for p in data)
    y_domain = extent(p.y for p in data)
    x = LinearScale(x_domain, (0, f.inner_width))
    y = LinearScale(y_domain, (f.inner_height, 0))
    low, high = extent(p.value for p in data)
    color = SequentialScale("YlOrRd", (low, high))

    xs, ys, surface = idw_grid([(p.x, p.y, p.value) for p in data], x_domain=x_domain, y_domain=y_domain)
    for i, band in enumerate(contour_bands(xs, ys, surface, thresholds=thresholds)):
        outline = "".join(
            "M" + "L".join(f"{fmt(x(px))},{fmt(y(py))}" for px, py in ring) + "Z" for ring in band.rings
        )
        level = f.plot.add(
            "path",
            class_="contour",
            d=outline,
            fill=color(band.value),
            fill_rule="evenodd",
            stroke="#fff",
            stroke_width=0.5,
            opacity=0.7,
        )
        level.tooltip(f"<strong>Contour Level</strong><br/>Value: {fixed(band.value, 2)}")
        level.hover(stroke="#333", stroke_width=2).animate("fade", delay=i * 40, duration=1000)

    for p in data:
        f.plot.add(
            "circle", class_="sample", cx=x(p.x), cy=y(p.y), r=3, fill="#333", stroke="#fff", stroke_width=1
        ).animate("pop", delay=1000, duration=600)

    bottom_axis(f, x)
    f.plot.append(axis_left(y))
    x_axis_caption(f, "X Coordinate")
    y_axis_caption(f, "Y Coordinate")
    gradient_legend(
        f.root,
        f.plot,
        gradient_id="contour-gradient",
        color=color,
        domain=(low, high),
        x=f.inner_width + 20,
        y=f.inner_height / 2 - 100,
        title="Value",
        stroke="#333",
    )
    f.root.add(
        "text",
        "Contour Plot (Isolines)",
        class_="chart-title",
        x=width / 2,
        y=20,
        text_anchor="middle",
        font_size=14,
        font_weight=600,
    )
    return f.root


@register_renderer("heatmap")
def render_heatmap(data: Sequence[Sequence[float]], *, width: float, height: float) -> Node:
    """Matrix of cells colored on a sequential ramp with a gradient legend."""

    require_data("heatmap", data)
    require_data("heatmap", data[0])
    f = frame(width, height, Margin(20, 100, 60, 60))
    rows, cols = len(data), len(data[0])
    cell_width, cell_height = f.inner_width / cols, f.inner_height / rows
    flat = [v for row in data for v in row]
    low, high = min(flat) or 0, max(flat) or 100
    color = SequentialScale("YlOrRd", (low, high))

    index = 0
    for i, row in enumerate(data):
        for j, value in enumerate(row):
            cell = f.plot.add("g", class_="cell-group").add(
                "rect",
                class_="cell",
                x=j * cell_width,
                y=i * cell_height,
                width=cell_width - 1,
                height=cell_height - 1,
                fill=color(value),
                opacity=0.9,
                rx=2,
            )
            cell.tooltip(f"<strong>Cell [{i}, {j}]</strong><br/>Value: {fixed(value, 2)}")
            cell.hover(opacity=1, stroke="#000", stroke_width=2).animate("fade", delay=index * 5, duration=800)
            index += 1

    gradient_legend(
        f.root,
        f.plot,
        gradient_id="heatmap-gradient",
        color=color,
        domain=(low, high),
        x=f.inner_width + 20,
        y=0,
        height=f.inner_height,
        stops=101,
        title="Intensity",
    )
    return f.root


def _week_start(day: date) -> date:
    """Most recent Sunday on or before `day`."""

    return day - timedelta(days=(day.weekday() + 1) % 7)


def _month_starts(start: date, stop: date) -> list[date]:
    """First days of the months in `[start, stop)`, beginning at or after `start`."""

    current = date(start.year, start.month, 1)
    if current < start:
        current = date(current.year + (current.month == 12), current.month % 12 + 1, 1)
    result = []
    while current < stop:
        result.append(current)
        current = date(current.year + (current.month == 12), current.month % 12 + 1, 1)
    return result


@register_renderer("calendar")
def render_calendar(data: Sequence[DatedValue], *, width: float, height: float) -> Node:
    """GitHub-style grid: one column per week, one row per weekday."""

    require_data("calendar", data)
    f = frame(width, height, Margin(30, 40, 30, 40))
    days = sorted(data, key=lambda d: d.date)
    start = _week_start(days[0].date)
    last = days[-1].date
    last_week_end = last if _week_start(last) == last else _week_start(last) + timedelta(days=7)
    week_count = (last_week_end - start).days // 7 + 1
    cell = min(f.inner_width / max(week_count, 1), f.inner_height / 7)
    color = SequentialScale("YlGnBu", (0, max(d.value for d in days) or 1))

    for i, d in enumerate(days):
        week = (_week_start(d.date) - start).days // 7
        weekday = (d.date.weekday() + 1) % 7
        square = f.plot.add(
            "rect",
            class_="day-cell",
            x=week * cell,
            y=weekday * cell,
            width=cell - 2,
            height=cell - 2,
            rx=2,
            fill=color(d.value),
        )
        square.tooltip(f"<strong>{d.date.strftime('%b %d, %Y')}</strong><br/>Activity: {fixed(d.value, 0)}")
        square.hover(stroke="#1a237e", stroke_width=1.5).animate("fade", delay=i * 2, duration=700)

    for i, label in enumerate(DAY_LABELS):
        f.plot.add(
            "text",
            label,
            class_="day-label",
            x=-8,
            y=i * cell + cell / 1.6,
            text_anchor="end",
            font_size=11,
            fill="#455a64",
        )
    for month in _month_starts(start, last):
        f.plot.add(
            "text",
            month.strftime("%b"),
            class_="month-label",
            x=(_week_start(month) - start).days // 7 * cell,
            y=-8,
            font_size=12,
            fill="#37474f",
        )
    return f.root
