"""Part-to-whole and multi-measure comparison charts."""

from __future__ import annotations

import math
from collections.abc import Sequence

from mockdata.dto import (
    BulletMeasure,
    GroupedBarRow,
    LabeledValue,
    MarimekkoColumn,
    ParallelData,
    Point2D,
    PyramidRow,
    RadarProfile,
    StackedBars,
    VennData,
    WaffleSlice,
)

from .. import palettes
from ..axes import axis_bottom, axis_left, chart_title
from ..errors import ChartRenderError, require_data
from ..layout.stack import stack
from ..registry import register_renderer
from ..scales import BandScale, LinearScale, OrdinalScale, PointScale, extent
from ..scene import Node, svg_root, translate
from ..shapes import TAU, arc_path, line_path, polar, polygon_path
from ._common import (
    Frame,
    Margin,
    bottom_axis,
    escape,
    fixed,
    frame,
    js_number,
    legend,
    locale_number,
    x_axis_caption,
    y_axis_caption,
)

BULLET_RANGE_COLORS = ("#d32f2f", "#ffa726", "#66bb6a")
VENN_COLORS = ("#2196f3", "#f44336", "#4caf50", "#ff9800")
MALE = "#2196f3"
MALE_DARK = "#1976d2"
FEMALE = "#f48fb1"
FEMALE_DARK = "#ec407a"
CANVAS_POINT_FILL = "rgba(25, 118, 210, 0.35)"
CANVAS_POINT_RADIUS = 1.7


def _series_legend(f: Frame, color: OrdinalScale, keys: Sequence[str]) -> Node:
    return legend(
        f.plot,
        [(color(key), key) for key in keys],
        x=f.inner_width + 10,
        y=0,
        size=12,
        text_x=18,
        text_y=10,
        rx=2,
    )


@register_renderer("grouped_bar")
def render_grouped_bar(data: Sequence[GroupedBarRow], *, width: float, height: float) -> Node:
    """Side-by-side bars per category, one per series."""

    require_data("grouped_bar", data)
    f = frame(width, height, Margin(20, 120, 60, 60))
    series = [v.series for v in data[0].values]
    x0 = BandScale.with_padding([row.category for row in data], (0, f.inner_width), 0.2)
    x1 = BandScale.with_padding(series, (0, x0.bandwidth), 0.05)
    y = LinearScale((0, max(v.value for row in data for v in row.values) or 100), (f.inner_height, 0)).nice()
    color = OrdinalScale(palettes.SET2, series)

    for row in data:
        group = f.plot.add("g", class_="category-group", transform=translate(x0(row.category), 0))
        for i, item in enumerate(row.values):
            top = y(item.value)
            bar = group.add(
                "rect",
                class_="bar",
                x=x1(item.series),
                y=top,
                width=x1.bandwidth,
                height=f.inner_height - top,
                fill=color(item.series),
                rx=3,
            )
            bar.tooltip(f"<strong>{escape(item.series)}</strong><br/>Value: {fixed(item.value, 1)}")
            bar.hover(opacity=0.8).animate("grow-y", delay=i * 50, duration=800)

    bottom_axis(f, x0, label_rotate=-45)
    f.plot.append(axis_left(y))
    _series_legend(f, color, series)
    x_axis_caption(f, "Categories")
    y_axis_caption(f, "Values")
    return f.root


@register_renderer("stacked_bar")
def render_stacked_bar(data: StackedBars, *, width: float, height: float) -> Node:
    """Bars whose segments stack each series on the previous one."""

    require_data("stacked_bar", data.rows)
    f = frame(width, height, Margin(20, 120, 60, 60))
    layers = stack(data.keys, [row.values for row in data.rows])
    x = BandScale.with_padding([row.category for row in data.rows], (0, f.inner_width), 0.2)
    y = LinearScale((0, max(point[1] for point in layers[-1].points) or 100), (f.inner_height, 0)).nice()
    color = OrdinalScale(palettes.SET2, data.keys)

    for layer in layers:
        group = f.plot.add("g", class_="series", fill=color(layer.key))
        for row, (lo, hi) in zip(data.rows, layer.points):
            segment = group.add(
                "rect",
                class_="bar",
                x=x(row.category),
                y=y(hi),
                width=x.bandwidth,
                height=y(lo) - y(hi),
                rx=3,
            )
            segment.tooltip(
                f"<strong>{escape(layer.key)}</strong><br/>Category: {escape(row.category)}"
                f"<br/>Value: {fixed(hi - lo, 1)}"
            )
            segment.hover(opacity=0.8).animate("grow-y", duration=800)

    bottom_axis(f, x, label_rotate=-45)
    f.plot.append(axis_left(y))
    _series_legend(f, color, data.keys)
    x_axis_caption(f, "Categories")
    y_axis_caption(f, "Values")
    return f.root


@register_renderer("marimekko")
def render_marimekko(data: Sequence[MarimekkoColumn], *, width: float, height: float) -> Node:
    """Variable-width 100% columns: width is the category's share of the total."""

    require_data("marimekko", data)
    f = frame(width, height, Margin(40, 120, 80, 60))
    grand_total = sum(column.total for column in data)
    if grand_total <= 0:
        raise ChartRenderError("Marimekko columns need a positive total.")
    y = LinearScale((0, 100), (f.inner_height, 0))
    names = list(dict.fromkeys(segment.name for column in data for segment in column.segments))
    color = OrdinalScale(palettes.SET2, names)

    left = 0.0
    for column_index, column in enumerate(data):
        column_width = column.total / grand_total * f.inner_width
        offset = 0.0
        for segment_index, segment in enumerate(column.segments):
            percent = segment.value / column.total * 100 if column.total else 0.0
            cell = f.plot.add(
                "rect",
                class_="cell",
                x=left,
                y=y(100 - offset),
                width=column_width,
                height=percent / 100 * f.inner_height,
                fill=color(segment.name),
                stroke="#fff",
                stroke_width=1,
            )
            cell.tooltip(
                f"<strong>{escape(column.category)}</strong><br/>Segment: {escape(segment.name)}"
                f"<br/>Value: {js_number(segment.value)}<br/>Percentage: {fixed(percent, 1)}%"
                f"<br/>Category Total: {js_number(column.total)}"
            )
            cell.hover(opacity=0.8).animate("grow-y", delay=column_index * 150 + segment_index * 50, duration=800)
            offset += percent
        center = left + column_width / 2
        f.plot.add(
            "text",
            column.category,
            x=center,
            y=f.inner_height + 20,
            text_anchor="middle",
            font_size=11,
            font_weight=600,
        )
        f.plot.add(
            "text",
            f"({js_number(column.total)})",
            x=center,
            y=f.inner_height + 35,
            text_anchor="middle",
            font_size=10,
            fill=palettes.MUTED,
        )
        left += column_width

    f.plot.append(axis_left(y, tick_format=lambda v: f"{js_number(v)}%"))
    legend(
        f.plot,
        [(color(name), name) for name in names],
        x=f.inner_width + 10,
        y=0,
        size=12,
        text_x=18,
        text_y=10,
        rx=2,
    )
    chart_title(f.root, "Market Share Analysis (Marimekko)", x=width / 2, y=20)
    y_axis_caption(f, "Percentage (%)")
    return f.root


@register_renderer("waffle")
def render_waffle(
    data: Sequence[WaffleSlice],
    *,
    width: float,
    height: float,
    total_squares: int = 100,
) -> Node:
    """A square grid where each category owns a proportional number of cells.

    Rounded counts are capped at `total_squares`; any cells left over are
    drawn as grey placeholders without a tooltip.
    """

    require_data("waffle", data)
    if total_squares < 1:
        raise ChartRenderError("A waffle needs at least one square.")
    f = frame(width, height, Margin(20, 120, 20, 20))
    per_row = math.ceil(math.sqrt(total_squares))
    size = min(f.inner_width, f.inner_height) / per_row - 2
    total = sum(item.value for item in data)
    colors = [item.color or palettes.categorical(palettes.SET3, i) for i, item in enumerate(data)]

    owners: list[int | None] = []
    for i, item in enumerate(data):
        owners.extend([i] * math.floor(item.value / total * total_squares + 0.5 if total else 0))
    owners = owners[:total_squares]
    owners.extend([None] * (total_squares - len(owners)))

    for index, owner in enumerate(owners):
        square = f.plot.add(
            "rect",
            class_="square",
            x=index % per_row * (size + 2),
            y=index // per_row * (size + 2),
            width=size,
            height=size,
            fill=palettes.GRID if owner is None else colors[owner],
            rx=2,
        )
        square.animate("pop", delay=index * 10, duration=800)
        if owner is not None:
            item = data[owner]
            square.tooltip(
                f"<strong>{escape(item.category)}</strong><br/>Value: {js_number(item.value)}"
                f"<br/>Percentage: {fixed(item.value / total * 100, 1)}%"
            )
            square.hover(stroke="#333", stroke_width=2)

    legend(
        f.plot,
        [
            (color, f"{item.category} ({fixed(item.value / total * 100 if total else 0, 1)}%)")
            for color, item in zip(colors, data)
        ],
        x=f.inner_width + 20,
        y=0,
        row_height=25,
        size=14,
        text_x=20,
        text_y=11,
        rx=2,
    )
    return f.root


@register_renderer("bullet")
def render_bullet(data: Sequence[BulletMeasure], *, width: float, height: float) -> Node:
    """KPI bars against qualitative ranges and target markers."""

    require_data("bullet", data)
    f = frame(width, height, Margin(20, 40, 20, 150))
    bullet_height = 40
    row_height = bullet_height + 30

    for i, item in enumerate(data):
        if not item.measures:
            raise ChartRenderError(f"Bullet {item.title!r} has no measures.")
        row = f.plot.add("g", class_="bullet", transform=translate(0, i * row_height))
        row.add(
            "text",
            item.title,
            x=-10,
            y=bullet_height / 2,
            text_anchor="end",
            dominant_baseline="middle",
            font_size=13,
            font_weight=600,
        )
        if item.subtitle:
            row.add(
                "text",
                item.subtitle,
                x=-10,
                y=bullet_height / 2 + 15,
                text_anchor="end",
                dominant_baseline="middle",
                font_size=10,
                fill=palettes.MUTED,
            )
        x = LinearScale((0, max((*item.ranges, *item.measures, *item.markers))), (0, f.inner_width))
        for index, bound in enumerate(item.ranges):
            row.add(
                "rect",
                class_="range",
                x=0,
                y=(bullet_height - 20) / 2,
                width=x(bound),
                height=20,
                fill=BULLET_RANGE_COLORS[index % len(BULLET_RANGE_COLORS)],
                opacity=0.3,
            ).animate("grow-x", delay=i * 100, duration=800)
        if len(item.measures) > 1:
            row.add(
                "rect",
                class_="comparison",
                x=0,
                y=(bullet_height - 12) / 2,
                width=x(item.measures[1]),
                height=12,
                fill=palettes.MUTED,
                opacity=0.5,
            ).animate("grow-x", delay=i * 100 + 200, duration=800)
        current = item.measures[0]
        measure = row.add(
            "rect",
            class_="measure",
            x=0,
            y=(bullet_height - 8) / 2,
            width=x(current),
            height=8,
            fill=palettes.PRIMARY,
        )
        target = f"<br/>Target: {fixed(item.markers[0], 1)}" if item.markers else ""
        measure.tooltip(f"<strong>{escape(item.title)}</strong><br/>Current: {fixed(current, 1)}{target}")
        measure.hover(fill=palettes.PRIMARY_DARK).animate("grow-x", delay=i * 100 + 400, duration=800)
        for marker in item.markers:
            row.add(
                "line",
                class_="marker",
                x1=x(marker),
                x2=x(marker),
                y1=(bullet_height - 24) / 2,
                y2=(bullet_height + 24) / 2,
                stroke="#333",
                stroke_width=2,
            ).animate("fade", delay=i * 100 + 600, duration=400)
        row.add(
            "text",
            fixed(current, 0),
            x=x(current) + 5,
            y=bullet_height / 2,
            dominant_baseline="middle",
            font_size=11,
            font_weight=600,
        ).animate("fade", delay=i * 100 + 800, duration=400)
        row.append(axis_bottom(x, ticks=5, tick_size=5)).set(transform=translate(0, bullet_height + 5))
    return f.root


@register_renderer("pyramid")
def render_pyramid(data: Sequence[PyramidRow], *, width: float, height: float) -> Node:
    """Male bars grow left and female bars grow right from a shared spine."""

    require_data("pyramid", data)
    f = frame(width, height, Margin(40, 40, 60, 100))
    y = BandScale.with_padding([row.age_group for row in data], (0, f.inner_height), 0.2)
    x = LinearScale((0, max(max(row.male, row.female) for row in data) or 100), (0, f.inner_width / 2 - 10))
    center = f.inner_width / 2

    for i, row in enumerate(data):
        total = locale_number(row.male + row.female)
        male = f.plot.add(
            "rect",
            class_="male-bar",
            x=center - x(row.male),
            y=y(row.age_group),
            width=x(row.male),
            height=y.bandwidth,
            fill=MALE,
            rx=3,
        )
        male.tooltip(f"<strong>{escape(row.age_group)}</strong><br/>Male: {locale_number(row.male)}<br/>Total: {total}")
        male.hover(fill=MALE_DARK).animate("grow-x", delay=i * 50, duration=800)
        male.add_style("transform-origin: right")
        female = f.plot.add(
            "rect",
            class_="female-bar",
            x=center,
            y=y(row.age_group),
            width=x(row.female),
            height=y.bandwidth,
            fill=FEMALE,
            rx=3,
        )
        female.tooltip(
            f"<strong>{escape(row.age_group)}</strong><br/>Female: {locale_number(row.female)}<br/>Total: {total}"
        )
        female.hover(fill=FEMALE_DARK).animate("grow-x", delay=i * 50, duration=800)

    f.plot.add(
        "line",
        x1=center,
        x2=center,
        y1=0,
        y2=f.inner_height,
        stroke=palettes.MUTED,
        stroke_width=2,
        stroke_dasharray="5,5",
    )
    spine = f.plot.append(axis_left(y, tick_size=0)).set(transform=translate(center, 0))
    spine.children = [child for child in spine.children if "domain" not in child.classes]
    mirrored = LinearScale(x.domain, (center, 10))
    for scale, offset in ((mirrored, 0.0), (x, center)):
        f.plot.append(axis_bottom(scale, ticks=5, tick_format=locale_number, label_rotate=-45)).set(
            transform=translate(offset, f.inner_height)
        )
    for text, x_pos, fill in (
        ("Male Population", center - f.inner_width / 4, MALE),
        ("Female Population", center + f.inner_width / 4, FEMALE),
    ):
        f.plot.add(
            "text",
            text,
            x=x_pos,
            y=f.inner_height + f.margin.bottom - 5,
            text_anchor="middle",
            font_size=12,
            font_weight=600,
            fill=fill,
        )
    y_axis_caption(f, "Age Group")
    chart_title(f.root, "Population Pyramid", x=width / 2, y=20)
    return f.root


@register_renderer("polar_area")
def render_polar_area(data: Sequence[LabeledValue], *, width: float, height: float) -> Node:
    """Equal-angle wedges whose radius encodes the value (coxcomb)."""

    require_data("polar_area", data)
    root = svg_root(width, height)
    g = root.add("g", class_="plot", transform=translate(width / 2, height / 2))
    radius = min(width - 120, height - 120) / 2
    angle = BandScale.with_padding([d.label for d in data], (0, TAU), 0.05)
    r = LinearScale((0, max(d.value for d in data) or 100), (0, radius))
    color = OrdinalScale(palettes.SET3, [d.label for d in data])
    levels = [i * radius / 5 for i in range(1, 6)]

    for level in levels:
        g.add("circle", class_="grid-circle", r=level, fill="none", stroke=palettes.GRID, stroke_dasharray="2,2")
    for i, d in enumerate(data):
        start = angle(d.label)
        wedge = g.add(
            "path",
            class_="segment",
            d=arc_path(inner_radius=0, outer_radius=r(d.value), start_angle=start, end_angle=start + angle.bandwidth),
            fill=color(d.label),
            stroke="#fff",
            stroke_width=2,
            opacity=0.8,
        )
        wedge.tooltip(f"<strong>{escape(d.label)}</strong><br/>Value: {fixed(d.value, 1)}")
        wedge.hover(opacity=1, stroke_width=3).animate("radial", delay=i * 100, duration=1000)
    for d in data:
        label_x, label_y = polar(angle(d.label) + angle.bandwidth / 2, r(d.value) + 20)
        g.add(
            "text",
            d.label,
            x=label_x,
            y=label_y,
            text_anchor="middle",
            dominant_baseline="middle",
            font_size=11,
            font_weight=600,
        ).animate("fade", delay=len(data) * 100 + 400, duration=400)
    for level in levels:
        g.add("text", fixed(r.invert(level), 0), x=5, y=-level, font_size=10, fill=palettes.MUTED)
    g.add("circle", r=3, fill="#333")
    chart_title(root, "Polar Area Chart (Coxcomb)", x=width / 2, y=30)
    return root


def _venn_circles(count: int, cx: float, cy: float, radius: float) -> list[tuple[float, float]]:
    if count == 1:
        return [(cx, cy)]
    offset = radius * (0.6 if count == 2 else 0.65)
    if count == 2:
        return [(cx - offset, cy), (cx + offset, cy)]
    step = TAU / count
    return [(cx + offset * math.cos(-math.pi / 2 + i * step), cy + offset * math.sin(-math.pi / 2 + i * step)) for i in range(count)]


@register_renderer("venn")
def render_venn(data: VennData, *, width: float, height: float) -> Node:
    """Equal circles arranged symmetrically with set and overlap counts.

    Circle sizes are not area-proportional; the counts are printed instead.
    """

    require_data("venn", data.sets)
    f = frame(width, height, Margin.uniform(40))
    cx, cy = f.inner_width / 2, f.inner_height / 2
    radius = min(f.inner_width, f.inner_height) / 4
    centers = _venn_circles(len(data.sets), cx, cy, radius)
    position = {venn_set.id: center for venn_set, center in zip(data.sets, centers)}
    color = OrdinalScale(VENN_COLORS, [venn_set.id for venn_set in data.sets])
    settle = len(centers) * 200

    for i, (venn_set, (x, y)) in enumerate(zip(data.sets, centers)):
        circle = f.plot.add(
            "circle",
            class_="set",
            cx=x,
            cy=y,
            r=radius,
            fill=color(venn_set.id),
            opacity=0.5,
            stroke=color(venn_set.id),
            stroke_width=2,
        )
        circle.tooltip(f"<strong>{escape(venn_set.label)}</strong><br/>Size: {js_number(venn_set.size)}")
        circle.hover(opacity=0.7, stroke_width=3).animate("pop", delay=i * 200, duration=800)
        f.plot.add(
            "text",
            venn_set.label,
            x=x,
            y=y - radius - 15,
            text_anchor="middle",
            font_size=13,
            font_weight=600,
            fill=color(venn_set.id),
        ).animate("fade", delay=settle + 400, duration=400)

    for i, overlap in enumerate(data.intersections):
        members = [position[key] for key in overlap.sets if key in position]
        if len(members) != len(overlap.sets) or len(members) < 2:
            continue
        if len(members) == len(centers):
            x, y, delay = cx, cy, settle + 800
        else:
            x = sum(p[0] for p in members) / len(members)
            y = sum(p[1] for p in members) / len(members)
            delay = settle + 600 + i * 100
        f.plot.add(
            "text",
            js_number(overlap.size),
            class_="overlap-count",
            x=x,
            y=y,
            text_anchor="middle",
            dominant_baseline="middle",
            font_weight=700,
        ).animate("fade", delay=delay, duration=400)

    for i, (venn_set, (x, y)) in enumerate(zip(data.sets, centers)):
        if len(centers) == 2:
            x += radius * 0.5 * (-1 if i == 0 else 1)
        elif len(centers) > 2:
            direction = -math.pi / 2 + i * TAU / len(centers)
            x += math.cos(direction) * radius * 0.5
            y += math.sin(direction) * radius * 0.5
        f.plot.add(
            "text",
            js_number(venn_set.size),
            class_="set-count",
            x=x,
            y=y,
            text_anchor="middle",
            dominant_baseline="middle",
            font_size=13,
            font_weight=600,
        ).animate("fade", delay=settle + 1000, duration=400)
    chart_title(f.root, "Set Relationships (Venn Diagram)", x=width / 2, y=20)
    return f.root


@register_renderer("parallel")
def render_parallel(data: ParallelData, *, width: float, height: float) -> Node:
    """One polyline per sample across independently scaled vertical axes."""

    require_data("parallel", data.samples)
    f = frame(width, height, Margin(30, 60, 30, 60))
    x = PointScale(data.dimensions, (0, f.inner_width), padding=0.5)
    scales = {
        dimension: LinearScale(extent(s.values[i] for s in data.samples), (f.inner_height, 0)).nice()
        for i, dimension in enumerate(data.dimensions)
    }
    last = max(1, len(data.samples) - 1)

    for index, sample in enumerate(data.samples):
        points = [(x(dimension), scales[dimension](value)) for dimension, value in zip(data.dimensions, sample.values)]
        line = f.plot.add(
            "path",
            class_="parallel-line",
            d=line_path(points),
            fill="none",
            stroke=palettes.interpolate("plasma", index / last),
            stroke_width=1.8,
            stroke_opacity=0.55,
        )
        rows = "<br/>".join(
            f"{escape(dimension)}: {fixed(value, 1)}" for dimension, value in zip(data.dimensions, sample.values)
        )
        line.tooltip(f"<strong>{escape(sample.name)}</strong><br/>{rows}")
        line.hover(stroke_width=3, stroke_opacity=1).animate("fade", delay=index * 20, duration=700)

    for dimension in data.dimensions:
        group = f.plot.append(axis_left(scales[dimension])).set(transform=translate(x(dimension), 0))
        group.add("text", dimension, y=-12, text_anchor="middle", fill="#263238", font_size=12)
    return f.root


@register_renderer("radar_small_multiples")
def render_radar_small_multiples(data: Sequence[RadarProfile], *, width: float, height: float) -> Node:
    """A grid of radar profiles sharing one radial scale."""

    require_data("radar_small_multiples", data)
    root = svg_root(width, height)
    metrics = [name for name, _value in data[0].metrics]
    columns = 3
    rows = math.ceil(len(data) / columns)
    cell_width, cell_height = width / columns, height / rows
    radius = min(cell_width, cell_height) * 0.32
    r = LinearScale((0, max(value for profile in data for _name, value in profile.metrics) or 1), (0, radius))
    color = OrdinalScale(palettes.TABLEAU10, [profile.name for profile in data])

    for index, profile in enumerate(data):
        center_x = index % columns * cell_width + cell_width / 2
        center_y = index // columns * cell_height + cell_height / 2 + 8
        group = root.add("g", class_="radar-multiple", transform=translate(center_x, center_y))
        for step in range(1, 5):
            group.add("circle", r=radius * step / 4, fill="none", stroke="#eceff1")
        values = dict(profile.metrics)
        for i, metric in enumerate(metrics):
            end_x, end_y = polar(i / len(metrics) * TAU, radius)
            group.add("line", x1=0, y1=0, x2=end_x, y2=end_y, stroke="#cfd8dc")
            group.add("text", metric, x=end_x * 1.12, y=end_y * 1.12, text_anchor="middle", font_size=9, fill="#546e7a")
        outline = [polar(i / len(metrics) * TAU, r(values.get(metric, 0.0))) for i, metric in enumerate(metrics)]
        shape = group.add(
            "path",
            class_="radar-area",
            d=polygon_path(outline),
            fill=color(profile.name),
            fill_opacity=0.35,
            stroke=color(profile.name),
            stroke_width=1.8,
        )
        details = "<br/>".join(f"{escape(metric)}: {fixed(values.get(metric, 0.0), 1)}" for metric in metrics)
        shape.tooltip(f"<strong>{escape(profile.name)}</strong><br/>{details}")
        shape.hover(fill_opacity=0.6).animate("fade", duration=700)
        group.add(
            "text",
            profile.name,
            x=0,
            y=-radius - 16,
            text_anchor="middle",
            font_size=12,
            font_weight=600,
            fill="#263238",
        )
    return root


@register_renderer("hybrid_scatter")
def render_hybrid_scatter(data: Sequence[Point2D], *, width: float, height: float) -> Node:
    """SVG axes over a canvas layer that draws every point.

    The point coordinates travel in `root.meta["canvas"]` (pixel space of the
    whole chart) so thousands of points do not become SVG elements.
    """

    require_data("hybrid_scatter", data)
    f = frame(width, height, Margin(20, 30, 50, 60))
    x = LinearScale((0, max(p.x for p in data) or 100), (0, f.inner_width)).nice()
    y = LinearScale((0, max(p.y for p in data) or 100), (f.inner_height, 0)).nice()
    left, top = f.margin.left, f.margin.top
    f.root.meta["canvas"] = {
        "width": width,
        "height": height,
        "radius": CANVAS_POINT_RADIUS,
        "fill": CANVAS_POINT_FILL,
        "points": [[round(left + x(p.x), 2), round(top + y(p.y), 2)] for p in data],
    }

    overlay = f.plot.add("rect", class_="hit", width=f.inner_width, height=f.inner_height, fill="transparent")
    overlay.tooltip(f"<strong>{locale_number(len(data))} points</strong><br/>Drawn on a canvas layer")
    bottom_axis(f, x, ticks=10)
    f.plot.append(axis_left(y, ticks=8))
    x_axis_caption(f, "X Axis")
    y_axis_caption(f, "Y Axis", offset=16)
    return f.root
