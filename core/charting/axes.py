"""Axis, grid and title helpers that emit scene nodes."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from typing import Any, Literal

from .scales import BandScale
from .scene import Node, fmt, translate

Orient = Literal["top", "right", "bottom", "left"]


def _tick_values(scale: Any, count: int, values: Sequence[Any] | None) -> list[Any]:
    if values is not None:
        return list(values)
    if isinstance(scale, BandScale):
        return list(scale.domain)
    return list(scale.ticks(count))


def _tick_position(scale: Any) -> Callable[[Any], float]:
    if isinstance(scale, BandScale):
        offset = scale.bandwidth / 2
        return lambda value: scale(value) + offset
    return scale


def _default_format(scale: Any, count: int) -> Callable[[Any], str]:
    if isinstance(scale, BandScale):
        return str
    return scale.tick_format(count)


def axis(
    orient: Orient,
    scale: Any,
    *,
    ticks: int = 10,
    tick_values: Sequence[Any] | None = None,
    tick_format: Callable[[Any], str] | None = None,
    tick_size: float = 6,
    tick_size_outer: float | None = None,
    tick_padding: float = 3,
    label_rotate: float | None = None,
    font_size: float = 10,
) -> Node:
    """Build an axis group in the local coordinates of its parent.

    Args:
        orient: Side of the plot the axis sits on.
        scale: Any scale from `core.charting.scales`.
        ticks: Approximate tick count for continuous scales.
        tick_values: Explicit tick values (overrides `ticks`).
        tick_format: Label formatter (defaults to the scale's).
        tick_size: Inner tick length; negative values draw grid-style ticks.
        tick_size_outer: Length of the domain end caps (defaults to `tick_size`).
        tick_padding: Gap between tick and label.
        label_rotate: Rotate labels by this many degrees (bottom axes).
        font_size: Label font size in pixels.

    Returns:
        A `<g class="axis axis-{orient}">` node.
    """

    values = _tick_values(scale, ticks, tick_values)
    position = _tick_position(scale)
    formatter = tick_format or _default_format(scale, ticks)
    outer = tick_size if tick_size_outer is None else tick_size_outer
    r0, r1 = scale.range
    sign = -1 if orient in ("top", "left") else 1
    horizontal = orient in ("top", "bottom")
    spacing = max(tick_size, 0) + tick_padding

    group = Node("g").set(class_=f"axis axis-{orient}", fill="none", font_size=font_size, text_anchor="middle")
    if horizontal:
        domain = f"M{fmt(r0)},{fmt(sign * outer)}V0H{fmt(r1)}V{fmt(sign * outer)}"
    else:
        domain = f"M{fmt(sign * outer)},{fmt(r0)}H0V{fmt(r1)}H{fmt(sign * outer)}"
    group.add("path", class_="domain", stroke="currentColor", d=domain)

    for value in values:
        offset = position(value)
        tick = group.add("g", class_="tick", opacity=1)
        if horizontal:
            tick.set(transform=translate(offset, 0))
            tick.add("line", stroke="currentColor", y2=sign * tick_size)
            label = tick.add("text", formatter(value), fill="currentColor", y=sign * spacing)
            label.set(dy="0em" if orient == "top" else "0.71em")
            if label_rotate is not None:
                label.set(transform=f"rotate({fmt(label_rotate)})", text_anchor="end", dx="-0.5em", dy="0.15em")
        else:
            tick.set(transform=translate(0, offset))
            tick.add("line", stroke="currentColor", x2=sign * tick_size)
            tick.add(
                "text",
                formatter(value),
                fill="currentColor",
                x=sign * spacing,
                dy="0.32em",
                text_anchor="end" if orient == "left" else "start",
            )
    return group


def axis_bottom(scale: Any, **options: Any) -> Node:
    """Axis with ticks below a horizontal line."""

    return axis("bottom", scale, **options)


def axis_left(scale: Any, **options: Any) -> Node:
    """Axis with ticks left of a vertical line."""

    return axis("left", scale, **options)


def axis_right(scale: Any, **options: Any) -> Node:
    """Axis with ticks right of a vertical line."""

    return axis("right", scale, **options)


def axis_top(scale: Any, **options: Any) -> Node:
    """Axis with ticks above a horizontal line."""

    return axis("top", scale, **options)


def grid_lines(
    scale: Any,
    *,
    orient: Literal["horizontal", "vertical"],
    length: float,
    ticks: int = 5,
    tick_values: Sequence[Any] | None = None,
    stroke: str = "#e0e0e0",
    dasharray: str | None = None,
    opacity: float | None = None,
) -> Node:
    """Build background grid lines.

    Args:
        scale: Scale positioning the lines.
        orient: `horizontal` lines span the width at y positions.
        length: Line length (plot width or height).
        ticks: Approximate number of lines.
        tick_values: Explicit line positions in data units.
        stroke: Line color.
        dasharray: Optional dash pattern.
        opacity: Optional stroke opacity.
    """

    group = Node("g").set(class_="grid")
    position = _tick_position(scale)
    for value in _tick_values(scale, ticks, tick_values):
        offset = position(value)
        if orient == "horizontal":
            line = group.add("line", x1=0, x2=length, y1=offset, y2=offset)
        else:
            line = group.add("line", x1=offset, x2=offset, y1=0, y2=length)
        line.set(stroke=stroke, stroke_dasharray=dasharray, stroke_opacity=opacity)
    return group


def chart_title(parent: Node, text: str, *, x: float, y: float, font_size: float = 16) -> Node:
    """Append a centred bold title."""

    return parent.add(
        "text",
        text,
        class_="chart-title",
        x=x,
        y=y,
        text_anchor="middle",
        font_size=font_size,
        font_weight="bold",
    )


def axis_label(
    parent: Node,
    text: str,
    *,
    x: float,
    y: float,
    rotate: bool = False,
    font_size: float = 12,
) -> Node:
    """Append an axis caption; `rotate` turns it to read bottom-to-top."""

    label = parent.add("text", text, class_="axis-label", text_anchor="middle", font_size=font_size)
    if rotate:
        label.set(transform="rotate(-90)", x=-y, y=x)
    else:
        label.set(x=x, y=y)
    return label


def plot_area(root: Node, *, left: float, top: float) -> Node:
    """Append the translated `<g>` that holds a chart's plot area."""

    return root.add("g", class_="plot", transform=translate(left, top))
