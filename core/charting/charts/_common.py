"""Shared building blocks for the chart renderers."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from datetime import date
from html import escape
from typing import Literal

from ..axes import axis_bottom, axis_right
from ..scales import LinearScale
from ..scene import Node, fmt, svg_root, translate

__all__ = [
    "Frame",
    "Margin",
    "bottom_axis",
    "centered",
    "escape",
    "fixed",
    "frame",
    "gradient_legend",
    "js_number",
    "legend",
    "locale_number",
    "quantile",
    "short_date",
    "x_axis_caption",
    "y_axis_caption",
]


@dataclass(frozen=True, slots=True)
class Margin:
    """Space reserved around the plot area (pixels)."""

    top: float
    right: float
    bottom: float
    left: float

    @classmethod
    def uniform(cls, value: float) -> "Margin":
        return cls(value, value, value, value)


@dataclass(frozen=True, slots=True)
class Frame:
    """An SVG root plus the translated plot group inside its margins."""

    root: Node
    plot: Node
    inner_width: float
    inner_height: float
    margin: Margin


def frame(width: float, height: float, margin: Margin, *, class_: str = "chart") -> Frame:
    """Create the root `<svg>` and the plot group offset by `margin`."""

    root = svg_root(width, height, class_=class_)
    plot = root.add("g", class_="plot", transform=translate(margin.left, margin.top))
    return Frame(
        root=root,
        plot=plot,
        inner_width=width - margin.left - margin.right,
        inner_height=height - margin.top - margin.bottom,
        margin=margin,
    )


def bottom_axis(f: Frame, scale: object, **options: object) -> Node:
    """Append an x axis along the bottom edge of the plot area."""

    return f.plot.append(axis_bottom(scale, **options)).set(transform=translate(0, f.inner_height))


def js_number(value: float) -> str:
    """Render a number the way it prints in a browser (`42`, `3.5`)."""

    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return repr(value) if isinstance(value, float) else str(value)


def fixed(value: float, digits: int) -> str:
    """Fixed-point rendering (`fixed(3.14159, 2) == "3.14"`)."""

    return f"{value:.{digits}f}"


def locale_number(value: float) -> str:
    """Thousands-separated rendering with at most three decimals."""

    if isinstance(value, float) and value.is_integer():
        return f"{int(value):,}"
    text = f"{value:,.3f}".rstrip("0").rstrip(".")
    return text


def short_date(value: date) -> str:
    """US numeric date (`1/5/2024`)."""

    return f"{value.month}/{value.day}/{value.year}"


def x_axis_caption(f: Frame, text: str, *, offset: float = 10) -> Node:
    """Caption centred under the x axis, `offset` above the bottom edge."""

    return f.plot.add(
        "text",
        text,
        class_="axis-label",
        x=f.inner_width / 2,
        y=f.inner_height + f.margin.bottom - offset,
        text_anchor="middle",
        font_size=12,
    )


def y_axis_caption(f: Frame, text: str, *, offset: float = 15) -> Node:
    """Rotated caption left of the y axis, `offset` from the left edge."""

    return f.plot.add(
        "text",
        text,
        class_="axis-label",
        transform="rotate(-90)",
        x=-f.inner_height / 2,
        y=-f.margin.left + offset,
        text_anchor="middle",
        font_size=12,
    )


def legend(
    parent: Node,
    items: Iterable[tuple[str, str]],
    *,
    x: float,
    y: float,
    row_height: float = 20,
    marker: Literal["rect", "circle"] = "rect",
    size: float = 15,
    opacity: float | None = None,
    text_x: float = 20,
    text_y: float = 12,
    rx: float | None = None,
) -> Node:
    """Append a vertical legend of `(color, label)` rows."""

    group = parent.add("g", class_="legend", transform=translate(x, y))
    for i, (color, label) in enumerate(items):
        row = group.add("g", class_="legend-row", transform=translate(0, i * row_height))
        if marker == "circle":
            row.add("circle", cx=size / 2, cy=size / 2, r=size / 2 - 1, fill=color, opacity=opacity)
        else:
            row.add("rect", width=size, height=size, fill=color, opacity=opacity, rx=rx)
        row.add("text", label, x=text_x, y=text_y, font_size=12)
    return group


def quantile(sorted_values: Sequence[float], p: float) -> float:
    """Linear-interpolated quantile of an ascending sequence."""

    n = len(sorted_values)
    if n == 0:
        return math.nan
    if n == 1:
        return float(sorted_values[0])
    h = (n - 1) * p
    lo = math.floor(h)
    hi = min(lo + 1, n - 1)
    return sorted_values[lo] + (h - lo) * (sorted_values[hi] - sorted_values[lo])


def centered(width: float, height: float, *, class_: str = "chart") -> Frame:
    """Root plus a plot group whose origin is the canvas centre (radial charts)."""

    return frame(width, height, Margin(height / 2, width / 2, height / 2, width / 2), class_=class_)


def gradient_legend(
    root: Node,
    parent: Node,
    *,
    gradient_id: str,
    color: Callable[[float], str],
    domain: tuple[float, float],
    x: float,
    y: float,
    width: float = 20,
    height: float = 200,
    stops: int = 10,
    title: str | None = None,
    ticks: int = 5,
    stroke: str | None = None,
) -> Node:
    """Append a vertical color-ramp legend with a value axis on its right.

    The gradient definition goes into the root's `<defs>` so that the id is
    resolvable from anywhere in the document.
    """

    low, high = domain
    defs = next((child for child in root.children if child.tag == "defs"), None) or root.add("defs")
    gradient = defs.add("linearGradient", id=gradient_id, x1="0%", x2="0%", y1="100%", y2="0%")
    for i in range(stops):
        t = i / (stops - 1)
        gradient.add("stop", offset=f"{fmt(t * 100)}%", stop_color=color(low + t * (high - low)))

    group = parent.add("g", class_="color-legend", transform=translate(x, y))
    group.add("rect", width=width, height=height, fill=f"url(#{gradient_id})", stroke=stroke)
    scale = LinearScale((low, high), (height, 0))
    group.append(axis_right(scale, ticks=ticks)).set(transform=translate(width, 0))
    if title:
        group.add("text", title, x=width / 2, y=-10, text_anchor="middle", font_size=11, font_weight=600)
    return group
