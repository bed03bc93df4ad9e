"""SVG path generators: lines, areas, arcs, ribbons and links.

Angles follow the usual chart convention: 0 radians points to 12 o'clock and
angles grow clockwise. Curves interpolate the same way as the classic
monotone, basis and Catmull-Rom splines.
"""

from __future__ import annotations

import math
from collections.abc import Callable, Sequence
from dataclasses import dataclass
from typing import Final, Literal

from .scene import fmt

Point = tuple[float, float]
CurveName = Literal["linear", "linear_closed", "monotone_x", "basis", "catmull_rom", "step"]

_EPSILON: Final[float] = 1e-12
TAU: Final[float] = 2 * math.pi


class PathBuilder:
    """Accumulate SVG path commands."""

    __slots__ = ("_parts",)

    def __init__(self) -> None:
        self._parts: list[str] = []

    def move_to(self, x: float, y: float) -> None:
        self._parts.append(f"M{fmt(x)},{fmt(y)}")

    def line_to(self, x: float, y: float) -> None:
        self._parts.append(f"L{fmt(x)},{fmt(y)}")

    def curve_to(self, x1: float, y1: float, x2: float, y2: float, x: float, y: float) -> None:
        self._parts.append(f"C{fmt(x1)},{fmt(y1)},{fmt(x2)},{fmt(y2)},{fmt(x)},{fmt(y)}")

    def quad_to(self, x1: float, y1: float, x: float, y: float) -> None:
        self._parts.append(f"Q{fmt(x1)},{fmt(y1)},{fmt(x)},{fmt(y)}")

    def arc_to(self, radius: float, large: bool, sweep: bool, x: float, y: float) -> None:
        self._parts.append(f"A{fmt(radius)},{fmt(radius)},0,{int(large)},{int(sweep)},{fmt(x)},{fmt(y)}")

    def close(self) -> None:
        self._parts.append("Z")

    def __str__(self) -> str:
        return "".join(self._parts)


def polar(angle: float, radius: float) -> Point:
    """Convert a clockwise-from-12-o'clock angle and a radius to x/y."""

    return radius * math.sin(angle), -radius * math.cos(angle)


def _start(path: PathBuilder, x: float, y: float, connect: bool) -> None:
    if connect:
        path.line_to(x, y)
    else:
        path.move_to(x, y)


def _curve_linear(path: PathBuilder, points: Sequence[Point], connect: bool) -> None:
    for index, (x, y) in enumerate(points):
        if index == 0:
            _start(path, x, y, connect)
        else:
            path.line_to(x, y)


def _curve_linear_closed(path: PathBuilder, points: Sequence[Point], connect: bool) -> None:
    _curve_linear(path, points, connect)
    if points:
        path.close()


def _curve_step(path: PathBuilder, points: Sequence[Point], connect: bool) -> None:
    for index, (x, y) in enumerate(points):
        if index == 0:
            _start(path, x, y, connect)
            continue
        previous_x, previous_y = points[index - 1]
        mid = (previous_x + x) / 2
        path.line_to(mid, previous_y)
        path.line_to(mid, y)
        path.line_to(x, y)


def _sign(value: float) -> int:
    return -1 if value < 0 else 1


def _curve_monotone_x(path: PathBuilder, points: Sequence[Point], connect: bool) -> None:
    """Monotone cubic interpolation in x (Steffen's method)."""

    n = len(points)
    if n == 0:
        return
    _start(path, points[0][0], points[0][1], connect)
    if n == 1:
        return
    if n == 2:
        path.line_to(*points[1])
        return

    def slope3(x0: float, y0: float, x1: float, y1: float, x2: float, y2: float) -> float:
        h0 = x1 - x0
        h1 = x2 - x1
        s0 = (y1 - y0) / h0 if h0 else (0.0 if y1 == y0 else math.copysign(math.inf, y1 - y0))
        s1 = (y2 - y1) / h1 if h1 else (0.0 if y2 == y1 else math.copysign(math.inf, y2 - y1))
        p = (s0 * h1 + s1 * h0) / (h0 + h1) if (h0 + h1) else 0.0
        result = (_sign(s0) + _sign(s1)) * min(abs(s0), abs(s1), 0.5 * abs(p))
        return result if math.isfinite(result) else 0.0

    def slope2(x0: float, y0: float, x1: float, y1: float, t: float) -> float:
        h = x1 - x0
        return (3 * (y1 - y0) / h - t) / 2 if h else t

    def segment(x0: float, y0: float, x1: float, y1: float, t0: float, t1: float) -> None:
        dx = (x1 - x0) / 3
        path.curve_to(x0 + dx, y0 + dx * t0, x1 - dx, y1 - dx * t1, x1, y1)

    tangents = [0.0] * n
    for i in range(1, n - 1):
        tangents[i] = slope3(*points[i - 1], *points[i], *points[i + 1])
    tangents[0] = slope2(*points[0], *points[1], tangents[1])
    tangents[-1] = slope2(*points[-2], *points[-1], tangents[-2])
    for i in range(1, n):
        segment(*points[i - 1], *points[i], tangents[i - 1], tangents[i])


def _curve_basis(path: PathBuilder, points: Sequence[Point], connect: bool) -> None:
    """Uniform cubic B-spline through the end points."""

    n = len(points)
    if n == 0:
        return
    _start(path, points[0][0], points[0][1], connect)
    if n == 1:
        return
    if n == 2:
        path.line_to(*points[1])
        return

    def segment(p0: Point, p1: Point, p: Point) -> None:
        (x0, y0), (x1, y1), (x, y) = p0, p1, p
        path.curve_to(
            (2 * x0 + x1) / 3,
            (2 * y0 + y1) / 3,
            (x0 + 2 * x1) / 3,
            (y0 + 2 * y1) / 3,
            (x0 + 4 * x1 + x) / 6,
            (y0 + 4 * y1 + y) / 6,
        )

    (x0, y0), (x1, y1) = points[0], points[1]
    path.line_to((5 * x0 + x1) / 6, (5 * y0 + y1) / 6)
    for i in range(2, n):
        segment(points[i - 2], points[i - 1], points[i])
    segment(points[-2], points[-1], points[-1])
    path.line_to(*points[-1])


def _curve_catmull_rom(path: PathBuilder, points: Sequence[Point], connect: bool, alpha: float = 0.5) -> None:
    """Centripetal Catmull-Rom spline."""

    n = len(points)
    if n == 0:
        return
    _start(path, points[0][0], points[0][1], connect)
    if n == 1:
        return
    if n == 2:
        path.line_to(*points[1])
        return

    def distance_pow(a: Point, b: Point) -> tuple[float, float]:
        dx, dy = a[0] - b[0], a[1] - b[1]
        value_2a = (dx * dx + dy * dy) ** alpha
        return math.sqrt(value_2a), value_2a

    extended = [points[0], *points, points[-1]]
    for i in range(1, n):
        p0, p1, p2, p3 = extended[i - 1], extended[i], extended[i + 1], extended[i + 2]
        l01_a, l01_2a = distance_pow(p0, p1) if i > 1 else (0.0, 0.0)
        l12_a, l12_2a = distance_pow(p1, p2)
        l23_a, l23_2a = distance_pow(p2, p3)
        c1x, c1y = p1
        c2x, c2y = p2
        if l01_a > _EPSILON:
            a = 2 * l01_2a + 3 * l01_a * l12_a + l12_2a
            scale = 3 * l01_a * (l01_a + l12_a)
            c1x = (p1[0] * a - p0[0] * l12_2a + p2[0] * l01_2a) / scale
            c1y = (p1[1] * a - p0[1] * l12_2a + p2[1] * l01_2a) / scale
        if l23_a > _EPSILON:
            b = 2 * l23_2a + 3 * l23_a * l12_a + l12_2a
            scale = 3 * l23_a * (l23_a + l12_a)
            c2x = (p2[0] * b + p1[0] * l23_2a - p3[0] * l12_2a) / scale
            c2y = (p2[1] * b + p1[1] * l23_2a - p3[1] * l12_2a) / scale
        path.curve_to(c1x, c1y, c2x, c2y, p2[0], p2[1])


CURVES: Final[dict[str, Callable[[PathBuilder, Sequence[Point], bool], None]]] = {
    "linear": _curve_linear,
    "linear_closed": _curve_linear_closed,
    "monotone_x": _curve_monotone_x,
    "basis": _curve_basis,
    "catmull_rom": _curve_catmull_rom,
    "step": _curve_step,
}


def _curve(name: str) -> Callable[[PathBuilder, Sequence[Point], bool], None]:
    try:
        return CURVES[name]
    except KeyError as exc:
        raise ValueError(f"Unknown curve: {name!r}") from exc


def line_path(points: Sequence[Point], *, curve: CurveName = "linear") -> str:
    """Return the path data for a polyline through `points`.

    Args:
        points: Screen coordinates in drawing order.
        curve: Interpolation between the points.

    Returns:
        SVG path data, or an empty string when there are no points.
    """

    path = PathBuilder()
    _curve(curve)(path, list(points), False)
    return str(path)


def area_path(top: Sequence[Point], bottom: Sequence[Point], *, curve: CurveName = "linear") -> str:
    """Return the path data for the band between two lines.

    `top` and `bottom` are given in the same (left-to-right) order; the bottom
    line is traced backwards so the outline closes.
    """

    if not top:
        return ""
    path = PathBuilder()
    draw = _curve(curve)
    draw(path, list(top), False)
    draw(path, list(reversed(bottom)), True)
    path.close()
    return str(path)


def baseline_area_path(points: Sequence[Point], baseline: float, *, curve: CurveName = "linear") -> str:
    """Return an area path from `points` down to a horizontal baseline."""

    return area_path(points, [(x, baseline) for x, _y in points], curve=curve)


def arc_path(
    *,
    inner_radius: float,
    outer_radius: float,
    start_angle: float,
    end_angle: float,
    pad_angle: float = 0.0,
) -> str:
    """Return the path data for an annular sector centred on the origin.

    Args:
        inner_radius: Inner radius (0 draws a pie slice).
        outer_radius: Outer radius.
        start_angle: Start angle in radians.
        end_angle: End angle in radians.
        pad_angle: Angular gap kept between adjacent sectors.
    """

    r0, r1 = sorted((max(0.0, inner_radius), max(0.0, outer_radius)))
    if r1 <= _EPSILON:
        return "M0,0Z"
    a0, a1 = start_angle, end_angle
    delta = abs(a1 - a0)
    clockwise = a1 >= a0
    path = PathBuilder()

    if delta >= TAU - 1e-6:
        # Full ring: two half circles per radius.
        path.move_to(*polar(a0, r1))
        path.arc_to(r1, False, True, *polar(a0 + math.pi, r1))
        path.arc_to(r1, False, True, *polar(a0, r1))
        if r0 > _EPSILON:
            path.move_to(*polar(a0, r0))
            path.arc_to(r0, False, False, *polar(a0 - math.pi, r0))
            path.arc_to(r0, False, False, *polar(a0, r0))
        path.close()
        return str(path)

    a00, a01, a10, a11 = a0, a1, a0, a1
    if pad_angle > _EPSILON:
        half_pad = pad_angle / 2
        pad_radius = math.sqrt(r0 * r0 + r1 * r1)
        direction = 1 if clockwise else -1
        p1 = math.asin(min(1.0, pad_radius / r1 * math.sin(half_pad)))
        if delta > 2 * p1:
            a10 += p1 * direction
            a11 -= p1 * direction
        else:
            a10 = a11 = (a0 + a1) / 2
        if r0 > _EPSILON:
            p0 = math.asin(min(1.0, pad_radius / r0 * math.sin(half_pad)))
            if delta > 2 * p0:
                a00 += p0 * direction
                a01 -= p0 * direction
            else:
                a00 = a01 = (a0 + a1) / 2

    outer_delta = abs(a11 - a10)
    path.move_to(*polar(a10, r1))
    if outer_delta > _EPSILON:
        path.arc_to(r1, outer_delta > math.pi, clockwise, *polar(a11, r1))
    if r0 > _EPSILON:
        inner_delta = abs(a01 - a00)
        path.line_to(*polar(a01, r0))
        if inner_delta > _EPSILON:
            path.arc_to(r0, inner_delta > math.pi, not clockwise, *polar(a00, r0))
    else:
        path.line_to(0, 0)
    path.close()
    return str(path)


def arc_centroid(*, inner_radius: float, outer_radius: float, start_angle: float, end_angle: float) -> Point:
    """Return the midpoint of an annular sector."""

    return polar((start_angle + end_angle) / 2, (inner_radius + outer_radius) / 2)


@dataclass(frozen=True, slots=True)
class PieSlice:
    """Angular extent of one pie slice."""

    index: int
    value: float
    start_angle: float
    end_angle: float


def pie_layout(
    values: Sequence[float],
    *,
    start_angle: float = 0.0,
    end_angle: float = TAU,
    pad_angle: float = 0.0,
) -> list[PieSlice]:
    """Split an angular range into slices proportional to `values` (data order).

    Args:
        values: Non-negative slice values.
        start_angle: First slice start.
        end_angle: Last slice end.
        pad_angle: Gap between slices, taken from the available range.
    """

    total = sum(v for v in values if v > 0)
    span = end_angle - start_angle
    n = len(values)
    pad = min(abs(span) / n if n else 0.0, pad_angle)
    available = abs(span) - n * pad
    direction = 1 if span >= 0 else -1
    k = available / total * direction if total else 0.0
    slices: list[PieSlice] = []
    angle = start_angle
    for index, value in enumerate(values):
        width = max(0.0, value) * k
        next_angle = angle + width + pad * direction
        slices.append(PieSlice(index=index, value=value, start_angle=angle, end_angle=next_angle))
        angle = next_angle
    return slices


def ribbon_path(
    *,
    radius: float,
    source_angles: tuple[float, float],
    target_angles: tuple[float, float],
) -> str:
    """Return a chord ribbon joining two arcs on a circle through the centre."""

    sa0, sa1 = source_angles
    ta0, ta1 = target_angles
    path = PathBuilder()
    path.move_to(*polar(sa0, radius))
    path.arc_to(radius, abs(sa1 - sa0) > math.pi, sa1 >= sa0, *polar(sa1, radius))
    if (sa0, sa1) != (ta0, ta1):
        path.quad_to(0, 0, *polar(ta0, radius))
        path.arc_to(radius, abs(ta1 - ta0) > math.pi, ta1 >= ta0, *polar(ta1, radius))
    path.quad_to(0, 0, *polar(sa0, radius))
    path.close()
    return str(path)


def link_horizontal(source: Point, target: Point) -> str:
    """Cubic link leaving and entering horizontally."""

    (x0, y0), (x1, y1) = source, target
    mid = (x0 + x1) / 2
    path = PathBuilder()
    path.move_to(x0, y0)
    path.curve_to(mid, y0, mid, y1, x1, y1)
    return str(path)


def link_radial(source: tuple[float, float], target: tuple[float, float]) -> str:
    """Cubic link between two `(angle, radius)` positions."""

    (a0, r0), (a1, r1) = source, target
    mid = (r0 + r1) / 2
    path = PathBuilder()
    path.move_to(*polar(a0, r0))
    path.curve_to(*polar(a0, mid), *polar(a1, mid), *polar(a1, r1))
    return str(path)


def polygon_path(points: Sequence[Point]) -> str:
    """Closed straight-edged polygon."""

    return line_path(points, curve="linear_closed")
