"""Small polygon helpers for the map charts."""

from __future__ import annotations

from collections.abc import Sequence

Point = tuple[float, float]


def vertex_mean(points: Sequence[Point]) -> Point:
    """Average of the polygon's vertices (used as a label anchor)."""

    if not points:
        raise ValueError("vertex_mean() of an empty polygon")
    n = len(points)
    return sum(p[0] for p in points) / n, sum(p[1] for p in points) / n


def polygon_area(points: Sequence[Point]) -> float:
    """Unsigned shoelace area."""

    total = 0.0
    for i, (x1, y1) in enumerate(points):
        x0, y0 = points[i - 1]
        total += x0 * y1 - x1 * y0
    return abs(total) / 2


def bounds(points: Sequence[Point]) -> tuple[float, float, float, float]:
    """Return `(min_x, min_y, max_x, max_y)`."""

    xs = [p[0] for p in points]
    ys = [p[1] for p in points]
    return min(xs), min(ys), max(xs), max(ys)


def scale_about(points: Sequence[Point], factor: float, origin: Point | None = None) -> list[Point]:
    """Scale a polygon about `origin` (the vertex mean by default)."""

    cx, cy = origin if origin is not None else vertex_mean(points)
    return [(cx + (x - cx) * factor, cy + (y - cy) * factor) for x, y in points]
