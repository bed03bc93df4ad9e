"""Binning, hexagonal aggregation and filled contour bands.

Histograms, violins and ridgelines share `bin_values`; the hexbin plot uses
`hexbin`; the contour plot interpolates scattered samples onto a grid with
`idw_grid` and traces threshold regions with `contour_bands`.
"""

from __future__ import annotations

import bisect
import math
from collections.abc import Sequence
from dataclasses import dataclass, field

import numpy as np
from matplotlib.figure import Figure
from matplotlib.path import Path

from ..scales import extent, nice_domain, ticks

Ring = list[tuple[float, float]]


@dataclass(slots=True)
class Bin:
    """Half-open interval `[x0, x1)` and the values that fell inside it.

    The last bin is closed on the right.
    """

    x0: float
    x1: float
    values: list[float] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.values)

    @property
    def mid(self) -> float:
        return (self.x0 + self.x1) / 2


def bin_thresholds(domain: tuple[float, float], count: int) -> list[float]:
    """Round interior thresholds that split `domain` into about `count` bins."""

    x0, x1 = domain
    values = ticks(x0, x1, count)
    if values and values[-1] >= x1:
        values.pop()
    return [t for t in values if x0 < t <= x1]


def bin_values(
    values: Sequence[float],
    *,
    domain: tuple[float, float] | None = None,
    thresholds: int | Sequence[float] = 20,
) -> list[Bin]:
    """Group values into contiguous bins.

    Args:
        values: Samples to bin. Values outside `domain` are ignored.
        domain: Binning interval; defaults to the extent of `values`.
        thresholds: Either an approximate bin count (thresholds land on
            round tick values) or explicit interior thresholds.

    Returns:
        Bins covering the domain in ascending order.
    """

    if not values:
        return []
    x0, x1 = domain if domain is not None else extent(values)
    if isinstance(thresholds, int):
        edges = bin_thresholds((x0, x1), thresholds)
    else:
        edges = sorted(t for t in thresholds if x0 < t <= x1)
    bounds = [x0, *edges, x1]
    bins = [Bin(x0=bounds[i], x1=bounds[i + 1]) for i in range(len(bounds) - 1)]
    for value in values:
        if x0 <= value <= x1:
            bins[min(bisect.bisect_right(edges, value), len(bins) - 1)].values.append(value)
    return bins


@dataclass(slots=True)
class HexBin:
    """A hexagon centre and the points it collected."""

    x: float
    y: float
    points: list[tuple[float, float]] = field(default_factory=list)

    @property
    def count(self) -> int:
        return len(self.points)


def _js_round(value: float) -> int:
    return math.floor(value + 0.5)


def hexbin(points: Sequence[tuple[float, float]], *, radius: float) -> list[HexBin]:
    """Aggregate screen-space points into pointy-top hexagons.

    Args:
        points: `(x, y)` positions in pixels.
        radius: Hexagon circumradius in pixels.

    Returns:
        Non-empty bins in first-seen order.
    """

    dx = radius * 2 * math.sin(math.pi / 3)
    dy = radius * 1.5
    bins: dict[tuple[int | float, int], HexBin] = {}
    for x, y in points:
        py = y / dy
        pj = _js_round(py)
        px = x / dx - (pj & 1) / 2
        pi: float = _js_round(px)
        py1 = py - pj
        if abs(py1) * 3 > 1:
            px1 = px - pi
            pi2 = pi + (-1 if px < pi else 1) / 2
            pj2 = pj + (-1 if py < pj else 1)
            px2 = px - pi2
            py2 = py - pj2
            if px1 * px1 + py1 * py1 > px2 * px2 + py2 * py2:
                pi = pi2 + (1 if pj & 1 else -1) / 2
                pj = pj2
        key = (pi, pj)
        hexagon = bins.get(key)
        if hexagon is None:
            hexagon = bins[key] = HexBin(x=(pi + (pj & 1) / 2) * dx, y=pj * dy)
        hexagon.points.append((x, y))
    return list(bins.values())


def hexagon_path(radius: float) -> str:
    """Relative hexagon outline centred on the origin (use with translate)."""

    corners = [(math.sin(a) * radius, -math.cos(a) * radius) for a in (i * math.pi / 3 for i in range(6))]
    x0, y0 = corners[0]
    moves = [f"m{x0:.3f},{y0:.3f}"]
    for (ax, ay), (bx, by) in zip(corners, corners[1:]):
        moves.append(f"l{bx - ax:.3f},{by - ay:.3f}")
    return "".join(moves) + "z"


def idw_grid(
    samples: Sequence[tuple[float, float, float]],
    *,
    x_domain: tuple[float, float],
    y_domain: tuple[float, float],
    size: int = 40,
) -> tuple[np.ndarray, np.ndarray, np.ndarray]:
    """Interpolate scattered samples onto a regular grid.

    Uses inverse-distance weighting with weight `1 / d**2`; a grid node that
    coincides with a sample gives that sample a weight of 1000.

    Returns:
        `(xs, ys, z)` where `z[j, i]` is the value at `(xs[i], ys[j])`.
    """

    xs = np.linspace(x_domain[0], x_domain[1], size)
    ys = np.linspace(y_domain[0], y_domain[1], size)
    data = np.asarray(samples, dtype=float)
    gx, gy = np.meshgrid(xs, ys)
    dist2 = (gx[..., None] - data[:, 0]) ** 2 + (gy[..., None] - data[:, 1]) ** 2
    with np.errstate(divide="ignore"):
        weights = np.where(dist2 == 0, 1000.0, 1.0 / dist2)
    z = (weights * data[:, 2]).sum(axis=-1) / weights.sum(axis=-1)
    return xs, ys, z


def contour_thresholds(values: np.ndarray, count: int) -> list[float]:
    """Round thresholds spanning the data, dropping those outside it."""

    lo, hi = float(np.min(values)), float(np.max(values))
    start, stop = nice_domain(lo, hi, count)
    result = ticks(start, stop, count)
    while result and result[-1] >= hi:
        result.pop()
    while len(result) > 1 and result[1] < lo:
        result.pop(0)
    return result


@dataclass(frozen=True, slots=True)
class ContourBand:
    """Region where the interpolated value is at least `value`."""

    value: float
    rings: tuple[tuple[tuple[float, float], ...], ...]


def _path_rings(path: Path) -> list[Ring]:
    rings: list[Ring] = []
    current: Ring = []
    for vertices, code in path.iter_segments(simplify=False, curves=False):
        if code == Path.MOVETO:
            if current:
                rings.append(current)
            current = [(float(vertices[0]), float(vertices[1]))]
        elif code == Path.LINETO:
            current.append((float(vertices[0]), float(vertices[1])))
        elif code == Path.CLOSEPOLY:
            if current:
                rings.append(current)
            current = []
    if current:
        rings.append(current)
    return rings


def contour_bands(xs: np.ndarray, ys: np.ndarray, z: np.ndarray, *, thresholds: int = 10) -> list[ContourBand]:
    """Trace nested filled regions, one per threshold, in data coordinates.

    Each band covers every grid cell at or above its threshold, so drawing
    them in order paints higher levels on top of lower ones.
    """

    top = float(np.max(z)) + 1.0
    axes = Figure().add_subplot()
    bands: list[ContourBand] = []
    for threshold in contour_thresholds(z, thresholds):
        filled = axes.contourf(xs, ys, z, levels=[threshold, top])
        rings = [tuple(ring) for path in filled.get_paths() for ring in _path_rings(path) if len(ring) > 2]
        filled.remove()
        bands.append(ContourBand(value=threshold, rings=tuple(rings)))
    return bands
