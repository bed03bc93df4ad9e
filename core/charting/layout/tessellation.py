"""Voronoi tessellation clipped to a rectangle."""

from __future__ import annotations

from collections.abc import Sequence

import numpy as np
from scipy.spatial import Delaunay, QhullError

Point = tuple[float, float]


def _clip(polygon: list[Point], site: Point, other: Point) -> list[Point]:
    """Keep the part of `polygon` closer to `site` than to `other`."""

    ux, uy = other[0] - site[0], other[1] - site[1]
    mx, my = (site[0] + other[0]) / 2, (site[1] + other[1]) / 2

    def side(p: Point) -> float:
        return (p[0] - mx) * ux + (p[1] - my) * uy

    result: list[Point] = []
    for i, current in enumerate(polygon):
        previous = polygon[i - 1]
        s_prev, s_cur = side(previous), side(current)
        if s_cur <= 0:
            if s_prev > 0:
                t = s_prev / (s_prev - s_cur)
                result.append((previous[0] + t * (current[0] - previous[0]), previous[1] + t * (current[1] - previous[1])))
            result.append(current)
        elif s_prev <= 0:
            t = s_prev / (s_prev - s_cur)
            result.append((previous[0] + t * (current[0] - previous[0]), previous[1] + t * (current[1] - previous[1])))
    return result


def _neighbours(sites: np.ndarray) -> list[list[int]]:
    n = len(sites)
    everyone = [[j for j in range(n) if j != i] for i in range(n)]
    if n < 4:
        return everyone
    try:
        indptr, indices = Delaunay(sites).vertex_neighbor_vertices
    except QhullError:
        # Collinear or duplicate sites: compare against every other site.
        return everyone
    return [list(indices[indptr[i] : indptr[i + 1]]) for i in range(n)]


def voronoi_cells(
    sites: Sequence[Point],
    *,
    bounds: tuple[float, float, float, float],
) -> list[list[Point]]:
    """Return the clipped Voronoi polygon of every site.

    Args:
        sites: Pixel positions of the sites.
        bounds: `(x0, y0, x1, y1)` clipping rectangle.

    Returns:
        One polygon per site, in site order. A site that shares its position
        with an earlier site gets an empty polygon.
    """

    x0, y0, x1, y1 = bounds
    box: list[Point] = [(x0, y0), (x1, y0), (x1, y1), (x0, y1)]
    array = np.asarray(sites, dtype=float).reshape(-1, 2)
    neighbours = _neighbours(array)
    seen: set[Point] = set()
    cells: list[list[Point]] = []
    for i, site in enumerate(sites):
        key = (float(site[0]), float(site[1]))
        if key in seen:
            cells.append([])
            continue
        seen.add(key)
        polygon = list(box)
        for j in neighbours[i]:
            other = (float(array[j][0]), float(array[j][1]))
            if other == key:
                continue
            polygon = _clip(polygon, key, other)
            if not polygon:
                break
        cells.append(polygon)
    return cells
