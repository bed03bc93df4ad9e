"""Force-based placement: spring layout for networks, collision swarm for dots."""

from __future__ import annotations

import math

import networkx as nx
import numpy as np

from mockdata.dto import NetworkData

from ..errors import ChartRenderError

ALPHA_MIN = 0.001
VELOCITY_DECAY = 0.4


def network_graph(data: NetworkData) -> nx.Graph:
    """Build a weighted undirected graph; link weights come from `value`.

    Raises:
        ChartRenderError: When a link references an unknown node id.
    """

    graph = nx.Graph()
    for node in data.nodes:
        graph.add_node(node.id, group=node.group)
    for link in data.links:
        if link.source not in graph or link.target not in graph:
            raise ChartRenderError(f"Link {link.source}->{link.target} references an unknown node.")
        graph.add_edge(link.source, link.target, weight=link.value)
    return graph


def spring_positions(
    data: NetworkData,
    *,
    width: float,
    height: float,
    margin: float = 30,
    seed: int = 0,
) -> dict[str, tuple[float, float]]:
    """Place nodes with a seeded Fruchterman-Reingold layout.

    The layout is scaled uniformly so that it fits inside the canvas minus
    `margin` on every side and centred.

    Returns:
        Pixel position per node id.
    """

    graph = network_graph(data)
    if graph.number_of_nodes() == 1:
        only = next(iter(graph.nodes))
        return {only: (width / 2, height / 2)}
    raw = nx.spring_layout(graph, seed=seed, weight=None, iterations=200)
    coords = np.array([raw[node.id] for node in data.nodes], dtype=float)
    lo, hi = coords.min(axis=0), coords.max(axis=0)
    span = np.where(hi - lo > 0, hi - lo, 1.0)
    scale = min((width - 2 * margin) / span[0], (height - 2 * margin) / span[1])
    centre = (lo + hi) / 2
    placed = (coords - centre) * scale + np.array([width / 2, height / 2])
    return {node.id: (float(x), float(y)) for node, (x, y) in zip(data.nodes, placed)}


def collide_swarm(
    xs: np.ndarray,
    ys: np.ndarray,
    *,
    target_x: np.ndarray,
    target_y: np.ndarray,
    radius: float,
    strength_x: float = 0.8,
    strength_y: float = 0.2,
    ticks: int = 120,
    seed: int = 0,
) -> tuple[np.ndarray, np.ndarray]:
    """Relax overlapping circles toward target positions.

    A velocity-Verlet simulation with a positional pull toward the targets
    and pairwise collision resolution. `radius` is the collision radius of
    every circle.

    Returns:
        Settled `(xs, ys)` arrays.
    """

    rng = np.random.default_rng(seed)
    x = np.asarray(xs, dtype=float).copy()
    y = np.asarray(ys, dtype=float).copy()
    vx = np.zeros_like(x)
    vy = np.zeros_like(y)
    alpha = 1.0
    alpha_decay = 1 - math.pow(ALPHA_MIN, 1 / 300)
    upper = np.triu(np.ones((len(x), len(x)), dtype=bool), k=1)
    reach = 2 * radius
    for _ in range(ticks):
        alpha += -alpha * alpha_decay
        vx += (target_x - x) * strength_x * alpha
        vy += (target_y - y) * strength_y * alpha

        px, py = x + vx, y + vy
        dx = px[:, None] - px[None, :]
        dy = py[:, None] - py[None, :]
        touching = upper & (dx * dx + dy * dy < reach * reach)
        if touching.any():
            still = touching & (dx == 0)
            dx = np.where(still, (rng.random(dx.shape) - 0.5) * 1e-6, dx)
            still = touching & (dy == 0)
            dy = np.where(still, (rng.random(dy.shape) - 0.5) * 1e-6, dy)
            dist = np.sqrt(dx * dx + dy * dy)
            push = np.where(touching, (reach - dist) / np.where(dist > 0, dist, 1.0), 0.0)
            # Equal radii: each circle absorbs half of the overlap.
            fx = dx * push * 0.5
            fy = dy * push * 0.5
            vx += fx.sum(axis=1) - fx.sum(axis=0)
            vy += fy.sum(axis=1) - fy.sum(axis=0)

        vx *= 1 - VELOCITY_DECAY
        vy *= 1 - VELOCITY_DECAY
        x += vx
        y += vy
    return x, y
