"""Hierarchy flattening and node-link / circle layouts for `TreeNode` trees.

`flatten` turns a tree into pre-order records (the parallel id/parent/value
lists plotly hierarchy traces and igraph graphs are built from). Tidy trees
come from igraph's Reingold-Tilford layout and circle packing from circlify.
"""

from __future__ import annotations

from dataclasses import dataclass

import circlify
import igraph as ig
import numpy as np

from mockdata.dto import TreeNode

from ..errors import ChartRenderError


@dataclass(frozen=True, slots=True)
class FlatNode:
    """One tree node in pre-order.

    Attributes:
        index: Pre-order position (the root is 0).
        name: Display name.
        parent: Index of the parent node, None for the root.
        depth: Distance from the root.
        value: Own value plus the values of all descendants.
        children: Indexes of the child nodes in input order.
    """

    index: int
    name: str
    parent: int | None
    depth: int
    value: float
    children: tuple[int, ...]

    @property
    def is_leaf(self) -> bool:
        return not self.children


@dataclass(frozen=True, slots=True)
class PlacedNode:
    """A flattened node with a position."""

    node: FlatNode
    x: float
    y: float
    r: float = 0.0


@dataclass(frozen=True, slots=True)
class TreeLayout:
    """Positioned nodes (indexed like `flatten`) and parent-child links."""

    nodes: tuple[PlacedNode, ...]

    def links(self) -> list[tuple[PlacedNode, PlacedNode]]:
        by_index = {n.node.index: n for n in self.nodes}
        return [(by_index[n.node.parent], n) for n in self.nodes if n.node.parent in by_index]

    def leaves(self) -> list[PlacedNode]:
        return [n for n in self.nodes if n.node.is_leaf]

    @property
    def root(self) -> PlacedNode:
        return self.nodes[0]


def flatten(root: TreeNode) -> tuple[FlatNode, ...]:
    """Flatten `root` into pre-order records with summed values."""

    names: list[str] = []
    parents: list[int | None] = []
    depths: list[int] = []
    own: list[float] = []
    children: list[list[int]] = []
    stack: list[tuple[TreeNode, int | None, int]] = [(root, None, 0)]
    while stack:
        node, parent, depth = stack.pop()
        index = len(names)
        names.append(node.name)
        parents.append(parent)
        depths.append(depth)
        own.append(float(node.value or 0))
        children.append([])
        if parent is not None:
            children[parent].append(index)
        stack.extend((child, index, depth + 1) for child in reversed(node.children))

    totals = list(own)
    for index in range(len(names) - 1, 0, -1):
        totals[parents[index]] += totals[index]  # type: ignore[index]
    return tuple(
        FlatNode(
            index=i,
            name=names[i],
            parent=parents[i],
            depth=depths[i],
            value=totals[i],
            children=tuple(children[i]),
        )
        for i in range(len(names))
    )


def _graph(nodes: tuple[FlatNode, ...]) -> ig.Graph:
    edges = [(node.parent, node.index) for node in nodes if node.parent is not None]
    return ig.Graph(n=len(nodes), edges=edges, directed=True)


def _spread(values: np.ndarray, extent: float) -> np.ndarray:
    # Half a sibling gap of padding on either side of the outermost nodes.
    low, high = float(values.min()), float(values.max())
    return (values - low + 0.5) / (high - low + 1.0) * extent


def tidy_tree(root: TreeNode, *, width: float, height: float) -> TreeLayout:
    """Reingold-Tilford tree: breadth along x in `[0, width]`, depth along y.

    Args:
        root: Tree to lay out.
        width: Breadth extent (use `2 * pi` for a radial tree).
        height: Depth extent; the deepest nodes sit at `height`.
    """

    nodes = flatten(root)
    coords = np.asarray(_graph(nodes).layout_reingold_tilford(mode="out", root=[0]).coords, dtype=float)
    xs = _spread(coords[:, 0], width)
    max_depth = max(node.depth for node in nodes)
    ky = height / max_depth if max_depth else 0.0
    return TreeLayout(
        nodes=tuple(PlacedNode(node=node, x=float(xs[node.index]), y=node.depth * ky) for node in nodes)
    )


def cluster(root: TreeNode, *, width: float, height: float) -> TreeLayout:
    """Dendrogram layout: leaves evenly spaced on the bottom row.

    Parents are centred over their children and placed by height, so every
    leaf ends at `y == height` regardless of its depth.
    """

    nodes = flatten(root)
    xs = np.zeros(len(nodes))
    heights = np.zeros(len(nodes), dtype=int)
    leaves = [node.index for node in nodes if node.is_leaf]
    xs[leaves] = _spread(np.arange(len(leaves), dtype=float), width)
    # Children always follow their parent in pre-order.
    for node in reversed(nodes):
        if node.children:
            kids = list(node.children)
            xs[node.index] = xs[kids].mean()
            heights[node.index] = heights[kids].max() + 1
    top = int(heights[0])
    ky = height / top if top else 0.0
    return TreeLayout(
        nodes=tuple(
            PlacedNode(node=node, x=float(xs[node.index]), y=(top - int(heights[node.index])) * ky) for node in nodes
        )
    )


def _pack_input(nodes: tuple[FlatNode, ...], index: int) -> dict[str, object]:
    node = nodes[index]
    item: dict[str, object] = {"id": index, "datum": node.value}
    kids = sorted((c for c in node.children if nodes[c].value > 0), key=lambda c: -nodes[c].value)
    if kids:
        item["children"] = [_pack_input(nodes, c) for c in kids]
    return item


def pack(root: TreeNode, *, width: float, height: float) -> TreeLayout:
    """Circle packing: leaf areas proportional to value, children inside parents.

    The root circle is centred and fills the smaller dimension. Nodes without
    a positive value are not placed and are omitted from the layout.

    Raises:
        ChartRenderError: When the tree has no positive values.
    """

    nodes = flatten(root)
    if nodes[0].value <= 0:
        raise ChartRenderError("Circle packing needs at least one positive value.")
    top = _pack_input(nodes, 0).get("children", [])
    scale = min(width, height) / 2
    cx, cy = width / 2, height / 2
    placed = {0: PlacedNode(node=nodes[0], x=cx, y=cy, r=scale)}
    if not top:
        return TreeLayout(nodes=(placed[0],))
    circles = circlify.circlify(top, show_enclosure=True, target_enclosure=circlify.Circle(x=0, y=0, r=1))
    for circle in circles:
        if circle.ex is None:
            continue
        index = circle.ex["id"]
        placed[index] = PlacedNode(node=nodes[index], x=cx + circle.x * scale, y=cy - circle.y * scale, r=circle.r * scale)
    return TreeLayout(nodes=tuple(placed[i] for i in sorted(placed)))
