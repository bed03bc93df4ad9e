"""Tests for the layout algorithms behind the composite charts."""

from __future__ import annotations

import math

import numpy as np
import pytest

from core.charting.errors import ChartRenderError
from core.charting.layout.chord import chord_layout
from core.charting.layout.density import bin_values, contour_bands, hexbin, idw_grid
from core.charting.layout.flow import flow_graph, throughput
from core.charting.layout.force import collide_swarm, spring_positions
from core.charting.layout.geometry import bounds, polygon_area, scale_about, vertex_mean
from core.charting.layout.hierarchy import cluster, flatten, pack, tidy_tree
from core.charting.layout.stack import stack
from core.charting.layout.tessellation import voronoi_cells
from mockdata.dto import FlowData, FlowLink, NetworkData, NetworkLink, NetworkNode, TreeNode
from mockdata.fixtures import load_fixtures

pytestmark = pytest.mark.unit


@pytest.fixture
def tree_nodes():
    return flatten(load_fixtures()["tree"])


# --- stack -------------------------------------------------------------------


def test_stack_none_accumulates_from_zero() -> None:
    """Each series starts where the previous one ended."""

    series = stack(["a", "b"], [[1, 2], [3, 4]])
    assert series[0].points == [[0, 1], [0, 3]]
    assert series[1].points == [[1, 3], [3, 7]]


def test_stack_expand_normalizes_rows() -> None:
    """Expanded stacks sum to one per row."""

    series = stack(["a", "b"], [[1, 3]], offset="expand")
    assert series[0].points == [[0, 0.25]]
    assert series[1].points == [[0.25, 1.0]]


def test_stack_wiggle_preserves_layer_thickness() -> None:
    """The streamgraph baseline moves but each layer keeps its value."""

    rows = [[1, 2, 3], [2, 2, 2], [4, 1, 2], [3, 3, 3]]
    series = stack(["a", "b", "c"], rows, offset="wiggle")
    for i, s in enumerate(series):
        for j, (lower, upper) in enumerate(s.points):
            assert upper - lower == pytest.approx(rows[j][i])


def test_stack_rejects_unknown_offset() -> None:
    """Only the supported offsets may be requested."""

    with pytest.raises(ValueError):
        stack(["a"], [[1]], offset="silhouette")  # type: ignore[arg-type]


# --- chord -------------------------------------------------------------------


def test_chord_layout_groups_cover_the_circle() -> None:
    """Group arcs are proportional to row sums; the larger flow is the source."""

    layout = chord_layout([[0, 2], [1, 0]])
    assert [g.value for g in layout.groups] == [2, 1]
    assert layout.groups[0].end_angle == pytest.approx(4 * math.pi / 3)
    assert layout.groups[1].end_angle == pytest.approx(2 * math.pi)
    assert len(layout.chords) == 1
    assert layout.chords[0].source.index == 0
    assert layout.chords[0].source.value == 2
    assert layout.chords[0].target.value == 1


def test_chord_layout_pads_groups() -> None:
    """Padding leaves gaps between consecutive groups."""

    layout = chord_layout([[0, 1], [1, 0]], pad_angle=0.1)
    assert layout.groups[1].start_angle - layout.groups[0].end_angle == pytest.approx(0.1)


def test_chord_layout_rejects_non_square_matrix() -> None:
    """The flow matrix must be square."""

    with pytest.raises(ChartRenderError):
        chord_layout([[0, 1], [1]])


# --- flow --------------------------------------------------------------------


def test_flow_graph_sums_throughput() -> None:
    """Node throughput is the larger of inbound and outbound totals."""

    data = load_fixtures()["sankey"]
    graph = flow_graph(data)
    assert graph.number_of_nodes() == 7
    assert graph.number_of_edges() == 7
    by_name = {name: i for i, name in enumerate(data.nodes)}
    assert throughput(graph, by_name["Middle 1"]) == 35
    assert throughput(graph, by_name["Source B"]) == 25
    assert throughput(graph, by_name["Target X"]) == 45


def test_flow_graph_merges_parallel_links() -> None:
    """Repeated source/target pairs add up."""

    graph = flow_graph(FlowData(nodes=("a", "b"), links=(FlowLink(0, 1, 2), FlowLink(0, 1, 3))))
    assert graph[0][1]["value"] == 5


def test_flow_graph_rejects_cycles_missing_nodes_and_negative_values() -> None:
    """Circular flows, dangling indexes and negative flows are render errors."""

    cyclic = FlowData(nodes=("a", "b"), links=(FlowLink(0, 1, 1), FlowLink(1, 0, 1)))
    with pytest.raises(ChartRenderError, match="circular"):
        flow_graph(cyclic)

    dangling = FlowData(nodes=("a",), links=(FlowLink(0, 3, 1),))
    with pytest.raises(ChartRenderError, match="missing node"):
        flow_graph(dangling)

    negative = FlowData(nodes=("a", "b"), links=(FlowLink(0, 1, -1),))
    with pytest.raises(ChartRenderError, match="negative"):
        flow_graph(negative)


# --- hierarchy ---------------------------------------------------------------


def test_flatten_sums_values_in_pre_order(tree_nodes) -> None:
    """Values roll up to the root and children keep their input order."""

    root = tree_nodes[0]
    assert root.value == 25900
    assert root.parent is None
    assert [tree_nodes[i].name for i in root.children] == ["Analytics", "Products", "Marketing"]
    assert [tree_nodes[i].value for i in root.children] == [9100, 10100, 6700]
    assert len(tree_nodes) == 13
    assert sum(1 for node in tree_nodes if node.is_leaf) == 9
    assert max(node.depth for node in tree_nodes) == 2
    assert all(node.parent < node.index for node in tree_nodes[1:])


def test_pack_fits_the_canvas() -> None:
    """The root circle fills the smaller dimension; children stay inside."""

    layout = pack(load_fixtures()["tree"], width=400, height=300)
    assert layout.root.r == pytest.approx(150)
    assert (layout.root.x, layout.root.y) == (200, 150)
    assert len(layout.nodes) == 13
    for parent, child in layout.links():
        distance = math.hypot(child.x - parent.x, child.y - parent.y)
        assert distance + child.r <= parent.r + 1e-3
    leaves = layout.leaves()
    biggest = max(leaves, key=lambda placed: placed.node.value)
    smallest = min(leaves, key=lambda placed: placed.node.value)
    assert biggest.r > smallest.r


def test_pack_rejects_trees_without_positive_values() -> None:
    """Nothing can be packed when every value is zero."""

    with pytest.raises(ChartRenderError):
        pack(TreeNode("root", children=(TreeNode("a", 0),)), width=100, height=100)


def test_tidy_tree_places_depths_and_keeps_sibling_order() -> None:
    """Depth maps to y; leaves keep their left-to-right input order."""

    layout = tidy_tree(load_fixtures()["tree"], width=500, height=200)
    assert layout.root.y == 0
    assert all(leaf.y == pytest.approx(200) for leaf in layout.leaves())
    xs = [leaf.x for leaf in layout.leaves()]
    assert xs == sorted(xs)
    assert all(0 < x < 500 for x in xs)
    assert len(layout.links()) == 12


def test_cluster_aligns_leaves_and_centres_parents() -> None:
    """Dendrogram leaves share the bottom row; parents sit over their children."""

    layout = cluster(load_fixtures()["tree"], width=900, height=200)
    assert layout.root.y == pytest.approx(0)
    assert all(leaf.y == pytest.approx(200) for leaf in layout.leaves())
    assert [leaf.x for leaf in layout.leaves()] == pytest.approx([50 + 100 * i for i in range(9)])
    first_branch = layout.nodes[layout.root.node.children[0]]
    assert first_branch.x == pytest.approx(150)
    assert first_branch.y == pytest.approx(100)


# --- density -----------------------------------------------------------------


def test_bin_values_with_explicit_thresholds() -> None:
    """Bins are half-open except the last."""

    bins = bin_values([1, 2, 3, 4, 5], thresholds=[2, 4])
    assert [(b.x0, b.x1) for b in bins] == [(1, 2), (2, 4), (4, 5)]
    assert [b.count for b in bins] == [1, 2, 2]
    assert bins[1].mid == 3
    assert bin_values([]) == []


def test_bin_values_with_a_bin_count() -> None:
    """A bin count produces round thresholds covering the domain."""

    bins = bin_values([0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100], domain=(0, 100), thresholds=10)
    assert len(bins) == 10
    assert sum(b.count for b in bins) == 11
    assert bins[-1].values == [90, 100]


def test_hexbin_groups_nearby_points() -> None:
    """Coincident points share a hexagon; distant points do not."""

    bins = hexbin([(10, 10), (10, 10), (200, 200)], radius=10)
    assert sorted(b.count for b in bins) == [1, 2]


def test_idw_grid_is_constant_for_constant_samples() -> None:
    """Interpolating a constant field yields the constant everywhere."""

    xs, ys, z = idw_grid([(0, 0, 5.0), (10, 10, 5.0), (3, 7, 5.0)], x_domain=(0, 10), y_domain=(0, 10), size=8)
    assert xs.shape == (8,)
    assert ys.shape == (8,)
    assert z.shape == (8, 8)
    assert np.allclose(z, 5.0)


def test_contour_bands_are_nested_and_ascending() -> None:
    """Bands are emitted from the lowest threshold upwards."""

    xs = np.linspace(-1, 1, 30)
    ys = np.linspace(-1, 1, 30)
    gx, gy = np.meshgrid(xs, ys)
    z = 100 * np.exp(-(gx**2 + gy**2) * 3)
    bands = contour_bands(xs, ys, z, thresholds=5)
    values = [band.value for band in bands]
    assert values == sorted(values)
    assert len(bands) >= 3
    assert all(band.rings for band in bands)


# --- geometry and tessellation ----------------------------------------------------


def test_polygon_helpers() -> None:
    """Area, bounds, vertex mean and scaling of a square."""

    square = [(0, 0), (2, 0), (2, 2), (0, 2)]
    assert polygon_area(square) == 4
    assert bounds(square) == (0, 0, 2, 2)
    assert vertex_mean(square) == (1, 1)
    assert scale_about(square, 2) == [(-1, -1), (3, -1), (3, 3), (-1, 3)]
    with pytest.raises(ValueError):
        vertex_mean([])


def test_voronoi_cells_split_the_box() -> None:
    """Four symmetric sites each own a quarter of the box."""

    sites = [(25, 25), (75, 25), (25, 75), (75, 75)]
    cells = voronoi_cells(sites, bounds=(0, 0, 100, 100))
    assert len(cells) == 4
    for cell in cells:
        assert polygon_area(cell) == pytest.approx(2500)


def test_voronoi_duplicate_site_gets_empty_cell() -> None:
    """A repeated site position produces an empty polygon."""

    cells = voronoi_cells([(10, 10), (10, 10), (90, 90)], bounds=(0, 0, 100, 100))
    assert cells[1] == []
    assert polygon_area(cells[0]) + polygon_area(cells[2]) == pytest.approx(10000)


# --- force -------------------------------------------------------------------


def test_spring_positions_are_seeded_and_inside_the_canvas() -> None:
    """The same seed gives the same layout and nodes respect the margin."""

    data = load_fixtures()["network"]
    first = spring_positions(data, width=600, height=400, margin=30, seed=1)
    second = spring_positions(data, width=600, height=400, margin=30, seed=1)
    assert first == second
    assert set(first) == {node.id for node in data.nodes}
    for x, y in first.values():
        assert 30 - 1e-6 <= x <= 570 + 1e-6
        assert 30 - 1e-6 <= y <= 370 + 1e-6


def test_spring_positions_reject_unknown_link_ids() -> None:
    """Links must reference declared nodes."""

    data = NetworkData(nodes=(NetworkNode("a", 1),), links=(NetworkLink("a", "zz", 1),))
    with pytest.raises(ChartRenderError):
        spring_positions(data, width=100, height=100)


def test_collide_swarm_separates_coincident_points() -> None:
    """Two circles dropped on the same spot are pushed apart."""

    xs = np.array([50.0, 50.0])
    ys = np.array([50.0, 50.0])
    x, y = collide_swarm(xs, ys, target_x=xs, target_y=ys, radius=5, seed=3)
    assert x.shape == (2,)
    assert math.hypot(x[0] - x[1], y[0] - y[1]) > 1
