"""Tests for the chart renderers registered in the default registry."""

from __future__ import annotations

import dataclasses
from datetime import date

import plotly.graph_objects as go
import pytest

from core.charting.errors import ChartRenderError, EmptyDataError, UnknownChartTypeError
from core.charting.figures import figure_shape_count
from core.charting.gallery import GALLERY_ENTRY_BY_SLUG, iter_entries
from core.charting.registry import ChartRendererRegistry, get_renderer, registered_chart_types
from core.charting.render import render_entry, renderer_options
from core.charting.scene import shape_count, svg_root
from mockdata.dto import (
    ArcDiagramData,
    ArcLink,
    ArcNode,
    FlowConnection,
    FlowLocation,
    FlowMapData,
    Point2D,
    WaffleSlice,
)

pytestmark = pytest.mark.unit

# Field holding the primary collection of composite datasets; plain sequences are emptied whole.
PRIMARY_FIELD = {
    "stacked_bar": "rows",
    "streamgraph": "rows",
    "stacked_area": "rows",
    "venn": "sets",
    "parallel": "samples",
    "dot_density": "regions",
    "flow_map": "locations",
    "treemap": "children",
    "sunburst": "children",
    "circle_packing": "children",
    "icicle": "children",
    "tree_diagram": "children",
    "dendrogram": "children",
    "radial_tree": "children",
    "force": "nodes",
    "sankey": "nodes",
    "alluvial": "nodes",
    "adjacency_matrix": "nodes",
    "arc_diagram": "nodes",
    "chord": "labels",
}

FIRST_ENTRY_BY_TYPE = {}
for _entry in iter_entries():
    FIRST_ENTRY_BY_TYPE.setdefault(_entry.chart_type, _entry)


def _render(slug: str, gallery_data, **overrides):
    entry = GALLERY_ENTRY_BY_SLUG[slug]
    options = renderer_options(entry, data=gallery_data) | overrides
    renderer = get_renderer(entry.chart_type)
    return renderer(gallery_data.get(entry.dataset), width=entry.width, height=entry.height, **options)


def test_every_chart_type_has_a_catalog_entry() -> None:
    """Each registered renderer is shown at least once on the page."""

    assert set(FIRST_ENTRY_BY_TYPE) == set(registered_chart_types())
    assert len(registered_chart_types()) == 59


@pytest.mark.parametrize("entry", list(iter_entries()), ids=lambda entry: entry.slug)
def test_every_entry_renders_interactive_markup(entry, gallery_data) -> None:
    """Every card produces SVG or an embedded figure with hoverable marks."""

    chart = render_entry(entry, data=gallery_data)
    assert chart.error is None
    if chart.figure:
        assert chart.svg == ""
        assert "Plotly.newPlot" in chart.figure
    else:
        assert chart.svg.startswith("<svg")
        assert 'xmlns="http://www.w3.org/2000/svg"' in chart.svg
    assert chart.shape_count > 0


@pytest.mark.parametrize("chart_type", sorted(FIRST_ENTRY_BY_TYPE))
def test_empty_primary_data_raises_empty_data_error(chart_type, gallery_data) -> None:
    """Renderers reject an empty primary collection instead of drawing nothing."""

    entry = FIRST_ENTRY_BY_TYPE[chart_type]
    data = gallery_data.get(entry.dataset)
    field_name = PRIMARY_FIELD.get(chart_type)
    empty = dataclasses.replace(data, **{field_name: ()}) if field_name else ()
    renderer = get_renderer(chart_type)

    with pytest.raises(EmptyDataError) as excinfo:
        renderer(empty, width=entry.width, height=entry.height, **renderer_options(entry, data=gallery_data))
    assert excinfo.value.chart_type == chart_type


@pytest.mark.parametrize(
    ("slug", "expected"),
    [
        ("bar-chart", 6),
        ("line-chart", 30),
        ("pie-chart", 5),
        ("treemap", 13),
        ("sunburst-chart", 13),
        ("force-directed-graph", 8),
        ("sankey-diagram", 14),
        ("adjacency-matrix", 64),
    ],
)
def test_tooltip_shape_counts(slug, expected, gallery_data) -> None:
    """Charts expose one interactive mark per datum."""

    result = _render(slug, gallery_data)
    count = figure_shape_count(result) if isinstance(result, go.Figure) else shape_count(result)
    assert count == expected


def test_hierarchy_figures_use_total_branch_values(gallery_data) -> None:
    """Partition charts size parents by the sum of their children."""

    treemap = _render("treemap", gallery_data)
    icicle = _render("icicle-chart", gallery_data)
    assert isinstance(treemap, go.Figure)
    assert [trace.type for trace in treemap.data] == ["treemap"]
    assert [trace.type for trace in icicle.data] == ["icicle"]
    trace = treemap.data[0]
    assert trace.branchvalues == "total"
    assert trace.parents[0] == ""
    assert trace.values[0] == 25900
    assert trace.labels[1:4] == ("Analytics", "Dashboard", "Reports")


def test_sankey_figure_carries_node_throughput(gallery_data) -> None:
    """Sankey nodes hover with the larger of their inbound and outbound totals."""

    figure = _render("sankey-diagram", gallery_data)
    assert [trace.type for trace in figure.data] == ["sankey"]
    node = figure.data[0].node
    assert node.label[3] == "Middle 1"
    assert node.customdata[3] == 35
    assert len(figure.data[0].link.color) == 7


def test_bar_chart_bars_animate_and_carry_tooltips(gallery_data) -> None:
    """Bars grow from the baseline and describe their value on hover."""

    bars = _render("bar-chart", gallery_data).find_all("rect", "bar")
    assert len(bars) == 6
    for bar in bars:
        assert "anim-grow-y" in bar.classes
        assert bar.attrs["data-tooltip"].startswith("<strong>Q")
        assert "data-hover" in bar.attrs


def test_donut_slices_have_an_inner_arc(gallery_data) -> None:
    """A positive inner radius adds an inner arc command to every slice."""

    pie = _render("pie-chart", gallery_data).find_all("path", "slice")
    donut = _render("donut-chart", gallery_data).find_all("path", "slice")
    assert all(path.attrs["d"].count("A") == 1 for path in pie)
    assert all(path.attrs["d"].count("A") == 2 for path in donut)


def test_waffle_caps_rounded_counts_at_total_squares() -> None:
    """Six equal categories round to 17 squares each but only 100 are drawn."""

    renderer = get_renderer("waffle")
    data = tuple(WaffleSlice(category=f"C{i}", value=1) for i in range(6))
    root = renderer(data, width=500, height=400)
    squares = root.find_all("rect", "square")
    assert len(squares) == 100
    assert shape_count(root) == 100


def test_waffle_fills_leftover_squares_with_placeholders() -> None:
    """Three equal categories own 99 squares; the last one has no tooltip."""

    renderer = get_renderer("waffle")
    data = tuple(WaffleSlice(category=name, value=10) for name in "ABC")
    root = renderer(data, width=500, height=400)
    squares = root.find_all("rect", "square")
    assert len(squares) == 100
    assert shape_count(root) == 99
    assert "data-tooltip" not in squares[-1].attrs


def test_waffle_rejects_zero_squares() -> None:
    """At least one square is needed to draw anything."""

    with pytest.raises(ChartRenderError):
        get_renderer("waffle")((WaffleSlice("A", 1),), width=200, height=200, total_squares=0)


def test_hybrid_scatter_moves_points_to_the_canvas_payload() -> None:
    """Points are not SVG elements; they travel in the canvas payload."""

    data = tuple(Point2D(x=i, y=i * 2) for i in range(50))
    root = get_renderer("hybrid_scatter")(data, width=800, height=500)
    canvas = root.meta["canvas"]
    assert canvas["width"] == 800
    assert canvas["height"] == 500
    assert len(canvas["points"]) == 50
    assert root.find_all("circle") == []
    assert shape_count(root) == 1


def test_gantt_today_marker_follows_the_given_date(gallery_data) -> None:
    """The today option moves the marker between renders."""

    first = _render("gantt-chart", gallery_data, today=date(2025, 1, 20)).find_all("line", "today")
    second = _render("gantt-chart", gallery_data, today=date(2025, 2, 20)).find_all("line", "today")
    assert len(first) == len(second) == 1
    assert float(first[0].attrs["x1"]) < float(second[0].attrs["x1"])


def test_gantt_omits_today_marker_outside_the_schedule(gallery_data) -> None:
    """No marker is drawn when today falls outside the task range."""

    root = _render("gantt-chart", gallery_data, today=date(2026, 6, 1))
    assert root.find_all("line", "today") == []


def test_flow_map_rejects_unknown_locations() -> None:
    """Flows must reference declared locations."""

    data = FlowMapData(
        locations=(FlowLocation("a", "Alpha", 0, 0), FlowLocation("b", "Beta", 10, 10)),
        flows=(FlowConnection("a", "zz", 5),),
    )
    with pytest.raises(ChartRenderError, match="unknown location"):
        get_renderer("flow_map")(data, width=600, height=400)


def test_arc_diagram_rejects_unknown_nodes() -> None:
    """Links must reference declared nodes."""

    data = ArcDiagramData(nodes=(ArcNode("a", "Alpha"),), links=(ArcLink("a", "zz"),))
    with pytest.raises(ChartRenderError, match="unknown node"):
        get_renderer("arc_diagram")(data, width=600, height=400)


def test_arc_diagram_marks_link_endpoints_for_highlighting(gallery_data) -> None:
    """Links carry their endpoint ids so hovering a node can highlight them."""

    root = _render("arc-diagram", gallery_data)
    links = root.find_all("path", "arc-link")
    nodes = root.find_all("circle", "arc-node")
    node_ids = {node.attrs["data-node"] for node in nodes}
    assert links
    assert all(link.attrs["data-source"] in node_ids for link in links)
    assert all(link.attrs["data-target"] in node_ids for link in links)


def test_unknown_chart_type_raises() -> None:
    """Looking up an unregistered type is a KeyError subclass."""

    with pytest.raises(UnknownChartTypeError):
        get_renderer("nope")
    with pytest.raises(KeyError):
        get_renderer("nope")


def test_registry_rejects_duplicates_and_blank_types() -> None:
    """A chart type can only be registered once and must be named."""

    registry = ChartRendererRegistry()

    def renderer(data, *, width, height):
        return svg_root(width, height)

    registry.register("demo", renderer)
    assert "demo" in registry
    assert registry.get("demo") is renderer
    with pytest.raises(ValueError):
        registry.register("demo", renderer)
    with pytest.raises(ValueError):
        registry.register("  ", renderer)
