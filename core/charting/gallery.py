"""Built-in gallery page definition: sections, cards and footer content."""

from __future__ import annotations

from collections.abc import Iterator
from typing import Final

from .schema import FULL_WIDTH, HALF_FROM_LG, HALF_FROM_MD, GalleryEntry, GallerySection
from .validator import validate_gallery

SITE_TITLE: Final[str] = "D3.js Visualization Showcase"
SITE_TAGLINE: Final[str] = (
    "A comprehensive collection of interactive data visualizations with hover tooltips and enter transitions"
)


STATISTICAL: Final[GallerySection] = GallerySection(
    slug="statistical",
    title="Statistical Charts",
    description="Common charts for data analysis and business intelligence",
    icon="timeline",
    color="primary",
    entries=(
        GalleryEntry(
            slug="bar-chart",
            title="Bar Chart",
            description="Compare categorical data with vertical bars. Hover to see details.",
            icon="timeline",
            grid=HALF_FROM_LG,
            chart_type="bar",
            dataset="bar",
            width=500,
            height=350,
        ),
        GalleryEntry(
            slug="line-chart",
            title="Line Chart",
            description="Display trends over time with smooth animations and interactive points.",
            icon="timeline",
            grid=HALF_FROM_LG,
            chart_type="line",
            dataset="line",
            width=500,
            height=350,
        ),
        GalleryEntry(
            slug="area-chart",
            title="Area Chart",
            description="Stacked areas showing multiple data series with smooth curves.",
            icon="timeline",
            grid=HALF_FROM_LG,
            chart_type="area",
            dataset="area",
            width=500,
            height=350,
        ),
        GalleryEntry(
            slug="scatter-plot",
            title="Scatter Plot",
            description="Visualize relationships between two variables with color-coded categories.",
            icon="bubble_chart",
            grid=HALF_FROM_LG,
            chart_type="scatter",
            dataset="scatter",
            width=500,
            height=350,
        ),
        GalleryEntry(
            slug="pie-chart",
            title="Pie Chart",
            description="Show proportions of a whole with interactive slices.",
            icon="bubble_chart",
            grid=HALF_FROM_MD,
            chart_type="pie",
            dataset="pie",
            width=450,
            height=450,
        ),
        GalleryEntry(
            slug="donut-chart",
            title="Donut Chart",
            description="Pie chart variation with a hollow center for additional information.",
            icon="bubble_chart",
            grid=HALF_FROM_MD,
            chart_type="pie",
            dataset="pie",
            width=450,
            height=450,
            options={"inner_radius": 80},
        ),
        GalleryEntry(
            slug="radar-chart",
            title="Radar Chart",
            description="Compare multiple variables on a circular grid.",
            icon="bubble_chart",
            grid=HALF_FROM_MD,
            chart_type="radar",
            dataset="radar",
            width=450,
            height=450,
        ),
        GalleryEntry(
            slug="heatmap",
            title="Heatmap",
            description="Visualize data density with color-coded cells and gradient legend.",
            icon="map",
            grid=HALF_FROM_MD,
            chart_type="heatmap",
            dataset="heatmap",
            width=500,
            height=400,
        ),
        GalleryEntry(
            slug="histogram",
            title="Histogram",
            description="Analyze value distribution using binned frequencies.",
            icon="timeline",
            grid=HALF_FROM_MD,
            chart_type="histogram",
            dataset="histogram",
            width=500,
            height=350,
        ),
        GalleryEntry(
            slug="box-plot",
            title="Box Plot",
            description="Summarize distribution with quartiles, whiskers, and outliers.",
            icon="timeline",
            grid=HALF_FROM_MD,
            chart_type="box_plot",
            dataset="box_plot",
            width=500,
            height=350,
        ),
        GalleryEntry(
            slug="violin-plot",
            title="Violin Plot",
            description="Compare distributions across categories with density shapes.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="violin",
            dataset="violin",
            width=800,
            height=380,
        ),
        GalleryEntry(
            slug="bubble-chart",
            title="Bubble Chart",
            description="Show 3 variables with X, Y, and bubble size encoding.",
            icon="bubble_chart",
            grid=HALF_FROM_MD,
            chart_type="bubble",
            dataset="bubble",
            width=500,
            height=350,
        ),
        GalleryEntry(
            slug="waterfall-chart",
            title="Waterfall Chart",
            description="Track cumulative positive and negative changes across stages.",
            icon="timeline",
            grid=HALF_FROM_MD,
            chart_type="waterfall",
            dataset="waterfall",
            width=600,
            height=360,
        ),
        GalleryEntry(
            slug="funnel-chart",
            title="Funnel Chart",
            description="Visualize stage-by-stage conversion drop-off.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="funnel",
            dataset="funnel",
            width=800,
            height=380,
        ),
        GalleryEntry(
            slug="calendar-heatmap",
            title="Calendar Heatmap",
            description="Track daily activity intensity across weeks and months.",
            icon="map",
            grid=FULL_WIDTH,
            chart_type="calendar",
            dataset="calendar",
            width=850,
            height=280,
        ),
        GalleryEntry(
            slug="lollipop-chart",
            title="Lollipop Chart",
            description="Compare ranked categories with stem-and-dot markers.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="lollipop",
            dataset="lollipop",
            width=820,
            height=380,
        ),
        GalleryEntry(
            slug="candlestick-chart",
            title="Candlestick Chart (OHLC)",
            description="Track open-high-low-close price movement over time.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="candlestick",
            dataset="candlestick",
            width=850,
            height=400,
        ),
        GalleryEntry(
            slug="streamgraph",
            title="Streamgraph",
            description="Visualize flowing composition changes across multiple time series.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="streamgraph",
            dataset="streamgraph",
            width=860,
            height=400,
        ),
        GalleryEntry(
            slug="parallel-coordinates",
            title="Parallel Coordinates",
            description="Compare multivariate samples across multiple dimensions.",
            icon="bubble_chart",
            grid=FULL_WIDTH,
            chart_type="parallel",
            dataset="parallel",
            width=880,
            height=420,
        ),
        GalleryEntry(
            slug="chord-diagram",
            title="Chord Diagram",
            description="Show bidirectional relationship strengths between categories.",
            icon="bubble_chart",
            grid=FULL_WIDTH,
            chart_type="chord",
            dataset="chord",
            width=620,
            height=620,
        ),
        GalleryEntry(
            slug="hexbin-plot",
            title="Hexbin Plot",
            description="Aggregate dense scatter points into hexagonal density bins.",
            icon="bubble_chart",
            grid=FULL_WIDTH,
            chart_type="hexbin",
            dataset="hexbin",
            width=820,
            height=390,
        ),
        GalleryEntry(
            slug="ridgeline-chart",
            title="Ridgeline Chart",
            description="Compare many category distributions as layered density ridges.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="ridgeline",
            dataset="ridgeline",
            width=900,
            height=430,
        ),
        GalleryEntry(
            slug="horizon-chart",
            title="Horizon Chart",
            description="Compact layered time-series view with positive and negative bands.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="horizon",
            dataset="horizon",
            width=900,
            height=300,
        ),
        GalleryEntry(
            slug="bump-chart",
            title="Bump Chart",
            description="Track ranking position changes across periods.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="bump",
            dataset="bump",
            width=900,
            height=400,
        ),
        GalleryEntry(
            slug="radar-small-multiples",
            title="Radar Small Multiples",
            description="Compare many radar profiles side-by-side in a compact grid.",
            icon="bubble_chart",
            grid=FULL_WIDTH,
            chart_type="radar_small_multiples",
            dataset="radar_small_multiples",
            width=900,
            height=520,
        ),
        GalleryEntry(
            slug="hybrid-canvas-scatter",
            title="Hybrid SVG+Canvas Large Scatter",
            description="Render large point clouds with canvas while preserving SVG axes.",
            icon="bubble_chart",
            grid=FULL_WIDTH,
            chart_type="hybrid_scatter",
            dataset="large_scatter",
            width=900,
            height=430,
        ),
    ),
)

HIERARCHICAL: Final[GallerySection] = GallerySection(
    slug="hierarchical",
    title="Hierarchical Visualizations",
    description="Explore nested and hierarchical data structures",
    icon="account_tree",
    color="secondary",
    divider_before=True,
    entries=(
        GalleryEntry(
            slug="treemap",
            title="TreeMap",
            description="Display hierarchical data as nested rectangles with size proportional to values.",
            icon="account_tree",
            grid=HALF_FROM_LG,
            chart_type="treemap",
            dataset="tree",
            width=550,
            height=400,
        ),
        GalleryEntry(
            slug="sunburst-chart",
            title="Sunburst Chart",
            description="Radial visualization of hierarchical data with interactive segments.",
            icon="account_tree",
            grid=HALF_FROM_LG,
            chart_type="sunburst",
            dataset="tree",
            width=500,
            height=500,
        ),
        GalleryEntry(
            slug="circle-packing",
            title="Circle Packing",
            description="Nested circles representing hierarchical partitions by size.",
            icon="account_tree",
            grid=HALF_FROM_LG,
            chart_type="circle_packing",
            dataset="tree",
            width=520,
            height=520,
        ),
        GalleryEntry(
            slug="icicle-chart",
            title="Icicle Chart",
            description="Partitioned hierarchy layout shown as stacked rectangular layers.",
            icon="account_tree",
            grid=FULL_WIDTH,
            chart_type="icicle",
            dataset="tree",
            width=900,
            height=360,
        ),
        GalleryEntry(
            slug="tree-diagram",
            title="Tree Diagram",
            description="Classic tree layout showing parent-child relationships.",
            icon="account_tree",
            grid=FULL_WIDTH,
            chart_type="tree_diagram",
            dataset="tree",
            width=900,
            height=500,
        ),
        GalleryEntry(
            slug="dendrogram",
            title="Dendrogram",
            description="Cluster-style hierarchical tree for leaf relationship distance patterns.",
            icon="account_tree",
            grid=FULL_WIDTH,
            chart_type="dendrogram",
            dataset="tree",
            width=900,
            height=460,
        ),
    ),
)

NETWORK: Final[GallerySection] = GallerySection(
    slug="network",
    title="Network & Flow Visualizations",
    description="Visualize connections, relationships, and flows between entities",
    icon="bubble_chart",
    color="success",
    divider_before=True,
    entries=(
        GalleryEntry(
            slug="force-directed-graph",
            title="Force-Directed Graph",
            description="Network visualization with nodes placed by a seeded spring-force layout.",
            icon="bubble_chart",
            grid=HALF_FROM_LG,
            chart_type="force",
            dataset="network",
            width=550,
            height=400,
        ),
        GalleryEntry(
            slug="sankey-diagram",
            title="Sankey Diagram",
            description="Flow diagram showing the magnitude of flows between nodes.",
            icon="bubble_chart",
            grid=HALF_FROM_LG,
            chart_type="sankey",
            dataset="sankey",
            width=650,
            height=400,
        ),
        GalleryEntry(
            slug="alluvial-chart",
            title="Alluvial Chart",
            description="Track categorical transitions across sequential stages.",
            icon="bubble_chart",
            grid=FULL_WIDTH,
            chart_type="alluvial",
            dataset="alluvial",
            width=900,
            height=410,
        ),
        GalleryEntry(
            slug="adjacency-matrix",
            title="Network Adjacency Matrix",
            description="Matrix view of connection intensity between network nodes.",
            icon="bubble_chart",
            grid=FULL_WIDTH,
            chart_type="adjacency_matrix",
            dataset="network",
            width=620,
            height=620,
        ),
    ),
)

GEOSPATIAL: Final[GallerySection] = GallerySection(
    slug="geospatial",
    title="Geospatial Visualizations",
    description="Map-based views for regional intensity, symbol scaling, and population density patterns",
    icon="map",
    color="warning",
    divider_before=True,
    entries=(
        GalleryEntry(
            slug="choropleth-map",
            title="Choropleth Map",
            description="Encode region-level values using sequential color intensity.",
            icon="map",
            grid=HALF_FROM_LG,
            chart_type="choropleth",
            dataset="geo_regions",
            width=700,
            height=430,
        ),
        GalleryEntry(
            slug="proportional-symbol-map",
            title="Proportional Symbol Map",
            description="Compare regional magnitude with size-scaled symbols.",
            icon="map",
            grid=HALF_FROM_LG,
            chart_type="proportional_symbol",
            dataset="geo_regions",
            width=700,
            height=430,
        ),
        GalleryEntry(
            slug="dot-density-map",
            title="Dot Density Map",
            description="Represent regional concentration using sampled point densities.",
            icon="map",
            grid=FULL_WIDTH,
            chart_type="dot_density",
            dataset="dot_density",
            width=900,
            height=430,
        ),
        GalleryEntry(
            slug="cartogram",
            title="Cartogram",
            description="Distort region area by metric value while preserving rough geography.",
            icon="map",
            grid=FULL_WIDTH,
            chart_type="cartogram",
            dataset="geo_regions",
            width=900,
            height=430,
        ),
    ),
)

VARIANTS: Final[GallerySection] = GallerySection(
    slug="variants",
    title="New Chart Variants & Extensions",
    description="Additional chart types including grouped, stacked, and specialized visualizations",
    icon="timeline",
    color="success",
    entries=(
        GalleryEntry(
            slug="grouped-bar-chart",
            title="Grouped Bar Chart",
            description="Side-by-side bars comparing multiple series across categories.",
            icon="timeline",
            grid=HALF_FROM_LG,
            chart_type="grouped_bar",
            dataset="grouped_bar",
            width=600,
            height=380,
        ),
        GalleryEntry(
            slug="stacked-bar-chart",
            title="Stacked Bar Chart",
            description="Bars with segments showing part-to-whole composition.",
            icon="timeline",
            grid=HALF_FROM_LG,
            chart_type="stacked_bar",
            dataset="stacked_bar",
            width=600,
            height=380,
        ),
        GalleryEntry(
            slug="stacked-area-chart",
            title="Stacked Area Chart",
            description="Cumulative area trends showing composition over time.",
            icon="timeline",
            grid=HALF_FROM_LG,
            chart_type="stacked_area",
            dataset="stacked_area",
            width=600,
            height=380,
        ),
        GalleryEntry(
            slug="waffle-chart",
            title="Waffle Chart",
            description="Grid of squares for intuitive percentage visualization.",
            icon="bubble_chart",
            grid=HALF_FROM_LG,
            chart_type="waffle",
            dataset="waffle",
            width=480,
            height=480,
        ),
        GalleryEntry(
            slug="sparklines",
            title="Sparklines",
            description="Tiny inline charts for compact trend visualization.",
            icon="timeline",
            grid=HALF_FROM_LG,
            chart_type="sparklines",
            dataset="sparklines",
            width=600,
            height=350,
            options={"type": "line"},
        ),
        GalleryEntry(
            slug="small-multiples",
            title="Small Multiples Grid",
            description="Trellis display of multiple small charts for comparison.",
            icon="bubble_chart",
            grid=HALF_FROM_LG,
            chart_type="small_multiples",
            dataset="small_multiples",
            width=700,
            height=550,
            options={"chart_type": "line"},
        ),
        GalleryEntry(
            slug="gantt-chart",
            title="Gantt Chart",
            description="Project timeline with task durations and progress tracking.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="gantt",
            dataset="gantt",
            width=900,
            height=380,
            uses_today=True,
        ),
        GalleryEntry(
            slug="bullet-chart",
            title="Bullet Chart",
            description="KPI performance gauge with qualitative ranges and targets.",
            icon="timeline",
            grid=HALF_FROM_LG,
            chart_type="bullet",
            dataset="bullet",
            width=650,
            height=380,
        ),
        GalleryEntry(
            slug="slope-chart",
            title="Slope Chart",
            description="Before/after comparison showing ranking changes.",
            icon="timeline",
            grid=HALF_FROM_LG,
            chart_type="slope",
            dataset="slope",
            width=550,
            height=450,
        ),
        GalleryEntry(
            slug="beeswarm-plot",
            title="Beeswarm Plot",
            description="Force-simulated scatter plot with no overlapping points.",
            icon="bubble_chart",
            grid=HALF_FROM_LG,
            chart_type="beeswarm",
            dataset="beeswarm",
            width=650,
            height=380,
        ),
        GalleryEntry(
            slug="arc-diagram",
            title="Arc Diagram",
            description="Linear network visualization with curved connection arcs.",
            icon="account_tree",
            grid=HALF_FROM_LG,
            chart_type="arc_diagram",
            dataset="arc_diagram",
            width=750,
            height=380,
        ),
        GalleryEntry(
            slug="marimekko-chart",
            title="Marimekko Chart",
            description="Two-dimensional market share with variable column widths.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="marimekko",
            dataset="marimekko",
            width=850,
            height=480,
        ),
        GalleryEntry(
            slug="venn-diagram",
            title="Venn Diagram",
            description="Set relationships with overlapping circles and intersections.",
            icon="bubble_chart",
            grid=HALF_FROM_LG,
            chart_type="venn",
            dataset="venn",
            width=550,
            height=480,
        ),
        GalleryEntry(
            slug="contour-plot",
            title="Contour Plot",
            description="Isolines showing elevation or density patterns.",
            icon="map",
            grid=HALF_FROM_LG,
            chart_type="contour",
            dataset="contour",
            width=650,
            height=480,
        ),
        GalleryEntry(
            slug="polar-area-chart",
            title="Polar Area Chart",
            description="Radial chart with varying radii (Coxcomb/Nightingale Rose).",
            icon="bubble_chart",
            grid=HALF_FROM_LG,
            chart_type="polar_area",
            dataset="polar_area",
            width=550,
            height=550,
        ),
        GalleryEntry(
            slug="population-pyramid",
            title="Population Pyramid",
            description="Back-to-back demographic bars by age and gender.",
            icon="timeline",
            grid=HALF_FROM_LG,
            chart_type="pyramid",
            dataset="pyramid",
            width=650,
            height=480,
        ),
        GalleryEntry(
            slug="timeline-chart",
            title="Timeline Chart",
            description="Event timeline with markers and date labels.",
            icon="timeline",
            grid=FULL_WIDTH,
            chart_type="timeline",
            dataset="timeline",
            width=900,
            height=380,
        ),
        GalleryEntry(
            slug="flow-map",
            title="Flow Map",
            description="Geographic movement visualization with curved flow lines.",
            icon="map",
            grid=HALF_FROM_LG,
            chart_type="flow_map",
            dataset="flow_map",
            width=750,
            height=550,
        ),
        GalleryEntry(
            slug="voronoi-diagram",
            title="Voronoi Diagram",
            description="Nearest-neighbor spatial partitioning with colored cells.",
            icon="bubble_chart",
            grid=HALF_FROM_LG,
            chart_type="voronoi",
            dataset="voronoi",
            width=650,
            height=550,
        ),
        GalleryEntry(
            slug="radial-tree",
            title="Radial Tree",
            description="Circular hierarchical layout with radial branches.",
            icon="account_tree",
            grid=HALF_FROM_LG,
            chart_type="radial_tree",
            dataset="tree",
            width=650,
            height=650,
        ),
    ),
)

GALLERY_SECTIONS: Final[tuple[GallerySection, ...]] = (STATISTICAL, HIERARCHICAL, NETWORK, GEOSPATIAL, VARIANTS)

ABOUT_FEATURES: Final[tuple[str, ...]] = (
    "✨ Smooth animations and transitions",
    "🎯 Interactive tooltips on hover",
    "🎨 Beautiful color schemes",
    "📱 Responsive grid layout",
    "⚡ Deterministic, seeded mock data",
)


_VALIDATION = validate_gallery(GALLERY_SECTIONS)
if not _VALIDATION.is_valid:
    joined = "\n".join(_VALIDATION.errors)
    raise ValueError(f"Invalid GALLERY_SECTIONS:\n{joined}")


GALLERY_ENTRY_BY_SLUG: Final[dict[str, GalleryEntry]] = {
    entry.slug: entry for section in GALLERY_SECTIONS for entry in section.entries
}


def iter_entries(sections: tuple[GallerySection, ...] = GALLERY_SECTIONS) -> Iterator[GalleryEntry]:
    """Yield every card in page order."""

    for section in sections:
        yield from section.entries


def chart_count(sections: tuple[GallerySection, ...] = GALLERY_SECTIONS) -> int:
    """Return the number of cards on the page."""

    return sum(len(section.entries) for section in sections)
