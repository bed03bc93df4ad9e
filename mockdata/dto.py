"""DTO types produced by the mock data generators.

Each chart family owns a small record shape. Records are immutable once
generated; collections are tuples so a generated dataset can be shared across
renders (and cached) safely.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True, slots=True)
class LabeledValue:
    """A categorical value (bar, pie, lollipop, waterfall, polar area)."""

    label: str
    value: float


@dataclass(frozen=True, slots=True)
class DatedValue:
    """A single time-series observation."""

    date: date
    value: float


@dataclass(frozen=True, slots=True)
class Point2D:
    """A bare 2D point."""

    x: float
    y: float


@dataclass(frozen=True, slots=True)
class ScatterPoint:
    """A categorized 2D point."""

    x: float
    y: float
    category: str


@dataclass(frozen=True, slots=True)
class TreeNode:
    """A node in a hierarchical dataset.

    Attributes:
        name: Display name.
        value: Leaf weight; internal nodes usually leave this unset.
        children: Child nodes (empty for leaves).
    """

    name: str
    value: float | None = None
    children: tuple["TreeNode", ...] = ()


@dataclass(frozen=True, slots=True)
class NetworkNode:
    """A graph node with a community group."""

    id: str
    group: int


@dataclass(frozen=True, slots=True)
class NetworkLink:
    """A weighted, id-addressed graph edge."""

    source: str
    target: str
    value: float


@dataclass(frozen=True, slots=True)
class NetworkData:
    """Nodes and links for force and matrix views."""

    nodes: tuple[NetworkNode, ...]
    links: tuple[NetworkLink, ...]


@dataclass(frozen=True, slots=True)
class FlowLink:
    """An index-addressed flow between two named nodes."""

    source: int
    target: int
    value: float


@dataclass(frozen=True, slots=True)
class FlowData:
    """Sankey / alluvial input: node names plus index-addressed links."""

    nodes: tuple[str, ...]
    links: tuple[FlowLink, ...]


@dataclass(frozen=True, slots=True)
class CategorySamples:
    """A named sample of numeric observations (violin, ridgeline, beeswarm)."""

    category: str
    values: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class BubblePoint:
    """A point with a third (size) encoding."""

    label: str
    x: float
    y: float
    size: float
    category: str


@dataclass(frozen=True, slots=True)
class FunnelStage:
    """A funnel stage and the population reaching it."""

    stage: str
    value: float


@dataclass(frozen=True, slots=True)
class Candle:
    """One OHLC observation."""

    date: date
    open: float
    high: float
    low: float
    close: float


@dataclass(frozen=True, slots=True)
class SeriesRow:
    """One time step of a multi-series dataset; values align with `keys`."""

    date: date
    values: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class MultiSeries:
    """Several aligned time series (streamgraph, stacked area).

    Attributes:
        keys: Series names in stacking order.
        rows: One row per time step.
    """

    keys: tuple[str, ...]
    rows: tuple[SeriesRow, ...]

    def series(self, key: str) -> tuple[float, ...]:
        """Return all values of one series in time order."""

        index = self.keys.index(key)
        return tuple(row.values[index] for row in self.rows)


@dataclass(frozen=True, slots=True)
class SeriesValue:
    """A value belonging to a named series."""

    series: str
    value: float


@dataclass(frozen=True, slots=True)
class GroupedBarRow:
    """A category with one value per series (grouped bars)."""

    category: str
    values: tuple[SeriesValue, ...]


@dataclass(frozen=True, slots=True)
class StackedBarRow:
    """A category with one value per stack key; values align with `keys`."""

    category: str
    values: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class StackedBars:
    """Stacked bar input."""

    keys: tuple[str, ...]
    rows: tuple[StackedBarRow, ...]


@dataclass(frozen=True, slots=True)
class ParallelSample:
    """One multivariate sample; values align with ParallelData.dimensions."""

    name: str
    values: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class ParallelData:
    """Parallel coordinates input."""

    dimensions: tuple[str, ...]
    samples: tuple[ParallelSample, ...]


@dataclass(frozen=True, slots=True)
class ChordData:
    """A square flow matrix between labelled groups."""

    labels: tuple[str, ...]
    matrix: tuple[tuple[float, ...], ...]


@dataclass(frozen=True, slots=True)
class GeoRegion:
    """A polygonal region on the abstract 0..100 map plane."""

    id: str
    name: str
    points: tuple[tuple[float, float], ...]
    value: float
    population: float


@dataclass(frozen=True, slots=True)
class DensityDot:
    """A sampled dot inside a region."""

    x: float
    y: float
    region_id: str


@dataclass(frozen=True, slots=True)
class DotDensityData:
    """Regions plus the dots sampled inside them."""

    regions: tuple[GeoRegion, ...]
    dots: tuple[DensityDot, ...]


@dataclass(frozen=True, slots=True)
class RankPoint:
    """A ranking at a named time step."""

    time: str
    rank: int


@dataclass(frozen=True, slots=True)
class BumpSeries:
    """Rank trajectory of one competitor."""

    name: str
    points: tuple[RankPoint, ...]


@dataclass(frozen=True, slots=True)
class RadarProfile:
    """A named set of metrics drawn as one radar polygon."""

    name: str
    metrics: tuple[tuple[str, float], ...]


@dataclass(frozen=True, slots=True)
class WaffleSlice:
    """A waffle category with an optional fixed color."""

    category: str
    value: float
    color: str | None = None


@dataclass(frozen=True, slots=True)
class Sparkline:
    """A compact labelled series."""

    label: str
    values: tuple[float, ...]


@dataclass(frozen=True, slots=True)
class SmallMultiple:
    """One panel of a small-multiples grid."""

    name: str
    values: tuple[Point2D, ...]


@dataclass(frozen=True, slots=True)
class GanttTask:
    """A scheduled task with completion percentage."""

    id: str
    name: str
    start: date
    end: date
    progress: float
    dependencies: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class BulletMeasure:
    """A KPI with qualitative ranges, measures and target markers."""

    title: str
    ranges: tuple[float, ...]
    measures: tuple[float, ...]
    markers: tuple[float, ...]
    subtitle: str | None = None


@dataclass(frozen=True, slots=True)
class SlopeItem:
    """A before/after pair."""

    label: str
    start: float
    end: float


@dataclass(frozen=True, slots=True)
class ArcNode:
    """An arc diagram node."""

    id: str
    label: str


@dataclass(frozen=True, slots=True)
class ArcLink:
    """An arc diagram connection; weight is optional."""

    source: str
    target: str
    value: float | None = None


@dataclass(frozen=True, slots=True)
class ArcDiagramData:
    """Arc diagram input."""

    nodes: tuple[ArcNode, ...]
    links: tuple[ArcLink, ...]


@dataclass(frozen=True, slots=True)
class MarimekkoSegment:
    """A segment inside a marimekko column."""

    name: str
    value: float


@dataclass(frozen=True, slots=True)
class MarimekkoColumn:
    """A marimekko column (category) made of segments."""

    category: str
    segments: tuple[MarimekkoSegment, ...]

    @property
    def total(self) -> float:
        """Return the column total."""

        return sum(segment.value for segment in self.segments)


@dataclass(frozen=True, slots=True)
class VennSet:
    """A set with its cardinality."""

    id: str
    label: str
    size: float


@dataclass(frozen=True, slots=True)
class VennIntersection:
    """The cardinality of an intersection of two or more sets."""

    sets: tuple[str, ...]
    size: float


@dataclass(frozen=True, slots=True)
class VennData:
    """Venn diagram input."""

    sets: tuple[VennSet, ...]
    intersections: tuple[VennIntersection, ...]


@dataclass(frozen=True, slots=True)
class ContourPoint:
    """A sampled value at a 2D location."""

    x: float
    y: float
    value: float


@dataclass(frozen=True, slots=True)
class PyramidRow:
    """Population counts for one age group."""

    age_group: str
    male: float
    female: float


@dataclass(frozen=True, slots=True)
class TimelineEvent:
    """A dated event."""

    id: str
    label: str
    date: date
    description: str | None = None
    category: str | None = None


@dataclass(frozen=True, slots=True)
class FlowLocation:
    """A named location on the abstract map plane."""

    id: str
    name: str
    x: float
    y: float


@dataclass(frozen=True, slots=True)
class FlowConnection:
    """A weighted movement between two locations."""

    source: str
    target: str
    value: float


@dataclass(frozen=True, slots=True)
class FlowMapData:
    """Flow map input."""

    locations: tuple[FlowLocation, ...]
    flows: tuple[FlowConnection, ...]


@dataclass(frozen=True, slots=True)
class VoronoiPoint:
    """A Voronoi site with optional label and value."""

    x: float
    y: float
    label: str | None = None
    value: float | None = None
