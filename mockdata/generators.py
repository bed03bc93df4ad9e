"""Random mock data generators.

Every generator consumes the given SeededRandom stream, so the order in which
generators are called determines the values they produce. See
`mockdata.gallery_data` for the page order.
"""

from __future__ import annotations

import math
from datetime import date, timedelta
from typing import Final

from .dto import (
    BubblePoint,
    BumpSeries,
    Candle,
    CategorySamples,
    ContourPoint,
    DatedValue,
    DensityDot,
    DotDensityData,
    GeoRegion,
    GroupedBarRow,
    LabeledValue,
    MultiSeries,
    ParallelData,
    ParallelSample,
    Point2D,
    RadarProfile,
    RankPoint,
    ScatterPoint,
    SeriesRow,
    SeriesValue,
    SmallMultiple,
    Sparkline,
    StackedBarRow,
    StackedBars,
    VoronoiPoint,
)
from .prng import SeededRandom, js_round, normal_distribution, point_in_polygon

LINE_START: Final[date] = date(2024, 1, 1)
SERIES_START: Final[date] = date(2025, 1, 1)
LARGE_SCATTER_POINTS: Final[int] = 12000


def generate_bar_data(rng: SeededRandom) -> tuple[LabeledValue, ...]:
    """Six quarterly values in `[20, 120)`."""

    labels = ("Q1", "Q2", "Q3", "Q4", "Q5", "Q6")
    return tuple(LabeledValue(label=label, value=rng.randint_floor(100, 20)) for label in labels)


def generate_line_data(rng: SeededRandom) -> tuple[DatedValue, ...]:
    """Thirty daily values with a sine trend, starting 2024-01-01."""

    return tuple(
        DatedValue(
            date=LINE_START + timedelta(days=i),
            value=rng.randint_floor(50, 30) + math.sin(i / 3) * 20,
        )
        for i in range(30)
    )


def generate_area_data(rng: SeededRandom) -> tuple[tuple[DatedValue, ...], ...]:
    """Three line series scaled by 1.0, 0.8 and 0.6."""

    series: list[tuple[DatedValue, ...]] = []
    for factor in (1.0, 0.8, 0.6):
        series.append(tuple(DatedValue(date=p.date, value=p.value * factor) for p in generate_line_data(rng)))
    return tuple(series)


def generate_scatter_data(rng: SeededRandom) -> tuple[ScatterPoint, ...]:
    """Thirty uniform points for each of the categories A, B and C."""

    points: list[ScatterPoint] = []
    for category in ("A", "B", "C"):
        for _ in range(30):
            x = rng.random() * 100
            y = rng.random() * 100
            points.append(ScatterPoint(x=x, y=y, category=category))
    return tuple(points)


def generate_pie_data(rng: SeededRandom) -> tuple[LabeledValue, ...]:
    """Five category shares in `[10, 60)`."""

    labels = ("Category A", "Category B", "Category C", "Category D", "Category E")
    return tuple(LabeledValue(label=label, value=rng.randint_floor(50, 10)) for label in labels)


def generate_heatmap_data(rng: SeededRandom, *, rows: int = 10, cols: int = 10) -> tuple[tuple[float, ...], ...]:
    """A `rows x cols` matrix of values in `[0, 100)`."""

    return tuple(tuple(rng.random() * 100 for _ in range(cols)) for _ in range(rows))


def generate_histogram_data(rng: SeededRandom) -> tuple[float, ...]:
    """260 samples of N(50, 15)."""

    return normal_distribution(rng, 260, 50, 15)


def generate_box_plot_data(rng: SeededRandom) -> tuple[float, ...]:
    """220 samples of N(55, 12) plus four fixed outliers."""

    return normal_distribution(rng, 220, 55, 12) + (10, 12, 96, 99)


def generate_violin_data(rng: SeededRandom) -> tuple[CategorySamples, ...]:
    """Three teams with 140 samples each."""

    return (
        CategorySamples(category="Team A", values=normal_distribution(rng, 140, 45, 10)),
        CategorySamples(category="Team B", values=normal_distribution(rng, 140, 58, 12)),
        CategorySamples(category="Team C", values=normal_distribution(rng, 140, 68, 9)),
    )


def generate_bubble_data(rng: SeededRandom) -> tuple[BubblePoint, ...]:
    """Fourteen bubbles for each customer segment."""

    points: list[BubblePoint] = []
    for category in ("Enterprise", "SMB", "Consumer"):
        for i in range(14):
            x = rng.random() * 100
            y = rng.random() * 100
            size = rng.random() * 120 + 20
            points.append(BubblePoint(label=f"{category} {i + 1}", x=x, y=y, size=size, category=category))
    return tuple(points)


def generate_calendar_data(rng: SeededRandom, *, today: date, days: int = 140) -> tuple[DatedValue, ...]:
    """Daily activity for the `days` days ending at `today` (inclusive).

    Args:
        rng: Random stream.
        today: Last day of the window.
        days: Window length.

    Returns:
        One observation per day with a weekly pattern plus noise.
    """

    start = today - timedelta(days=days - 1)
    data: list[DatedValue] = []
    for index in range(days):
        weekly_pattern = 40 + math.sin((index / 7) * math.pi) * 20
        noise = rng.random() * 35
        data.append(DatedValue(date=start + timedelta(days=index), value=max(0, js_round(weekly_pattern + noise))))
    return tuple(data)


def generate_lollipop_data(rng: SeededRandom) -> tuple[LabeledValue, ...]:
    """Eight channel values in `[10, 100)`."""

    labels = ("North", "South", "East", "West", "Central", "Online", "Retail", "Partner")
    return tuple(LabeledValue(label=label, value=rng.randint_floor(90, 10)) for label in labels)


def generate_candlestick_data(rng: SeededRandom, *, days: int = 35) -> tuple[Candle, ...]:
    """A random walk of daily OHLC candles starting at 100."""

    candles: list[Candle] = []
    previous_close = 100.0
    for day in range(days):
        open_ = previous_close + (rng.random() * 6 - 3)
        close = open_ + (rng.random() * 8 - 4)
        high = max(open_, close) + rng.random() * 3.5
        low = min(open_, close) - rng.random() * 3.5
        candles.append(
            Candle(date=SERIES_START + timedelta(days=day), open=open_, high=high, low=low, close=close)
        )
        previous_close = close
    return tuple(candles)


def generate_streamgraph_data(rng: SeededRandom) -> MultiSeries:
    """Five traffic channels over 30 days."""

    keys = ("Search", "Social", "Email", "Referral", "Ads")
    rows: list[SeriesRow] = []
    for i in range(30):
        values: list[float] = []
        for index, _name in enumerate(keys):
            baseline = 20 + index * 8
            seasonal = math.sin(i / (2 + index * 0.3)) * 12
            noise = rng.random() * 10
            values.append(max(2.0, baseline + seasonal + noise))
        rows.append(SeriesRow(date=SERIES_START + timedelta(days=i), values=tuple(values)))
    return MultiSeries(keys=keys, rows=tuple(rows))


def generate_parallel_data(rng: SeededRandom) -> ParallelData:
    """Twenty samples across five performance dimensions."""

    dimensions = ("latency", "throughput", "reliability", "utilization", "efficiency")
    samples: list[ParallelSample] = []
    for index in range(20):
        latency = rng.random() * 200 + 30
        throughput = rng.random() * 800 + 200
        reliability = rng.random() * 20 + 80
        utilization = rng.random() * 60 + 30
        efficiency = rng.random() * 50 + 45
        samples.append(
            ParallelSample(
                name=f"Sample {index + 1}",
                values=(latency, throughput, reliability, utilization, efficiency),
            )
        )
    return ParallelData(dimensions=dimensions, samples=tuple(samples))


def generate_hexbin_data(rng: SeededRandom) -> tuple[Point2D, ...]:
    """Three square clusters of 120 points each."""

    points: list[Point2D] = []
    for cx, cy in ((25, 35), (55, 60), (75, 30)):
        for _ in range(120):
            x = cx + (rng.random() - 0.5) * 20
            y = cy + (rng.random() - 0.5) * 20
            points.append(Point2D(x=x, y=y))
    return tuple(points)


def generate_dot_density_data(rng: SeededRandom, regions: tuple[GeoRegion, ...]) -> DotDensityData:
    """Sample dots inside each region proportionally to its population.

    Candidate points are drawn uniformly inside the region bounding box and
    kept when they fall inside the polygon. Sampling stops at the target count
    or after `20 * target` attempts.

    Args:
        rng: Random stream.
        regions: Regions to populate.

    Returns:
        The regions together with the accepted dots.
    """

    dots: list[DensityDot] = []
    for region in regions:
        xs = [point[0] for point in region.points]
        ys = [point[1] for point in region.points]
        min_x, max_x, min_y, max_y = min(xs), max(xs), min(ys), max(ys)
        target = max(20, js_round(region.population / 12))
        created = 0
        attempts = 0
        while created < target and attempts < target * 20:
            attempts += 1
            x = min_x + rng.random() * (max_x - min_x)
            y = min_y + rng.random() * (max_y - min_y)
            if point_in_polygon((x, y), region.points):
                dots.append(DensityDot(x=x, y=y, region_id=region.id))
                created += 1
    return DotDensityData(regions=regions, dots=tuple(dots))


def generate_ridgeline_data(rng: SeededRandom) -> tuple[CategorySamples, ...]:
    """Five products with 180 samples each."""

    params = (
        ("Product A", 45, 10),
        ("Product B", 55, 11),
        ("Product C", 62, 9),
        ("Product D", 50, 12),
        ("Product E", 70, 8),
    )
    return tuple(
        CategorySamples(category=name, values=normal_distribution(rng, 180, mean, sd)) for name, mean, sd in params
    )


def generate_horizon_data(rng: SeededRandom) -> tuple[DatedValue, ...]:
    """Sixty days of an oscillating signal crossing zero."""

    return tuple(
        DatedValue(
            date=SERIES_START + timedelta(days=index),
            value=math.sin(index / 5) * 35 + math.cos(index / 9) * 15 + (rng.random() * 12 - 6),
        )
        for index in range(60)
    )


def generate_bump_data(rng: SeededRandom) -> tuple[BumpSeries, ...]:
    """Monthly rankings of five competitors."""

    time_points = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul")
    names = ("Alpha", "Beta", "Gamma", "Delta", "Omega")
    series: list[BumpSeries] = []
    for name_index, name in enumerate(names):
        points = tuple(
            RankPoint(
                time=time,
                rank=((name_index + time_index + math.floor(rng.random() * 3)) % len(names)) + 1,
            )
            for time_index, time in enumerate(time_points)
        )
        series.append(BumpSeries(name=name, points=points))
    return tuple(series)


def generate_radar_small_multiples_data(rng: SeededRandom) -> tuple[RadarProfile, ...]:
    """Six cluster profiles over five metrics."""

    profiles: list[RadarProfile] = []
    for index in range(6):
        speed = rng.random() * 60 + 40
        quality = rng.random() * 50 + 45
        cost = rng.random() * 70 + 20
        reliability = rng.random() * 30 + 65
        coverage = rng.random() * 55 + 35
        profiles.append(
            RadarProfile(
                name=f"Cluster {'ABCDEF'[index]}",
                metrics=(
                    ("speed", speed),
                    ("quality", quality),
                    ("cost", cost),
                    ("reliability", reliability),
                    ("coverage", coverage),
                ),
            )
        )
    return tuple(profiles)


def generate_large_scatter_data(rng: SeededRandom, *, count: int = LARGE_SCATTER_POINTS) -> tuple[Point2D, ...]:
    """`count` uniform points on the 0..100 plane."""

    points: list[Point2D] = []
    for _ in range(count):
        x = rng.random() * 100
        y = rng.random() * 100
        points.append(Point2D(x=x, y=y))
    return tuple(points)


def generate_grouped_bar_data(rng: SeededRandom) -> tuple[GroupedBarRow, ...]:
    """Four quarters with three product series each."""

    series = ("Product A", "Product B", "Product C")
    return tuple(
        GroupedBarRow(
            category=category,
            values=tuple(SeriesValue(series=name, value=rng.randint_floor(80, 20)) for name in series),
        )
        for category in ("Q1", "Q2", "Q3", "Q4")
    )


def generate_stacked_bar_data(rng: SeededRandom) -> StackedBars:
    """Six quarters split across four departments."""

    keys = ("Sales", "Marketing", "Operations", "Support")
    rows = tuple(
        StackedBarRow(category=category, values=tuple(rng.randint_floor(50, 10) for _ in keys))
        for category in ("Q1", "Q2", "Q3", "Q4", "Q5", "Q6")
    )
    return StackedBars(keys=keys, rows=rows)


def generate_stacked_area_data(rng: SeededRandom) -> MultiSeries:
    """Thirty days of device traffic with an upward trend."""

    keys = ("Desktop", "Mobile", "Tablet")
    rows: list[SeriesRow] = []
    for i in range(30):
        values: list[float] = []
        for index, _name in enumerate(keys):
            baseline = 15 + index * 10
            trend = i * 0.5
            seasonal = math.sin(i / 4) * 8
            noise = rng.random() * 8
            values.append(max(5.0, baseline + trend + seasonal + noise))
        rows.append(SeriesRow(date=SERIES_START + timedelta(days=i), values=tuple(values)))
    return MultiSeries(keys=keys, rows=tuple(rows))


def generate_sparkline_data(rng: SeededRandom) -> tuple[Sparkline, ...]:
    """Five KPI series of twenty values."""

    def values() -> tuple[float, ...]:
        return tuple(50 + math.sin(i / 3) * 20 + rng.random() * 15 for i in range(20))

    return tuple(
        Sparkline(label=label, values=values())
        for label in ("Revenue", "Users", "Sessions", "Conversions", "Engagement")
    )


def generate_small_multiples_data(rng: SeededRandom) -> tuple[SmallMultiple, ...]:
    """Six regional series of twenty points."""

    regions = ("North America", "South America", "Europe", "Asia", "Africa", "Oceania")
    return tuple(
        SmallMultiple(
            name=name,
            values=tuple(Point2D(x=i, y=30 + math.sin(i / 3) * 15 + rng.random() * 20) for i in range(20)),
        )
        for name in regions
    )


def generate_beeswarm_data(rng: SeededRandom) -> tuple[CategorySamples, ...]:
    """Three groups of fifty normal samples."""

    return (
        CategorySamples(category="Group A", values=normal_distribution(rng, 50, 50, 10)),
        CategorySamples(category="Group B", values=normal_distribution(rng, 50, 65, 12)),
        CategorySamples(category="Group C", values=normal_distribution(rng, 50, 55, 8)),
    )


def generate_contour_data(rng: SeededRandom) -> tuple[ContourPoint, ...]:
    """Ninety samples around three intensity peaks."""

    points: list[ContourPoint] = []
    for cx, cy, intensity in ((30, 30, 80), (70, 60, 90), (50, 80, 70)):
        for _ in range(30):
            angle = rng.random() * 2 * math.pi
            radius = rng.random() * 15
            value = intensity - radius * 2 + rng.random() * 10
            points.append(
                ContourPoint(x=cx + radius * math.cos(angle), y=cy + radius * math.sin(angle), value=value)
            )
    return tuple(points)


def generate_voronoi_data(rng: SeededRandom, *, count: int = 25) -> tuple[VoronoiPoint, ...]:
    """`count` labelled sites with values in `[0, 100)`."""

    points: list[VoronoiPoint] = []
    for i in range(count):
        x = rng.random() * 100
        y = rng.random() * 100
        value = rng.random() * 100
        points.append(VoronoiPoint(x=x, y=y, label=f"P{i + 1}", value=value))
    return tuple(points)
