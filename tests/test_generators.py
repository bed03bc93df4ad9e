"""Tests for the mock data generators and the per-seed dataset bundle."""

from __future__ import annotations

from datetime import date, timedelta

import pytest

from mockdata import generators as gen
from mockdata.fixtures import load_fixtures
from mockdata.gallery_data import DATASET_KEYS, REFRESH_KEYS, build_gallery_data
from mockdata.prng import SeededRandom, point_in_polygon

pytestmark = pytest.mark.unit


def test_bar_data_has_six_quarters_in_range() -> None:
    """Bars cover Q1..Q6 with integer values in [20, 120)."""

    data = gen.generate_bar_data(SeededRandom(1))
    assert [d.label for d in data] == ["Q1", "Q2", "Q3", "Q4", "Q5", "Q6"]
    assert all(20 <= d.value < 120 and float(d.value).is_integer() for d in data)


def test_line_data_is_thirty_consecutive_days() -> None:
    """Line observations start on 2024-01-01 and advance one day at a time."""

    data = gen.generate_line_data(SeededRandom(1))
    assert len(data) == 30
    assert data[0].date == date(2024, 1, 1)
    assert all(b.date - a.date == timedelta(days=1) for a, b in zip(data, data[1:]))


def test_area_data_scales_three_series() -> None:
    """Area series are three line series of thirty points each."""

    data = gen.generate_area_data(SeededRandom(1))
    assert len(data) == 3
    assert all(len(series) == 30 for series in data)


def test_scatter_data_has_thirty_points_per_category() -> None:
    """Ninety points split evenly over categories A, B and C."""

    data = gen.generate_scatter_data(SeededRandom(1))
    assert len(data) == 90
    assert {p.category for p in data} == {"A", "B", "C"}
    assert all(0 <= p.x < 100 and 0 <= p.y < 100 for p in data)


def test_heatmap_data_shape() -> None:
    """The heatmap is a 10x10 matrix by default."""

    data = gen.generate_heatmap_data(SeededRandom(1))
    assert len(data) == 10
    assert all(len(row) == 10 for row in data)


def test_box_plot_data_appends_fixed_outliers() -> None:
    """Four fixed outliers follow the normal samples."""

    data = gen.generate_box_plot_data(SeededRandom(1))
    assert len(data) == 224
    assert data[-4:] == (10, 12, 96, 99)


def test_calendar_data_ends_on_today() -> None:
    """The calendar window is 140 days ending at the anchor date."""

    today = date(2025, 3, 1)
    data = gen.generate_calendar_data(SeededRandom(1), today=today)
    assert len(data) == 140
    assert data[-1].date == today
    assert data[0].date == today - timedelta(days=139)
    assert all(d.value >= 0 for d in data)


def test_candlestick_high_and_low_bound_the_body() -> None:
    """Every candle's wick encloses its open and close."""

    for candle in gen.generate_candlestick_data(SeededRandom(5)):
        assert candle.low <= min(candle.open, candle.close)
        assert candle.high >= max(candle.open, candle.close)


def test_streamgraph_values_have_a_floor() -> None:
    """Streamgraph layers never drop below 2."""

    data = gen.generate_streamgraph_data(SeededRandom(1))
    assert len(data.keys) == 5
    assert len(data.rows) == 30
    assert all(value >= 2 for row in data.rows for value in row.values)


def test_bump_ranks_are_in_range() -> None:
    """Ranks stay between 1 and the number of competitors."""

    data = gen.generate_bump_data(SeededRandom(1))
    assert all(1 <= point.rank <= len(data) for series in data for point in series.points)


def test_dot_density_dots_fall_inside_their_region() -> None:
    """Accepted dots lie within the polygon of the region they belong to."""

    regions = load_fixtures()["geo_regions"]
    data = gen.generate_dot_density_data(SeededRandom(1), regions)
    polygons = {region.id: region.points for region in regions}
    assert data.dots
    assert all(point_in_polygon((dot.x, dot.y), polygons[dot.region_id]) for dot in data.dots)


def test_large_scatter_count_is_configurable() -> None:
    """The hybrid scatter point count follows the `count` argument."""

    assert len(gen.generate_large_scatter_data(SeededRandom(1), count=250)) == 250


def test_generators_are_deterministic_for_a_seed() -> None:
    """Fresh streams with the same seed produce identical datasets."""

    assert gen.generate_parallel_data(SeededRandom(9)) == gen.generate_parallel_data(SeededRandom(9))
    assert gen.generate_voronoi_data(SeededRandom(9)) != gen.generate_voronoi_data(SeededRandom(10))


def test_build_gallery_data_covers_every_dataset_key(today) -> None:
    """Every dataset key is populated and refresh keys are a subset."""

    data = build_gallery_data(seed=1, today=today, large_scatter_points=100)
    assert set(data.datasets) == set(DATASET_KEYS)
    assert set(REFRESH_KEYS) <= set(DATASET_KEYS)
    assert len(data.get("large_scatter")) == 100
    assert data.get("calendar")[-1].date == today


def test_build_gallery_data_is_reproducible(today) -> None:
    """The same seed rebuilds equal datasets; another seed changes random ones."""

    first = build_gallery_data(seed=77, today=today, large_scatter_points=100)
    build_gallery_data.cache_clear()
    second = build_gallery_data(seed=77, today=today, large_scatter_points=100)
    other = build_gallery_data(seed=78, today=today, large_scatter_points=100)

    assert first is not second
    assert dict(first.datasets) == dict(second.datasets)
    assert first.get("bar") != other.get("bar")
    assert first.get("tree") == other.get("tree")


def test_gallery_data_rejects_unknown_keys(gallery_data) -> None:
    """Looking up a missing dataset raises KeyError."""

    with pytest.raises(KeyError):
        gallery_data.get("does_not_exist")


def test_gallery_data_is_read_only(gallery_data) -> None:
    """The dataset mapping cannot be mutated by renderers."""

    with pytest.raises(TypeError):
        gallery_data.datasets["bar"] = ()  # type: ignore[index]
