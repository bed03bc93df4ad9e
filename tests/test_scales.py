"""Tests for scales, ticks and color ramps."""

from __future__ import annotations

import re
from datetime import date, datetime

import pytest

from core.charting import palettes
from core.charting.scales import (
    BandScale,
    LinearScale,
    OrdinalScale,
    PointScale,
    SequentialScale,
    SqrtScale,
    TimeScale,
    extent,
    nice_domain,
    tick_format,
    ticks,
)

pytestmark = pytest.mark.unit

HEX_COLOR = re.compile(r"^#[0-9a-f]{6}$")


def test_ticks_land_on_round_values() -> None:
    """Ticks follow the 1/2/5 progression."""

    assert ticks(0, 100, 10) == [0, 10, 20, 30, 40, 50, 60, 70, 80, 90, 100]
    assert ticks(0, 1, 5) == pytest.approx([0, 0.2, 0.4, 0.6, 0.8, 1.0])
    assert ticks(100, 0, 5) == [100, 80, 60, 40, 20, 0]
    assert ticks(3, 3, 5) == [3]
    assert ticks(0, 10, 0) == []


def test_nice_domain_extends_to_round_bounds() -> None:
    """Nice domains cover the input with round endpoints."""

    assert nice_domain(0.5, 97.3, 10) == (0, 100)
    assert nice_domain(97.3, 0.5, 10) == (100, 0)


def test_tick_format_uses_step_precision() -> None:
    """Formatters show as many decimals as the tick step needs."""

    assert tick_format(0, 1, 5)(0.4) == "0.4"
    assert tick_format(0, 1000, 5)(1000) == "1,000"


def test_extent_rejects_empty_input() -> None:
    """extent() needs at least one value."""

    assert extent([3, 1, 2]) == (1, 3)
    with pytest.raises(ValueError):
        extent([])


def test_linear_scale_maps_and_inverts() -> None:
    """A linear scale interpolates and inverts its mapping."""

    scale = LinearScale((0, 10), (0, 100))
    assert scale(5) == 50
    assert scale(-1) == -10
    assert scale.invert(25) == 2.5


def test_linear_scale_clamps_when_asked() -> None:
    """Clamped scales keep outputs inside the range."""

    scale = LinearScale((0, 10), (0, 100), clamp=True)
    assert scale(20) == 100
    assert scale(-5) == 0


def test_linear_scale_degenerate_domain_maps_to_range_middle() -> None:
    """A zero-width domain maps every value to the range midpoint."""

    assert LinearScale((3, 3), (0, 200))(3) == 100


def test_linear_scale_nice_rounds_domain() -> None:
    """nice() mutates and returns the scale."""

    scale = LinearScale((0, 97.3), (300, 0))
    assert scale.nice() is scale
    assert scale.domain == (0, 100)
    assert scale.ticks(5) == [0, 20, 40, 60, 80, 100]


def test_sqrt_scale_is_area_true() -> None:
    """Quadrupling the value doubles the output."""

    scale = SqrtScale((0, 100), (0, 10))
    assert scale(25) == pytest.approx(5)
    assert scale(100) == pytest.approx(10)


def test_band_scale_without_padding() -> None:
    """Bands split the range evenly."""

    scale = BandScale(["a", "b", "c"], (0, 120))
    assert scale.step == 40
    assert scale.bandwidth == 40
    assert scale("b") == 40
    assert scale.center("c") == 100


def test_band_scale_with_padding() -> None:
    """Inner and outer padding shrink bands and centre them."""

    scale = BandScale.with_padding(["a", "b", "c"], (0, 120), 0.2)
    assert scale.step == pytest.approx(37.5)
    assert scale.bandwidth == pytest.approx(30)
    assert scale("a") == pytest.approx(7.5)


def test_band_scale_unknown_key_raises() -> None:
    """Looking up a key outside the domain fails loudly."""

    with pytest.raises(KeyError):
        BandScale(["a"], (0, 10))("z")


def test_band_scale_deduplicates_domain() -> None:
    """Repeated keys keep their first position."""

    assert BandScale(["a", "b", "a"], (0, 10)).domain == ("a", "b")


def test_point_scale_places_points_at_band_edges() -> None:
    """Point scales have zero bandwidth and optional outer padding."""

    scale = PointScale(["a", "b", "c"], (0, 100))
    assert [scale(k) for k in "abc"] == [0, 50, 100]
    assert scale.bandwidth == 0

    padded = PointScale(["a", "b", "c"], (0, 100), padding=0.5)
    assert padded("a") == pytest.approx(100 / 6)
    assert padded("c") == pytest.approx(500 / 6)


def test_time_scale_maps_dates_linearly() -> None:
    """Dates map proportionally to elapsed time."""

    scale = TimeScale((date(2024, 1, 1), date(2024, 1, 31)), (0, 300))
    assert scale(date(2024, 1, 16)) == pytest.approx(150)
    assert scale.invert(150) == datetime(2024, 1, 16)


def test_time_scale_ticks_pick_calendar_intervals() -> None:
    """Short spans tick on days; long spans tick on month starts."""

    daily = TimeScale((date(2024, 1, 1), date(2024, 1, 5)), (0, 100)).ticks(10)
    assert daily[0] == datetime(2024, 1, 1)
    assert daily[-1] == datetime(2024, 1, 5)
    assert len(daily) == 5

    monthly = TimeScale((date(2024, 1, 10), date(2024, 12, 20)), (0, 100)).ticks(10)
    assert 3 <= len(monthly) <= 10
    assert all(tick.day == 1 and tick.hour == 0 for tick in monthly)
    assert all(datetime(2024, 1, 10) <= tick <= datetime(2024, 12, 20) for tick in monthly)
    steps = {later.month - earlier.month for earlier, later in zip(monthly, monthly[1:])}
    assert len(steps) == 1


def test_time_scale_degenerate_domain_has_one_tick() -> None:
    """A single-instant domain ticks only that instant."""

    assert TimeScale((date(2024, 3, 1), date(2024, 3, 1))).ticks() == [datetime(2024, 3, 1)]


def test_time_scale_tick_format_follows_the_tick_unit() -> None:
    """Daily ticks show month and day; monthly ticks show the month name or year."""

    daily = TimeScale((date(2024, 1, 1), date(2024, 1, 5))).tick_format(10)
    assert daily(date(2024, 1, 2)) == "Jan 02"

    monthly = TimeScale((date(2024, 1, 10), date(2024, 12, 20))).tick_format(10)
    assert monthly(date(2024, 3, 1)) == "March"
    assert monthly(date(2025, 1, 1)) == "2025"


def test_ordinal_scale_cycles_in_first_seen_order() -> None:
    """Ordinal scales assign outputs in first-seen order and wrap around."""

    scale = OrdinalScale(("red", "green"))
    assert scale("x") == "red"
    assert scale("y") == "green"
    assert scale("z") == "red"
    assert scale("x") == "red"
    assert scale.domain == ("x", "y", "z")


def test_sequential_scale_returns_hex_colors() -> None:
    """Sequential ramps return hex colors and clamp outside the domain."""

    scale = SequentialScale("Blues", (0, 10))
    assert HEX_COLOR.match(scale(5))
    assert scale(-100) == scale(0)
    assert scale(100) == scale(10)
    assert scale(0) != scale(10)


def test_unknown_ramp_is_rejected() -> None:
    """Only the supported ramps may be requested."""

    with pytest.raises(ValueError):
        palettes.interpolator("NotARamp")


def test_categorical_cycles() -> None:
    """Categorical schemes wrap around."""

    scheme = ("#000000", "#ffffff")
    assert palettes.categorical(scheme, 3) == "#ffffff"
