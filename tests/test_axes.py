"""Tests for axes and the shared chart helpers."""

from __future__ import annotations

import math
from datetime import date

import pytest

from core.charting.axes import axis_bottom, axis_left, grid_lines
from core.charting.charts._common import (
    Margin,
    fixed,
    frame,
    js_number,
    locale_number,
    quantile,
    short_date,
)
from core.charting.scales import BandScale, LinearScale

pytestmark = pytest.mark.unit


def test_linear_axis_places_round_ticks() -> None:
    """A 0..100 axis with five ticks is labelled every 20 units."""

    axis = axis_left(LinearScale((0, 100), (500, 0)), ticks=5)
    ticks = axis.find_all("g", "tick")
    labels = [tick.find_all("text")[0].text for tick in ticks]
    assert labels == ["0", "20", "40", "60", "80", "100"]
    assert ticks[0].attrs["transform"] == "translate(0,500)"
    assert "axis-left" in axis.classes


def test_band_axis_centres_ticks_in_bands() -> None:
    """Band axes label every domain value at the band centre."""

    scale = BandScale(["a", "b"], (0, 100))
    axis = axis_bottom(scale, label_rotate=-45)
    ticks = axis.find_all("g", "tick")
    assert [tick.attrs["transform"] for tick in ticks] == ["translate(25,0)", "translate(75,0)"]
    assert ticks[0].find_all("text")[0].attrs["transform"] == "rotate(-45)"


def test_grid_lines_span_the_plot() -> None:
    """Horizontal grid lines run across the full width."""

    grid = grid_lines(LinearScale((0, 10), (100, 0)), orient="horizontal", length=300, ticks=2)
    lines = grid.find_all("line")
    assert len(lines) == 3
    assert all(line.attrs["x2"] == "300" for line in lines)


def test_frame_subtracts_margins() -> None:
    """The plot group is offset by the margins and sized to what is left."""

    f = frame(800, 400, Margin(20, 30, 60, 60))
    assert (f.inner_width, f.inner_height) == (710, 320)
    assert f.plot.attrs["transform"] == "translate(60,20)"
    assert Margin.uniform(5) == Margin(5, 5, 5, 5)


def test_number_and_date_formatting() -> None:
    """Labels print numbers the way a browser would."""

    assert js_number(42.0) == "42"
    assert js_number(3.5) == "3.5"
    assert js_number(7) == "7"
    assert fixed(3.14159, 2) == "3.14"
    assert locale_number(12000.0) == "12,000"
    assert locale_number(1234.5) == "1,234.5"
    assert short_date(date(2024, 1, 5)) == "1/5/2024"


def test_quantile_interpolates_between_samples() -> None:
    """Quantiles interpolate linearly between neighbouring values."""

    assert quantile([1, 2, 3, 4], 0.5) == 2.5
    assert quantile([1, 2, 3, 4], 0.25) == 1.75
    assert quantile([9], 0.9) == 9.0
    assert math.isnan(quantile([], 0.5))
