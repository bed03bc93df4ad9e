"""Tests for the card rendering pipeline."""

from __future__ import annotations

import logging
from dataclasses import replace

import pytest

from core.charting import render as render_module
from core.charting.errors import ChartRenderError
from core.charting.gallery import GALLERY_ENTRY_BY_SLUG, GALLERY_SECTIONS, STATISTICAL
from core.charting.render import render_entry, render_gallery, renderer_options
from core.charting.scene import svg_root

pytestmark = pytest.mark.unit


def test_renderer_options_forward_today_only_when_requested(gallery_data) -> None:
    """Only cards flagged with uses_today receive the anchor date."""

    gantt = GALLERY_ENTRY_BY_SLUG["gantt-chart"]
    donut = GALLERY_ENTRY_BY_SLUG["donut-chart"]
    assert renderer_options(gantt, data=gallery_data)["today"] == gallery_data.today
    assert renderer_options(donut, data=gallery_data) == {"inner_radius": 80}


def test_renderer_options_do_not_mutate_the_entry(gallery_data) -> None:
    """The option dict is a copy of the card's options."""

    donut = GALLERY_ENTRY_BY_SLUG["donut-chart"]
    options = renderer_options(donut, data=gallery_data)
    options["inner_radius"] = 1
    assert donut.options == {"inner_radius": 80}


def test_render_entry_surfaces_renderer_errors(monkeypatch, gallery_data, caplog) -> None:
    """A failing renderer becomes an error card and is logged."""

    def broken(data, *, width, height, **options):
        raise ChartRenderError("the data is bad")

    monkeypatch.setattr(render_module, "get_renderer", lambda chart_type: broken)
    entry = GALLERY_ENTRY_BY_SLUG["bar-chart"]

    with caplog.at_level(logging.ERROR, logger="core.charting.render"):
        chart = render_entry(entry, data=gallery_data)

    assert chart.error == "the data is bad"
    assert chart.svg == ""
    assert chart.shape_count == 0
    assert "Chart bar-chart failed to render" in caplog.text


def test_render_entry_propagates_programming_errors(monkeypatch, gallery_data) -> None:
    """Only ChartRenderError is turned into an error card."""

    def broken(data, *, width, height, **options):
        raise TypeError("unexpected")

    monkeypatch.setattr(render_module, "get_renderer", lambda chart_type: broken)
    with pytest.raises(TypeError):
        render_entry(GALLERY_ENTRY_BY_SLUG["bar-chart"], data=gallery_data)


def test_render_entry_passes_canvas_payload_through(monkeypatch, gallery_data) -> None:
    """Canvas metadata on the root is returned with the chart."""

    def hybrid(data, *, width, height, **options):
        root = svg_root(width, height)
        root.meta["canvas"] = {"width": width, "height": height, "radius": 1, "fill": "#000", "points": [[1, 2]]}
        root.add("rect", class_="hit").tooltip("points")
        return root

    monkeypatch.setattr(render_module, "get_renderer", lambda chart_type: hybrid)
    chart = render_entry(GALLERY_ENTRY_BY_SLUG["hybrid-canvas-scatter"], data=gallery_data)
    assert chart.canvas is not None
    assert chart.canvas["points"] == [[1, 2]]
    assert chart.canvas["radius"] == 1
    assert chart.shape_count == 1


def test_render_entry_embeds_figure_charts(gallery_data) -> None:
    """Figure renderers produce an HTML snippet instead of SVG markup."""

    chart = render_entry(GALLERY_ENTRY_BY_SLUG["treemap"], data=gallery_data)
    assert chart.error is None
    assert chart.svg == ""
    assert 'id="figure-treemap"' in chart.figure
    assert "<html" not in chart.figure
    assert chart.shape_count == 13
    assert chart.canvas is None


def test_render_gallery_returns_every_section(today) -> None:
    """Rendered sections mirror the catalog order and card count."""

    sections = render_gallery(seed=7, today=today, large_scatter_points=200)
    assert [rendered.section for rendered in sections] == list(GALLERY_SECTIONS)
    assert sum(len(rendered.charts) for rendered in sections) == 60
    assert all(chart.error is None for rendered in sections for chart in rendered.charts)


def test_render_gallery_is_deterministic_per_seed(today) -> None:
    """The same seed renders identical markup; another seed differs."""

    subset = (replace(STATISTICAL, entries=STATISTICAL.entries[:2]),)
    first = render_gallery(seed=11, today=today, sections=subset, large_scatter_points=50)
    again = render_gallery(seed=11, today=today, sections=subset, large_scatter_points=50)
    other = render_gallery(seed=12, today=today, sections=subset, large_scatter_points=50)
    assert first[0].charts[0].svg == again[0].charts[0].svg
    assert first[0].charts[0].svg != other[0].charts[0].svg


def test_render_gallery_logs_failures(monkeypatch, today, caplog) -> None:
    """A failed card is summarized in a warning."""

    def broken(data, *, width, height, **options):
        raise ChartRenderError("nope")

    monkeypatch.setattr(render_module, "get_renderer", lambda chart_type: broken)
    subset = (replace(STATISTICAL, entries=STATISTICAL.entries[:1]),)
    with caplog.at_level(logging.WARNING, logger="core.charting.render"):
        sections = render_gallery(seed=1, today=today, sections=subset, large_scatter_points=50)
    assert sections[0].charts[0].error == "nope"
    assert "1 failed chart(s)" in caplog.text
