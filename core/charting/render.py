"""Render gallery cards to SVG markup or embedded plotly figures."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import date
from typing import Any, TypedDict

import plotly.graph_objects as go

from mockdata.gallery_data import GalleryData, build_gallery_data
from mockdata.generators import LARGE_SCATTER_POINTS
from mockdata.prng import DEFAULT_SEED

from .errors import ChartRenderError
from .figures import figure_html, figure_shape_count
from .gallery import GALLERY_SECTIONS
from .registry import get_renderer
from .scene import shape_count, to_svg
from .schema import GalleryEntry, GallerySection

logger = logging.getLogger(__name__)


class CanvasPayload(TypedDict):
    """Points drawn onto a `<canvas>` layered under the chart's SVG."""

    width: float
    height: float
    radius: float
    fill: str
    points: list[list[float]]


@dataclass(frozen=True, slots=True)
class RenderedChart:
    """A rendered card produced from a GalleryEntry.

    Attributes:
        entry: The card definition.
        svg: Serialized `<svg>` markup (empty for figures and failures).
        figure: Embeddable plotly snippet for figure charts, else empty.
        canvas: Canvas payload for hybrid charts, else None.
        shape_count: Number of interactive data shapes (hoverable marks).
        error: User-facing message when the renderer rejected its data.
    """

    entry: GalleryEntry
    svg: str
    figure: str = ""
    canvas: CanvasPayload | None = None
    shape_count: int = 0
    error: str | None = None


@dataclass(frozen=True, slots=True)
class RenderedSection:
    """A section header plus its rendered cards."""

    section: GallerySection
    charts: tuple[RenderedChart, ...]


def renderer_options(entry: GalleryEntry, *, data: GalleryData) -> dict[str, Any]:
    """Keyword options forwarded to the renderer for `entry`."""

    options: dict[str, Any] = dict(entry.options)
    if entry.uses_today:
        options["today"] = data.today
    return options


def render_entry(entry: GalleryEntry, *, data: GalleryData) -> RenderedChart:
    """Render one card.

    Renderer rejections (`ChartRenderError`, including empty data) are logged
    and returned as `error` so one bad card cannot break the page.

    Args:
        entry: Card to render.
        data: Datasets for the current seed.

    Returns:
        RenderedChart with markup or an error message.
    """

    renderer = get_renderer(entry.chart_type)
    try:
        result = renderer(
            data.get(entry.dataset),
            width=entry.width,
            height=entry.height,
            **renderer_options(entry, data=data),
        )
    except ChartRenderError as exc:
        logger.exception("Chart %s failed to render", entry.slug)
        return RenderedChart(entry=entry, svg="", error=str(exc))

    if isinstance(result, go.Figure):
        return RenderedChart(
            entry=entry,
            svg="",
            figure=figure_html(result, div_id=f"figure-{entry.slug}"),
            shape_count=figure_shape_count(result),
        )
    canvas = result.meta.get("canvas")
    return RenderedChart(
        entry=entry,
        svg=to_svg(result),
        canvas=canvas,  # type: ignore[arg-type]
        shape_count=shape_count(result),
    )


def render_gallery(
    *,
    seed: int = DEFAULT_SEED,
    today: date,
    sections: tuple[GallerySection, ...] = GALLERY_SECTIONS,
    large_scatter_points: int = LARGE_SCATTER_POINTS,
) -> tuple[RenderedSection, ...]:
    """Render every section of the page for `seed`.

    Args:
        seed: PRNG seed for the mock data.
        today: Anchor date for date-relative data.
        sections: Sections to render (defaults to the built-in catalog).
        large_scatter_points: Point count for the hybrid canvas scatter.

    Returns:
        Rendered sections in page order.
    """

    data = build_gallery_data(seed=seed, today=today, large_scatter_points=large_scatter_points)
    rendered = tuple(
        RenderedSection(section=section, charts=tuple(render_entry(entry, data=data) for entry in section.entries))
        for section in sections
    )
    failures = sum(1 for section in rendered for chart in section.charts if chart.error)
    if failures:
        logger.warning("Rendered gallery for seed=%s with %d failed chart(s)", seed, failures)
    else:
        logger.debug("Rendered gallery for seed=%s", seed)
    return rendered
