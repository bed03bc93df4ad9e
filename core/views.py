"""Views for the visualization gallery."""

from __future__ import annotations

import logging

from django.conf import settings
from django.http import Http404, HttpRequest, HttpResponse
from django.shortcuts import render
from django.utils import timezone
from django.views.decorators.cache import cache_control

from core.charting.figures import plotly_js as plotly_bundle
from core.charting.gallery import ABOUT_FEATURES, GALLERY_ENTRY_BY_SLUG, chart_count
from core.charting.render import RenderedChart, render_entry, render_gallery
from core.charting.schema import GalleryEntry
from core.forms import GalleryControlsForm, next_seed
from mockdata.gallery_data import build_gallery_data

logger = logging.getLogger(__name__)


def _controls(request: HttpRequest) -> tuple[GalleryControlsForm, int]:
    """Bind the seed form and resolve the seed to render with."""

    form = GalleryControlsForm(request.GET if "seed" in request.GET else None)
    seed = form.seed_or_default(settings.GALLERY_DEFAULT_SEED)
    if form.is_bound and not form.is_valid():
        logger.info("Ignoring invalid seed %r", request.GET.get("seed"))
    return form, seed


def _entry_or_404(slug: str) -> GalleryEntry:
    entry = GALLERY_ENTRY_BY_SLUG.get(slug)
    if entry is None:
        raise Http404(f"Unknown chart: {slug}")
    return entry


def _render_one(entry: GalleryEntry, *, seed: int) -> RenderedChart:
    data = build_gallery_data(
        seed=seed,
        today=timezone.localdate(),
        large_scatter_points=settings.GALLERY_LARGE_SCATTER_POINTS,
    )
    return render_entry(entry, data=data)


def gallery(request: HttpRequest) -> HttpResponse:
    """Render every section and card of the gallery page."""

    form, seed = _controls(request)
    sections = render_gallery(
        seed=seed,
        today=timezone.localdate(),
        large_scatter_points=settings.GALLERY_LARGE_SCATTER_POINTS,
    )
    context = {
        "form": form,
        "seed": seed,
        "next_seed": next_seed(seed),
        "sections": sections,
        "chart_total": chart_count(),
        "about_features": ABOUT_FEATURES,
    }
    return render(request, "core/gallery.html", context)


def chart_detail(request: HttpRequest, slug: str) -> HttpResponse:
    """Render one card on its own page."""

    entry = _entry_or_404(slug)
    form, seed = _controls(request)
    context = {
        "form": form,
        "seed": seed,
        "chart": _render_one(entry, seed=seed),
    }
    return render(request, "core/chart_detail.html", context)


def chart_svg(request: HttpRequest, slug: str) -> HttpResponse:
    """Return one chart as a standalone SVG document.

    Canvas-backed points of hybrid charts are not part of the SVG. Charts
    drawn as plotly figures have no SVG export.
    """

    entry = _entry_or_404(slug)
    _form, seed = _controls(request)
    chart = _render_one(entry, seed=seed)
    if chart.figure:
        raise Http404(f"Chart {slug} is drawn in the browser and has no SVG export.")
    if chart.error:
        return HttpResponse(chart.error, status=500, content_type="text/plain; charset=utf-8")
    return HttpResponse(chart.svg, content_type="image/svg+xml")


@cache_control(public=True, max_age=86400)
def plotly_js(request: HttpRequest) -> HttpResponse:
    """Serve the plotly.js bundle used by figure charts."""

    return HttpResponse(plotly_bundle(), content_type="application/javascript; charset=utf-8")
