"""Generate every dataset the gallery page needs, in page order.

The page generates all datasets once at load time and then regenerates the
random ones in a mount-time refresh pass, continuing on the same stream. The
displayed values therefore come from the refresh pass for refreshable
datasets and from the first pass for everything else. Both passes are
reproduced here so a given seed always yields the same gallery.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Mapping
from dataclasses import dataclass
from datetime import date
from functools import lru_cache
from types import MappingProxyType
from typing import Final

from . import generators as gen
from .dto import GeoRegion
from .fixtures import load_fixtures
from .prng import DEFAULT_SEED, SeededRandom

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class _GenerationContext:
    rng: SeededRandom
    today: date
    fixtures: Mapping[str, object]
    large_scatter_points: int


def _fixed(key: str) -> Callable[[_GenerationContext], object]:
    def produce(ctx: _GenerationContext) -> object:
        return ctx.fixtures[key]

    return produce


def _dot_density(ctx: _GenerationContext) -> object:
    regions: tuple[GeoRegion, ...] = ctx.fixtures["geo_regions"]  # type: ignore[assignment]
    return gen.generate_dot_density_data(ctx.rng, regions)


# Page order. Each producer runs exactly once in the load pass.
_LOAD_ORDER: Final[tuple[tuple[str, Callable[[_GenerationContext], object]], ...]] = (
    ("bar", lambda ctx: gen.generate_bar_data(ctx.rng)),
    ("line", lambda ctx: gen.generate_line_data(ctx.rng)),
    ("area", lambda ctx: gen.generate_area_data(ctx.rng)),
    ("scatter", lambda ctx: gen.generate_scatter_data(ctx.rng)),
    ("pie", lambda ctx: gen.generate_pie_data(ctx.rng)),
    ("tree", _fixed("tree")),
    ("network", _fixed("network")),
    ("sankey", _fixed("sankey")),
    ("heatmap", lambda ctx: gen.generate_heatmap_data(ctx.rng)),
    ("radar", lambda ctx: gen.generate_bar_data(ctx.rng)),
    ("histogram", lambda ctx: gen.generate_histogram_data(ctx.rng)),
    ("box_plot", lambda ctx: gen.generate_box_plot_data(ctx.rng)),
    ("violin", lambda ctx: gen.generate_violin_data(ctx.rng)),
    ("bubble", lambda ctx: gen.generate_bubble_data(ctx.rng)),
    ("waterfall", _fixed("waterfall")),
    ("funnel", _fixed("funnel")),
    ("calendar", lambda ctx: gen.generate_calendar_data(ctx.rng, today=ctx.today)),
    ("lollipop", lambda ctx: gen.generate_lollipop_data(ctx.rng)),
    ("candlestick", lambda ctx: gen.generate_candlestick_data(ctx.rng)),
    ("streamgraph", lambda ctx: gen.generate_streamgraph_data(ctx.rng)),
    ("parallel", lambda ctx: gen.generate_parallel_data(ctx.rng)),
    ("chord", _fixed("chord")),
    ("hexbin", lambda ctx: gen.generate_hexbin_data(ctx.rng)),
    ("geo_regions", _fixed("geo_regions")),
    ("dot_density", _dot_density),
    ("alluvial", _fixed("alluvial")),
    ("ridgeline", lambda ctx: gen.generate_ridgeline_data(ctx.rng)),
    ("horizon", lambda ctx: gen.generate_horizon_data(ctx.rng)),
    ("bump", lambda ctx: gen.generate_bump_data(ctx.rng)),
    ("radar_small_multiples", lambda ctx: gen.generate_radar_small_multiples_data(ctx.rng)),
    ("large_scatter", lambda ctx: gen.generate_large_scatter_data(ctx.rng, count=ctx.large_scatter_points)),
    ("grouped_bar", lambda ctx: gen.generate_grouped_bar_data(ctx.rng)),
    ("stacked_bar", lambda ctx: gen.generate_stacked_bar_data(ctx.rng)),
    ("stacked_area", lambda ctx: gen.generate_stacked_area_data(ctx.rng)),
    ("waffle", _fixed("waffle")),
    ("sparklines", lambda ctx: gen.generate_sparkline_data(ctx.rng)),
    ("small_multiples", lambda ctx: gen.generate_small_multiples_data(ctx.rng)),
    ("gantt", _fixed("gantt")),
    ("bullet", _fixed("bullet")),
    ("slope", _fixed("slope")),
    ("beeswarm", lambda ctx: gen.generate_beeswarm_data(ctx.rng)),
    ("arc_diagram", _fixed("arc_diagram")),
    ("marimekko", _fixed("marimekko")),
    ("venn", _fixed("venn")),
    ("contour", lambda ctx: gen.generate_contour_data(ctx.rng)),
    ("polar_area", _fixed("polar_area")),
    ("pyramid", _fixed("pyramid")),
    ("timeline", _fixed("timeline")),
    ("flow_map", _fixed("flow_map")),
    ("voronoi", lambda ctx: gen.generate_voronoi_data(ctx.rng)),
)

# Datasets regenerated by the mount-time refresh, in refresh order.
REFRESH_KEYS: Final[tuple[str, ...]] = (
    "bar",
    "line",
    "area",
    "scatter",
    "pie",
    "heatmap",
    "radar",
    "histogram",
    "box_plot",
    "violin",
    "bubble",
    "waterfall",
    "funnel",
    "calendar",
    "lollipop",
    "candlestick",
    "streamgraph",
    "parallel",
    "hexbin",
    "ridgeline",
    "horizon",
    "bump",
    "radar_small_multiples",
    "large_scatter",
)

DATASET_KEYS: Final[tuple[str, ...]] = tuple(key for key, _producer in _LOAD_ORDER)
_PRODUCERS: Final[dict[str, Callable[[_GenerationContext], object]]] = dict(_LOAD_ORDER)


@dataclass(frozen=True, slots=True)
class GalleryData:
    """All datasets for one gallery render.

    Attributes:
        seed: Seed of the stream that produced the random datasets.
        today: Anchor date used by date-relative generators.
        datasets: Read-only dataset key -> data mapping.
    """

    seed: int
    today: date
    datasets: Mapping[str, object]

    def get(self, key: str) -> object:
        """Return the dataset stored under `key`.

        Raises:
            KeyError: When the key is not a known dataset.
        """

        if key not in self.datasets:
            raise KeyError(f"Unknown dataset: {key!r}")
        return self.datasets[key]


@lru_cache(maxsize=16)
def build_gallery_data(
    *,
    seed: int = DEFAULT_SEED,
    today: date,
    large_scatter_points: int = gen.LARGE_SCATTER_POINTS,
) -> GalleryData:
    """Generate every gallery dataset for `seed`.

    Args:
        seed: PRNG seed for the page.
        today: Anchor date (the calendar heatmap ends on this day).
        large_scatter_points: Point count for the hybrid canvas scatter.

    Returns:
        A GalleryData holding the values the page displays.
    """

    ctx = _GenerationContext(
        rng=SeededRandom(seed),
        today=today,
        fixtures=load_fixtures(),
        large_scatter_points=large_scatter_points,
    )
    datasets: dict[str, object] = {}
    for key, producer in _LOAD_ORDER:
        datasets[key] = producer(ctx)
    for key in REFRESH_KEYS:
        datasets[key] = _PRODUCERS[key](ctx)
    logger.debug("Generated %d gallery datasets for seed=%s today=%s", len(datasets), seed, today)
    return GalleryData(seed=seed, today=today, datasets=MappingProxyType(datasets))
