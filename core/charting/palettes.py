"""Color palettes shared by the chart renderers.

Categorical schemes are fixed hex lists. Sequential color ramps are sampled
from matplotlib colormaps (the ColorBrewer ramps share names with the ones the
charts were designed against).
"""

from __future__ import annotations

from collections.abc import Callable
from functools import lru_cache
from typing import Final

import matplotlib
from matplotlib.colors import to_hex, to_rgba

PRIMARY: Final[str] = "#1976d2"
PRIMARY_DARK: Final[str] = "#1565c0"
PRIMARY_LIGHT: Final[str] = "#42a5f5"
ACCENT: Final[str] = "#ff9800"
POSITIVE: Final[str] = "#4caf50"
POSITIVE_DARK: Final[str] = "#2e7d32"
NEGATIVE: Final[str] = "#f44336"
NEGATIVE_DARK: Final[str] = "#d32f2f"
MUTED: Final[str] = "#666666"
GRID: Final[str] = "#e0e0e0"
TEXT: Final[str] = "#333333"

CATEGORY10: Final[tuple[str, ...]] = (
    "#1f77b4",
    "#ff7f0e",
    "#2ca02c",
    "#d62728",
    "#9467bd",
    "#8c564b",
    "#e377c2",
    "#7f7f7f",
    "#bcbd22",
    "#17becf",
)

SET2: Final[tuple[str, ...]] = (
    "#66c2a5",
    "#fc8d62",
    "#8da0cb",
    "#e78ac3",
    "#a6d854",
    "#ffd92f",
    "#e5c494",
    "#b3b3b3",
)

SET3: Final[tuple[str, ...]] = (
    "#8dd3c7",
    "#ffffb3",
    "#bebada",
    "#fb8072",
    "#80b1d3",
    "#fdb462",
    "#b3de69",
    "#fccde5",
    "#d9d9d9",
    "#bc80bd",
    "#ccebc5",
    "#ffed6f",
)

TABLEAU10: Final[tuple[str, ...]] = (
    "#4e79a7",
    "#f28e2c",
    "#e15759",
    "#76b7b2",
    "#59a14f",
    "#edc949",
    "#af7aa1",
    "#ff9da7",
    "#9c755f",
    "#bab0ab",
)

SEQUENTIAL_RAMPS: Final[frozenset[str]] = frozenset(
    {"Blues", "GnBu", "Oranges", "PuBuGn", "Reds", "YlGnBu", "YlOrRd", "plasma", "viridis"}
)


@lru_cache(maxsize=32)
def _colormap(name: str):
    if name not in SEQUENTIAL_RAMPS:
        raise ValueError(f"Unsupported sequential color ramp: {name!r}")
    return matplotlib.colormaps[name]


def interpolate(name: str, t: float) -> str:
    """Sample a sequential ramp.

    Args:
        name: Ramp name (one of SEQUENTIAL_RAMPS).
        t: Position in `[0, 1]`; values outside the interval are clamped.

    Returns:
        A `#rrggbb` color.
    """

    t = 0.0 if t != t else min(1.0, max(0.0, t))
    return to_hex(_colormap(name)(t))


def interpolator(name: str) -> Callable[[float], str]:
    """Return a `t -> color` function for a sequential ramp."""

    _colormap(name)
    return lambda t: interpolate(name, t)


def categorical(scheme: tuple[str, ...], index: int) -> str:
    """Return the scheme color for `index`, cycling when it runs out."""

    return scheme[index % len(scheme)]


def rgba(color: str, alpha: float) -> str:
    """Return `color` as a CSS `rgba(...)` string with the given opacity."""

    r, g, b, _ = to_rgba(color)
    return f"rgba({round(r * 255)},{round(g * 255)},{round(b * 255)},{alpha:g})"
