"""Plotly figures for charts whose layout is computed by plotly.js.

Treemaps, partitions and Sankey flows are laid out in the browser by
plotly.js. Renderers for those chart types build a `go.Figure` from flattened
node lists; the page embeds each figure as an HTML snippet and loads the
plotly.js bundle once.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Any, Final

import plotly.graph_objects as go
import plotly.io as pio
from plotly.offline import get_plotlyjs

from . import palettes

FIGURE_CONFIG: Final[dict[str, Any]] = {
    "displayModeBar": False,
    "responsive": False,
    "scrollZoom": False,
}

# Hoverable marks per trace type: one per node for hierarchies, nodes plus links for flows.
_HIERARCHY_TRACES: Final[frozenset[str]] = frozenset({"treemap", "sunburst", "icicle"})


def figure_theme(width: float, height: float, *, margin: int = 4) -> dict[str, Any]:
    """Layout shared by every gallery figure.

    Args:
        width: Figure width in pixels.
        height: Figure height in pixels.
        margin: Uniform plot margin in pixels.

    Returns:
        Keyword arguments for `Figure.update_layout`.
    """

    return {
        "width": width,
        "height": height,
        "margin": {"l": margin, "r": margin, "t": margin, "b": margin},
        "paper_bgcolor": "rgba(0,0,0,0)",
        "plot_bgcolor": "rgba(0,0,0,0)",
        "font": {"family": "Roboto, Helvetica, Arial, sans-serif", "size": 12, "color": palettes.TEXT},
        "hoverlabel": {"bgcolor": "rgba(0,0,0,0.85)", "font": {"color": "white", "size": 12}},
        "showlegend": False,
    }


def figure_html(fig: go.Figure, *, div_id: str) -> str:
    """Serialize `fig` to an embeddable `<div>` + `<script>` snippet.

    The plotly.js bundle is not included; the page loads it once.
    """

    return pio.to_html(
        fig,
        full_html=False,
        include_plotlyjs=False,
        div_id=div_id,
        config=FIGURE_CONFIG,
    )


def figure_shape_count(fig: go.Figure) -> int:
    """Count the hoverable marks of a figure."""

    count = 0
    for trace in fig.data:
        if trace.type in _HIERARCHY_TRACES:
            count += len(trace.ids or ())
        elif trace.type == "sankey":
            count += len(trace.node.label or ()) + len(trace.link.value or ())
    return count


@lru_cache(maxsize=1)
def plotly_js() -> str:
    """Return the bundled plotly.js source."""

    return get_plotlyjs()
