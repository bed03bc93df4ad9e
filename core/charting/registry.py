"""Chart renderer registry.

Renderer modules under `core.charting.charts` register themselves with the
`register_renderer` decorator at import time. The gallery catalog refers to
renderers by chart type only, so the validator and the render pipeline look
them up here.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, Protocol

import plotly.graph_objects as go

from .errors import UnknownChartTypeError
from .scene import Node


class ChartRenderer(Protocol):
    """Callable that draws one chart type as an SVG scene graph or a plotly figure."""

    def __call__(self, data: Any, *, width: float, height: float, **options: Any) -> Node | go.Figure: ...


class ChartRendererRegistry:
    """Lookup helpers for chart renderers keyed by chart type."""

    def __init__(self) -> None:
        self._renderers: dict[str, ChartRenderer] = {}

    def register(self, chart_type: str, renderer: ChartRenderer) -> None:
        """Register `renderer` under `chart_type`.

        Raises:
            ValueError: When the chart type is blank or already registered.
        """

        if not chart_type.strip():
            raise ValueError("Chart type must be a non-empty string.")
        if chart_type in self._renderers:
            raise ValueError(f"Duplicate renderer for chart type: {chart_type!r}")
        self._renderers[chart_type] = renderer

    def get(self, chart_type: str) -> ChartRenderer:
        """Return the renderer for a chart type.

        Raises:
            UnknownChartTypeError: When no renderer is registered.
        """

        try:
            return self._renderers[chart_type]
        except KeyError:
            raise UnknownChartTypeError(chart_type) from None

    def __contains__(self, chart_type: object) -> bool:
        return chart_type in self._renderers

    def chart_types(self) -> tuple[str, ...]:
        """Return registered chart types in a stable order."""

        return tuple(sorted(self._renderers))


DEFAULT_REGISTRY = ChartRendererRegistry()


def register_renderer(chart_type: str) -> Callable[[ChartRenderer], ChartRenderer]:
    """Register the decorated function as the renderer for `chart_type`."""

    def decorator(renderer: ChartRenderer) -> ChartRenderer:
        DEFAULT_REGISTRY.register(chart_type, renderer)
        return renderer

    return decorator


def get_renderer(chart_type: str) -> ChartRenderer:
    """Return the default-registry renderer for `chart_type`."""

    _load_renderers()
    return DEFAULT_REGISTRY.get(chart_type)


def registered_chart_types() -> tuple[str, ...]:
    """Return every chart type known to the default registry."""

    _load_renderers()
    return DEFAULT_REGISTRY.chart_types()


def _load_renderers() -> None:
    # Importing the package registers every renderer module.
    from . import charts  # noqa: F401
