"""Exceptions raised while rendering gallery charts."""

from __future__ import annotations


class ChartRenderError(Exception):
    """A chart could not be rendered from the given data."""


class EmptyDataError(ChartRenderError):
    """The primary data collection of a chart is empty."""

    def __init__(self, chart_type: str) -> None:
        super().__init__(f"No data to render for chart type {chart_type!r}.")
        self.chart_type = chart_type


class UnknownChartTypeError(KeyError):
    """No renderer is registered for the requested chart type."""


def require_data(chart_type: str, data: object) -> None:
    """Raise EmptyDataError when `data` is empty.

    Args:
        chart_type: Chart type used in the error message.
        data: Primary data collection (anything supporting `len`).
    """

    if data is None or len(data) == 0:  # type: ignore[arg-type]
        raise EmptyDataError(chart_type)
