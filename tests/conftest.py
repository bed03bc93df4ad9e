"""Pytest fixtures shared across the gallery test suite."""

from __future__ import annotations

from collections.abc import Sequence
from datetime import date

import pytest

from mockdata.gallery_data import GalleryData, build_gallery_data
from mockdata.prng import DEFAULT_SEED

TODAY = date(2025, 6, 15)


@pytest.fixture
def today() -> date:
    """Return a fixed anchor date so calendar and Gantt output is stable."""

    return TODAY


@pytest.fixture
def gallery_data(today) -> GalleryData:
    """Return every dataset for the default seed with a small canvas scatter."""

    return build_gallery_data(seed=DEFAULT_SEED, today=today, large_scatter_points=500)


def pytest_collection_modifyitems(items: Sequence[pytest.Item]) -> None:
    """Enforce that every test has exactly one speed marker.

    The suite is runnable by intent:
    - `unit`: pure, fast tests that do not go through Django.
    - `integration`: tests touching Django views, templates, commands, or IO.

    Each test must have exactly one of these markers.
    """

    invalid: list[str] = []
    for item in items:
        has_unit = item.get_closest_marker("unit") is not None
        has_integration = item.get_closest_marker("integration") is not None
        if has_unit == has_integration:
            markers = []
            if has_unit:
                markers.append("unit")
            if has_integration:
                markers.append("integration")
            invalid.append(f"{item.nodeid} (markers={markers or 'none'})")

    if invalid:
        joined = "\n".join(f"- {nodeid}" for nodeid in invalid)
        raise pytest.UsageError(
            "Each test must have exactly one speed marker: `@pytest.mark.unit` or "
            "`@pytest.mark.integration`.\n"
            f"Offending tests:\n{joined}"
        )
