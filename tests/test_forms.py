"""Tests for the gallery seed form."""

from __future__ import annotations

import pytest

from core.forms import MAX_SEED, GalleryControlsForm, next_seed

pytestmark = pytest.mark.unit


def test_next_seed_increments_and_wraps() -> None:
    """Refresh moves to the following seed and wraps past the largest one."""

    assert next_seed(5) == 6
    assert next_seed(0) == 1
    assert next_seed(MAX_SEED) == 0


@pytest.mark.parametrize(("data", "expected"), [({"seed": "9"}, 9), ({"seed": ""}, 42), ({"seed": "-3"}, 42)])
def test_seed_or_default(data, expected) -> None:
    """Empty and invalid seeds fall back to the default."""

    assert GalleryControlsForm(data).seed_or_default(42) == expected


def test_unbound_form_uses_the_default() -> None:
    """Pages without a query string render the default seed."""

    assert GalleryControlsForm().seed_or_default(7) == 7
