"""Tests for the declarative gallery catalog and its validation."""

from __future__ import annotations

from dataclasses import replace

import pytest

from core.charting.gallery import (
    GALLERY_ENTRY_BY_SLUG,
    GALLERY_SECTIONS,
    STATISTICAL,
    chart_count,
    iter_entries,
)
from core.charting.schema import GridSpan
from core.charting.validator import validate_gallery, validate_gallery_entry

pytestmark = pytest.mark.unit


@pytest.fixture
def bar_entry():
    return GALLERY_ENTRY_BY_SLUG["bar-chart"]


def test_catalog_has_sixty_cards_in_five_sections() -> None:
    """The page lists sixty charts grouped into five sections."""

    assert chart_count() == 60
    assert [section.slug for section in GALLERY_SECTIONS] == [
        "statistical",
        "hierarchical",
        "network",
        "geospatial",
        "variants",
    ]
    assert len(list(iter_entries())) == 60
    assert len(GALLERY_ENTRY_BY_SLUG) == 60


def test_builtin_catalog_is_valid() -> None:
    """The shipped catalog passes validation without errors."""

    result = validate_gallery(GALLERY_SECTIONS)
    assert result.is_valid
    assert result.errors == ()


def test_entry_lookup_matches_page_order() -> None:
    """The slug index refers to the same objects as the sections."""

    assert list(GALLERY_ENTRY_BY_SLUG) == [entry.slug for entry in iter_entries()]
    assert GALLERY_ENTRY_BY_SLUG["donut-chart"].options == {"inner_radius": 80}
    assert GALLERY_ENTRY_BY_SLUG["gantt-chart"].uses_today


def test_dividers_separate_the_middle_sections() -> None:
    """The three middle sections open with a divider."""

    assert [section.divider_before for section in GALLERY_SECTIONS] == [False, True, True, True, False]


@pytest.mark.parametrize(
    ("changes", "fragment"),
    [
        ({"slug": "Bar Chart"}, "lowercase words joined by hyphens"),
        ({"slug": " "}, "slug must be a non-empty string"),
        ({"title": ""}, "title must be a non-empty string"),
        ({"chart_type": "pie3d"}, "not a registered renderer"),
        ({"dataset": "nope"}, "not a known dataset key"),
        ({"icon": "star"}, "icon is not a supported value"),
        ({"width": 0}, "width must be a positive integer"),
        ({"height": True}, "height must be a positive integer"),
        ({"grid": GridSpan(xs=13)}, "grid.xs must be within 1..12"),
        ({"grid": GridSpan(xs=12, lg=0)}, "grid.lg must be within 1..12"),
        ({"options": {"width": 10}}, "options cannot override ['width']"),
    ],
)
def test_validate_gallery_entry_reports_errors(bar_entry, changes, fragment) -> None:
    """Each malformed field yields a descriptive error."""

    result = validate_gallery_entry(replace(bar_entry, **changes))
    assert not result.is_valid
    assert any(fragment in error for error in result.errors), result.errors


def test_validate_gallery_entry_warns_on_soft_issues(bar_entry) -> None:
    """Empty descriptions and oversized canvases are warnings only."""

    result = validate_gallery_entry(replace(bar_entry, description="", width=2000))
    assert result.is_valid
    assert len(result.warnings) == 2


def test_validate_gallery_requires_sections() -> None:
    """An empty catalog is rejected."""

    result = validate_gallery(())
    assert not result.is_valid
    assert "at least one section" in result.errors[0]


def test_validate_gallery_rejects_duplicate_slugs(bar_entry) -> None:
    """Card and section slugs must be unique and must not collide."""

    duplicated = replace(STATISTICAL, entries=(bar_entry, bar_entry))
    result = validate_gallery((duplicated, duplicated))
    assert any("GallerySection slug 'statistical' is used 2 times" in e for e in result.errors)
    assert any("GalleryEntry slug 'bar-chart' is used 4 times" in e for e in result.errors)

    colliding = replace(STATISTICAL, entries=(replace(bar_entry, slug="statistical"),))
    result = validate_gallery((colliding,))
    assert any("must not collide" in e for e in result.errors)


def test_validate_gallery_checks_section_fields() -> None:
    """Section icons and colors come from fixed sets; empty sections warn."""

    section = replace(STATISTICAL, icon="star", color="danger", entries=())
    result = validate_gallery((section,))
    assert not result.is_valid
    assert len(result.errors) == 2
    assert result.warnings == ("GallerySection[statistical] has no entries.",)


def test_grid_span_css_classes() -> None:
    """Only the breakpoints that are set produce classes."""

    assert GridSpan().css_classes() == ("col-xs-12",)
    assert GridSpan(xs=12, lg=6).css_classes() == ("col-xs-12", "col-lg-6")
    assert GridSpan(xs=6, md=4, lg=3).css_classes() == ("col-xs-6", "col-md-4", "col-lg-3")
