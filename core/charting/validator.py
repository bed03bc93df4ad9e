"""Validation for the declarative gallery definition.

The gallery catalog is plain data edited by hand, so validation is strict and
fails fast: `gallery.py` refuses to import with an invalid catalog.
"""

from __future__ import annotations

import re
from collections import Counter
from collections.abc import Iterable
from dataclasses import dataclass

from mockdata.gallery_data import DATASET_KEYS

from .registry import registered_chart_types
from .schema import GRID_COLUMNS, ICON_NAMES, THEME_COLORS, GalleryEntry, GallerySection

SLUG_PATTERN = re.compile(r"^[a-z0-9]+(?:-[a-z0-9]+)*$")
MAX_CANVAS_SIDE = 1600


@dataclass(frozen=True, slots=True)
class ValidationResult:
    """Result of validating gallery configuration."""

    is_valid: bool
    errors: tuple[str, ...] = ()
    warnings: tuple[str, ...] = ()


def validate_gallery_entry(entry: GalleryEntry) -> ValidationResult:
    """Validate a single card against the renderer registry and dataset keys.

    Args:
        entry: GalleryEntry to validate.

    Returns:
        ValidationResult containing errors and warnings.
    """

    errors: list[str] = []
    warnings: list[str] = []

    if not entry.slug.strip():
        errors.append("GalleryEntry.slug must be a non-empty string.")
    elif not SLUG_PATTERN.match(entry.slug):
        errors.append(f"GalleryEntry[{entry.slug}].slug must be lowercase words joined by hyphens.")
    if not entry.title.strip():
        errors.append(f"GalleryEntry[{entry.slug}].title must be a non-empty string.")
    if not entry.description.strip():
        warnings.append(f"GalleryEntry[{entry.slug}].description is empty.")

    if entry.chart_type not in registered_chart_types():
        errors.append(f"GalleryEntry[{entry.slug}].chart_type is not a registered renderer: {entry.chart_type!r}.")
    if entry.dataset not in DATASET_KEYS:
        errors.append(f"GalleryEntry[{entry.slug}].dataset is not a known dataset key: {entry.dataset!r}.")
    if entry.icon not in ICON_NAMES:
        errors.append(f"GalleryEntry[{entry.slug}].icon is not a supported value: {entry.icon!r}.")

    for name, value in (("width", entry.width), ("height", entry.height)):
        if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
            errors.append(f"GalleryEntry[{entry.slug}].{name} must be a positive integer.")
        elif value > MAX_CANVAS_SIDE:
            warnings.append(f"GalleryEntry[{entry.slug}].{name}={value} exceeds {MAX_CANVAS_SIDE}px.")

    for name in ("xs", "md", "lg"):
        span = getattr(entry.grid, name)
        if span is None:
            continue
        if not 1 <= span <= GRID_COLUMNS:
            errors.append(f"GalleryEntry[{entry.slug}].grid.{name} must be within 1..{GRID_COLUMNS}; got {span}.")

    reserved = {"width", "height", "today"} & set(entry.options)
    if reserved:
        errors.append(f"GalleryEntry[{entry.slug}].options cannot override {sorted(reserved)}.")

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))


def validate_gallery(sections: Iterable[GallerySection]) -> ValidationResult:
    """Validate every section and card plus cross-card constraints.

    Args:
        sections: Sections in page order.

    Returns:
        ValidationResult aggregating all section and card results.
    """

    errors: list[str] = []
    warnings: list[str] = []
    sections = tuple(sections)

    if not sections:
        errors.append("The gallery must contain at least one section.")

    section_slugs = Counter(section.slug for section in sections)
    for slug, count in section_slugs.items():
        if count > 1:
            errors.append(f"GallerySection slug {slug!r} is used {count} times.")

    entry_slugs: Counter[str] = Counter()
    for section in sections:
        if not section.title.strip():
            errors.append(f"GallerySection[{section.slug}].title must be a non-empty string.")
        if section.icon not in ICON_NAMES:
            errors.append(f"GallerySection[{section.slug}].icon is not a supported value: {section.icon!r}.")
        if section.color not in THEME_COLORS:
            errors.append(f"GallerySection[{section.slug}].color is not a supported value: {section.color!r}.")
        if not section.entries:
            warnings.append(f"GallerySection[{section.slug}] has no entries.")
        for entry in section.entries:
            entry_slugs[entry.slug] += 1
            result = validate_gallery_entry(entry)
            errors.extend(result.errors)
            warnings.extend(result.warnings)

    for slug, count in entry_slugs.items():
        if count > 1:
            errors.append(f"GalleryEntry slug {slug!r} is used {count} times.")
    if set(section_slugs) & set(entry_slugs):
        errors.append(
            f"Section and entry slugs must not collide: {sorted(set(section_slugs) & set(entry_slugs))}."
        )

    return ValidationResult(is_valid=not errors, errors=tuple(errors), warnings=tuple(warnings))
