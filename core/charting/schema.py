"""Schema types for the declarative gallery page.

The gallery is driven by configuration objects (GallerySection and
GalleryEntry) instead of per-chart view code. A card names a registered chart
type and a dataset key; the render layer resolves both at request time.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Final, Literal

IconName = Literal["timeline", "bubble_chart", "account_tree", "map"]

ThemeColor = Literal["primary", "secondary", "success", "warning"]

ICON_NAMES: Final[frozenset[str]] = frozenset({"timeline", "bubble_chart", "account_tree", "map"})
THEME_COLORS: Final[frozenset[str]] = frozenset({"primary", "secondary", "success", "warning"})
GRID_COLUMNS: Final[int] = 12


@dataclass(frozen=True, slots=True)
class GridSpan:
    """Responsive column span of a card on the 12-column grid.

    Args:
        xs: Columns on small screens (always set).
        md: Columns from the medium breakpoint; inherits `xs` when None.
        lg: Columns from the large breakpoint; inherits `md` when None.
    """

    xs: int = GRID_COLUMNS
    md: int | None = None
    lg: int | None = None

    def css_classes(self) -> tuple[str, ...]:
        """Return the grid classes for the card wrapper (`col-xs-12 col-lg-6`)."""

        classes = [f"col-xs-{self.xs}"]
        if self.md is not None:
            classes.append(f"col-md-{self.md}")
        if self.lg is not None:
            classes.append(f"col-lg-{self.lg}")
        return tuple(classes)


FULL_WIDTH: Final[GridSpan] = GridSpan(xs=12)
HALF_FROM_LG: Final[GridSpan] = GridSpan(xs=12, lg=6)
HALF_FROM_MD: Final[GridSpan] = GridSpan(xs=12, md=6)


@dataclass(frozen=True, slots=True)
class GalleryEntry:
    """One chart card.

    Args:
        slug: URL-safe identifier used by the detail and SVG endpoints.
        title: Card heading.
        description: One-sentence caption under the heading.
        icon: Icon shown beside the heading.
        grid: Column span on the page grid.
        chart_type: Registered renderer key.
        dataset: Key into `GalleryData.datasets`.
        width: Canvas width in pixels.
        height: Canvas height in pixels.
        options: Extra keyword arguments forwarded to the renderer.
        uses_today: Forward the data's anchor date as the `today` option.
    """

    slug: str
    title: str
    description: str
    icon: IconName
    grid: GridSpan
    chart_type: str
    dataset: str
    width: int
    height: int
    options: dict[str, Any] = field(default_factory=dict)
    uses_today: bool = False


@dataclass(frozen=True, slots=True)
class GallerySection:
    """A titled group of cards.

    Args:
        slug: Anchor id for in-page navigation.
        title: Section heading.
        description: Lead paragraph under the heading.
        icon: Heading icon.
        color: Theme color of the heading icon and the card icons.
        divider_before: Draw a divider above the section.
        entries: Cards in page order.
    """

    slug: str
    title: str
    description: str
    icon: IconName
    color: ThemeColor
    entries: tuple[GalleryEntry, ...]
    divider_before: bool = False
