"""Template context processors for the gallery."""

from __future__ import annotations

from django.conf import settings
from django.http import HttpRequest

from core.charting.gallery import GALLERY_SECTIONS, SITE_TAGLINE, SITE_TITLE


def gallery(request: HttpRequest) -> dict[str, object]:
    """Expose site chrome shared by every page.

    Args:
        request: Current request object.

    Returns:
        Context dict with the site title, section navigation and the
        animation switch.
    """

    return {
        "site_title": SITE_TITLE,
        "site_tagline": SITE_TAGLINE,
        "gallery_nav": tuple((section.slug, section.title) for section in GALLERY_SECTIONS),
        "animations_enabled": settings.GALLERY_ANIMATIONS,
    }
