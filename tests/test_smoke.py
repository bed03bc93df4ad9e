"""Minimal smoke tests for the project scaffolding."""

from __future__ import annotations

import pytest

pytestmark = pytest.mark.unit


def test_chart_registry_imports() -> None:
    """Import the registry and verify the renderers registered themselves."""

    from core.charting.registry import registered_chart_types

    assert "bar" in registered_chart_types()


def test_django_project_loads() -> None:
    """Import and initialize Django to verify settings are valid."""

    import os

    import django
    from django.conf import settings

    os.environ.setdefault("DJANGO_SETTINGS_MODULE", "vizGallery.settings")
    django.setup()
    assert "core.apps.CoreConfig" in settings.INSTALLED_APPS
