"""Integration tests for the render_gallery management command."""

from __future__ import annotations

from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

from core.charting import render as render_module
from core.charting.errors import ChartRenderError

pytestmark = pytest.mark.integration


def test_render_gallery_check_validates_without_rendering() -> None:
    """--check only validates the catalog."""

    out = StringIO()
    call_command("render_gallery", "--check", stdout=out)
    assert out.getvalue().strip() == "[CHECK] 60 charts OK"


def test_render_gallery_renders_a_single_chart() -> None:
    """--chart renders one card and reports its shape count."""

    out = StringIO()
    call_command("render_gallery", "--chart", "bar-chart", "--seed", "5", stdout=out)
    lines = out.getvalue().strip().splitlines()
    assert lines == ["bar-chart shapes=6", "[seed=5] rendered 1 charts"]


@override_settings(GALLERY_LARGE_SCATTER_POINTS=100, GALLERY_DEFAULT_SEED=77)
def test_render_gallery_renders_every_chart_with_default_seed() -> None:
    """Without options every card is rendered with the configured seed."""

    out = StringIO()
    call_command("render_gallery", stdout=out)
    lines = out.getvalue().strip().splitlines()
    assert len(lines) == 61
    assert lines[-1] == "[seed=77] rendered 60 charts"
    assert not any("FAILED" in line for line in lines)


def test_render_gallery_rejects_unknown_slug() -> None:
    """Unknown slugs are reported as command errors."""

    with pytest.raises(CommandError, match="Unknown chart slug: missing"):
        call_command("render_gallery", "--chart", "missing", stdout=StringIO())


def test_render_gallery_fails_when_a_chart_cannot_render(monkeypatch) -> None:
    """A renderer error marks the card as failed and the command exits non-zero."""

    def broken(data, *, width, height, **options):
        raise ChartRenderError("broken data")

    monkeypatch.setattr(render_module, "get_renderer", lambda chart_type: broken)
    out = StringIO()
    with pytest.raises(CommandError, match="1 chart\\(s\\) failed to render"):
        call_command("render_gallery", "--chart", "line-chart", stdout=out)
    assert "line-chart FAILED" in out.getvalue()


@pytest.mark.parametrize("raw", ["--seed=-1", f"--seed={2**32}"])
def test_render_gallery_rejects_out_of_range_seed(raw) -> None:
    """--seed uses the same bounds as the gallery form."""

    with pytest.raises(CommandError, match="Invalid --seed"):
        call_command("render_gallery", raw, "--chart", "bar-chart", stdout=StringIO())
