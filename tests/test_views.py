"""Django integration tests for the gallery pages."""

from __future__ import annotations

import pytest
from django.test import override_settings
from django.urls import reverse

pytestmark = [pytest.mark.integration, pytest.mark.usefixtures("small_canvas")]


@pytest.fixture
def small_canvas():
    """Keep the hybrid scatter small so page renders stay fast."""

    with override_settings(GALLERY_LARGE_SCATTER_POINTS=200, GALLERY_DEFAULT_SEED=42):
        yield


def test_gallery_renders_every_section(client) -> None:
    """The landing page lists five sections and sixty cards."""

    response = client.get(reverse("core:gallery"))
    assert response.status_code == 200
    assert response.context["seed"] == 42
    assert response.context["chart_total"] == 60
    assert len(response.context["sections"]) == 5
    content = response.content.decode()
    assert content.count('class="chart-stage"') == 60
    assert 'id="chart-bar-chart"' in content
    assert "About This Project" in content
    assert 'value="43"' in content


def test_gallery_uses_requested_seed(client) -> None:
    """A valid seed selects the mock data stream."""

    response = client.get(reverse("core:gallery"), {"seed": "7"})
    assert response.status_code == 200
    assert response.context["seed"] == 7
    assert not response.context["form"].errors


@pytest.mark.parametrize("raw", ["abc", "-1", str(2**32)])
def test_gallery_falls_back_on_invalid_seed(client, raw) -> None:
    """Invalid seeds render the default data and report a form error."""

    response = client.get(reverse("core:gallery"), {"seed": raw})
    assert response.status_code == 200
    assert response.context["seed"] == 42
    assert "seed" in response.context["form"].errors


def test_gallery_context_processor_exposes_site_chrome(client) -> None:
    """Every page gets the title, section navigation and animation switch."""

    response = client.get(reverse("core:chart_detail", args=["bar-chart"]))
    assert response.context["site_title"] == "D3.js Visualization Showcase"
    assert [slug for slug, _title in response.context["gallery_nav"]][0] == "statistical"
    assert response.context["animations_enabled"] is True


@override_settings(GALLERY_ANIMATIONS=False)
def test_animations_can_be_switched_off(client) -> None:
    """Disabling animations marks the body so CSS skips enter transitions."""

    response = client.get(reverse("core:chart_detail", args=["bar-chart"]))
    assert 'class="no-motion"' in response.content.decode()


def test_chart_detail_renders_one_card(client) -> None:
    """The detail page shows a single chart with its shape count."""

    response = client.get(reverse("core:chart_detail", args=["sankey-diagram"]), {"seed": "3"})
    assert response.status_code == 200
    chart = response.context["chart"]
    assert chart.entry.slug == "sankey-diagram"
    assert chart.shape_count == 14
    content = response.content.decode()
    assert 'id="figure-sankey-diagram"' in content
    assert "Plotly.newPlot" in content
    assert "Download SVG" not in content
    assert "Seed 3" in content


def test_chart_detail_embeds_canvas_payload(client) -> None:
    """Hybrid charts ship their points in a json_script block."""

    response = client.get(reverse("core:chart_detail", args=["hybrid-canvas-scatter"]))
    content = response.content.decode()
    assert 'id="canvas-hybrid-canvas-scatter"' in content
    assert 'data-points="canvas-hybrid-canvas-scatter"' in content


def test_unknown_chart_returns_404(client) -> None:
    """Unknown slugs are not found on either endpoint."""

    assert client.get(reverse("core:chart_detail", args=["no-such-chart"])).status_code == 404
    assert client.get(reverse("core:chart_svg", args=["no-such-chart"])).status_code == 404


def test_chart_svg_endpoint_returns_svg_document(client) -> None:
    """The download endpoint serves standalone SVG markup."""

    response = client.get(reverse("core:chart_svg", args=["circle-packing"]))
    assert response.status_code == 200
    assert response["Content-Type"] == "image/svg+xml"
    assert response.content.startswith(b"<svg")
    assert b"data-tooltip" in response.content


@pytest.mark.parametrize("slug", ["sankey-diagram", "treemap"])
def test_chart_svg_endpoint_skips_figure_charts(client, slug) -> None:
    """Charts drawn by plotly.js have no SVG download."""

    assert client.get(reverse("core:chart_svg", args=[slug])).status_code == 404


def test_plotly_bundle_is_served_once_per_page(client) -> None:
    """The gallery page loads the plotly.js bundle from the local endpoint."""

    url = reverse("core:plotly_js")
    response = client.get(url)
    assert response.status_code == 200
    assert response["Content-Type"].startswith("application/javascript")
    assert "max-age=86400" in response["Cache-Control"]
    page = client.get(reverse("core:gallery")).content.decode()
    assert page.count(f'src="{url}"') == 1


def test_refresh_wraps_at_the_largest_seed(client) -> None:
    """Refreshing from the largest seed starts over at zero."""

    response = client.get(reverse("core:gallery"), {"seed": str(2**32 - 1)})
    assert response.context["seed"] == 2**32 - 1
    assert response.context["next_seed"] == 0
    assert 'name="seed" value="0"' in response.content.decode()


def test_chart_svg_is_deterministic_for_a_seed(client) -> None:
    """The same seed downloads identical markup."""

    url = reverse("core:chart_svg", args=["scatter-plot"])
    first = client.get(url, {"seed": "99"}).content
    second = client.get(url, {"seed": "99"}).content
    other = client.get(url, {"seed": "100"}).content
    assert first == second
    assert first != other
