"""URL configuration for core views."""

from __future__ import annotations

from django.urls import path

from core import views

app_name = "core"

urlpatterns = [
    path("", views.gallery, name="gallery"),
    path("charts/<slug:slug>/", views.chart_detail, name="chart_detail"),
    path("charts/<slug:slug>.svg", views.chart_svg, name="chart_svg"),
    path("assets/plotly.min.js", views.plotly_js, name="plotly_js"),
]
