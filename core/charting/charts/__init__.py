"""Chart renderers, registered with the default registry on import."""

from __future__ import annotations

from . import basic, comparison, distribution, geo, hierarchy, network, temporal

__all__ = ["basic", "comparison", "distribution", "geo", "hierarchy", "network", "temporal"]
