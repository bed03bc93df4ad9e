"""Stack layout for stacked bars, stacked areas and streamgraphs."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Literal

import numpy as np

StackOffset = Literal["none", "expand", "wiggle"]

OFFSETS: frozenset[str] = frozenset({"none", "expand", "wiggle"})


@dataclass(slots=True)
class StackSeries:
    """One stacked series: a `[lower, upper]` pair per row."""

    key: str
    index: int
    points: list[list[float]]


def _wiggle_baseline(layers: np.ndarray) -> np.ndarray:
    # Streamgraph baseline as in matplotlib's `stackplot(baseline="wiggle")`.
    m = layers.shape[0]
    return -(layers * (m - 0.5 - np.arange(m)[:, None])).sum(axis=0) / m


def stack(keys: Sequence[str], rows: Sequence[Sequence[float]], *, offset: StackOffset = "none") -> list[StackSeries]:
    """Stack row values into one `[lower, upper]` band per key.

    Args:
        keys: Series names; `rows[j][i]` is the value of `keys[i]` at row j.
        rows: Values per row, aligned with `keys`.
        offset: Baseline strategy (`none` stacks from zero, `expand`
            normalizes each row to 1, `wiggle` centres a streamgraph).

    Returns:
        Series in key order.
    """

    if offset not in OFFSETS:
        raise ValueError(f"Unknown stack offset: {offset!r}")
    # One row per series, one column per input row.
    layers = np.asarray(rows, dtype=float).reshape(len(rows), len(keys)).T
    if offset == "expand":
        totals = layers.sum(axis=0)
        layers = np.divide(layers, totals, out=layers.copy(), where=totals != 0)
    baseline = _wiggle_baseline(layers) if offset == "wiggle" and layers.size else np.zeros(layers.shape[1])
    upper = baseline + np.cumsum(layers, axis=0)
    lower = upper - layers
    return [
        StackSeries(
            key=key,
            index=i,
            points=[[float(lo), float(hi)] for lo, hi in zip(lower[i], upper[i])],
        )
        for i, key in enumerate(keys)
    ]
