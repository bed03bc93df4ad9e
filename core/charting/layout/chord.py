"""Chord layout: group arcs and ribbons for a square flow matrix."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from ..errors import ChartRenderError


@dataclass(frozen=True, slots=True)
class ChordGroup:
    """Arc of one group around the circle."""

    index: int
    start_angle: float
    end_angle: float
    value: float


@dataclass(frozen=True, slots=True)
class ChordEnd:
    """One end of a ribbon (a sub-arc of a group)."""

    index: int
    start_angle: float
    end_angle: float
    value: float


@dataclass(frozen=True, slots=True)
class Chord:
    """A ribbon between two groups; `source` carries the larger flow."""

    source: ChordEnd
    target: ChordEnd


@dataclass(frozen=True, slots=True)
class ChordLayout:
    groups: tuple[ChordGroup, ...]
    chords: tuple[Chord, ...]


def chord_layout(matrix: Sequence[Sequence[float]], *, pad_angle: float = 0.0) -> ChordLayout:
    """Compute group and ribbon angles for an undirected chord diagram.

    Groups keep matrix order. Within a group, sub-arcs are ordered by
    descending flow. A ribbon's source is the end with the larger value.

    Args:
        matrix: Square matrix; `matrix[i][j]` is the flow from i to j.
        pad_angle: Angular gap between adjacent groups.

    Raises:
        ChartRenderError: When the matrix is not square.
    """

    n = len(matrix)
    if any(len(row) != n for row in matrix):
        raise ChartRenderError("Chord matrix must be square.")
    flows = np.asarray(matrix, dtype=float).reshape(n, n)
    group_sums = flows.sum(axis=1)
    total = float(group_sums.sum())
    k = max(0.0, 2 * math.pi - pad_angle * n) / total if total else 0.0
    dx = pad_angle if k else 2 * math.pi / n if n else 0.0
    connected = (flows != 0) | (flows.T != 0)

    ends: dict[tuple[int, int], ChordEnd] = {}
    groups: list[ChordGroup] = []
    x = 0.0
    for i in range(n):
        order = [j for j in np.argsort(-flows[i], kind="stable") if connected[i, j]]
        widths = flows[i, order] * k
        starts = x + np.concatenate(([0.0], np.cumsum(widths)[:-1]))
        for j, start, width in zip(order, starts, widths):
            ends[(i, int(j))] = ChordEnd(
                index=i, start_angle=float(start), end_angle=float(start + width), value=float(flows[i, j])
            )
        end = x + float(widths.sum())
        groups.append(ChordGroup(index=i, start_angle=x, end_angle=end, value=float(group_sums[i])))
        x = end + dx

    chords: list[Chord] = []
    for i, j in sorted(ends):
        if j < i:
            continue
        source, target = ends[(i, j)], ends.get((j, i))
        if target is None:
            continue
        if source.value < target.value:
            source, target = target, source
        chords.append(Chord(source=source, target=target))
    return ChordLayout(groups=tuple(groups), chords=tuple(chords))
