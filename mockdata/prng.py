"""Seeded pseudo-random stream used by every mock data generator.

The gallery must look identical across runs for the same seed, so generators
never touch the global `random` module. Each page render owns one
SeededRandom instance and threads it through the generators in page order.
"""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Final

DEFAULT_SEED: Final[int] = 123456789

_MULTIPLIER: Final[int] = 1664525
_INCREMENT: Final[int] = 1013904223
_MODULUS: Final[int] = 2**32


class SeededRandom:
    """Linear congruential generator producing floats in `[0, 1)`.

    Args:
        seed: Initial 32-bit state. Values outside the 32-bit range wrap.
    """

    __slots__ = ("_state",)

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        self._state = seed % _MODULUS

    @property
    def state(self) -> int:
        """Return the current internal state."""

        return self._state

    def random(self) -> float:
        """Advance the stream and return the next value in `[0, 1)`."""

        self._state = (self._state * _MULTIPLIER + _INCREMENT) % _MODULUS
        return self._state / _MODULUS

    def uniform(self, low: float, high: float) -> float:
        """Return a value in `[low, high)`."""

        return low + self.random() * (high - low)

    def randint_floor(self, span: int, offset: int = 0) -> int:
        """Return `floor(random() * span) + offset`."""

        return math.floor(self.random() * span) + offset


def normal_distribution(rng: SeededRandom, count: int, mean: float, std_dev: float) -> tuple[float, ...]:
    """Draw normally distributed samples with the Box-Muller transform.

    Args:
        rng: Random stream to consume (two draws per sample).
        count: Number of samples.
        mean: Distribution mean.
        std_dev: Distribution standard deviation.

    Returns:
        A tuple of `count` samples.
    """

    values: list[float] = []
    for _ in range(count):
        u1 = 1 - rng.random()
        u2 = 1 - rng.random()
        z0 = math.sqrt(-2 * math.log(u1)) * math.cos(2 * math.pi * u2)
        values.append(mean + z0 * std_dev)
    return tuple(values)


def js_round(value: float) -> int:
    """Round half up (toward positive infinity), matching browser rounding."""

    return math.floor(value + 0.5)


def point_in_polygon(point: tuple[float, float], polygon: Sequence[tuple[float, float]]) -> bool:
    """Return True when `point` lies inside `polygon` (even-odd rule).

    Args:
        point: `(x, y)` coordinates.
        polygon: Polygon vertices in order; the closing edge is implicit.

    Returns:
        Whether the point is inside the polygon.
    """

    x, y = point
    inside = False
    j = len(polygon) - 1
    for i in range(len(polygon)):
        xi, yi = polygon[i]
        xj, yj = polygon[j]
        if (yi > y) != (yj > y) and x < (xj - xi) * (y - yi) / (yj - yi) + xi:
            inside = not inside
        j = i
    return inside
