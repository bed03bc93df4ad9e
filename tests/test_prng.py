"""Tests for the seeded pseudo-random stream."""

from __future__ import annotations

import statistics

import pytest

from mockdata.prng import DEFAULT_SEED, SeededRandom, js_round, normal_distribution, point_in_polygon

pytestmark = pytest.mark.unit


def test_seeded_random_follows_the_linear_congruential_recurrence() -> None:
    """The first values for the default seed match the LCG constants."""

    rng = SeededRandom(DEFAULT_SEED)
    assert rng.random() == 920370032 / 2**32
    assert rng.state == 920370032
    assert rng.random() == 3761641487 / 2**32
    assert rng.random() == 2252023330 / 2**32


def test_seeded_random_is_deterministic_and_seed_sensitive() -> None:
    """The same seed replays the same stream; a different seed does not."""

    a, b, c = SeededRandom(42), SeededRandom(42), SeededRandom(43)
    stream_a = [a.random() for _ in range(50)]
    stream_b = [b.random() for _ in range(50)]
    stream_c = [c.random() for _ in range(50)]
    assert stream_a == stream_b
    assert stream_a != stream_c


def test_seeded_random_wraps_seeds_outside_32_bits() -> None:
    """Seeds are reduced modulo 2**32."""

    assert SeededRandom(2**32 + 5).state == 5
    assert SeededRandom(0).random() == 1013904223 / 2**32


def test_seeded_random_values_stay_in_unit_interval() -> None:
    """Every draw lies in [0, 1) and uniform/randint_floor respect their bounds."""

    rng = SeededRandom(7)
    for _ in range(1000):
        assert 0 <= rng.random() < 1
        assert 5 <= rng.uniform(5, 10) < 10
        assert 20 <= rng.randint_floor(100, 20) < 120


def test_normal_distribution_has_requested_moments() -> None:
    """Box-Muller samples approximate the requested mean and spread."""

    samples = normal_distribution(SeededRandom(11), 4000, 50, 15)
    assert len(samples) == 4000
    assert statistics.fmean(samples) == pytest.approx(50, abs=1.5)
    assert statistics.pstdev(samples) == pytest.approx(15, abs=1.5)


def test_normal_distribution_consumes_two_draws_per_sample() -> None:
    """Each sample advances the stream twice."""

    rng = SeededRandom(3)
    normal_distribution(rng, 10, 0, 1)
    reference = SeededRandom(3)
    for _ in range(20):
        reference.random()
    assert rng.state == reference.state


def test_js_round_rounds_half_up() -> None:
    """Halves round toward positive infinity, unlike banker's rounding."""

    assert js_round(2.5) == 3
    assert js_round(3.5) == 4
    assert js_round(-2.5) == -2
    assert js_round(1.49) == 1


def test_point_in_polygon_uses_even_odd_rule() -> None:
    """Points inside, outside and inside a concave notch are classified."""

    square = [(0, 0), (10, 0), (10, 10), (0, 10)]
    assert point_in_polygon((5, 5), square) is True
    assert point_in_polygon((15, 5), square) is False

    notch = [(0, 0), (10, 0), (10, 10), (5, 5), (0, 10)]
    assert point_in_polygon((5, 8), notch) is False
    assert point_in_polygon((5, 2), notch) is True
