from __future__ import annotations

from pytest import approx

from vecmath2d.rng import DeterministicRng
from vecmath2d.vector import Vector2


def test_same_seed_repeats_sequence():
    a = DeterministicRng(5)
    b = DeterministicRng(5)
    assert [a.next_vector(-1.0, 1.0) for _ in range(5)] == [b.next_vector(-1.0, 1.0) for _ in range(5)]


def test_reset_restarts_sequence():
    rng = DeterministicRng(9)
    first = rng.next_vector(0.0, 10.0)
    rng.next_float()
    rng.reset()
    assert rng.next_vector(0.0, 10.0) == first


def test_next_vector_stays_in_range_and_reuses_target():
    rng = DeterministicRng(3)
    target = Vector2()
    for _ in range(100):
        result = rng.next_vector(-2.0, 2.0, target)
        assert result is target
        assert -2.0 <= result.x <= 2.0
        assert -2.0 <= result.y <= 2.0


def test_next_unit_circle_is_unit_length():
    rng = DeterministicRng(4)
    for _ in range(50):
        assert rng.next_unit_circle().norm == approx(1.0)
