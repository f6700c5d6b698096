"""Tests for angle wrap/normalize helpers."""

from __future__ import annotations

import math

import pytest

from analemma.angles import normalize_deg, signed_angle_rad, wrap360, wrap_tau

SAMPLES = [
    0.0, 1e-20, -1e-20, 0.5, -0.5, 179.999, 180.0, -180.0, 180.0001, -180.0001,
    359.9999999, 360.0, -360.0, 540.0, -540.0, 720.25, -725.5, 1e9 + 0.3, -1e9 - 0.7,
]


@pytest.mark.parametrize("x", SAMPLES)
def test_wrap360_range_and_idempotent(x: float) -> None:
    w = wrap360(x)
    assert 0.0 <= w < 360.0
    assert wrap360(w) == w


@pytest.mark.parametrize("x", SAMPLES)
def test_normalize_deg_range_and_idempotent(x: float) -> None:
    n = normalize_deg(x)
    assert -180.0 < n <= 180.0
    assert normalize_deg(n) == n


def test_normalize_deg_boundaries() -> None:
    assert normalize_deg(180.0) == 180.0
    assert normalize_deg(-180.0) == 180.0
    assert normalize_deg(540.0) == 180.0
    assert normalize_deg(190.0) == pytest.approx(-170.0)
    assert normalize_deg(-190.0) == pytest.approx(170.0)


def test_wrap360_known_values() -> None:
    assert wrap360(-90.0) == 270.0
    assert wrap360(360.0) == 0.0
    assert wrap360(725.0) == pytest.approx(5.0)


def test_non_finite_yields_nan() -> None:
    for fn in (wrap360, normalize_deg):
        assert math.isnan(fn(math.nan))
        assert math.isnan(fn(math.inf))
        assert math.isnan(fn(-math.inf))


def test_radian_helpers() -> None:
    assert wrap_tau(-math.pi / 2) == pytest.approx(3 * math.pi / 2)
    assert 0.0 <= wrap_tau(10 * math.pi + 0.1) < 2 * math.pi
    assert signed_angle_rad(2 * math.pi - 0.01) == pytest.approx(-0.01)
    assert signed_angle_rad(0.01) == pytest.approx(0.01)
