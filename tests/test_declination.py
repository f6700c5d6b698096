"""Tests for the year-keyed Sun declination table."""

from __future__ import annotations

import pytest

from analemma.declination import DeclinationCache


@pytest.mark.parametrize(("year", "days"), [(2023, 365), (2024, 366), (1900, 365), (2000, 366)])
def test_table_length_follows_leap_rule(ephemeris, year: int, days: int) -> None:
    assert len(DeclinationCache(ephemeris).sun_declination_for_year(year)) == days


def test_repeat_request_is_a_hit(ephemeris) -> None:
    cache = DeclinationCache(ephemeris)
    first = cache.sun_declination_for_year(2025)
    calls = ephemeris.calls
    second = cache.sun_declination_for_year(2025)
    assert second is first
    assert second == first
    assert ephemeris.calls == calls


def test_other_year_replaces_slot(ephemeris) -> None:
    cache = DeclinationCache(ephemeris)
    y2025 = cache.sun_declination_for_year(2025)
    y2024 = cache.sun_declination_for_year(2024)
    assert len(y2024) == 366
    calls = ephemeris.calls
    again = cache.sun_declination_for_year(2025)
    assert ephemeris.calls > calls
    assert again == y2025
    assert again is not y2025


def test_values_span_the_tropics(ephemeris) -> None:
    decs = DeclinationCache(ephemeris).sun_declination_for_year(2025)
    assert max(decs) == pytest.approx(23.44, abs=0.05)
    assert min(decs) == pytest.approx(-23.44, abs=0.05)
    assert decs[0] < -22.5  # Jan 1
    assert abs(decs[78]) < 1.0  # Mar 20
