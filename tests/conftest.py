"""Shared fixtures: a deterministic analytic ephemeris so tests never need a JPL kernel."""

from __future__ import annotations

import math
from datetime import date, datetime

import matplotlib
import pytest
from pytz import utc

from analemma.angles import OBLIQUITY_RAD
from analemma.ephemeris import EphemerisError
from analemma.models import Body, GeocentricVector

matplotlib.use("Agg")

_J2000 = datetime(2000, 1, 1, 12, tzinfo=utc)


def _days_since_j2000(instant: datetime) -> float:
    return (instant - _J2000).total_seconds() / 86400.0


class AnalyticEphemeris:
    """Low-precision solar and lunar theory with GMST as sidereal time.

    Accurate to a few hundredths of a degree for the Sun, which is plenty
    for checking the engine's geometry. Counts every call and can fail or
    return NaN at the UTC noon of selected dates.
    """

    def __init__(
        self,
        fail_on_noon_of: set[date] | None = None,
        nan_on_noon_of: set[date] | None = None,
    ) -> None:
        self.fail_on_noon_of = fail_on_noon_of or set()
        self.nan_on_noon_of = nan_on_noon_of or set()
        self.calls = 0

    @staticmethod
    def _is_noon_of(instant: datetime, dates: set[date]) -> bool:
        return instant.hour == 12 and instant.minute == 0 and instant.date() in dates

    def geocentric_vector(self, body: Body, instant: datetime) -> GeocentricVector:
        self.calls += 1
        if self._is_noon_of(instant, self.fail_on_noon_of):
            raise EphemerisError(f"no data at {instant.isoformat()}")
        if self._is_noon_of(instant, self.nan_on_noon_of):
            return GeocentricVector(x=math.nan, y=math.nan, z=math.nan)

        d = _days_since_j2000(instant)
        t = d / 36525.0
        if body is Body.SUN:
            l0 = 280.46646 + 36000.76983 * t
            m = math.radians(357.52911 + 35999.05029 * t)
            c = (1.914602 - 0.004817 * t) * math.sin(m) + 0.019993 * math.sin(2 * m)
            lam = math.radians(l0 + c)
            r = 1.00014 - 0.01671 * math.cos(m)
            beta = 0.0
        else:
            lp = 218.3164477 + 481267.88123421 * t
            mp = math.radians(134.9633964 + 477198.8675055 * t)
            f = math.radians(93.2720950 + 483202.0175233 * t)
            lam = math.radians(lp + 6.288774 * math.sin(mp))
            beta = math.radians(5.128122 * math.sin(f))
            r = 0.00257

        cos_eps = math.cos(OBLIQUITY_RAD)
        sin_eps = math.sin(OBLIQUITY_RAD)
        xe = math.cos(beta) * math.cos(lam)
        ye = math.cos(beta) * math.sin(lam)
        ze = math.sin(beta)
        return GeocentricVector(
            x=r * xe,
            y=r * (ye * cos_eps - ze * sin_eps),
            z=r * (ye * sin_eps + ze * cos_eps),
        )

    def sidereal_time_hours(self, instant: datetime) -> float:
        self.calls += 1
        d = _days_since_j2000(instant)
        t = d / 36525.0
        theta = 280.46061837 + 360.98564736629 * d + 0.000387933 * t * t
        return (theta % 360.0) / 15.0


@pytest.fixture
def ephemeris() -> AnalyticEphemeris:
    return AnalyticEphemeris()


@pytest.fixture(scope="session")
def ephemeris_factory():
    return AnalyticEphemeris
