"""Conversions from ephemeris vectors to equatorial, ecliptic and geographic angles."""

import math

from analemma.angles import OBLIQUITY_RAD, normalize_deg, wrap360, wrap_tau
from analemma.models import GeocentricVector, RaDec

_COS_EPS = math.cos(OBLIQUITY_RAD)
_SIN_EPS = math.sin(OBLIQUITY_RAD)


def vector_to_ra_dec(vec: GeocentricVector) -> RaDec:
    """Right ascension (hours) and declination (degrees) of a geocentric vector.

    NaN components propagate; callers validate the vector.
    """
    ra = wrap_tau(math.atan2(vec.y, vec.x))
    dec = math.atan2(vec.z, math.hypot(vec.x, vec.y))
    return RaDec(ra_hours=ra * 12 / math.pi, dec_deg=math.degrees(dec))


def vector_to_ecliptic_lon_deg(vec: GeocentricVector) -> float:
    """Ecliptic longitude in [0, 360) using the fixed mean obliquity."""
    y = vec.y * _COS_EPS + vec.z * _SIN_EPS
    return wrap360(math.degrees(math.atan2(y, vec.x)))


def longitude_from_ra_and_sidereal_time(ra_hours: float, sidereal_hours: float) -> float:
    """Geographic longitude of the meridian where the body transits, (-180, 180]."""
    return normalize_deg((ra_hours - sidereal_hours) * 15)


def lon_compression_for_lambda(lambda_deg: float) -> float:
    """Degrees of right ascension swept by a 1° ecliptic step starting at lambda_deg.

    Below 1 near the equinoxes (motion is partly northward), above 1 near
    the solstices.
    """
    l0 = math.radians(lambda_deg)
    l1 = math.radians(lambda_deg + 1)
    ra0 = wrap360(math.degrees(math.atan2(math.sin(l0) * _COS_EPS, math.cos(l0))))
    ra1 = wrap360(math.degrees(math.atan2(math.sin(l1) * _COS_EPS, math.cos(l1))))
    return abs(normalize_deg(ra1 - ra0))
