"""Day/night length from latitude and a body's declination (hour-angle method)."""

import math

from analemma.models import DaylightSplit, PointDurations, Subpoint

STANDARD_ALTITUDE_DEG = -0.833  # Refraction plus solar semi-diameter
POLAR_LIMIT_DEG = 89.9999

_POLAR_DAY = DaylightSplit(day=24.0, night=0.0)
_POLAR_NIGHT = DaylightSplit(day=0.0, night=24.0)


def _clamp(value: float, lo: float, hi: float) -> float:
    return min(hi, max(lo, value))


def daylight_hours_at_altitude(lat_deg: float, dec_deg: float, alt_deg: float) -> DaylightSplit:
    """Hours per day a body at declination dec_deg stays above alt_deg at latitude lat_deg.

    At a pole (or for a body at a celestial pole) the body's altitude does
    not change over the day, so the answer is all day or all night. NaN
    latitude or declination gives a NaN split.
    """
    if not (math.isfinite(lat_deg) and math.isfinite(dec_deg)):
        return DaylightSplit(day=math.nan, night=math.nan)
    lat_deg = _clamp(lat_deg, -90, 90)
    dec_deg = _clamp(dec_deg, -90, 90)
    lat = math.radians(lat_deg)
    dec = math.radians(dec_deg)
    alt0 = math.radians(alt_deg)

    if abs(lat_deg) >= POLAR_LIMIT_DEG or abs(dec_deg) >= POLAR_LIMIT_DEG:
        altitude = math.asin(_clamp(math.sin(lat) * math.sin(dec), -1.0, 1.0))
        return _POLAR_DAY if altitude > alt0 else _POLAR_NIGHT

    cos_h0 = (math.sin(alt0) - math.sin(lat) * math.sin(dec)) / (math.cos(lat) * math.cos(dec))
    if cos_h0 >= 1:
        return _POLAR_NIGHT
    if cos_h0 <= -1:
        return _POLAR_DAY
    day = 24 * math.acos(cos_h0) / math.pi
    return DaylightSplit(day=day, night=24 - day)


def daylight_hours(lat_deg: float, dec_deg: float) -> DaylightSplit:
    return daylight_hours_at_altitude(lat_deg, dec_deg, STANDARD_ALTITUDE_DEG)


def durations_for_point(
    lat_deg: float, sun: Subpoint, moon: Subpoint | None = None
) -> PointDurations:
    """Day/night split at lat_deg for the Sun, and Moon-up time when moon is given.

    A subpoint's latitude is the body's declination.
    """
    return PointDurations(
        lat_deg=lat_deg,
        sun=daylight_hours(lat_deg, sun.lat_deg),
        moon=daylight_hours(lat_deg, moon.lat_deg) if moon is not None else None,
    )
