"""Subpoint resolution: where on Earth each body stands overhead at an instant."""

from datetime import datetime, timedelta

from pytz import utc

from analemma.angles import normalize_deg
from analemma.coordinates import (
    longitude_from_ra_and_sidereal_time,
    vector_to_ecliptic_lon_deg,
    vector_to_ra_dec,
)
from analemma.ephemeris import EphemerisProvider
from analemma.models import AnalemmaTrace, Body, Subpoint, SubpointSet
from analemma.timekeeping import DAY, as_utc, utc_day_fraction


def subpoint_from_body(ephemeris: EphemerisProvider, body: Body, instant: datetime) -> Subpoint:
    """Geographic subpoint of body at instant.

    Raises:
        EphemerisError: The provider cannot resolve body/instant. Not retried.
    """
    vec = ephemeris.geocentric_vector(body, instant)
    radec = vector_to_ra_dec(vec)
    gast = ephemeris.sidereal_time_hours(instant)
    lon = longitude_from_ra_and_sidereal_time(radec.ra_hours, gast)
    return Subpoint(lat_deg=radec.dec_deg, lon_deg=lon)


def mean_sun_subpoint(instant: datetime) -> Subpoint:
    """Subpoint of the fictitious mean Sun: on the equator, 360° per 24 h.

    Longitude is 180° at UTC midnight and 0° at UTC noon.
    """
    lon = normalize_deg(180 - utc_day_fraction(instant) * 360)
    return Subpoint(lat_deg=0.0, lon_deg=lon)


def get_subpoints(
    ephemeris: EphemerisProvider, instant: datetime, include_mean: bool = False
) -> SubpointSet:
    return SubpointSet(
        sun=subpoint_from_body(ephemeris, Body.SUN, instant),
        moon=subpoint_from_body(ephemeris, Body.MOON, instant),
        mean_sun=mean_sun_subpoint(instant) if include_mean else None,
    )


def sun_ecliptic_lon_deg(ephemeris: EphemerisProvider, instant: datetime) -> float:
    return vector_to_ecliptic_lon_deg(ephemeris.geocentric_vector(Body.SUN, instant))


def analemma_trace(
    ephemeris: EphemerisProvider, start: datetime, timespan: timedelta
) -> AnalemmaTrace:
    """Sample the real-Sun subpoint once per day, at the same UTC time as start.

    A span shorter than a day still yields two points.
    """
    start = as_utc(start)
    span_days = max(1, round(timespan / DAY))
    points = tuple(
        subpoint_from_body(ephemeris, Body.SUN, start + i * DAY) for i in range(span_days + 1)
    )
    return AnalemmaTrace(start=start, points=points)


def align_mean_real_near_eot_zero(poi_lon_deg: float, year: int) -> datetime:
    """Instant on April 15 of year when the mean Sun stands over poi_lon_deg.

    The Equation of Time is close to zero mid-April, so the real and mean
    Sun nearly coincide at the returned instant.
    """
    day_start = datetime(year, 4, 15, tzinfo=utc)
    frac = ((180 - poi_lon_deg) / 360) % 1
    return day_start + frac * DAY
