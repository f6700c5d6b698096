"""Equation-of-Time decomposition: why clock noon and solar noon drift apart over a year.

For every day the real Sun and the mean Sun are compared across one
sidereal day. The eccentricity effect is the real Sun's ecliptic motion
minus the mean rate. The obliquity effect is the gap between its
geographic and ecliptic motion. Mean-minus-real geographic motion is the
daily change of the Equation of Time itself. Summing the daily values gives
each curve up to a constant, which is pinned by an anchor value on day 0.
"""

import logging
import math
from collections.abc import Iterable
from datetime import datetime

from analemma.angles import MEAN_DAILY_MOTION_DEG, SECONDS_PER_DEGREE, normalize_deg
from analemma.coordinates import lon_compression_for_lambda
from analemma.ephemeris import EphemerisError, EphemerisProvider
from analemma.models import Body, DailySeries, EquationOfTimeSeries, Subpoint
from analemma.subpoints import mean_sun_subpoint, subpoint_from_body, sun_ecliptic_lon_deg
from analemma.timekeeping import SIDEREAL_DAY, utc_noon

logger = logging.getLogger(__name__)

OBLIQUITY_ANCHOR_SECONDS = -180.0  # Day-0 value of the accumulated obliquity curve
MIN_SCALE_SECONDS = 0.5


def equation_of_time_seconds(real_sun: Subpoint, mean_sun: Subpoint) -> float:
    """Mean-minus-real Sun longitude expressed as seconds of time.

    Negative when the real Sun lags (sundial slow), positive when it leads.
    """
    return normalize_deg(mean_sun.lon_deg - real_sun.lon_deg) * SECONDS_PER_DEGREE


def _accumulate(values: Iterable[float]) -> list[float]:
    acc = []
    total = 0.0
    for value in values:
        total += value if math.isfinite(value) else 0.0
        acc.append(total)
    return acc


def _finite(*values: float) -> bool:
    return all(math.isfinite(v) for v in values)


def _daily_contributions(
    ephemeris: EphemerisProvider, t0: datetime
) -> tuple[float, float, float, float]:
    """Raw (eccentricity, obliquity, combined, eot_at_t0) seconds for the day starting at t0.

    Raises:
        EphemerisError: A lookup failed or produced non-finite angles.
    """
    t1 = t0 + SIDEREAL_DAY
    sun0 = subpoint_from_body(ephemeris, Body.SUN, t0)
    sun1 = subpoint_from_body(ephemeris, Body.SUN, t1)
    mean0 = mean_sun_subpoint(t0)
    mean1 = mean_sun_subpoint(t1)
    lambda0 = sun_ecliptic_lon_deg(ephemeris, t0)
    lambda1 = sun_ecliptic_lon_deg(ephemeris, t1)
    if not _finite(sun0.lon_deg, sun1.lon_deg, lambda0, lambda1):
        raise EphemerisError(f"Non-finite Sun position near {t0.isoformat()}")

    delta_lambda = normalize_deg(lambda1 - lambda0)
    real_delta_lon = normalize_deg(sun1.lon_deg - sun0.lon_deg)
    mean_delta_lon = normalize_deg(mean1.lon_deg - mean0.lon_deg)

    eccentricity = (delta_lambda - MEAN_DAILY_MOTION_DEG) * SECONDS_PER_DEGREE
    obliquity = (real_delta_lon - delta_lambda) * SECONDS_PER_DEGREE
    combined = (mean_delta_lon - real_delta_lon) * SECONDS_PER_DEGREE
    return eccentricity, obliquity, combined, equation_of_time_seconds(sun0, mean0)


def compute_contribution_series(
    ephemeris: EphemerisProvider, year: int, year_days: int
) -> EquationOfTimeSeries:
    """Accumulated eccentricity, obliquity and combined curves for year.

    A day whose ephemeris lookups fail contributes 0 to all three curves
    so every series keeps year_days entries; such days are listed in
    ``gap_days``.
    """
    ecc_seconds: list[float] = []
    obliq_seconds: list[float] = []
    combined_seconds: list[float] = []
    gap_days: list[int] = []
    eot_day0: float | None = None

    for i in range(year_days):
        t0 = utc_noon(year, i)
        try:
            ecc, obliq, combined, eot = _daily_contributions(ephemeris, t0)
        except EphemerisError as e:
            logger.warning("Ephemeris gap on day %d of year %d, contribution set to 0: %s", i, year, e)
            gap_days.append(i)
            ecc, obliq, combined = 0.0, 0.0, 0.0
        else:
            if i == 0:
                eot_day0 = eot
        ecc_seconds.append(ecc)
        obliq_seconds.append(obliq)
        combined_seconds.append(combined)

    ecc_accum = _accumulate(ecc_seconds)

    obliq_accum = _accumulate(obliq_seconds)
    obliq_offset = OBLIQUITY_ANCHOR_SECONDS - obliq_accum[0] if obliq_accum else 0.0
    obliq_adjusted = [v + obliq_offset for v in obliq_accum]

    combined_accum = _accumulate(combined_seconds)
    offset = eot_day0 - combined_accum[0] if eot_day0 is not None else 0.0
    combined_adjusted = [v + offset for v in combined_accum]

    eccentricity = DailySeries.from_values(ecc_accum)
    obliquity = DailySeries.from_values(obliq_adjusted)
    combined = DailySeries.from_values(combined_adjusted)
    max_abs = max(
        (abs(v) for v in (*ecc_accum, *obliq_adjusted, *combined_adjusted)),
        default=0.0,
    )
    return EquationOfTimeSeries(
        year=year,
        year_days=year_days,
        eccentricity=eccentricity,
        obliquity=obliquity,
        combined=combined,
        max_abs_seconds=max(max_abs, MIN_SCALE_SECONDS),
        gap_days=tuple(gap_days),
    )


def compute_compression_series(
    ephemeris: EphemerisProvider, year: int, year_days: int
) -> DailySeries:
    """Right-ascension sweep per degree of ecliptic longitude at each UTC noon.

    Days the ephemeris cannot resolve are NaN; min/max skip them.
    """
    factors = []
    for i in range(year_days):
        try:
            lam = sun_ecliptic_lon_deg(ephemeris, utc_noon(year, i))
        except EphemerisError as e:
            logger.warning("Ephemeris gap on day %d of year %d, no compression factor: %s", i, year, e)
            lam = math.nan
        factors.append(lon_compression_for_lambda(lam))
    return DailySeries.from_values(factors)
