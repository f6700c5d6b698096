"""Angle constants and wrap/normalize helpers shared by every computation layer."""

import math

TAU = math.pi * 2
OBLIQUITY_DEG = 23.439291111  # Mean obliquity used for the ecliptic rotation
OBLIQUITY_RAD = math.radians(OBLIQUITY_DEG)
MEAN_DAILY_MOTION_DEG = 360 / 365.25  # Mean ecliptic motion per day
SECONDS_PER_DEGREE = 240.0  # 15°/hour → 1° of longitude is 240 s of time


def wrap360(deg: float) -> float:
    """Wrap an angle in degrees to [0, 360).

    Values already in range are returned unchanged, so the function is
    idempotent. Non-finite input yields NaN.
    """
    if 0.0 <= deg < 360.0:
        return deg
    if not math.isfinite(deg):
        return math.nan
    d = math.fmod(deg, 360.0)
    if d < 0.0:
        d += 360.0
    # -1e-20 + 360 rounds to 360.0
    if d >= 360.0:
        d = 0.0
    return d


def normalize_deg(deg: float) -> float:
    """Normalize an angle in degrees to (-180, 180].

    Values already in range are returned unchanged. Non-finite input yields NaN.
    """
    if -180.0 < deg <= 180.0:
        return deg
    if not math.isfinite(deg):
        return math.nan
    d = math.fmod(deg, 360.0)
    if d > 180.0:
        d -= 360.0
    elif d <= -180.0:
        d += 360.0
    return d


def wrap_tau(rad: float) -> float:
    """Wrap an angle in radians to [0, 2π)."""
    return ((rad % TAU) + TAU) % TAU


def signed_angle_rad(rad: float) -> float:
    """Signed angle in radians in [-π, π), for differences between two headings."""
    return ((rad + math.pi) % TAU) - math.pi
