"""UTC calendar arithmetic and display formatting.

All instants are timezone-aware UTC datetimes. Naive datetimes are
interpreted as UTC, the same way the rest of the package treats user input.
"""

import math
import re
from datetime import datetime, timedelta

from pytz import utc

SIDEREAL_DAY = timedelta(milliseconds=86_164_000)  # 23h56m4s
DAY = timedelta(days=1)
SIDEREAL_DAYS = SIDEREAL_DAY / DAY  # sidereal day as a fraction of a solar day

_UTC_PATTERN = re.compile(r"^(\d{4})-(\d{2})-(\d{2})[T ](\d{2}):(\d{2})$")


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return year % 4 == 0 and (year % 100 != 0 or year % 400 == 0)


def days_in_year(year: int) -> int:
    return 366 if is_leap_year(year) else 365


def as_utc(instant: datetime) -> datetime:
    """Return instant as an aware UTC datetime (naive input is taken as UTC)."""
    if instant.tzinfo is None:
        return utc.localize(instant)
    return instant.astimezone(utc)


def utc_noon(year: int, day_index: int) -> datetime:
    """UTC noon of the given zero-based day of year.

    Day indices past the end of the year roll into the next year, like
    ``Date.UTC(year, 0, 1 + day)``.
    """
    return datetime(year, 1, 1, 12, tzinfo=utc) + timedelta(days=day_index)


def utc_day_start(instant: datetime) -> datetime:
    """Midnight UTC of the calendar day containing instant."""
    instant = as_utc(instant)
    return datetime(instant.year, instant.month, instant.day, tzinfo=utc)


def utc_day_fraction(instant: datetime) -> float:
    """Fraction of the UTC day elapsed at instant, in [0, 1)."""
    return (as_utc(instant) - utc_day_start(instant)) / DAY


def day_of_year(instant: datetime) -> float:
    """Fractional zero-based day of year (Jan 1 00:00 UTC is 0.0)."""
    instant = as_utc(instant)
    start = datetime(instant.year, 1, 1, tzinfo=utc)
    return (instant - start) / DAY


def clamp_day_index(day: float, year_days: int) -> int:
    """Round a fractional day and clamp it into [0, year_days)."""
    return max(0, min(year_days - 1, round(day)))


def parse_utc(text: str | None) -> datetime | None:
    """Parse "YYYY-MM-DD HH:MM" (or with a "T" separator) as a UTC instant.

    Returns None for empty or malformed input.
    """
    if not text:
        return None
    match = _UTC_PATTERN.match(text.strip())
    if match is None:
        return None
    year, month, day, hour, minute = (int(g) for g in match.groups())
    try:
        return datetime(year, month, day, hour, minute, tzinfo=utc)
    except ValueError:
        return None


def format_utc(instant: datetime) -> str:
    return as_utc(instant).strftime("%Y-%m-%dT%H:%M")


def format_abs_min_sec(seconds: float) -> str:
    """Format |seconds| as "Mm SSs" (e.g. 125.4 → "2m 05s")."""
    total = round(abs(seconds))
    return f"{total // 60}m {total % 60:02d}s"


def format_next_noon_label(delta_seconds: float) -> str:
    """Describe how tomorrow's solar noon moves relative to today's.

    Positive deltas mean solar noon arrives earlier on the clock.
    """
    if abs(delta_seconds) < 0.5:
        return "unchanged"
    value = format_abs_min_sec(delta_seconds)
    if delta_seconds > 0:
        return f"{value} earlier"
    return f"{value} later"


def format_hours(hours: float) -> str:
    """Format a duration in hours as "Hh MMm", carrying 60 minutes into the hour."""
    h = math.floor(hours)
    m = round((hours - h) * 60)
    if m == 60:
        h += 1
        m = 0
    return f"{h}h {m:02d}m"
