"""Data model definitions: explicit boundaries between ephemeris, compute, and render layers."""

import math
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class Body(Enum):
    """Bodies the ephemeris provider must resolve."""

    SUN = "sun"
    MOON = "moon"


@dataclass(frozen=True)
class GeocentricVector:
    """Geocentric position in equatorial-of-date Cartesian coordinates."""

    x: float  # AU, towards the equinox of date
    y: float  # AU
    z: float  # AU, towards the celestial north pole


@dataclass(frozen=True)
class RaDec:
    ra_hours: float  # Right ascension, [0, 24)
    dec_deg: float  # Declination (degrees)


@dataclass(frozen=True)
class Subpoint:
    """Geographic point directly beneath a body."""

    lat_deg: float  # [-90, 90]
    lon_deg: float  # (-180, 180], east positive


@dataclass(frozen=True)
class SubpointSet:
    """Subpoints of every tracked body for one instant."""

    sun: Subpoint
    moon: Subpoint
    mean_sun: Subpoint | None  # Only when requested


@dataclass(frozen=True)
class KeplerOrbitState:
    """Position on the synthetic fixed-eccentricity orbit for one mean anomaly."""

    true_anomaly_rad: float
    radius_au: float  # Semi-major axis is 1
    speed_factor: float  # sqrt(2/r - 1); shape only, not calibrated
    x: float  # Orbit-plane x, Sun at origin, perihelion on +x
    y: float  # Orbit-plane y


@dataclass(frozen=True)
class DailySeries:
    """One value per calendar day plus the summary used for chart scaling."""

    values: tuple[float, ...]
    min_value: float
    max_value: float

    @classmethod
    def from_values(cls, values: Iterable[float]) -> "DailySeries":
        vals = tuple(float(v) for v in values)
        finite = [v for v in vals if math.isfinite(v)]
        if not finite:
            return cls(values=vals, min_value=math.nan, max_value=math.nan)
        return cls(values=vals, min_value=min(finite), max_value=max(finite))

    @property
    def max_abs(self) -> float:
        return max(abs(self.min_value), abs(self.max_value))

    def __len__(self) -> int:
        return len(self.values)

    def __getitem__(self, index: int) -> float:
        return self.values[index]

    def __iter__(self) -> Iterator[float]:
        return iter(self.values)


@dataclass(frozen=True)
class OrbitSpeedSeries:
    """Synthetic Kepler Sun: angular advance per sidereal day, in degrees."""

    angles: DailySeries
    mean_extra_deg: float  # Uniform-motion reference (360 / 365.25)


@dataclass(frozen=True)
class EquationOfTimeSeries:
    """Accumulated Equation-of-Time contributions for one year, in seconds."""

    year: int
    year_days: int
    eccentricity: DailySeries
    obliquity: DailySeries  # Anchored at -180 s on day 0
    combined: DailySeries  # Anchored at the directly computed EoT on day 0
    max_abs_seconds: float  # Largest |value| across the three series, floor 0.5
    gap_days: tuple[int, ...]  # Days whose contribution was zeroed (ephemeris gap)


@dataclass(frozen=True)
class YearSeries:
    """Everything the charts need for one (year, year_days) key."""

    year: int
    year_days: int
    orbit_speed: OrbitSpeedSeries  # Eccentricity geometry
    compression: DailySeries  # Obliquity geometry, deg RA per deg ecliptic longitude
    contributions: EquationOfTimeSeries

    @property
    def eccentricity_series(self) -> DailySeries:
        return self.contributions.eccentricity

    @property
    def obliquity_series(self) -> DailySeries:
        return self.contributions.obliquity

    @property
    def combined_series(self) -> DailySeries:
        return self.contributions.combined


@dataclass(frozen=True)
class DaylightSplit:
    day: float  # Hours the body is above the altitude threshold
    night: float  # 24 - day


@dataclass(frozen=True)
class PointDurations:
    """Day/night split at a point for the current Sun (and Moon) subpoints."""

    lat_deg: float
    sun: DaylightSplit
    moon: DaylightSplit | None  # moon.day is "Moon up" time


@dataclass(frozen=True)
class AnalemmaTrace:
    """Real-Sun subpoints sampled once per UTC day from start."""

    start: datetime
    points: tuple[Subpoint, ...]

    def visible_count(self, current: datetime) -> int:
        """Number of points to draw when the animation clock reads current."""
        idx = round((current - self.start).total_seconds() / 86400)
        return max(0, min(len(self.points), idx + 1))


@dataclass(frozen=True)
class PointMetrics:
    """Great-circle relation between two points on the reference sphere."""

    distance_km: float
    bearing_deg: float  # Initial heading from the first point, [0, 360)
