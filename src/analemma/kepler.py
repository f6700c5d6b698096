"""Synthetic fixed-eccentricity Kepler orbit for the illustrative orbit and speed diagrams.

Not an ephemeris: real subpoints always come from the ephemeris provider.
"""

import math

from analemma.angles import MEAN_DAILY_MOTION_DEG, TAU, signed_angle_rad
from analemma.models import DailySeries, KeplerOrbitState, OrbitSpeedSeries
from analemma.timekeeping import SIDEREAL_DAYS

ORBIT_E = 0.0167
ORBIT_A = 1.0
KEPLER_ITERATIONS = 6


def solve_kepler(mean_anomaly: float, eccentricity: float) -> float:
    """Eccentric anomaly for a mean anomaly, by a fixed six Newton-Raphson steps.

    No convergence check: for e = 0.0167 six steps from E = M leave a
    residual far below a microradian.
    """
    e_anom = mean_anomaly
    for _ in range(KEPLER_ITERATIONS):
        f = e_anom - eccentricity * math.sin(e_anom) - mean_anomaly
        f_prime = 1 - eccentricity * math.cos(e_anom)
        e_anom -= f / (f_prime or 1.0)
    return e_anom


def solve_kepler_converged(
    mean_anomaly: float,
    eccentricity: float,
    tolerance: float = 1e-12,
    max_iterations: int = 50,
) -> tuple[float, bool]:
    """Newton-Raphson until the step falls below tolerance.

    Returns:
        (eccentric anomaly, whether the tolerance was reached within max_iterations).
    """
    e_anom = mean_anomaly if eccentricity < 0.8 else math.pi
    for _ in range(max_iterations):
        f = e_anom - eccentricity * math.sin(e_anom) - mean_anomaly
        f_prime = 1 - eccentricity * math.cos(e_anom)
        step = f / (f_prime or 1.0)
        e_anom -= step
        if abs(step) < tolerance:
            return e_anom, True
    return e_anom, False


def orbit_state_for_day(
    day: float, year_days: int, eccentricity: float = ORBIT_E
) -> KeplerOrbitState:
    mean_anomaly = TAU * (day / year_days)
    e_anom = solve_kepler(mean_anomaly, eccentricity)
    cos_e = math.cos(e_anom)
    sin_e = math.sin(e_anom)
    r = ORBIT_A * (1 - eccentricity * cos_e)
    f = math.atan2(math.sqrt(1 - eccentricity * eccentricity) * sin_e, cos_e - eccentricity)
    return KeplerOrbitState(
        true_anomaly_rad=f,
        radius_au=r,
        speed_factor=math.sqrt(max(0.0, 2 / r - 1)),
        x=r * math.cos(f),
        y=r * math.sin(f),
    )


def sun_angle_for_day(day: float, year_days: int) -> float:
    """Direction of the Sun as seen from the orbiting Earth (radians)."""
    state = orbit_state_for_day(day, year_days)
    return math.atan2(-state.y, -state.x)


def compute_orbit_speed_series(year_days: int) -> OrbitSpeedSeries:
    """Degrees the synthetic Sun advances during one sidereal day, for every day."""
    angles = []
    for i in range(year_days):
        sun0 = sun_angle_for_day(i, year_days)
        sun1 = sun_angle_for_day(i + SIDEREAL_DAYS, year_days)
        angles.append(math.degrees(signed_angle_rad(sun1 - sun0)))
    return OrbitSpeedSeries(
        angles=DailySeries.from_values(angles),
        mean_extra_deg=MEAN_DAILY_MOTION_DEG,
    )
