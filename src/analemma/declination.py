"""Per-day real-Sun declination for a whole year, kept in a single year-keyed slot."""

import logging
import threading

from analemma.ephemeris import EphemerisProvider
from analemma.models import Body
from analemma.subpoints import subpoint_from_body
from analemma.timekeeping import days_in_year, utc_noon

logger = logging.getLogger(__name__)


class DeclinationCache:
    """Holds one year of noon declinations; asking for another year replaces it."""

    def __init__(self, ephemeris: EphemerisProvider) -> None:
        self._ephemeris = ephemeris
        self._lock = threading.Lock()
        self._slot: tuple[int, tuple[float, ...]] | None = None

    def sun_declination_for_year(self, year: int) -> tuple[float, ...]:
        """Declination (degrees) at UTC noon of every day of year.

        A repeated request for the resident year returns the same tuple
        without calling the ephemeris.
        """
        slot = self._slot
        if slot is not None and slot[0] == year:
            return slot[1]

        days = days_in_year(year)
        logger.info("Computing Sun declination table for %d (%d days)", year, days)
        decs = tuple(
            subpoint_from_body(self._ephemeris, Body.SUN, utc_noon(year, i)).lat_deg
            for i in range(days)
        )
        with self._lock:
            self._slot = (year, decs)
        return decs
