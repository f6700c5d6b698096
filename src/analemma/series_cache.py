"""Year-keyed cache of the chart series so repeated redraws skip recomputation."""

import logging
import threading
from collections import OrderedDict

from analemma.config import get_series_cache_size
from analemma.ephemeris import EphemerisProvider
from analemma.equation_of_time import compute_compression_series, compute_contribution_series
from analemma.kepler import compute_orbit_speed_series
from analemma.models import YearSeries
from analemma.timekeeping import days_in_year

logger = logging.getLogger(__name__)


class YearSeriesCache:
    """Holds the series of the most recently requested (year, year_days) keys.

    Entries are built completely before they are installed and never
    modified afterwards, so a caller holding an older YearSeries keeps a
    consistent snapshot after the slot is replaced.
    """

    def __init__(self, ephemeris: EphemerisProvider, capacity: int | None = None) -> None:
        self._ephemeris = ephemeris
        self._capacity = max(1, capacity if capacity is not None else get_series_cache_size())
        self._entries: OrderedDict[tuple[int, int], YearSeries] = OrderedDict()
        self._lock = threading.Lock()
        self.hits = 0
        self.misses = 0

    @property
    def capacity(self) -> int:
        return self._capacity

    def __contains__(self, key: tuple[int, int]) -> bool:
        return key in self._entries

    def ensure(self, year: int, year_days: int | None = None) -> YearSeries:
        """Return the series for (year, year_days), computing them on a miss.

        Args:
            year: Calendar year.
            year_days: Days to compute; defaults to the Gregorian length of year.
        """
        if year_days is None:
            year_days = days_in_year(year)
        key = (year, year_days)
        with self._lock:
            entry = self._entries.get(key)
            if entry is not None:
                self._entries.move_to_end(key)
                self.hits += 1
                return entry

        logger.info("Series cache miss for year %d (%d days), recomputing", year, year_days)
        entry = YearSeries(
            year=year,
            year_days=year_days,
            orbit_speed=compute_orbit_speed_series(year_days),
            compression=compute_compression_series(self._ephemeris, year, year_days),
            contributions=compute_contribution_series(self._ephemeris, year, year_days),
        )
        with self._lock:
            self.misses += 1
            self._entries[key] = entry
            self._entries.move_to_end(key)
            while len(self._entries) > self._capacity:
                evicted, _ = self._entries.popitem(last=False)
                logger.debug("Evicted series for %s", evicted)
        return entry


def ensure_series_cache(cache: YearSeriesCache, year: int, year_days: int | None = None) -> YearSeries:
    return cache.ensure(year, year_days)
