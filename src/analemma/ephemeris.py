"""Ephemeris provider boundary: the protocol the engine consumes and a skyfield implementation."""

import logging
from datetime import datetime
from pathlib import Path
from typing import Any, Protocol

from skyfield.api import Loader
from skyfield.errors import EphemerisRangeError
from skyfield.framelib import true_equator_and_equinox_of_date

from analemma.config import get_data_dir, get_ephemeris_name
from analemma.models import Body, GeocentricVector
from analemma.timekeeping import as_utc

logger = logging.getLogger(__name__)

_TARGETS: dict[Body, str] = {
    Body.SUN: "sun",
    Body.MOON: "moon",
}


class EphemerisError(Exception):
    """The provider could not resolve a body/instant."""


class EphemerisProvider(Protocol):
    """What the engine needs from an ephemeris."""

    def geocentric_vector(self, body: Body, instant: datetime) -> GeocentricVector:
        """Apparent geocentric position of body, equatorial-of-date axes."""
        ...

    def sidereal_time_hours(self, instant: datetime) -> float:
        """Greenwich apparent sidereal time in hours."""
        ...


class SkyfieldEphemeris:
    """EphemerisProvider backed by a JPL kernel loaded through skyfield.

    The kernel is opened on first use, so constructing the provider never
    touches the network or the disk.
    """

    def __init__(
        self,
        data_dir: Path | None = None,
        ephemeris_name: str | None = None,
        loader: Any = None,
    ) -> None:
        self._data_dir = data_dir if data_dir is not None else get_data_dir()
        self._ephemeris_name = ephemeris_name or get_ephemeris_name()
        self._loader = loader
        self._eph: Any = None
        self._ts: Any = None

    def load(self) -> None:
        """Open the kernel now (downloading it on first run).

        Raises:
            EphemerisError: The kernel cannot be read or downloaded.
        """
        if self._eph is not None:
            return
        if self._loader is None:
            self._loader = Loader(str(self._data_dir))
        logger.info("Loading ephemeris %s from %s", self._ephemeris_name, self._data_dir)
        try:
            self._ts = self._loader.timescale()
            self._eph = self._loader(self._ephemeris_name)
        except OSError as e:
            raise EphemerisError(f"Cannot load {self._ephemeris_name}: {e}") from e

    def _time(self, instant: datetime) -> Any:
        self.load()
        return self._ts.from_datetime(as_utc(instant))

    def geocentric_vector(self, body: Body, instant: datetime) -> GeocentricVector:
        t = self._time(instant)
        try:
            target = self._eph[_TARGETS[body]]
            earth = self._eph["earth"]
        except KeyError as e:
            raise EphemerisError(f"Body not in {self._ephemeris_name}: {body}") from e
        try:
            apparent = earth.at(t).observe(target).apparent()  # type: ignore[union-attr]
        except EphemerisRangeError as e:
            raise EphemerisError(f"{instant.isoformat()} outside {self._ephemeris_name}") from e
        x, y, z = apparent.frame_xyz(true_equator_and_equinox_of_date).au
        return GeocentricVector(x=float(x), y=float(y), z=float(z))

    def sidereal_time_hours(self, instant: datetime) -> float:
        return float(self._time(instant).gast)
