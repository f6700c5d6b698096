"""Configuration: ephemeris data location, cache size and log level from environment."""

import logging
import os
from pathlib import Path

_ROOT = Path(__file__).parent.parent.parent

DEFAULT_EPHEMERIS = "de421.bsp"
DEFAULT_SERIES_CACHE_SIZE = 1
DEFAULT_LOG_LEVEL = "WARNING"


def get_data_dir() -> Path:
    """Return the directory skyfield downloads kernels into.

    ANALEMMA_DATA_DIR env var, or resources/ at the repository root.
    """
    value = os.environ.get("ANALEMMA_DATA_DIR", "").strip()
    if value:
        return Path(value).expanduser()
    return _ROOT / "resources"


def get_ephemeris_name() -> str:
    """Return the JPL kernel file name (ANALEMMA_EPHEMERIS env var or de421.bsp)."""
    return os.environ.get("ANALEMMA_EPHEMERIS", "").strip() or DEFAULT_EPHEMERIS


def get_series_cache_size() -> int:
    """Return how many years the series cache keeps resident (at least 1).

    Unparseable values fall back to the default.
    """
    raw = os.environ.get("ANALEMMA_SERIES_CACHE_SIZE", "").strip()
    if not raw:
        return DEFAULT_SERIES_CACHE_SIZE
    try:
        return max(1, int(raw))
    except ValueError:
        return DEFAULT_SERIES_CACHE_SIZE


def get_log_level() -> int:
    """Return the logging level named by ANALEMMA_LOG_LEVEL (default WARNING)."""
    name = os.environ.get("ANALEMMA_LOG_LEVEL", "").strip().upper() or DEFAULT_LOG_LEVEL
    level = logging.getLevelName(name)
    if isinstance(level, int):
        return level
    return logging.WARNING
