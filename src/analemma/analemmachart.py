"""CLI entry point for Equation-of-Time chart generation.

    uv run analemma-chart --year 2025
    uv run analemma-chart --year 2025 --html results/eot_2025.html --base-day 45
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path

from dotenv import load_dotenv
from pytz import utc

from analemma.config import get_log_level
from analemma.ephemeris import EphemerisError, SkyfieldEphemeris
from analemma.renderers.plotly_2d import render_contributions_chart
from analemma.renderers.static import save_static_chart
from analemma.series_cache import YearSeriesCache
from analemma.timekeeping import day_of_year, format_abs_min_sec

logger = logging.getLogger(__name__)


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Plot the Equation of Time and its two causes for a year.")
    parser.add_argument("--year", type=int, default=None, help="calendar year (default: current UTC year)")
    parser.add_argument("--output", type=Path, default=None, help="PNG path (default: results/)")
    parser.add_argument("--html", type=Path, default=None, help="also write an interactive plotly chart")
    parser.add_argument("--base-day", type=int, default=None, help="day index to mark on the chart")
    parser.add_argument("-v", "--verbose", action="store_true", help="log at INFO level")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    load_dotenv()
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.INFO if args.verbose else get_log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    now = datetime.now(utc)
    year = args.year if args.year is not None else now.year
    base_day = args.base_day
    if base_day is None and year == now.year:
        base_day = int(day_of_year(now))

    ephemeris = SkyfieldEphemeris()
    try:
        ephemeris.load()
    except EphemerisError as e:
        logger.error("Cannot compute series for %d: %s", year, e)
        return 1
    series = YearSeriesCache(ephemeris).ensure(year)

    contrib = series.contributions
    if contrib.gap_days:
        logger.warning("%d day(s) without ephemeris data: %s", len(contrib.gap_days), contrib.gap_days)

    path = save_static_chart(series, args.output)
    print(f"Saved: {path}")
    if args.html is not None:
        args.html.parent.mkdir(parents=True, exist_ok=True)
        render_contributions_chart(series, base_day).write_html(str(args.html))
        print(f"Saved: {args.html}")

    if base_day is not None:
        idx = max(0, min(contrib.year_days - 1, base_day))
        eot = contrib.combined[idx]
        sign = "ahead of" if eot > 0 else "behind"
        print(f"Day {idx}: sundial {format_abs_min_sec(eot)} {sign} the clock")
    return 0


if __name__ == "__main__":
    sys.exit(main())
