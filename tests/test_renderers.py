"""Tests for the plotly and matplotlib renderers."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

import pytest
from pytz import utc

from analemma.models import AnalemmaTrace, Subpoint
from analemma.renderers.plotly_2d import (
    render_analemma_trace,
    render_contributions_chart,
    render_orbit_speed_chart,
)
from analemma.renderers.static import render_static_chart, save_static_chart
from analemma.series_cache import YearSeriesCache


@pytest.fixture
def year_series(ephemeris):
    return YearSeriesCache(ephemeris).ensure(2025, 40)


def test_contributions_chart_in_minutes(year_series) -> None:
    fig = render_contributions_chart(year_series)
    assert len(fig.data) == 3
    assert [t.name for t in fig.data] == ["eccentricity", "obliquity", "equation of time"]
    combined = year_series.combined_series
    assert list(fig.data[2].y) == pytest.approx([v / 60 for v in combined.values])
    low, high = fig.layout.yaxis.range
    assert low == pytest.approx(-high)
    assert high >= year_series.contributions.max_abs_seconds / 60
    assert len(fig.layout.shapes) == 1
    assert fig.layout.shapes[0].y0 == 0


def test_contributions_chart_marks_base_day(year_series) -> None:
    fig = render_contributions_chart(year_series, base_day=500)
    assert len(fig.data) == 4
    marker = fig.data[3]
    assert list(marker.x) == [39]
    assert marker.y[0] == pytest.approx(year_series.combined_series[39] / 60)


def test_orbit_speed_chart(year_series) -> None:
    speed = year_series.orbit_speed
    fig = render_orbit_speed_chart(speed, base_day=3)
    assert len(fig.data) == 2
    assert len(fig.data[0].y) == 40
    assert fig.data[1].y[0] == pytest.approx(speed.angles[3])
    assert fig.layout.shapes[0].y0 == pytest.approx(speed.mean_extra_deg)


def test_orbit_speed_marker_clamps_to_last_day(year_series) -> None:
    speed = year_series.orbit_speed
    late = render_orbit_speed_chart(speed, base_day=500)
    early = render_orbit_speed_chart(speed, base_day=-7)
    assert list(late.data[1].x) == [39]
    assert late.data[1].y[0] == pytest.approx(speed.angles[39])
    assert list(early.data[1].x) == [0]


def test_analemma_trace_draws_visible_prefix() -> None:
    points = tuple(Subpoint(lat_deg=float(i), lon_deg=-float(i)) for i in range(10))
    trace = AnalemmaTrace(start=datetime(2025, 1, 1, tzinfo=utc), points=points)
    full = render_analemma_trace(trace)
    partial = render_analemma_trace(trace, visible_count=4)
    assert len(full.data[0].x) == 10
    assert list(partial.data[0].y) == [0.0, 1.0, 2.0, 3.0]
    assert list(partial.data[0].x) == [0.0, -1.0, -2.0, -3.0]


def test_static_chart_has_two_panels(year_series) -> None:
    import matplotlib.pyplot as plt

    fig = render_static_chart(year_series, chart_size=6)
    assert len(fig.axes) == 2
    assert len(fig.axes[0].lines) == 4
    plt.close(fig)


def test_save_static_chart(year_series, tmp_path: Path) -> None:
    out = tmp_path / "charts" / "eot.png"
    path = save_static_chart(year_series, out)
    assert path == out
    assert out.exists()
    assert out.stat().st_size > 0
