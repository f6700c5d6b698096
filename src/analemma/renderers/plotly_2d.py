"""Plotly interactive charts for the Equation-of-Time series and the analemma trace.

Figures carry data and layout only; the host decides how to display them.
"""

import numpy as np
import plotly.graph_objects as go

from analemma.models import AnalemmaTrace, OrbitSpeedSeries, YearSeries
from analemma.timekeeping import clamp_day_index

_BG = "#050a1a"
_AXIS_COLOR = "rgba(150,200,255,0.65)"
_ECC_COLOR = "#78c8ff"
_OBLIQ_COLOR = "#ff9f55"
_COMBINED_COLOR = "#ffd655"
_MARKER_COLOR = "rgba(255,255,255,0.9)"


def _base_layout(fig: go.Figure, y_title: str) -> None:
    fig.update_layout(
        paper_bgcolor=_BG,
        plot_bgcolor=_BG,
        font=dict(color="#ebf5ff", size=12),
        margin=dict(l=50, r=20, t=20, b=40),
        legend=dict(orientation="h", y=1.08, x=0),
        xaxis=dict(title="day of year", color=_AXIS_COLOR, showgrid=False, zeroline=False),
        yaxis=dict(title=y_title, color=_AXIS_COLOR, gridcolor="rgba(255,255,255,0.08)"),
    )


def render_contributions_chart(year_series: YearSeries, base_day: int | None = None) -> go.Figure:
    """Accumulated eccentricity, obliquity and combined curves, in minutes.

    Args:
        year_series: Cached series for one year.
        base_day: Day index to mark on the combined curve, or None.

    Returns:
        Plotly Figure object.
    """
    contrib = year_series.contributions
    days = np.arange(contrib.year_days)
    traces = []
    for name, series, color in (
        ("eccentricity", contrib.eccentricity, _ECC_COLOR),
        ("obliquity", contrib.obliquity, _OBLIQ_COLOR),
        ("equation of time", contrib.combined, _COMBINED_COLOR),
    ):
        traces.append(
            go.Scatter(
                x=days,
                y=np.asarray(series.values) / 60,
                mode="lines",
                line=dict(color=color, width=2),
                name=name,
                hovertemplate="day %{x}: %{y:.2f} min<extra></extra>",
            )
        )

    if base_day is not None:
        idx = clamp_day_index(base_day, contrib.year_days)
        traces.append(
            go.Scatter(
                x=[idx],
                y=[contrib.combined[idx] / 60],
                mode="markers",
                marker=dict(size=8, color=_MARKER_COLOR),
                hoverinfo="skip",
                showlegend=False,
                name="today",
            )
        )

    fig = go.Figure(data=traces)
    _base_layout(fig, "minutes")
    # Symmetric range so the zero line sits mid-chart
    limit = contrib.max_abs_seconds / 60 * 1.05
    fig.update_yaxes(range=[-limit, limit])
    fig.add_hline(y=0, line=dict(color="rgba(235,245,255,0.35)", width=1, dash="dash"))
    return fig


def render_orbit_speed_chart(orbit_speed: OrbitSpeedSeries, base_day: int | None = None) -> go.Figure:
    """Daily angular advance of the synthetic Sun against its uniform-motion mean."""
    angles = orbit_speed.angles
    days = np.arange(len(angles))
    curve = go.Scatter(
        x=days,
        y=list(angles.values),
        mode="lines",
        line=dict(color=_ECC_COLOR, width=2),
        name="daily advance",
    )
    fig = go.Figure(data=[curve])
    if base_day is not None:
        idx = clamp_day_index(base_day, len(angles))
        fig.add_trace(
            go.Scatter(
                x=[idx],
                y=[angles[idx]],
                mode="markers",
                marker=dict(size=8, color=_MARKER_COLOR),
                showlegend=False,
                name="today",
            )
        )
    _base_layout(fig, "deg")
    fig.add_hline(
        y=orbit_speed.mean_extra_deg,
        line=dict(color="rgba(255,214,85,0.85)", width=1.6, dash="dash"),
    )
    return fig


def render_analemma_trace(trace: AnalemmaTrace, visible_count: int | None = None) -> go.Figure:
    """Figure-eight of daily Sun subpoints in longitude/latitude.

    Args:
        trace: Daily subpoints.
        visible_count: Draw only the first N points (animation), or all if None.
    """
    points = trace.points if visible_count is None else trace.points[:visible_count]
    path = go.Scatter(
        x=[p.lon_deg for p in points],
        y=[p.lat_deg for p in points],
        mode="lines",
        line=dict(color="#ffdd55", width=2),
        opacity=0.85,
        name="analemma",
    )
    fig = go.Figure(data=[path])
    _base_layout(fig, "latitude (deg)")
    fig.update_xaxes(title="longitude (deg)")
    fig.update_yaxes(range=[-30, 30])
    return fig
