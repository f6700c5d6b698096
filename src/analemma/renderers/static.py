"""Matplotlib static PNG renderer."""

from pathlib import Path

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.figure import Figure

from analemma.models import YearSeries

_ROOT = Path(__file__).parent.parent.parent.parent


def render_static_chart(year_series: YearSeries, chart_size: int = 10) -> Figure:
    """Render the Equation-of-Time decomposition as a static matplotlib image.

    Args:
        year_series: Cached series for one year.
        chart_size: Output image width in inches.

    Returns:
        matplotlib Figure object.
    """
    contrib = year_series.contributions
    fig, (ax_eot, ax_speed) = plt.subplots(
        2, 1, figsize=(chart_size, chart_size * 0.8), gridspec_kw={"height_ratios": [2, 1]}
    )
    fig.patch.set_facecolor("black")

    days = np.arange(contrib.year_days)
    ax_eot.plot(days, np.asarray(contrib.eccentricity.values) / 60, color="#78c8ff", label="eccentricity")
    ax_eot.plot(days, np.asarray(contrib.obliquity.values) / 60, color="#ff9f55", label="obliquity")
    ax_eot.plot(days, np.asarray(contrib.combined.values) / 60, color="#ffd655", linewidth=2, label="equation of time")
    ax_eot.axhline(0, color="white", linewidth=0.5, linestyle="--", alpha=0.5)
    limit = contrib.max_abs_seconds / 60 * 1.05
    ax_eot.set_ylim(-limit, limit)
    ax_eot.set_ylabel("minutes")
    ax_eot.set_title(f"Equation of time {contrib.year}", color="white")
    ax_eot.legend(loc="upper right", facecolor="black", labelcolor="white", framealpha=0.6)

    speed = year_series.orbit_speed
    ax_speed.plot(np.arange(len(speed.angles)), speed.angles.values, color="#78c8ff")
    ax_speed.axhline(speed.mean_extra_deg, color="#ffd655", linestyle="--", linewidth=1)
    ax_speed.set_ylabel("deg / sidereal day")
    ax_speed.set_xlabel("day of year")

    for ax in (ax_eot, ax_speed):
        ax.set_facecolor("black")
        ax.tick_params(colors="white")
        ax.xaxis.label.set_color("white")
        ax.yaxis.label.set_color("white")
        for spine in ax.spines.values():
            spine.set_color("#334466")

    fig.tight_layout()
    return fig


def save_static_chart(year_series: YearSeries, output_path: Path | None = None) -> Path:
    """Save the year's charts as a PNG file.

    Args:
        year_series: Cached series for one year.
        output_path: Destination path. Auto-generated under results/ if None.

    Returns:
        Path to the saved file.
    """
    if output_path is None:
        output_path = _ROOT / "results" / f"equation_of_time_{year_series.year}.png"

    output_path.parent.mkdir(parents=True, exist_ok=True)
    fig = render_static_chart(year_series)
    fig.savefig(output_path, facecolor="black")
    plt.close(fig)
    return output_path
