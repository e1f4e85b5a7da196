"""Diagnostics drawn on the matrix diagonal.

Each renderer draws one parameter's draws into one Axes and touches nothing
else; the mode is chosen once for the whole matrix.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import numpy as np

from mcmcpairs.core.diagnostics.metrics import compute_autocorrelation, compute_histogram
from mcmcpairs.core.domain.config import DiagonalMode

if TYPE_CHECKING:
    from matplotlib.axes import Axes

    from mcmcpairs.core.algorithms.ranges import PlotRange
    from mcmcpairs.core.shared.typing import FloatArray

HIST_FACE = "0.8"
HIST_EDGE = "0.5"
TRACE_COLOR = "0.5"


def draw_histogram(
    ax: Axes,
    values: FloatArray,
    plot_range: PlotRange | None = None,
    headroom: float = 1.3,
) -> None:
    """Density histogram with ``headroom`` times the tallest bin as the y limit."""
    hist = compute_histogram(values)
    ax.hist(
        values,
        bins=hist.edges,
        density=True,
        color=HIST_FACE,
        edgecolor=HIST_EDGE,
        linewidth=0.5,
    )
    top = headroom * hist.max_density
    ax.set_ylim(0.0, top if top > 0 else 1.0)
    if plot_range is not None:
        ax.set_xlim(*plot_range.as_tuple())


def draw_autocorrelation(
    ax: Axes,
    values: FloatArray,
    y_range: tuple[float, float] = (-1.0, 1.0),
    max_lag: int | None = None,
) -> None:
    """Autocorrelation bars with the zero line and the white-noise band."""
    result = compute_autocorrelation(values, max_lag)
    ax.vlines(result.lags, 0.0, result.autocorr, color="black", linewidth=0.8)
    ax.axhline(0.0, color="black", linewidth=0.5)
    for level in (-result.confidence_band, result.confidence_band):
        ax.axhline(level, color="blue", linestyle="--", linewidth=0.5)
    ax.set_xlim(-0.5, result.lags[-1] + 0.5)
    ax.set_ylim(*y_range)


def draw_trace(ax: Axes, values: FloatArray, plot_range: PlotRange | None = None) -> None:
    """Draws in iteration order as a thin line."""
    iterations = np.arange(len(values))
    ax.plot(iterations, values, linewidth=0.5, color=TRACE_COLOR)
    ax.set_xlim(0, max(len(values) - 1, 1))
    if plot_range is not None:
        ax.set_ylim(*plot_range.as_tuple())


def render_diagonal(
    ax: Axes,
    values: FloatArray,
    mode: DiagonalMode,
    *,
    plot_range: PlotRange | None = None,
    headroom: float = 1.3,
    acf_y_range: tuple[float, float] = (-1.0, 1.0),
    acf_max_lag: int | None = None,
) -> None:
    """Draw the diagonal diagnostic selected by ``mode``."""
    mode = DiagonalMode(mode)
    if mode is DiagonalMode.HISTOGRAM:
        draw_histogram(ax, values, plot_range, headroom)
    elif mode is DiagonalMode.AUTOCORRELATION:
        draw_autocorrelation(ax, values, acf_y_range, acf_max_lag)
    else:
        draw_trace(ax, values, plot_range)
