"""Pairs matrix of MCMC draws against the asymptotic approximation.

Layout of an n-parameter matrix:
- Diagonal: one diagnostic per parameter (autocorrelation, histogram or trace)
  with the parameter name at the top
- Lower triangle: scatter of the draws, the maximum-likelihood estimate and its
  95% confidence ellipse
- Upper triangle: empirical correlation, with text size growing with |r|
- Last row / first column: tick labels of the shared ranges
"""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any

import matplotlib.pyplot as plt
import numpy as np
import pandas as pd

from mcmcpairs.core.algorithms.ellipse import confidence_ellipse
from mcmcpairs.core.algorithms.ranges import PlotRange, resolve_plot_ranges
from mcmcpairs.core.diagnostics.metrics import (
    correlation_label_size,
    format_correlation,
    rounded_correlation,
)
from mcmcpairs.core.domain.config import PairsConfig
from mcmcpairs.core.domain.fit import AsymptoticFit, PosteriorSample, select_parameters
from mcmcpairs.core.shared.exceptions import DegenerateInputWarning, PreconditionError
from mcmcpairs.plotting.cells import CellKind, GridCell, iter_cells
from mcmcpairs.plotting.diagonal import render_diagonal
from mcmcpairs.plotting.layout import MatrixLayout, matrix_style

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from mcmcpairs.core.shared.typing import FloatArray

logger = logging.getLogger(__name__)

MLE_COLOR = "red"


@dataclass(frozen=True)
class _Matrix:
    """Everything the cell renderers of one figure share."""

    posterior: PosteriorSample
    fit: AsymptoticFit
    ranges: list[PlotRange]
    headroom: list[float]
    config: PairsConfig
    layout: MatrixLayout
    dense: bool
    scatter_kwargs: dict[str, Any] = field(default_factory=dict)


def as_posterior(posterior: PosteriorSample | pd.DataFrame | FloatArray) -> PosteriorSample:
    """Wrap a DataFrame or array as a PosteriorSample."""
    if isinstance(posterior, PosteriorSample):
        return posterior
    if isinstance(posterior, pd.DataFrame):
        return PosteriorSample.from_frame(posterior)
    return PosteriorSample(draws=np.asarray(posterior, dtype=float))


def plot_pairs(
    posterior: PosteriorSample | pd.DataFrame | FloatArray,
    fit: AsymptoticFit,
    config: PairsConfig | None = None,
    *,
    layout: MatrixLayout | None = None,
    **scatter_kwargs: Any,
) -> Figure:
    """Draw the pairs matrix of ``posterior`` with the asymptotic fit overlaid.

    Every precondition is checked before the figure is created. Matplotlib
    rcParams are changed only for the duration of the call.

    Args:
        posterior: Draws (rows = iterations), columns aligned with ``fit``
        fit: Asymptotic point estimates, standard errors and correlations
        config: Rendering options (defaults to ``PairsConfig()``)
        layout: Geometry/style override (defaults to one derived from ``config``)
        **scatter_kwargs: Extra matplotlib keyword arguments for the scatter points

    Returns:
        The matplotlib Figure holding the n x n grid

    Raises:
        PreconditionError: On mismatched parameter counts, fewer than two
            selected parameters, invalid correlations or option lengths that
            do not match the selection
    """
    config = config or PairsConfig()
    sample, sub_fit = select_parameters(
        as_posterior(posterior),
        fit,
        config.parameter_subset,
        match_names=config.match_names,
    )
    n = sub_fit.n_params

    headroom = config.headroom_for(n)
    if len(headroom) != n:
        msg = f"Got {len(headroom)} histogram headroom values for {n} selected parameters"
        raise PreconditionError(msg)

    ranges = resolve_plot_ranges(sample, sub_fit, config.plot_ranges)

    dense = sample.n_draws >= config.dense_threshold
    if dense:
        message = (
            f"{sample.n_draws} draws (>= {config.dense_threshold}); "
            "scatter points are drawn as single pixels"
        )
        logger.info(message)
        warnings.warn(message, DegenerateInputWarning, stacklevel=2)

    matrix = _Matrix(
        posterior=sample,
        fit=sub_fit,
        ranges=ranges,
        headroom=headroom,
        config=config,
        layout=layout or MatrixLayout.from_config(config),
        dense=dense,
        scatter_kwargs=scatter_kwargs,
    )
    logger.info(
        "Drawing %dx%d pairs matrix (%d draws, diagonal=%s)",
        n,
        n,
        sample.n_draws,
        config.diagonal_mode.value,
    )

    with matrix_style(matrix.layout):
        fig, axes = matrix.layout.create_figure(n)
        try:
            for cell in iter_cells(n):
                _draw_cell(axes[cell.row, cell.col], cell, matrix)
        except Exception:
            plt.close(fig)
            raise
    return fig


def _draw_cell(ax: Axes, cell: GridCell, matrix: _Matrix) -> None:
    layout = matrix.layout
    layout.style_axes(ax)

    if cell.kind is CellKind.DIAGONAL:
        _draw_diagonal(ax, cell.row, matrix)
    elif cell.kind is CellKind.LOWER:
        _draw_scatter(ax, cell.row, cell.col, matrix)
    else:
        _draw_correlation(ax, cell.row, cell.col, matrix)

    if cell.bottom_axis:
        layout.show_bottom_axis(ax, cell.col)
    if cell.left_axis:
        layout.show_left_axis(ax, cell.row)


def _draw_diagonal(ax: Axes, index: int, matrix: _Matrix) -> None:
    config = matrix.config
    render_diagonal(
        ax,
        matrix.posterior.column(index),
        config.diagonal_mode,
        plot_range=matrix.ranges[index],
        headroom=matrix.headroom[index],
        acf_y_range=config.acf_y_range,
        acf_max_lag=config.acf_max_lag,
    )
    ax.annotate(
        matrix.fit.names[index],
        xy=(0.5, 1.0),
        xycoords="axes fraction",
        xytext=(0.0, -matrix.layout.line_height),
        textcoords="offset points",
        ha="center",
        va="top",
        fontsize=matrix.layout.label_fontsize,
    )


def _draw_scatter(ax: Axes, row: int, col: int, matrix: _Matrix) -> None:
    fit = matrix.fit
    style: dict[str, Any] = {"linestyle": "none", "color": "black"}
    if matrix.dense:
        style.update(marker=",")
    else:
        style.update(marker="o", markersize=2.5, markerfacecolor="none", markeredgewidth=0.4)
    style.update(matrix.scatter_kwargs)
    ax.plot(matrix.posterior.column(col), matrix.posterior.column(row), **style)

    centre = (fit.estimates[col], fit.estimates[row])
    ax.plot(*centre, marker="o", markersize=1.5, color=MLE_COLOR, linestyle="none")

    ellipse = confidence_ellipse(
        fit.correlation[col, row],
        scale=(fit.std_errors[col], fit.std_errors[row]),
        centre=centre,
        npoints=matrix.config.ellipse_points,
        level=matrix.config.confidence_level,
    )
    ax.plot(ellipse[:, 0], ellipse[:, 1], color=MLE_COLOR, linewidth=1.5)

    ax.set_xlim(*matrix.ranges[col].as_tuple())
    ax.set_ylim(*matrix.ranges[row].as_tuple())


def _draw_correlation(ax: Axes, row: int, col: int, matrix: _Matrix) -> None:
    r = rounded_correlation(matrix.posterior.column(row), matrix.posterior.column(col))
    ax.set_xlim(0.0, 1.0)
    ax.set_ylim(0.0, 1.0)
    ax.text(
        0.5,
        0.5,
        format_correlation(r),
        transform=ax.transAxes,
        ha="center",
        va="center",
        fontsize=matrix.layout.scaled_fontsize(correlation_label_size(r)),
    )
