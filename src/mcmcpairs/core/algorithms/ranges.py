"""Per-parameter plotting ranges shared by every cell of a row/column.

A computed range covers both the posterior draws and the asymptotic 95%
interval ``estimate ± 1.96·se``, widened on each side by 15% of its width so
points and curves do not sit on the cell frame.
"""

from __future__ import annotations

import logging
import warnings
from collections.abc import Sequence
from dataclasses import dataclass

import numpy as np

from mcmcpairs.core.domain.fit import AsymptoticFit, PosteriorSample
from mcmcpairs.core.shared.exceptions import DegenerateInputWarning, PreconditionError

logger = logging.getLogger(__name__)

Z_95 = 1.96
MARGIN_FRACTION = 0.15


@dataclass(frozen=True)
class PlotRange:
    """Closed plotting interval for one parameter."""

    low: float
    high: float

    @property
    def width(self) -> float:
        return self.high - self.low

    def as_tuple(self) -> tuple[float, float]:
        return (self.low, self.high)

    def contains(self, value: float) -> bool:
        return self.low <= value <= self.high


def compute_plot_range(
    draws: np.ndarray,
    estimate: float,
    std_error: float,
    z: float = Z_95,
    margin_fraction: float = MARGIN_FRACTION,
) -> PlotRange:
    """Range covering the draws and the asymptotic interval, plus margin.

    A zero-width raw interval (constant draws and zero standard error) is
    returned as is; callers decide how to report it.
    """
    low_raw = min(float(np.min(draws)), estimate - z * std_error)
    high_raw = max(float(np.max(draws)), estimate + z * std_error)
    margin = margin_fraction * (high_raw - low_raw)
    return PlotRange(low=low_raw - margin, high=high_raw + margin)


def resolve_plot_ranges(
    posterior: PosteriorSample,
    fit: AsymptoticFit,
    plot_ranges: Sequence[Sequence[float]] | None = None,
    *,
    z: float = Z_95,
    margin_fraction: float = MARGIN_FRACTION,
) -> list[PlotRange]:
    """Resolve one plotting range per parameter.

    Args:
        posterior: Posterior sample (already subset)
        fit: Asymptotic fit aligned with ``posterior``
        plot_ranges: Explicit ranges; when given they are used verbatim and
            nothing is computed
        z: Normal quantile of the asymptotic interval
        margin_fraction: Fraction of the raw width added on each side

    Returns:
        List of PlotRange, one per posterior column

    Raises:
        PreconditionError: If explicit ranges do not match the parameter count
    """
    n = posterior.n_params
    if plot_ranges is not None:
        if len(plot_ranges) != n:
            msg = f"Got {len(plot_ranges)} plot ranges for {n} selected parameters"
            raise PreconditionError(msg)
        ranges = []
        for bounds in plot_ranges:
            if len(bounds) != 2:
                msg = f"A plot range is a (low, high) pair, got {tuple(bounds)}"
                raise PreconditionError(msg)
            ranges.append(PlotRange(low=float(bounds[0]), high=float(bounds[1])))
        logger.debug("Using %d explicit plot ranges", n)
        return ranges

    ranges = []
    for i in range(n):
        plot_range = compute_plot_range(
            posterior.column(i),
            float(fit.estimates[i]),
            float(fit.std_errors[i]),
            z=z,
            margin_fraction=margin_fraction,
        )
        if plot_range.width == 0:
            message = (
                f"Parameter {fit.names[i]!r} has constant draws and zero standard error; "
                f"its plotting range [{plot_range.low:g}, {plot_range.high:g}] has zero width"
            )
            logger.warning(message)
            warnings.warn(message, DegenerateInputWarning, stacklevel=2)
        ranges.append(plot_range)
    return ranges
