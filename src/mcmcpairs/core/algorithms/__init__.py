"""Geometry of the pairs matrix: plotting ranges and confidence ellipses."""

from mcmcpairs.core.algorithms.ellipse import chi2_radius, confidence_ellipse
from mcmcpairs.core.algorithms.ranges import (
    MARGIN_FRACTION,
    Z_95,
    PlotRange,
    compute_plot_range,
    resolve_plot_ranges,
)

__all__ = [
    "MARGIN_FRACTION",
    "Z_95",
    "PlotRange",
    "chi2_radius",
    "compute_plot_range",
    "confidence_ellipse",
    "resolve_plot_ranges",
]
