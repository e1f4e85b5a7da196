"""Plotting module for mcmcpairs.

- layout: grid geometry and the scoped matplotlib style
- cells: classification of the n x n cells
- diagonal: autocorrelation, histogram and trace diagnostics
- pairs: the full matrix
"""

from mcmcpairs.plotting.cells import CellKind, GridCell, classify_cell, iter_cells
from mcmcpairs.plotting.diagonal import (
    draw_autocorrelation,
    draw_histogram,
    draw_trace,
    render_diagonal,
)
from mcmcpairs.plotting.layout import MatrixLayout, matrix_style
from mcmcpairs.plotting.pairs import as_posterior, plot_pairs

__all__ = [
    "CellKind",
    "GridCell",
    "MatrixLayout",
    "as_posterior",
    "classify_cell",
    "draw_autocorrelation",
    "draw_histogram",
    "draw_trace",
    "iter_cells",
    "matrix_style",
    "plot_pairs",
    "render_diagonal",
]
