"""Grid geometry and style of the pairs matrix.

The matrix is an n x n grid of equal cells with no gap between them, outer
margins reserved for the border tick labels, one muted colour for frames and
ticks, and tick labels whose offset alternates between neighbouring cells.
Nothing here depends on the data being drawn.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import TYPE_CHECKING, Literal

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.ticker import MaxNLocator

if TYPE_CHECKING:
    from matplotlib.axes import Axes
    from matplotlib.figure import Figure

    from mcmcpairs.core.domain.config import PairsConfig

POINTS_PER_INCH = 72.0


@dataclass(frozen=True)
class MatrixLayout:
    """Geometry and style defaults shared by every cell.

    Margins and tick label offsets are expressed in text lines (one line is
    1.2 times the base font size), the unit the rest of the layout is tuned
    in.
    """

    cell_size: float = 1.6
    base_fontsize: float = 12.0
    label_size: float = 0.5
    tick_label_scale: float = 0.65
    axis_color: str = "0.5"
    frame_linewidth: float = 0.5
    tick_length: float = 2.0
    max_ticks: int = 4
    margin_lines: tuple[float, float, float, float] = (2.0, 2.0, 2.0, 0.5)  # bottom, left, top, right
    bottom_offsets: tuple[float, float] = (0.5, 0.0)  # even, odd column
    left_offsets: tuple[float, float] = (0.15, 0.65)  # even, odd row

    @classmethod
    def from_config(cls, config: PairsConfig) -> MatrixLayout:
        return cls(
            cell_size=config.cell_size,
            label_size=config.label_size,
            axis_color=config.axis_color,
        )

    @property
    def line_height(self) -> float:
        """Height of one text line in points."""
        return 1.2 * self.base_fontsize

    @property
    def tick_label_fontsize(self) -> float:
        return self.tick_label_scale * self.base_fontsize

    @property
    def label_fontsize(self) -> float:
        return self.scaled_fontsize(self.label_size)

    def scaled_fontsize(self, relative_size: float) -> float:
        """Font size in points for a size relative to the base font."""
        return relative_size * self.base_fontsize

    def margins_inches(self) -> tuple[float, float, float, float]:
        """Outer margins (bottom, left, top, right) in inches."""
        to_inches = self.line_height / POINTS_PER_INCH
        bottom, left, top, right = self.margin_lines
        return (bottom * to_inches, left * to_inches, top * to_inches, right * to_inches)

    def figure_size(self, n: int) -> tuple[float, float]:
        bottom, left, top, right = self.margins_inches()
        grid = n * self.cell_size
        return (grid + left + right, grid + bottom + top)

    def rc_params(self) -> dict[str, object]:
        """Matplotlib settings applied while a matrix is being drawn."""
        return {
            "font.size": self.base_fontsize,
            "figure.facecolor": "white",
            "axes.facecolor": "white",
            "axes.grid": False,
            "axes.edgecolor": self.axis_color,
            "axes.linewidth": self.frame_linewidth,
            "axes.xmargin": 0.0,
            "axes.ymargin": 0.0,
            "xtick.color": self.axis_color,
            "ytick.color": self.axis_color,
            "xtick.labelsize": self.tick_label_fontsize,
            "ytick.labelsize": self.tick_label_fontsize,
            "xtick.direction": "out",
            "ytick.direction": "out",
            "xtick.major.size": self.tick_length,
            "ytick.major.size": self.tick_length,
            "xtick.major.width": self.frame_linewidth,
            "ytick.major.width": self.frame_linewidth,
        }

    def create_figure(self, n: int) -> tuple[Figure, np.ndarray]:
        """Create the figure and its (n, n) array of axes."""
        width, height = self.figure_size(n)
        bottom, left, top, right = self.margins_inches()
        fig, axes = plt.subplots(
            n,
            n,
            figsize=(width, height),
            squeeze=False,
            gridspec_kw={
                "left": left / width,
                "right": 1.0 - right / width,
                "bottom": bottom / height,
                "top": 1.0 - top / height,
                "wspace": 0.0,
                "hspace": 0.0,
            },
        )
        return fig, axes

    def style_axes(self, ax: Axes) -> None:
        """Frame the cell and hide its ticks; border cells re-enable them."""
        for spine in ax.spines.values():
            spine.set_color(self.axis_color)
            spine.set_linewidth(self.frame_linewidth)
        ax.tick_params(
            which="both",
            direction="out",
            length=self.tick_length,
            width=self.frame_linewidth,
            color=self.axis_color,
            labelcolor=self.axis_color,
            labelsize=self.tick_label_fontsize,
            bottom=False,
            top=False,
            left=False,
            right=False,
            labelbottom=False,
            labeltop=False,
            labelleft=False,
            labelright=False,
        )

    def tick_pad(self, index: int, axis: Literal["x", "y"]) -> float:
        """Tick label offset in points, alternating with the cell's parity."""
        offsets = self.bottom_offsets if axis == "x" else self.left_offsets
        return 1.0 + offsets[index % 2] * self.line_height

    def show_bottom_axis(self, ax: Axes, col: int) -> None:
        ax.xaxis.set_major_locator(MaxNLocator(nbins=self.max_ticks))
        ax.tick_params(axis="x", bottom=True, labelbottom=True, pad=self.tick_pad(col, "x"))

    def show_left_axis(self, ax: Axes, row: int) -> None:
        ax.yaxis.set_major_locator(MaxNLocator(nbins=self.max_ticks))
        ax.tick_params(axis="y", left=True, labelleft=True, pad=self.tick_pad(row, "y"))


@contextmanager
def matrix_style(layout: MatrixLayout) -> Iterator[MatrixLayout]:
    """Apply the layout's rcParams for the duration of the block.

    The previous configuration is restored on every exit path, including
    exceptions raised while drawing.
    """
    with plt.rc_context(layout.rc_params()):
        yield layout
