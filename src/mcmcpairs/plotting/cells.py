"""Classification of the cells of an n x n pairs matrix."""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass
from enum import Enum


class CellKind(str, Enum):
    """What a cell shows, decided only by comparing its row and column."""

    DIAGONAL = "diagonal"
    LOWER = "lower"
    UPPER = "upper"


@dataclass(frozen=True)
class GridCell:
    """One cell of the matrix (0-based row and column).

    Attributes:
        row: Row index, the parameter on the y axis
        col: Column index, the parameter on the x axis
        kind: Diagonal diagnostic, lower-triangle scatter or upper-triangle label
        bottom_axis: Cell is in the last row and carries the x tick labels
        left_axis: Cell is in the first column and carries the y tick labels
    """

    row: int
    col: int
    kind: CellKind
    bottom_axis: bool
    left_axis: bool


def classify_cell(row: int, col: int) -> CellKind:
    if row == col:
        return CellKind.DIAGONAL
    if row > col:
        return CellKind.LOWER
    return CellKind.UPPER


def iter_cells(n: int) -> Iterator[GridCell]:
    """Yield the n² cells in row-major order."""
    for row in range(n):
        for col in range(n):
            yield GridCell(
                row=row,
                col=col,
                kind=classify_cell(row, col),
                bottom_axis=row == n - 1,
                left_axis=col == 0,
            )
