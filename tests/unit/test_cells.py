"""Tests for the classification of matrix cells."""

import pytest

from mcmcpairs.plotting.cells import CellKind, classify_cell, iter_cells


@pytest.mark.parametrize(
    ("row", "col", "kind"),
    [
        (0, 0, CellKind.DIAGONAL),
        (3, 3, CellKind.DIAGONAL),
        (1, 0, CellKind.LOWER),
        (4, 2, CellKind.LOWER),
        (0, 1, CellKind.UPPER),
        (2, 4, CellKind.UPPER),
    ],
)
def test_classify_cell(row, col, kind):
    assert classify_cell(row, col) is kind


def test_iter_cells_row_major():
    cells = list(iter_cells(3))
    assert len(cells) == 9
    assert [(c.row, c.col) for c in cells[:4]] == [(0, 0), (0, 1), (0, 2), (1, 0)]


def test_kind_counts():
    n = 5
    cells = list(iter_cells(n))
    counts = {kind: sum(c.kind is kind for c in cells) for kind in CellKind}
    assert counts[CellKind.DIAGONAL] == n
    assert counts[CellKind.LOWER] == n * (n - 1) // 2
    assert counts[CellKind.UPPER] == n * (n - 1) // 2


def test_border_axes():
    cells = {(c.row, c.col): c for c in iter_cells(3)}
    assert [cells[2, col].bottom_axis for col in range(3)] == [True, True, True]
    assert not any(cells[row, col].bottom_axis for row in range(2) for col in range(3))
    assert [cells[row, 0].left_axis for row in range(3)] == [True, True, True]
    assert not any(cells[row, col].left_axis for row in range(3) for col in (1, 2))
