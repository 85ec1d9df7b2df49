#!/usr/bin/env python3
# Copyright 2010-2025 Google LLC
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""The nonogram grid: the hints and the matrix of cells being deduced."""

from typing import List, Sequence, Tuple

import numpy as np

from picross.python import line_solver
from picross.python import rendering
from picross.python.cell import Cell

Hints = Tuple[int, ...]


class Grid:
    """A nonogram puzzle and the cells deduced so far.

    The cell matrix is allocated once, all UNKNOWN, and is never resized. It is
    only modified through update_row() and update_column(), which never change
    a cell that is already determined.

    Attributes:
      width: The number of columns.
      height: The number of rows.
      row_hints: The run lengths of each row, top to bottom.
      col_hints: The run lengths of each column, left to right.
    """

    __slots__ = ("_width", "_height", "_row_hints", "_col_hints", "_cells")

    def __init__(
        self,
        width: int,
        height: int,
        row_hints: Sequence[Sequence[int]],
        col_hints: Sequence[Sequence[int]],
    ) -> None:
        """Builds an all UNKNOWN grid.

        Args:
          width: The number of columns.
          height: The number of rows.
          row_hints: One hint list per row.
          col_hints: One hint list per column.

        Raises:
          ValueError: If the number of hint lists does not match the dimensions,
            if a hint is not a positive integer, or if rows and columns do not
            require the same number of FILLED cells.
        """
        if width < 0 or height < 0:
            raise ValueError(f"invalid dimensions: width={width}, height={height}")
        if len(row_hints) != height:
            raise ValueError(
                f"expected {height} row hint lists, got {len(row_hints)}"
            )
        if len(col_hints) != width:
            raise ValueError(
                f"expected {width} column hint lists, got {len(col_hints)}"
            )
        self._width: int = width
        self._height: int = height
        self._row_hints: Tuple[Hints, ...] = tuple(
            line_solver.validate_hints(h) for h in row_hints
        )
        self._col_hints: Tuple[Hints, ...] = tuple(
            line_solver.validate_hints(h) for h in col_hints
        )
        rows_total = sum(sum(h) for h in self._row_hints)
        cols_total = sum(sum(h) for h in self._col_hints)
        if rows_total != cols_total:
            raise ValueError(
                f"row hints require {rows_total} filled cells but column hints"
                f" require {cols_total}"
            )
        self._cells = np.full((height, width), Cell.UNKNOWN, dtype=np.int8)

    @classmethod
    def from_hints(
        cls,
        row_hints: Sequence[Sequence[int]],
        col_hints: Sequence[Sequence[int]],
    ) -> "Grid":
        """Builds a grid whose dimensions are the numbers of hint lists."""
        return cls(len(col_hints), len(row_hints), row_hints, col_hints)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def row_hints(self) -> Tuple[Hints, ...]:
        return self._row_hints

    @property
    def col_hints(self) -> Tuple[Hints, ...]:
        return self._col_hints

    def cell(self, row: int, col: int) -> Cell:
        return Cell(int(self._cells[row, col]))

    def row(self, i: int) -> line_solver.Line:
        """Returns a copy of the i-th row."""
        return self._cells[i, :].copy()

    def column(self, j: int) -> line_solver.Line:
        """Returns a copy of the j-th column, read top to bottom."""
        return self._cells[:, j].copy()

    def cells(self) -> np.ndarray:
        """Returns a copy of the (height, width) cell matrix."""
        return self._cells.copy()

    def to_lists(self) -> List[List[Cell]]:
        return [[Cell(int(v)) for v in row] for row in self._cells]

    def update_row(self, i: int, line: Sequence[int]) -> bool:
        """Writes the determined cells of `line` into the UNKNOWN cells of row i.

        Returns:
          True if at least one cell changed.

        Raises:
          ValueError: If `line` has not the grid width or contradicts a cell that
            is already determined.
        """
        return _write_back(self._cells[i, :], line)

    def update_column(self, j: int, line: Sequence[int]) -> bool:
        """Same as update_row() for the j-th column."""
        return _write_back(self._cells[:, j], line)

    @property
    def num_unknown(self) -> int:
        return int(np.count_nonzero(self._cells == Cell.UNKNOWN))

    def is_complete(self) -> bool:
        """True if no cell is UNKNOWN."""
        return self.num_unknown == 0

    def is_solved(self) -> bool:
        """True if the grid is complete and every line matches its hints."""
        if not self.is_complete():
            return False
        for i, hints in enumerate(self._row_hints):
            if line_solver.runs(self._cells[i, :]) != hints:
                return False
        for j, hints in enumerate(self._col_hints):
            if line_solver.runs(self._cells[:, j]) != hints:
                return False
        return True

    def __str__(self) -> str:
        return rendering.render(self._cells)

    def __repr__(self) -> str:
        return (
            f"Grid(width={self._width}, height={self._height},"
            f" num_unknown={self.num_unknown})"
        )


def _write_back(target: np.ndarray, line: Sequence[int]) -> bool:
    """Updates the `target` view in place, see Grid.update_row()."""
    line = line_solver.as_line(line)
    if line.shape != target.shape:
        raise ValueError(
            f"line has length {line.shape[0]}, expected {target.shape[0]}"
        )
    determined = line != Cell.UNKNOWN
    conflicts = determined & (target != Cell.UNKNOWN) & (target != line)
    if np.any(conflicts):
        raise ValueError(
            "line would change already determined cells at positions"
            f" {np.flatnonzero(conflicts).tolist()}"
        )
    newly_determined = determined & (target == Cell.UNKNOWN)
    if not np.any(newly_determined):
        return False
    target[newly_determined] = line[newly_determined]
    return True
