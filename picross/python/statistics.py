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

"""Statistics about nonogram grids and solves."""

import dataclasses
import io

import numpy as np

from picross.python import grid as grid_lib
from picross.python.cell import Cell


@dataclasses.dataclass(frozen=True)
class GridStatistics:
    """The number of cells in each state.

    Attributes:
      num_filled: The number of FILLED cells.
      num_crossed: The number of CROSSED cells.
      num_unknown: The number of UNKNOWN cells.
    """

    num_filled: int = 0
    num_crossed: int = 0
    num_unknown: int = 0

    @property
    def num_cells(self) -> int:
        return self.num_filled + self.num_crossed + self.num_unknown

    @property
    def num_determined(self) -> int:
        return self.num_filled + self.num_crossed

    def __str__(self) -> str:
        """Prints the counts as a multi-line table.

        The last line does NOT end with a new line.
        """
        buf = io.StringIO()
        buf.write(f"Filled cells  : {self.num_filled}\n")
        buf.write(f"Crossed cells : {self.num_crossed}\n")
        buf.write(f"Unknown cells : {self.num_unknown}\n")
        if self.num_cells:
            ratio = self.num_determined / self.num_cells
            buf.write(f"Determined    : {ratio:.1%}")
        else:
            buf.write("Determined    : no cells")
        return buf.getvalue()


def grid_statistics(grid: grid_lib.Grid) -> GridStatistics:
    """Returns the number of cells of the grid in each state."""
    cells = grid.cells()
    return GridStatistics(
        num_filled=int(np.count_nonzero(cells == Cell.FILLED)),
        num_crossed=int(np.count_nonzero(cells == Cell.CROSSED)),
        num_unknown=int(np.count_nonzero(cells == Cell.UNKNOWN)),
    )


@dataclasses.dataclass(frozen=True)
class SolveStatistics:
    """What the fixpoint driver did.

    Attributes:
      num_passes: The number of full passes (all rows then all columns). The
        last pass of a converged solve is the one that changed nothing.
      num_line_solves: The number of lines given to the line solver.
      num_cells_determined: The number of cells that left UNKNOWN.
      num_contradictions: The number of line solves that found no completion
        consistent with the known cells.
      converged: True if the last pass changed nothing.
    """

    num_passes: int = 0
    num_line_solves: int = 0
    num_cells_determined: int = 0
    num_contradictions: int = 0
    converged: bool = False
