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

"""Solves a nonogram by repeating line deductions until nothing changes.

Each pass solves every row (top to bottom) then every column (left to right)
with line_solver.solve_line() and writes the deduced cells back into the grid.
Passes are repeated until one of them changes nothing.

This only finds what single lines imply. Puzzles needing guesses or reasoning
across several lines end with UNKNOWN cells, which is a valid outcome.

  Typical usage example:

  grid = grid_lib.Grid.from_hints(row_hints, col_hints)
  solve.solve(grid)
  print(grid)
"""

import dataclasses
import enum
from typing import Optional

from absl import logging

from picross.python import grid as grid_lib
from picross.python import line_solver
from picross.python import statistics


@enum.unique
class DriverState(enum.Enum):
    """The state of a FixpointDriver.

    Attributes:
      RUNNING: The last pass changed the grid (or no pass was made yet).
      CONVERGED: The last pass changed nothing. This state is final.
    """

    RUNNING = 1
    CONVERGED = 2


@dataclasses.dataclass(frozen=True)
class SolveParameters:
    """Parameters of solve().

    Attributes:
      max_passes: If set, the solve stops after this number of passes even if
        the grid is still changing. Must be at least 1.
      enable_output: If True, the progress of each pass is logged with
        absl.logging at INFO level.
    """

    max_passes: Optional[int] = None
    enable_output: bool = False

    def __post_init__(self) -> None:
        if self.max_passes is not None and self.max_passes < 1:
            raise ValueError(f"max_passes must be at least 1, got {self.max_passes}")


class FixpointDriver:
    """Runs line deduction passes over a grid until a fixpoint is reached.

    The driver is the only writer of the grid while it runs.
    """

    def __init__(
        self, grid: grid_lib.Grid, params: Optional[SolveParameters] = None
    ) -> None:
        self._grid = grid
        self._params = params or SolveParameters()
        self._state = DriverState.RUNNING
        self._initial_num_unknown = grid.num_unknown
        self._num_passes = 0
        self._num_line_solves = 0
        self._num_contradictions = 0

    @property
    def grid(self) -> grid_lib.Grid:
        return self._grid

    @property
    def state(self) -> DriverState:
        return self._state

    @property
    def statistics(self) -> statistics.SolveStatistics:
        return statistics.SolveStatistics(
            num_passes=self._num_passes,
            num_line_solves=self._num_line_solves,
            num_cells_determined=self._initial_num_unknown - self._grid.num_unknown,
            num_contradictions=self._num_contradictions,
            converged=self._state == DriverState.CONVERGED,
        )

    def step(self) -> DriverState:
        """Makes one full pass and returns the new state.

        Does nothing once CONVERGED.
        """
        if self._state == DriverState.CONVERGED:
            return self._state
        changed = False
        for i, hints in enumerate(self._grid.row_hints):
            deduced = self._deduce(hints, self._grid.row(i), "row", i)
            if deduced is not None and self._grid.update_row(i, deduced):
                changed = True
        for j, hints in enumerate(self._grid.col_hints):
            deduced = self._deduce(hints, self._grid.column(j), "column", j)
            if deduced is not None and self._grid.update_column(j, deduced):
                changed = True
        self._num_passes += 1
        if not changed:
            self._state = DriverState.CONVERGED
        if self._params.enable_output:
            logging.info(
                "pass %d: %s, %d unknown cells left",
                self._num_passes,
                "changed" if changed else "unchanged",
                self._grid.num_unknown,
            )
        return self._state

    def run(self) -> None:
        """Makes passes until CONVERGED or until max_passes is reached."""
        max_passes = self._params.max_passes
        while self._state == DriverState.RUNNING:
            if max_passes is not None and self._num_passes >= max_passes:
                if self._params.enable_output:
                    logging.info("stopped after %d passes", self._num_passes)
                return
            self.step()
        if self._params.enable_output:
            logging.info("converged after %d passes", self._num_passes)

    def _deduce(
        self, hints: grid_lib.Hints, line: line_solver.Line, kind: str, index: int
    ) -> Optional[line_solver.Line]:
        self._num_line_solves += 1
        deduced = line_solver.solve_line(hints, line)
        if deduced is None:
            # Not an error: the line is simply left as is.
            self._num_contradictions += 1
            logging.vlog(
                1, "%s %d: no completion matches the hints %s", kind, index, hints
            )
        return deduced


def solve(grid: grid_lib.Grid, params: Optional[SolveParameters] = None) -> None:
    """Deduces cells of the grid in place until a fixpoint is reached.

    Nothing is returned: inspect the grid afterwards. Use FixpointDriver directly
    to get statistics.

    Args:
      grid: The grid to solve, modified in place.
      params: The solve parameters, the defaults when None.
    """
    FixpointDriver(grid, params).run()
