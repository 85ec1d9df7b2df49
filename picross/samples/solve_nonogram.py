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

"""Solves a nonogram stored in the `nonogram_regular` data format.

Usage:
  python -m picross.samples.solve_nonogram \
      --input=data/nonogram_regular/nonogram_n4.py --stats
"""

from typing import Optional, Sequence, Tuple

from absl import app
from absl import flags

from picross.python import grid as grid_lib
from picross.python import puzzle_io
from picross.python import solve
from picross.python import statistics

_INPUT = flags.DEFINE_string("input", None, "Puzzle data file to solve.")
_MAX_PASSES = flags.DEFINE_integer(
    "max_passes", 0, "Maximum number of passes, 0 means no limit."
)
_ENABLE_OUTPUT = flags.DEFINE_bool(
    "enable_output", False, "Logs the progress of each pass."
)
_STATS = flags.DEFINE_bool("stats", False, "Prints statistics after the grid.")


def solve_puzzle_file(
    path: str, params: Optional[solve.SolveParameters] = None
) -> Tuple[grid_lib.Grid, statistics.SolveStatistics]:
    """Loads and solves the puzzle at `path`.

    Returns:
      The solved grid and the statistics of the solve.
    """
    grid = puzzle_io.load_puzzle(path)
    driver = solve.FixpointDriver(grid, params)
    driver.run()
    return grid, driver.statistics


def main(argv: Sequence[str]) -> None:
    if len(argv) > 1:
        raise app.UsageError("Too many command-line arguments.")
    params = solve.SolveParameters(
        max_passes=_MAX_PASSES.value or None,
        enable_output=_ENABLE_OUTPUT.value,
    )
    grid, solve_stats = solve_puzzle_file(_INPUT.value, params)
    print(grid, end="")
    if _STATS.value:
        print()
        print(statistics.grid_statistics(grid))
        print(f"Passes        : {solve_stats.num_passes}")
        print(f"Converged     : {solve_stats.converged}")
        print(f"Solved        : {grid.is_solved()}")


if __name__ == "__main__":
    flags.mark_flag_as_required("input")
    app.run(main)
