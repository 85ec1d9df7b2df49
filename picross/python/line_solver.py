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

"""Deductions on a single line (one row or one column) of a nonogram.

A line is solved independently of the rest of the grid:

  1. enumerate_lines() lists every complete assignment of the line that is
     consistent with its hints and with the cells already known,
  2. intersect() keeps the cells on which all these assignments agree.

  Typical usage example:

  line = solve_line([3], [Cell.UNKNOWN] * 4)
  # line is [UNKNOWN, FILLED, FILLED, UNKNOWN].
"""

from typing import List, Optional, Sequence, Tuple

import numpy as np

from picross.python.cell import Cell

# shape: (length,), dtype: int8, values in Cell.
Line = np.ndarray


def validate_hints(hints: Sequence[int]) -> Tuple[int, ...]:
    """Returns the hints as a tuple of ints.

    Raises:
      ValueError: If a hint is not a positive integer.
    """
    result = []
    for hint in hints:
        if (
            isinstance(hint, bool)
            or not isinstance(hint, (int, np.integer))
            or hint <= 0
        ):
            raise ValueError(f"hints must be positive integers, got: {hint!r}")
        result.append(int(hint))
    return tuple(result)


def as_line(line: Sequence[int]) -> Line:
    """Returns a new int8 array holding the input cells.

    Raises:
      ValueError: If the input is not one dimensional or holds a value that is
        not a Cell.
    """
    result = np.array(line, dtype=np.int8)
    if result.ndim != 1:
        raise ValueError(f"a line must be one dimensional, got shape {result.shape}")
    if np.any((result < Cell.UNKNOWN) | (result > Cell.CROSSED)):
        raise ValueError(f"invalid cell values in line: {result.tolist()}")
    return result


def enumerate_lines(hints: Sequence[int], line: Sequence[int]) -> List[Line]:
    """Returns all the complete lines matching the hints and the known cells.

    A complete line has no UNKNOWN cell. Its maximal runs of FILLED cells have,
    in order, the lengths given by `hints`, and it keeps every FILLED and
    CROSSED cell of `line`.

    Runs are placed from left to right; for each run, the gap before it is grown
    one cell at a time (0 before the first run, 1 before the others). Candidates
    are thus returned with the leftmost placements first.

    An empty `hints` yields the all CROSSED line, unless `line` has a FILLED
    cell in which case there is no candidate at all.

    Args:
      hints: The run lengths of the line.
      line: The current state of the line. It is not modified.

    Returns:
      The candidates, each a new int8 array of the length of `line`. The list is
      empty when the known cells contradict the hints.

    Raises:
      ValueError: If the hints or the line are malformed.
    """
    hints = validate_hints(hints)
    template = as_line(line)

    # min_spans[i] is the length of the shortest stretch holding hints[i:].
    min_spans = [0] * (len(hints) + 1)
    for i in reversed(range(len(hints))):
        min_spans[i] = hints[i]
        if min_spans[i + 1]:
            min_spans[i] += min_spans[i + 1] + 1

    candidates: List[Line] = []
    _place_runs(
        hints=hints,
        min_spans=min_spans,
        template=template,
        hint_index=0,
        start=0,
        buffer=template.copy(),
        candidates=candidates,
    )
    return candidates


def _place_runs(
    *,
    hints: Tuple[int, ...],
    min_spans: List[int],
    template: Line,
    hint_index: int,
    start: int,
    buffer: Line,
    candidates: List[Line],
) -> None:
    """Places hints[hint_index:] in buffer[start:], appending the completions.

    `buffer` is owned by the caller's branch: it is only modified once all the
    runs are placed, every other branch works on its own copy.
    """
    length = template.shape[0]
    if hint_index == len(hints):
        if np.any(template[start:] == Cell.FILLED):
            return
        buffer[start:] = Cell.CROSSED
        candidates.append(buffer)
        return

    run = hints[hint_index]
    min_gap = 0 if hint_index == 0 else 1
    for run_start in range(start + min_gap, length - min_spans[hint_index] + 1):
        run_end = run_start + run
        # A larger gap would contain the same FILLED cell.
        if np.any(template[start:run_start] == Cell.FILLED):
            return
        if np.any(template[run_start:run_end] == Cell.CROSSED):
            continue
        # The run must be followed by a separator (or the end of the line).
        if run_end < length and template[run_end] == Cell.FILLED:
            continue
        branch = buffer.copy()
        branch[start:run_start] = Cell.CROSSED
        branch[run_start:run_end] = Cell.FILLED
        _place_runs(
            hints=hints,
            min_spans=min_spans,
            template=template,
            hint_index=hint_index + 1,
            start=run_end,
            buffer=branch,
            candidates=candidates,
        )


def intersect(candidates: Sequence[Line]) -> Optional[Line]:
    """Returns the cells all the candidates agree on.

    Args:
      candidates: Complete lines, all of the same length.

    Returns:
      A line holding the common value of the candidates where they all agree and
      UNKNOWN elsewhere. None when `candidates` is empty: no completion exists so
      there is no consensus to report.

    Raises:
      ValueError: If the candidates do not have the same length.
    """
    if len(candidates) == 0:
        return None
    stacked = np.stack([np.asarray(c, dtype=np.int8) for c in candidates])
    first = stacked[0]
    agree = np.all(stacked == first, axis=0)
    return np.where(agree, first, Cell.UNKNOWN).astype(np.int8)


def solve_line(hints: Sequence[int], line: Sequence[int]) -> Optional[Line]:
    """Returns intersect(enumerate_lines(hints, line))."""
    return intersect(enumerate_lines(hints, line))


def runs(line: Sequence[int]) -> Tuple[int, ...]:
    """Returns the lengths of the maximal runs of FILLED cells, in order.

    Both CROSSED and UNKNOWN cells end a run.
    """
    result = []
    current = 0
    for value in as_line(line):
        if value == Cell.FILLED:
            current += 1
        elif current:
            result.append(current)
            current = 0
    if current:
        result.append(current)
    return tuple(result)
