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

"""Text rendering of nonogram grids."""

import types
from typing import Mapping, Sequence

import numpy as np

from picross.python.cell import Cell

DEFAULT_GLYPHS: Mapping[Cell, str] = types.MappingProxyType(
    {
        Cell.UNKNOWN: ".",
        Cell.FILLED: "⬜",
        Cell.CROSSED: "X",
    }
)


def render(
    cells: Sequence[Sequence[int]], glyphs: Mapping[Cell, str] = DEFAULT_GLYPHS
) -> str:
    """Returns the grid as text, one line per row.

    Each row is terminated by a new line, including the last one.

    Args:
      cells: The rows of the grid.
      glyphs: The character used for each cell value.

    Returns:
      The rendered grid.
    """
    lines = []
    for row in cells:
        lines.append("".join(glyphs[Cell(int(value))] for value in row))
        lines.append("\n")
    return "".join(lines)


def parse(text: str, glyphs: Mapping[Cell, str] = DEFAULT_GLYPHS) -> np.ndarray:
    """Returns the cell matrix of a grid rendered with render().

    Args:
      text: The rendered grid. Empty lines are ignored.
      glyphs: The character used for each cell value.

    Returns:
      A (height, width) int8 array.

    Raises:
      ValueError: If a character is not a glyph or rows have different lengths.
    """
    cell_of_glyph = {glyph: cell for cell, glyph in glyphs.items()}
    rows = []
    for line in text.splitlines():
        if not line:
            continue
        try:
            rows.append([cell_of_glyph[c] for c in line])
        except KeyError as e:
            raise ValueError(f"unknown glyph {e.args[0]!r} in line {line!r}") from e
    if len(set(len(row) for row in rows)) > 1:
        raise ValueError("all the rendered rows must have the same length")
    if not rows:
        return np.zeros((0, 0), dtype=np.int8)
    return np.array(rows, dtype=np.int8)
