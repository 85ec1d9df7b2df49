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

"""The tri-state value of a nonogram cell."""

import enum


@enum.unique
class Cell(enum.IntEnum):
    """The state of one cell of the grid.

    UNKNOWN is the bottom of the order; FILLED and CROSSED are terminal. Once a
    cell leaves UNKNOWN it never goes back.

    The values are small integers so that lines and grids can be stored as
    numpy int8 arrays.

    Attributes:
      UNKNOWN: Nothing has been deduced yet.
      FILLED: The cell is part of a run.
      CROSSED: The cell is empty (separates runs).
    """

    UNKNOWN = 0
    FILLED = 1
    CROSSED = 2

    @property
    def is_determined(self) -> bool:
        """True if the cell is FILLED or CROSSED."""
        return self != Cell.UNKNOWN
