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

"""Reads nonogram puzzles stored in the `nonogram_regular` data format.

A puzzle file is a list of Python assignments:

  rows = 3
  row_rule_len = 2
  row_rules = [[0, 1], [1, 1], [0, 0]]
  cols = ...
  col_rule_len = ...
  col_rules = ...

Each rule is left padded with zeros up to its `*_rule_len`; an all zero rule is
an empty line. The file is only parsed, never executed.
"""

import ast
import os
from typing import Any, Dict, List, Sequence, Tuple, Union

from picross.python import grid as grid_lib

_KEYS = ("rows", "row_rule_len", "row_rules", "cols", "col_rule_len", "col_rules")


def hints_from_rule(rule: Sequence[int]) -> Tuple[int, ...]:
    """Returns the hints of a zero padded rule."""
    return tuple(int(v) for v in rule if v != 0)


def _read_assignments(text: str) -> Dict[str, Any]:
    """Returns the literal values of the top level `name = literal` statements."""
    try:
        tree = ast.parse(text)
    except SyntaxError as e:
        raise ValueError(f"invalid puzzle data: {e}") from e
    values = {}
    for node in tree.body:
        if not isinstance(node, ast.Assign):
            continue
        for target in node.targets:
            if isinstance(target, ast.Name) and target.id in _KEYS:
                try:
                    values[target.id] = ast.literal_eval(node.value)
                except ValueError as e:
                    raise ValueError(
                        f"{target.id} must be a literal, line {node.lineno}"
                    ) from e
    return values


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _count(values: Dict[str, Any], key: str) -> int:
    value = values[key]
    if not _is_int(value) or value < 0:
        raise ValueError(f"{key} must be a non-negative integer, got: {value!r}")
    return value


def _rules_to_hints(
    name: str, rules: Any, num_lines: int, rule_len: int
) -> List[Tuple[int, ...]]:
    if not isinstance(rules, (list, tuple)):
        raise ValueError(f"{name} must be a list of rules")
    if len(rules) != num_lines:
        raise ValueError(f"{name} has {len(rules)} rules, expected {num_lines}")
    hints = []
    for i, rule in enumerate(rules):
        if not isinstance(rule, (list, tuple)):
            raise ValueError(f"{name}[{i}] must be a list, got: {rule!r}")
        if not all(_is_int(v) for v in rule):
            raise ValueError(f"{name}[{i}] must only hold integers, got: {rule!r}")
        if len(rule) > rule_len:
            raise ValueError(
                f"{name}[{i}] has {len(rule)} values, more than {rule_len}"
            )
        hints.append(hints_from_rule(rule))
    return hints


def parse_puzzle(text: str) -> grid_lib.Grid:
    """Returns the all UNKNOWN grid of the puzzle described by `text`.

    Raises:
      ValueError: If a value is missing, has the wrong type or is inconsistent,
        or if the hints are invalid (see grid.Grid).
    """
    values = _read_assignments(text)
    missing = [key for key in _KEYS if key not in values]
    if missing:
        raise ValueError(f"missing puzzle values: {', '.join(missing)}")
    num_rows = _count(values, "rows")
    num_cols = _count(values, "cols")
    row_hints = _rules_to_hints(
        "row_rules", values["row_rules"], num_rows, _count(values, "row_rule_len")
    )
    col_hints = _rules_to_hints(
        "col_rules", values["col_rules"], num_cols, _count(values, "col_rule_len")
    )
    return grid_lib.Grid(num_cols, num_rows, row_hints, col_hints)


def load_puzzle(path: Union[str, os.PathLike]) -> grid_lib.Grid:
    """Same as parse_puzzle() on the content of the file at `path`."""
    with open(path, "r", encoding="utf-8") as f:
        return parse_puzzle(f.read())
