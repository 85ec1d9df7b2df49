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

import itertools
import random

from absl.testing import absltest
from absl.testing import parameterized
import numpy as np
import numpy.testing as np_testing

from picross.python import line_solver
from picross.python.cell import Cell

U = Cell.UNKNOWN
F = Cell.FILLED
X = Cell.CROSSED


def _as_lists(candidates):
    return [c.tolist() for c in candidates]


class EnumerateLinesTest(parameterized.TestCase):

    def test_empty_hints(self) -> None:
        self.assertEqual(
            _as_lists(line_solver.enumerate_lines([], [U] * 5)), [[X] * 5]
        )

    def test_empty_hints_with_filled_cell(self) -> None:
        self.assertEmpty(line_solver.enumerate_lines([], [U, F, U]))

    def test_empty_hints_on_empty_line(self) -> None:
        self.assertEqual(_as_lists(line_solver.enumerate_lines([], [])), [[]])

    def test_single_full_run(self) -> None:
        self.assertEqual(
            _as_lists(line_solver.enumerate_lines([4], [U] * 4)), [[F] * 4]
        )

    def test_all_placements_leftmost_first(self) -> None:
        self.assertEqual(
            _as_lists(line_solver.enumerate_lines([1, 1], [U] * 4)),
            [[F, X, F, X], [F, X, X, F], [X, F, X, F]],
        )

    def test_known_run_at_the_end(self) -> None:
        self.assertEqual(
            _as_lists(line_solver.enumerate_lines([3], [U, U, F, F, F])),
            [[X, X, F, F, F]],
        )

    @parameterized.named_parameters(
        ("run_ends_at_last_position", [2], [U, U, F], [[X, F, F]]),
        ("filled_right_after_run_at_last_position", [1], [U, U, F], [[X, X, F]]),
        ("filled_in_first_cell", [1], [F, U, U], [[F, X, X]]),
        ("crossed_inside_run", [2], [U, X, U, U], [[X, X, F, F]]),
        ("crossed_separator", [1, 1], [U, X, U], [[F, X, F]]),
    )
    def test_boundaries(self, hints, line, expected) -> None:
        self.assertEqual(
            _as_lists(line_solver.enumerate_lines(hints, line)), expected
        )

    def test_filled_after_last_run(self) -> None:
        self.assertEmpty(line_solver.enumerate_lines([1], [F, X, F]))

    def test_hints_do_not_fit(self) -> None:
        self.assertEmpty(line_solver.enumerate_lines([2, 2], [U] * 4))

    def test_known_cells_contradict_hints(self) -> None:
        self.assertEmpty(line_solver.enumerate_lines([3], [U, X, U, X, U]))

    def test_input_is_not_modified(self) -> None:
        line = np.array([U, U, F, U, U], dtype=np.int8)
        line_solver.enumerate_lines([2], line)
        np_testing.assert_array_equal(line, [U, U, F, U, U])

    def test_candidates_are_distinct_arrays(self) -> None:
        candidates = line_solver.enumerate_lines([1], [U] * 3)
        self.assertLen(candidates, 3)
        candidates[0][:] = U
        self.assertEqual(candidates[1].tolist(), [X, F, X])

    @parameterized.named_parameters(
        ("zero", [0]),
        ("negative", [2, -1]),
        ("bool", [True]),
        ("float", [1.5]),
    )
    def test_invalid_hints(self, hints) -> None:
        with self.assertRaisesRegex(ValueError, "positive integers"):
            line_solver.enumerate_lines(hints, [U] * 3)

    def test_invalid_cell(self) -> None:
        with self.assertRaisesRegex(ValueError, "invalid cell values"):
            line_solver.enumerate_lines([1], [U, 3, U])

    def test_matches_brute_force(self) -> None:
        rng = random.Random(1234)
        for _ in range(200):
            length = rng.randint(1, 8)
            template = [rng.choice((U, U, U, F, X)) for _ in range(length)]
            hints = []
            remaining = length
            while remaining > 0 and rng.random() < 0.7:
                run = rng.randint(1, remaining)
                hints.append(run)
                remaining -= run + 1
            expected = [
                list(values)
                for values in itertools.product((F, X), repeat=length)
                if line_solver.runs(values) == tuple(hints)
                and all(t == U or t == v for t, v in zip(template, values))
            ]
            actual = _as_lists(line_solver.enumerate_lines(hints, template))
            self.assertCountEqual(actual, expected, msg=f"{hints} {template}")
            self.assertLen(set(map(tuple, actual)), len(actual))


class IntersectTest(absltest.TestCase):

    def test_no_candidates(self) -> None:
        self.assertIsNone(line_solver.intersect([]))

    def test_single_candidate(self) -> None:
        self.assertEqual(line_solver.intersect([[F, F, X]]).tolist(), [F, F, X])

    def test_partial_agreement(self) -> None:
        self.assertEqual(
            line_solver.intersect(
                [[F, F, X, X], [F, X, X, F], [F, F, X, F]]
            ).tolist(),
            [F, U, X, U],
        )

    def test_no_agreement(self) -> None:
        self.assertEqual(
            line_solver.intersect([[F, X], [X, F]]).tolist(), [U, U]
        )

    def test_different_lengths(self) -> None:
        with self.assertRaises(ValueError):
            line_solver.intersect([[F, X], [F, X, X]])


class SolveLineTest(absltest.TestCase):

    def test_overlap(self) -> None:
        self.assertEqual(
            line_solver.solve_line([3], [U] * 4).tolist(), [U, F, F, U]
        )

    def test_nothing_deduced(self) -> None:
        self.assertEqual(line_solver.solve_line([1], [U] * 3).tolist(), [U] * 3)

    def test_known_cells_are_kept(self) -> None:
        self.assertEqual(
            line_solver.solve_line([1, 2], [U, U, X, U, U]).tolist(),
            [U, U, X, F, F],
        )

    def test_contradiction(self) -> None:
        self.assertIsNone(line_solver.solve_line([2], [F, X, F]))


class RunsTest(absltest.TestCase):

    def test_runs(self) -> None:
        self.assertEqual(line_solver.runs([F, F, X, F, U, F]), (2, 1, 1))

    def test_no_runs(self) -> None:
        self.assertEqual(line_solver.runs([X, U, X]), ())
        self.assertEqual(line_solver.runs([]), ())


if __name__ == "__main__":
    absltest.main()
