#!/usr/bin/env python3
#
# Copyright 2022 Max Planck Insitute Magdeburg
#
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
#
#
#
"""Selection policy for determinant and elimination algorithms

The thresholds below were tuned empirically. They decide which algorithm is
fastest, never whether the result is correct."""

from dataclasses import dataclass

from .errors import InvalidArgumentError


@dataclass(frozen=True)
class EliminationPolicy:
    """Thresholds used by the automatic algorithm selection.

    Attributes:
        laplace_max_rows: Up to this many rows minor expansion is always used
            for symbolic determinants.
        sparse_divisor: Above laplace_max_rows, a matrix with
            sparse_divisor * nonzero_count <= rows * cols counts as sparse and
            is handled by fraction free elimination.
        solve_divfree_below_rows: Systems with fewer equations are eliminated
            division free, since Bareiss elimination degenerates to it and only
            adds bookkeeping.
    """
    laplace_max_rows: int = 3
    sparse_divisor: int = 5
    solve_divfree_below_rows: int = 3

    def __post_init__(self):
        if self.laplace_max_rows < 1:
            raise InvalidArgumentError(f"laplace_max_rows must be positive, got {self.laplace_max_rows}")
        if self.sparse_divisor < 1:
            raise InvalidArgumentError(f"sparse_divisor must be positive, got {self.sparse_divisor}")
        if self.solve_divfree_below_rows < 0:
            raise InvalidArgumentError(f"solve_divfree_below_rows must not be negative, got {self.solve_divfree_below_rows}")


DEFAULT_POLICY = EliminationPolicy()
