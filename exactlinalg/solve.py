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
"""Solution of linear systems by elimination and back-substitution"""

import logging

from . import ring
from .config import DEFAULT_POLICY, EliminationPolicy
from .elimination import division_free_elimination, fraction_free_elimination, gauss_elimination
from .errors import DimensionMismatchError, InconsistentSystemError, InvalidArgumentError
from .matrix import Matrix
from .names import AUTOMATIC, BAREISS, DIVFREE, GAUSS, SOLVE_ALGORITHMS

LOG = logging.getLogger(__name__)


def select_solve_algorithm(rows: int, numeric: bool, policy: EliminationPolicy = DEFAULT_POLICY) -> str:
    # Bareiss elimination is generally a good guess
    algo = BAREISS
    # for few rows it is equivalent to division free elimination, minus the overhead
    if rows < policy.solve_divfree_below_rows:
        algo = DIVFREE
    if numeric:
        algo = GAUSS
    return algo


def solve(mx: Matrix, unknowns: Matrix, rhs: Matrix, algo: str = AUTOMATIC,
          policy: EliminationPolicy = DEFAULT_POLICY) -> Matrix:
    """
    Solve the linear system mx * unknowns == rhs.

    The augmented matrix [mx | rhs] is brought into echelon form and the
    unknowns are then solved for bottom-up. Unknowns that no equation pins
    down are free parameters and come back as their own symbol, so
    under-determined systems are solved as well.

    Args:
        mx: m x n coefficient matrix
        unknowns: n x p matrix of distinct symbols naming the unknowns
        rhs: m x p right hand side
        algo: One of AUTOMATIC, GAUSS, BAREISS and DIVFREE
        policy: Thresholds for the automatic selection

    Returns:
        n x p solution matrix

    Raises:
        DimensionMismatchError: If the shapes do not fit together
        InvalidArgumentError: If unknowns contains something else than symbols or algo is unknown
        InconsistentSystemError: If the system has no solution
    """
    m, n, p = mx.rows, mx.cols, rhs.cols
    if rhs.rows != m or unknowns.rows != n or unknowns.cols != p:
        raise DimensionMismatchError(f"solve(): incompatible matrices: {m}x{n} system, {unknowns.rows}x{unknowns.cols} "
                                     f"unknowns, {rhs.rows}x{rhs.cols} right hand side")
    for ro in range(n):
        for co in range(p):
            if not ring.is_symbol(unknowns[ro, co]):
                raise InvalidArgumentError(f"solve(): unknowns must be symbols, got {unknowns[ro, co]} at ({ro}, {co})")
    if algo not in SOLVE_ALGORITHMS:
        raise InvalidArgumentError(f"unknown solve algorithm '{algo}'")

    # the augmented matrix with rhs attached to the right
    width = n + p
    aug = Matrix(m, width)
    for r in range(m):
        for c in range(n):
            aug[r, c] = mx[r, c]
        for c in range(p):
            aug[r, n + c] = rhs[r, c]
    numeric = all(ring.is_number(value) for value in aug._m)
    if algo == AUTOMATIC:
        algo = select_solve_algorithm(m, numeric, policy)
    LOG.debug(f"Solving {m}x{n} system with {p} right hand side(s) using {algo}")

    if algo == GAUSS:
        gauss_elimination(aug, symbolic=not numeric)
    elif algo == DIVFREE:
        division_free_elimination(aug)
    else:
        fraction_free_elimination(aug)

    sol = Matrix(n, p)
    for co in range(p):
        last_assigned = n
        for r in range(m - 1, -1, -1):
            # first non-zero coefficient in row r
            fnz = 0
            while fnz < n and ring.is_zero(aug[r, fnz]):
                fnz += 1
            if fnz == n:
                # no coefficients left, so the right hand side has to vanish, too
                if not ring.is_zero(aug[r, n + co]):
                    raise InconsistentSystemError("solve(): inconsistent linear system")
                continue
            # unknowns between this row's leading column and the one below are free
            for c in range(fnz + 1, last_assigned):
                sol[c, co] = unknowns[c, co]
            e = aug[r, n + co]
            for c in range(fnz + 1, n):
                e -= aug[r, c] * sol[c, co]
            sol[fnz, co] = ring.normal(e / aug[r, fnz])
            last_assigned = fnz
        for ro in range(last_assigned):
            sol[ro, co] = unknowns[ro, co]
    return sol
