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
"""Determinant computation and algorithm selection"""

import logging
from dataclasses import dataclass

from sympy import Expr

from . import ring
from .config import DEFAULT_POLICY, EliminationPolicy
from .elimination import division_free_elimination, fraction_free_elimination, gauss_elimination
from .errors import InvalidArgumentError, NonSquareMatrixError
from .minors import laplace_determinant
from .names import AUTOMATIC, BAREISS, DETERMINANT_ALGORITHMS, DIVFREE, GAUSS, LAPLACE

LOG = logging.getLogger(__name__)


@dataclass
class MatrixStatistics:
    """Cheap statistics of a matrix used to pick an algorithm."""
    nonzero_count: int = 0
    numeric: bool = True
    rational_function: bool = False

    @classmethod
    def gather(cls, mx) -> 'MatrixStatistics':
        """
        Collect the statistics in a single pass over the entries.

        Each entry is rationalized first, so sqrt(2) counts as non-numeric and
        a denominator like sin(x) marks a rational function.
        """
        stats = cls()
        for value in mx._m:
            rtest = ring.rationalize(value, {})
            if not ring.is_zero(rtest):
                stats.nonzero_count += 1
            if not ring.is_number(rtest):
                stats.numeric = False
            if not stats.rational_function and ring.is_rational_function(rtest):
                stats.rational_function = True
        return stats


def select_determinant_algorithm(stats: MatrixStatistics, rows: int, cols: int,
                                 policy: EliminationPolicy = DEFAULT_POLICY) -> str:
    # minor expansion is generally a good guess
    algo = LAPLACE
    if rows > policy.laplace_max_rows and policy.sparse_divisor * stats.nonzero_count <= rows * cols:
        algo = BAREISS
    # purely numeric matrices are handled by Gauss elimination, overriding the above
    if stats.numeric:
        algo = GAUSS
    return algo


def determinant(mx, algo: str = AUTOMATIC, policy: EliminationPolicy = DEFAULT_POLICY) -> Expr:
    """
    Determinant of a square matrix.

    This routine mainly decides which algorithm to run. If all elements are
    from an integral domain the determinant is as well and the result is only
    expanded. If one or more elements are from a quotient field the result is
    normalized before it is returned, so that the determinant of
    [[a/(a-b),1],[b/(a-b),1]] comes out as 1.

    Args:
        mx: Square matrix, left untouched
        algo: One of AUTOMATIC, GAUSS, BAREISS, DIVFREE and LAPLACE
        policy: Thresholds for the automatic selection

    Returns:
        The determinant

    Raises:
        NonSquareMatrixError: If the matrix is not square
        InvalidArgumentError: If algo is unknown
    """
    if mx.rows != mx.cols:
        raise NonSquareMatrixError(f"determinant of non-square {mx.rows}x{mx.cols} matrix")
    if algo not in DETERMINANT_ALGORITHMS:
        raise InvalidArgumentError(f"unknown determinant algorithm '{algo}'")
    n = mx.rows
    stats = MatrixStatistics.gather(mx)
    if algo == AUTOMATIC:
        algo = select_determinant_algorithm(stats, mx.rows, mx.cols, policy)
    LOG.debug(f"Determinant of {n}x{n} matrix using {algo} ({stats})")

    finish = ring.normal if stats.rational_function else ring.expand
    # trap the trivial case, some algorithms do not like it
    if n == 1:
        return finish(mx._m[0])

    if algo == GAUSS:
        tmp = mx.copy()
        sign = gauss_elimination(tmp, det=True, symbolic=not stats.numeric)
        det = ring.ONE
        for d in range(n):
            det *= tmp._m[d * n + d]
        if stats.rational_function:
            return ring.normal(sign * det)
        return ring.expand(ring.normal(sign * det))
    if algo == BAREISS:
        tmp = mx.copy()
        sign = fraction_free_elimination(tmp, det=True)
        return finish(sign * tmp._m[n * n - 1])
    if algo == DIVFREE:
        tmp = mx.copy()
        sign = division_free_elimination(tmp, det=True)
        if sign == 0:
            return ring.ZERO
        det = tmp._m[n * n - 1]
        # factor out the pivots accumulated on the way
        for d in range(n - 2):
            for _ in range(n - d - 2):
                det = ring.normal(det / tmp._m[d * n + d])
        return finish(sign * det)
    return finish(laplace_determinant(mx))
