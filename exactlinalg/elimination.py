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
"""Pivoting and in-place elimination schemes

All routines work in place on the matrix they are given and bring it into
upper echelon form. They return the sign of the row permutation applied on
the way: 1 for an even number of row swaps, -1 for an odd number and 0 if a
column without pivot was met, i.e. the matrix is singular. Callers that need
the original matrix afterwards have to pass a copy.

The det flag may be set if only the diagonal is of interest (determinants).
Elements no longer needed are then dropped to save space, and a singular
matrix returns 0 immediately, leaving the matrix in a messy state.
"""

import logging
from typing import List

from sympy import Expr

from . import ring
from .errors import InvalidArgumentError

LOG = logging.getLogger(__name__)


def _swap_rows(entries: List[Expr], cols: int, r1: int, r2: int):
    lo, hi = r1 * cols, r2 * cols
    entries[lo:lo + cols], entries[hi:hi + cols] = entries[hi:hi + cols], entries[lo:lo + cols]


def _pivot(entries: List[Expr], rows: int, cols: int, ro: int, co: int, symbolic: bool) -> int:
    k = ro
    if symbolic:
        # first non-zero element in column co at or below row ro
        while k < rows and ring.is_zero(entries[k * cols + co]):
            k += 1
    else:
        # largest element in column co at or below row ro, first one wins ties
        largest = None
        for kk in range(ro, rows):
            value = entries[kk * cols + co]
            if not ring.is_number(value):
                raise InvalidArgumentError(f"numeric pivoting requires numbers, found {value} in row {kk}")
            size = ring.magnitude(value)
            if size != 0 and (largest is None or size > largest):
                largest = size
                k = kk
        if largest is None:
            k = rows
    if k == rows:
        return -1
    if k == ro:
        return 0
    _swap_rows(entries, cols, ro, k)
    return k


def pivot(mx, ro: int, co: int, symbolic: bool = True) -> int:
    """
    Partial pivoting for the elimination schemes.

    With symbolic=True the first row (from ro on) with a nonzero element in
    column co is chosen, otherwise the one whose element has the largest
    absolute value. The chosen row is swapped with row ro in place.

    Args:
        mx: Matrix to pivot
        ro: Row from where to begin
        co: Column to inspect
        symbolic: Pick the first nonzero element instead of the largest one

    Returns:
        0 if no interchange occurred, -1 if all candidates vanish and k > 0
        if rows ro and k were swapped

    Raises:
        InvalidArgumentError: If numeric pivoting meets an entry that is not a number
    """
    return _pivot(mx._m, mx.rows, mx.cols, ro, co, symbolic)


def gauss_elimination(mx, det: bool = False, symbolic: bool = True) -> int:
    """
    Ordinary Gaussian elimination.

    Fine for matrices with numeric entries, quite unsuited for symbolic ones
    since every division produces a new fraction. Non-numeric intermediate
    results are normalized.

    Args:
        mx: Matrix, reduced in place
        det: Only the diagonal is needed
        symbolic: Pivoting mode, see pivot()

    Returns:
        Sign of the row permutation, 0 if the matrix is singular
    """
    rows, cols, m = mx.rows, mx.cols, mx._m
    sign = 1
    r0 = 0
    for r1 in range(cols - 1):
        if r0 >= rows - 1:
            break
        indx = _pivot(m, rows, cols, r0, r1, symbolic)
        if indx == -1:
            sign = 0
            if det:
                return 0
            continue
        if indx > 0:
            sign = -sign
        for r2 in range(r0 + 1, rows):
            if not ring.is_zero(m[r2 * cols + r1]):
                piv = m[r2 * cols + r1] / m[r0 * cols + r1]
                for c in range(r1 + 1, cols):
                    value = m[r2 * cols + c] - piv * m[r0 * cols + c]
                    if not ring.is_number(value):
                        value = ring.normal(value)
                    m[r2 * cols + c] = value
            # fill up left hand side with zeros
            for c in range(r1 + 1):
                m[r2 * cols + c] = ring.ZERO
        if det:
            for c in range(r0 + 1, cols):
                m[r0 * cols + c] = ring.ZERO
        r0 += 1
    return sign


def division_free_elimination(mx, det: bool = False) -> int:
    """
    Division free elimination.

    Every step multiplies the remaining rows by the pivot, so the entries grow
    exponentially. Only sensible for small matrices.

    Args:
        mx: Matrix, reduced in place
        det: Only the diagonal is needed

    Returns:
        Sign of the row permutation, 0 if the matrix is singular
    """
    rows, cols, m = mx.rows, mx.cols, mx._m
    sign = 1
    r0 = 0
    for r1 in range(cols - 1):
        if r0 >= rows - 1:
            break
        indx = _pivot(m, rows, cols, r0, r1, True)
        if indx == -1:
            sign = 0
            if det:
                return 0
            continue
        if indx > 0:
            sign = -sign
        for r2 in range(r0 + 1, rows):
            for c in range(r1 + 1, cols):
                m[r2 * cols + c] = ring.expand(m[r0 * cols + r1] * m[r2 * cols + c] -
                                               m[r2 * cols + r1] * m[r0 * cols + c])
            for c in range(r1 + 1):
                m[r2 * cols + c] = ring.ZERO
        if det:
            for c in range(r0 + 1, cols):
                m[r0 * cols + c] = ring.ZERO
        r0 += 1
    return sign


def fraction_free_elimination(mx, det: bool = False) -> int:
    """
    Bareiss' one-step fraction free elimination.

    Division free elimination sets m[0](r,c) = m(r,c) and then
        m[k+1](r,c) = m[k](k,k) * m[k](r,c) - m[k](r,k) * m[k](k,c).
    Bareiss elimination in addition divides by m[k-1](k-1,k-1) for k > 1,
    which by Sylvester's determinant identity always divides exactly. No GCDs
    are needed.

    Rational functions are handled by keeping numerators and denominators in
    two separate grids and working in the polynomial ring for each of them
    (N{x} numerator, D{x} denominator of x):
        N{m[k+1](r,c)} = N{m[k](k,k)} N{m[k](r,c)} D{m[k](r,k)} D{m[k](k,c)}
                        -N{m[k](r,k)} N{m[k](k,c)} D{m[k](k,k)} D{m[k](r,c)}
        D{m[k+1](r,c)} = D{m[k](k,k)} D{m[k](r,c)} D{m[k](r,k)} D{m[k](k,c)}
    divided by N{m[k-1](k-1,k-1)} and D{m[k-1](k-1,k-1)} respectively.
    Non-polynomial sub-expressions are replaced by symbols before and put back
    after the elimination.

    Args:
        mx: Matrix, reduced in place
        det: Only the last element is needed

    Returns:
        Sign of the row permutation, 0 if the matrix is singular

    Raises:
        InternalConsistencyFault: If one of the exact divisions fails
    """
    rows, cols = mx.rows, mx.cols
    if rows == 1:
        return 1
    sign = 1
    replacements = {}
    tmp_n, tmp_d = [], []
    for value in mx._m:
        num, den = ring.numer_denom(ring.rationalize(ring.normal(value), replacements))
        tmp_n.append(num)
        tmp_d.append(den)
    gens = ring.generators(tmp_n + tmp_d)
    divisor_n = ring.ONE
    divisor_d = ring.ONE

    r0 = 0
    for r1 in range(cols - 1):
        if r0 >= rows - 1:
            break
        indx = _pivot(tmp_n, rows, cols, r0, r1, True)
        if indx == -1:
            sign = 0
            if det:
                return 0
            continue
        if indx > 0:
            sign = -sign
            # tmp_n's rows r0 and indx were swapped, do the same in tmp_d
            _swap_rows(tmp_d, cols, r0, indx)
        p_n, p_d = tmp_n[r0 * cols + r1], tmp_d[r0 * cols + r1]
        for r2 in range(r0 + 1, rows):
            f_n, f_d = tmp_n[r2 * cols + r1], tmp_d[r2 * cols + r1]
            for c in range(r1 + 1, cols):
                dividend_n = ring.expand(p_n * tmp_n[r2 * cols + c] * f_d * tmp_d[r0 * cols + c] -
                                         f_n * tmp_n[r0 * cols + c] * p_d * tmp_d[r2 * cols + c])
                dividend_d = ring.expand(f_d * tmp_d[r0 * cols + c] * p_d * tmp_d[r2 * cols + c])
                tmp_n[r2 * cols + c] = ring.exact_quotient(dividend_n, divisor_n, gens)
                tmp_d[r2 * cols + c] = ring.exact_quotient(dividend_d, divisor_d, gens)
            for c in range(r1 + 1):
                tmp_n[r2 * cols + c] = ring.ZERO
        divisor_n = ring.expand(p_n)
        divisor_d = ring.expand(p_d)
        if det:
            for c in range(cols):
                tmp_n[r0 * cols + c] = ring.ZERO
                tmp_d[r0 * cols + c] = ring.ONE
        r0 += 1

    LOG.debug(f"Fraction free elimination of {rows}x{cols} matrix: {len(gens)} generators, "
              f"{len(replacements)} substituted sub-expressions, sign {sign}")
    for i, (num, den) in enumerate(zip(tmp_n, tmp_d)):
        mx._m[i] = ring.restore(num / den, replacements)
    return sign
