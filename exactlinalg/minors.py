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
"""Determinants by Laplace expansion with memoized minors"""

from itertools import combinations
from typing import Dict, List, Sequence, Tuple

from sympy import Expr

from . import ring


def permutation_sign(seq: Sequence) -> int:
    """
    Sign of the permutation that sorts seq.

    Args:
        seq: Sequence of mutually comparable items

    Returns:
        1 for an even and -1 for an odd number of inversions, 0 if two items
        are equal
    """
    sign = 1
    items = list(seq)
    for i in range(len(items)):
        for j in range(i + 1, len(items)):
            if items[i] == items[j]:
                return 0
            if items[j] < items[i]:
                sign = -sign
    return sign


def _minor_expansion(m: List[Expr], n: int) -> Expr:
    # for small matrices the bookkeeping does not pay off
    if n == 1:
        return ring.expand(m[0])
    if n == 2:
        return ring.expand(m[0] * m[3] - m[2] * m[1])
    if n == 3:
        return ring.expand(m[0] * m[4] * m[8] - m[0] * m[5] * m[7] -
                           m[1] * m[3] * m[8] + m[2] * m[3] * m[7] +
                           m[1] * m[5] * m[6] - m[2] * m[4] * m[6])

    # Naive Laplace expansion along the first column computes the same minors
    # over and over: there are binomial(n,k) kxk minors and each one is
    # computed factorial(n-k) times. We proceed from the rightmost column to
    # the left instead and keep the minors of the previous column only, keyed
    # by the rows they arise from. At most 2*binomial(n,n/2) of them are alive
    # at any time. Vanishing minors are not stored.
    previous: Dict[Tuple[int, ...], Expr] = {}
    for r in range(n):
        if not ring.is_zero(m[r * n + n - 1]):
            previous[(r,)] = m[r * n + n - 1]
    det = ring.ZERO
    for c in range(n - 2, -1, -1):
        current: Dict[Tuple[int, ...], Expr] = {}
        for key in combinations(range(n), n - c):
            det = ring.ZERO
            for i, r in enumerate(key):
                entry = m[r * n + c]
                if ring.is_zero(entry):
                    continue
                minor = previous.get(key[:i] + key[i + 1:])
                if minor is None:
                    continue
                if i % 2:
                    det -= entry * minor
                else:
                    det += entry * minor
            # expanding right away prevents deep nesting
            det = ring.expand(det)
            if det != ring.ZERO:
                current[key] = det
        previous = current
    return det


def determinant_minor(mx) -> Expr:
    """
    Determinant of a square matrix by memoized minor expansion.

    According to Gentleman and Johnson this beats elimination schemes for
    matrices of sparse multivariate polynomials and for dense univariate
    polynomials beyond dimension 7.

    Args:
        mx: Square matrix

    Returns:
        The determinant in expanded form
    """
    return _minor_expansion(list(mx._m), mx.cols)


def laplace_determinant(mx) -> Expr:
    """
    Minor expansion after moving the emptiest columns to the right.

    Expansion works from the right, so the columns with the most zeros are
    best placed there. The sign of the column permutation is folded into the
    result.

    Args:
        mx: Square matrix

    Returns:
        The determinant in expanded form
    """
    n = mx.cols
    if n <= 3:
        return determinant_minor(mx)
    zeros = [sum(1 for r in range(n) if ring.is_zero(mx._m[r * n + c])) for c in range(n)]
    order = sorted(range(n), key=lambda c: (zeros[c], c))
    sign = permutation_sign(order)
    entries = [mx._m[r * n + c] for r in range(n) for c in order]
    return ring.expand(sign * _minor_expansion(entries, n))
