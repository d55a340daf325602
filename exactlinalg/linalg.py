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
"""Operations derived from products, traces and linear solves"""

import numbers

from sympy import Dummy, Expr

from . import ring
from .config import DEFAULT_POLICY, EliminationPolicy
from .determinant import determinant
from .errors import (InconsistentSystemError, InvalidArgumentError, NonSquareMatrixError, SingularMatrixError,
                     UnsupportedOperationError)
from .matrix import Matrix
from .solve import solve


def _require_square(mx: Matrix, operation: str):
    if mx.rows != mx.cols:
        raise NonSquareMatrixError(f"{operation}(): matrix not square ({mx.rows}x{mx.cols})")


def trace(mx: Matrix) -> Expr:
    """
    Sum of the diagonal elements.

    The result is normalized if it is in a quotient field and expanded
    otherwise, so the trace of [[a/(a-b),x],[y,b/(b-a)]] is recognized as 1.
    """
    _require_square(mx, 'trace')
    tr = ring.ZERO
    for r in range(mx.rows):
        tr += mx[r, r]
    if ring.is_rational_function(tr):
        return ring.normal(tr)
    return ring.expand(tr)


def inverse(mx: Matrix, policy: EliminationPolicy = DEFAULT_POLICY) -> Matrix:
    """
    Inverse of a square matrix, obtained by solving mx * X == 1.

    Raises:
        NonSquareMatrixError: If the matrix is not square
        SingularMatrixError: If the matrix is not invertible
    """
    _require_square(mx, 'inverse')
    n = mx.rows
    identity = Matrix.identity(n)
    # solve() wants a matrix of symbols to support under-determined systems
    unknowns = Matrix(n, n, [Dummy('x') for _ in range(n * n)])
    try:
        return solve(mx, unknowns, identity, policy=policy)
    except InconsistentSystemError as e:
        raise SingularMatrixError("inverse(): singular matrix") from e


def charpoly(mx: Matrix, lam: Expr, policy: EliminationPolicy = DEFAULT_POLICY) -> Expr:
    """
    Characteristic polynomial det(mx - lam * 1), collected in powers of lam.

    Note that some systems put the sign the other way round, det(lam * 1 - mx),
    which differs by an overall sign for odd dimensions.

    Purely numeric matrices are handled by Leverrier's algorithm, which
    needs one matrix product per coefficient. Otherwise the determinant of
    mx - lam * 1 is computed.

    Args:
        mx: Square matrix
        lam: Symbol of the polynomial
        policy: Thresholds for the determinant algorithm selection

    Returns:
        The characteristic polynomial

    Raises:
        NonSquareMatrixError: If the matrix is not square
        InvalidArgumentError: If lam is not a symbol
    """
    _require_square(mx, 'charpoly')
    lam = ring.to_element(lam)
    if not ring.is_symbol(lam):
        raise InvalidArgumentError(f"charpoly(): {lam} is not a symbol")
    n = mx.rows

    if all(ring.is_number(mx[r, c]) for r in range(n) for c in range(n)):
        # Leverrier: B_1 = A, c_k = tr(B_k)/k, B_(k+1) = A (B_k - c_k 1)
        b = mx.copy()
        c = trace(b)
        poly = lam**n - c * lam**(n - 1)
        for i in range(1, n):
            for j in range(n):
                b[j, j] = b[j, j] - c
            b = mx.mul(b)
            c = trace(b) / (i + 1)
            poly -= c * lam**(n - i - 1)
        # Leverrier yields det(lam * 1 - mx)
        if n % 2:
            poly = -poly
        return ring.collect(poly, lam)

    shifted = mx.copy()
    for r in range(n):
        shifted[r, r] = shifted[r, r] - lam
    return ring.collect(determinant(shifted, policy=policy), lam)


def matrix_power(mx: Matrix, exponent, policy: EliminationPolicy = DEFAULT_POLICY) -> Matrix:
    """
    Integer power of a square matrix by repeated squaring.

    Negative exponents invert the matrix first. The zeroth power is the
    identity, even for singular matrices.

    Args:
        mx: Square matrix
        exponent: Exact integer, floats are rejected even if integral
        policy: Thresholds for the inversion of negative powers

    Raises:
        NonSquareMatrixError: If the matrix is not square
        UnsupportedOperationError: If the exponent is not an integer
        SingularMatrixError: If the exponent is negative and the matrix singular
    """
    _require_square(mx, 'pow')
    if isinstance(exponent, numbers.Real) and not isinstance(exponent, numbers.Rational):
        raise UnsupportedOperationError(f"pow(): exponent must be an exact integer, got {exponent!r}")
    expn = ring.to_element(exponent)
    if not ring.is_integer(expn):
        raise UnsupportedOperationError(f"pow(): don't know how to handle exponent {exponent}")
    k = int(expn)
    if ring.is_negative(expn):
        base = inverse(mx, policy)
        k = -k
    else:
        base = mx.copy()
    result = Matrix.identity(mx.rows)
    while k:
        if k & 1:
            result = result.mul(base)
        k >>= 1
        if k:
            base = base.mul(base)
    return result
