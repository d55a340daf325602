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
"""Dense matrices over exact symbolic ring elements

A Matrix stores rows * cols sympy expressions in a flat list in row-major
order. The shape never changes after construction. Arithmetic returns new
matrices, the only methods that modify a matrix are element assignment and
the explicitly in-place elimination methods.
"""

import functools
import numbers
from typing import Any, Callable, Dict, Iterable, List, Optional, Sequence, Tuple

import numpy as np
from scipy import sparse
from sympy import Expr

from . import ring
from .config import DEFAULT_POLICY, EliminationPolicy
from .errors import (DimensionMismatchError, IndexOutOfRangeError, InvalidArgumentError,
                     NonCommutativeScalarError)
from .names import AUTOMATIC, COL, ENTRIES, ROW
from . import elimination


@functools.total_ordering
class Matrix:
    """
    Dense rows x cols matrix with sympy expression entries.

    Entries are accessed with A[r, c]. Values of any type understood by
    ring.to_element() may be assigned.

    Example:
        >>> a, b = sympy.symbols('a b')
        >>> mx = Matrix.from_rows([[a, 1], [1, b]])
        >>> mx.determinant()
        a*b - 1
    """

    __hash__ = None

    def __init__(self, rows: int, cols: int, entries: Optional[Iterable] = None):
        """
        Initialize a matrix.

        Args:
            rows: Number of rows, at least 1
            cols: Number of columns, at least 1
            entries: Optional flat list of entries in row-major order. Missing
                entries are set to zero, excess entries are thrown away.
        """
        for dim in (rows, cols):
            if isinstance(dim, bool) or not isinstance(dim, numbers.Integral):
                raise InvalidArgumentError(f"matrix dimensions must be integers, got {rows!r}x{cols!r}")
        if rows < 1 or cols < 1:
            raise InvalidArgumentError(f"matrix dimensions must be positive, got {rows}x{cols}")
        self._rows = int(rows)
        self._cols = int(cols)
        self._m: List[Expr] = [ring.ZERO] * (self._rows * self._cols)
        if entries is not None:
            for i, value in enumerate(entries):
                if i >= len(self._m):
                    break
                self._m[i] = ring.to_element(value)

    @classmethod
    def _from_elements(cls, rows: int, cols: int, elements: List[Expr]) -> 'Matrix':
        # trusted constructor, elements are already converted and complete
        mx = cls.__new__(cls)
        mx._rows = rows
        mx._cols = cols
        mx._m = elements
        return mx

    @classmethod
    def from_rows(cls, data: Sequence[Sequence]) -> 'Matrix':
        """
        Create a matrix from a list of rows.

        Rows may differ in length, short rows are padded with zeros up to the
        length of the longest one.
        """
        rows = len(data)
        cols = max((len(row) for row in data), default=0)
        mx = cls(rows, cols)
        for r, row in enumerate(data):
            for c, value in enumerate(row):
                mx._m[r * cols + c] = ring.to_element(value)
        return mx

    @classmethod
    def diag(cls, values: Sequence) -> 'Matrix':
        """Square matrix with the given values on the diagonal."""
        n = len(values)
        mx = cls(n, n)
        for i, value in enumerate(values):
            mx._m[i * n + i] = ring.to_element(value)
        return mx

    @classmethod
    def identity(cls, n: int) -> 'Matrix':
        """n x n unit matrix."""
        return cls.diag([ring.ONE] * n)

    @classmethod
    def from_numpy(cls, array: np.ndarray) -> 'Matrix':
        """
        Create a matrix from a two-dimensional numpy array.

        Float entries are turned into nearby fractions, see ring.to_element().
        """
        array = np.asarray(array)
        if array.ndim != 2:
            raise InvalidArgumentError(f"expected a two-dimensional array, got shape {array.shape}")
        rows, cols = array.shape
        return cls(rows, cols, array.flat)

    @classmethod
    def from_sparse(cls, sparse_matrix: sparse.spmatrix) -> 'Matrix':
        """Create a matrix from a scipy sparse matrix."""
        rows, cols = sparse_matrix.shape
        mx = cls(rows, cols)
        # COO format for easy iteration
        coo = sparse.coo_matrix(sparse_matrix)
        for i, j, v in zip(coo.row, coo.col, coo.data):
            mx._m[i * cols + j] += ring.to_element(v)
        return mx

    # shape and element access

    @property
    def rows(self) -> int:
        return self._rows

    @property
    def cols(self) -> int:
        return self._cols

    @property
    def shape(self) -> Tuple[int, int]:
        return self._rows, self._cols

    def _index(self, key) -> int:
        try:
            ro, co = key
        except (TypeError, ValueError):
            raise TypeError(f"matrix indices must be (row, column) pairs, got {key!r}") from None
        if not (0 <= ro < self._rows and 0 <= co < self._cols):
            raise IndexOutOfRangeError(f"index ({ro}, {co}) out of range for {self._rows}x{self._cols} matrix")
        return ro * self._cols + co

    def __getitem__(self, key) -> Expr:
        return self._m[self._index(key)]

    def __setitem__(self, key, value):
        self._m[self._index(key)] = ring.to_element(value)

    def copy(self) -> 'Matrix':
        return self._from_elements(self._rows, self._cols, list(self._m))

    __copy__ = copy

    def __deepcopy__(self, memo):
        # entries are immutable
        return self.copy()

    def tolist(self) -> List[List[Expr]]:
        return [self._m[r * self._cols:(r + 1) * self._cols] for r in range(self._rows)]

    def to_numpy(self) -> np.ndarray:
        """Object array holding the entries."""
        array = np.empty((self._rows, self._cols), dtype=object)
        for r in range(self._rows):
            for c in range(self._cols):
                array[r, c] = self._m[r * self._cols + c]
        return array

    # arithmetic

    def _check_same_shape(self, other: 'Matrix', operation: str):
        if not isinstance(other, Matrix):
            raise TypeError(f"{operation}(): expected a Matrix, got {type(other)}")
        if self.shape != other.shape:
            raise DimensionMismatchError(f"{operation}(): incompatible matrices "
                                         f"{self._rows}x{self._cols} and {other.rows}x{other.cols}")

    def add(self, other: 'Matrix') -> 'Matrix':
        """Sum of matrices of equal shape."""
        self._check_same_shape(other, 'add')
        return self._from_elements(self._rows, self._cols, [a + b for a, b in zip(self._m, other._m)])

    def sub(self, other: 'Matrix') -> 'Matrix':
        """Difference of matrices of equal shape."""
        self._check_same_shape(other, 'sub')
        return self._from_elements(self._rows, self._cols, [a - b for a, b in zip(self._m, other._m)])

    def mul(self, other) -> 'Matrix':
        """
        Product with another matrix or with a scalar.

        Every product of two entries is expanded before it is summed up, which
        keeps the entries of repeated products from nesting.

        Raises:
            DimensionMismatchError: If the number of columns of self differs
                from the number of rows of other
        """
        if not isinstance(other, Matrix):
            return self.mul_scalar(other)
        if self._cols != other._rows:
            raise DimensionMismatchError(f"mul(): incompatible matrices "
                                         f"{self._rows}x{self._cols} and {other.rows}x{other.cols}")
        prod = [ring.ZERO] * (self._rows * other._cols)
        for r1 in range(self._rows):
            for c in range(self._cols):
                left = self._m[r1 * self._cols + c]
                if left == ring.ZERO:
                    continue
                for r2 in range(other._cols):
                    prod[r1 * other._cols + r2] += ring.expand(left * other._m[c * other._cols + r2])
        return self._from_elements(self._rows, other._cols, prod)

    def mul_scalar(self, scalar) -> 'Matrix':
        """
        Product with a scalar expression.

        Raises:
            NonCommutativeScalarError: If the scalar does not commute
        """
        scalar = ring.to_element(scalar)
        if not ring.is_commutative(scalar):
            raise NonCommutativeScalarError(f"mul_scalar(): non-commutative scalar {scalar}")
        return self._from_elements(self._rows, self._cols, [value * scalar for value in self._m])

    def pow(self, exponent, policy: EliminationPolicy = DEFAULT_POLICY) -> 'Matrix':
        """Integer power, see linalg.matrix_power()."""
        from .linalg import matrix_power
        return matrix_power(self, exponent, policy)

    def transpose(self) -> 'Matrix':
        trans = [self._m[c * self._cols + r] for r in range(self._cols) for c in range(self._rows)]
        return self._from_elements(self._cols, self._rows, trans)

    @property
    def T(self) -> 'Matrix':
        return self.transpose()

    def __add__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.sub(other)

    def __neg__(self):
        return self.mul_scalar(ring.MINUS_ONE)

    def __mul__(self, other):
        return self.mul(other)

    def __rmul__(self, other):
        return self.mul_scalar(other)

    def __matmul__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.mul(other)

    def __pow__(self, exponent):
        return self.pow(exponent)

    # entry-wise evaluation

    def applyfunc(self, func: Callable[[Expr], Any]) -> 'Matrix':
        """New matrix with func applied to every entry."""
        return self._from_elements(self._rows, self._cols, [ring.to_element(func(value)) for value in self._m])

    def subs(self, mapping: Dict) -> 'Matrix':
        return self.applyfunc(lambda value: value.subs(mapping))

    def expand(self) -> 'Matrix':
        return self.applyfunc(ring.expand)

    def normal(self) -> 'Matrix':
        return self.applyfunc(ring.normal)

    # linear algebra

    def trace(self) -> Expr:
        from .linalg import trace
        return trace(self)

    def determinant(self, algo: str = AUTOMATIC, policy: EliminationPolicy = DEFAULT_POLICY) -> Expr:
        """Determinant, see determinant.determinant()."""
        from .determinant import determinant
        return determinant(self, algo, policy)

    det = determinant

    def charpoly(self, lam, policy: EliminationPolicy = DEFAULT_POLICY) -> Expr:
        """Characteristic polynomial det(self - lam * 1), see linalg.charpoly()."""
        from .linalg import charpoly
        return charpoly(self, lam, policy)

    def inverse(self, policy: EliminationPolicy = DEFAULT_POLICY) -> 'Matrix':
        from .linalg import inverse
        return inverse(self, policy)

    def solve(self, unknowns: 'Matrix', rhs: 'Matrix', algo: str = AUTOMATIC,
              policy: EliminationPolicy = DEFAULT_POLICY) -> 'Matrix':
        """Solve self * unknowns == rhs, see solve.solve()."""
        from .solve import solve
        return solve(self, unknowns, rhs, algo, policy)

    # in-place elimination

    def pivot(self, ro: int, co: int, symbolic: bool = True) -> int:
        return elimination.pivot(self, ro, co, symbolic)

    def gauss_elimination(self, det: bool = False, symbolic: bool = True) -> int:
        return elimination.gauss_elimination(self, det, symbolic)

    def division_free_elimination(self, det: bool = False) -> int:
        return elimination.division_free_elimination(self, det)

    def fraction_free_elimination(self, det: bool = False) -> int:
        return elimination.fraction_free_elimination(self, det)

    # ordering

    def compare(self, other: 'Matrix') -> int:
        """
        Total order on matrices.

        Matrices are ordered by number of rows, then number of columns, then
        entry by entry in row-major order using sympy's canonical ordering.

        Returns:
            -1, 0 or 1
        """
        if self._rows != other._rows:
            return -1 if self._rows < other._rows else 1
        if self._cols != other._cols:
            return -1 if self._cols < other._cols else 1
        for a, b in zip(self._m, other._m):
            cmpval = a.compare(b)
            if cmpval != 0:
                return cmpval
        return 0

    def __eq__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.compare(other) == 0

    def __lt__(self, other):
        if not isinstance(other, Matrix):
            return NotImplemented
        return self.compare(other) < 0

    # archiving

    def to_archive(self) -> Dict[str, Any]:
        """Row count, column count and the flat list of entries."""
        return {ROW: self._rows, COL: self._cols, ENTRIES: list(self._m)}

    @classmethod
    def from_archive(cls, node: Dict[str, Any]) -> 'Matrix':
        """
        Rebuild a matrix written by to_archive().

        Raises:
            InvalidArgumentError: If the dimensions are missing
        """
        if ROW not in node or COL not in node:
            raise InvalidArgumentError("unknown matrix dimensions in archive")
        return cls(node[ROW], node[COL], node.get(ENTRIES, ()))

    def __getstate__(self):
        return self.to_archive()

    def __setstate__(self, state):
        restored = self.from_archive(state)
        self._rows, self._cols, self._m = restored._rows, restored._cols, restored._m

    # printing

    def __repr__(self):
        return f"Matrix({self.tolist()!r})"

    def __str__(self):
        return "[" + ",".join("[" + ",".join(str(value) for value in row) + "]" for row in self.tolist()) + "]"
