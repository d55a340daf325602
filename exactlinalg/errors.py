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
"""Exceptions raised by the exactlinalg package

Every exception derives from MatrixError and from the builtin exception that
comes closest, so that callers may catch either."""


class MatrixError(Exception):
    """Base class of all errors raised by matrix operations"""


class DimensionMismatchError(MatrixError, ValueError):
    """Shapes of the operands are incompatible"""


class InvalidArgumentError(MatrixError, ValueError):
    """An argument has the right type but an unusable value"""


class NonSquareMatrixError(MatrixError, ValueError):
    """The operation is only defined for square matrices"""


class NonCommutativeScalarError(MatrixError, ValueError):
    """Scalar multiplication requires a commutative scalar"""


class SingularMatrixError(MatrixError, ArithmeticError):
    """The matrix has no inverse"""


class InconsistentSystemError(MatrixError, ArithmeticError):
    """The linear system has no solution"""


class IndexOutOfRangeError(MatrixError, IndexError):
    """Element access outside of the declared dimensions"""


class UnsupportedOperationError(MatrixError, NotImplementedError):
    """The requested operation is not implemented for these arguments"""


class InternalConsistencyFault(MatrixError, RuntimeError):
    """An exact division that must succeed did not.

    This points to a defect in the arithmetic backend, not to bad input."""
