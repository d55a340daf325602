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
"""Exact linear algebra over symbolic matrices

Determinants, inverses, characteristic polynomials and linear solves for
matrices whose entries are exact integers, rationals, polynomials or rational
functions (sympy expressions)."""

from .names import *
import logging


class DisableLogger():
    """Environment in which logging is disabled"""

    def __enter__(self):
        logging.disable(logging.CRITICAL)

    def __exit__(self, exit_type, exit_value, exit_traceback):
        logging.disable(logging.NOTSET)


from .errors import *
from .config import EliminationPolicy, DEFAULT_POLICY
from .matrix import Matrix
from .elimination import pivot, gauss_elimination, division_free_elimination, fraction_free_elimination
from .minors import permutation_sign, determinant_minor, laplace_determinant
from .determinant import MatrixStatistics, determinant, select_determinant_algorithm
from .solve import solve, select_solve_algorithm
from .linalg import trace, inverse, charpoly, matrix_power

__version__ = "1.0"
