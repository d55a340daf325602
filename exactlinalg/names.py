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
"""Static strings used in the exactlinalg package

    Determinant and elimination algorithms

        AUTOMATIC = 'automatic' # let the statistics of the matrix decide

        GAUSS = 'gauss' # ordinary elimination, for purely numeric matrices

        BAREISS = 'bareiss' # one-step fraction free elimination

        FRACTION_FREE = BAREISS

        DIVFREE = 'divfree' # division free elimination, small matrices only

        LAPLACE = 'laplace' # memoized minor expansion
        
    Archive keys

        ROW = 'row'

        COL = 'col'

        ENTRIES = 'm'
"""

AUTOMATIC = 'automatic'
GAUSS = 'gauss'
BAREISS = 'bareiss'
FRACTION_FREE = BAREISS
DIVFREE = 'divfree'
LAPLACE = 'laplace'

DETERMINANT_ALGORITHMS = (AUTOMATIC, GAUSS, BAREISS, DIVFREE, LAPLACE)
SOLVE_ALGORITHMS = (AUTOMATIC, GAUSS, BAREISS, DIVFREE)

ROW = 'row'
COL = 'col'
ENTRIES = 'm'
