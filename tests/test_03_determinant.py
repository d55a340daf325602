"""Determinants: every algorithm, the automatic selection and the minor expansion."""
import pytest
import sympy
from sympy import Rational, cos, sin, sqrt

import exactlinalg as el
from exactlinalg import Matrix
from exactlinalg.names import *


def generic_matrix(n, name='m'):
    syms = sympy.symbols(f'{name}0:{n * n}')
    return Matrix(n, n, syms), sympy.Matrix(n, n, syms)


def test_two_by_two(det_algo):
    assert Matrix.from_rows([[1, 2], [3, 4]]).determinant(det_algo) == -2


def test_one_by_one(det_algo, symbols):
    a, b = symbols[:2]
    assert Matrix(1, 1, [(a + b)**2]).determinant(det_algo) == a**2 + 2 * a * b + b**2
    assert Matrix(1, 1, [a / (a * b)]).determinant(det_algo) == 1 / b


def test_diagonal(det_algo, symbols):
    t = symbols[4]
    assert Matrix.diag([t, t, t]).determinant(det_algo) == t**3


@pytest.mark.timeout(60)
def test_algorithms_agree_on_symbolic_matrix(det_algo):
    mx, reference = generic_matrix(4)
    assert sympy.expand(mx.determinant(det_algo) - reference.det(method='berkowitz')) == 0


def test_algorithms_agree_on_numeric_matrix(det_algo):
    rows = [[2, -1, 0, 3, Rational(1, 2)], [1, 4, -2, 0, 1], [0, 3, 5, -1, 2], [Rational(-3, 4), 0, 1, 2, 1],
            [1, 1, 1, 1, 7]]
    expected = sympy.Matrix(rows).det()
    assert Matrix.from_rows(rows).determinant(det_algo) == expected


def test_algorithms_agree_on_sparse_polynomial_matrix(det_algo, symbols):
    a, b, c, d, t, x = symbols[:6]
    rows = [[a, 0, 0, 0, 0, b], [0, x, 0, 1, 0, 0], [0, 0, c, 0, 0, 0], [t, 0, 0, d, 0, 0], [0, 0, 0, 0, x**2, 0],
            [1, 0, 0, 0, 0, a + b]]
    expected = sympy.Matrix(rows).det(method='berkowitz')
    assert sympy.expand(Matrix.from_rows(rows).determinant(det_algo) - expected) == 0


def test_rational_function_entries_are_normalized(det_algo, symbols):
    a, b = symbols[:2]
    mx = Matrix.from_rows([[a / (a - b), 1], [b / (a - b), 1]])
    assert mx.determinant(det_algo) == 1


def test_transcendental_entries(det_algo, symbols):
    x = symbols[5]
    mx = Matrix.from_rows([[sin(x), 1, 0, 2], [1, cos(x), x, 0], [0, x, sin(x), 1], [3, 0, 1, cos(x)]])
    expected = sympy.Matrix(mx.tolist()).det(method='berkowitz')
    assert sympy.expand(mx.determinant(det_algo) - expected) == 0


@pytest.mark.parametrize('algo', [BAREISS, LAPLACE])
def test_algebraic_number_entries(algo, symbols):
    x = symbols[5]
    mx = Matrix.from_rows([[sqrt(2), 1, x], [1, sqrt(2), 0], [x, 2, sqrt(3)]])
    expected = sympy.Matrix(mx.tolist()).det(method='berkowitz')
    assert sympy.expand(mx.determinant(algo) - expected) == 0
    assert sympy.expand(mx.determinant() - expected) == 0


def test_singular_matrix(det_algo, symbols):
    a, b = symbols[:2]
    mx = Matrix.from_rows([[a, b, 1], [2 * a, 2 * b, 2], [1, a, b]])
    assert mx.determinant(det_algo) == 0
    assert Matrix.from_rows([[0, 0], [0, 1]]).determinant(det_algo) == 0


def test_scaling_multiplies_by_power(det_algo, symbols):
    k = symbols[4]
    mx = Matrix.from_rows([[1, 2, 0], [3, -1, 4], [2, 2, 5]])
    assert sympy.expand(mx.mul_scalar(k).determinant(det_algo) - k**3 * mx.determinant(det_algo)) == 0


def test_determinant_leaves_matrix_untouched(det_algo):
    mx = Matrix.from_rows([[0, 1, 2], [3, 4, 5], [6, 7, 9]])
    before = mx.copy()
    mx.determinant(det_algo)
    assert mx == before


def test_determinant_errors():
    with pytest.raises(el.NonSquareMatrixError):
        Matrix(2, 3).determinant()
    with pytest.raises(el.InvalidArgumentError):
        Matrix.identity(2).determinant('cramer')


def test_statistics(symbols):
    x, y = symbols[5:7]
    stats = el.MatrixStatistics.gather(Matrix.from_rows([[x, 0], [1 / y, 2]]))
    assert stats.nonzero_count == 3
    assert not stats.numeric
    assert stats.rational_function
    stats = el.MatrixStatistics.gather(Matrix.from_rows([[1, 0], [Rational(1, 2), sqrt(2)]]))
    assert stats.nonzero_count == 3
    assert not stats.numeric
    assert not stats.rational_function
    assert el.MatrixStatistics.gather(Matrix.identity(3)).numeric


def test_automatic_selection(symbols):
    a, b, c, d, t, x = symbols[:6]
    numeric = el.MatrixStatistics(nonzero_count=16, numeric=True)
    assert el.select_determinant_algorithm(numeric, 4, 4) == GAUSS
    dense = el.MatrixStatistics(nonzero_count=16, numeric=False)
    assert el.select_determinant_algorithm(dense, 4, 4) == LAPLACE
    sparse = el.MatrixStatistics(nonzero_count=6, numeric=False)
    assert el.select_determinant_algorithm(sparse, 6, 6) == BAREISS
    assert el.select_determinant_algorithm(el.MatrixStatistics(nonzero_count=1, numeric=False), 3, 3) == LAPLACE
    policy = el.EliminationPolicy(laplace_max_rows=10)
    assert el.select_determinant_algorithm(sparse, 6, 6, policy) == LAPLACE


def test_policy_is_validated():
    with pytest.raises(el.InvalidArgumentError):
        el.EliminationPolicy(sparse_divisor=0)
    with pytest.raises(el.InvalidArgumentError):
        el.EliminationPolicy(laplace_max_rows=0)


def test_permutation_sign():
    assert el.permutation_sign([0, 1, 2, 3]) == 1
    assert el.permutation_sign([1, 0, 2]) == -1
    assert el.permutation_sign([2, 0, 1]) == 1
    assert el.permutation_sign([3, 2, 1, 0]) == 1
    assert el.permutation_sign([1, 1, 0]) == 0


def test_laplace_presorts_columns():
    # the zero pattern forces a column permutation before expansion
    rows = [[0, 1, 2, 0, 3], [0, 4, 0, 5, 1], [0, 2, 1, 0, 2], [6, 0, 3, 0, 4], [0, 1, 0, 2, 7]]
    mx = Matrix.from_rows(rows)
    expected = sympy.Matrix(rows).det()
    assert el.laplace_determinant(mx) == expected
    assert el.determinant_minor(mx) == expected


def test_minor_expansion_of_generic_matrix():
    mx, reference = generic_matrix(5)
    assert sympy.expand(el.determinant_minor(mx) - reference.det(method='berkowitz')) == 0
