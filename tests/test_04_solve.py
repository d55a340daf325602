"""Linear systems: unique, under-determined and inconsistent ones."""
import pytest
import sympy
from sympy import Rational

import exactlinalg as el
from exactlinalg import Matrix
from exactlinalg.names import *


def column(*values):
    return Matrix(len(values), 1, values)


def test_unique_numeric_solution(solve_algo, symbols):
    x, y = symbols[5:7]
    mx = Matrix.from_rows([[2, 1], [1, 3]])
    sol = mx.solve(column(x, y), column(3, 5), solve_algo)
    assert sol == column(Rational(4, 5), Rational(7, 5))


def test_unique_symbolic_solution(solve_algo, symbols):
    a, b = symbols[:2]
    x, y = symbols[5:7]
    mx = Matrix.from_rows([[a, 1], [1, b]])
    rhs = column(1, 2)
    sol = el.solve(mx, column(x, y), rhs, solve_algo)
    assert not sol[0, 0].free_symbols & {x, y}
    assert (mx * sol - rhs).normal() == Matrix(2, 1)


def test_several_right_hand_sides(symbols):
    x, y, z, lam = symbols[5:]
    mx = Matrix.from_rows([[2, 1], [1, 3]])
    unknowns = Matrix.from_rows([[x, y], [z, lam]])
    rhs = Matrix.from_rows([[3, 1], [5, 0]])
    sol = mx.solve(unknowns, rhs)
    assert sol.tolist() == [[Rational(4, 5), Rational(3, 5)], [Rational(7, 5), Rational(-1, 5)]]


def test_underdetermined_system_keeps_free_parameters(solve_algo, symbols):
    x, y = symbols[5:7]
    sol = Matrix.from_rows([[1, 1]]).solve(column(x, y), column(1), solve_algo)
    assert sol == column(1 - y, y)
    sol = Matrix.from_rows([[1, 1], [1, 1]]).solve(column(x, y), column(2, 2), solve_algo)
    assert sol == column(2 - y, y)


def test_free_parameter_between_pinned_unknowns(solve_algo, symbols):
    x, y, z = symbols[5:8]
    mx = Matrix.from_rows([[1, 0, 1], [0, 0, 1]])
    sol = mx.solve(column(x, y, z), column(1, 2), solve_algo)
    assert sol == column(-1, y, 2)


def test_inconsistent_system(solve_algo, symbols):
    x, y = symbols[5:7]
    with pytest.raises(el.InconsistentSystemError):
        Matrix.from_rows([[1, 1], [1, 1]]).solve(column(x, y), column(1, 2), solve_algo)
    with pytest.raises(ArithmeticError):
        Matrix.from_rows([[0, 0]]).solve(column(x, y), column(1), solve_algo)


def test_solve_arguments_are_checked(symbols):
    a, x, y = symbols[0], symbols[5], symbols[6]
    mx = Matrix.identity(2)
    with pytest.raises(el.DimensionMismatchError):
        mx.solve(column(x, y), column(1, 2, 3))
    with pytest.raises(el.DimensionMismatchError):
        mx.solve(column(x), column(1, 2))
    with pytest.raises(el.InvalidArgumentError):
        mx.solve(column(x, 2 * y), column(1, 2))
    with pytest.raises(el.InvalidArgumentError):
        mx.solve(column(x, y), column(1, 2), LAPLACE)
    # the coefficients are left alone
    mx = Matrix.from_rows([[a, 1], [1, 0]])
    mx.solve(column(x, y), column(1, 1))
    assert mx.tolist() == [[a, 1], [1, 0]]


def test_automatic_selection():
    assert el.select_solve_algorithm(2, numeric=False) == DIVFREE
    assert el.select_solve_algorithm(5, numeric=False) == BAREISS
    assert el.select_solve_algorithm(2, numeric=True) == GAUSS
    assert el.select_solve_algorithm(5, numeric=True) == GAUSS
    policy = el.EliminationPolicy(solve_divfree_below_rows=10)
    assert el.select_solve_algorithm(5, False, policy) == DIVFREE


def test_solution_satisfies_rational_system(solve_algo, symbols):
    a, b, c = symbols[:3]
    x, y, z = symbols[5:8]
    mx = Matrix.from_rows([[1 / a, b, 0], [1, 1, c], [0, a - b, 1]])
    rhs = column(1, 0, b)
    sol = mx.solve(column(x, y, z), rhs, solve_algo)
    residual = mx * sol - rhs
    assert all(sympy.cancel(value) == 0 for row in residual.tolist() for value in row)
