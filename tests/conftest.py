import pytest
import sympy
from exactlinalg.names import *


@pytest.fixture(params=[GAUSS, BAREISS, DIVFREE, LAPLACE], scope="session")
def det_algo(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized determinant algorithms."""
    return request.param


@pytest.fixture(params=[GAUSS, BAREISS, DIVFREE], scope="session")
def solve_algo(request: pytest.FixtureRequest) -> str:
    """Provide session-level fixture for parametrized elimination schemes of solve()."""
    return request.param


@pytest.fixture(scope="session")
def symbols():
    """Symbols shared by the symbolic test matrices."""
    return sympy.symbols('a b c d t x y z lam')
