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
"""Ring element capabilities for exact symbolic matrices

Matrix entries are sympy expressions. This module collects everything the
matrix algorithms need to know about them: conversion of user input, zero
tests, canonical forms and a handful of predicates. The algorithms never look
at the class of an entry directly, they only ask these functions.
"""

from fractions import Fraction
from typing import Dict, Iterable, List, Tuple, Union

import numpy as np
import sympy
from sympy import Basic, Dummy, Expr, Float, Integer, Poly, QQ, Rational, Symbol, S, default_sort_key

from .errors import InternalConsistencyFault

# Type alias for anything that can be turned into a matrix entry
Scalar = Union[int, float, Fraction, str, Expr]

# Replacement table used by rationalize(): sub-expression -> stand-in symbol
Replacements = Dict[Expr, Dummy]

ZERO = S.Zero
ONE = S.One
MINUS_ONE = S.NegativeOne


def float_to_rational(value: float) -> Rational:
    """
    Closest fraction with a denominator of at most one million.

    This loses precision: 0.1 becomes 1/10 rather than the binary value the
    float actually holds. Floats too small for such a denominator would come
    out as zero, those are converted exactly instead so that nonzero input
    stays nonzero.
    """
    frac = Fraction(value).limit_denominator()
    if frac == 0 and value != 0:
        frac = Fraction(value)
    return Rational(frac.numerator, frac.denominator)


def to_element(value: Scalar) -> Expr:
    """
    Convert a value to a ring element.

    Floats are not kept as floats, neither Python floats nor sympy Floats
    inside an expression. They are replaced by nearby fractions, see
    float_to_rational().

    Args:
        value: An int, float, Fraction, numpy scalar, string or sympy expression

    Returns:
        sympy expression representing the value

    Raises:
        TypeError: If the value does not denote an algebraic expression
    """
    if isinstance(value, Basic):
        element = value
    else:
        if isinstance(value, np.generic):
            value = value.item()
        if isinstance(value, bool):
            raise TypeError(f"Cannot convert {type(value)} to a ring element")
        if isinstance(value, int):
            return Integer(value)
        if isinstance(value, Fraction):
            return Rational(value.numerator, value.denominator)
        if isinstance(value, float):
            return float_to_rational(value)
        element = sympy.sympify(value)
    if not isinstance(element, Expr):
        raise TypeError(f"Cannot convert {type(value)} to a ring element")
    floats = element.atoms(Float)
    if floats:
        element = element.xreplace({f: float_to_rational(float(f)) for f in floats})
    return element


def expand(value: Expr) -> Expr:
    """Polynomial canonical form (fully multiplied out)."""
    return sympy.expand(value)


def normal(value: Expr) -> Expr:
    """Rational canonical form, i.e. numerator over denominator in lowest terms."""
    if value.is_Number:
        return value
    return sympy.cancel(value)


def collect(value: Expr, symbol: Symbol) -> Expr:
    """Expanded form with terms collected in powers of symbol."""
    return sympy.collect(sympy.expand(value), symbol)


def is_zero(value: Expr) -> bool:
    """
    Test an element for zero.

    The test is exact for polynomials. For rational functions and nested
    transcendental expressions it is a best effort since only expand() is
    applied before comparing.
    """
    if value.is_Number:
        return value == ZERO
    return sympy.expand(value) == ZERO


def is_number(value: Expr) -> bool:
    """True for plain numbers (no symbols, no unevaluated functions)."""
    return bool(value.is_Number)


def is_symbol(value: Expr) -> bool:
    return isinstance(value, Symbol)


def is_integer(value: Expr) -> bool:
    return bool(value.is_Integer)


def is_negative(value: Expr) -> bool:
    return is_number(value) and bool(value.is_negative)


def is_commutative(value: Expr) -> bool:
    return value.is_commutative is not False


def magnitude(value: Expr) -> Expr:
    """
    Absolute value of a plain number.

    Raises:
        ValueError: If value is not a plain number
    """
    if not is_number(value):
        raise ValueError(f"magnitude is only defined for numbers, got {value}")
    return abs(value)


def rationalize(value: Expr, replacements: Replacements) -> Expr:
    """
    Replace every non-polynomial sub-expression by a stand-in symbol.

    The result is a rational function in symbols with rational coefficients.
    Sums, products, integer powers, rational numbers and symbols are kept,
    everything else (sqrt(2), sin(x), x**y, the imaginary unit, ...) is
    swapped for a Dummy. Equal sub-expressions share one stand-in, and the
    table may be shared between several calls so that a whole matrix is
    substituted consistently.

    Args:
        value: Expression to rationalize
        replacements: Table of substitutions, extended in place

    Returns:
        The rationalized expression
    """
    if value.is_Rational or value.is_Symbol:
        return value
    if value.is_Add or value.is_Mul:
        return value.func(*[rationalize(arg, replacements) for arg in value.args])
    if value.is_Pow and value.exp.is_Integer:
        return rationalize(value.base, replacements)**value.exp
    stand_in = replacements.get(value)
    if stand_in is None:
        stand_in = Dummy('r')
        replacements[value] = stand_in
    return stand_in


def restore(value: Expr, replacements: Replacements) -> Expr:
    """Undo the substitutions of rationalize()."""
    if not replacements:
        return value
    return value.xreplace({stand_in: original for original, stand_in in replacements.items()})


def numer_denom(value: Expr) -> Tuple[Expr, Expr]:
    """
    Split a rationalized expression into expanded numerator and denominator.

    Args:
        value: Rational function in symbols, see rationalize()

    Returns:
        Tuple of (numerator, denominator) with common factors cancelled
    """
    num, den = sympy.fraction(sympy.cancel(value))
    return sympy.expand(num), sympy.expand(den)


def is_rational_function(value: Expr) -> bool:
    """True if the value is a rational function whose denominator is not a plain number."""
    _, den = sympy.fraction(sympy.together(rationalize(value, {})))
    return bool(den.free_symbols)


def generators(values: Iterable[Expr]) -> List[Symbol]:
    """All symbols occurring in values, in a deterministic order."""
    symbols = set()
    for value in values:
        symbols.update(value.free_symbols)
    return sorted(symbols, key=default_sort_key)


def exact_quotient(dividend: Expr, divisor: Expr, gens: List[Symbol]) -> Expr:
    """
    Divide two polynomials whose quotient is known to be a polynomial.

    Args:
        dividend: Polynomial in gens with rational coefficients
        divisor: Nonzero polynomial in gens with rational coefficients
        gens: Generators of the polynomial ring

    Returns:
        The exact quotient in expanded form

    Raises:
        InternalConsistencyFault: If the division leaves a remainder
    """
    if divisor == ONE:
        return dividend
    if divisor == ZERO:
        raise InternalConsistencyFault(f"exact division of {dividend} by zero")
    if not gens:
        return dividend / divisor
    quotient, remainder = Poly(dividend, *gens, domain=QQ).div(Poly(divisor, *gens, domain=QQ))
    if not remainder.is_zero:
        raise InternalConsistencyFault(f"{divisor} does not divide {dividend} (remainder {remainder.as_expr()})")
    return quotient.as_expr()
