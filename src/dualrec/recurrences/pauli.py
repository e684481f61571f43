"""Pauli combinations and their repeated squaring.

Every 2x2 matrix over the exact complex numbers is uniquely

    A = w*I + x*s1 + y*s2 + z*s3

with s1 = [[0, 1], [1, 0]], s2 = [[0, -i], [i, 0]], s3 = [[1, 0], [0, -1]].
``pauli_combination`` and ``pauli_solve`` are the two directions of that
bijection and are exact inverses of each other.

Because the s_k anticommute and square to I, squaring a combination only
needs its coefficients:

    (w, x, y, z) ** 2 = (w**2 + x**2 + y**2 + z**2, 2wx, 2wy, 2wz)

so q ** (2**n) can be computed either by n squarings in coefficient space or
by 2**n matrix multiplications followed by ``pauli_solve``.
"""
from __future__ import annotations

from fractions import Fraction
from functools import lru_cache
from typing import Callable

from dualrec.compose.engine import Step, compose_n
from dualrec.matrix.algebra import (
    IDENTITY,
    Matrix,
    MatrixLike,
    add,
    as_matrix,
    matrix_power,
    scale,
)
from dualrec.numeric.gaussian import Exact, GaussianRational, I, as_exact, demote

Coefficients = tuple[Exact, Exact, Exact, Exact]

SIGMA_1 = Matrix(0, 1, 1, 0)
SIGMA_2 = Matrix(0, -I, I, 0)
SIGMA_3 = Matrix(1, 0, 0, -1)

_HALF = Fraction(1, 2)
_MINUS_HALF_I = GaussianRational(0, Fraction(-1, 2))


def pauli_combination(w, x, y, z) -> Matrix:
    """The matrix w*I + x*s1 + y*s2 + z*s3."""
    return add(
        add(scale(w, IDENTITY), scale(x, SIGMA_1)),
        add(scale(y, SIGMA_2), scale(z, SIGMA_3)),
    )


def pauli_solve(A: MatrixLike) -> Coefficients:
    """Coefficients (w, x, y, z) of A in the Pauli basis."""
    a, b, c, d = as_matrix(A)
    return (
        demote(_HALF * (a + d)),
        demote(_HALF * (c + b)),
        demote(_MINUS_HALF_I * (c - b)),
        demote(_HALF * (a - d)),
    )


def pauli_product(p, q) -> Coefficients:
    """
    Coefficients of pauli_combination(*p) @ pauli_combination(*q).

    With p = (w1, v1) and q = (w2, v2) split into scalar and vector parts:
      (w1*w2 + v1.v2,  w1*v2 + w2*v1 + i * v1 x v2)
    """
    w1, x1, y1, z1 = _coefficients(p)
    w2, x2, y2, z2 = _coefficients(q)
    w = w1 * w2 + x1 * x2 + y1 * y2 + z1 * z2
    x = w1 * x2 + w2 * x1 + I * (y1 * z2 - z1 * y2)
    y = w1 * y2 + w2 * y1 + I * (z1 * x2 - x1 * z2)
    z = w1 * z2 + w2 * z1 + I * (x1 * y2 - y1 * x2)
    return (demote(w), demote(x), demote(y), demote(z))


def _coefficients(p) -> Coefficients:
    p = tuple(p)
    if len(p) != 4:
        raise ValueError(f"Pauli coefficients need 4 entries, got {len(p)}: {p!r}")
    return tuple(as_exact(v) for v in p)


# ---------------------------------------------------------------------------
# Squaring recurrence
# ---------------------------------------------------------------------------

def square_step(w, x, y, z) -> Coefficients:
    """Coefficients of (w*I + x*s1 + y*s2 + z*s3) ** 2."""
    return (
        demote(w * w + x * x + y * y + z * z),
        demote(2 * w * x),
        demote(2 * w * y),
        demote(2 * w * z),
    )


def squaring_recursive(w0, x0, y0, z0) -> Callable[[int], Coefficients]:
    """
    Recursive evaluator: ``at(n)`` gives the coefficients of q ** (2**n)
    for q = (w0, x0, y0, z0), with w, x, y, z each recursing at n - 1 and
    returning the seed at n = 0.
    """
    w0, x0, y0, z0 = _coefficients((w0, x0, y0, z0))

    @lru_cache(maxsize=None)
    def w(n: int):
        if n == 0:
            return w0
        return demote(w(n - 1) ** 2 + x(n - 1) ** 2 + y(n - 1) ** 2 + z(n - 1) ** 2)

    @lru_cache(maxsize=None)
    def x(n: int):
        if n == 0:
            return x0
        return demote(2 * w(n - 1) * x(n - 1))

    @lru_cache(maxsize=None)
    def y(n: int):
        if n == 0:
            return y0
        return demote(2 * w(n - 1) * y(n - 1))

    @lru_cache(maxsize=None)
    def z(n: int):
        if n == 0:
            return z0
        return demote(2 * w(n - 1) * z(n - 1))

    def at(n: int) -> Coefficients:
        if isinstance(n, bool) or not isinstance(n, int):
            raise TypeError(f"n must be an int, got {n!r}")
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        # fill the caches bottom-up so deep indices do not hit the recursion limit
        for j in range(n):
            w(j), x(j), y(j), z(j)
        return (w(n), x(n), y(n), z(n))

    return at


def squaring_iterative(n: int) -> Step:
    """``square_step`` composed n times; call with (w0, x0, y0, z0)."""
    return compose_n(square_step, n, arity=4, coerce=as_exact)


def pauli_power(w, x, y, z, N: int) -> Coefficients:
    """Coefficients of q ** N computed with N matrix multiplications."""
    return pauli_solve(matrix_power(pauli_combination(w, x, y, z), N))
