"""2x2 matrix algebra over the exact numeric tower.

A matrix is the row-major 4-tuple (a, b, c, d) standing for [[a, b], [c, d]].
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Union

import sympy

from dualrec.numeric.gaussian import Exact, as_exact, demote, to_sympy, from_sympy


@dataclass(frozen=True)
class Matrix:
    """
    Immutable 2x2 matrix [[a, b], [c, d]].

    Entries are coerced to exact numbers on construction; equality is
    elementwise exact equality.
    """

    a: Exact
    b: Exact
    c: Exact
    d: Exact

    def __post_init__(self) -> None:
        for name in ("a", "b", "c", "d"):
            object.__setattr__(self, name, as_exact(getattr(self, name)))

    def __iter__(self) -> Iterator[Exact]:
        return iter((self.a, self.b, self.c, self.d))

    def as_tuple(self) -> tuple[Exact, Exact, Exact, Exact]:
        return (self.a, self.b, self.c, self.d)


MatrixLike = Union[Matrix, Iterable]

IDENTITY = Matrix(1, 0, 0, 1)
ZERO = Matrix(0, 0, 0, 0)


def as_matrix(value: MatrixLike) -> Matrix:
    """Return ``value`` as a Matrix; any length-4 iterable is accepted."""
    if isinstance(value, Matrix):
        return value
    entries = tuple(value)
    if len(entries) != 4:
        raise ValueError(f"a 2x2 matrix needs 4 entries, got {len(entries)}: {entries!r}")
    return Matrix(*entries)


def add(A: MatrixLike, A1: MatrixLike) -> Matrix:
    """Elementwise sum."""
    A, A1 = as_matrix(A), as_matrix(A1)
    return Matrix(*(demote(x + y) for x, y in zip(A, A1)))


def multiply(A: MatrixLike, A1: MatrixLike) -> Matrix:
    """Matrix product A * A1."""
    a, b, c, d = as_matrix(A)
    a1, b1, c1, d1 = as_matrix(A1)
    return Matrix(
        demote(a * a1 + b * c1),
        demote(a * b1 + b * d1),
        demote(a1 * c + d * c1),
        demote(c * b1 + d * d1),
    )


def scale(k: Exact, A: MatrixLike) -> Matrix:
    """Scalar multiple k * A."""
    k = as_exact(k)
    return Matrix(*(demote(k * x) for x in as_matrix(A)))


def equal(A: MatrixLike, B: MatrixLike) -> bool:
    """Exact elementwise equality (complex-aware, no tolerance)."""
    A, B = as_matrix(A), as_matrix(B)
    return all(x == y for x, y in zip(A, B))


def matrix_power(A: MatrixLike, N: int) -> Matrix:
    """
    A**N by repeated multiplication: starting from the identity, exactly N
    applications of :func:`multiply`.
    """
    if isinstance(N, bool) or not isinstance(N, int):
        raise TypeError(f"exponent must be an int, got {N!r}")
    if N < 0:
        raise ValueError(f"exponent must be >= 0, got {N}")
    A = as_matrix(A)
    out = IDENTITY
    for _ in range(N):
        out = multiply(out, A)
    return out


def to_sympy_matrix(A: MatrixLike) -> sympy.Matrix:
    a, b, c, d = (to_sympy(x) for x in as_matrix(A))
    return sympy.Matrix([[a, b], [c, d]])


def from_sympy_matrix(M: sympy.Matrix) -> Matrix:
    if M.shape != (2, 2):
        raise ValueError(f"expected a 2x2 sympy Matrix, got shape {M.shape}")
    return Matrix(*(from_sympy(M[i, j]) for i in range(2) for j in range(2)))
