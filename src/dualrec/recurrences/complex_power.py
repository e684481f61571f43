"""Complex numbers as pairs (a, b) = a + b*i: repeated squaring and multiplication.

Each recurrence comes as a pair of evaluators that must agree:

- a *recursive* form, where ``a(n)`` and ``b(n)`` call each other at ``n - 1``
  and bottom out at ``n = 0`` with the seed;
- an *iterative* form, the one-step transition composed ``n`` times.

Squaring n times computes (a0 + b0*i) ** (2**n); multiplying n times by
(a1 + b1*i) computes (a0 + b0*i) * (a1 + b1*i) ** n.
"""
from __future__ import annotations

from functools import lru_cache
from typing import Callable

from dualrec.compose.engine import Step, compose_n
from dualrec.numeric.gaussian import Exact, I, as_exact, demote

Pair = tuple[Exact, Exact]


def _check_index(n, name: str = "n") -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {n!r}")
    if n < 0:
        raise ValueError(f"{name} must be >= 0, got {n}")


def square_step(a, b) -> Pair:
    """(a + b*i) ** 2 as a pair."""
    return (demote(a * a - b * b), demote(2 * a * b))


def squaring_recursive(a0, b0) -> Callable[[int], Pair]:
    """
    Recursive evaluator for repeated squaring from the seed (a0, b0).

    Returns ``at(n) -> (a(n), b(n))`` with
      a(n) = a(n-1)**2 - b(n-1)**2,  b(n) = 2*a(n-1)*b(n-1),
      a(0) = a0,  b(0) = b0.
    """
    a0, b0 = as_exact(a0), as_exact(b0)

    @lru_cache(maxsize=None)
    def a(n: int):
        if n == 0:
            return a0
        return demote(a(n - 1) ** 2 - b(n - 1) ** 2)

    @lru_cache(maxsize=None)
    def b(n: int):
        if n == 0:
            return b0
        return demote(2 * a(n - 1) * b(n - 1))

    def at(n: int) -> Pair:
        _check_index(n)
        # fill the caches bottom-up so deep indices do not hit the recursion limit
        for j in range(n):
            a(j), b(j)
        return (a(n), b(n))

    return at


def squaring_iterative(n: int) -> Step:
    """``square_step`` composed n times; call the result with (a0, b0)."""
    return compose_n(square_step, n, arity=2, coerce=as_exact)


def multiply_step(a1, b1) -> Step:
    """Step that multiplies (a0 + b0*i) by the fixed (a1 + b1*i)."""
    a1, b1 = as_exact(a1), as_exact(b1)

    def step(a0, b0) -> Pair:
        return (demote(a1 * a0 - b1 * b0), demote(a1 * b0 + b1 * a0))

    step.__name__ = f"times({a1},{b1})"
    return step


def multiplication_recursive(a0, b0, a1, b1) -> Callable[[int], Pair]:
    """
    Recursive evaluator for (a0 + b0*i) * (a1 + b1*i) ** m over the
    multiplier count m:
      a(m) = a1*a(m-1) - b1*b(m-1),  b(m) = a1*b(m-1) + b1*a(m-1),
      a(0) = a0,  b(0) = b0.
    """
    a0, b0, a1, b1 = (as_exact(v) for v in (a0, b0, a1, b1))

    @lru_cache(maxsize=None)
    def a(m: int):
        if m == 0:
            return a0
        return demote(a1 * a(m - 1) - b1 * b(m - 1))

    @lru_cache(maxsize=None)
    def b(m: int):
        if m == 0:
            return b0
        return demote(a1 * b(m - 1) + b1 * a(m - 1))

    def at(m: int) -> Pair:
        _check_index(m, "m")
        # fill the caches bottom-up so deep indices do not hit the recursion limit
        for j in range(m):
            a(j), b(j)
        return (a(m), b(m))

    return at


def multiplication_iterative(a1, b1, n: int) -> Step:
    """``multiply_step(a1, b1)`` composed n times; call with (a0, b0)."""
    return compose_n(multiply_step(a1, b1), n, arity=2, coerce=as_exact)


def to_gaussian(a, b) -> Exact:
    """Pack the pair (a, b) into the single exact number a + b*i."""
    return demote(as_exact(a) + as_exact(b) * I)


def complex_power(a0, b0, e: int) -> Pair:
    """(a0 + b0*i) ** e for e >= 0, by e - 1 multiplications of the seed."""
    _check_index(e, "e")
    if e == 0:
        return (1, 0)
    return multiplication_iterative(a0, b0, e - 1)(as_exact(a0), as_exact(b0))
