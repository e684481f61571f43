"""Linear recurrences as step functions over a sliding window of terms.

The state of a k-term recurrence is the window (x(n), x(n-1), ..., x(n-k+1)),
newest first. One step shifts the window by one term.

Index conventions (these offsets are load-bearing):

Fibonacci
    seed (1, 1) = (F(2), F(1)).  F(n), n >= 2, takes n - 2 steps.
    The recursive form has its base at index 1 and is evaluated at n - 1.

No three consecutive heads
    h(n) = h(n-1) + h(n-2) + h(n-3), h(1) = 2, h(2) = 4, h(3) = 7.
    seed (7, 4, 2) = (h(3), h(2), h(1)).  h(n), n >= 3, takes n - 3 steps.
    The recursive form has its base at index 1 and is evaluated at n - 2.
"""
from __future__ import annotations

from functools import lru_cache
from itertools import product
from typing import Callable, Sequence

from dualrec.compose.engine import Step, compose_n
from dualrec.numeric.gaussian import Exact, as_exact, demote

FIBONACCI_SEED = (1, 1)
FIBONACCI_SEED_INDEX = 2

NO_THREE_HEADS_SEED = (7, 4, 2)
NO_THREE_HEADS_SEED_INDEX = 3

RECURSIVE_BASE_INDEX = 1


def _check_int(n, name: str, minimum: int) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"{name} must be an int, got {n!r}")
    if n < minimum:
        raise ValueError(f"{name} must be >= {minimum}, got {n}")


# ---------------------------------------------------------------------------
# Fibonacci
# ---------------------------------------------------------------------------

def fibonacci_step(a, b) -> tuple[Exact, Exact]:
    return (a + b, a)


def fibonacci_recursive(a1=1, b1=1) -> Callable[[int], tuple[Exact, Exact]]:
    """
    Recursive evaluator: a(i) = a(i-1) + b(i-1), b(i) = a(i-1),
    with (a(1), b(1)) = (a1, b1).
    """
    a1, b1 = as_exact(a1), as_exact(b1)

    @lru_cache(maxsize=None)
    def a(i: int):
        if i == RECURSIVE_BASE_INDEX:
            return a1
        return a(i - 1) + b(i - 1)

    @lru_cache(maxsize=None)
    def b(i: int):
        if i == RECURSIVE_BASE_INDEX:
            return b1
        return a(i - 1)

    def at(i: int) -> tuple[Exact, Exact]:
        _check_int(i, "index", RECURSIVE_BASE_INDEX)
        # fill the caches bottom-up so deep indices do not hit the recursion limit
        for j in range(RECURSIVE_BASE_INDEX, i):
            a(j), b(j)
        return (a(i), b(i))

    return at


def fibonacci_iterative(n: int) -> Step:
    """``fibonacci_step`` composed n times."""
    return compose_n(fibonacci_step, n, arity=2, coerce=as_exact)


def fibonacci_pair(n: int) -> tuple[Exact, Exact]:
    """(F(n), F(n-1)) for n >= 2 from n - 2 steps on (1, 1)."""
    _check_int(n, "n", FIBONACCI_SEED_INDEX)
    return fibonacci_iterative(n - FIBONACCI_SEED_INDEX)(*FIBONACCI_SEED)


def fibonacci_pair_recursive(n: int) -> tuple[Exact, Exact]:
    """(F(n), F(n-1)) for n >= 2 from the recursive form at index n - 1."""
    _check_int(n, "n", FIBONACCI_SEED_INDEX)
    return fibonacci_recursive(*FIBONACCI_SEED)(n - 1)


# ---------------------------------------------------------------------------
# No three consecutive heads
# ---------------------------------------------------------------------------

def no_three_heads_step(a, b, c) -> tuple[Exact, Exact, Exact]:
    return (a + b + c, a, b)


def no_three_heads_recursive(a1=7, b1=4, c1=2) -> Callable[[int], tuple[Exact, Exact, Exact]]:
    """
    Recursive evaluator over three functions:
      a(i) = a(i-1) + b(i-1) + c(i-1),  b(i) = a(i-1),  c(i) = b(i-1),
    with (a(1), b(1), c(1)) = (a1, b1, c1).
    """
    a1, b1, c1 = as_exact(a1), as_exact(b1), as_exact(c1)

    @lru_cache(maxsize=None)
    def a(i: int):
        if i == RECURSIVE_BASE_INDEX:
            return a1
        return a(i - 1) + b(i - 1) + c(i - 1)

    @lru_cache(maxsize=None)
    def b(i: int):
        if i == RECURSIVE_BASE_INDEX:
            return b1
        return a(i - 1)

    @lru_cache(maxsize=None)
    def c(i: int):
        if i == RECURSIVE_BASE_INDEX:
            return c1
        return b(i - 1)

    def at(i: int) -> tuple[Exact, Exact, Exact]:
        _check_int(i, "index", RECURSIVE_BASE_INDEX)
        # fill the caches bottom-up so deep indices do not hit the recursion limit
        for j in range(RECURSIVE_BASE_INDEX, i):
            a(j), b(j), c(j)
        return (a(i), b(i), c(i))

    return at


def no_three_heads_iterative(n: int) -> Step:
    """``no_three_heads_step`` composed n times."""
    return compose_n(no_three_heads_step, n, arity=3, coerce=as_exact)


def no_three_heads_triple(n: int) -> tuple[Exact, Exact, Exact]:
    """(h(n), h(n-1), h(n-2)) for n >= 3 from n - 3 steps on (7, 4, 2)."""
    _check_int(n, "n", NO_THREE_HEADS_SEED_INDEX)
    return no_three_heads_iterative(n - NO_THREE_HEADS_SEED_INDEX)(*NO_THREE_HEADS_SEED)


def no_three_heads_triple_recursive(n: int) -> tuple[Exact, Exact, Exact]:
    """(h(n), h(n-1), h(n-2)) for n >= 3 from the recursive form at index n - 2."""
    _check_int(n, "n", NO_THREE_HEADS_SEED_INDEX)
    return no_three_heads_recursive(*NO_THREE_HEADS_SEED)(n - 2)


def no_three_heads_bruteforce(n: int) -> int:
    """Count length-n head/tail strings with no run of three heads."""
    _check_int(n, "n", 0)
    return sum(1 for s in product("HT", repeat=n) if "HHH" not in "".join(s))


# ---------------------------------------------------------------------------
# General k-term recurrences
# ---------------------------------------------------------------------------

def linear_step(coefficients: Sequence) -> Step:
    """
    Companion step of x(n) = c1*x(n-1) + ... + ck*x(n-k):
      (x1, ..., xk) -> (c1*x1 + ... + ck*xk, x1, ..., x(k-1))
    """
    coeffs = tuple(as_exact(c) for c in coefficients)
    if not coeffs:
        raise ValueError("a linear recurrence needs at least one coefficient")
    k = len(coeffs)

    def step(*window):
        if len(window) != k:
            raise ValueError(f"expected a window of {k} terms, got {len(window)}")
        head = demote(sum((c * x for c, x in zip(coeffs, window)), 0))
        return (head,) + tuple(window[:-1])

    step.__name__ = f"linear{coeffs}"
    return step


def linear_term(coefficients: Sequence, initial: Sequence, n: int) -> Exact:
    """
    Term x(n), n >= 1, of the recurrence with the given coefficients and
    initial terms ``initial = (x(1), ..., x(k))``.
    """
    _check_int(n, "n", 1)
    k = len(coefficients)
    if len(initial) != k:
        raise ValueError(f"need {k} initial terms, got {len(initial)}")
    if n <= k:
        return as_exact(initial[n - 1])
    window = tuple(as_exact(v) for v in reversed(initial))
    return compose_n(linear_step(coefficients), n - k, arity=k, coerce=as_exact)(*window)[0]
