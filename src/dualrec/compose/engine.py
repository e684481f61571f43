"""Composition of multi-valued step functions.

A step function takes k values positionally and returns a k-tuple:

    step(*state) -> tuple   with len(result) == len(state) == k

State is threaded through compositions as a single tuple, so composing two
steps is ordinary function composition over that tuple.
"""
from __future__ import annotations

import inspect
import logging
from functools import reduce
from typing import Any, Callable, Iterator

_logger = logging.getLogger(__name__)

State = tuple
Step = Callable[..., State]


def identity(*state) -> State:
    """k-ary identity: returns its arguments unchanged, in order."""
    return tuple(state)


def step_arity(step: Step) -> int:
    """Number of positional parameters of ``step``.

    Raises ValueError when the step takes ``*args`` and so has no fixed arity.
    """
    n = 0
    for p in inspect.signature(step).parameters.values():
        if p.kind == p.VAR_POSITIONAL:
            raise ValueError(f"cannot infer the arity of {step!r}; pass arity=")
        if p.kind in (p.POSITIONAL_ONLY, p.POSITIONAL_OR_KEYWORD):
            n += 1
    return n


def _check_count(n) -> None:
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"iteration count must be an int, got {n!r}")
    if n < 0:
        raise ValueError(f"iteration count must be >= 0, got {n}")


def _check_state(state: State, arity: int, where: str) -> None:
    if len(state) != arity:
        raise ValueError(f"{where}: expected a state of arity {arity}, got {len(state)}: {state!r}")


def then(f: Step, g: Step) -> Step:
    """Left-to-right composition: ``then(f, g)(*s) == g(*f(*s))``."""

    def composed(*state):
        return tuple(g(*f(*state)))

    return composed


def compose(*steps: Step) -> Step:
    """
    Left-to-right composition of ``steps``, folded from the k-ary identity.

    ``compose()`` is the identity and ``compose(s)`` behaves as ``s``. Call
    depth grows with the number of steps; use :func:`compose_n` to repeat a
    single step many times.
    """
    return reduce(then, steps, identity)


def compose_n(
    step: Step,
    n: int,
    arity: int | None = None,
    coerce: Callable[[Any], Any] | None = None,
) -> Step:
    """
    Build ``step`` applied exactly ``n`` times.

    ``compose_n(step, 0)`` is the identity on k values, and
    ``compose_n(step, n)(*s) == step(*compose_n(step, n - 1)(*s))``.
    ``arity`` is inferred from the signature of ``step`` when omitted. Every
    state entering or leaving ``step`` is checked against it.

    ``coerce``, when given, is applied to each value of the input state before
    the first step (e.g. ``as_exact`` to reject floats).
    """
    _check_count(n)
    k = step_arity(step) if arity is None else arity
    if isinstance(k, bool) or not isinstance(k, int) or k < 0:
        raise ValueError(f"arity must be a non-negative int, got {k!r}")
    name = getattr(step, "__name__", repr(step))
    _logger.debug("compose_n: %s applied %d times (arity %d)", name, n, k)

    def composed(*state):
        _check_state(state, k, f"{name}^{n} input")
        if coerce is not None:
            state = tuple(coerce(v) for v in state)
        for _ in range(n):
            state = tuple(step(*state))
            _check_state(state, k, f"{name} output")
        return tuple(state)

    composed.__name__ = f"{name}^{n}"
    composed.__qualname__ = composed.__name__
    return composed


def iterate(step: Step, state: State, n: int) -> Iterator[State]:
    """Yield the n+1 states ``state, step(state), ..., step^n(state)``.

    Arguments are checked when ``iterate`` is called, not on first ``next()``.
    """
    _check_count(n)
    return _orbit(step, tuple(state), n)


def _orbit(step: Step, state: State, n: int) -> Iterator[State]:
    k = len(state)
    yield state
    for _ in range(n):
        state = tuple(step(*state))
        _check_state(state, k, "iterate")
        yield state
