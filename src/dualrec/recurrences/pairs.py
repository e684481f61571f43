"""Registry of recurrence families, each as a recursive/iterative evaluator pair.

``agree`` runs both evaluators of a family on one seed and compares the
resulting tuples exactly.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Callable, Sequence

from dualrec.compose.engine import Step
from dualrec.recurrences import complex_power as _complex
from dualrec.recurrences import linear as _linear
from dualrec.recurrences import pauli as _pauli

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class RecurrencePair:
    """
    Two independently derived evaluators of one recurrence.

    recursive: seeds -> at(index), a mutually-recursive evaluator
    iterative: count -> composed step, called with the seeds
    offset:    recursive index that matches iterative count 0
               (at(count + offset) == iterative(count)(*seed))
    """

    name: str
    arity: int
    recursive: Callable[..., Callable[[int], tuple]]
    iterative: Callable[[int], Step]
    offset: int = 0


def agree(pair: RecurrencePair, seed: Sequence, n: int) -> bool:
    """True iff both evaluators of ``pair`` give the same tuple after n steps."""
    seed = tuple(seed)
    if len(seed) != pair.arity:
        raise ValueError(f"{pair.name}: expected {pair.arity} seed values, got {len(seed)}")
    rec = pair.recursive(*seed)(n + pair.offset)
    it = pair.iterative(n)(*seed)
    if rec != it:
        _logger.debug("%s disagrees at n=%d: recursive=%r iterative=%r", pair.name, n, rec, it)
        return False
    return True


FAMILIES: dict[str, RecurrencePair] = {
    "complex": RecurrencePair(
        name="complex",
        arity=2,
        recursive=_complex.squaring_recursive,
        iterative=_complex.squaring_iterative,
    ),
    "pauli": RecurrencePair(
        name="pauli",
        arity=4,
        recursive=_pauli.squaring_recursive,
        iterative=_pauli.squaring_iterative,
    ),
    "fibonacci": RecurrencePair(
        name="fibonacci",
        arity=2,
        recursive=_linear.fibonacci_recursive,
        iterative=_linear.fibonacci_iterative,
        offset=_linear.RECURSIVE_BASE_INDEX,
    ),
    "no_three_heads": RecurrencePair(
        name="no_three_heads",
        arity=3,
        recursive=_linear.no_three_heads_recursive,
        iterative=_linear.no_three_heads_iterative,
        offset=_linear.RECURSIVE_BASE_INDEX,
    ),
}
