"""Tests for dualrec.recurrences.pairs: recursive vs. iterative agreement."""
from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from dualrec.numeric.gaussian import GaussianRational
from dualrec.recurrences.pairs import FAMILIES, RecurrencePair, agree

SEEDS = {
    "complex": [(2, 3), (Fraction(1, 2), -1), (GaussianRational(0, 1), 1)],
    "pauli": [(1, 2, 3, 4), (0, Fraction(1, 3), -1, 2)],
    "fibonacci": [(1, 1), (3, 1), (0, Fraction(1, 2))],
    "no_three_heads": [(7, 4, 2), (1, 0, 0)],
}

MAX_N = {"complex": 10, "pauli": 7, "fibonacci": 20, "no_three_heads": 20}


def test_registry_names():
    assert set(FAMILIES) == {"complex", "pauli", "fibonacci", "no_three_heads"}
    assert FAMILIES["pauli"].arity == 4
    assert FAMILIES["no_three_heads"].arity == 3


@pytest.mark.parametrize("name", sorted(SEEDS))
def test_families_agree(name):
    pair = FAMILIES[name]
    for seed in SEEDS[name]:
        for n in range(0, MAX_N[name] + 1):
            assert agree(pair, seed, n), (name, seed, n)


def test_agree_detects_wrong_offset():
    shifted = RecurrencePair(
        name="fibonacci-unshifted",
        arity=2,
        recursive=FAMILIES["fibonacci"].recursive,
        iterative=FAMILIES["fibonacci"].iterative,
        offset=2,
    )
    assert not agree(shifted, (1, 1), 3)


def test_agree_seed_arity():
    with pytest.raises(ValueError):
        agree(FAMILIES["pauli"], (1, 2, 3), 2)


@given(
    seed=st.tuples(st.integers(-50, 50), st.integers(-50, 50), st.integers(-50, 50)),
    n=st.integers(min_value=0, max_value=30),
)
def test_no_three_heads_agrees_on_any_seed(seed, n):
    assert agree(FAMILIES["no_three_heads"], seed, n)


@given(
    seed=st.tuples(st.integers(-9, 9), st.integers(-9, 9)),
    n=st.integers(min_value=0, max_value=6),
)
def test_complex_agrees_on_any_seed(seed, n):
    assert agree(FAMILIES["complex"], seed, n)
