"""Tests for dualrec.recurrences.pauli."""
from fractions import Fraction

import pytest
from hypothesis import given, strategies as st

from dualrec.matrix.algebra import IDENTITY, Matrix, equal, matrix_power, multiply, scale
from dualrec.numeric.gaussian import GaussianRational, I
from dualrec.recurrences.pauli import (
    SIGMA_1,
    SIGMA_2,
    SIGMA_3,
    pauli_combination,
    pauli_power,
    pauli_product,
    pauli_solve,
    square_step,
    squaring_iterative,
    squaring_recursive,
)

POWER_16_OF_1234 = (3826362843136, 1414131548160, 2121197322240, 2828263096320)

rationals = st.fractions(min_value=-20, max_value=20, max_denominator=12)
gaussians = st.builds(GaussianRational, rationals, rationals)
exact_numbers = st.one_of(st.integers(-1000, 1000), rationals, gaussians)


# --- basis identities ---

@pytest.mark.parametrize("sigma", [IDENTITY, SIGMA_1, SIGMA_2, SIGMA_3])
def test_squares_are_identity(sigma):
    assert multiply(sigma, sigma) == IDENTITY


@pytest.mark.parametrize("left,right,result", [
    (SIGMA_1, SIGMA_2, SIGMA_3),
    (SIGMA_2, SIGMA_3, SIGMA_1),
    (SIGMA_3, SIGMA_1, SIGMA_2),
])
def test_cyclic_products(left, right, result):
    assert equal(multiply(left, right), scale(I, result))


@pytest.mark.parametrize("left,right,result", [
    (SIGMA_2, SIGMA_1, SIGMA_3),
    (SIGMA_1, SIGMA_3, SIGMA_2),
    (SIGMA_3, SIGMA_2, SIGMA_1),
])
def test_anticyclic_products(left, right, result):
    assert equal(multiply(left, right), scale(-I, result))


def test_sigma_2_entries():
    assert SIGMA_2 == Matrix(0, GaussianRational(0, -1), GaussianRational(0, 1), 0)


# --- combination / solve ---

def test_pauli_combination_1234():
    # [[w+z, x-iy], [x+iy, w-z]]
    assert pauli_combination(1, 2, 3, 4) == Matrix(5, 2 - 3 * I, 2 + 3 * I, -3)


def test_round_trip_1234():
    assert pauli_solve(pauli_combination(1, 2, 3, 4)) == (1, 2, 3, 4)


def test_solve_basis():
    assert pauli_solve(IDENTITY) == (1, 0, 0, 0)
    assert pauli_solve(SIGMA_1) == (0, 1, 0, 0)
    assert pauli_solve(SIGMA_2) == (0, 0, 1, 0)
    assert pauli_solve(SIGMA_3) == (0, 0, 0, 1)


def test_solve_arbitrary_matrix_recombines():
    A = Matrix(1, 2, 3, 4)
    w, x, y, z = pauli_solve(A)
    assert (w, x, z) == (Fraction(5, 2), Fraction(5, 2), Fraction(-3, 2))
    assert y == GaussianRational(0, Fraction(-1, 2))
    assert pauli_combination(w, x, y, z) == A


def test_solve_wrong_shape():
    with pytest.raises(ValueError):
        pauli_solve((1, 2, 3))


@given(w=exact_numbers, x=exact_numbers, y=exact_numbers, z=exact_numbers)
def test_round_trip_exact(w, x, y, z):
    assert pauli_solve(pauli_combination(w, x, y, z)) == (w, x, y, z)


# --- coefficient-space product ---

def test_pauli_product_basis():
    assert pauli_product((0, 1, 0, 0), (0, 0, 1, 0)) == (0, 0, 0, I)
    assert pauli_product((0, 0, 1, 0), (0, 1, 0, 0)) == (0, 0, 0, -I)


@given(p=st.tuples(exact_numbers, exact_numbers, exact_numbers, exact_numbers),
       q=st.tuples(exact_numbers, exact_numbers, exact_numbers, exact_numbers))
def test_pauli_product_matches_matrix_product(p, q):
    expected = pauli_solve(multiply(pauli_combination(*p), pauli_combination(*q)))
    assert pauli_product(p, q) == expected


@given(p=st.tuples(exact_numbers, exact_numbers, exact_numbers, exact_numbers))
def test_square_step_is_self_product(p):
    assert square_step(*p) == pauli_product(p, p)


def test_pauli_product_wrong_shape():
    with pytest.raises(ValueError):
        pauli_product((1, 2, 3), (1, 2, 3, 4))


# --- squaring recurrence ---

def test_sixteenth_power_by_matrix_multiplication():
    assert pauli_power(1, 2, 3, 4, 16) == POWER_16_OF_1234
    assert pauli_solve(matrix_power(pauli_combination(1, 2, 3, 4), 16)) == POWER_16_OF_1234


def test_sixteenth_power_by_squaring():
    assert squaring_iterative(4)(1, 2, 3, 4) == POWER_16_OF_1234
    assert squaring_recursive(1, 2, 3, 4)(4) == POWER_16_OF_1234


def test_square_step_1234():
    assert square_step(1, 2, 3, 4) == (30, 4, 6, 8)


@pytest.mark.parametrize("seed", [
    (1, 2, 3, 4),
    (1, -1, 2, Fraction(1, 2)),
    (0, 1, 1, 0),
    (GaussianRational(1, 1), 0, I, 2),
])
@pytest.mark.parametrize("n", [0, 1, 2, 3, 4])
def test_matrix_power_matches_squaring(seed, n):
    assert pauli_power(*seed, 2 ** n) == squaring_iterative(n)(*seed)


@pytest.mark.parametrize("seed", [
    (1, 2, 3, 4),
    (Fraction(1, 2), Fraction(1, 3), 0, -1),
    (I, 1, -I, GaussianRational(2, -1)),
])
def test_squaring_forms_agree(seed):
    rec = squaring_recursive(*seed)
    for n in range(0, 9):
        assert rec(n) == squaring_iterative(n)(*seed)


def test_squaring_preconditions():
    with pytest.raises(ValueError):
        squaring_recursive(1, 2, 3, 4)(-1)
    with pytest.raises(ValueError):
        squaring_iterative(-3)
    with pytest.raises(ValueError):
        squaring_iterative(2)(1, 2, 3)


@pytest.mark.parametrize("seed", [(1.5, 0, 0, 0), (1, 2j, 0, 0), (1, 2, False, 4)])
def test_inexact_seed_rejected_by_iterative_form(seed):
    with pytest.raises(TypeError):
        squaring_iterative(1)(*seed)


def test_deep_index_on_fresh_evaluator():
    # s1 squares to I, which stays I
    assert squaring_recursive(0, 1, 0, 0)(3000) == squaring_iterative(3000)(0, 1, 0, 0) == (1, 0, 0, 0)
