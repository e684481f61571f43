"""
dualrec: mutually-recursive recurrences and their dual form as repeated
application of a single step function, over exact numbers (int, Fraction,
exact Gaussian rationals).
"""

from .numeric.gaussian import GaussianRational, I, as_exact, demote, to_sympy, from_sympy
from .matrix.algebra import Matrix, IDENTITY, add, multiply, scale, equal, matrix_power
from .compose.engine import identity, compose, compose_n, iterate

from .recurrences.complex_power import (
    multiply_step,
    multiplication_recursive,
    multiplication_iterative,
    complex_power,
)
from .recurrences.pauli import (
    SIGMA_1,
    SIGMA_2,
    SIGMA_3,
    pauli_combination,
    pauli_solve,
    pauli_product,
    pauli_power,
)
from .recurrences.linear import (
    fibonacci_pair,
    fibonacci_pair_recursive,
    no_three_heads_triple,
    no_three_heads_triple_recursive,
    linear_step,
    linear_term,
)
from .recurrences.pairs import RecurrencePair, FAMILIES, agree

__all__ = [
    # Numeric tower
    "GaussianRational",
    "I",
    "as_exact",
    "demote",
    "to_sympy",
    "from_sympy",
    # Matrix algebra
    "Matrix",
    "IDENTITY",
    "add",
    "multiply",
    "scale",
    "equal",
    "matrix_power",
    # Composition
    "identity",
    "compose",
    "compose_n",
    "iterate",
    # Complex numbers
    "multiply_step",
    "multiplication_recursive",
    "multiplication_iterative",
    "complex_power",
    # Pauli
    "SIGMA_1",
    "SIGMA_2",
    "SIGMA_3",
    "pauli_combination",
    "pauli_solve",
    "pauli_product",
    "pauli_power",
    # Linear recurrences
    "fibonacci_pair",
    "fibonacci_pair_recursive",
    "no_three_heads_triple",
    "no_three_heads_triple_recursive",
    "linear_step",
    "linear_term",
    # Pairs
    "RecurrencePair",
    "FAMILIES",
    "agree",
]
