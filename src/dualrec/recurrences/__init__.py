from .complex_power import (
    square_step as complex_square_step,
    squaring_recursive as complex_squaring_recursive,
    squaring_iterative as complex_squaring_iterative,
    multiply_step,
    multiplication_recursive,
    multiplication_iterative,
    to_gaussian,
)
from .pauli import (
    SIGMA_1,
    SIGMA_2,
    SIGMA_3,
    pauli_combination,
    pauli_solve,
    pauli_product,
    pauli_power,
    square_step as pauli_square_step,
    squaring_recursive as pauli_squaring_recursive,
    squaring_iterative as pauli_squaring_iterative,
)
from .linear import (
    FIBONACCI_SEED,
    FIBONACCI_SEED_INDEX,
    NO_THREE_HEADS_SEED,
    NO_THREE_HEADS_SEED_INDEX,
    fibonacci_step,
    fibonacci_recursive,
    fibonacci_iterative,
    fibonacci_pair,
    fibonacci_pair_recursive,
    no_three_heads_step,
    no_three_heads_recursive,
    no_three_heads_iterative,
    no_three_heads_triple,
    no_three_heads_triple_recursive,
    no_three_heads_bruteforce,
    linear_step,
    linear_term,
)
from .pairs import RecurrencePair, FAMILIES, agree

__all__ = [
    "complex_square_step",
    "complex_squaring_recursive",
    "complex_squaring_iterative",
    "multiply_step",
    "multiplication_recursive",
    "multiplication_iterative",
    "to_gaussian",
    "SIGMA_1",
    "SIGMA_2",
    "SIGMA_3",
    "pauli_combination",
    "pauli_solve",
    "pauli_product",
    "pauli_power",
    "pauli_square_step",
    "pauli_squaring_recursive",
    "pauli_squaring_iterative",
    "FIBONACCI_SEED",
    "FIBONACCI_SEED_INDEX",
    "NO_THREE_HEADS_SEED",
    "NO_THREE_HEADS_SEED_INDEX",
    "fibonacci_step",
    "fibonacci_recursive",
    "fibonacci_iterative",
    "fibonacci_pair",
    "fibonacci_pair_recursive",
    "no_three_heads_step",
    "no_three_heads_recursive",
    "no_three_heads_iterative",
    "no_three_heads_triple",
    "no_three_heads_triple_recursive",
    "no_three_heads_bruteforce",
    "linear_step",
    "linear_term",
    "RecurrencePair",
    "FAMILIES",
    "agree",
]
