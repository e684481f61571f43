from .algebra import (
    Matrix,
    IDENTITY,
    ZERO,
    as_matrix,
    add,
    multiply,
    scale,
    equal,
    matrix_power,
    to_sympy_matrix,
    from_sympy_matrix,
)

__all__ = [
    "Matrix",
    "IDENTITY",
    "ZERO",
    "as_matrix",
    "add",
    "multiply",
    "scale",
    "equal",
    "matrix_power",
    "to_sympy_matrix",
    "from_sympy_matrix",
]
