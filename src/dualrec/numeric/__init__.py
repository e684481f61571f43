from .gaussian import (
    Exact,
    GaussianRational,
    I,
    as_exact,
    demote,
    from_sympy,
    to_sympy,
)

__all__ = [
    "Exact",
    "GaussianRational",
    "I",
    "as_exact",
    "demote",
    "from_sympy",
    "to_sympy",
]
