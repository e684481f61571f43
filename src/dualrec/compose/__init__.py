from .engine import State, Step, identity, step_arity, then, compose, compose_n, iterate

__all__ = [
    "State",
    "Step",
    "identity",
    "step_arity",
    "then",
    "compose",
    "compose_n",
    "iterate",
]
