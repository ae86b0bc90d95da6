"""
Reproducible random numbers: the `Random` generator, its building blocks and
the process-wide default generator.
"""
from .default import (
    InvariantViolationError,
    default_random,
    get_default_random,
    get_state,
    initialize_from_environment,
    rand,
    randint,
    randn,
    seed,
    set_state,
)
from .generator import Random
from .integers import InvalidArgumentError

__all__ = [
    "Random",
    "InvalidArgumentError",
    "InvariantViolationError",
    "default_random",
    "get_default_random",
    "initialize_from_environment",
    "seed",
    "get_state",
    "set_state",
    "rand",
    "randn",
    "randint",
]
