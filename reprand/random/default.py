"""
The process-wide default generator.

`default_random` is created with the canonical default seed when reprand is
imported. During the import, `initialize_from_environment` reseeds it from the
environment variable named by the ``random.seed_environment_variable``
preference (``SEED_RANDOM`` by default), if that variable is set to a
non-zero integer. Code that needs a shared source of random numbers should
receive this object (or any other `Random` instance) explicitly, e.g. via
`get_default_random`.
"""
import numpy as np

from reprand.core.engine import EXPECTED_FIRST_VALUE, check_seed
from reprand.core.preferences import prefs
from reprand.random.generator import Random
from reprand.random.integers import UINT32_MAX
from reprand.utils.environment import getenv_int
from reprand.utils.logger import get_logger

__all__ = [
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

logger = get_logger(__name__)


class InvariantViolationError(RuntimeError):
    """
    Raised when a generator is reseeded from the environment after it has
    already been used.
    """

    pass


def initialize_from_environment(rng, environ=None, variable=None):
    """
    Reseed a pristine generator from an environment variable.

    If the variable is not set, or set to zero, the generator is left
    untouched. Otherwise the generator's first raw value is drawn and compared
    to the first value of the canonical default seed, which makes sure that
    the generator has not been used yet, and the generator is then reseeded
    with the value of the variable. Negative values down to ``-2**31`` are
    read as signed 32-bit integers, e.g. ``-1`` gives the seed ``2**32 - 1``.

    Parameters
    ----------
    rng : `Random`
        The generator to reseed.
    environ : mapping, optional
        The environment, defaults to ``os.environ``.
    variable : str, optional
        The name of the variable. Defaults to the
        ``random.seed_environment_variable`` preference.

    Returns
    -------
    seed : int or None
        The seed that was used, or ``None`` if the generator was not reseeded.

    Raises
    ------
    InvariantViolationError
        If the generator had already been used.
    ValueError
        If the variable is not an integer or does not fit into 32 bits.
    """
    if variable is None:
        variable = prefs["random.seed_environment_variable"]
    seedv = getenv_int(variable, environ)
    if not seedv:
        return None
    if -(2**31) <= seedv < 0:
        # signed 32-bit values wrap around, e.g. -1 is 2**32 - 1
        seedv &= UINT32_MAX
    check_seed(seedv)
    first_value = rng.next32()
    if first_value != EXPECTED_FIRST_VALUE:
        raise InvariantViolationError(
            f"Cannot reseed the random generator from '{variable}', it has "
            "already been used (its first value was "
            f"{first_value} instead of {EXPECTED_FIRST_VALUE})."
        )
    rng.seed(seedv)
    logger.debug(f"Reseeded the random generator from '{variable}' with seed {seedv}")
    return seedv


#: The process-wide default generator
default_random = Random()


def get_default_random():
    """
    Return the process-wide default generator.

    Returns
    -------
    rng : `Random`
    """
    return default_random


def seed(seed=0):
    """
    Reseed the default generator.

    Parameters
    ----------
    seed : int, optional
        A 32-bit unsigned integer, ``0`` (the default) stands for the
        canonical default seed.
    """
    default_random.seed(seed)


def get_state():
    """
    Return the state of the default generator.
    """
    return default_random.get_state()


def set_state(state):
    """
    Restore a state of the default generator returned by `get_state`.
    """
    default_random.set_state(state)


def rand(size=None, dtype=np.float64):
    """
    Draw values uniformly from ``(0, 1)`` with the default generator, see
    `Random.rand`.
    """
    return default_random.rand(size, dtype)


def randn(size=None, dtype=np.float64):
    """
    Draw standard normal values with the default generator, see
    `Random.randn`.
    """
    return default_random.randn(size, dtype)


def randint(bound, size=None):
    """
    Draw integers uniformly from ``[0, bound)`` with the default generator,
    see `Random.randint`.
    """
    return default_random.randint(bound, size)
