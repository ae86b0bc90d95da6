"""
The `Random` class, reprand's interface to random numbers.
"""
import numpy as np

from reprand.core.engine import MersenneTwisterEngine
from reprand.random.integers import (
    SIZE_T_BITS,
    UNSIGNED_BITS,
    check_bound,
    get_int,
    get_uint64,
    uniform_int,
)
from reprand.random.samplers import gauss, uniform_real, uniform_real_array

__all__ = ["Random"]


class Random:
    """
    A reproducible source of random integers and reals.

    All values are derived from a `MersenneTwisterEngine`, the sequence of
    values is completely determined by the seed and the sequence of calls.

    Parameters
    ----------
    seed : int, optional
        A 32-bit unsigned integer. The default ``0`` stands for the canonical
        default seed of the engine.

    Examples
    --------
    >>> rng = Random(42)
    >>> rng.next32()
    4269938173
    >>> rng.seed(42)
    >>> [rng.get_unsigned(10) for _ in range(4)]
    [3, 4, 1, 9]
    """

    #: Width of the integers returned by `__call__`
    result_bits = 32

    def __init__(self, seed=0):
        self._engine = MersenneTwisterEngine(seed)

    engine = property(lambda self: self._engine, doc="The underlying engine")

    def seed(self, seed=0):
        """
        Reseed the generator, discarding its previous state.

        Parameters
        ----------
        seed : int, optional
            A 32-bit unsigned integer, ``0`` (the default) stands for the
            canonical default seed.
        """
        self._engine.seed(seed)

    def next32(self):
        """
        Draw a raw 32-bit unsigned integer.
        """
        return self._engine.next32()

    def __call__(self):
        return get_int(self._engine, self.result_bits)

    def get_int(self, bits):
        """
        Draw an unsigned integer with 32 or 64 bits.
        """
        return get_int(self._engine, bits)

    def get_uint64(self):
        """
        Draw a 64-bit unsigned integer (low word first).
        """
        return get_uint64(self._engine)

    def get_size_t(self):
        """
        Draw an unsigned integer with the width of the platform's ``size_t``.
        """
        return get_int(self._engine, SIZE_T_BITS)

    def get_unsigned(self, bound=None):
        """
        Draw an unsigned integer.

        Parameters
        ----------
        bound : int, optional
            If given, draw uniformly from ``[0, bound)`` (see
            `~reprand.random.integers.uniform_int`). Otherwise, draw an
            integer with the width of the platform's ``unsigned int``.

        Returns
        -------
        value : int
        """
        if bound is None:
            return get_int(self._engine, UNSIGNED_BITS)
        return uniform_int(self._engine, bound)

    def uniform_int(self, bound):
        """
        Draw an integer uniformly from ``[0, bound)``, without modulo bias.
        """
        return uniform_int(self._engine, bound)

    def uniform_real(self, dtype=np.float64):
        """
        Draw a value uniformly from the open interval ``(0, 1)``.
        """
        return uniform_real(self._engine, dtype)

    def unif(self):
        """
        Draw a single precision value uniformly from ``(0, 1)``.
        """
        return uniform_real(self._engine, np.float32)

    def dunif(self):
        """
        Draw a double precision value uniformly from ``(0, 1)``.
        """
        return uniform_real(self._engine, np.float64)

    def gauss(self, dtype=np.float32):
        """
        Draw a value from the standard normal distribution. Uses single
        precision by default, see `dgauss` for double precision.
        """
        return gauss(self._engine, dtype)

    def dgauss(self):
        """
        Draw a double precision value from the standard normal distribution.
        """
        return gauss(self._engine, np.float64)

    def discard(self, count):
        """
        Skip ``count`` raw 32-bit values.
        """
        self._engine.discard(count)

    def get_state(self):
        """
        Return the state of the generator, see `set_state`.
        """
        return self._engine.get_state()

    def set_state(self, state):
        """
        Restore a state returned by `get_state`.
        """
        self._engine.set_state(state)

    def rand(self, size=None, dtype=np.float64):
        """
        Draw values uniformly from ``(0, 1)``.

        Parameters
        ----------
        size : int, optional
            The number of values. If not given, a single value is returned.
        dtype : {`numpy.float32`, `numpy.float64`}, optional
            The floating point type, defaults to double precision.

        Returns
        -------
        values : `numpy.ndarray` or scalar
        """
        if size is None:
            return uniform_real(self._engine, dtype)
        return uniform_real_array(self._engine, size, dtype)

    def randn(self, size=None, dtype=np.float64):
        """
        Draw values from the standard normal distribution.

        Parameters
        ----------
        size : int, optional
            The number of values. If not given, a single value is returned.
        dtype : {`numpy.float32`, `numpy.float64`}, optional
            The floating point type, defaults to double precision.

        Returns
        -------
        values : `numpy.ndarray` or scalar
        """
        if size is None:
            return gauss(self._engine, dtype)
        return np.fromiter(
            (gauss(self._engine, dtype) for _ in range(size)), dtype=dtype, count=size
        )

    def randint(self, bound, size=None):
        """
        Draw integers uniformly from ``[0, bound)``.

        Parameters
        ----------
        bound : int
            The (exclusive) upper bound, ``0 < bound < 2**32``.
        size : int, optional
            The number of values. If not given, a single value is returned.

        Returns
        -------
        values : `numpy.ndarray` of ``uint32`` or int
        """
        if size is None:
            return uniform_int(self._engine, bound)
        bound = check_bound(bound)
        return np.fromiter(
            (uniform_int(self._engine, bound) for _ in range(size)),
            dtype=np.uint32,
            count=size,
        )

    def __repr__(self):
        return f"<{self.__class__.__name__} using {self._engine!r}>"
