"""
Integer values drawn from an engine: fixed-width words and bias-free integers
in a range.
"""
import numpy as np

__all__ = [
    "InvalidArgumentError",
    "get_uint32",
    "get_uint64",
    "get_int",
    "uniform_int",
    "check_bound",
    "UNSIGNED_BITS",
    "SIZE_T_BITS",
]

#: Number of bits of the platform's C ``unsigned int``
UNSIGNED_BITS = np.dtype(np.uintc).itemsize * 8

#: Number of bits of the platform's C ``size_t``
SIZE_T_BITS = np.dtype(np.uintp).itemsize * 8

UINT32_MAX = 0xFFFFFFFF


class InvalidArgumentError(ValueError):
    """
    Raised for arguments violating the precondition of an operation, e.g. an
    empty integer range.
    """

    pass


def get_uint32(engine):
    """
    Draw a 32-bit unsigned integer (a single engine step).
    """
    return engine.next32()


def get_uint64(engine):
    """
    Draw a 64-bit unsigned integer from two engine steps.

    The first draw provides the low word, the second draw the high word.
    """
    low = engine.next32()
    return low | (engine.next32() << 32)


def get_int(engine, bits):
    """
    Draw an unsigned integer of the given width.

    Parameters
    ----------
    engine : `MersenneTwisterEngine`
        The engine to draw from.
    bits : {32, 64}
        The width of the integer.

    Returns
    -------
    value : int
        An integer in the range ``[0, 2**bits)``.
    """
    if bits == 32:
        return get_uint32(engine)
    elif bits == 64:
        return get_uint64(engine)
    else:
        raise ValueError(f"Only 32 and 64 bit integers are supported, not {bits} bits")


def check_bound(bound):
    """
    Check that an integer range bound is in ``[1, 2**32)``.

    Returns
    -------
    bound : int
        The bound as a Python integer.

    Raises
    ------
    InvalidArgumentError
        If the bound is zero or does not fit into 32 bits.
    """
    if not 0 < bound <= UINT32_MAX:
        raise InvalidArgumentError(
            f"The bound has to be in the range [1, 2**32), got {bound}"
        )
    return int(bound)


def uniform_int(engine, bound):
    """
    Draw an integer uniformly from the range ``[0, bound)``.

    For a ``bound`` that is a power of two, the lower bits of a single draw are
    used directly. For all other bounds, draws from the incomplete last span
    ``[limit, 2**32)`` (with ``limit`` the largest multiple of ``bound`` not
    larger than ``2**32 - 1``) are rejected, so that the remainder does not
    favour small values.

    Parameters
    ----------
    engine : `MersenneTwisterEngine`
        The engine to draw from.
    bound : int
        The (exclusive) upper bound, ``0 < bound < 2**32``.

    Returns
    -------
    value : int
        An integer ``v`` with ``0 <= v < bound``.

    Raises
    ------
    InvalidArgumentError
        If ``bound`` is zero or does not fit into 32 bits.
    """
    bound = check_bound(bound)
    if bound & (bound - 1) == 0:
        return engine.next32() & (bound - 1)
    limit = (UINT32_MAX // bound) * bound
    while True:
        v = engine.next32()
        if v < limit:
            return v % bound
