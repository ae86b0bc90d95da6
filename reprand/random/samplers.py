"""
Uniform and Gaussian real values drawn from an engine.

Single precision values are computed with `numpy.float32` arithmetic and
double precision values with Python floats, so that results do not depend on
the platform.
"""
import math

import numpy as np

from reprand.random.integers import get_uint32, get_uint64

__all__ = ["uniform_real", "uniform_real_array", "gauss"]

_FLOAT32_FACTOR = np.float32(2.0**-32)
_FLOAT32_OFFSET = np.float32(0.5 * 2.0**-32)
_FLOAT32_BELOW_ONE = np.nextafter(np.float32(1.0), np.float32(0.0))

_FLOAT64_FACTOR = 2.0**-64
_FLOAT64_OFFSET = 0.5 * 2.0**-64
_FLOAT64_BELOW_ONE = float(np.nextafter(1.0, 0.0))


def _check_dtype(dtype):
    dtype = np.dtype(dtype)
    if dtype not in (np.dtype(np.float32), np.dtype(np.float64)):
        raise TypeError(f"Only float32 and float64 values are supported, not {dtype}")
    return dtype


def uniform_real(engine, dtype=np.float64):
    """
    Draw a value uniformly from the open interval ``(0, 1)``.

    A ``float32`` value is computed from a 32-bit draw ``v`` as
    ``v * 2**-32 + 2**-33``, a ``float64`` value from a 64-bit draw as
    ``v * 2**-64 + 2**-65``. The offset centers the values in their bins and
    keeps them away from zero; draws that round up to ``1.0`` are returned as
    the largest value below ``1.0``.

    Parameters
    ----------
    engine : `MersenneTwisterEngine`
        The engine to draw from.
    dtype : {`numpy.float32`, `numpy.float64`}, optional
        The floating point type, defaults to double precision.

    Returns
    -------
    value : `numpy.float32` or float
    """
    if _check_dtype(dtype) == np.float32:
        value = np.float32(get_uint32(engine)) * _FLOAT32_FACTOR + _FLOAT32_OFFSET
        if value >= np.float32(1.0):
            return _FLOAT32_BELOW_ONE
        return value
    else:
        value = get_uint64(engine) * _FLOAT64_FACTOR + _FLOAT64_OFFSET
        if value >= 1.0:
            return _FLOAT64_BELOW_ONE
        return value


def uniform_real_array(engine, size, dtype=np.float64):
    """
    Draw an array of values uniformly from the open interval ``(0, 1)``.

    The result is identical to ``size`` consecutive calls of `uniform_real`.

    Parameters
    ----------
    engine : `MersenneTwisterEngine`
        The engine to draw from.
    size : int
        The number of values.
    dtype : {`numpy.float32`, `numpy.float64`}, optional
        The floating point type, defaults to double precision.

    Returns
    -------
    values : `numpy.ndarray`
    """
    if _check_dtype(dtype) == np.float32:
        raw = engine.next32_array(size).astype(np.float32)
        values = raw * _FLOAT32_FACTOR + _FLOAT32_OFFSET
        return np.minimum(values, _FLOAT32_BELOW_ONE)
    else:
        raw = engine.next32_array(2 * size)
        words = raw[0::2] | (raw[1::2] << np.uint64(32))
        values = words.astype(np.float64) * _FLOAT64_FACTOR + _FLOAT64_OFFSET
        return np.minimum(values, _FLOAT64_BELOW_ONE)


def gauss(engine, dtype=np.float64):
    """
    Draw a value from the standard normal distribution.

    Uses the polar form of the Box-Muller transformation: a point ``(v1, v2)``
    is drawn uniformly from the square ``(-1, 1)**2`` until it lies inside the
    unit circle (and is not the origin), the result is then
    ``v1 * sqrt(-2 * log(s) / s)`` with ``s = v1**2 + v2**2``.

    Parameters
    ----------
    engine : `MersenneTwisterEngine`
        The engine to draw from.
    dtype : {`numpy.float32`, `numpy.float64`}, optional
        The floating point type, defaults to double precision.

    Returns
    -------
    value : `numpy.float32` or float

    Notes
    -----
    The transformation yields a second independent sample ``v2 * factor``
    which is not used. Each call consumes at least two uniform values.
    """
    if _check_dtype(dtype) == np.float32:
        one, two, minus_two = np.float32(1.0), np.float32(2.0), np.float32(-2.0)
        while True:
            v1 = two * uniform_real(engine, np.float32) - one
            v2 = two * uniform_real(engine, np.float32) - one
            s = v1 * v1 + v2 * v2
            if s < one and s != 0:
                break
        return np.sqrt(minus_two * np.log(s) / s) * v1
    else:
        while True:
            v1 = 2.0 * uniform_real(engine) - 1.0
            v2 = 2.0 * uniform_real(engine) - 1.0
            s = v1 * v1 + v2 * v2
            if s < 1.0 and s != 0.0:
                break
        return math.sqrt(-2.0 * math.log(s) / s) * v1
