"""
Utility functions to get information from the environment reprand is running
in.
"""
import os

__all__ = ["getenv_int"]


def getenv_int(name, environ=None):
    """
    Read an integer from an environment variable.

    Parameters
    ----------
    name : str
        The name of the environment variable.
    environ : mapping, optional
        The environment to read from. Defaults to ``os.environ``.

    Returns
    -------
    value : int or None
        The integer value, or ``None`` if the variable is not set or empty.

    Raises
    ------
    ValueError
        If the variable is set to something that is not an integer.

    Examples
    --------
    >>> getenv_int('SEED_RANDOM', {'SEED_RANDOM': '17'})
    17
    >>> getenv_int('SEED_RANDOM', {}) is None
    True
    """
    if environ is None:
        environ = os.environ
    value = environ.get(name, "").strip()
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        raise ValueError(
            f"Environment variable '{name}' has to be an integer, got '{value}'."
        ) from None
