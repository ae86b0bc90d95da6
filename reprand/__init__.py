"""
reprand: reproducible random numbers
"""

import logging


def _check_dependencies():
    """Check basic dependencies"""
    import sys

    missing = []
    try:
        import numpy
    except ImportError as ex:
        sys.stderr.write(f"Importing numpy failed: '{ex}'\n")
        missing.append("numpy")

    if len(missing):
        raise ImportError(
            f"Some required dependencies are missing:\n{', '.join(missing)}"
        )


_check_dependencies()

try:
    from importlib.metadata import PackageNotFoundError, version

    __version__ = version("reprand")
except PackageNotFoundError:
    logging.getLogger("reprand").warning(
        "Cannot determine reprand version, running from source without "
        "installing the package."
    )
    __version__ = "unknown"

__docformat__ = "restructuredtext en"

# preferences
from reprand.core.preferences import PreferenceError, ReprandPreference, prefs
import reprand.core.core_preferences as _core_preferences
from reprand.utils.logger import ReprandLogger, catch_logs, get_logger

prefs.load_preferences()
prefs.do_validation()

prefs._backup()

# Initialize the logging system
ReprandLogger.initialize()
logger = get_logger(__name__)

from reprand.core.engine import (
    DEFAULT_SEED,
    EXPECTED_FIRST_VALUE,
    MersenneTwisterEngine,
)
from reprand.random import *

# Apply the SEED_RANDOM override before anything else draws from the default
# generator
initialize_from_environment(default_random)


def restore_initial_state():
    """
    Restores the preferences to the state they are in when reprand is
    imported (the state of the default generator is not affected).
    """
    prefs._restore()
    ReprandLogger._log_messages.clear()


def test(*args, **kwds):
    """
    Run reprand's test suite, see `reprand.tests.run`.
    """
    from reprand.tests import run

    return run(*args, **kwds)
