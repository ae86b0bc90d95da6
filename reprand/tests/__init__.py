"""
reprand's test suite, run it with `reprand.test` (requires pytest).
"""
import os
from io import StringIO

import reprand
from reprand.core.preferences import prefs
from reprand.utils.logger import LOG_LEVELS, ReprandLogger

try:
    import pytest
except ImportError:
    pytest = None

#: The directory of the reprand package
PACKAGE_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

#: pytest configuration registering reprand's markers
INI_FILE = os.path.join(os.path.dirname(__file__), "pytest.ini")


def make_argv(dirnames, markers=None, doctests=False):
    """
    Build the command line arguments for `pytest.main`.

    Parameters
    ----------
    dirnames : list of str
        The directories to collect tests from.
    markers : str, optional
        A marker expression selecting tests, e.g. ``'not long'``.
    doctests : bool, optional
        Whether to collect the doctests of the modules instead of the tests.
        Cannot be combined with ``markers``.

    Returns
    -------
    argv : list of str
    """
    if doctests and markers is not None:
        raise TypeError("Cannot give markers for doctests")
    argv = list(dirnames) + ["-c", INI_FILE, "--quiet", "--confcutdir", PACKAGE_DIR]
    if doctests:
        argv += ["--doctest-modules", "--ignore-glob=*/tests/*"]
    elif markers:
        argv += ["-m", markers]
    return argv


def run(
    long_tests=False,
    doctests=True,
    reset_preferences=True,
    extra_test_dirs=None,
    additional_args=None,
):
    """
    Run reprand's test suite.

    Parameters
    ----------
    long_tests : bool, optional
        Whether to include the tests marked as ``long`` (e.g. statistical
        tests over a million values). Defaults to ``False``.
    doctests : bool, optional
        Whether to run the doctests as well. Defaults to ``True``.
    reset_preferences : bool, optional
        Whether to run the tests with the default preferences instead of the
        user's preferences. The user's preferences are restored afterwards.
        Defaults to ``True``.
    extra_test_dirs : str or list of str, optional
        Further directories to collect tests from.
    additional_args : list of str, optional
        Further command line arguments for pytest.

    Returns
    -------
    success : bool
        Whether all tests passed.
    """
    if pytest is None:
        raise ImportError("Running the test suite requires the 'pytest' package.")
    if isinstance(extra_test_dirs, str):
        extra_test_dirs = [extra_test_dirs]
    dirnames = [PACKAGE_DIR] + list(extra_test_dirs or [])
    additional_args = list(additional_args or [])

    with_long = "with" if long_tests else "without"
    print(f"Testing reprand {reprand.__version__} in '{PACKAGE_DIR}' ({with_long} long tests)")

    stored_prefs = prefs.as_file
    if reset_preferences:
        prefs.reset_to_defaults()
    console_level = ReprandLogger.console_handler.level
    ReprandLogger.console_handler.setLevel(LOG_LEVELS["WARNING"])
    try:
        runs = []
        if doctests:
            runs.append(make_argv([PACKAGE_DIR], doctests=True))
        runs.append(make_argv(dirnames, None if long_tests else "not long"))
        results = [pytest.main(argv + additional_args) == 0 for argv in runs]
    finally:
        ReprandLogger.console_handler.setLevel(console_level)
        if reset_preferences:
            prefs.read_preference_file(StringIO(stored_prefs))
            prefs._backup()

    failed = results.count(False)
    if failed:
        print(f"ERROR: {failed} of {len(results)} test runs failed (see above).")
    else:
        print(f"OK: all {len(results)} test runs passed.")
    return not failed


if __name__ == "__main__":
    run()
