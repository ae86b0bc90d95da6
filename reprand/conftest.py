"""
Module containing fixtures and hooks used by the pytest test suite.
"""
import pytest


def pytest_configure(config):
    for marker in [
        "deterministic: tests comparing against exact reference values",
        "statistical: tests checking distributions with statistical tolerances",
        "long: tests that take a long time to run",
    ]:
        config.addinivalue_line("markers", marker)


def pytest_ignore_collect(collection_path, config):
    if config.option.doctestmodules:
        if "tests" in str(collection_path):
            return True  # Ignore tests package for doctests


# Fixture that is used for all tests
@pytest.fixture(autouse=True)
def setup_and_teardown():
    from reprand import default_random, restore_initial_state

    state = default_random.get_state()
    yield
    restore_initial_state()
    default_random.set_state(state)
