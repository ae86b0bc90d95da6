"""
Definitions, documentation, default values and validation functions for core
reprand preferences.
"""
import numbers

from reprand.core.preferences import ReprandPreference, prefs

__all__ = []


def environment_variable_validator(name):
    return isinstance(name, str) and len(name) > 0 and "=" not in name


def positive_integer_validator(value):
    return (
        isinstance(value, numbers.Integral)
        and not isinstance(value, bool)
        and value > 0
    )


prefs.register_preferences(
    "random",
    "Random number generation preferences",
    seed_environment_variable=ReprandPreference(
        default="SEED_RANDOM",
        docs="""
        Name of the environment variable that reseeds the default generator.

        The variable is read once, when reprand is imported. If it is set to a
        non-zero integer, the default generator (which must not have been used
        yet) is reseeded with this value. Changing this preference after the
        import only affects explicit calls to
        `~reprand.random.default.initialize_from_environment`.
        """,
        validator=environment_variable_validator,
    ),
    discard_chunk_size=ReprandPreference(
        default=1048576,
        docs="""
        Maximum number of values skipped in a single step by ``discard``.

        Discarding is done in chunks of at most this many raw draws, the
        values themselves are never stored.
        """,
        validator=positive_integer_validator,
    ),
)
