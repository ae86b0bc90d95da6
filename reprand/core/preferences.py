"""
Preferences controlling reprand.

Preferences are grouped in categories (``random``, ``logging``) and live in
the global ``prefs`` object. They can be accessed by their full name or via
attributes of their category::

    prefs['random.discard_chunk_size'] = 4096
    prefs.random.discard_chunk_size = 4096

Each preference is registered with a default value, documentation and a
validator. Values can also be set in preference files, see
`ReprandGlobalPreferences.read_preference_file`.
"""
import os
import re
from collections.abc import MutableMapping

import numpy

from reprand.utils.stringtools import deindent, indent

__all__ = ["PreferenceError", "ReprandPreference", "prefs"]

_NAME_PATTERN = re.compile(r"[A-Za-z][A-Za-z0-9_]*$")
_SECTION_PATTERN = re.compile(r"\[\s*([A-Za-z0-9_.]+)\s*\]$")
_ENTRY_PATTERN = re.compile(r"([A-Za-z0-9_.]+)\s*=\s*(.+)$")


class PreferenceError(Exception):
    """
    Raised for unknown preferences, invalid values and malformed preference
    files.
    """

    pass


def split_name(fullname):
    """
    Split a full preference name into its category and its name.

    Examples
    --------
    >>> split_name('random.discard_chunk_size')
    ('random', 'discard_chunk_size')
    >>> split_name('a.b.c')
    ('a.b', 'c')
    """
    category, _, name = fullname.rpartition(".")
    return category, name


def _comment(text):
    return [f"# {line}".rstrip() for line in text.split("\n")]


class ReprandPreference:
    """
    Definition of a single preference.

    Parameters
    ----------
    default : object
        The default value.
    docs : str
        Documentation of the preference.
    validator : callable, optional
        Returns whether a value is acceptable. By default, values have to be
        instances of the default value's class.
    representor : callable, optional
        Converts a value into a string that evaluates to the value again when
        written to a preference file. Defaults to `repr`.
    """

    def __init__(self, default, docs, validator=None, representor=repr):
        self.default = default
        self.docs = deindent(docs, docstring=True).strip()
        self.validator = validator
        self.representor = representor

    def is_valid(self, value):
        if self.validator is None:
            return isinstance(value, type(self.default))
        return bool(self.validator(value))


class ReprandPreferenceCategory(MutableMapping):
    """
    The preferences of one category, e.g. ``prefs.random``. All names are
    relative to the category, values are read from and written to the global
    preferences.
    """

    def __init__(self, all_prefs, category):
        object.__setattr__(self, "_all_prefs", all_prefs)
        object.__setattr__(self, "_category", category)

    def _fullname(self, name):
        return f"{self._category}.{name}"

    def __getitem__(self, name):
        return self._all_prefs[self._fullname(name)]

    def __setitem__(self, name, value):
        self._all_prefs[self._fullname(name)] = value

    def __delitem__(self, name):
        raise PreferenceError("Preferences cannot be deleted.")

    def __iter__(self):
        prefix = f"{self._category}."
        return (name[len(prefix) :] for name in self._all_prefs if name.startswith(prefix))

    def __len__(self):
        return sum(1 for _ in self)

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        try:
            return self[name]
        except KeyError:
            raise AttributeError(f"No preference '{self._fullname(name)}'") from None

    def __setattr__(self, name, value):
        self[name] = value

    def __delattr__(self, name):
        raise PreferenceError("Preferences cannot be deleted.")

    def __dir__(self):
        return list(super().__dir__()) + list(self)

    def __repr__(self):
        return f"<preference category '{self._category}': {dict(self)}>"


class ReprandGlobalPreferences(MutableMapping):
    """
    The class of the global ``prefs`` object, a mapping from full preference
    names to their values.

    Only registered preferences (see `register_preferences`) can be set and
    every new value is checked by the preference's validator. Values read
    from a preference file before their category is registered are kept and
    validated at registration time.
    """

    def __init__(self):
        self._categories = {}
        self._values = {}
        self._pending = {}
        self._backup_values = {}

    def __getitem__(self, name):
        if name in self._categories:
            return ReprandPreferenceCategory(self, name)
        return self._values[name]

    def __setitem__(self, name, value):
        pref = self._definition(name)
        if not pref.is_valid(value):
            raise PreferenceError(f"Invalid value {value!r} for preference '{name}'.")
        self._values[name] = value

    def __delitem__(self, name):
        raise PreferenceError("Preferences cannot be deleted.")

    def __iter__(self):
        return iter(self._values)

    def __len__(self):
        return len(self._values)

    def __contains__(self, name):
        return name in self._values

    def __getattr__(self, name):
        if name.startswith("_"):
            raise AttributeError(name)
        if name in self._categories:
            return ReprandPreferenceCategory(self, name)
        raise AttributeError(f"No preference category '{name}'")

    def __setattr__(self, name, value):
        if not name.startswith("_"):
            raise PreferenceError(
                f"Cannot set '{name}', set individual preferences instead."
            )
        object.__setattr__(self, name, value)

    def __dir__(self):
        return list(super().__dir__()) + [
            category for category in self._categories if "." not in category
        ]

    def __repr__(self):
        return f"<{self.__class__.__name__} with categories {sorted(self._categories)}>"

    def _definition(self, name):
        category, endname = split_name(name)
        if category not in self._categories:
            raise PreferenceError(
                f"Unknown preference category '{category}' in '{name}'."
            )
        _, definitions = self._categories[category]
        if endname not in definitions:
            raise PreferenceError(f"Unknown preference '{name}'.")
        return definitions[endname]

    def register_preferences(self, category, docs, **definitions):
        """
        Register a category of preferences.

        Parameters
        ----------
        category : str
            The name of the category, e.g. ``'random'``.
        docs : str
            Documentation of the category.
        **definitions : `ReprandPreference`
            The preferences, the keyword is the name within the category.

        Raises
        ------
        PreferenceError
            If the category exists already, a name is not a valid identifier
            or a value set earlier (e.g. in a preference file) is invalid.
        """
        if category in self._categories:
            raise PreferenceError(f"Preference category '{category}' exists already.")
        for name in definitions:
            if not _NAME_PATTERN.match(name) or hasattr(ReprandPreferenceCategory, name):
                raise PreferenceError(f"Illegal preference name '{name}'.")
        self._categories[category] = (
            deindent(docs, docstring=True).strip(),
            dict(definitions),
        )
        for name, pref in definitions.items():
            fullname = f"{category}.{name}"
            self._values[fullname] = pref.default
            if fullname in self._pending:
                self[fullname] = self._pending.pop(fullname)

    def do_validation(self):
        """
        Check all values read from preference files that have not been checked
        yet. Raises a `PreferenceError` for values of unknown preferences.
        """
        for name in list(self._pending):
            self[name] = self._pending.pop(name)

    def _backup(self):
        self._backup_values = dict(self._values)

    def _restore(self):
        self._values.update(self._backup_values)

    def reset_to_defaults(self):
        """
        Set all preferences to their default values.
        """
        for category, (_, definitions) in self._categories.items():
            for name, pref in definitions.items():
                self._values[f"{category}.{name}"] = pref.default

    def _evaluate(self, expression, name):
        namespace = {"numpy": numpy, "np": numpy}
        try:
            return eval(expression, namespace)
        except Exception as ex:
            raise PreferenceError(
                f"Cannot evaluate '{expression}' for preference '{name}': {ex}"
            ) from ex

    def read_preference_file(self, file):
        """
        Read preferences from a file.

        Each line is either a comment (starting with ``#``), a section header
        ``[category]`` or an assignment ``name = value``. Within a section,
        names are relative to the section's category. Values are Python
        expressions (``numpy`` is available as ``numpy`` and ``np``), e.g.::

            # reprand preferences
            logging.console_log_level = 'WARNING'
            [random]
            discard_chunk_size = 2**16

        Parameters
        ----------
        file : str or file-like object
            The name of the file or an object with a ``readlines`` method.
        """
        if isinstance(file, str):
            with open(file, encoding="utf-8") as f:
                lines = f.readlines()
            source = file
        else:
            lines = file.readlines()
            source = getattr(file, "name", repr(file))
        section = None
        for lineno, line in enumerate(lines, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            match = _SECTION_PATTERN.match(line)
            if match:
                section = match.group(1)
                continue
            match = _ENTRY_PATTERN.match(line)
            if match is None:
                raise PreferenceError(
                    f"Cannot parse line {lineno} of preference file {source}: '{line}'"
                )
            name, expression = match.groups()
            if section is not None:
                name = f"{section}.{name}"
            value = self._evaluate(expression, name)
            if split_name(name)[0] in self._categories:
                self[name] = value
            else:
                self._pending[name] = value

    def load_preferences(self):
        """
        Read the preference files that exist, in this order:

        1. ``default_preferences`` in the reprand installation directory
        2. ``~/.reprand/user_preferences``
        3. ``reprand_preferences`` in the current directory

        Later files override earlier ones.
        """
        package_dir = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
        for filename in [
            os.path.join(package_dir, "default_preferences"),
            os.path.join(os.path.expanduser("~"), ".reprand", "user_preferences"),
            "reprand_preferences",
        ]:
            if os.path.isfile(filename):
                self.read_preference_file(filename)

    def _as_file(self, value_of):
        blocks = []
        for category, (docs, definitions) in sorted(self._categories.items()):
            lines = ["#" + "-" * 79] + _comment(docs) + ["#" + "-" * 79, ""]
            lines += [f"[{category}]", ""]
            for name, pref in sorted(definitions.items()):
                value = value_of(f"{category}.{name}", pref)
                lines += _comment(pref.docs)
                lines += [f"{name} = {pref.representor(value)}", ""]
            blocks.append("\n".join(lines))
        return "\n".join(blocks)

    as_file = property(
        lambda self: self._as_file(lambda fullname, pref: self[fullname]),
        doc="The current preferences in the preference file format",
    )

    defaults_as_file = property(
        lambda self: self._as_file(lambda fullname, pref: pref.default),
        doc="The default preferences in the preference file format",
    )

    def get_documentation(self, category=None):
        """
        Document the preferences of a category (or of all categories) in
        reStructuredText.
        """
        if category is None:
            categories = sorted(self._categories)
        elif category in self._categories:
            categories = [category]
        else:
            raise PreferenceError(f"Unknown preference category '{category}'.")
        parts = []
        for category in categories:
            docs, definitions = self._categories[category]
            parts.append(f"{category}\n{'~' * len(category)}\n\n{docs}\n")
            for name, pref in sorted(definitions.items()):
                default = pref.representor(pref.default)
                parts.append(f"``{category}.{name}`` = ``{default}``\n{indent(pref.docs)}\n")
        return "\n".join(parts)


#: Object storing reprand's preferences
prefs = ReprandGlobalPreferences()
