"""
Logging for reprand.

Modules get a `ReprandLogger` via ``get_logger(__name__)``. Messages go to the
console and, unless the ``logging.file_log`` preference is switched off, to a
temporary log file. Besides the standard levels there is a ``DIAGNOSTIC``
level below ``DEBUG`` for very detailed output, e.g. every reseeding of an
engine.
"""
import atexit
import logging
import os
import sys
import tempfile
from warnings import warn

import numpy

from reprand.core.preferences import ReprandPreference, prefs

__all__ = ["get_logger", "ReprandLogger", "catch_logs"]

#: Level for output that is only useful when debugging reprand itself
DIAGNOSTIC = 5
logging.addLevelName(DIAGNOSTIC, "DIAGNOSTIC")

#: Log levels by name
LOG_LEVELS = {
    "CRITICAL": logging.CRITICAL,
    "ERROR": logging.ERROR,
    "WARNING": logging.WARNING,
    "INFO": logging.INFO,
    "DEBUG": logging.DEBUG,
    "DIAGNOSTIC": DIAGNOSTIC,
}


def log_level_validator(log_level):
    return isinstance(log_level, str) and log_level.upper() in LOG_LEVELS


prefs.register_preferences(
    "logging",
    "Where log messages are written and which of them are kept",
    console_log_level=ReprandPreference(
        default="INFO",
        docs="""
        Minimum level of the messages shown on the console. One of CRITICAL,
        ERROR, WARNING, INFO, DEBUG or DIAGNOSTIC.
        """,
        validator=log_level_validator,
    ),
    file_log=ReprandPreference(
        default=True,
        docs="""
        Whether to write log messages to a temporary file, see
        ``logging.file_log_level``.
        """,
    ),
    file_log_level=ReprandPreference(
        default="DIAGNOSTIC",
        docs="""
        Minimum level of the messages written to the log file. One of
        CRITICAL, ERROR, WARNING, INFO, DEBUG or DIAGNOSTIC.
        """,
        validator=log_level_validator,
    ),
    delete_log_on_exit=ReprandPreference(
        default=True,
        docs="""
        Whether to delete the log file when the process exits (or when
        logging is initialized again).
        """,
    ),
)


def _remove_log_file(filename):
    try:
        os.remove(filename)
    except OSError as exc:
        warn(f"Could not delete log file {filename}: {exc}")


def clean_up_logging():
    """
    Shut down logging and delete the log file, unless the
    ``logging.delete_log_on_exit`` preference is switched off.
    """
    logging.shutdown()
    if prefs["logging.delete_log_on_exit"] and ReprandLogger.tmp_log is not None:
        _remove_log_file(ReprandLogger.tmp_log)
        ReprandLogger.tmp_log = None


atexit.register(clean_up_logging)


class NameFilter(logging.Filter):
    """
    Rejects records of loggers whose name ends with a given name, e.g.
    ``'default'`` rejects messages of ``reprand.random.default``.
    """

    def __init__(self, name):
        super().__init__()
        self.suppressed = name

    def filter(self, record):
        return record.name.rsplit(".", 1)[-1] != self.suppressed


class ReprandLogger:
    """
    Logger for a module in the ``reprand`` hierarchy, use `get_logger` to
    create one.

    All logging methods take the message, an optional ``name_suffix`` that is
    appended to the logger name (e.g. a function name) and a ``once`` flag.
    With ``once=True``, a message is only emitted the first time it is logged
    by the same logger at the same level.
    """

    #: Messages logged with ``once=True`` as ``(name, level, message)``
    _log_messages = set()

    #: Name of the current log file (if any)
    tmp_log = None

    #: `logging.FileHandler` writing to `tmp_log`
    file_handler = None

    #: `logging.StreamHandler` writing to the console
    console_handler = None

    def __init__(self, name):
        self.name = name

    def _log(self, level, msg, name_suffix, once):
        name = f"{self.name}.{name_suffix}" if name_suffix else self.name
        if once:
            key = (name, level, msg)
            if key in ReprandLogger._log_messages:
                return
            ReprandLogger._log_messages.add(key)
        logging.getLogger(name).log(LOG_LEVELS[level], msg)

    def diagnostic(self, msg, name_suffix=None, once=False):
        self._log("DIAGNOSTIC", msg, name_suffix, once)

    def debug(self, msg, name_suffix=None, once=False):
        self._log("DEBUG", msg, name_suffix, once)

    def info(self, msg, name_suffix=None, once=False):
        self._log("INFO", msg, name_suffix, once)

    def warn(self, msg, name_suffix=None, once=False):
        self._log("WARNING", msg, name_suffix, once)

    def error(self, msg, name_suffix=None, once=False):
        self._log("ERROR", msg, name_suffix, once)

    @staticmethod
    def suppress_name(name, filter_log_file=False):
        """
        Hide the messages of all loggers whose name ends with ``name``.

        Parameters
        ----------
        name : str
            The last part of the logger name, e.g. ``'engine'``.
        filter_log_file : bool, optional
            Whether to remove the messages from the log file as well. By
            default, they are only hidden on the console.
        """
        name_filter = NameFilter(name)
        ReprandLogger.console_handler.addFilter(name_filter)
        if filter_log_file and ReprandLogger.file_handler is not None:
            ReprandLogger.file_handler.addFilter(name_filter)

    @staticmethod
    def _remove_handlers():
        main_logger = logging.getLogger("reprand")
        warnings_logger = logging.getLogger("py.warnings")
        for handler in (ReprandLogger.console_handler, ReprandLogger.file_handler):
            if handler is not None:
                main_logger.removeHandler(handler)
                warnings_logger.removeHandler(handler)
                handler.close()
        ReprandLogger.console_handler = None
        ReprandLogger.file_handler = None
        if ReprandLogger.tmp_log is not None:
            if prefs["logging.delete_log_on_exit"]:
                _remove_log_file(ReprandLogger.tmp_log)
            ReprandLogger.tmp_log = None

    @staticmethod
    def initialize():
        """
        Set up the console and file handlers according to the ``logging``
        preferences. Called when reprand is imported, calling it again
        replaces the handlers (and the log file) of the previous call.
        """
        ReprandLogger._remove_handlers()
        main_logger = logging.getLogger("reprand")
        main_logger.propagate = False
        main_logger.setLevel(DIAGNOSTIC)

        handlers = []
        if prefs["logging.file_log"]:
            try:
                fd, ReprandLogger.tmp_log = tempfile.mkstemp(
                    prefix="reprand_debug_", suffix=".log"
                )
                os.close(fd)
                file_handler = logging.FileHandler(
                    ReprandLogger.tmp_log, mode="w", encoding="utf-8"
                )
            except OSError as exc:
                warn(f"Could not create log file: {exc}")
            else:
                file_handler.setLevel(
                    LOG_LEVELS[prefs["logging.file_log_level"].upper()]
                )
                file_handler.setFormatter(
                    logging.Formatter(
                        "%(asctime)s %(levelname)-10s %(name)s: %(message)s"
                    )
                )
                ReprandLogger.file_handler = file_handler
                handlers.append(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setLevel(LOG_LEVELS[prefs["logging.console_log_level"].upper()])
        console_handler.setFormatter(
            logging.Formatter("%(levelname)-10s %(message)s [%(name)s]")
        )
        ReprandLogger.console_handler = console_handler
        handlers.append(console_handler)

        # Python warnings end up in the same places
        logging.captureWarnings(True)
        warnings_logger = logging.getLogger("py.warnings")
        for handler in handlers:
            main_logger.addHandler(handler)
            warnings_logger.addHandler(handler)

        main_logger.log(DIAGNOSTIC, f"Log file: {ReprandLogger.tmp_log}")
        main_logger.log(DIAGNOSTIC, f"Python {sys.version} ({sys.executable})")
        main_logger.log(DIAGNOSTIC, f"Platform: {sys.platform}")
        main_logger.log(DIAGNOSTIC, f"numpy {numpy.__version__}")


def get_logger(module_name="reprand"):
    """
    Get the logger for a module.

    Parameters
    ----------
    module_name : str
        The name of the logger, normally ``__name__``.

    Returns
    -------
    logger : `ReprandLogger`
    """
    return ReprandLogger(module_name)


class LogCapture(logging.Handler):
    """
    Handler collecting ``(level, name, message)`` tuples in a list. While it
    is installed, it replaces all other handlers of the ``reprand`` and
    ``py.warnings`` loggers.
    """

    captured_loggers = ("reprand", "py.warnings")

    def __init__(self, log_list, log_level=logging.WARNING):
        super().__init__(level=log_level)
        self.log_list = log_list
        self._replaced = {}

    def emit(self, record):
        self.log_list.append((record.levelname, record.name, record.getMessage()))

    def install(self):
        for name in self.captured_loggers:
            the_logger = logging.getLogger(name)
            self._replaced[name] = list(the_logger.handlers)
            for handler in self._replaced[name]:
                the_logger.removeHandler(handler)
            the_logger.addHandler(self)

    def uninstall(self):
        for name, handlers in self._replaced.items():
            the_logger = logging.getLogger(name)
            the_logger.removeHandler(self)
            for handler in handlers:
                the_logger.addHandler(handler)
        self._replaced = {}


class catch_logs:
    """
    Context manager collecting reprand's log messages in a list of
    ``(level, name, message)`` tuples instead of emitting them.

    Parameters
    ----------
    log_level : int or str, optional
        Only messages of this level or above are collected, defaults to
        ``WARNING``.

    Examples
    --------
    >>> logger = get_logger('reprand.logtest')
    >>> with catch_logs() as logs:
    ...     logger.info('not collected')
    ...     logger.warn('something odd')
    >>> logs
    [('WARNING', 'reprand.logtest', 'something odd')]
    """

    def __init__(self, log_level=logging.WARNING):
        self.log_list = []
        self.handler = LogCapture(self.log_list, log_level)

    def __enter__(self):
        self.handler.install()
        return self.log_list

    def __exit__(self, *exc_info):
        self.handler.uninstall()
