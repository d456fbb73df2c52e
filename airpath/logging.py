"""Logging setup for airpath.

All package loggers hang off the ``airpath`` logger, which owns the only
handler. Records go to standard error so that route reports and ``--json``
output on standard output stay machine-readable.
"""

import logging
import sys
from typing import Optional

ROOT_LOGGER_NAME = "airpath"
LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

_configured = False


class _StderrHandler(logging.StreamHandler):
    """Stream handler bound to whatever ``sys.stderr`` is when a record is emitted.

    Binding late keeps the handler valid when ``sys.stderr`` is swapped after
    import, e.g. by pytest's output capture.
    """

    def __init__(self, level: int = logging.NOTSET) -> None:
        logging.Handler.__init__(self, level)

    @property
    def stream(self):  # type: ignore[override]
        return sys.stderr


def setup_root_logger(
    level: int = logging.INFO,
    handler: Optional[logging.Handler] = None,
) -> None:
    """Attach a single handler to the ``airpath`` logger.

    Only the first call has an effect until `reset_logging` is called.

    Args:
        level: Initial level of the ``airpath`` logger.
        handler: Handler to install; defaults to a standard-error handler
            using ``LOG_FORMAT``.
    """
    global _configured
    if _configured:
        return

    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if handler is None:
        handler = _StderrHandler()
    if handler.formatter is None:
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)

    # caplog listens on the stdlib root logger
    root_logger.propagate = True
    _configured = True


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``airpath`` hierarchy.

    Child loggers carry no level or handler of their own, so
    `set_global_log_level` governs all of them.
    """
    setup_root_logger()
    logger = logging.getLogger(name)
    logger.setLevel(logging.NOTSET)
    return logger


def level_for(verbose: bool = False, quiet: bool = False) -> int:
    """Map the CLI verbosity flags to a logging level. ``verbose`` wins."""
    if verbose:
        return logging.DEBUG
    if quiet:
        return logging.WARNING
    return logging.INFO


def set_global_log_level(level: int) -> None:
    """Set the level of the ``airpath`` logger and its handlers."""
    setup_root_logger()
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.setLevel(level)
    for handler in root_logger.handlers:
        handler.setLevel(level)


def reset_logging() -> None:
    """Drop the installed handler so the next `setup_root_logger` starts over."""
    global _configured
    _configured = False
    root_logger = logging.getLogger(ROOT_LOGGER_NAME)
    root_logger.handlers.clear()
    root_logger.setLevel(logging.NOTSET)


setup_root_logger()
