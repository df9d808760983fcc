"""Logging helpers for spgraph.

The package logs through the standard library under the ``spgraph`` logger.
Only a `logging.NullHandler` is attached at import; output is up to the
application, or to `enable_debug_logging` when a handler is passed to it.
Library records are DEBUG-level query summaries from the shortest-path
search.
"""

import logging
from typing import Optional

#: Name of the package logger every spgraph logger descends from.
PACKAGE_LOGGER = "spgraph"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Handler installed by enable_debug_logging(), removed again on disable
_debug_handler: Optional[logging.Handler] = None

logging.getLogger(PACKAGE_LOGGER).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for a module of this package.

    Args:
        name: Module name (``__name__``); must be ``spgraph`` or below it.

    Returns:
        The logger, which inherits level and handlers from ``spgraph``.

    Raises:
        ValueError: If `name` is outside the package namespace.
    """
    if name != PACKAGE_LOGGER and not name.startswith(PACKAGE_LOGGER + "."):
        raise ValueError(f"Logger '{name}' is not under '{PACKAGE_LOGGER}'.")
    return logging.getLogger(name)


def set_log_level(level: int) -> None:
    """Set the level of the ``spgraph`` logger (and so of every module logger)."""
    logging.getLogger(PACKAGE_LOGGER).setLevel(level)


def enable_debug_logging(handler: Optional[logging.Handler] = None) -> None:
    """Emit query summaries and other DEBUG records.

    Args:
        handler: Optional destination for the records. It gets the default
            format unless it already has a formatter, and replaces any handler
            passed to an earlier call. Without one, records go to whatever
            handlers the application configured.
    """
    global _debug_handler

    if handler is not None:
        if _debug_handler is not None:
            logging.getLogger(PACKAGE_LOGGER).removeHandler(_debug_handler)
        if handler.formatter is None:
            handler.setFormatter(logging.Formatter(DEFAULT_FORMAT))
        logging.getLogger(PACKAGE_LOGGER).addHandler(handler)
        _debug_handler = handler
    set_log_level(logging.DEBUG)


def disable_debug_logging() -> None:
    """Undo `enable_debug_logging`: drop its handler and reset the level."""
    global _debug_handler

    package_logger = logging.getLogger(PACKAGE_LOGGER)
    if _debug_handler is not None:
        package_logger.removeHandler(_debug_handler)
        _debug_handler = None
    package_logger.setLevel(logging.NOTSET)
