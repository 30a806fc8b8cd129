"""Logger hierarchy for dagpath.

Every module logs through a child of the ``dagpath`` logger. The package only
installs a ``NullHandler``; applications decide where records go.
"""

import logging

ROOT_LOGGER_NAME = "dagpath"

logging.getLogger(ROOT_LOGGER_NAME).addHandler(logging.NullHandler())


def get_logger(name: str) -> logging.Logger:
    """Return the logger for ``name`` inside the ``dagpath`` hierarchy.

    Names outside the hierarchy are nested under it, so ``get_logger("bench")``
    returns ``dagpath.bench``.
    """
    if name != ROOT_LOGGER_NAME and not name.startswith(ROOT_LOGGER_NAME + "."):
        name = f"{ROOT_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def set_global_log_level(level: int) -> None:
    """Set the level of the ``dagpath`` logger, inherited by all engines."""
    logging.getLogger(ROOT_LOGGER_NAME).setLevel(level)


def enable_debug_logging() -> None:
    """Let the per-search DEBUG summaries through."""
    set_global_log_level(logging.DEBUG)
