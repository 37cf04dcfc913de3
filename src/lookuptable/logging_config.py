"""Opt-in diagnostics for the ``lookuptable`` logger.

The package only installs a ``NullHandler``; applications configure logging
as they see fit. :func:`setup_logging` is a shortcut for scripts and
notebooks that want to see table construction and backend selection
messages without touching the root logger.
"""
import logging
from typing import Optional

PACKAGE_LOGGER = "lookuptable"

_FORMAT = "%(name)s - %(levelname)s - %(message)s"


def setup_logging(level: int = logging.DEBUG, handler: Optional[logging.Handler] = None) -> logging.Handler:
    """
    Route ``lookuptable`` messages at ``level`` and above to ``handler``.

    Args:
        level: Logging level for the package logger.
        handler: Destination; a stderr ``StreamHandler`` when omitted.

    Returns:
        The installed handler. A handler installed by an earlier call is
        removed first, handlers added by the application are left alone.
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    for old in [h for h in logger.handlers if getattr(h, "_lookuptable_owned", False)]:
        logger.removeHandler(old)
        old.close()

    if handler is None:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(_FORMAT))
    handler._lookuptable_owned = True  # type: ignore[attr-defined]
    handler.setLevel(level)
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler
