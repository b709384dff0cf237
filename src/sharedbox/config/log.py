"""Console logging setup for the sharedbox logger.

The library itself only emits records; applications (and the demo driver)
opt in to output by calling configure_logging().
"""

from __future__ import annotations

import logging
import sys

from sharedbox.config.settings import get_settings

_HANDLER_NAME = "sharedbox"
_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"


def configure_logging(level: str | int | None = None) -> logging.Logger:
    """Attach a console handler to the package logger.

    Repeated calls only adjust the level.

    Args:
        level: Logging level; defaults to SharedBoxSettings.log_level.

    Returns:
        The configured ``sharedbox`` logger.
    """
    if level is None:
        level = get_settings().log_level

    logger = logging.getLogger("sharedbox")
    logger.setLevel(level)
    if not any(h.get_name() == _HANDLER_NAME for h in logger.handlers):
        handler = logging.StreamHandler(sys.stderr)
        handler.set_name(_HANDLER_NAME)
        handler.setFormatter(logging.Formatter(_FORMAT))
        logger.addHandler(handler)
    return logger
