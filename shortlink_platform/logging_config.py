"""
Logging setup for the Shortlink Platform.

All modules log through children of the ``shortlink`` logger
(``shortlink.registry``, ``shortlink.storage`` ...). Applications call
`configure_logging` once at boot; libraries never touch handlers.
"""

import logging
from typing import Optional, Union

from .config import settings

ROOT_LOGGER_NAME = "shortlink"

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return the ``shortlink`` logger or one of its children."""
    if not name:
        return logging.getLogger(ROOT_LOGGER_NAME)
    return logging.getLogger(f"{ROOT_LOGGER_NAME}.{name}")


def configure_logging(level: Union[str, int, None] = None) -> logging.Logger:
    """
    Install basic console logging unless the host application already did.

    Args:
        level: Log level name or number; defaults to settings.LOG_LEVEL.

    Returns:
        logging.Logger: The ``shortlink`` root logger.
    """
    resolved = level if level is not None else settings.LOG_LEVEL
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            resolved = logging.INFO

    if not logging.getLogger().handlers:
        logging.basicConfig(level=resolved, format=_FORMAT)

    log = get_logger()
    log.setLevel(resolved)
    return log
