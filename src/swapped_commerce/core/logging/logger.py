"""
Wiring LoggingConfig onto the ``swapped_commerce`` logger.

The library itself only ever calls ``logging.getLogger(__name__)``;
this module is for applications that want the client to set up output.
"""

import logging
import sys
from typing import Any, Dict

from .config import LoggingConfig
from .formatters import get_formatter

LOGGER_NAME = "swapped_commerce"

# Marks handlers installed here so reconfiguration replaces only them.
_HANDLER_FLAG = "_swapped_commerce_handler"


class ExtraFieldsFilter(logging.Filter):
    """Adds static fields (service, environment, ...) to every record."""

    def __init__(self, extra_fields: Dict[str, Any]):
        super().__init__()
        self.extra_fields = extra_fields

    def filter(self, record: logging.LogRecord) -> bool:
        for key, value in self.extra_fields.items():
            if not hasattr(record, key):
                setattr(record, key, value)
        return True


def configure_logging(config: LoggingConfig) -> logging.Logger:
    """
    Apply ``config`` to the library logger and return it.

    Safe to call repeatedly: handlers from a previous call are removed
    and closed first.

    Example:
        >>> logger = configure_logging(LoggingConfig.create(level="DEBUG", format="json"))
        >>> logger.debug("configured")
    """
    logger = logging.getLogger(LOGGER_NAME)
    level = getattr(logging, config.level.value)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        if getattr(handler, _HANDLER_FLAG, False):
            logger.removeHandler(handler)
            handler.close()

    if config.enable_console:
        handler = logging.StreamHandler(sys.stderr)
        handler.setLevel(level)
        handler.setFormatter(get_formatter(config.format.value))
        if config.extra_fields:
            handler.addFilter(ExtraFieldsFilter(config.extra_fields))
        setattr(handler, _HANDLER_FLAG, True)
        logger.addHandler(handler)

    return logger
