"""
Logging for the Swapped Commerce client.

Example:
    >>> from swapped_commerce.core.logging import LoggingConfig, configure_logging
    >>> configure_logging(LoggingConfig.create(level="DEBUG", format="json"))
"""

from .config import LoggingConfig, LogLevel, LogFormat
from .formatters import JSONFormatter, TextFormatter, get_formatter
from .logger import LOGGER_NAME, ExtraFieldsFilter, configure_logging

__all__ = [
    "LoggingConfig",
    "LogLevel",
    "LogFormat",
    "JSONFormatter",
    "TextFormatter",
    "get_formatter",
    "LOGGER_NAME",
    "ExtraFieldsFilter",
    "configure_logging",
]
