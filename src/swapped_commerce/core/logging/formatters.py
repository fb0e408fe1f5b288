"""
Log formatters: JSON for log pipelines, text for humans.

Both append fields passed through ``extra=`` and mask sensitive values.
"""

import json
import logging
from datetime import datetime, timezone
from typing import Any, Dict

from ...utils.sanitizer import mask_sensitive_data

# Attributes every LogRecord has; anything else came from ``extra=``.
_STANDARD_FIELDS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__
) | {"message", "asctime"}


def extra_fields(record: logging.LogRecord) -> Dict[str, Any]:
    """Fields attached to ``record`` via ``extra=``, masked for output."""
    fields = {
        key: value
        for key, value in record.__dict__.items()
        if key not in _STANDARD_FIELDS and not key.startswith('_')
    }
    return mask_sensitive_data(fields)


class JSONFormatter(logging.Formatter):
    """
    One JSON object per record.

    Example output:
        {"timestamp": "2025-01-15T10:30:45.123000+00:00", "level": "WARNING",
         "logger": "swapped_commerce.core.retry_engine",
         "message": "Attempt 1/4 failed, retrying in 1.0s: Rate limit exceeded"}
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        log_data.update(extra_fields(record))

        if record.exc_info:
            log_data['exception'] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


class TextFormatter(logging.Formatter):
    """
    Plain text formatter.

    Format: [timestamp] [level] [logger] message key=value ...
    """

    def __init__(self):
        super().__init__(
            fmt='[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s',
            datefmt='%Y-%m-%d %H:%M:%S'
        )

    def format(self, record: logging.LogRecord) -> str:
        base_msg = super().format(record)

        fields = extra_fields(record)
        if fields:
            base_msg += " " + " ".join(f"{key}={value}" for key, value in fields.items())

        return base_msg


def get_formatter(format_type: str) -> logging.Formatter:
    """
    Formatter by name.

    Raises:
        ValueError: Unknown format type
    """
    formatters = {
        "json": JSONFormatter,
        "text": TextFormatter,
    }
    try:
        return formatters[format_type]()
    except KeyError:
        raise ValueError(
            f"Unknown format type: {format_type}. "
            f"Available formats: {', '.join(formatters)}"
        )
