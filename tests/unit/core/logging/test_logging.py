"""
Tests for logging configuration and formatters.
"""

import json
import sys
import logging

import pytest

from swapped_commerce.core.logging import (
    LOGGER_NAME,
    JSONFormatter,
    LogFormat,
    LoggingConfig,
    LogLevel,
    TextFormatter,
    configure_logging,
    get_formatter,
)


def make_record(msg="Request started", **extra):
    record = logging.LogRecord(
        name="swapped_commerce.core.request",
        level=logging.INFO,
        pathname=__file__,
        lineno=1,
        msg=msg,
        args=(),
        exc_info=None,
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


class TestLoggingConfig:
    """Test LoggingConfig."""

    def test_defaults(self):
        config = LoggingConfig()
        assert config.level is LogLevel.INFO
        assert config.format is LogFormat.TEXT
        assert config.enable_console
        assert config.extra_fields == {}

    def test_create_from_strings(self):
        config = LoggingConfig.create(level="debug", format="JSON")
        assert config.level is LogLevel.DEBUG
        assert config.format is LogFormat.JSON

    def test_create_invalid_level(self):
        with pytest.raises(ValueError):
            LoggingConfig.create(level="LOUD")


class TestFormatters:
    """Test JSON and text formatters."""

    def test_json_structure(self):
        output = json.loads(JSONFormatter().format(make_record(status_code=429)))
        assert output["level"] == "INFO"
        assert output["logger"] == "swapped_commerce.core.request"
        assert output["message"] == "Request started"
        assert output["status_code"] == 429
        assert "timestamp" in output

    def test_json_masks_sensitive_extras(self):
        record = make_record(api_key="sk_live_1234567890", order_id="ord_1")
        output = json.loads(JSONFormatter().format(record))
        assert output["api_key"] == "***REDACTED***"
        assert output["order_id"] == "ord_1"

    def test_json_includes_exception(self):
        try:
            raise ValueError("boom")
        except ValueError:
            record = make_record()
            record.exc_info = sys.exc_info()
        output = json.loads(JSONFormatter().format(record))
        assert "ValueError: boom" in output["exception"]

    def test_text_appends_extras(self):
        text = TextFormatter().format(make_record(error_code="RATE_LIMIT_ERROR"))
        assert "[INFO] [swapped_commerce.core.request] Request started" in text
        assert "error_code=RATE_LIMIT_ERROR" in text

    def test_text_masks_secret(self):
        text = TextFormatter().format(make_record(secret="whsec_abc"))
        assert "whsec_abc" not in text

    def test_get_formatter(self):
        assert isinstance(get_formatter("json"), JSONFormatter)
        assert isinstance(get_formatter("text"), TextFormatter)
        with pytest.raises(ValueError, match="Unknown format type"):
            get_formatter("colored")


class TestConfigureLogging:
    """Test configure_logging."""

    def test_sets_level_and_handler(self):
        logger = configure_logging(LoggingConfig.create(level="DEBUG", format="json"))
        assert logger.name == LOGGER_NAME
        assert logger.level == logging.DEBUG
        installed = [h for h in logger.handlers if isinstance(h.formatter, JSONFormatter)]
        assert len(installed) == 1

    def test_reconfigure_replaces_handler(self):
        configure_logging(LoggingConfig.create(format="json"))
        logger = configure_logging(LoggingConfig.create(format="text"))
        formatters = [type(h.formatter) for h in logger.handlers if h.formatter is not None]
        assert formatters == [TextFormatter]

    def test_console_disabled(self):
        logger = configure_logging(LoggingConfig(enable_console=False))
        assert all(h.formatter is None for h in logger.handlers)

    def test_extra_fields_filter(self, capsys):
        logger = configure_logging(LoggingConfig.create(
            format="json", extra_fields={"service": "checkout"}
        ))
        logger.info("hello")
        line = capsys.readouterr().err.strip().splitlines()[-1]
        assert json.loads(line)["service"] == "checkout"
