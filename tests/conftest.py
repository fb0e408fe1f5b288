"""
Pytest configuration and fixtures for swapped-commerce tests.
"""

import logging

import pytest
import responses as responses_lib

from swapped_commerce.core.config import BASE_URL, SwappedConfig
from swapped_commerce.core.logging import LOGGER_NAME


@pytest.fixture
def base_url():
    """API origin used by every request."""
    return BASE_URL


@pytest.fixture
def api_key():
    return "sk_test_1234567890"


@pytest.fixture
def config(api_key):
    """Config with retries enabled and the default time budget."""
    return SwappedConfig(api_key=api_key)


@pytest.fixture
def no_retry_config(api_key):
    """Config for single-attempt tests."""
    return SwappedConfig(api_key=api_key, max_retries=0)


@pytest.fixture
def mock_responses():
    """Mock HTTP responses using responses library."""
    with responses_lib.RequestsMock() as rsps:
        yield rsps


@pytest.fixture
def webhook_secret():
    return "whsec_test_secret"


@pytest.fixture(autouse=True)
def reset_library_logger():
    """Drop handlers installed by configure_logging between tests."""
    logger = logging.getLogger(LOGGER_NAME)
    handlers = list(logger.handlers)
    level = logger.level
    yield
    for handler in list(logger.handlers):
        if handler not in handlers:
            logger.removeHandler(handler)
            handler.close()
    logger.setLevel(level)
