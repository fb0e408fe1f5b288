"""Swapped Commerce - Python client for the Swapped Commerce payments API."""

import logging
from importlib.metadata import version, PackageNotFoundError

from .client import SwappedClient, create_client
from .async_client import AsyncSwappedClient, create_async_client
from .core.config import (
    BASE_URL,
    DEFAULT_CONFIG,
    Environment,
    SwappedConfig,
)
from .core.env_config import SwappedSettings, load_from_env
from .core.exceptions import (
    ErrorKind,
    SwappedError,
    AuthenticationError,
    ValidationError,
    RateLimitError,
    NotFoundError,
    ConfigurationError,
    create_authentication_error,
    create_validation_error,
    create_rate_limit_error,
    create_not_found_error,
)
from .core.logging import LoggingConfig, configure_logging
from .core.models import ApiResponse
from .core.request import request, request_sync
from .types import WebhookEvent, WebhookEventType
from .webhooks import (
    SIGNATURE_HEADER,
    WebhookParseError,
    WebhookRouter,
    WebhookSignatureError,
    compute_webhook_signature,
    parse_webhook_event,
    verify_webhook_signature,
    verify_webhook_signature_sync,
)

# Set up logging - add NullHandler to prevent "No handler found" warnings
# Users can configure logging themselves using logging.getLogger('swapped_commerce')
logging.getLogger('swapped_commerce').addHandler(logging.NullHandler())

# Version info - read from package metadata (single source of truth in pyproject.toml)
try:
    __version__ = version("swapped-commerce")
except PackageNotFoundError:
    # Package is not installed (development mode)
    __version__ = "0.0.0-dev"

__license__ = "MIT"

# All public exports
__all__ = [
    # Clients
    "SwappedClient",
    "AsyncSwappedClient",
    "create_client",
    "create_async_client",
    "request",
    "request_sync",

    # Config
    "BASE_URL",
    "DEFAULT_CONFIG",
    "Environment",
    "SwappedConfig",
    "SwappedSettings",
    "load_from_env",
    "LoggingConfig",
    "configure_logging",

    # Responses
    "ApiResponse",

    # Exceptions
    "ErrorKind",
    "SwappedError",
    "AuthenticationError",
    "ValidationError",
    "RateLimitError",
    "NotFoundError",
    "ConfigurationError",
    "create_authentication_error",
    "create_validation_error",
    "create_rate_limit_error",
    "create_not_found_error",

    # Webhooks
    "SIGNATURE_HEADER",
    "WebhookEvent",
    "WebhookEventType",
    "WebhookParseError",
    "WebhookRouter",
    "WebhookSignatureError",
    "compute_webhook_signature",
    "parse_webhook_event",
    "verify_webhook_signature",
    "verify_webhook_signature_sync",

    # Version
    "__version__",
]
