"""Core модули Swapped Commerce клиента."""

from .config import (
    BASE_URL,
    DEFAULT_CONFIG,
    ConfigInput,
    Environment,
    SwappedConfig,
    resolve_config,
)
from .exceptions import (
    ErrorKind,
    SwappedError,
    AuthenticationError,
    ValidationError,
    RateLimitError,
    NotFoundError,
    ConfigurationError,
    TIMEOUT_ERROR,
    NETWORK_ERROR,
    INVALID_RESPONSE,
    create_authentication_error,
    create_validation_error,
    create_rate_limit_error,
    create_not_found_error,
)
from .error_handler import ErrorHandler
from .http import RequestDescriptor, TimeoutGuard, build_url, create_request_config
from .models import ApiResponse
from .retry_engine import RetryEngine, RetryPolicy, with_retry, with_retry_sync
from .request import request, request_sync

__all__ = [
    # Config
    "BASE_URL",
    "DEFAULT_CONFIG",
    "ConfigInput",
    "Environment",
    "SwappedConfig",
    "resolve_config",
    # Exceptions
    "ErrorKind",
    "SwappedError",
    "AuthenticationError",
    "ValidationError",
    "RateLimitError",
    "NotFoundError",
    "ConfigurationError",
    "TIMEOUT_ERROR",
    "NETWORK_ERROR",
    "INVALID_RESPONSE",
    "create_authentication_error",
    "create_validation_error",
    "create_rate_limit_error",
    "create_not_found_error",
    # Pipeline
    "ErrorHandler",
    "RequestDescriptor",
    "TimeoutGuard",
    "build_url",
    "create_request_config",
    "ApiResponse",
    "RetryEngine",
    "RetryPolicy",
    "with_retry",
    "with_retry_sync",
    "request",
    "request_sync",
]
