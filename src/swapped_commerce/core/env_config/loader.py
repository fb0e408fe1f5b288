"""
Configuration loader from environment variables and .env files.

Main entry point for loading configuration.
"""

from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from ..config import SwappedConfig
from ..exceptions import ConfigurationError
from ..logging.config import LoggingConfig
from .settings import SwappedSettings


def load_settings(env_file: Optional[str] = None) -> SwappedSettings:
    """
    Read SwappedSettings, wrapping pydantic validation errors.

    Raises:
        ConfigurationError: A SWAPPED_* value failed validation
    """
    try:
        if env_file is None:
            return SwappedSettings()
        return SwappedSettings(_env_file=env_file)
    except PydanticValidationError as e:
        raise ConfigurationError(f"Invalid environment configuration: {e}") from e


def load_from_env(env_file: Optional[str] = None, **overrides: Any) -> SwappedConfig:
    """
    Load SwappedConfig from environment variables.

    Priority (highest to lowest):
    1. **overrides - explicit parameters
    2. Environment variables (SWAPPED_*)
    3. .env file
    4. Defaults

    Args:
        env_file: Custom .env file path
        **overrides: api_key, environment, timeout_ms, max_retries,
            log_enabled, log_level, log_format

    Returns:
        SwappedConfig instance

    Raises:
        ConfigurationError: No api key anywhere, or invalid values

    Example:
        >>> config = load_from_env()
        >>> config = load_from_env(env_file=".env.staging", max_retries=0)
    """
    settings = load_settings(env_file)

    def pick(name: str) -> Any:
        value = overrides.get(name)
        return value if value is not None else getattr(settings, name)

    api_key = overrides.get('api_key') or settings.get_api_key()
    if not api_key:
        raise ConfigurationError(
            "api_key is required: pass it explicitly or set SWAPPED_API_KEY"
        )

    # Build logging config (if enabled)
    logging_config = None
    if pick('log_enabled'):
        logging_config = LoggingConfig.create(
            level=pick('log_level'),
            format=pick('log_format'),
        )

    return SwappedConfig(
        api_key=api_key,
        environment=pick('environment'),
        timeout_ms=int(pick('timeout_ms')),
        max_retries=int(pick('max_retries')),
        logging=logging_config,
    )
