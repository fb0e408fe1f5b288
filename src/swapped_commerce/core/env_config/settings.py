"""
Pydantic settings for environment configuration.

Validated flat model over ``SWAPPED_*`` variables.
"""

from typing import Literal, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict


class SwappedSettings(BaseSettings):
    """
    Swapped Commerce client configuration from environment variables.

    Reads from:
    1. Environment variables (SWAPPED_*)
    2. .env file
    3. Defaults

    Example .env file:
        SWAPPED_API_KEY=sk_live_123
        SWAPPED_ENVIRONMENT=production
        SWAPPED_TIMEOUT_MS=30000
        SWAPPED_MAX_RETRIES=3
        SWAPPED_WEBHOOK_SECRET=whsec_456
        SWAPPED_LOG_ENABLED=true
        SWAPPED_LOG_LEVEL=DEBUG
        SWAPPED_LOG_FORMAT=json

    Usage:
        >>> settings = SwappedSettings()
        >>> settings.environment
        'production'
    """

    model_config = SettingsConfigDict(
        env_prefix='SWAPPED_',
        env_file='.env',
        env_file_encoding='utf-8',
        case_sensitive=False,
        extra='ignore',
    )

    # Credentials
    api_key: Optional[SecretStr] = Field(default=None, description="Merchant API key")
    webhook_secret: Optional[SecretStr] = Field(default=None, description="Webhook signing secret")

    # Transport
    environment: Literal["sandbox", "production"] = Field(default="production")
    timeout_ms: int = Field(default=30000, gt=0, description="Per-call time budget in ms")
    max_retries: int = Field(default=3, ge=0, le=10, description="Retries after the first attempt")

    # Logging
    log_enabled: bool = Field(default=False)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(default="INFO")
    log_format: Literal["json", "text"] = Field(default="text")

    def get_api_key(self) -> Optional[str]:
        return _reveal(self.api_key)

    def get_webhook_secret(self) -> Optional[str]:
        """Webhook signing secret; empty values count as unset."""
        return _reveal(self.webhook_secret)


def _reveal(value: Optional[SecretStr]) -> Optional[str]:
    if value is None:
        return None
    return value.get_secret_value() or None
