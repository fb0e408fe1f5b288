"""
Конфигурация Swapped Commerce клиента.

Все конфиги immutable (frozen dataclasses): один и тот же объект можно
безопасно разделять между конкурентными запросами.
"""

from dataclasses import dataclass, field, fields, replace
from enum import Enum
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union, TYPE_CHECKING

from .exceptions import ConfigurationError
from ..utils.sanitizer import mask_secret

if TYPE_CHECKING:
    from .logging import LoggingConfig

# Единственный origin API (sandbox выбирается на стороне сервера)
BASE_URL = "https://pay-api.swapped.com"


class Environment(str, Enum):
    """Окружение API."""
    SANDBOX = "sandbox"
    PRODUCTION = "production"


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# DEFAULTS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

DEFAULT_CONFIG: Mapping[str, Any] = MappingProxyType({
    "environment": Environment.PRODUCTION,
    "timeout_ms": 30000,
    "max_retries": 3,
})

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# MAIN CONFIG
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

@dataclass(frozen=True)
class SwappedConfig:
    """
    Главная конфигурация клиента.

    Args:
        api_key: API ключ мерчанта (заголовок X-API-Key)
        environment: sandbox или production
        timeout_ms: Общий бюджет времени на один вызов, включая retry (мс)
        max_retries: Количество повторных попыток после первой
        logging: Конфигурация логирования (None = не настраивать)

    Examples:
        >>> SwappedConfig(api_key="sk_live_123")
        >>> SwappedConfig.create(api_key="sk_test_123", environment="sandbox", max_retries=0)
    """
    api_key: str
    environment: Environment = DEFAULT_CONFIG["environment"]
    timeout_ms: int = DEFAULT_CONFIG["timeout_ms"]
    max_retries: int = DEFAULT_CONFIG["max_retries"]
    logging: Optional["LoggingConfig"] = field(default=None, compare=False)

    def __post_init__(self):
        """Валидация."""
        if not isinstance(self.api_key, str) or not self.api_key.strip():
            raise ConfigurationError("api_key must be a non-empty string")

        if not isinstance(self.environment, Environment):
            try:
                object.__setattr__(self, "environment", Environment(self.environment))
            except ValueError:
                raise ConfigurationError(
                    f"environment must be one of "
                    f"{[e.value for e in Environment]}, got {self.environment!r}"
                )

        if isinstance(self.timeout_ms, bool) or not isinstance(self.timeout_ms, int):
            raise ConfigurationError("timeout_ms must be an integer")
        if self.timeout_ms <= 0:
            raise ConfigurationError("timeout_ms must be positive")

        if isinstance(self.max_retries, bool) or not isinstance(self.max_retries, int):
            raise ConfigurationError("max_retries must be an integer")
        if self.max_retries < 0:
            raise ConfigurationError("max_retries must be non-negative")

    @classmethod
    def create(cls, api_key: str, **partial: Any) -> "SwappedConfig":
        """
        Собрать конфиг из частичного набора полей.

        Отсутствующие (или None) поля берутся из DEFAULT_CONFIG.

        Raises:
            ConfigurationError: Неизвестное поле или невалидное значение
        """
        known = {f.name for f in fields(cls)} - {"api_key"}
        unknown = set(partial) - known
        if unknown:
            raise ConfigurationError(f"Unknown config fields: {sorted(unknown)}")

        merged: Dict[str, Any] = dict(DEFAULT_CONFIG)
        merged.update({k: v for k, v in partial.items() if v is not None})
        return cls(api_key=api_key, **merged)

    def with_overrides(self, **overrides: Any) -> "SwappedConfig":
        """Новый конфиг с изменёнными полями (исходный не меняется)."""
        return replace(self, **overrides)

    @property
    def base_url(self) -> str:
        """Origin API для этого окружения."""
        return BASE_URL

    @property
    def timeout_seconds(self) -> float:
        """timeout_ms в секундах."""
        return self.timeout_ms / 1000

    def __repr__(self) -> str:
        return (
            f"SwappedConfig(api_key={mask_secret(self.api_key)!r}, "
            f"environment={self.environment.value!r}, "
            f"timeout_ms={self.timeout_ms}, max_retries={self.max_retries})"
        )


ConfigInput = Union[SwappedConfig, str]


def resolve_config(config: Optional[ConfigInput] = None, **overrides: Any) -> SwappedConfig:
    """
    Привести вход к SwappedConfig.

    Args:
        config: Готовый SwappedConfig или API ключ строкой
        **overrides: Поля для переопределения

    Raises:
        ConfigurationError: Если конфиг не передан и api_key отсутствует
    """
    if isinstance(config, SwappedConfig):
        overrides = {k: v for k, v in overrides.items() if v is not None}
        return config.with_overrides(**overrides) if overrides else config

    api_key = config if config is not None else overrides.pop("api_key", None)
    if api_key is None:
        raise ConfigurationError("api_key is required")
    overrides.pop("api_key", None)
    return SwappedConfig.create(api_key=api_key, **overrides)
