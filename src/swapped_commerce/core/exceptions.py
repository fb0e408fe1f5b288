"""
Иерархия исключений Swapped Commerce клиента.

Все ошибки API - SwappedError с дискриминантом kind:
- GENERIC - всё, что не попало в таблицу (5xx, 408 timeout, 0 network)
- AUTHENTICATION - 401
- VALIDATION - 400 (с details)
- NOT_FOUND - 404
- RATE_LIMIT - 429

Решение о retry принимается только по status_code (см. retry_engine).
"""

from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional


class ErrorKind(str, Enum):
    """Дискриминант типизированной ошибки."""
    GENERIC = "generic"
    AUTHENTICATION = "authentication"
    VALIDATION = "validation"
    RATE_LIMIT = "rate_limit"
    NOT_FOUND = "not_found"


# Коды ошибок, которые клиент выставляет сам
TIMEOUT_ERROR = "TIMEOUT_ERROR"
NETWORK_ERROR = "NETWORK_ERROR"
INVALID_RESPONSE = "INVALID_RESPONSE"

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# BASE
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class SwappedError(Exception):
    """
    Базовое исключение клиента.

    Args:
        message: Сообщение об ошибке
        status_code: HTTP статус (0 для сетевых ошибок)
        code: Машинный код ошибки (из тела ответа или клиентский)
        details: Структурированные детали (например, ошибки валидации)
    """

    kind: ErrorKind = ErrorKind.GENERIC

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        code: Optional[str] = None,
        details: Optional[Mapping[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.code = code
        self.details: Optional[Mapping[str, Any]] = (
            MappingProxyType(dict(details)) if details is not None else None
        )
        super().__init__(message)

    @property
    def is_client_error(self) -> bool:
        """4xx статус."""
        return self.status_code is not None and 400 <= self.status_code < 500

    def to_dict(self) -> dict:
        """Сериализация для логов."""
        return {
            "kind": self.kind.value,
            "message": self.message,
            "status_code": self.status_code,
            "code": self.code,
            "details": dict(self.details) if self.details is not None else None,
        }

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}(message={self.message!r}, "
            f"status_code={self.status_code!r}, code={self.code!r})"
        )

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# HTTP ОШИБКИ ПО СТАТУСУ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class AuthenticationError(SwappedError):
    """401 Unauthorized."""

    kind = ErrorKind.AUTHENTICATION

    def __init__(self, message: str = "Authentication failed"):
        super().__init__(message, 401, "AUTHENTICATION_ERROR")


class ValidationError(SwappedError):
    """400 Bad Request - несёт details от API."""

    kind = ErrorKind.VALIDATION

    def __init__(self, message: str, details: Optional[Mapping[str, Any]] = None):
        super().__init__(message, 400, "VALIDATION_ERROR", details)


class RateLimitError(SwappedError):
    """429 Too Many Requests - единственная 4xx, которую ретраим."""

    kind = ErrorKind.RATE_LIMIT

    def __init__(self, message: str = "Rate limit exceeded"):
        super().__init__(message, 429, "RATE_LIMIT_ERROR")


class NotFoundError(SwappedError):
    """404 Not Found."""

    kind = ErrorKind.NOT_FOUND

    def __init__(self, message: str):
        super().__init__(message, 404, "NOT_FOUND_ERROR")

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# СПЕЦИАЛЬНЫЕ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class ConfigurationError(SwappedError, ValueError):
    """Ошибка конфигурации."""

    def __init__(self, message: str):
        super().__init__(message, code="CONFIGURATION_ERROR")

# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# ФАБРИКИ
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

def create_authentication_error(message: Optional[str] = None) -> AuthenticationError:
    """Создать AuthenticationError (сообщение по умолчанию, если не указано)."""
    return AuthenticationError(message) if message is not None else AuthenticationError()


def create_validation_error(
    message: str,
    details: Optional[Mapping[str, Any]] = None
) -> ValidationError:
    """Создать ValidationError."""
    return ValidationError(message, details)


def create_rate_limit_error(message: Optional[str] = None) -> RateLimitError:
    """Создать RateLimitError."""
    return RateLimitError(message) if message is not None else RateLimitError()


def create_not_found_error(resource: str) -> NotFoundError:
    """
    Создать NotFoundError для ресурса.

    Examples:
        >>> str(create_not_found_error("Order"))
        'Order not found'
    """
    return NotFoundError(f"{resource} not found")


def timeout_error(timeout_ms: int) -> SwappedError:
    """408 TIMEOUT_ERROR для исчерпанного бюджета времени."""
    return SwappedError(
        f"Request timeout after {timeout_ms}ms",
        408,
        TIMEOUT_ERROR,
    )


def network_error(cause: BaseException) -> SwappedError:
    """0 NETWORK_ERROR для ошибок транспорта (DNS, соединение, ...)."""
    return SwappedError(
        str(cause) or "Network error occurred",
        0,
        NETWORK_ERROR,
    )
