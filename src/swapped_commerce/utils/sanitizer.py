# src/swapped_commerce/utils/sanitizer.py
"""
Утилита для маскирования чувствительных данных в логах.

Используется для защиты API ключей, подписей вебхуков и секретов
от попадания в логи.
"""

from typing import Any, Mapping, Optional, Set


# Заголовки, значения которых никогда не логируются
SENSITIVE_HEADERS = {
    'x-api-key',
    'x-signature',
    'authorization',
    'cookie',
    'set-cookie',
}

# Поля тел запросов/ответов (case-insensitive)
SENSITIVE_KEYS = {
    'api_key', 'apikey', 'secret', 'webhook_secret', 'password',
    'token', 'access_token', 'signature',
    'accountnumber', 'iban', 'routingnumber',
}

DEFAULT_MASK = "***REDACTED***"


def mask_secret(value: Optional[str], visible_chars: int = 4) -> str:
    """
    Замаскировать секрет, оставив края.

    Examples:
        >>> mask_secret("sk_live_1234567890")
        'sk_l***7890'
        >>> mask_secret("short")
        '***'
    """
    if not value:
        return ""

    if len(value) <= visible_chars * 2:
        return "***"

    return f"{value[:visible_chars]}***{value[-visible_chars:]}"


def sanitize_headers(
    headers: Optional[Mapping[str, str]],
    mask: str = DEFAULT_MASK,
    extra: Optional[Set[str]] = None,
) -> dict:
    """
    Копия заголовков с замаскированными чувствительными значениями.

    Examples:
        >>> sanitize_headers({'X-API-Key': 'sk_live_123', 'Accept': 'application/json'})
        {'X-API-Key': '***REDACTED***', 'Accept': 'application/json'}
    """
    if not headers:
        return {}

    names = SENSITIVE_HEADERS | ({h.lower() for h in extra} if extra else set())
    return {
        key: (mask if key.lower() in names else value)
        for key, value in headers.items()
    }


def mask_sensitive_data(data: Any, mask: str = DEFAULT_MASK) -> Any:
    """
    Рекурсивно маскирует чувствительные поля в dict/list.

    Исходные данные не изменяются.

    Examples:
        >>> mask_sensitive_data({"destination": {"iban": "DE89..."}, "amount": "10"})
        {'destination': {'iban': '***REDACTED***'}, 'amount': '10'}
    """
    if isinstance(data, Mapping):
        return {
            key: (
                mask
                if isinstance(key, str) and key.lower() in SENSITIVE_KEYS
                else mask_sensitive_data(value, mask)
            )
            for key, value in data.items()
        }

    if isinstance(data, (list, tuple)):
        return type(data)(mask_sensitive_data(item, mask) for item in data)

    return data
