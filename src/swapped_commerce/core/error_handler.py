# src/swapped_commerce/core/error_handler.py

import asyncio
import json
from typing import Any, Dict, Optional

import httpx
import requests

from .exceptions import (
    AuthenticationError,
    NotFoundError,
    RateLimitError,
    SwappedError,
    ValidationError,
    network_error,
    timeout_error,
)

# Исключения транспорта, которые означают исчерпанный бюджет времени
TIMEOUT_EXCEPTIONS = (
    TimeoutError,
    asyncio.TimeoutError,
    httpx.TimeoutException,
    requests.exceptions.Timeout,
)


class ErrorHandler:
    """Классификация неуспешных ответов и нормализация ошибок транспорта"""

    @staticmethod
    def parse_error_data(text: Optional[str]) -> Dict[str, Any]:
        """Достаёт {message, code, details} из тела; при любой проблеме - пустой dict"""
        if not text:
            return {}
        try:
            data = json.loads(text)
        except ValueError:
            return {}
        return data if isinstance(data, dict) else {}

    @staticmethod
    def classify(status_code: int, reason: str, text: Optional[str]) -> SwappedError:
        """Фиксированная таблица: статус -> тип ошибки"""

        error_data = ErrorHandler.parse_error_data(text)
        # Пустая строка в message - валидное значение, fallback только для None
        message = error_data.get("message")
        if message is None:
            message = reason or f"HTTP {status_code}"
        message = str(message)
        details = error_data.get("details")
        if not isinstance(details, dict):
            details = None

        if status_code == 401:
            return AuthenticationError(message)

        elif status_code == 400:
            return ValidationError(message, details)

        elif status_code == 404:
            # message от API как есть, без суффикса " not found"
            return NotFoundError(message)

        elif status_code == 429:
            return RateLimitError(message)

        code = error_data.get("code")
        return SwappedError(
            message,
            status_code,
            str(code) if code is not None else None,
            details,
        )

    @staticmethod
    def from_httpx_response(response: httpx.Response) -> SwappedError:
        """Классифицирует неуспешный httpx ответ (тело уже прочитано)"""
        return ErrorHandler.classify(
            response.status_code,
            response.reason_phrase,
            response.text,
        )

    @staticmethod
    def from_requests_response(response: requests.Response) -> SwappedError:
        """Классифицирует неуспешный requests ответ"""
        return ErrorHandler.classify(
            response.status_code,
            response.reason or "",
            response.text,
        )

    @staticmethod
    def normalize(error: BaseException, timeout_ms: int) -> SwappedError:
        """Любая ошибка вызова -> SwappedError (типизированные проходят как есть)"""

        if isinstance(error, SwappedError):
            return error

        elif isinstance(error, TIMEOUT_EXCEPTIONS):
            return timeout_error(timeout_ms)

        return network_error(error)
