"""
Retry engine для повторных попыток с exponential backoff.

Политика:
- 4xx (кроме 429) - фатально, пробрасываем сразу
- всё остальное (5xx, 429, таймауты, сетевые и любые нетипизированные
  ошибки) - повторяем с задержкой 1s, 2s, 4s, ...
- после max_retries повторов пробрасываем последнюю ошибку как есть
"""

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Awaitable, Callable, Optional, TypeVar

from .config import SwappedConfig
from .exceptions import SwappedError

logger = logging.getLogger(__name__)

T = TypeVar("T")

# Базовая задержка перед первым повтором (мс)
BACKOFF_BASE_MS = 1000


@dataclass(frozen=True)
class RetryPolicy:
    """
    Политика retry для одного вызова.

    Args:
        max_retries: Количество повторов после первой попытки
        timeout_ms: Бюджет времени вызова (информативно, дедлайн держит TimeoutGuard)
    """
    max_retries: int = 3
    timeout_ms: int = 30000

    def __post_init__(self):
        """Валидация."""
        if self.max_retries < 0:
            raise ValueError("max_retries must be non-negative")
        if self.timeout_ms <= 0:
            raise ValueError("timeout_ms must be positive")

    @classmethod
    def from_config(cls, config: SwappedConfig) -> "RetryPolicy":
        """Политика из конфига клиента."""
        return cls(max_retries=config.max_retries, timeout_ms=config.timeout_ms)

    @property
    def max_attempts(self) -> int:
        """Всего попыток, включая первую."""
        return self.max_retries + 1


def is_retryable_error(error: BaseException) -> bool:
    """
    Можно ли повторить попытку после этой ошибки.

    Смотрим только на status_code - повторной классификации нет.
    """
    if isinstance(error, SwappedError) and error.status_code is not None:
        status = error.status_code
        if 400 <= status < 500 and status != 429:
            return False
    return True


def backoff_delay_ms(attempt: int) -> int:
    """
    Задержка перед попыткой attempt + 2 (attempt с нуля).

    Examples:
        >>> [backoff_delay_ms(i) for i in range(4)]
        [1000, 2000, 4000, 8000]
    """
    return (2 ** attempt) * BACKOFF_BASE_MS


class RetryEngine:
    """
    Состояние retry для одного вызова.

    Examples:
        >>> engine = RetryEngine(RetryPolicy(max_retries=3))
        >>> if engine.should_retry(error):
        >>>     await engine.async_wait()
        >>>     engine.increment()
    """

    def __init__(self, policy: RetryPolicy):
        """
        Args:
            policy: Политика retry
        """
        self.policy = policy
        self._attempt = 0

    def should_retry(self, error: BaseException) -> bool:
        """
        Решить нужен ли ещё один заход.

        Args:
            error: Ошибка текущей попытки

        Returns:
            True если ошибка retryable и попытки не исчерпаны
        """
        if not is_retryable_error(error):
            logger.debug(
                "Non-retryable error, giving up: %r", error
            )
            return False

        # Проверяем, не превысит ли следующая попытка лимит
        if self._attempt + 1 >= self.policy.max_attempts:
            return False

        return True

    def get_wait_time(self) -> float:
        """Секунды ожидания перед следующей попыткой."""
        return backoff_delay_ms(self._attempt) / 1000

    def _log_retry(self, error: Optional[BaseException], wait: float) -> None:
        logger.warning(
            "Attempt %d/%d failed, retrying in %.1fs: %s",
            self._attempt + 1,
            self.policy.max_attempts,
            wait,
            error,
        )

    def wait(self, error: Optional[BaseException] = None) -> None:
        """Блокирующее ожидание перед retry."""
        wait_time = self.get_wait_time()
        self._log_retry(error, wait_time)
        time.sleep(wait_time)

    async def async_wait(self, error: Optional[BaseException] = None) -> None:
        """
        Асинхронное ожидание перед retry.

        Не блокирует event loop: другие запросы продолжают работать.
        """
        wait_time = self.get_wait_time()
        self._log_retry(error, wait_time)
        await asyncio.sleep(wait_time)

    def increment(self):
        """Увеличить счётчик попыток."""
        self._attempt += 1

    def reset(self):
        """Сбросить счётчик."""
        self._attempt = 0

    @property
    def attempt(self) -> int:
        """Текущая попытка (с нуля)."""
        return self._attempt


async def with_retry(
    operation: Callable[[], Awaitable[T]],
    policy: RetryPolicy,
) -> T:
    """
    Выполнить асинхронную операцию с retry.

    Args:
        operation: Фабрика корутины без аргументов (вызывается на каждую попытку)
        policy: Политика retry

    Returns:
        Результат первой успешной попытки

    Raises:
        Последнюю ошибку операции, без обёрток
    """
    engine = RetryEngine(policy)

    while True:
        try:
            return await operation()
        except Exception as error:
            if not engine.should_retry(error):
                raise
            await engine.async_wait(error)
            engine.increment()


def with_retry_sync(
    operation: Callable[[], T],
    policy: RetryPolicy,
) -> T:
    """Синхронный вариант with_retry (задержка через time.sleep)."""
    engine = RetryEngine(policy)

    while True:
        try:
            return operation()
        except Exception as error:
            if not engine.should_retry(error):
                raise
            engine.wait(error)
            engine.increment()
