# src/swapped_commerce/async_client.py
"""
Асинхронный Swapped Commerce клиент на базе httpx.

Предоставляет async/await API для asyncio приложений
(FastAPI, aiohttp, etc.)

Example:
    >>> async with AsyncSwappedClient("sk_live_123") as client:
    ...     link = await client.payment_links.create({
    ...         "purchase": {"name": "T-shirt", "price": "25", "currency": "EUR"},
    ...     })
"""

from typing import Any, Mapping, Optional, Union

import httpx

from .client import BaseSwappedClient
from .core.config import ConfigInput, SwappedConfig, resolve_config
from .core.env_config import load_from_env
from .core.models import ApiResponse
from .core.request import request as execute_request
from .resources.base import Requester
from .webhooks import verify_webhook_signature


class AsyncSwappedClient(BaseSwappedClient):
    """
    Асинхронный клиент: методы ресурсов возвращают корутины.

    httpx.AsyncClient создаётся лениво при первом запросе или при входе
    в context manager. Переданный снаружи клиент не закрывается.

    Example:
        >>> client = AsyncSwappedClient("sk_live_123")
        >>> balances = await client.balances.list()
        >>> await client.close()
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[SwappedConfig] = None,
        http_client: Optional[httpx.AsyncClient] = None,
        **overrides: Any,
    ):
        self._client = http_client
        self._owns_client = http_client is None
        super().__init__(api_key, config=config, **overrides)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides: Any) -> "AsyncSwappedClient":
        """Клиент из SWAPPED_* переменных окружения (и .env)."""
        return cls(config=load_from_env(env_file, **overrides))

    def _get_client(self) -> httpx.AsyncClient:
        """Получить или создать httpx клиент."""
        if self._client is None:
            # Таймаут задаёт TimeoutGuard запроса, не httpx
            self._client = httpx.AsyncClient(timeout=None, follow_redirects=True)
        return self._client

    def _requester(self) -> Requester:
        return self.request

    async def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> ApiResponse[Any]:
        """Произвольный вызов API (для эндпоинтов без ресурса)."""
        return await execute_request(
            self._config,
            method,
            path,
            body=body,
            params=params,
            client=self._get_client(),
        )

    async def verify_webhook_signature(
        self,
        payload: Union[str, bytes],
        signature: str,
        secret: str,
    ) -> bool:
        return await verify_webhook_signature(payload, signature, secret)

    async def __aenter__(self) -> "AsyncSwappedClient":
        """Async context manager entry."""
        self._get_client()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Async context manager exit."""
        await self.close()

    async def close(self) -> None:
        """Закрыть клиент и освободить ресурсы."""
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None


def create_async_client(config: ConfigInput, **overrides: Any) -> AsyncSwappedClient:
    """
    Фабрика асинхронного клиента.

    Args:
        config: SwappedConfig или API ключ
        **overrides: environment, timeout_ms, max_retries, logging, http_client
    """
    http_client = overrides.pop("http_client", None)
    return AsyncSwappedClient(config=resolve_config(config, **overrides), http_client=http_client)
