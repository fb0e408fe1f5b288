# src/swapped_commerce/client.py
"""
Синхронный Swapped Commerce клиент на базе requests.

Example:
    >>> with SwappedClient("sk_live_123") as client:
    ...     page = client.orders.list({"page": 1, "limit": 20})
    ...     print(page.data)
"""

import logging
from typing import Any, Mapping, Optional, Union

import requests

from .core.config import ConfigInput, SwappedConfig, resolve_config
from .core.env_config import load_from_env
from .core.logging import configure_logging
from .core.models import ApiResponse
from .core.request import request_sync
from .resources import (
    KYC,
    Balances,
    Blockchains,
    Currencies,
    Orders,
    PaymentLinks,
    PaymentRoutes,
    Payments,
    Payouts,
    Quotes,
)
from .resources.base import Requester
from .types import WebhookEvent
from .webhooks import parse_webhook_event, verify_webhook_signature_sync

logger = logging.getLogger(__name__)


class BaseSwappedClient:
    """
    Общая часть sync и async клиентов: конфиг, ресурсы, webhook helpers.

    Подклассы передают свой requester, всё остальное одинаково.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[SwappedConfig] = None,
        **overrides: Any,
    ):
        # Явный config побеждает api_key
        if config is not None:
            self._config = resolve_config(config, **overrides)
        else:
            self._config = resolve_config(api_key, **overrides)

        if self._config.logging is not None:
            configure_logging(self._config.logging)

        requester = self._requester()
        self.orders = Orders(requester)
        self.payment_links = PaymentLinks(requester)
        self.payment_routes = PaymentRoutes(requester)
        self.payments = Payments(requester)
        self.balances = Balances(requester)
        self.quotes = Quotes(requester)
        self.payouts = Payouts(requester)
        self.kyc = KYC(requester)
        self.currencies = Currencies(requester)
        self.blockchains = Blockchains(requester)

        logger.debug("Client created: %r", self._config)

    def _requester(self) -> Requester:
        raise NotImplementedError

    @property
    def config(self) -> SwappedConfig:
        return self._config

    @staticmethod
    def parse_webhook_event(payload: Union[str, bytes]) -> WebhookEvent:
        return parse_webhook_event(payload)

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._config!r})"


class SwappedClient(BaseSwappedClient):
    """
    Синхронный клиент.

    Сессия requests создаётся лениво и переиспользуется между вызовами.
    Переданная снаружи сессия не закрывается клиентом.

    Example:
        >>> client = SwappedClient("sk_live_123", max_retries=0)
        >>> order = client.orders.get("ord_1")
        >>> client.close()
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        *,
        config: Optional[SwappedConfig] = None,
        session: Optional[requests.Session] = None,
        **overrides: Any,
    ):
        self._session = session
        self._owns_session = session is None
        super().__init__(api_key, config=config, **overrides)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None, **overrides: Any) -> "SwappedClient":
        """Клиент из SWAPPED_* переменных окружения (и .env)."""
        return cls(config=load_from_env(env_file, **overrides))

    def _get_session(self) -> requests.Session:
        """Получить или создать сессию."""
        if self._session is None:
            self._session = requests.Session()
        return self._session

    def _requester(self) -> Requester:
        return self.request

    def request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> ApiResponse[Any]:
        """Произвольный вызов API (для эндпоинтов без ресурса)."""
        return request_sync(
            self._config,
            method,
            path,
            body=body,
            params=params,
            session=self._get_session(),
        )

    def verify_webhook_signature(
        self,
        payload: Union[str, bytes],
        signature: str,
        secret: str,
    ) -> bool:
        return verify_webhook_signature_sync(payload, signature, secret)

    def __enter__(self) -> "SwappedClient":
        self._get_session()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    def close(self) -> None:
        """Закрыть сессию, если клиент её создал."""
        if self._session is not None and self._owns_session:
            self._session.close()
            self._session = None


def create_client(config: ConfigInput, **overrides: Any) -> SwappedClient:
    """
    Фабрика синхронного клиента.

    Args:
        config: SwappedConfig или API ключ
        **overrides: environment, timeout_ms, max_retries, logging, session
    """
    session = overrides.pop("session", None)
    return SwappedClient(config=resolve_config(config, **overrides), session=session)
