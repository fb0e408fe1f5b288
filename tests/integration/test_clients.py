"""
Integration tests for SwappedClient and AsyncSwappedClient.
"""

import hashlib
import hmac
import logging

import httpx
import pytest
import requests
import responses
import respx

from swapped_commerce import (
    AsyncSwappedClient,
    ConfigurationError,
    LoggingConfig,
    NotFoundError,
    SwappedClient,
    SwappedConfig,
    create_async_client,
    create_client,
)
from swapped_commerce.core.logging import LOGGER_NAME, JSONFormatter

pytestmark = pytest.mark.integration

API = "https://pay-api.swapped.com"
OK = {"success": True, "message": "", "data": {"id": "x"}}


class TestClientConstruction:
    """Test config resolution in clients and factories."""

    def test_api_key_and_overrides(self):
        client = SwappedClient("sk_live_123", max_retries=0, environment="sandbox")
        assert client.config.api_key == "sk_live_123"
        assert client.config.max_retries == 0
        assert client.config.environment.value == "sandbox"

    def test_explicit_config_wins(self):
        config = SwappedConfig(api_key="from_config", timeout_ms=1000)
        client = AsyncSwappedClient("ignored", config=config)
        assert client.config is config

    def test_missing_api_key(self):
        with pytest.raises(ConfigurationError):
            SwappedClient()

    def test_create_client_from_key(self):
        client = create_client("sk_live_123", timeout_ms=5000)
        assert isinstance(client, SwappedClient)
        assert client.config.timeout_ms == 5000

    def test_create_async_client_from_config(self):
        config = SwappedConfig(api_key="k")
        client = create_async_client(config, max_retries=1)
        assert isinstance(client, AsyncSwappedClient)
        assert client.config.max_retries == 1

    def test_resources_attached(self):
        client = SwappedClient("k")
        for name in (
            "orders", "payment_links", "payment_routes", "payments", "balances",
            "quotes", "payouts", "kyc", "currencies", "blockchains",
        ):
            assert hasattr(client, name)

    def test_repr_masks_key(self):
        assert "sk_live_1234567890" not in repr(SwappedClient("sk_live_1234567890"))

    def test_logging_configured_from_config(self):
        config = SwappedConfig(api_key="k", logging=LoggingConfig.create(format="json"))
        SwappedClient(config=config)
        handlers = logging.getLogger(LOGGER_NAME).handlers
        assert any(isinstance(h.formatter, JSONFormatter) for h in handlers)

    def test_from_env(self, monkeypatch, tmp_path):
        monkeypatch.chdir(tmp_path)
        monkeypatch.setenv("SWAPPED_API_KEY", "sk_env")
        monkeypatch.setenv("SWAPPED_MAX_RETRIES", "1")
        client = AsyncSwappedClient.from_env()
        assert client.config.api_key == "sk_env"
        assert client.config.max_retries == 1


class TestSwappedClient:
    """Test the sync client end to end."""

    def test_orders_get(self, mock_responses):
        mock_responses.add(responses.GET, f"{API}/v1/orders/ord_1", json=OK)

        with SwappedClient("sk_live_123") as client:
            response = client.orders.get("ord_1")

        assert response.data == {"id": "x"}
        assert mock_responses.calls[0].request.headers["X-API-Key"] == "sk_live_123"

    def test_quotes_get_query(self, mock_responses):
        mock_responses.add(responses.GET, f"{API}/v1/quotes", json=OK)

        with SwappedClient("k") as client:
            client.quotes.get({
                "fromAmount": 25.5,
                "fromFiatCurrency": "EUR",
                "toCurrency": "TRX",
                "toBlockchain": "tron",
            })

        url = mock_responses.calls[0].request.url
        assert "fromAmount=25.5" in url
        assert "toBlockchain=tron" in url

    def test_not_found(self, mock_responses):
        mock_responses.add(
            responses.GET, f"{API}/v1/merchants/payouts/po_9",
            json={"message": "Payout not found"}, status=404,
        )

        with SwappedClient("k") as client:
            with pytest.raises(NotFoundError, match="Payout not found"):
                client.payouts.get("po_9")

    def test_session_reused_and_closed(self, mock_responses):
        mock_responses.add(responses.GET, f"{API}/v1/currencies", json=OK)
        mock_responses.add(responses.GET, f"{API}/v1/blockchains", json=OK)

        client = SwappedClient("k")
        client.currencies.list()
        session = client._session
        client.blockchains.list()
        assert client._session is session

        client.close()
        assert client._session is None

    def test_caller_session_not_closed(self):
        session = requests.Session()
        with SwappedClient("k", session=session) as client:
            assert client._get_session() is session
        assert client._session is session

    def test_webhook_helpers(self):
        payload = '{"event_type": "ORDER_CREATED", "order_id": "o"}'
        signature = hmac.new(b"whsec", payload.encode(), hashlib.sha256).hexdigest()
        client = SwappedClient("k")
        assert client.verify_webhook_signature(payload, signature, "whsec") is True
        assert client.parse_webhook_event(payload)["order_id"] == "o"


class TestAsyncSwappedClient:
    """Test the async client end to end."""

    @respx.mock
    @pytest.mark.asyncio
    async def test_payment_links_create(self):
        route = respx.post(f"{API}/v1/orders").mock(return_value=httpx.Response(200, json=OK))

        async with AsyncSwappedClient("sk_live_123") as client:
            response = await client.payment_links.create({
                "purchase": {"name": "Hat", "price": "10", "currency": "EUR"},
                "testMode": True,
            })

        assert response.success is True
        assert route.calls.last.request.headers["X-API-Key"] == "sk_live_123"

    @respx.mock
    @pytest.mark.asyncio
    async def test_kyc_status(self):
        route = respx.get(f"{API}/v1/kyc/cust_1").mock(return_value=httpx.Response(200, json=OK))

        async with AsyncSwappedClient("k") as client:
            await client.kyc.get_status("cust_1")

        assert route.call_count == 1

    @respx.mock
    @pytest.mark.asyncio
    async def test_raw_request(self):
        respx.get(f"{API}/v1/balances").mock(return_value=httpx.Response(200, json=OK))

        async with AsyncSwappedClient("k") as client:
            response = await client.request("GET", "/v1/balances")

        assert response.data == {"id": "x"}

    @pytest.mark.asyncio
    async def test_close_releases_owned_client(self):
        client = AsyncSwappedClient("k")
        async with client:
            http_client = client._client
            assert http_client is not None
        assert http_client.is_closed
        assert client._client is None

    @pytest.mark.asyncio
    async def test_caller_client_not_closed(self):
        http_client = httpx.AsyncClient()
        async with AsyncSwappedClient("k", http_client=http_client):
            pass
        assert not http_client.is_closed
        await http_client.aclose()

    @pytest.mark.asyncio
    async def test_verify_webhook_signature(self):
        payload = b'{"event_type": "PAYMENT_RECEIVED"}'
        signature = hmac.new(b"whsec", payload, hashlib.sha256).hexdigest()
        client = AsyncSwappedClient("k")
        assert await client.verify_webhook_signature(payload, signature, "whsec") is True
        assert await client.verify_webhook_signature(payload, "bad", "whsec") is False
