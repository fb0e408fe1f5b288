"""
Request executors: one API call from method/path to ApiResponse.

``request`` runs on httpx (asyncio), ``request_sync`` on requests.
Both follow the same steps:

1. build URL and request descriptor;
2. arm one TimeoutGuard for the whole call;
3. run attempts through the retry engine, classifying non-2xx answers;
4. normalize whatever escapes into a SwappedError.
"""

import asyncio
import json
import logging
import time
from typing import Any, Mapping, Optional

import httpx
import requests

from ..utils.sanitizer import sanitize_headers
from .config import BASE_URL, SwappedConfig
from .error_handler import ErrorHandler
from .exceptions import INVALID_RESPONSE, SwappedError
from .http import TimeoutGuard, build_url, create_request_config
from .models import ApiResponse
from .retry_engine import RetryPolicy, with_retry, with_retry_sync

logger = logging.getLogger(__name__)


def parse_api_response(status_code: int, text: str) -> ApiResponse[Any]:
    """
    Decode a successful response body into ApiResponse.

    Raises:
        SwappedError: INVALID_RESPONSE if the body is not a JSON object
    """
    try:
        payload = json.loads(text)
    except ValueError as e:
        raise SwappedError(
            f"Invalid JSON in API response: {e}",
            status_code,
            INVALID_RESPONSE,
        ) from e

    if not isinstance(payload, dict):
        raise SwappedError(
            "API response is not a JSON object",
            status_code,
            INVALID_RESPONSE,
        )

    return ApiResponse.from_dict(payload)


def _deadline_exceeded(timeout_ms: int) -> TimeoutError:
    return TimeoutError(f"Deadline of {timeout_ms}ms exceeded")


def _log_start(method: str, url: str, headers: Mapping[str, str]) -> None:
    logger.debug(
        "Request started: %s %s",
        method,
        url,
        extra={"headers": sanitize_headers(headers)},
    )


def _log_done(method: str, url: str, status_code: int, started: float) -> None:
    logger.debug(
        "Request completed: %s %s -> %d (%.0fms)",
        method,
        url,
        status_code,
        (time.monotonic() - started) * 1000,
    )


def _log_failed(method: str, url: str, error: SwappedError) -> None:
    logger.info(
        "Request failed: %s %s -> %s",
        method,
        url,
        error,
        extra={"status_code": error.status_code, "error_code": error.code},
    )


async def request(
    config: SwappedConfig,
    method: str,
    path: str,
    *,
    body: Any = None,
    params: Optional[Mapping[str, Any]] = None,
    client: Optional[httpx.AsyncClient] = None,
) -> ApiResponse[Any]:
    """
    Execute one API call asynchronously.

    Args:
        config: Client configuration
        method: HTTP method
        path: API path, e.g. ``/v1/orders``
        body: JSON body (None = no body)
        params: Query parameters (None values skipped)
        client: Caller-owned httpx client; a temporary one is used otherwise

    Returns:
        Parsed ApiResponse

    Raises:
        SwappedError: Classified API error, TIMEOUT_ERROR (408) or NETWORK_ERROR (0)
    """
    url = build_url(BASE_URL, path, params)
    descriptor = create_request_config(config, method, path, body)
    policy = RetryPolicy.from_config(config)

    owns_client = client is None
    http_client = (
        client if client is not None
        else httpx.AsyncClient(timeout=None, follow_redirects=True)
    )

    guard = TimeoutGuard(config.timeout_ms).arm()
    started = time.monotonic()

    async def attempt() -> httpx.Response:
        remaining = guard.remaining()
        if remaining <= 0:
            raise _deadline_exceeded(config.timeout_ms)

        _log_start(descriptor.method, url, descriptor.headers)
        response = await asyncio.wait_for(
            http_client.request(
                descriptor.method,
                url,
                headers=descriptor.headers,
                content=descriptor.body,
            ),
            timeout=remaining,
        )

        if not response.is_success:
            raise ErrorHandler.from_httpx_response(response)

        return response

    try:
        response = await with_retry(attempt, policy)
        _log_done(descriptor.method, url, response.status_code, started)
        return parse_api_response(response.status_code, response.text)
    except SwappedError as error:
        _log_failed(descriptor.method, url, error)
        raise
    except Exception as error:
        normalized = ErrorHandler.normalize(error, config.timeout_ms)
        _log_failed(descriptor.method, url, normalized)
        raise normalized from error
    finally:
        guard.release()
        if owns_client:
            await http_client.aclose()


def request_sync(
    config: SwappedConfig,
    method: str,
    path: str,
    *,
    body: Any = None,
    params: Optional[Mapping[str, Any]] = None,
    session: Optional[requests.Session] = None,
) -> ApiResponse[Any]:
    """
    Blocking twin of :func:`request` on top of requests.

    Each attempt gets the remaining budget as its socket timeout, so a
    slow attempt cannot outlive the call's deadline by more than one
    connect/read phase.
    """
    url = build_url(BASE_URL, path, params)
    descriptor = create_request_config(config, method, path, body)
    policy = RetryPolicy.from_config(config)

    owns_session = session is None
    http_session = session if session is not None else requests.Session()

    guard = TimeoutGuard(config.timeout_ms).arm()
    started = time.monotonic()

    def attempt() -> requests.Response:
        remaining = guard.remaining()
        if remaining <= 0:
            raise _deadline_exceeded(config.timeout_ms)

        _log_start(descriptor.method, url, descriptor.headers)
        response = http_session.request(
            descriptor.method,
            url,
            headers=descriptor.headers,
            data=descriptor.body.encode("utf-8") if descriptor.has_body else None,
            timeout=remaining,
        )

        if not 200 <= response.status_code < 300:
            raise ErrorHandler.from_requests_response(response)

        return response

    try:
        response = with_retry_sync(attempt, policy)
        _log_done(descriptor.method, url, response.status_code, started)
        return parse_api_response(response.status_code, response.text)
    except SwappedError as error:
        _log_failed(descriptor.method, url, error)
        raise
    except Exception as error:
        normalized = ErrorHandler.normalize(error, config.timeout_ms)
        _log_failed(descriptor.method, url, normalized)
        raise normalized from error
    finally:
        guard.release()
        if owns_session:
            http_session.close()
