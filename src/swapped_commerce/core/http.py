"""
Building blocks of an API call: URL, request descriptor, deadline.

All functions here are pure; the executors in ``request.py`` combine them.
"""

import json
import time
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional
from urllib.parse import urlencode, urljoin, urlsplit, urlunsplit

from .config import SwappedConfig


def _stringify(value: Any) -> str:
    """Render a query value the way the API expects (JS-style booleans)."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def build_url(
    base_url: str,
    path: str,
    params: Optional[Mapping[str, Any]] = None
) -> str:
    """
    Resolve ``path`` against ``base_url`` and append query parameters.

    Parameters whose value is None are skipped; the rest are stringified
    and appended in mapping order.

    Examples:
        >>> build_url("https://pay-api.swapped.com", "/v1/orders", {"page": 1, "limit": None})
        'https://pay-api.swapped.com/v1/orders?page=1'
    """
    url = urljoin(base_url, path)

    if not params:
        return url

    pairs = [
        (key, _stringify(value))
        for key, value in params.items()
        if value is not None
    ]
    if not pairs:
        return url

    parts = urlsplit(url)
    extra = urlencode(pairs)
    query = f"{parts.query}&{extra}" if parts.query else extra
    return urlunsplit(parts._replace(query=query))


@dataclass(frozen=True)
class RequestDescriptor:
    """
    Everything the transport needs besides the URL.

    Attributes:
        method: Upper-cased HTTP method
        headers: Request headers (API key + JSON content negotiation)
        body: JSON-encoded body, or None when the call carries no body
    """

    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    @property
    def has_body(self) -> bool:
        return self.body is not None


def default_headers(config: SwappedConfig) -> Dict[str, str]:
    return {
        "X-API-Key": config.api_key,
        "Content-Type": "application/json",
        "Accept": "application/json",
    }


def create_request_config(
    config: SwappedConfig,
    method: str,
    path: str,
    body: Any = None
) -> RequestDescriptor:
    """
    Build the request descriptor for a call.

    ``path`` does not influence the headers; it is accepted so the call
    site reads the same as ``build_url``. Any body other than None
    (including ``{}``, ``0`` and ``False``) is JSON-encoded.

    Raises:
        TypeError: If ``body`` is not JSON serializable
    """
    return RequestDescriptor(
        method=method.upper(),
        headers=default_headers(config),
        body=json.dumps(body) if body is not None else None,
    )


class TimeoutGuard:
    """
    Single deadline for one ``request`` call.

    Armed once before the retry loop, so every attempt and every backoff
    wait draws from the same budget. Attempts started after the deadline
    fail immediately.

    Example:
        >>> with TimeoutGuard(30000) as guard:
        ...     remaining = guard.remaining()
    """

    def __init__(self, timeout_ms: int, clock=time.monotonic):
        self.timeout_ms = timeout_ms
        self._clock = clock
        self._deadline: Optional[float] = None

    def arm(self) -> "TimeoutGuard":
        self._deadline = self._clock() + self.timeout_ms / 1000
        return self

    def release(self) -> None:
        self._deadline = None

    @property
    def active(self) -> bool:
        return self._deadline is not None

    def remaining(self) -> float:
        """Seconds left before the deadline (never negative)."""
        if self._deadline is None:
            raise RuntimeError("TimeoutGuard is not armed")
        return max(0.0, self._deadline - self._clock())

    @property
    def expired(self) -> bool:
        return self.remaining() <= 0

    def __enter__(self) -> "TimeoutGuard":
        return self.arm()

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.release()
        return False
