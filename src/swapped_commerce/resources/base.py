"""Base class for API resources."""

from typing import Any, Callable, Mapping, Optional
from urllib.parse import quote

# (method, path, body=..., params=...) -> ApiResponse or awaitable ApiResponse
Requester = Callable[..., Any]


def encode_id(value: str) -> str:
    """Percent-encode an identifier for use as a single path segment."""
    return quote(str(value), safe="")


class APIResource:
    """
    Maps resource methods to one verb/path each.

    The requester decides the flavour: the async client passes a coroutine
    function, the sync client a blocking one, so resource methods simply
    return what the requester returns.
    """

    def __init__(self, requester: Requester):
        self._requester = requester

    def _request(
        self,
        method: str,
        path: str,
        *,
        body: Any = None,
        params: Optional[Mapping[str, Any]] = None,
    ) -> Any:
        return self._requester(method, path, body=body, params=params)
