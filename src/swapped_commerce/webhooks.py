"""
Webhook helpers: signature verification, payload parsing, dispatch.

Swapped signs every webhook with HMAC-SHA256 over the raw request body
and sends the lowercase hex digest in the ``X-Signature`` header.

Example:
    >>> router = WebhookRouter(secret="whsec_...")
    >>>
    >>> @router.on(WebhookEventType.ORDER_COMPLETED)
    ... def fulfill(event):
    ...     ship(event["order_id"])
    >>>
    >>> # in the web framework route
    >>> try:
    ...     router.handle(request.body, request.headers["X-Signature"])
    ... except WebhookSignatureError:
    ...     return Response(status=400)
"""

import hashlib
import hmac
import json
import logging
from typing import Callable, Dict, List, Optional, Union

from .core.exceptions import ConfigurationError
from .types import WebhookEvent, WebhookEventType

logger = logging.getLogger(__name__)

SIGNATURE_HEADER = "X-Signature"

WebhookHandler = Callable[[WebhookEvent], None]


class WebhookParseError(ValueError):
    """Webhook body is not valid JSON."""


class WebhookSignatureError(Exception):
    """Webhook signature did not verify; reject the delivery with a 4xx."""


def compute_webhook_signature(payload: Union[str, bytes], secret: str) -> str:
    """
    Lowercase hex HMAC-SHA256 of ``payload`` keyed with ``secret``.

    Useful for tests and for signing fixtures.
    """
    data = payload.encode("utf-8") if isinstance(payload, str) else payload
    return hmac.new(secret.encode("utf-8"), data, hashlib.sha256).hexdigest()


def _constant_time_equal(expected: str, provided: str) -> bool:
    # Length mismatch exits early; content comparison is constant-time.
    if len(expected) != len(provided):
        return False
    return hmac.compare_digest(expected.encode("ascii"), provided.encode("ascii"))


def verify_webhook_signature_sync(
    payload: Union[str, bytes],
    signature: str,
    secret: str
) -> bool:
    """
    Check ``signature`` against the HMAC of ``payload``.

    Never raises: an empty or malformed secret, a non-ASCII signature or
    any other failure while computing the digest is reported as ``False``.
    """
    # Empty key never verifies
    if not secret:
        logger.debug("Webhook signature check failed: empty secret")
        return False

    try:
        expected = compute_webhook_signature(payload, secret)
        return _constant_time_equal(expected, signature)
    except Exception as e:
        logger.debug("Webhook signature check failed: %s", e)
        return False


async def verify_webhook_signature(
    payload: Union[str, bytes],
    signature: str,
    secret: str
) -> bool:
    """Async form of :func:`verify_webhook_signature_sync` for asyncio handlers."""
    return verify_webhook_signature_sync(payload, signature, secret)


def parse_webhook_event(payload: Union[str, bytes]) -> WebhookEvent:
    """
    Decode a webhook body.

    The shape is not validated and unknown ``event_type`` values pass
    through unchanged; dispatchers must have a fallback branch.

    Raises:
        WebhookParseError: If the payload is not valid JSON
    """
    try:
        return json.loads(payload)
    except ValueError as e:
        raise WebhookParseError(f"Failed to parse webhook payload: {e}") from e


class WebhookRouter:
    """
    Verify, parse and dispatch webhook deliveries by ``event_type``.

    Events without a registered handler go to the default handler, or
    are logged and ignored when none is set.
    """

    def __init__(self, secret: str, default: Optional[WebhookHandler] = None):
        """
        Raises:
            ConfigurationError: Empty secret
        """
        if not isinstance(secret, str) or not secret:
            raise ConfigurationError("Webhook secret must be a non-empty string")
        self.secret = secret
        self._handlers: Dict[str, List[WebhookHandler]] = {}
        self._default = default

    def on(self, event_type: Union[WebhookEventType, str]):
        """Decorator registering a handler for one event type."""
        key = event_type.value if isinstance(event_type, WebhookEventType) else event_type

        def decorator(func: WebhookHandler) -> WebhookHandler:
            self._handlers.setdefault(key, []).append(func)
            return func
        return decorator

    def default(self, func: WebhookHandler) -> WebhookHandler:
        """Decorator registering the fallback handler."""
        self._default = func
        return func

    def dispatch(self, event: WebhookEvent) -> None:
        event_type = event.get("event_type") if isinstance(event, dict) else None
        handlers = self._handlers.get(event_type) if isinstance(event_type, str) else None

        if handlers:
            for handler in handlers:
                handler(event)
        elif self._default is not None:
            self._default(event)
        else:
            logger.info("Unhandled webhook event type: %r", event_type)

    def handle(self, payload: Union[str, bytes], signature: Optional[str]) -> WebhookEvent:
        """
        Full inbound flow: verify, parse, dispatch.

        Raises:
            WebhookSignatureError: Missing or invalid signature
            WebhookParseError: Body is not JSON
        """
        if not signature or not verify_webhook_signature_sync(payload, signature, self.secret):
            raise WebhookSignatureError("Invalid webhook signature")

        event = parse_webhook_event(payload)
        self.dispatch(event)
        return event
