"""
Handling Webhooks

Minimal WSGI endpoint: verify the X-Signature header, parse the event
and dispatch it by event_type. Invalid deliveries get 400.

Run:
    SWAPPED_WEBHOOK_SECRET=whsec_... python examples/03_handle_webhooks.py
"""

import json
import sys
from wsgiref.simple_server import make_server

from swapped_commerce import (
    WebhookEventType,
    WebhookParseError,
    WebhookRouter,
    WebhookSignatureError,
)
from swapped_commerce.core.env_config import load_settings

WEBHOOK_SECRET = load_settings().get_webhook_secret()
if WEBHOOK_SECRET is None:
    sys.exit("SWAPPED_WEBHOOK_SECRET is not set")

router = WebhookRouter(secret=WEBHOOK_SECRET)


@router.on(WebhookEventType.ORDER_CREATED)
def order_created(event):
    print(f"Order created: {event.get('order_id')}")


@router.on(WebhookEventType.PAYMENT_RECEIVED)
def payment_received(event):
    print(f"Payment received for order {event.get('order_id')}: "
          f"{event.get('order_crypto_amount')} {event.get('order_crypto')}")


@router.on(WebhookEventType.ORDER_COMPLETED)
def order_completed(event):
    print(f"Order completed: {event.get('order_id')}, fulfil it now")


@router.on(WebhookEventType.SETTLEMENT_CREATED)
def settlement_created(event):
    print(f"Settlement created: {event.get('settlement_id')}")


@router.on(WebhookEventType.PAYMENT_CONVERSION_SETTLED)
def conversion_settled(event):
    print(f"Conversion settled: {event.get('from_amount')} {event.get('from_currency')} "
          f"-> {event.get('to_currency')}")


@router.default
def unknown_event(event):
    print(f"Unknown event type: {event.get('event_type')}")


def app(environ, start_response):
    length = int(environ.get("CONTENT_LENGTH") or 0)
    payload = environ["wsgi.input"].read(length)
    signature = environ.get("HTTP_X_SIGNATURE")

    try:
        router.handle(payload, signature)
    except (WebhookSignatureError, WebhookParseError) as e:
        start_response("400 Bad Request", [("Content-Type", "application/json")])
        return [json.dumps({"error": str(e)}).encode()]

    start_response("200 OK", [("Content-Type", "application/json")])
    return [b'{"received": true}']


if __name__ == "__main__":
    with make_server("", 8000, app) as server:
        print("Listening for webhooks on :8000")
        server.serve_forever()
