"""
Creating a Payment Link

Creates a shareable link the customer opens to pay in crypto.
Needs SWAPPED_API_KEY in the environment.
"""

import os
import sys

from swapped_commerce import SwappedClient, SwappedError


def create_payment_link():
    """Create a link for a monthly subscription."""
    print("\n=== Create Payment Link ===")

    with SwappedClient(os.environ.get("SWAPPED_API_KEY", ""), environment="sandbox") as client:
        response = client.payment_links.create({
            "purchase": {
                "name": "Premium Subscription",
                "description": "Monthly subscription to premium features",
                "price": "99.99",
                "currency": "USD",
            },
            "metadata": {
                "customerEmail": "customer@example.com",
                "redirectUrl": "https://example.com/success",
                "externalId": "order_123",
            },
            "testMode": True,
            "preferredPayCurrency": {"symbol": "BTC", "blockchain": "bitcoin"},
        })

    if response.success:
        print(f"Order ID: {response.data['orderId']}")
        print(f"Payment Link: {response.data['paymentLink']}")
    else:
        print(f"Failed to create payment link: {response.message}")


if __name__ == "__main__":
    try:
        create_payment_link()
    except SwappedError as e:
        print(f"Error creating payment link: {e.message} (status={e.status_code}, code={e.code})")
        sys.exit(1)
