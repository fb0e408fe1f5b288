"""
Processing Payouts (async)

1. Check balances
2. Get a conversion quote
3. Create a payout to a crypto wallet
4. Track payout status
"""

import asyncio
import os

from swapped_commerce import AsyncSwappedClient, RateLimitError, SwappedError


async def process_payout():
    async with AsyncSwappedClient(os.environ["SWAPPED_API_KEY"], environment="sandbox") as client:
        print("Checking balances...")
        balances = await client.balances.list()
        for balance in balances.data.get("balances", []):
            currency = balance["currency"]
            print(f"  {currency['symbol']}: {balance['available']} (available)")

        print("\nGetting quote...")
        quote = await client.quotes.get({
            "fromAmount": 100,
            "fromFiatCurrency": "EUR",
            "toCurrency": "USDT",
            "toBlockchain": "tron",
        })
        print(f"Quote: {quote.data}")

        print("\nCreating payout...")
        payout = await client.payouts.create({
            "amount": "100.00",
            "currency": "USDT",
            "destinationType": "CRYPTO",
            "destination": {"address": "TXYZ...", "blockchain": "tron"},
            "reference": "payout_001",
        })
        payout_id = payout.data["payout"]["id"]

        status = await client.payouts.get(payout_id)
        print(f"Payout {payout_id}: {status.data['payout']['status']}")


if __name__ == "__main__":
    try:
        asyncio.run(process_payout())
    except RateLimitError:
        print("Still rate limited after all retries, try again later")
    except SwappedError as e:
        print(f"Payout failed: {e!r}")
