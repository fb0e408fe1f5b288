"""Quotes resource."""

from typing import Any, Dict

from ..types import GetQuoteParams
from .base import APIResource


class Quotes(APIResource):

    def get(self, params: GetQuoteParams) -> Any:
        """
        Conversion quote for a fiat amount.

        Example:
            >>> client.quotes.get({
            ...     "fromAmount": 25,
            ...     "fromFiatCurrency": "EUR",
            ...     "toCurrency": "TRX",
            ...     "toBlockchain": "tron",
            ... })
        """
        query: Dict[str, Any] = {
            "fromAmount": str(params["fromAmount"]),
            "fromFiatCurrency": params["fromFiatCurrency"],
            "toCurrency": params["toCurrency"],
            "toBlockchain": params["toBlockchain"],
        }
        return self._request("GET", "/v1/quotes", params=query)

    def create(self, params: GetQuoteParams) -> Any:
        """Same quote, requested with a JSON body."""
        return self._request("POST", "/v1/quotes", body=dict(params))
