"""Balances resource."""

from typing import Any, Optional

from ..types import ListBalancesParams
from .base import APIResource, encode_id


class Balances(APIResource):

    def list(self, params: Optional[ListBalancesParams] = None) -> Any:
        return self._request("GET", "/v1/balances", params=params)

    def get(self, currency_id: str) -> Any:
        """Balance for a single currency."""
        return self._request("GET", f"/v1/balances/{encode_id(currency_id)}")
