"""Payouts resource."""

from typing import Any, Optional

from ..types import CreatePayoutParams, PaginationParams
from .base import APIResource, encode_id


class Payouts(APIResource):

    def create(self, params: CreatePayoutParams) -> Any:
        return self._request("POST", "/v1/merchants/payouts", body=params)

    def list(self, params: Optional[PaginationParams] = None) -> Any:
        return self._request("GET", "/v1/merchants/payouts", params=params)

    def get(self, payout_id: str) -> Any:
        return self._request("GET", f"/v1/merchants/payouts/{encode_id(payout_id)}")
