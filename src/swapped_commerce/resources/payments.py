"""Payments resource."""

from typing import Any

from .base import APIResource, encode_id


class Payments(APIResource):

    def get(self, payment_id: str) -> Any:
        return self._request("GET", f"/v1/merchants/payments/{encode_id(payment_id)}")
