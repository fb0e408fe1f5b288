"""Orders resource."""

from typing import Any, Optional

from ..types import ListOrdersParams, RefundParams
from .base import APIResource, encode_id


class Orders(APIResource):

    def list(self, params: Optional[ListOrdersParams] = None) -> Any:
        """List orders with optional filtering and pagination."""
        return self._request("GET", "/v1/orders", params=params)

    def get(self, order_id: str) -> Any:
        return self._request("GET", f"/v1/orders/{encode_id(order_id)}")

    def refund(self, order_id: str, params: RefundParams) -> Any:
        """Refund an order fully, or partially when ``amount`` is set."""
        return self._request(
            "POST",
            f"/v1/merchants/orders/{encode_id(order_id)}/refund",
            body=params,
        )
