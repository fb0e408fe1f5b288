"""Payment links resource."""

from typing import Any

from ..types import CreateLinkParams
from .base import APIResource


class PaymentLinks(APIResource):

    def create(self, params: CreateLinkParams) -> Any:
        """
        Create a hosted payment link.

        The API models a link as an order, hence ``POST /v1/orders``.
        """
        return self._request("POST", "/v1/orders", body=params)
