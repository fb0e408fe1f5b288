"""Payment routes resource."""

from typing import Any

from ..types import CreateRouteParams
from .base import APIResource


class PaymentRoutes(APIResource):

    def create(self, params: CreateRouteParams) -> Any:
        return self._request("POST", "/v1/merchants/payment-routes", body=params)
