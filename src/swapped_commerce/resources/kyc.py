"""KYC resource."""

from typing import Any

from ..types import SubmitKYCParams
from .base import APIResource, encode_id


class KYC(APIResource):

    def get_status(self, customer_id: str) -> Any:
        return self._request("GET", f"/v1/kyc/{encode_id(customer_id)}")

    def submit(self, params: SubmitKYCParams) -> Any:
        """Submit identity data and documents for review."""
        return self._request("POST", "/v1/kyc", body=params)
