"""Currencies and blockchains reference data."""

from typing import Any

from .base import APIResource


class Currencies(APIResource):

    def list(self) -> Any:
        return self._request("GET", "/v1/currencies")


class Blockchains(APIResource):

    def list(self) -> Any:
        return self._request("GET", "/v1/blockchains")
