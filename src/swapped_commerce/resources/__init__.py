"""API resources."""

from .base import APIResource, Requester, encode_id
from .balances import Balances
from .currencies import Blockchains, Currencies
from .kyc import KYC
from .orders import Orders
from .payment_links import PaymentLinks
from .payment_routes import PaymentRoutes
from .payments import Payments
from .payouts import Payouts
from .quotes import Quotes

__all__ = [
    "APIResource",
    "Requester",
    "encode_id",
    "Balances",
    "Blockchains",
    "Currencies",
    "KYC",
    "Orders",
    "PaymentLinks",
    "PaymentRoutes",
    "Payments",
    "Payouts",
    "Quotes",
]
