"""
Request and webhook shapes.

Response payloads are returned as plain JSON structures inside
``ApiResponse.data``; the TypedDicts below document what callers send.
"""

from enum import Enum
from typing import Any, Dict, List, Literal, TypedDict, Union


OrderStatus = Literal[
    "PENDING_USER_CREATION",
    "PENDING_CURRENCY_SELECTION",
    "AWAITING_PAYMENT",
    "PAYMENT_CONFIRMED_ACCURATE",
    "PAYMENT_CONFIRMED_UNDERPAID",
    "PAYMENT_CONFIRMED_OVERPAID",
    "COMPLETED",
    "EXPIRED",
    "CANCELLED",
]

OrderInitType = Literal["STANDARD", "INVOICE", "PAYMENT_ROUTE"]

PayoutStatus = Literal["PENDING", "PROCESSING", "COMPLETED", "FAILED"]

KYCStatus = Literal["NOT_STARTED", "PENDING", "APPROVED", "REJECTED"]

DocumentType = Literal["PASSPORT", "DRIVERS_LICENSE", "ID_CARD", "PROOF_OF_ADDRESS"]


class WebhookEventType(str, Enum):
    ORDER_CREATED = "ORDER_CREATED"
    PAYMENT_RECEIVED = "PAYMENT_RECEIVED"
    ORDER_COMPLETED = "ORDER_COMPLETED"
    SETTLEMENT_CREATED = "SETTLEMENT_CREATED"
    PAYMENT_CONVERSION_SETTLED = "PAYMENT_CONVERSION_SETTLED"


class WebhookEvent(TypedDict, total=False):
    event_type: str
    order_id: str
    order_status: OrderStatus
    merchant_id: str
    order_purchase_amount: float
    order_purchase_currency: str
    order_crypto: str
    order_crypto_amount: float
    network: str
    settlement_id: str
    from_amount: float
    from_currency: str
    from_network: str
    to_currency: str


# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━
# REQUEST PARAMS
# ━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━

class PaginationParams(TypedDict, total=False):
    page: int
    limit: int


class ListOrdersParams(PaginationParams, total=False):
    searchId: str
    startDate: int
    endDate: int
    type: OrderInitType


class RefundParams(TypedDict, total=False):
    amount: str
    reason: str


class PurchaseInput(TypedDict, total=False):
    name: str
    description: str
    notes: str
    imageUrl: str
    price: str
    currency: str


class CreateLinkParams(TypedDict, total=False):
    purchase: PurchaseInput
    metadata: Dict[str, str]
    testMode: bool
    preferredPayCurrency: Dict[str, str]


class CreateRouteParams(TypedDict, total=False):
    purchaseAmount: str
    purchaseCurrency: str
    preferredPayCurrency: str
    externalId: str
    customerId: str
    metadata: Dict[str, Any]


class ListBalancesParams(TypedDict, total=False):
    currency: str
    blockchain: str


class GetQuoteParams(TypedDict):
    fromAmount: Union[str, int, float]
    fromFiatCurrency: str
    toCurrency: str
    toBlockchain: str


class BankDestination(TypedDict, total=False):
    accountNumber: str
    routingNumber: str
    iban: str
    swift: str
    accountHolderName: str


class CryptoDestination(TypedDict, total=False):
    address: str
    blockchain: str
    memo: str


class CreatePayoutParams(TypedDict, total=False):
    amount: str
    currency: str
    destinationType: Literal["BANK", "CRYPTO"]
    destination: Union[BankDestination, CryptoDestination]
    reference: str


class Address(TypedDict, total=False):
    street: str
    city: str
    state: str
    postalCode: str
    country: str


class KYCDocument(TypedDict, total=False):
    type: DocumentType
    frontImage: str
    backImage: str


class SubmitKYCParams(TypedDict, total=False):
    customerId: str
    firstName: str
    lastName: str
    dateOfBirth: str
    nationality: str
    address: Address
    documents: List[KYCDocument]
