"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI/HTTP layers and the application layer
without exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


# --- Checkout input -----------------------------------------------------------


@dataclass(frozen=True)
class CustomerSpec:
    """Input: customer details as typed into the checkout form."""

    name: str | None
    email: str | None
    address: str | None = None


@dataclass(frozen=True)
class CheckoutItemSpec:
    """Input: one cart line as sent by the client.

    ``quantity`` is raw client input and is normalized by the verifier.
    """

    product_id: str
    quantity: Any = 1


@dataclass(frozen=True)
class CheckoutRequest:
    """Input: a full checkout request.

    ``claimed_total`` is whatever the client computed. It is recorded
    for logging only and never used for pricing.
    """

    customer: CustomerSpec | None
    items: list[CheckoutItemSpec] = field(default_factory=list)
    claimed_total: Any = None


@dataclass(frozen=True)
class CheckoutReceipt:
    """Output: a successful checkout."""

    order_id: str
    total: Decimal
    message: str = "Order placed successfully"


# --- Order output -------------------------------------------------------------


@dataclass(frozen=True)
class OrderLineItemDTO:
    product_id: str
    product_name: str
    quantity: int
    unit_price: Decimal
    line_total: Decimal
    image: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: str
    customer_name: str
    customer_email: str
    customer_address: str
    status: str
    items: list[OrderLineItemDTO]
    total: Decimal
    created_at: str  # ISO-8601, UTC


# --- Catalog output -----------------------------------------------------------


@dataclass(frozen=True)
class ProductDTO:
    id: str
    name: str
    price: Decimal
    image: str
    category: str
    description: str
    rating: float
    review_count: int
    badge: str | None


@dataclass(frozen=True)
class CategoryCountDTO:
    category: str
    count: int


@dataclass(frozen=True)
class PriceChangeDTO:
    product_id: str
    name: str
    old_price: Decimal
    new_price: Decimal
