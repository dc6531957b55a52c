"""Order aggregate for a verified order.

Line items carry prices, names and images as re-read from the catalog
of record at checkout. The total is always derived from those lines;
nothing the client sent about prices or totals reaches this model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from titan.domain.exceptions import ValidationError
from titan.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "pending"


@dataclass(frozen=True)
class Customer:
    """Who placed the order. Use ``Customer.create()`` for raw input."""

    name: str
    email: str
    address: str = ""

    @staticmethod
    def create(name: str | None, email: str | None, address: str | None = None) -> Customer:
        """Validate and normalize customer details.

        Name is trimmed, email is trimmed and lower-cased, a missing
        address becomes the empty string.
        """
        name = (name or "").strip()
        email = (email or "").strip().lower()
        if not name or not email:
            raise ValidationError("Customer name and email are required")
        return Customer(name=name, email=email, address=(address or "").strip())


@dataclass(frozen=True)
class OrderLineItem:
    """Catalog-derived snapshot of one line at checkout time."""

    product_id: str
    product_name: str
    quantity: Quantity
    unit_price: Money  # as re-fetched from the catalog
    image: str = ""

    @property
    def line_total(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass
class Order:
    """Aggregate root for placed orders.

    Use the ``Order.create()`` factory for new orders; it enforces all
    business rules. The ``__init__`` is intentionally simple so the
    repository can reconstitute persisted orders without re-validating.
    """

    id: str | None
    customer: Customer
    items: list[OrderLineItem]
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(customer: Customer, items: list[OrderLineItem]) -> Order:
        """Create a new pending order, enforcing all invariants."""
        if not items:
            raise ValidationError("Order must contain at least one item")
        return Order(id=None, customer=customer, items=list(items))

    # --- Computed properties --------------------------------------------------

    @property
    def total(self) -> Money:
        """Sum of line totals, rounded half-up to cents."""
        result = Money.zero()
        for item in self.items:
            result = result + item.line_total
        return result.rounded()
