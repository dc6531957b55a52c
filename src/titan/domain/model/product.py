"""Product aggregate.

Products live in the catalog of record, independently of carts and
orders. Carts hold a copy taken at add-time; orders re-read the catalog
at checkout, so price changes here never reach an existing order.
"""

from __future__ import annotations

from dataclasses import dataclass

from titan.domain.exceptions import ValidationError
from titan.domain.model.value_objects import Money

MAX_RATING = 5.0


@dataclass
class Product:
    """A product in the catalog.

    Kept as a mutable dataclass because price updates are a legitimate
    mutation on the aggregate.
    """

    id: str
    name: str
    price: Money
    image: str = ""
    category: str = ""
    description: str = ""
    rating: float = 0.0
    review_count: int = 0
    badge: str | None = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValidationError("Product id is required")
        if not 0.0 <= self.rating <= MAX_RATING:
            raise ValidationError(
                f"Product rating must be between 0 and {MAX_RATING}, got {self.rating}"
            )
        if self.review_count < 0:
            raise ValidationError("Review count cannot be negative")

    def update_price(self, new_price: Money) -> None:
        """Change the product price.

        Carts that already hold this product keep their stale snapshot;
        the checkout verifier picks up the new price.
        """
        if new_price.amount < 0:
            raise ValidationError("Product price cannot be negative")
        self.price = new_price

    def matches(self, search: str) -> bool:
        """Case-insensitive substring match on name or description."""
        needle = search.lower()
        return needle in self.name.lower() or needle in self.description.lower()
