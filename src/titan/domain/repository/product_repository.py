"""Abstract repository for the Product aggregate (the catalog of record).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter

from titan.domain.model.product import Product

ALL_CATEGORIES = "all"

_SORT_KEYS = {
    "price_asc": (lambda p: p.price.amount, False),
    "price_desc": (lambda p: p.price.amount, True),
    "rating": (lambda p: p.rating, True),
}


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog, in insertion order."""

    @abstractmethod
    def save(self, product: Product) -> None:
        """Persist a new or updated product."""

    @abstractmethod
    def replace_all(self, products: list[Product]) -> None:
        """Drop the whole catalog and store *products* instead."""

    # --- Queries built on list_all() ------------------------------------------

    def search(
        self,
        category: str | None = None,
        search: str | None = None,
        sort: str | None = None,
    ) -> list[Product]:
        """Filter by category and free text, then sort.

        Unknown sort keys keep insertion order.
        """
        products = self.list_all()
        if category and category != ALL_CATEGORIES:
            products = [p for p in products if p.category == category]
        if search:
            products = [p for p in products if p.matches(search)]
        if sort in _SORT_KEYS:
            key, reverse = _SORT_KEYS[sort]
            products = sorted(products, key=key, reverse=reverse)
        return products

    def categories(self) -> list[tuple[str, int]]:
        """Distinct categories with product counts, sorted by name."""
        counts = Counter(p.category for p in self.list_all())
        return sorted(counts.items())
