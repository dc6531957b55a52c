"""Application service: Add Product use case."""

from __future__ import annotations

from titan.domain.exceptions import ValidationError
from titan.domain.model.product import Product
from titan.domain.model.value_objects import Money
from titan.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        name: str,
        price: str,
        category: str = "",
        image: str = "",
        description: str = "",
        badge: str | None = None,
    ) -> Product:
        """Add a new product to the catalog."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")

        # Auto-assign the next numeric ID; opaque IDs from a seed file are skipped
        numeric_ids = [int(p.id) for p in self._product_repo.list_all() if p.id.isdigit()]
        next_id = str(max(numeric_ids) + 1) if numeric_ids else "1"

        product = Product(
            id=next_id,
            name=name.strip(),
            price=Money.of(price),
            image=image,
            category=category.strip().lower(),
            description=description,
            badge=badge or None,
        )
        self._product_repo.save(product)
        return product
