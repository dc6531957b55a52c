"""Application service: Seed Catalog use case.

Replaces the whole catalog in one write, so re-seeding never leaves
duplicates behind.
"""

from __future__ import annotations

from titan.domain.exceptions import ValidationError
from titan.domain.model.product import Product
from titan.domain.repository.product_repository import ProductRepository


class SeedCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, products: list[Product]) -> int:
        seen: set[str] = set()
        for product in products:
            if product.id in seen:
                raise ValidationError(f"Duplicate product id in seed data: {product.id}")
            seen.add(product.id)

        self._product_repo.replace_all(products)
        return len(products)
