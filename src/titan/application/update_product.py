"""Application service: Update Product use case.

A price change never touches carts: they keep the snapshot taken at
add-time and the checkout verifier charges whatever the catalog says
when the order is placed. The drift between the two prices is logged.
"""

from __future__ import annotations

import structlog

from titan.application.dto import PriceChangeDTO
from titan.domain.exceptions import EntityNotFoundError
from titan.domain.model.value_objects import Money
from titan.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: str, new_price: str) -> PriceChangeDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product not found: {product_id}")

        old_price = product.price
        product.update_price(Money.of(new_price))
        self._product_repo.save(product)

        if product.price != old_price:
            logger.info(
                "product_price_changed",
                product_id=product.id,
                old_price=str(old_price.amount),
                new_price=str(product.price.amount),
            )
        return PriceChangeDTO(
            product_id=product.id,
            name=product.name,
            old_price=old_price.amount,
            new_price=product.price.amount,
        )
