"""Domain service: Checkout Verification.

Re-prices a client cart against the catalog of record. The client's
cart is only a *request*: product ids and claimed quantities. Prices,
names and images always come from the catalog.

Verification is all-or-nothing (validate-all-then-commit):
  Phase 1: look up every product. Lookups are independent and may run
            concurrently; results are consumed in cart order and the
            first missing product aborts the whole batch.
  Phase 2: build the line items from catalog data only.
Nothing is written here; the caller persists the order once this
returns.
"""

from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import Any

from titan.domain.exceptions import UnknownProductError, ValidationError
from titan.domain.model.order import OrderLineItem
from titan.domain.model.product import Product
from titan.domain.model.value_objects import Quantity
from titan.domain.repository.product_repository import ProductRepository


@dataclass(frozen=True)
class ClaimedLine:
    """What the client says it wants. Quantity is untrusted raw input."""

    product_id: str
    quantity: Any = 1


class CheckoutVerificationService:

    def __init__(self, product_repo: ProductRepository, max_workers: int = 4) -> None:
        self._product_repo = product_repo
        self._max_workers = max(1, max_workers)

    def verify(self, claimed: list[ClaimedLine]) -> list[OrderLineItem]:
        """Return catalog-priced line items for *claimed*.

        Raises ValidationError for an empty list and UnknownProductError
        naming the first product id (in cart order) that is not in the
        catalog.
        """
        if not claimed:
            raise ValidationError("Invalid order payload")

        # Phase 1: look up everything before deciding
        products = self._lookup_all([line.product_id for line in claimed])

        resolved: list[tuple[Product, ClaimedLine]] = []
        for line, product in zip(claimed, products):
            if product is None:
                raise UnknownProductError(line.product_id)
            resolved.append((product, line))

        # Phase 2: build line items from catalog data only
        return [
            OrderLineItem(
                product_id=product.id,
                product_name=product.name,
                quantity=Quantity.normalize(line.quantity),
                unit_price=product.price,
                image=product.image,
            )
            for product, line in resolved
        ]

    def _lookup_all(self, product_ids: list[str]) -> list[Product | None]:
        if self._max_workers == 1 or len(product_ids) == 1:
            return [self._product_repo.get_by_id(pid) for pid in product_ids]

        workers = min(self._max_workers, len(product_ids))
        with ThreadPoolExecutor(max_workers=workers) as pool:
            return list(pool.map(self._product_repo.get_by_id, product_ids))
